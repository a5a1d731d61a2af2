"""Factory functions for creating i18n components.

Provides the process-wide default Translator and the short helpers used
at call sites:

    from tnt import t, tf

    title = t("Settings")
    greeting = tf("Hello {name}", name=user.name)
    label = t("Save", "fr")
"""

import threading
from pathlib import Path
from typing import Any, Callable, Iterable, List, Optional, Union

import structlog
from tnt.configuration import settings
from tnt.i18n.cache import TranslationCache
from tnt.i18n.loader import FileTranslationLoader
from tnt.i18n.locator import TranslationFileLocator, default_content_dir
from tnt.i18n.models import LanguageTag, TemplateResult
from tnt.i18n.parser import TranslationRecordParser
from tnt.i18n.translator import Translator

logger = structlog.get_logger()

# Singleton translator instance
_translator_instance: Optional[Translator] = None
_translator_lock = threading.Lock()


def create_translator(
    content_dir: Optional[Path] = None,
    file_patterns: Optional[Iterable[str]] = None,
    accepted_states: Optional[Iterable[str]] = None,
    locale_provider: Optional[Callable[[], Union[str, LanguageTag]]] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Unset arguments come from settings.i18n; without a configured content
    directory, ``.tnt-content`` next to the running program is used.

    Args:
        content_dir: Directory with translation files.
        file_patterns: File name patterns containing ``{tag}``, tried in order.
        accepted_states: Record states that are served.
        locale_provider: Returns the ambient UI locale (default: the detected
            locale, else TNT_DEFAULT_LOCALE; see LocaleResolver).

    Returns:
        Translator: Configured translator; no file is read until first use.

    Usage:
        translator = create_translator()
        translator = create_translator(content_dir=Path("/opt/app/.tnt-content"))
        translator = create_translator(locale_provider=lambda: "de-CH")
    """
    i18n_settings = settings.i18n
    if content_dir is None:
        content_dir = i18n_settings.CONTENT_DIR or default_content_dir()
    if file_patterns is None:
        file_patterns = i18n_settings.FILE_PATTERNS
    if accepted_states is None:
        accepted_states = i18n_settings.ACCEPTED_STATES

    locator = TranslationFileLocator(Path(content_dir), list(file_patterns))
    parser = TranslationRecordParser(accepted_states)
    loader = FileTranslationLoader(locator, parser)
    cache = TranslationCache(loader, locale_provider=locale_provider)

    logger.info("translator_created_lazy", translations_dir=str(content_dir))
    return Translator(cache)


def get_translator() -> Translator:
    """Get the process-wide Translator, creating it on first use."""
    global _translator_instance

    if _translator_instance is not None:
        return _translator_instance

    with _translator_lock:
        if _translator_instance is None:
            _translator_instance = create_translator()
        return _translator_instance


def reset_translator(translator: Optional[Translator] = None) -> None:
    """Replace the process-wide Translator (for testing only).

    Args:
        translator: Instance to install; None discards the current one so
            the next call to get_translator() creates a fresh instance.
    """
    global _translator_instance
    with _translator_lock:
        _translator_instance = translator
    logger.debug("reset_translator_singleton")


def t(text: str, language_tag: Optional[str] = None) -> str:
    """Translate text with the process-wide Translator."""
    return get_translator().resolve(text, language_tag)


def tf(skeleton: str, *args: Any, **kwargs: Any) -> str:
    """Translate a format skeleton for the ambient locale and fill it in.

    Example:
        tf("{0} files copied", count) -> "3 fichiers copiés"
    """
    return get_translator().resolve_template(TemplateResult.create(skeleton, *args, **kwargs))


def available_languages() -> List[str]:
    """List language tags that have translation files."""
    return get_translator().get_available_languages()
