"""Locale resolution logic for translation lookups.

Expands a locale into its fallback chain and detects the ambient UI locale
of the process.
"""

import locale as _locale
import os
from typing import List, Mapping, Optional, Union

import structlog

from tnt.configuration import settings
from tnt.i18n.models import ROOT, LanguageTag

logger = structlog.get_logger().bind(component="i18n.resolver")

# Checked in the same order gettext uses for message catalogs.
LOCALE_ENV_VARS = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")


def fallback_chain(locale: Union[str, LanguageTag]) -> List[str]:
    """Get languages from more specific to less specific.

    The root tag is never part of the chain.

    Args:
        locale: Locale tag (e.g. "en-US") or LanguageTag.

    Returns:
        Tag names, e.g. ["en-US", "en"] for "en-US"; [] for the root.
    """
    tag = locale if isinstance(locale, LanguageTag) else LanguageTag.parse(locale)
    return [ancestor.value for ancestor in tag.ancestors()]


def _parse_or_none(value: Optional[str]) -> Optional[LanguageTag]:
    if not value:
        return None
    try:
        return LanguageTag.parse(value)
    except ValueError:
        logger.warning("invalid_locale_string", locale_str=value)
        return None


def detect_ui_locale(
    environ: Optional[Mapping[str, str]] = None,
    override: Optional[str] = None,
) -> LanguageTag:
    """Detect the process UI locale.

    Resolution order:
    1. Explicit override (defaults to the TNT_UI_LOCALE setting)
    2. LANGUAGE (first entry), LC_ALL, LC_MESSAGES, LANG
    3. locale.getlocale()
    4. Root tag

    Args:
        environ: Environment mapping (default: os.environ).
        override: Locale that wins over the environment.

    Returns:
        Detected LanguageTag, possibly the root.
    """
    environ = os.environ if environ is None else environ
    override = settings.i18n.UI_LOCALE if override is None else override

    tag = _parse_or_none(override)
    if tag is not None:
        logger.info("resolved_ui_locale", locale=tag.value, source="override")
        return tag

    for name in LOCALE_ENV_VARS:
        raw = environ.get(name, "")
        if name == "LANGUAGE":
            raw = raw.split(":", 1)[0]
        tag = _parse_or_none(raw)
        if tag is not None:
            logger.info("resolved_ui_locale", locale=tag.value, source=name)
            return tag

    try:
        language_code = _locale.getlocale()[0]
    except ValueError:
        language_code = None
    tag = _parse_or_none(language_code)
    if tag is not None:
        logger.info("resolved_ui_locale", locale=tag.value, source="locale")
        return tag

    logger.info("no_ui_locale_detected")
    return ROOT


class LocaleResolver:
    """Resolves the ambient locale used for default-slot lookups.

    Attributes:
        default_locale: Locale used when nothing can be detected.
    """

    def __init__(self, default_locale: Optional[Union[str, LanguageTag]] = None):
        """Initialize locale resolver.

        Args:
            default_locale: Fallback locale when detection yields the root
                (default: the TNT_DEFAULT_LOCALE setting).
        """
        if default_locale is None:
            default_locale = settings.i18n.DEFAULT_LOCALE
        if isinstance(default_locale, str):
            default_locale = LanguageTag.parse(default_locale)
        self.default_locale = default_locale or ROOT
        self.log = logger.bind(default_locale=self.default_locale.value)

    def resolve_ui_locale(
        self, environ: Optional[Mapping[str, str]] = None
    ) -> LanguageTag:
        """Detect the UI locale, falling back to the default locale."""
        detected = detect_ui_locale(environ)
        if detected.is_root:
            self.log.debug("using_default_locale")
            return self.default_locale
        return detected
