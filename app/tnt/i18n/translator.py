"""Lookup facade for translated text.

Entry point of the i18n system: resolves source text against the cached
table of the ambient locale or of an explicit language tag.
"""

from typing import List, Optional

from tnt.i18n.cache import TranslationCache
from tnt.i18n.models import TemplateResult, TranslationTable
from tnt.logging import get_module_logger

logger = get_module_logger()


class Translator:
    """Service for translating text with lazily built tables.

    A missing translation is never an error: the source text is returned
    unchanged. Errors raised while building a table propagate.

    Attributes:
        cache: TranslationCache owning the tables.
    """

    def __init__(self, cache: TranslationCache):
        """Initialize Translator.

        Args:
            cache: Cache used to obtain translation tables.
        """
        self.cache = cache

    def get_table(self, language_tag: Optional[str] = None) -> TranslationTable:
        return self.cache.get_table(language_tag)

    def resolve(self, text: str, language_tag: Optional[str] = None) -> str:
        """Translate text.

        Args:
            text: Source text.
            language_tag: Explicit language tag; the ambient locale (with its
                fallback chain) is used when None.

        Returns:
            Translated text, or text itself when no translation exists.

        Raises:
            FileAccessError: If the translations directory cannot be enumerated.
            ParseError: If a translation file is malformed.
        """
        return self.cache.get_table(language_tag).lookup(text)

    def resolve_template(
        self,
        template: TemplateResult,
        language_tag: Optional[str] = None,
    ) -> str:
        """Translate a template skeleton and format it with its arguments.

        Only the skeleton is looked up; argument values are inserted as is.
        If the translated skeleton cannot be formatted with the arguments,
        the original skeleton is used.

        Args:
            template: Skeleton bound to its runtime arguments.
            language_tag: Explicit language tag, or None for the ambient locale.

        Returns:
            Formatted, translated text.

        Raises:
            KeyError, IndexError, ValueError, TypeError, AttributeError: If the
                original skeleton itself cannot be formatted with the arguments.
        """
        table = self.cache.get_table(language_tag)
        skeleton = template.key.text
        translated = table.get(skeleton)
        if translated is None:
            return template.format()

        try:
            return template.format(translated)
        except (KeyError, IndexError, ValueError, TypeError, AttributeError) as e:
            logger.warning(
                "invalid_translated_template",
                template=skeleton,
                translated=translated,
                language_tag=language_tag,
                error=str(e),
            )
            return template.format()

    def has_translation(self, text: str, language_tag: Optional[str] = None) -> bool:
        """Check if a translation exists for text."""
        return text in self.cache.get_table(language_tag)

    def preload(self, language_tag: Optional[str] = None) -> None:
        """Build the table for a slot ahead of the first lookup."""
        table = self.cache.get_table(language_tag)
        logger.info(
            "preloaded_translations",
            language_tag=language_tag,
            entry_count=len(table),
        )

    def get_available_languages(self) -> List[str]:
        """List language tags that have translation files.

        Independent of which tables have been built.
        """
        return self.cache.loader.available_languages()
