"""Build-once cache of translation tables.

One slot holds the table for the ambient UI locale; every explicit
language tag ever requested gets a slot of its own. A slot is built at
most once: concurrent callers wait for the build in progress and share
its outcome. A failed build is reported to everyone waiting on it and the
slot stays empty, so the next call builds again.
"""

import threading
from typing import Callable, Dict, Optional, Union

from tnt.i18n.loader import TranslationLoader
from tnt.i18n.models import LanguageTag, TranslationTable
from tnt.i18n.resolvers import LocaleResolver, fallback_chain
from tnt.logging import get_module_logger

logger = get_module_logger()

DEFAULT_SLOT = ""


class _PendingBuild:
    """A build in progress that other callers can wait on."""

    def __init__(self):
        self._done = threading.Event()
        self.table: Optional[TranslationTable] = None
        self.error: Optional[BaseException] = None

    def finish(
        self,
        table: Optional[TranslationTable] = None,
        error: Optional[BaseException] = None,
    ) -> None:
        self.table = table
        self.error = error
        self._done.set()

    def wait(self) -> TranslationTable:
        self._done.wait()
        if self.error is not None:
            raise self.error
        return self.table


class TranslationCache:
    """Thread-safe lazy cache of TranslationTables.

    Args:
        loader: Builds a table for an ordered list of language tags.
        locale_provider: Returns the ambient UI locale; called once, on the
            first build of the default slot.
    """

    def __init__(
        self,
        loader: TranslationLoader,
        locale_provider: Optional[Callable[[], Union[str, LanguageTag]]] = None,
    ):
        self.loader = loader
        self.locale_provider = locale_provider or LocaleResolver().resolve_ui_locale
        self._tables: Dict[str, TranslationTable] = {}
        self._pending: Dict[str, _PendingBuild] = {}
        self._lock = threading.Lock()
        self._build_count = 0
        self._locale: Optional[LanguageTag] = None

    @property
    def build_count(self) -> int:
        """Number of successful table builds."""
        return self._build_count

    @property
    def default_locale(self) -> Optional[LanguageTag]:
        """Ambient locale of the default slot, None until it was built."""
        if DEFAULT_SLOT not in self._tables:
            return None
        return self._locale

    def is_ready(self, language_tag: Optional[str] = None) -> bool:
        return self._slot_key(language_tag) in self._tables

    def get_table(self, language_tag: Optional[str] = None) -> TranslationTable:
        """Return the table for a slot, building it on first use.

        Args:
            language_tag: Explicit language tag, or None for the ambient locale.

        Returns:
            The slot's TranslationTable.

        Raises:
            ValueError: If language_tag is not a valid tag.
            FileAccessError: If the translations directory cannot be enumerated.
            ParseError: If a translation file of the slot is malformed.
        """
        key = self._slot_key(language_tag)

        table = self._tables.get(key)
        if table is not None:
            return table

        with self._lock:
            table = self._tables.get(key)
            if table is not None:
                return table
            pending = self._pending.get(key)
            is_builder = pending is None
            if is_builder:
                pending = _PendingBuild()
                self._pending[key] = pending

        if not is_builder:
            logger.debug("waiting_for_translation_build", slot=key or "default")
            return pending.wait()

        try:
            table = self._build(key)
        except BaseException as e:
            with self._lock:
                del self._pending[key]
            pending.finish(error=e)
            logger.error("translation_build_failed", slot=key or "default", error=str(e))
            raise

        with self._lock:
            self._tables[key] = table
            del self._pending[key]
            self._build_count += 1
        pending.finish(table=table)
        return table

    def _slot_key(self, language_tag: Optional[str]) -> str:
        if language_tag is None:
            return DEFAULT_SLOT
        tag = LanguageTag.parse(language_tag)
        if tag.is_root:
            raise ValueError(f"Explicit language tag required, got: {language_tag!r}")
        return tag.value

    def _ambient_locale(self) -> LanguageTag:
        # read once; a retried default build reuses it
        if self._locale is None:
            locale = self.locale_provider()
            if not isinstance(locale, LanguageTag):
                locale = LanguageTag.parse(locale)
            self._locale = locale
        return self._locale

    def _build(self, key: str) -> TranslationTable:
        if key == DEFAULT_SLOT:
            tags = fallback_chain(self._ambient_locale())
        else:
            # explicit tags use their own files only
            tags = [key]

        table = self.loader.load(tags)
        logger.info(
            "translation_table_built",
            slot=key or "default",
            language_tags=tags,
            entry_count=len(table),
        )
        return table
