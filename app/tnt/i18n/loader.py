"""Translation loading interface and implementations.

Builds one TranslationTable from the files of an ordered list of language
tags: locate the files, parse each one, then merge most specific first.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Sequence, Tuple

import structlog
from tnt.i18n.exceptions import FileAccessError
from tnt.i18n.locator import TranslationFileLocator
from tnt.i18n.models import TranslationTable
from tnt.i18n.parser import TranslationRecordParser

logger = structlog.get_logger()


def build_table(
    pair_lists: Iterable[Iterable[Tuple[str, str]]],
    language_tags: Sequence[str] = (),
    sources: Sequence[str] = (),
) -> TranslationTable:
    """Merge per-file pair lists into one table.

    Pair lists must be supplied from the most to the least specific file.
    The first value seen for a source text is kept, so more specific
    translations win.

    Args:
        pair_lists: (source, translated) pairs per file.
        language_tags: Tags the pairs were resolved from (informational).
        sources: Files the pairs were read from (informational).

    Returns:
        TranslationTable; empty when no pairs are given.
    """
    table: Dict[str, str] = {}
    shadowed = 0
    for pairs in pair_lists:
        for original, translated in pairs:
            # files are processed from more to less specific, so an existing
            # key was defined by a more specific translation
            if original in table:
                shadowed += 1
                continue
            table[original] = translated

    if shadowed:
        logger.debug("shadowed_translations", count=shadowed)
    return TranslationTable(table, language_tags=tuple(language_tags), sources=tuple(sources))


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations define how the table for an ordered list of language
    tags is produced.
    """

    @abstractmethod
    def load(self, language_tags: Sequence[str]) -> TranslationTable:
        """Build the translation table for language tags.

        Args:
            language_tags: Tags to merge, most specific first.

        Returns:
            TranslationTable with merged translations.

        Raises:
            FileAccessError: If the translation source cannot be enumerated.
            ParseError: If a translation file is malformed.
        """
        pass

    @abstractmethod
    def available_languages(self) -> List[str]:
        """List the language tags that have translations."""
        pass


class FileTranslationLoader(TranslationLoader):
    """Loader for translation files in a content directory.

    Attributes:
        locator: Finds the files for each tag.
        parser: Parses each file into translation pairs.
    """

    def __init__(
        self,
        locator: TranslationFileLocator,
        parser: TranslationRecordParser,
    ):
        self.locator = locator
        self.parser = parser

        logger.info(
            "initialized_file_loader",
            translations_dir=str(locator.base_dir),
            file_patterns=locator.file_patterns,
            accepted_states=sorted(parser.accepted_states),
        )

    def load(self, language_tags: Sequence[str]) -> TranslationTable:
        """Locate, parse and merge the files for language tags.

        Unreadable files are skipped; a malformed file aborts the load.
        """
        language_tags = list(language_tags)
        if not language_tags:
            logger.info("no_languages_to_load")
            return build_table([])

        pair_lists = []
        sources = []
        for tag, files in self.locator.locate(language_tags):
            for path in files:
                try:
                    pairs = self.parser.parse_file(path)
                except FileAccessError as e:
                    logger.warning(
                        "translation_file_unreadable", tag=tag, file=str(path), error=str(e)
                    )
                    continue
                pair_lists.append(pairs)
                sources.append(str(path))

        table = build_table(pair_lists, language_tags=language_tags, sources=sources)
        logger.info(
            "loaded_translations",
            language_tags=language_tags,
            file_count=len(sources),
            entry_count=len(table),
        )
        return table

    def available_languages(self) -> List[str]:
        return self.locator.available_languages()
