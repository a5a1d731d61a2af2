"""Translation file discovery.

Finds the translation files that exist for a list of language tags, and
enumerates the tags that have files at all.
"""

import os
import re
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

import structlog

from tnt.configuration.translations import DEFAULT_FILE_PATTERNS
from tnt.i18n.exceptions import FileAccessError

logger = structlog.get_logger()

CONTENT_DIR_NAME = ".tnt-content"
_TAG_GROUP = r"(?P<tag>[A-Za-z0-9]+(?:-[A-Za-z0-9]+)*)"


def default_content_dir() -> Path:
    """Locate the content directory next to the running program.

    Returns:
        ``<program dir>/.tnt-content``; the current directory is used when
        the program location is unknown (interactive sessions).
    """
    main_file = getattr(sys.modules.get("__main__"), "__file__", None)
    program = main_file or (sys.argv[0] if sys.argv and sys.argv[0] else None)
    if program:
        return Path(program).resolve().parent / CONTENT_DIR_NAME
    return Path.cwd() / CONTENT_DIR_NAME


def _pattern_to_regex(pattern: str) -> "re.Pattern[str]":
    """Turn a file pattern like "*.{tag}.yml" into a regex capturing the tag."""
    parts = []
    for chunk in re.split(r"(\{tag\}|\*|\?)", pattern):
        if chunk == "{tag}":
            parts.append(_TAG_GROUP)
        elif chunk == "*":
            parts.append(".*")
        elif chunk == "?":
            parts.append(".")
        else:
            parts.append(re.escape(chunk))
    return re.compile("".join(parts) + r"\Z")


class TranslationFileLocator:
    """Finds translation files in a content directory.

    Patterns are glob patterns embedding ``{tag}`` and are tried in order,
    so newer naming conventions can be listed ahead of older ones.

    Attributes:
        base_dir: Directory containing translation files.
        file_patterns: File name patterns, in lookup order.
    """

    def __init__(
        self,
        base_dir: Path,
        file_patterns: Optional[Sequence[str]] = None,
    ):
        self.base_dir = Path(base_dir)
        self.file_patterns = list(file_patterns or DEFAULT_FILE_PATTERNS)
        self._matchers = [_pattern_to_regex(p) for p in self.file_patterns]

    def _ensure_base_dir(self) -> None:
        if not self.base_dir.is_dir():
            logger.error("translations_dir_not_found", translations_dir=str(self.base_dir))
            raise FileAccessError(
                f"Translations directory not found: {self.base_dir}", self.base_dir
            )
        # glob() hides listing errors, so open the directory once here
        try:
            with os.scandir(self.base_dir):
                pass
        except OSError as e:
            logger.error(
                "translations_dir_unreadable",
                translations_dir=str(self.base_dir),
                error=str(e),
            )
            raise FileAccessError(
                f"Cannot list translations directory {self.base_dir}: {e}",
                self.base_dir,
            ) from e

    def locate(self, tags: Iterable[str]) -> List[Tuple[str, List[Path]]]:
        """Find the files for each tag, keeping the order of tags.

        Within a tag, files come pattern by pattern; the matches of one
        pattern are sorted by path.

        Args:
            tags: Language tags, most specific first.

        Returns:
            (tag, files) pairs for the tags that have at least one file.

        Raises:
            FileAccessError: If the base directory cannot be enumerated.
        """
        self._ensure_base_dir()
        found = []
        for tag in tags:
            files: List[Path] = []
            for pattern in self.file_patterns:
                try:
                    matches = sorted(self.base_dir.glob(pattern.format(tag=tag)))
                except OSError as e:
                    raise FileAccessError(
                        f"Cannot list translations directory {self.base_dir}: {e}",
                        self.base_dir,
                    ) from e
                files.extend(
                    path for path in matches if path.is_file() and path not in files
                )
            if files:
                found.append((tag, files))
            else:
                logger.debug("no_translation_files_for_tag", tag=tag)
        return found

    def available_languages(self) -> List[str]:
        """List tags that have a translation file in the base directory.

        Returns:
            Sorted unique language tags.

        Raises:
            FileAccessError: If the base directory cannot be enumerated.
        """
        self._ensure_base_dir()
        try:
            names = [path.name for path in self.base_dir.iterdir() if path.is_file()]
        except OSError as e:
            raise FileAccessError(
                f"Cannot list translations directory {self.base_dir}: {e}",
                self.base_dir,
            ) from e

        tags = set()
        for name in names:
            for matcher in self._matchers:
                match = matcher.match(name)
                if match:
                    tags.add(match.group("tag"))
                    break
        return sorted(tags)
