"""Errors raised while building translation tables."""

from pathlib import Path
from typing import Optional, Union


class TranslationError(Exception):
    """Base class for translation loading errors."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class FileAccessError(TranslationError):
    """Raised when a translation directory or file cannot be read."""

    pass


class ParseError(TranslationError):
    """Raised when a translation file's content is malformed."""

    pass
