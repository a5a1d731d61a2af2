"""tnt - runtime text translation resolver."""

from tnt.i18n import (
    FileAccessError,
    ParseError,
    TranslationError,
    Translator,
    available_languages,
    create_translator,
    get_translator,
    reset_translator,
    t,
    tf,
)

__version__ = "0.1.0"

__all__ = [
    "FileAccessError",
    "ParseError",
    "TranslationError",
    "Translator",
    "available_languages",
    "create_translator",
    "get_translator",
    "reset_translator",
    "t",
    "tf",
]
