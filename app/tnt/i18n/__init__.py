"""i18n system - runtime text translation.

Resolves source text to its translation for the ambient UI locale or an
explicit language tag, reading translation files lazily and caching the
merged tables for the life of the process.

Main components:
- models: LanguageTag, TranslationRecord, TranslationTable, TemplateKey, TemplateResult
- resolvers: fallback_chain, detect_ui_locale and LocaleResolver
- locator: TranslationFileLocator for finding translation files
- parser: TranslationRecordParser for records and legacy pair files
- loader: build_table and FileTranslationLoader
- cache: TranslationCache with build-once slots
- translator: Translator lookup facade
- factory: create_translator and the process-wide t()/tf() helpers
"""

from tnt.i18n.cache import TranslationCache
from tnt.i18n.exceptions import FileAccessError, ParseError, TranslationError
from tnt.i18n.factory import (
    available_languages,
    create_translator,
    get_translator,
    reset_translator,
    t,
    tf,
)
from tnt.i18n.loader import FileTranslationLoader, TranslationLoader, build_table
from tnt.i18n.locator import TranslationFileLocator, default_content_dir
from tnt.i18n.models import (
    LanguageTag,
    RecordState,
    TemplateKey,
    TemplateResult,
    TranslationRecord,
    TranslationTable,
)
from tnt.i18n.parser import TranslationFormat, TranslationRecordParser
from tnt.i18n.resolvers import LocaleResolver, detect_ui_locale, fallback_chain
from tnt.i18n.translator import Translator

__all__ = [
    "LanguageTag",
    "RecordState",
    "TranslationRecord",
    "TranslationTable",
    "TemplateKey",
    "TemplateResult",
    "TranslationError",
    "FileAccessError",
    "ParseError",
    "fallback_chain",
    "detect_ui_locale",
    "LocaleResolver",
    "TranslationFileLocator",
    "default_content_dir",
    "TranslationFormat",
    "TranslationRecordParser",
    "TranslationLoader",
    "FileTranslationLoader",
    "build_table",
    "TranslationCache",
    "Translator",
    "create_translator",
    "get_translator",
    "reset_translator",
    "t",
    "tf",
    "available_languages",
]
