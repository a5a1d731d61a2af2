"""Translation resolution settings."""

from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator

from tnt.configuration.base import TntSettings

DEFAULT_FILE_PATTERNS = ["translation-{tag}.json", "{tag}.tnt", "*.{tag}.yml"]


class TranslationSettings(TntSettings):
    """Where translation files live and which records are served.

    Environment Variables:
        TNT_CONTENT_DIR: Directory scanned for translation files
            (default: ``.tnt-content`` next to the running program)
        TNT_FILE_PATTERNS: JSON list of file name patterns containing ``{tag}``,
            tried in order (default: translation-{tag}.json, {tag}.tnt, *.{tag}.yml)
        TNT_ACCEPTED_STATES: JSON list of record states that are served
            (default: the parser's needsReview and final states)
        TNT_UI_LOCALE: Overrides the locale detected from the environment
        TNT_DEFAULT_LOCALE: Locale used when none can be detected

    Example:
        ```python
        from tnt.configuration import settings

        patterns = settings.i18n.FILE_PATTERNS
        ```
    """

    CONTENT_DIR: Optional[Path] = Field(default=None, alias="TNT_CONTENT_DIR")
    FILE_PATTERNS: List[str] = Field(
        default_factory=lambda: list(DEFAULT_FILE_PATTERNS),
        alias="TNT_FILE_PATTERNS",
    )
    ACCEPTED_STATES: Optional[List[str]] = Field(
        default=None, alias="TNT_ACCEPTED_STATES"
    )
    UI_LOCALE: Optional[str] = Field(default=None, alias="TNT_UI_LOCALE")
    DEFAULT_LOCALE: Optional[str] = Field(default=None, alias="TNT_DEFAULT_LOCALE")

    @field_validator("FILE_PATTERNS")
    @classmethod
    def _patterns_embed_tag(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("At least one translation file pattern is required")
        for pattern in value:
            if pattern.count("{tag}") != 1:
                raise ValueError(
                    f"File pattern must contain '{{tag}}' exactly once: {pattern}"
                )
        return value
