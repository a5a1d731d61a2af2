"""Configuration module - public API.

Centralized configuration for tnt using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    TranslationSettings: Translation file settings class (for testing)

Example:
    ```python
    from tnt.configuration import settings

    patterns = settings.i18n.FILE_PATTERNS
    states = settings.i18n.ACCEPTED_STATES
    ```
"""

from tnt.configuration.settings import Settings, settings
from tnt.configuration.translations import TranslationSettings

__all__ = ["Settings", "TranslationSettings", "settings"]
