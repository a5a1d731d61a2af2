"""Feature-level fixtures for i18n system tests.

Provides translation content directories and loader/cache fixtures for
fallback, merge and caching scenarios.
"""

import pytest

from tnt.i18n import (
    FileTranslationLoader,
    TranslationCache,
    TranslationFileLocator,
    TranslationRecordParser,
    Translator,
)
from tests.factories.i18n import (
    make_pairs_document,
    write_records_file,
    write_translation_file,
)


@pytest.fixture
def content_dir(tmp_path):
    """Create a content directory with sample translation files.

    Returns a directory structure like:
    - translation-fr.json       (records)
    - translation-fr-CA.json    (records, overrides some fr entries)
    - translation-en.json       (records)
    - translation-en-US.json    (records, empty)
    - de.tnt                    (legacy pairs)
    - menu.es.yml, zz.es.yml    (records, YAML)
    """
    directory = tmp_path / ".tnt-content"
    directory.mkdir()

    write_records_file(
        directory,
        "fr",
        [
            ("final", "Hello", "Bonjour"),
            ("final", "Goodbye", "Au revoir"),
            ("needsReview", "Save", "Enregistrer"),
            ("new", "Delete", "Supprimer"),
            ("final", "{0} files copied", "{0} fichiers copiés"),
            ("final", "Hello {name}", "Bonjour {name}"),
        ],
    )
    write_records_file(
        directory,
        "fr-CA",
        [
            ("final", "Goodbye", "Salut"),
            ("new", "Hello", "Allô"),
        ],
    )
    write_records_file(directory, "en", [("final", "Hello", "Bonjour")])
    write_records_file(directory, "en-US", [])
    write_translation_file(
        directory, "de.tnt", make_pairs_document([("Hello", "Hallo"), ("Save", "Speichern")])
    )
    write_records_file(directory, "es", [("final", "Hello", "Hola")], pattern="menu.{tag}.yml")
    write_records_file(
        directory,
        "es",
        [("final", "Hello", "Buenas"), ("final", "Save", "Guardar")],
        pattern="zz.{tag}.yml",
    )
    return directory


@pytest.fixture
def locator(content_dir):
    """Create TranslationFileLocator for the sample content directory."""
    return TranslationFileLocator(content_dir)


@pytest.fixture
def parser():
    """Create TranslationRecordParser with the default accepted states."""
    return TranslationRecordParser()


@pytest.fixture
def file_loader(locator, parser):
    """Create FileTranslationLoader over the sample content directory."""
    return FileTranslationLoader(locator, parser)


@pytest.fixture
def make_translator(file_loader):
    """Build an independent Translator for a given ambient locale."""

    def _make(locale="fr-CA"):
        cache = TranslationCache(file_loader, locale_provider=lambda: locale)
        return Translator(cache)

    return _make
