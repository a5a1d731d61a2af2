"""Tests for tnt.i18n.loader module."""

from unittest.mock import patch

import pytest

from tnt.i18n import (
    FileAccessError,
    FileTranslationLoader,
    ParseError,
    TranslationFileLocator,
    TranslationRecordParser,
    build_table,
)
from tests.factories.i18n import write_records_file


class TestBuildTable:
    """Tests for build_table()."""

    def test_empty_input(self):
        """No pair lists yield an empty table."""
        assert len(build_table([])) == 0

    def test_first_value_wins(self):
        """The most specific (first) value is kept for each source."""
        table = build_table([[("Bye", "A")], [("Bye", "B"), ("Hi", "C")]])
        assert table["Bye"] == "A"
        assert table["Hi"] == "C"

    def test_first_value_wins_within_file(self):
        """Duplicates inside one file keep their first value too."""
        table = build_table([[("Bye", "A"), ("Bye", "B")]])
        assert dict(table) == {"Bye": "A"}

    def test_metadata(self):
        """Tags and sources are recorded on the table."""
        table = build_table([[("a", "b")]], language_tags=["fr-CA", "fr"], sources=["x.json"])
        assert table.language_tags == ("fr-CA", "fr")
        assert table.sources == ("x.json",)


class TestFileTranslationLoader:
    """Tests for FileTranslationLoader."""

    def test_load_merges_most_specific_first(self, file_loader):
        """fr-CA overrides fr; fr fills in the rest."""
        table = file_loader.load(["fr-CA", "fr"])
        assert table["Goodbye"] == "Salut"
        assert table["Hello"] == "Bonjour"
        assert table["Save"] == "Enregistrer"

    def test_load_excludes_unaccepted_states(self, file_loader):
        """Records in the "new" state never reach the table."""
        table = file_loader.load(["fr-CA", "fr"])
        assert "Delete" not in table
        assert table["Hello"] != "Allô"

    def test_load_empty_specific_file(self, file_loader):
        """An empty en-US file falls through to en."""
        table = file_loader.load(["en-US", "en"])
        assert table["Hello"] == "Bonjour"

    def test_load_wildcard_files_in_path_order(self, file_loader):
        """menu.es.yml sorts before zz.es.yml and wins for shared keys."""
        table = file_loader.load(["es"])
        assert table["Hello"] == "Hola"
        assert table["Save"] == "Guardar"

    def test_load_legacy_pairs(self, file_loader):
        """Legacy pair files are loaded."""
        assert file_loader.load(["de"])["Save"] == "Speichern"

    def test_load_no_tags(self, file_loader):
        """Loading no tags gives an empty table without touching the disk."""
        with patch.object(file_loader.locator, "locate") as locate:
            table = file_loader.load([])
        assert len(table) == 0
        locate.assert_not_called()

    def test_load_records_sources(self, file_loader, content_dir):
        """The table lists the files it was built from."""
        table = file_loader.load(["fr-CA", "fr"])
        assert table.sources == (
            str(content_dir / "translation-fr-CA.json"),
            str(content_dir / "translation-fr.json"),
        )
        assert table.language_tags == ("fr-CA", "fr")

    def test_load_parse_error_aborts(self, tmp_path):
        """A malformed file fails the whole load."""
        write_records_file(tmp_path, "fr", [("final", "Hello", "Bonjour")])
        (tmp_path / "translation-fr-CA.json").write_text("{broken", encoding="utf-8")
        loader = FileTranslationLoader(
            TranslationFileLocator(tmp_path), TranslationRecordParser()
        )
        with pytest.raises(ParseError):
            loader.load(["fr-CA", "fr"])

    def test_load_unreadable_file_skipped(self, file_loader, content_dir):
        """Files that cannot be read are treated as absent."""
        original = file_loader.parser.parse_file

        def flaky(path, fmt=None):
            if path.name == "translation-fr-CA.json":
                raise FileAccessError("permission denied", path)
            return original(path, fmt)

        with patch.object(file_loader.parser, "parse_file", side_effect=flaky):
            table = file_loader.load(["fr-CA", "fr"])
        assert table["Goodbye"] == "Au revoir"

    def test_load_missing_directory_raises(self, tmp_path):
        """A missing content directory is an error for the load."""
        loader = FileTranslationLoader(
            TranslationFileLocator(tmp_path / "missing"), TranslationRecordParser()
        )
        with pytest.raises(FileAccessError):
            loader.load(["fr"])

    def test_load_unlistable_directory_raises(self, file_loader):
        """An unlistable content directory fails the load instead of yielding an empty table."""
        with patch(
            "tnt.i18n.locator.os.scandir", side_effect=PermissionError("Permission denied")
        ):
            with pytest.raises(FileAccessError):
                file_loader.load(["fr"])

    def test_available_languages(self, file_loader):
        """available_languages() delegates to the locator."""
        assert "fr-CA" in file_loader.available_languages()
