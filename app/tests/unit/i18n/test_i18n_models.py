"""Tests for tnt.i18n.models module."""

import pytest

from tnt.i18n import LanguageTag, RecordState, TemplateKey, TemplateResult, TranslationRecord
from tnt.i18n.models import DEFAULT_ACCEPTED_STATES, ROOT
from tests.factories.i18n import make_template, make_translation_table


class TestLanguageTag:
    """Tests for LanguageTag."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("en-US", "en-US"),
            ("en_US", "en-US"),
            ("EN-us", "en-US"),
            ("de_DE.UTF-8", "de-DE"),
            ("ca_ES@valencia", "ca-ES"),
            ("zh-hant-tw", "zh-Hant-TW"),
            ("es-419", "es-419"),
            ("fr", "fr"),
        ],
    )
    def test_parse_canonicalizes(self, raw, expected):
        """parse() normalizes separators, suffixes and case."""
        assert LanguageTag.parse(raw).value == expected

    @pytest.mark.parametrize("raw", ["", "C", "POSIX", "C.UTF-8", "und"])
    def test_parse_root_aliases(self, raw):
        """parse() maps invariant locale names to the root tag."""
        assert LanguageTag.parse(raw).is_root

    @pytest.mark.parametrize("raw", ["en US", "123", "en--US", "verylonglanguage"])
    def test_parse_invalid_raises(self, raw):
        """parse() raises ValueError for malformed tags."""
        with pytest.raises(ValueError):
            LanguageTag.parse(raw)

    def test_parent_chain(self):
        """parent drops the last subtag until the root."""
        tag = LanguageTag.parse("zh-Hant-TW")
        assert tag.parent.value == "zh-Hant"
        assert tag.parent.parent.value == "zh"
        assert tag.parent.parent.parent is ROOT
        assert ROOT.parent is ROOT

    def test_ancestors_exclude_root(self):
        """ancestors() yields the tag and its parents, never the root."""
        assert [t.value for t in LanguageTag.parse("en-US").ancestors()] == ["en-US", "en"]
        assert list(ROOT.ancestors()) == []

    def test_language(self):
        """language returns the primary subtag."""
        assert LanguageTag.parse("pt-BR").language == "pt"

    def test_tags_are_hashable(self):
        """Equal tags hash equally."""
        assert {LanguageTag.parse("en_us"), LanguageTag.parse("en-US")} == {
            LanguageTag("en-US")
        }


class TestTranslationRecord:
    """Tests for TranslationRecord."""

    def test_is_usable(self):
        """is_usable() checks the state against accepted states."""
        accepted = {RecordState.FINAL.value, RecordState.NEEDS_REVIEW.value}
        assert TranslationRecord("final", "a", "b").is_usable(accepted)
        assert TranslationRecord("needsReview", "a", "b").is_usable(accepted)
        assert not TranslationRecord("new", "a", "b").is_usable(accepted)

    def test_default_accepted_states(self):
        """Reviewed states are served by default; new records are not."""
        assert DEFAULT_ACCEPTED_STATES == {"needsReview", "final"}
        assert TranslationRecord(RecordState.FINAL.value, "a", "b").is_usable(
            DEFAULT_ACCEPTED_STATES
        )
        assert not TranslationRecord(RecordState.NEW.value, "a", "b").is_usable(
            DEFAULT_ACCEPTED_STATES
        )


class TestTranslationTable:
    """Tests for TranslationTable."""

    def test_lookup_returns_translation(self):
        """lookup() returns the translated text for known keys."""
        table = make_translation_table()
        assert table.lookup("Hello") == "Bonjour"

    def test_lookup_missing_returns_text(self):
        """lookup() returns the input unchanged for unknown keys."""
        table = make_translation_table()
        assert table.lookup("Unknown") == "Unknown"

    def test_mapping_interface(self):
        """TranslationTable behaves as a read-only mapping."""
        table = make_translation_table()
        assert len(table) == 2
        assert "Hello" in table
        assert dict(table) == {"Hello": "Bonjour", "Goodbye": "Au revoir"}
        with pytest.raises(TypeError):
            table["Hello"] = "Salut"

    def test_entries_copied_on_construction(self):
        """Mutating the source dict does not change the table."""
        entries = {"Hello": "Bonjour"}
        table = make_translation_table(entries)
        entries["Hello"] = "Salut"
        assert table["Hello"] == "Bonjour"

    def test_language_tags_recorded(self):
        """The table keeps the tags it was resolved from."""
        assert make_translation_table().language_tags == ("fr-FR", "fr")


class TestTemplateResult:
    """Tests for TemplateKey and TemplateResult."""

    def test_key_is_skeleton(self):
        """The key is the skeleton text, independent of arguments."""
        first = make_template("Hello {name}", name="Ada")
        second = make_template("Hello {name}", name="Grace")
        assert first.key == second.key == TemplateKey("Hello {name}")

    def test_format_original(self):
        """format() renders the original skeleton by default."""
        assert make_template().format() == "Hello Ada"
        assert str(make_template("{0} + {1}", 1, 2)) == "1 + 2"

    def test_format_other_skeleton(self):
        """format() renders a given skeleton with the bound arguments."""
        template = TemplateResult.create("{0} files copied", 3)
        assert template.format("{0} fichiers copiés") == "3 fichiers copiés"

    def test_format_missing_argument_raises(self):
        """format() raises when the skeleton references unbound arguments."""
        with pytest.raises(KeyError):
            make_template().format("Bonjour {nom}")
