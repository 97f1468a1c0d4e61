"""Tests for the term and language modules."""

import dataclasses

import pytest

from termkit.language import Language
from termkit.term import Term


class TestTermParse:
    """Tests for Term.parse."""

    def test_qualified(self):
        """Test parsing value@lang."""
        term = Term.parse("earth@en")
        assert term.string == "earth"
        assert term.language == "en"

    def test_unqualified(self):
        """Test parsing a value without language."""
        term = Term.parse("earth")
        assert term.string == "earth"
        assert term.language is None

    def test_trailing_separator(self):
        """Test a bare trailing @ gives an empty language."""
        term = Term.parse("earth@")
        assert term.string == "earth"
        assert term.language == ""
        assert term != Term("earth")

    def test_splits_at_last_separator(self):
        """Test only the last @ separates the language."""
        term = Term.parse("user@example.org@en")
        assert term.string == "user@example.org"
        assert term.language == "en"

    def test_leading_separator(self):
        """Test "@en" is an empty string in English."""
        assert Term.parse("@en") == Term("", "en")

    def test_none(self):
        """Test parsing None gives an empty term."""
        assert Term.parse(None) == Term("", None)


class TestTerm:
    """Tests for Term values."""

    def test_qualified_form(self):
        """Test rendering the qualified form."""
        assert Term("earth", "en").qualified == "earth@en"
        assert str(Term("earth", "en")) == "earth@en"
        assert Term("earth").qualified == "earth"
        assert Term("earth", "").qualified == "earth@"

    def test_round_trip(self):
        """Test format then parse gives the same term."""
        for term in [Term("earth", "en"), Term("earth"), Term("earth", ""), Term("a@b", "fr")]:
            assert Term.parse(term.qualified) == term

    def test_none_string(self):
        """Test a None string becomes empty."""
        assert Term(None, "en").string == ""

    def test_equality_and_hash(self):
        """Test terms compare by value."""
        assert Term("earth", "en") == Term("earth", "en")
        assert Term("earth", "en") != Term("earth", "fr")
        assert Term("earth", "en") != Term("earth")
        assert len({Term("earth", "en"), Term("earth", "en"), Term("earth")}) == 2

    def test_immutable(self):
        """Test terms cannot be changed."""
        term = Term("earth", "en")
        with pytest.raises(dataclasses.FrozenInstanceError):
            term.language = "fr"

    def test_ordering(self):
        """Test terms sort by language then string."""
        terms = [Term("b", "fr"), Term("a", "fr"), Term("z"), Term("a", "en")]
        assert sorted(terms) == [
            Term("z"),
            Term("a", "en"),
            Term("a", "fr"),
            Term("b", "fr"),
        ]
        assert Term("a", "en") < Term("a", "fr")
        assert Term("b", "en") > Term("a", "en")

    def test_no_language_and_empty_language_sort_together(self):
        """Test Term("a") and Term("a", "") are unequal but sort together."""
        plain, empty = Term("a"), Term("a", "")
        assert plain != empty
        assert not plain < empty
        assert not plain > empty
        assert plain <= empty and empty <= plain
        assert plain >= empty and empty >= plain
        assert sorted([empty, plain]) == [empty, plain]

    def test_language_enum(self):
        """Test catalog lookup of the term language."""
        assert Term("earth", "en").language_enum() is Language.ENGLISH
        assert Term("earth", "xx").language_enum() is None
        assert Term("earth").language_enum() is None


class TestLanguage:
    """Tests for the Language catalog."""

    def test_from_code(self):
        """Test looking up languages by code."""
        assert Language.from_code("en") is Language.ENGLISH
        assert Language.from_code("fr") is Language.FRENCH
        assert Language.from_code("ga") is Language.IRISH

    def test_from_code_unknown(self):
        """Test unknown codes return None."""
        assert Language.from_code("xx") is None
        assert Language.from_code("EN") is None
        assert Language.from_code("") is None
        assert Language.from_code(None) is None

    def test_legacy_codes(self):
        """Test legacy two-letter codes are kept."""
        assert Language.HEBREW.code == "iw"
        assert Language.INDONESIAN.code == "in"
        assert Language.YIDDISH.code == "ji"

    def test_display_name(self):
        """Test English display names."""
        assert Language.ENGLISH.display_name == "English"
        assert Language.RHAETO_ROMANCE.display_name == "Rhaeto Romance"
        assert str(Language.SERBO_CROATIAN) == "Serbo Croatian"

    def test_codes_unique(self):
        """Test every code maps to exactly one language."""
        codes = Language.codes()
        assert len(codes) == len(set(codes)) == len(Language)
        assert all(len(code) == 2 for code in codes)
