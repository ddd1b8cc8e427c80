"""Tests for the dictionary expander and its lifecycle."""

import json

import pytest

import postaldedupe
from postaldedupe.core.errors import ExpanderSetupError, UninitializedDependencyError
from postaldedupe.data.expander import (
    DictionaryExpander,
    get_expander,
    is_initialized,
    setup,
    strip_accents,
    teardown,
)


class TestNormalization:
    """Tests for basic normalization."""

    def test_case_and_punctuation(self):
        """Test case folding and separator handling."""
        assert DictionaryExpander.normalize("  MAIN   St.  ") == "main st"
        assert DictionaryExpander.normalize("22-1") == "22 1"
        assert DictionaryExpander.normalize("O'Brien") == "obrien"

    def test_eszett_folds(self):
        """Test that German sharp s folds to ss."""
        assert DictionaryExpander.normalize("Straße") == "strasse"

    def test_strip_accents(self):
        """Test transliteration of accented characters."""
        assert strip_accents("café") == "cafe"
        assert strip_accents("São Paulo") == "Sao Paulo"


class TestDictionaryExpander:
    """Tests for DictionaryExpander.expand."""

    def test_abbreviation_keeps_original(self):
        """Test that an abbreviation expands while staying a valid form."""
        forms = DictionaryExpander().expand("Main St", ['en'])
        assert forms == {"main st", "main street", "main saint"}

    def test_language_restricts_dictionaries(self):
        """Test that only the requested languages are consulted."""
        expander = DictionaryExpander()
        assert "main sankt" not in expander.expand("Main St", ['en'])
        assert "main sankt" in expander.expand("Main St")

    def test_unknown_language_basic_forms_only(self):
        """Test that an unknown language yields only normalized forms."""
        assert DictionaryExpander().expand("Main St", ['xx']) == {"main st"}

    def test_accented_and_ascii_forms(self):
        """Test that accented text yields a transliterated form."""
        forms = DictionaryExpander().expand("Café", ['en'])
        assert forms == {"café", "cafe"}

    def test_german_suffix(self):
        """Test abbreviated compound street names."""
        forms = DictionaryExpander().expand("Hauptstr.", ['de'])
        assert "hauptstrasse" in forms
        assert "hauptstr" in forms

    def test_empty_input(self):
        """Test that nothing remains from empty or punctuation-only input."""
        expander = DictionaryExpander()
        assert expander.expand("") == set()
        assert expander.expand(" .. ") == set()

    def test_forms_are_capped(self):
        """Test that combinatorial expansion is bounded."""
        forms = DictionaryExpander().expand("St St St St St St St")
        assert 0 < len(forms) <= DictionaryExpander.MAX_FORMS

    def test_deterministic(self):
        """Test that identical input yields identical output."""
        expander = DictionaryExpander()
        assert expander.expand("Av. da Liberdade", ['pt']) == expander.expand("Av. da Liberdade", ['pt'])

    def test_custom_dictionaries(self):
        """Test building an expander from explicit tables."""
        expander = DictionaryExpander(abbreviations={'en': {'Mtn': ['Mountain']}}, suffixes={})
        assert expander.languages == ['en']
        assert expander.expand("Mtn View") == {"mtn view", "mountain view"}

    def test_save_and_load(self, tmp_path):
        """Test that saved dictionaries can be merged into another expander."""
        source = DictionaryExpander(abbreviations={'nl': {'str': ['straat']}}, suffixes={})
        path = tmp_path / "dictionaries.json"
        source.save(path)

        target = DictionaryExpander(abbreviations={}, suffixes={})
        target.load(path)
        assert "straat" in target.expand("str", ['nl'])


class TestLifecycle:
    """Tests for the process-wide expander lifecycle."""

    def test_setup_is_idempotent(self, expander):
        """Test that a second setup returns the same instance."""
        assert setup() is expander
        assert get_expander() is expander
        assert is_initialized()

    def test_teardown(self):
        """Test that teardown releases the expander."""
        teardown()
        assert not is_initialized()
        with pytest.raises(UninitializedDependencyError):
            get_expander()

    def test_teardown_twice(self):
        """Test that teardown is safe to repeat."""
        teardown()
        teardown()
        assert not postaldedupe.is_initialized()

    def test_setup_with_data_file(self, tmp_path):
        """Test merging a dictionary file during setup."""
        path = tmp_path / "extra.json"
        path.write_text(json.dumps({'abbreviations': {'en': {'mtn': ['mountain']}}}), encoding='utf-8')

        teardown()
        expander = setup(path)
        assert "mountain view" in expander.expand("Mtn View", ['en'])
        assert "main street" in expander.expand("Main St", ['en'])

    def test_setup_missing_file(self, tmp_path):
        """Test that a missing dictionary file fails setup."""
        teardown()
        with pytest.raises(ExpanderSetupError):
            setup(tmp_path / "missing.json")
        assert not is_initialized()

    def test_setup_malformed_file(self, tmp_path):
        """Test that a malformed dictionary file fails setup."""
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding='utf-8')
        teardown()
        with pytest.raises(ExpanderSetupError):
            setup(path)
