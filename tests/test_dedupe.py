"""Tests for the flat duplicate-check entry points."""

import logging

import pytest

import postaldedupe
from postaldedupe import (
    EXACT_DUPLICATE,
    LIKELY_DUPLICATE,
    NON_DUPLICATE,
    NULL_DUPLICATE_STATUS,
    POSSIBLE_DUPLICATE_NEEDS_REVIEW,
    DuplicateOptions,
    InvalidInputError,
    UninitializedDependencyError,
)

FIELD_CHECKS = [
    postaldedupe.is_name_duplicate,
    postaldedupe.is_street_duplicate,
    postaldedupe.is_house_number_duplicate,
    postaldedupe.is_po_box_duplicate,
    postaldedupe.is_unit_duplicate,
    postaldedupe.is_floor_duplicate,
    postaldedupe.is_postal_code_duplicate,
]


class TestConstants:
    """Tests for exported status constants."""

    def test_codes(self):
        """Test the integer codes of the exported constants."""
        assert NULL_DUPLICATE_STATUS == 0
        assert NON_DUPLICATE == 1
        assert POSSIBLE_DUPLICATE_NEEDS_REVIEW == 2
        assert LIKELY_DUPLICATE == 3
        assert EXACT_DUPLICATE == 4

    def test_results_are_ints(self):
        """Test that results compare equal to the plain codes."""
        result = postaldedupe.is_house_number_duplicate("12", "12")
        assert isinstance(result, int)
        assert result == 4


class TestFieldChecks:
    """Tests for the per-field entry points."""

    @pytest.mark.parametrize("check", FIELD_CHECKS)
    def test_identical_is_exact(self, check):
        """Test that every field check is reflexive."""
        assert check("221B", "221B") == EXACT_DUPLICATE

    @pytest.mark.parametrize("check", FIELD_CHECKS)
    def test_empty_is_null(self, check):
        """Test that every field check returns NULL for empty input."""
        assert check("", "221B") == NULL_DUPLICATE_STATUS

    @pytest.mark.parametrize("check", FIELD_CHECKS)
    def test_non_string_rejected(self, check):
        """Test that non-string values raise a ValueError subclass."""
        with pytest.raises(ValueError):
            check(None, "221B")

    def test_postal_code_zip_plus_four(self):
        """Test that ZIP and ZIP+4 are likely duplicates."""
        assert postaldedupe.is_postal_code_duplicate("10001", "10001-0001") == LIKELY_DUPLICATE

    def test_house_number_separator(self):
        """Test that a separator inside a house number is ignored."""
        assert postaldedupe.is_house_number_duplicate("22-1", "221") == EXACT_DUPLICATE

    def test_street_with_language(self):
        """Test a language-restricted street comparison."""
        result = postaldedupe.is_street_duplicate("Av. da Liberdade", "Avenida da Liberdade", ['pt'])
        assert result == EXACT_DUPLICATE

    def test_language_as_string(self):
        """Test that a bare string names one language."""
        result = postaldedupe.is_street_duplicate("Hauptstr.", "Hauptstraße", languages="de")
        assert result == EXACT_DUPLICATE

    def test_blank_languages_ignored(self):
        """Test that blank language entries are skipped."""
        result = postaldedupe.is_street_duplicate("Main St", "Main Street", languages=["", "  "])
        assert result == EXACT_DUPLICATE

    def test_long_language_tag_truncated(self, caplog):
        """Test that over-long language tags are truncated with a warning."""
        with caplog.at_level(logging.WARNING, logger='postaldedupe.dedupe'):
            result = postaldedupe.is_house_number_duplicate("No. 12", "12", languages=["english"])
        assert result == EXACT_DUPLICATE
        assert "truncating" in caplog.text

    @pytest.mark.parametrize("languages", [42, ["en", 7], {"en": 1}])
    def test_invalid_languages(self, languages):
        """Test that malformed language arguments are rejected."""
        with pytest.raises(InvalidInputError):
            postaldedupe.is_name_duplicate("Paris", "Paris", languages)

    def test_options_are_used(self):
        """Test that a caller policy changes the verdict."""
        options = DuplicateOptions(phonetic_names=False)
        assert postaldedupe.is_name_duplicate("Smith", "Smyth") == LIKELY_DUPLICATE
        assert postaldedupe.is_name_duplicate("Smith", "Smyth", options=options) == POSSIBLE_DUPLICATE_NEEDS_REVIEW

    def test_uninitialized(self):
        """Test that checks fail before setup."""
        postaldedupe.teardown()
        assert not postaldedupe.is_initialized()
        with pytest.raises(UninitializedDependencyError):
            postaldedupe.is_name_duplicate("Paris", "Paris")


class TestToponymDuplicate:
    """Tests for is_toponym_duplicate."""

    def test_house_number_mismatch(self):
        """Test that a different house number makes places non-duplicates."""
        result = postaldedupe.is_toponym_duplicate(
            ["name", "house_number"], ["Springfield", "12"],
            ["name", "house_number"], ["Springfield", "45"],
        )
        assert result == NON_DUPLICATE

    def test_exact_match(self):
        """Test matching toponyms with abbreviations and aliases."""
        result = postaldedupe.is_toponym_duplicate(
            ["house_number", "street"], ["12", "Main St"],
            ["road", "house_number"], ["Main Street", "12"],
            languages=["en"],
        )
        assert result == EXACT_DUPLICATE

    def test_tuples_accepted(self):
        """Test that any sequence of strings is accepted."""
        result = postaldedupe.is_toponym_duplicate(
            ("road", "house_number"), ("Main Street", "12"),
            ("road", "house_number"), ("Main Street", "12"),
        )
        assert result == EXACT_DUPLICATE

    def test_length_mismatch(self):
        """Test that labels and values must have equal length."""
        with pytest.raises(InvalidInputError, match="equal length"):
            postaldedupe.is_toponym_duplicate(
                ["road", "house_number"], ["Main Street"],
                ["road"], ["Main Street"],
            )

    def test_length_mismatch_is_value_error(self):
        """Test that input errors are ValueErrors."""
        with pytest.raises(ValueError):
            postaldedupe.is_toponym_duplicate(["road"], [], ["road"], ["Main Street"])

    def test_non_string_element(self):
        """Test that non-string labels are rejected."""
        with pytest.raises(InvalidInputError):
            postaldedupe.is_toponym_duplicate([1], ["x"], ["road"], ["Main Street"])

    def test_empty_toponyms(self):
        """Test that empty toponyms give NULL."""
        assert postaldedupe.is_toponym_duplicate([], [], [], []) == NULL_DUPLICATE_STATUS


class TestPlaceLanguages:
    """Tests for place_languages."""

    def test_french_place(self):
        """Test languages guessed for a French street."""
        assert postaldedupe.place_languages(["road"], ["Rue de la Paix"]) == ['fr', 'es', 'it']

    def test_unknown_place(self):
        """Test that an unrecognized place gives an empty list."""
        assert postaldedupe.place_languages(["city"], ["Springfield"]) == []

    def test_length_mismatch(self):
        """Test that labels and values must have equal length."""
        with pytest.raises(InvalidInputError):
            postaldedupe.place_languages(["road", "city"], ["Rue de la Paix"])

    def test_does_not_need_expander(self):
        """Test that language guessing works before setup."""
        postaldedupe.teardown()
        assert postaldedupe.place_languages(["road"], ["Calle Mayor"])[0] == 'es'
