"""
Field comparator: classifies two values of one field type.

Each field type is handled by a comparison strategy that decides how canonical
forms are reduced and scored:
- Free text (names, streets): token-set overlap plus edit distance
- Numeric fields (house numbers, units, floors, PO boxes, postal codes):
  designator-free alphanumeric tokens compared by edit distance
"""

import logging
import re
from itertools import product
from typing import Dict, List, Optional, Sequence, Set

import phonetics
from rapidfuzz import fuzz
from rapidfuzz.distance import Levenshtein

from ..core.components import FieldType
from ..core.errors import InvalidInputError
from ..core.options import DuplicateOptions, FieldThresholds, default_options, language_tuple
from ..core.status import DuplicateStatus
from ..data.abbreviations import DESIGNATORS, FLOOR_WORDS, ORDINAL_SUFFIX_PATTERN
from ..data.expander import Expander, get_expander, strip_accents

logger = logging.getLogger(__name__)


def classify_similarity(similarity: float, thresholds: FieldThresholds) -> DuplicateStatus:
    """
    Map a similarity in [0, 1] onto a status.

    Scoring:
    - below ``review``: NON_DUPLICATE
    - ``review`` up to ``likely``: POSSIBLE_DUPLICATE_NEEDS_REVIEW
    - ``likely`` and above: LIKELY_DUPLICATE
    """
    if similarity >= thresholds.likely:
        return DuplicateStatus.LIKELY_DUPLICATE
    if similarity >= thresholds.review:
        return DuplicateStatus.POSSIBLE_DUPLICATE_NEEDS_REVIEW
    return DuplicateStatus.NON_DUPLICATE


class FieldStrategy:
    """Base comparison strategy for one field type."""

    def __init__(self, field_type: FieldType):
        self.field_type = field_type

    def match_status(self, forms1: Set[str], forms2: Set[str]) -> Optional[DuplicateStatus]:
        """Status decided by field-specific rules, or None to fall back to similarity."""
        return None

    def similarity(
        self,
        forms1: Set[str],
        forms2: Set[str],
        thresholds: FieldThresholds,
        options: DuplicateOptions
    ) -> float:
        raise NotImplementedError


class FreeTextStrategy(FieldStrategy):
    """Token-set overlap plus edit distance, best pair of forms wins."""

    def similarity(self, forms1, forms2, thresholds, options) -> float:
        best = 0.0
        for form1, form2 in product(forms1, forms2):
            score = (fuzz.token_set_ratio(form1, form2) + fuzz.ratio(form1, form2)) / 200.0
            best = max(best, score)
        return best


class NameStrategy(FreeTextStrategy):
    """Free text comparison with a Metaphone check for spelling variants."""

    def similarity(self, forms1, forms2, thresholds, options) -> float:
        score = super().similarity(forms1, forms2, thresholds, options)
        if options.phonetic_names and score < thresholds.likely:
            keys1 = {self.phonetic_key(form) for form in forms1} - {''}
            keys2 = {self.phonetic_key(form) for form in forms2} - {''}
            if keys1 & keys2:
                logger.debug(f"Phonetic match on {sorted(keys1 & keys2)}")
                score = max(score, thresholds.likely)
        return score

    @staticmethod
    def phonetic_key(form: str) -> str:
        """Metaphone key of every alphabetic word in a form."""
        words = [w for w in strip_accents(form).split() if w.isascii() and w.isalpha()]
        return ' '.join(phonetics.metaphone(w) for w in words)


class NumericStrategy(FieldStrategy):
    """Identifier-like fields reduced to alphanumeric tokens.

    Designator words for the field ("apt", "no", "po box", ...) are dropped
    from the front of the value and separators removed, so "Apt 4-B", "#4B"
    and "4 b" all reduce to "4b". A designator after the number is kept
    ("12 N" stays "12n").
    """

    def __init__(self, field_type: FieldType):
        super().__init__(field_type)
        self.designators = DESIGNATORS.get(field_type.value, frozenset())

    def words(self, form: str) -> List[str]:
        words = [self.map_word(strip_accents(w)) for w in form.split()]
        start = 0
        while start < len(words) and words[start] in self.designators:
            start += 1
        return words[start:] or words

    def map_word(self, word: str) -> str:
        return word

    def tokens(self, forms: Set[str]) -> Set[str]:
        result = set()
        for form in forms:
            token = re.sub(r'[\W_]+', '', ''.join(self.words(form)))
            if token:
                result.add(token)
        return result

    def match_status(self, forms1, forms2) -> Optional[DuplicateStatus]:
        if self.tokens(forms1) & self.tokens(forms2):
            return DuplicateStatus.EXACT_DUPLICATE
        return None

    def similarity(self, forms1, forms2, thresholds, options) -> float:
        best = 0.0
        for token1, token2 in product(self.tokens(forms1), self.tokens(forms2)):
            best = max(best, Levenshtein.normalized_similarity(token1, token2))
        return best


class FloorStrategy(NumericStrategy):
    """Floors also accept ordinals and named floors ("3rd", "ground")."""

    ORDINAL = re.compile(ORDINAL_SUFFIX_PATTERN)

    def words(self, form: str) -> List[str]:
        # Floor designators also follow the number ("3rd floor", "2e etage")
        words = [self.map_word(strip_accents(w)) for w in form.split()]
        kept = [w for w in words if w not in self.designators]
        return kept or words

    def map_word(self, word: str) -> str:
        if word in FLOOR_WORDS:
            return FLOOR_WORDS[word]
        match = self.ORDINAL.match(word)
        if match:
            return match.group(1)
        return word


class PostalCodeStrategy(NumericStrategy):
    """Postal codes with refinement: a code matching the leading segment of
    the other (ZIP+4, outward code only) is a likely duplicate."""

    def match_status(self, forms1, forms2) -> Optional[DuplicateStatus]:
        status = super().match_status(forms1, forms2)
        if status is not None:
            return status
        if self._refines(forms1, forms2) or self._refines(forms2, forms1):
            return DuplicateStatus.LIKELY_DUPLICATE
        return None

    def _refines(self, short_forms: Set[str], long_forms: Set[str]) -> bool:
        short_tokens = self.tokens(short_forms)
        for form in long_forms:
            segments = self.words(form)
            if len(segments) > 1 and segments[0] in short_tokens:
                return True
        return False


STRATEGIES: Dict[FieldType, FieldStrategy] = {
    FieldType.NAME: NameStrategy(FieldType.NAME),
    FieldType.STREET: FreeTextStrategy(FieldType.STREET),
    FieldType.HOUSE_NUMBER: NumericStrategy(FieldType.HOUSE_NUMBER),
    FieldType.PO_BOX: NumericStrategy(FieldType.PO_BOX),
    FieldType.UNIT: NumericStrategy(FieldType.UNIT),
    FieldType.FLOOR: FloorStrategy(FieldType.FLOOR),
    FieldType.POSTAL_CODE: PostalCodeStrategy(FieldType.POSTAL_CODE),
}


class FieldComparator:
    """
    Classifies two raw values of the same field type.

    Decision order:
    1. Empty value on either side: NULL_DUPLICATE_STATUS
    2. Identical trimmed text: EXACT_DUPLICATE
    3. Shared canonical form: EXACT_DUPLICATE
    4. Field rules (numeric tokens, postal refinement)
    5. Best fuzzy similarity against the field's thresholds
    """

    def __init__(self, expander: Optional[Expander] = None):
        """
        Initialize the comparator.

        Args:
            expander: Expander to use; defaults to the process-wide expander
                looked up on every call
        """
        self._expander = expander

    @property
    def expander(self) -> Expander:
        if self._expander is not None:
            return self._expander
        return get_expander()

    def compare(
        self,
        field_type: FieldType,
        value1: str,
        value2: str,
        languages: Sequence[str] = (),
        options: Optional[DuplicateOptions] = None
    ) -> DuplicateStatus:
        """
        Compare two values of one field type.

        Args:
            field_type: Field type of both values
            value1: First raw value
            value2: Second raw value
            languages: Candidate languages; falls back to ``options.languages``
            options: Policy snapshot (default policy if None)

        Returns:
            DuplicateStatus

        Raises:
            InvalidInputError: If a value is not a string
            UninitializedDependencyError: If no expander is available
        """
        expander = self.expander
        options = options or default_options

        if not isinstance(value1, str) or not isinstance(value2, str):
            raise InvalidInputError("Values to compare must be strings")

        value1 = value1.strip()
        value2 = value2.strip()
        if not value1 or not value2:
            return DuplicateStatus.NULL_DUPLICATE_STATUS

        if value1 == value2:
            return DuplicateStatus.EXACT_DUPLICATE

        languages = language_tuple(languages) or options.languages
        forms1 = expander.expand(value1, languages)
        forms2 = expander.expand(value2, languages)
        if not forms1 or not forms2:
            return DuplicateStatus.NULL_DUPLICATE_STATUS

        if forms1 & forms2:
            return DuplicateStatus.EXACT_DUPLICATE

        strategy = STRATEGIES[field_type]
        status = strategy.match_status(forms1, forms2)
        if status is not None:
            logger.debug(f"{field_type.value}: {value1!r} vs {value2!r} decided by field rules: {status.name}")
            return status

        thresholds = options.thresholds_for(field_type)
        similarity = strategy.similarity(forms1, forms2, thresholds, options)
        status = classify_similarity(similarity, thresholds)
        logger.debug(f"{field_type.value}: {value1!r} vs {value2!r} similarity {similarity:.3f} -> {status.name}")
        return status


_default_comparator = FieldComparator()


def compare_field(
    field_type: FieldType,
    value1: str,
    value2: str,
    languages: Sequence[str] = (),
    options: Optional[DuplicateOptions] = None
) -> DuplicateStatus:
    """Compare two values with the process-wide expander."""
    return _default_comparator.compare(field_type, value1, value2, languages, options)
