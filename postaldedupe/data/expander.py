"""
Expansion of address strings into canonical forms.

The expander folds case, transliterates accented characters and expands
language-specific abbreviations, producing every equivalent canonical form
of a string ("Main St" -> {"main st", "main street", "main saint"}).

Dictionaries are process-wide resources with an explicit lifecycle:
``setup()`` must complete before any comparison runs and ``teardown()`` must
not race with in-flight comparisons. After setup the expander is read-only
and safe for concurrent use.
"""

import itertools
import json
import logging
import re
import unicodedata
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol, Sequence, Set

from ..core.errors import ExpanderSetupError, UninitializedDependencyError
from .abbreviations import ABBREVIATIONS, SUFFIX_ABBREVIATIONS, SUPPORTED_LANGUAGES

logger = logging.getLogger(__name__)


class Expander(Protocol):
    """Anything that maps a string to its set of canonical forms."""

    def expand(self, text: str, languages: Sequence[str] = ()) -> Set[str]:
        ...


def strip_accents(text: str) -> str:
    """Transliterate accented Latin characters to their base letters."""
    decomposed = unicodedata.normalize('NFKD', text)
    stripped = ''.join(c for c in decomposed if not unicodedata.combining(c))
    return unicodedata.normalize('NFC', stripped)


class DictionaryExpander:
    """Rule-based expander driven by per-language abbreviation dictionaries."""

    # Upper bound on forms produced for one string
    MAX_FORMS = 64

    def __init__(
        self,
        abbreviations: Optional[Dict[str, Dict[str, List[str]]]] = None,
        suffixes: Optional[Dict[str, Dict[str, str]]] = None,
    ):
        """
        Initialize the expander.

        Args:
            abbreviations: language -> {abbreviation: [expansions]}; defaults to
                the built-in tables
            suffixes: language -> {abbreviated ending: expanded ending}
        """
        source = ABBREVIATIONS if abbreviations is None else abbreviations
        suffix_source = SUFFIX_ABBREVIATIONS if suffixes is None else suffixes

        self.abbreviations: Dict[str, Dict[str, List[str]]] = {}
        self.suffixes: Dict[str, Dict[str, str]] = {}

        for language, table in source.items():
            for abbreviation, expansions in table.items():
                self.add_abbreviation(language, abbreviation, expansions)

        for language, table in suffix_source.items():
            for ending, expansion in table.items():
                self.add_suffix(language, ending, expansion)

    @property
    def languages(self) -> List[str]:
        """Languages with at least one dictionary, built-in ones first."""
        known = [lang for lang in SUPPORTED_LANGUAGES if lang in self.abbreviations]
        extra = sorted(lang for lang in self.abbreviations if lang not in known)
        return known + extra

    def add_abbreviation(self, language: str, abbreviation: str, expansions: Iterable[str]):
        """Register expansions for an abbreviation in one language."""
        key = self._key(abbreviation)
        if not key:
            return
        table = self.abbreviations.setdefault(language.lower(), {})
        current = table.setdefault(key, [])
        for expansion in expansions:
            normalized = self._key(expansion)
            if normalized and normalized not in current:
                current.append(normalized)

    def add_suffix(self, language: str, ending: str, expansion: str):
        """Register an abbreviated word ending for one language."""
        self.suffixes.setdefault(language.lower(), {})[self._key(ending)] = self._key(expansion)

    @staticmethod
    def normalize(text: str) -> str:
        """
        Basic normalization applied before expansion.

        Folds case, drops periods and apostrophes ("St." -> "st",
        "O'Brien" -> "obrien") and turns every other separator into a space.
        """
        text = unicodedata.normalize('NFKC', text).casefold()
        text = re.sub(r"[.'’`]", '', text)
        text = re.sub(r'[\W_]+', ' ', text)
        return ' '.join(text.split())

    def expand(self, text: str, languages: Sequence[str] = ()) -> Set[str]:
        """
        Expand a string into its canonical forms.

        Args:
            text: Raw value
            languages: Candidate languages in preference order; empty means
                every dictionary is consulted

        Returns:
            Set of canonical forms (empty if nothing remains after normalization)
        """
        normalized = self.normalize(text)
        if not normalized:
            return set()

        tables = self._tables_for(languages)
        forms: Set[str] = set()

        for variant in dict.fromkeys([normalized, strip_accents(normalized)]):
            alternatives = [self._token_alternatives(token, tables) for token in variant.split()]
            for combination in itertools.islice(itertools.product(*alternatives), self.MAX_FORMS):
                forms.add(' '.join(combination))

        return forms

    def _tables_for(self, languages: Sequence[str]) -> List[str]:
        if not languages:
            return self.languages
        selected = []
        for language in languages:
            language = language.lower()
            if language not in selected and (language in self.abbreviations or language in self.suffixes):
                selected.append(language)
        return selected

    def _token_alternatives(self, token: str, languages: List[str]) -> List[str]:
        key = strip_accents(token)
        alternatives = [token]

        for language in languages:
            for expansion in self.abbreviations.get(language, {}).get(key, []):
                if expansion not in alternatives:
                    alternatives.append(expansion)

            for ending, expansion in self.suffixes.get(language, {}).items():
                if key.endswith(ending) and len(key) > len(ending) + 2:
                    expanded = key[:-len(ending)] + expansion
                    if expanded not in alternatives:
                        alternatives.append(expanded)

        return alternatives

    @classmethod
    def _key(cls, text: str) -> str:
        return strip_accents(cls.normalize(text))

    def save(self, filepath: Path):
        """Save the dictionaries to a JSON file."""
        data = {
            'abbreviations': self.abbreviations,
            'suffixes': self.suffixes,
        }
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def load(self, filepath: Path):
        """Merge dictionaries from a JSON file written by ``save``."""
        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError("dictionary file must contain a JSON object")

        for language, table in data.get('abbreviations', {}).items():
            for abbreviation, expansions in table.items():
                if isinstance(expansions, str):
                    expansions = [expansions]
                self.add_abbreviation(language, abbreviation, expansions)

        for language, table in data.get('suffixes', {}).items():
            for ending, expansion in table.items():
                self.add_suffix(language, ending, expansion)


# Process-wide expander, created by setup()
_expander: Optional[DictionaryExpander] = None


def setup(data_file: Optional[Path] = None) -> DictionaryExpander:
    """
    Initialize the process-wide expander.

    Idempotent: a second call returns the existing instance. Call
    ``teardown()`` first to reload with different dictionaries.

    Args:
        data_file: Optional JSON dictionary file merged over the built-in tables

    Returns:
        The initialized expander

    Raises:
        ExpanderSetupError: If the dictionary file is missing or malformed
    """
    global _expander
    if _expander is not None:
        return _expander

    expander = DictionaryExpander()
    if data_file is not None:
        try:
            expander.load(Path(data_file))
        except (OSError, ValueError, AttributeError, TypeError) as e:
            raise ExpanderSetupError(f"Error loading expander dictionaries from {data_file}: {e}") from e
        logger.info(f"Loaded expander dictionaries from {data_file}")

    _expander = expander
    logger.info(f"Expander initialized with languages: {', '.join(expander.languages)}")
    return _expander


def teardown() -> None:
    """Release the process-wide expander."""
    global _expander
    if _expander is not None:
        logger.info("Expander torn down")
    _expander = None


def is_initialized() -> bool:
    return _expander is not None


def get_expander() -> DictionaryExpander:
    """
    Get the process-wide expander.

    Raises:
        UninitializedDependencyError: If ``setup()`` has not been called
    """
    if _expander is None:
        raise UninitializedDependencyError(
            "Expander is not initialized; call postaldedupe.setup() first"
        )
    return _expander
