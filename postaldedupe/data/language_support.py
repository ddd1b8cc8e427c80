"""
Language resolution for labeled place components.

Proposes a ranked set of candidate languages for one or two toponyms when the
caller supplies none, so that the expander can restrict itself to the right
abbreviation dictionaries.
"""

import logging
import re
from typing import Dict, Iterable, List, Tuple

from ..core.components import ComponentSet, LabeledValue
from .abbreviations import ABBREVIATIONS, DIACRITICS, FUNCTION_WORDS, SUPPORTED_LANGUAGES
from .expander import DictionaryExpander, strip_accents

logger = logging.getLogger(__name__)


class LanguageResolver:
    """Ranks languages by pattern evidence found in component values.

    Scoring (per occurrence):
    - Function word or street-type word: 3
    - Dictionary abbreviation or expansion: 2
    - Language-specific diacritic: 1
    """

    WORD_SCORE = 3
    DICTIONARY_SCORE = 2
    DIACRITIC_SCORE = 1

    def __init__(self, languages: Iterable[str] = SUPPORTED_LANGUAGES):
        self.languages = list(languages)
        self._dictionary_words: Dict[str, set] = {}
        for language in self.languages:
            table = ABBREVIATIONS.get(language, {})
            words = {key for key in table if len(key) > 1}
            for expansions in table.values():
                words.update(expansions)
            self._dictionary_words[language] = words

    def resolve(self, components: Iterable[LabeledValue]) -> Tuple[str, ...]:
        """
        Rank candidate languages for a component set.

        Args:
            components: Labeled components of one or more toponyms

        Returns:
            Languages by descending score; ties keep the order in which each
            language first scored (component order). Empty when nothing is
            recognized.
        """
        scores: Dict[str, int] = {}
        first_seen: Dict[str, Tuple[int, int]] = {}

        for position, component in enumerate(components):
            for rank, (language, score) in enumerate(self._score_text(component.value)):
                if score <= 0:
                    continue
                scores[language] = scores.get(language, 0) + score
                first_seen.setdefault(language, (position, rank))

        ranked = sorted(scores, key=lambda lang: (-scores[lang], first_seen[lang]))
        if ranked:
            logger.debug(f"Resolved languages {ranked} with scores {scores}")
        return tuple(ranked)

    def _score_text(self, text: str) -> List[Tuple[str, int]]:
        lowered = text.lower()
        tokens = strip_accents(DictionaryExpander.normalize(text)).split()

        results = []
        for language in self.languages:
            score = 0
            words = FUNCTION_WORDS.get(language, frozenset())
            dictionary = self._dictionary_words.get(language, set())
            for token in tokens:
                if token in words:
                    score += self.WORD_SCORE
                elif token in dictionary:
                    score += self.DICTIONARY_SCORE

            pattern = DIACRITICS.get(language)
            if pattern:
                score += len(re.findall(pattern, lowered)) * self.DIACRITIC_SCORE

            results.append((language, score))
        return results


_default_resolver = LanguageResolver()


def resolve_languages(*component_sets: ComponentSet) -> Tuple[str, ...]:
    """Convenience function to rank languages over one or more component sets."""
    combined = [component for components in component_sets for component in components]
    return _default_resolver.resolve(combined)
