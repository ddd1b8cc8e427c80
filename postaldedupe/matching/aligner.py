"""
Toponym aligner: compares two labeled component sets.

Components are aligned by label and compared with the field comparator. The
per-field verdicts are combined by weakest link, so a single mismatched
component (e.g. a different house number) vetoes an otherwise exact match.
"""

import logging
from typing import Dict, List, Optional, Sequence

from ..core.components import ComponentSet, field_type_for_label
from ..core.options import DuplicateOptions, default_options, language_tuple
from ..core.status import DuplicateStatus, aggregate
from ..data.expander import Expander
from ..data.language_support import LanguageResolver
from .comparator import FieldComparator

logger = logging.getLogger(__name__)


class ToponymAligner:
    """Aligns components by label and aggregates per-field statuses."""

    def __init__(
        self,
        comparator: Optional[FieldComparator] = None,
        resolver: Optional[LanguageResolver] = None,
        expander: Optional[Expander] = None,
    ):
        """
        Initialize the aligner.

        Args:
            comparator: Field comparator (built from ``expander`` if None)
            resolver: Language resolver used when no language is supplied
            expander: Expander for the default comparator
        """
        self.comparator = comparator or FieldComparator(expander)
        self.resolver = resolver or LanguageResolver()

    def compare(
        self,
        components1: ComponentSet,
        components2: ComponentSet,
        languages: Sequence[str] = (),
        options: Optional[DuplicateOptions] = None
    ) -> DuplicateStatus:
        """
        Compare two toponyms.

        Args:
            components1: Labeled components of the first toponym
            components2: Labeled components of the second toponym
            languages: Candidate languages; falls back to ``options.languages``
                and then to the language resolver
            options: Policy snapshot (default policy if None)

        Returns:
            Overall DuplicateStatus
        """
        options = options or default_options

        self._require_expander()

        if components1.is_empty() or components2.is_empty():
            return DuplicateStatus.NULL_DUPLICATE_STATUS

        languages = language_tuple(languages) or options.languages
        if not languages:
            languages = self.resolver.resolve(list(components1) + list(components2))

        index1 = components1.index()
        index2 = components2.index()

        contributions: List[Optional[DuplicateStatus]] = []
        details: Dict[str, Optional[DuplicateStatus]] = {}

        for label in self._aligned_labels(components1, components2):
            if label in index1 and label in index2:
                status = self.comparator.compare(
                    field_type_for_label(label),
                    index1[label],
                    index2[label],
                    languages,
                    options,
                )
            elif not index1.get(label, index2.get(label, '')).strip():
                # Blank on one side, absent on the other
                status = None
            elif options.is_required(label):
                status = options.unmatched_required_status
            else:
                status = options.unmatched_optional_status
            details[label] = status
            contributions.append(status)

        result = aggregate(contributions)
        logger.debug(
            f"Toponym comparison {self._describe(details)} -> {result.name}"
        )
        return result

    def _require_expander(self) -> Expander:
        """Expander used for comparisons; raises if setup() has not run.

        Checked before anything else so that a missing setup fails even when
        no label overlaps.
        """
        return self.comparator.expander

    @staticmethod
    def _aligned_labels(components1: ComponentSet, components2: ComponentSet) -> List[str]:
        """Every label of either side, in first-seen order."""
        return list(dict.fromkeys(components1.labels + components2.labels))

    @staticmethod
    def _describe(details: Dict[str, Optional[DuplicateStatus]]) -> str:
        return ', '.join(
            f"{label}={status.name if status is not None else 'ignored'}"
            for label, status in details.items()
        )


_default_aligner = ToponymAligner()


def compare_toponym(
    components1: ComponentSet,
    components2: ComponentSet,
    languages: Sequence[str] = (),
    options: Optional[DuplicateOptions] = None
) -> DuplicateStatus:
    """Compare two toponyms with the process-wide expander."""
    return _default_aligner.compare(components1, components2, languages, options)
