"""
Duplicate classification engine.

This module compares single address fields and whole toponyms, producing a
graded DuplicateStatus rather than a boolean.
"""

from .comparator import FieldComparator, classify_similarity, compare_field
from .aligner import ToponymAligner, compare_toponym

__all__ = [
    'FieldComparator',
    'ToponymAligner',
    'classify_similarity',
    'compare_field',
    'compare_toponym',
]
