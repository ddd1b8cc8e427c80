"""
Flat duplicate-check entry points.

One function per field type, one for toponyms and one for language
inference. Each duplicate check accepts two values (or two parallel
label/value sequences for toponyms), an optional language list and optional
DuplicateOptions, and returns a DuplicateStatus, which is an ``int`` carrying
one of the stable codes exported below.
"""

import logging
from typing import List, Optional, Sequence, Union

from .core.components import ComponentSet, FieldType
from .core.errors import InvalidInputError
from .core.options import MAX_LANGUAGE_LEN, DuplicateOptions, default_options
from .core.status import DuplicateStatus
from .data.language_support import resolve_languages
from .matching.aligner import compare_toponym
from .matching.comparator import compare_field

logger = logging.getLogger(__name__)

NULL_DUPLICATE_STATUS = DuplicateStatus.NULL_DUPLICATE_STATUS
NON_DUPLICATE = DuplicateStatus.NON_DUPLICATE
POSSIBLE_DUPLICATE_NEEDS_REVIEW = DuplicateStatus.POSSIBLE_DUPLICATE_NEEDS_REVIEW
LIKELY_DUPLICATE = DuplicateStatus.LIKELY_DUPLICATE
EXACT_DUPLICATE = DuplicateStatus.EXACT_DUPLICATE

Languages = Optional[Union[str, Sequence[str]]]


def place_languages(labels: Sequence[str], values: Sequence[str]) -> List[str]:
    """
    Guess the languages of a labeled place.

    Args:
        labels: Component labels
        values: Component values, same length as ``labels``

    Returns:
        Language codes by descending confidence (empty if unknown)
    """
    components = ComponentSet.from_sequences(labels, values)
    return list(resolve_languages(components))


def is_name_duplicate(value1: str, value2: str, languages: Languages = None,
                      options: Optional[DuplicateOptions] = None) -> DuplicateStatus:
    """is_name_duplicate(value1, value2, languages=None)"""
    return _is_duplicate(FieldType.NAME, value1, value2, languages, options)


def is_street_duplicate(value1: str, value2: str, languages: Languages = None,
                        options: Optional[DuplicateOptions] = None) -> DuplicateStatus:
    """is_street_duplicate(value1, value2, languages=None)"""
    return _is_duplicate(FieldType.STREET, value1, value2, languages, options)


def is_house_number_duplicate(value1: str, value2: str, languages: Languages = None,
                              options: Optional[DuplicateOptions] = None) -> DuplicateStatus:
    """is_house_number_duplicate(value1, value2, languages=None)"""
    return _is_duplicate(FieldType.HOUSE_NUMBER, value1, value2, languages, options)


def is_po_box_duplicate(value1: str, value2: str, languages: Languages = None,
                        options: Optional[DuplicateOptions] = None) -> DuplicateStatus:
    """is_po_box_duplicate(value1, value2, languages=None)"""
    return _is_duplicate(FieldType.PO_BOX, value1, value2, languages, options)


def is_unit_duplicate(value1: str, value2: str, languages: Languages = None,
                      options: Optional[DuplicateOptions] = None) -> DuplicateStatus:
    """is_unit_duplicate(value1, value2, languages=None)"""
    return _is_duplicate(FieldType.UNIT, value1, value2, languages, options)


def is_floor_duplicate(value1: str, value2: str, languages: Languages = None,
                       options: Optional[DuplicateOptions] = None) -> DuplicateStatus:
    """is_floor_duplicate(value1, value2, languages=None)"""
    return _is_duplicate(FieldType.FLOOR, value1, value2, languages, options)


def is_postal_code_duplicate(value1: str, value2: str, languages: Languages = None,
                             options: Optional[DuplicateOptions] = None) -> DuplicateStatus:
    """is_postal_code_duplicate(value1, value2, languages=None)"""
    return _is_duplicate(FieldType.POSTAL_CODE, value1, value2, languages, options)


def is_toponym_duplicate(
    labels1: Sequence[str],
    values1: Sequence[str],
    labels2: Sequence[str],
    values2: Sequence[str],
    languages: Languages = None,
    options: Optional[DuplicateOptions] = None
) -> DuplicateStatus:
    """
    Compare two toponyms given as parallel label/value sequences.

    Args:
        labels1: Labels of the first toponym
        values1: Values of the first toponym
        labels2: Labels of the second toponym
        values2: Values of the second toponym
        languages: Optional language code or list of codes
        options: Optional policy (default policy if None)

    Returns:
        DuplicateStatus

    Raises:
        InvalidInputError: If labels and values differ in length, a label
            repeats or an element is not a string
    """
    components1 = ComponentSet.from_sequences(labels1, values1)
    components2 = ComponentSet.from_sequences(labels2, values2)
    options = _with_languages(options, languages)
    return compare_toponym(components1, components2, options=options)


def _is_duplicate(
    field_type: FieldType,
    value1: str,
    value2: str,
    languages: Languages,
    options: Optional[DuplicateOptions]
) -> DuplicateStatus:
    options = _with_languages(options, languages)
    return compare_field(field_type, value1, value2, options=options)


def _with_languages(options: Optional[DuplicateOptions], languages: Languages) -> DuplicateOptions:
    """Fold a caller language list into an options snapshot."""
    options = options or default_options
    if languages is None:
        return options

    if isinstance(languages, str):
        languages = [languages]
    elif not isinstance(languages, Sequence):
        raise InvalidInputError("languages must be a string or a sequence of strings")

    tags = []
    for language in languages:
        if not isinstance(language, str):
            raise InvalidInputError(
                f"languages must contain only strings, got {type(language).__name__}"
            )
        language = language.strip()
        if not language:
            continue
        if len(language) > MAX_LANGUAGE_LEN:
            logger.warning(
                f"Language tag {language!r} longer than {MAX_LANGUAGE_LEN} characters, truncating"
            )
            language = language[:MAX_LANGUAGE_LEN]
        tags.append(language)

    if not tags:
        return options
    return options.with_languages(tuple(tags))
