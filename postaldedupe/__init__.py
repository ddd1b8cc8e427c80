"""postaldedupe - Graded duplicate detection for names, address fields and toponyms."""

__version__ = "0.1.0"

from .core.status import DuplicateStatus
from .core.components import ComponentSet, FieldType, LabeledValue
from .core.options import DuplicateOptions, FieldThresholds
from .core.errors import (
    DedupeError,
    ExpanderSetupError,
    InvalidInputError,
    UninitializedDependencyError,
)
from .data.expander import setup, teardown, is_initialized
from .dedupe import (
    NULL_DUPLICATE_STATUS,
    NON_DUPLICATE,
    POSSIBLE_DUPLICATE_NEEDS_REVIEW,
    LIKELY_DUPLICATE,
    EXACT_DUPLICATE,
    place_languages,
    is_name_duplicate,
    is_street_duplicate,
    is_house_number_duplicate,
    is_po_box_duplicate,
    is_unit_duplicate,
    is_floor_duplicate,
    is_postal_code_duplicate,
    is_toponym_duplicate,
)

__all__ = [
    'DuplicateStatus',
    'ComponentSet',
    'FieldType',
    'LabeledValue',
    'DuplicateOptions',
    'FieldThresholds',
    'DedupeError',
    'ExpanderSetupError',
    'InvalidInputError',
    'UninitializedDependencyError',
    'setup',
    'teardown',
    'is_initialized',
    'NULL_DUPLICATE_STATUS',
    'NON_DUPLICATE',
    'POSSIBLE_DUPLICATE_NEEDS_REVIEW',
    'LIKELY_DUPLICATE',
    'EXACT_DUPLICATE',
    'place_languages',
    'is_name_duplicate',
    'is_street_duplicate',
    'is_house_number_duplicate',
    'is_po_box_duplicate',
    'is_unit_duplicate',
    'is_floor_duplicate',
    'is_postal_code_duplicate',
    'is_toponym_duplicate',
]
