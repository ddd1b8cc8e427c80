"""Core data model: statuses, component sets, options and errors."""

from .status import DuplicateStatus, aggregate, weakest_link
from .components import (
    ComponentSet,
    FieldType,
    LabeledValue,
    canonical_label,
    field_type_for_label,
)
from .options import (
    MAX_LANGUAGE_LEN,
    DuplicateOptions,
    FieldThresholds,
    default_options,
    language_tuple,
)
from .errors import (
    DedupeError,
    ExpanderSetupError,
    InvalidInputError,
    UninitializedDependencyError,
)

__all__ = [
    'DuplicateStatus',
    'aggregate',
    'weakest_link',
    'ComponentSet',
    'FieldType',
    'LabeledValue',
    'canonical_label',
    'field_type_for_label',
    'MAX_LANGUAGE_LEN',
    'DuplicateOptions',
    'FieldThresholds',
    'default_options',
    'language_tuple',
    'DedupeError',
    'ExpanderSetupError',
    'InvalidInputError',
    'UninitializedDependencyError',
]
