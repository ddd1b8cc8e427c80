"""Field types, labeled values and component sets for toponym comparison."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Self

from .errors import InvalidInputError


class FieldType(Enum):
    """Kind of value being compared; selects normalization and thresholds."""
    NAME = "name"
    STREET = "street"
    HOUSE_NUMBER = "house_number"
    PO_BOX = "po_box"
    UNIT = "unit"
    FLOOR = "floor"
    POSTAL_CODE = "postal_code"

    @property
    def is_numeric(self) -> bool:
        """Short identifier-like fields compared by edit distance on tokens."""
        return self in NUMERIC_FIELD_TYPES


NUMERIC_FIELD_TYPES = frozenset({
    FieldType.HOUSE_NUMBER,
    FieldType.PO_BOX,
    FieldType.UNIT,
    FieldType.FLOOR,
    FieldType.POSTAL_CODE,
})

# Alternate spellings folded into one canonical label
LABEL_ALIASES = {
    'street': 'road',
    'street_name': 'road',
    'floor': 'level',
    'postal_code': 'postcode',
    'zip': 'postcode',
    'zipcode': 'postcode',
    'zip_code': 'postcode',
    'pobox': 'po_box',
    'apartment': 'unit',
    'suite': 'unit',
    'housenumber': 'house_number',
    'house_no': 'house_number',
}

# Labels with a dedicated field type; every other label is a Name
LABEL_FIELD_TYPES = {
    'road': FieldType.STREET,
    'house_number': FieldType.HOUSE_NUMBER,
    'po_box': FieldType.PO_BOX,
    'unit': FieldType.UNIT,
    'level': FieldType.FLOOR,
    'postcode': FieldType.POSTAL_CODE,
}


def canonical_label(label: str) -> str:
    """Case-fold a label and fold known aliases (``street`` -> ``road``)."""
    key = label.strip().lower().replace(' ', '_').replace('-', '_')
    return LABEL_ALIASES.get(key, key)


def field_type_for_label(label: str) -> FieldType:
    """Field type implied by a component label."""
    return LABEL_FIELD_TYPES.get(canonical_label(label), FieldType.NAME)


@dataclass(frozen=True, slots=True)
class LabeledValue:
    """A single labeled address component, e.g. ``('house_number', '221B')``."""
    label: str
    value: str

    @property
    def field_type(self) -> FieldType:
        return field_type_for_label(self.label)


@dataclass(frozen=True, slots=True)
class ComponentSet:
    """Ordered collection of labeled components with unique labels.

    Labels are stored in canonical form. Construction validates the input so
    that a malformed set is rejected before any comparison runs.

    Attributes:
        components: Components in caller order
    """

    components: Tuple[LabeledValue, ...] = field(default_factory=tuple)

    def __post_init__(self):
        seen = set()
        normalized = []
        for component in self.components:
            if not isinstance(component, LabeledValue):
                try:
                    component = LabeledValue(*component)
                except TypeError as e:
                    raise InvalidInputError(
                        f"Components must be (label, value) pairs, got {component!r}"
                    ) from e
            if not isinstance(component.label, str) or not isinstance(component.value, str):
                raise InvalidInputError(
                    f"Component labels and values must be strings, got {component!r}"
                )
            label = canonical_label(component.label)
            if not label:
                raise InvalidInputError("Component labels must not be empty")
            if label in seen:
                raise InvalidInputError(f"Duplicate component label: {label!r}")
            seen.add(label)
            normalized.append(LabeledValue(label, component.value))
        object.__setattr__(self, 'components', tuple(normalized))

    @classmethod
    def from_sequences(cls, labels: Sequence[str], values: Sequence[str]) -> Self:
        """Build a component set from parallel label and value sequences.

        Args:
            labels: Component labels
            values: Component values, same length as ``labels``

        Returns:
            ComponentSet

        Raises:
            InvalidInputError: If either argument is not a sequence of strings
                or the lengths differ
        """
        labels = _as_string_list(labels, 'labels')
        values = _as_string_list(values, 'values')
        if len(labels) != len(values):
            raise InvalidInputError(
                f"Input labels and values must be of equal length "
                f"({len(labels)} labels, {len(values)} values)"
            )
        return cls(tuple(LabeledValue(label, value) for label, value in zip(labels, values)))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> Self:
        """Build a component set from a ``{label: value}`` mapping."""
        return cls(tuple(LabeledValue(label, value) for label, value in mapping.items()))

    @property
    def labels(self) -> List[str]:
        return [component.label for component in self.components]

    @property
    def values(self) -> List[str]:
        return [component.value for component in self.components]

    def index(self) -> Dict[str, str]:
        """Label -> value index."""
        return {component.label: component.value for component in self.components}

    def get(self, label: str) -> Optional[str]:
        return self.index().get(canonical_label(label))

    def is_empty(self) -> bool:
        return len(self.components) == 0

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[LabeledValue]:
        return iter(self.components)


def _as_string_list(items: Sequence[str], name: str) -> List[str]:
    if isinstance(items, (str, bytes)) or not isinstance(items, Sequence):
        raise InvalidInputError(f"Input {name} must be a sequence of strings")
    result = list(items)
    for item in result:
        if not isinstance(item, str):
            raise InvalidInputError(
                f"Input {name} must contain only strings, got {type(item).__name__}"
            )
    return result
