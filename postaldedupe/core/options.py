"""Immutable duplicate-classification policy."""

from typing import FrozenSet, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .components import FieldType, canonical_label
from .status import DuplicateStatus

# Hard bound on language tag length, shared with the expander contract
MAX_LANGUAGE_LEN = 4


def language_tuple(languages) -> Tuple[str, ...]:
    """Coerce a language argument to a tuple; a bare string is one language."""
    if not languages:
        return ()
    if isinstance(languages, str):
        return (languages,)
    return tuple(languages)


class FieldThresholds(BaseModel):
    """Similarity cut-offs for one field type.

    ``similarity < review`` is a non-duplicate, ``review <= similarity < likely``
    needs review and ``similarity >= likely`` is a likely duplicate.
    """

    model_config = ConfigDict(frozen=True)

    review: float = Field(ge=0.0, le=1.0)
    likely: float = Field(ge=0.0, le=1.0)

    @model_validator(mode='after')
    def _check_order(self) -> 'FieldThresholds':
        if self.review > self.likely:
            raise ValueError(
                f"review threshold {self.review} exceeds likely threshold {self.likely}"
            )
        return self


class DuplicateOptions(BaseModel):
    """
    Policy carried through every comparison.

    Instances are frozen; use ``with_languages`` or ``model_copy(update=...)``
    to derive a new snapshot.

    Attributes:
        languages: Language override in preference order (empty = resolve or
            use the expander's language-agnostic path)
        name, street, house_number, po_box, unit, floor, postal_code:
            Similarity thresholds per field type
        required_labels: Toponym labels whose absence on one side counts
            against the match
        unmatched_required_status: Status contributed by a required label
            present on only one side
        unmatched_optional_status: Status contributed by any other unmatched
            label, or None to ignore it
        phonetic_names: Treat names with equal Metaphone keys as likely duplicates
    """

    model_config = ConfigDict(frozen=True)

    languages: Tuple[str, ...] = ()

    name: FieldThresholds = FieldThresholds(review=0.75, likely=0.90)
    street: FieldThresholds = FieldThresholds(review=0.80, likely=0.92)
    house_number: FieldThresholds = FieldThresholds(review=0.85, likely=0.95)
    po_box: FieldThresholds = FieldThresholds(review=0.85, likely=0.95)
    unit: FieldThresholds = FieldThresholds(review=0.85, likely=0.95)
    floor: FieldThresholds = FieldThresholds(review=0.85, likely=0.95)
    postal_code: FieldThresholds = FieldThresholds(review=0.85, likely=0.95)

    required_labels: FrozenSet[str] = frozenset({'house_number', 'road'})
    unmatched_required_status: DuplicateStatus = DuplicateStatus.NON_DUPLICATE
    unmatched_optional_status: Optional[DuplicateStatus] = None

    phonetic_names: bool = True

    @field_validator('languages', mode='before')
    @classmethod
    def _coerce_languages(cls, value):
        if isinstance(value, str):
            return language_tuple(value)
        return value

    @field_validator('languages')
    @classmethod
    def _check_languages(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        for language in value:
            if not language or len(language) > MAX_LANGUAGE_LEN:
                raise ValueError(
                    f"language tag {language!r} must have 1 to {MAX_LANGUAGE_LEN} characters"
                )
        return tuple(language.lower() for language in value)

    @field_validator('required_labels')
    @classmethod
    def _canonical_required(cls, value: FrozenSet[str]) -> FrozenSet[str]:
        return frozenset(canonical_label(label) for label in value)

    @field_validator('unmatched_required_status')
    @classmethod
    def _check_required_status(cls, value: DuplicateStatus) -> DuplicateStatus:
        if value is DuplicateStatus.NULL_DUPLICATE_STATUS:
            raise ValueError("unmatched_required_status cannot be NULL_DUPLICATE_STATUS")
        return value

    def thresholds_for(self, field_type: FieldType) -> FieldThresholds:
        """Thresholds for a field type."""
        return getattr(self, field_type.value)

    def is_required(self, label: str) -> bool:
        return canonical_label(label) in self.required_labels

    def with_languages(self, languages) -> 'DuplicateOptions':
        """Copy of these options with a different language override."""
        data = self.model_dump()
        data['languages'] = languages
        return DuplicateOptions.model_validate(data)


default_options = DuplicateOptions()
