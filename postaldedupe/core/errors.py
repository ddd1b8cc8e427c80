"""Exceptions raised by the duplicate-classification engine."""


class DedupeError(Exception):
    """Base class for every error raised by postaldedupe."""


class InvalidInputError(DedupeError, ValueError):
    """Malformed input rejected before any comparison takes place.

    Raised for label/value count mismatches, repeated labels within one
    component set and non-string values.
    """


class UninitializedDependencyError(DedupeError, RuntimeError):
    """The expander was used before ``setup()`` completed."""


class ExpanderSetupError(DedupeError):
    """The expander dictionaries could not be loaded."""
