"""parsnip exception hierarchy.

Parse failures are never raised: they travel as Failure outcomes. The
exceptions defined here signal misuse of the API by calling code and
should not be caught and retried.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "ContractViolationError",
    "InvalidObservationError",
    "NoValueError",
    "ParsnipError",
]


class ParsnipError(Exception):
    """Base exception for all parsnip errors."""


class ContractViolationError(ParsnipError):
    """Calling code broke an invariant of the outcome model.

    Indicates a bug in the caller, not a problem with the parsed input.
    """


class InvalidObservationError(ContractViolationError, ValueError):
    """Observation constructed with invalid fields.

    Raised for an empty or whitespace-only message, a non-string message,
    or a negative position.

    Attributes:
        field_name: Name of the offending field
    """

    def __init__(self, field_name: str, reason: str) -> None:
        """Initialize InvalidObservationError.

        Args:
            field_name: Name of the offending Observation field
            reason: Human-readable description of the violation
        """
        super().__init__(f"Invalid observation {field_name}: {reason}")
        self.field_name = field_name


class NoValueError(ContractViolationError):
    """Value read from an outcome that has none.

    Check ``has_value`` (or match on Success) before reading ``value``.

    Attributes:
        position: Remainder offset of the failed outcome
    """

    def __init__(self, position: int) -> None:
        """Initialize NoValueError.

        Args:
            position: Remainder offset of the failed outcome
        """
        super().__init__(
            f"No value can be computed: parsing failed at position {position}"
        )
        self.position = position
