"""Observation data structures.

Defines the diagnostic record attached to every parse attempt, its
severity levels, and the ordered label set it carries.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable, Iterator, Set
from dataclasses import dataclass, replace
from enum import StrEnum

from .errors import InvalidObservationError

__all__ = [
    "Expectations",
    "Observation",
    "Severity",
]


class Severity(StrEnum):
    """Observation severity.

    Inherits from ``StrEnum`` so serialized output and log records receive
    plain strings (``"error"``, ``"warning"``) rather than enum reprs.

    Levels:
        ERROR: Explains why a parse attempt failed
        WARNING: Non-fatal notice attached to a successful parse
        INFO: Informational note for tooling
    """

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Expectations(Set[str]):
    """Immutable set of expected-token labels that remembers insertion order.

    Compares and hashes like any other ``Set`` (so ``{"a", "b"}`` equals
    ``Expectations(["b", "a"])``) while iteration, ``repr`` and rendered
    diagnostics follow first-seen order.

    A bare string is one label, not a sequence of characters. None entries
    and duplicates are dropped.

    Example:
        >>> labels = Expectations([None, "digit", "'('", "digit"])
        >>> labels
        Expectations(['digit', "'('"])
        >>> labels == {"'('", "digit"}
        True
        >>> Expectations("digit")
        Expectations(['digit'])
    """

    __slots__ = ("_labels",)

    _labels: tuple[str, ...]

    def __init__(self, labels: Iterable[str | None] | str | None = ()) -> None:
        if labels is None:
            labels = ()
        elif isinstance(labels, str):
            labels = (labels,)
        self._labels = tuple(dict.fromkeys(e for e in labels if e is not None))

    def __contains__(self, label: object) -> bool:
        return label in self._labels

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    __hash__ = Set._hash

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._labels)!r})"


def _normalize_expectations(
    expectations: Iterable[str | None] | str | None,
) -> Expectations:
    if isinstance(expectations, Expectations):
        return expectations
    return Expectations(expectations)


@dataclass(frozen=True, slots=True)
class Observation:
    """One diagnostic record produced by a parse attempt.

    Immutable. ``expectations`` is an ``Expectations`` set: label order is
    kept for display and ignored for equality and hashing.

    Attributes:
        message: Human-readable description (never blank)
        expectations: Labels of what was expected at the failure point
        position: Character offset the observation refers to. None means
            the enclosing outcome's remainder is the reference point.
        severity: Severity level (default: error)

    Example:
        >>> obs = Observation.create("Unexpected ')'", [None, "digit", "'('"])
        >>> list(obs.expectations)
        ['digit', "'('"]
        >>> obs.expectations == {"digit", "'('"}
        True
        >>> obs.is_positioned
        False
        >>> obs.located(7).position
        7
    """

    message: str
    expectations: Expectations = Expectations()
    position: int | None = None
    severity: Severity = Severity.ERROR

    def __post_init__(self) -> None:
        """Validate fields and normalize expectations.

        Raises:
            InvalidObservationError: If message is not a non-blank string
                or position is negative.
        """
        if not isinstance(self.message, str) or not self.message.strip():
            raise InvalidObservationError("message", "You must provide a message.")
        if self.position is not None and self.position < 0:
            raise InvalidObservationError(
                "position", f"must be >= 0, got {self.position}"
            )
        object.__setattr__(
            self, "expectations", _normalize_expectations(self.expectations)
        )
        object.__setattr__(self, "severity", Severity(self.severity))

    @classmethod
    def create(
        cls,
        message: str,
        expectations: Iterable[str | None] | str | None = None,
        *,
        severity: Severity = Severity.ERROR,
    ) -> "Observation":
        """Create an observation that relies on its outcome's remainder.

        Args:
            message: Non-blank description
            expectations: Expected-token labels; None entries are dropped
                and a single string counts as one label
            severity: Severity level

        Returns:
            New Observation without a position
        """
        return cls(message, _normalize_expectations(expectations), None, severity)

    @classmethod
    def at(
        cls,
        message: str,
        position: int,
        expectations: Iterable[str | None] | str | None = None,
        *,
        severity: Severity = Severity.ERROR,
    ) -> "Observation":
        """Create an observation pinned to a source offset.

        Positioned observations remain reportable after they are detached
        from their outcome, e.g. when comparing how deep competing
        alternatives got before failing.
        """
        return cls(message, _normalize_expectations(expectations), position, severity)

    @property
    def is_positioned(self) -> bool:
        """True if this observation carries its own position."""
        return self.position is not None

    def located(self, position: int) -> "Observation":
        """Return a copy pinned to position, unless already positioned."""
        if self.position is not None:
            return self
        return replace(self, position=position)
