"""Outcome of a single parsing step.

Every elementary parsing step takes a Cursor and returns an Outcome: either
a Success carrying the produced value, or a Failure carrying only the
position where parsing stopped. Both variants carry the observations the
step made along the way.

Parse failures are values, never exceptions. Higher-level combinators chain
steps with on_success and on_failure instead of unwrapping outcomes by hand:

    >>> from parsnip.syntax.cursor import Cursor
    >>> digit = lambda c: (
    ...     succeed(c.current, c.advance())
    ...     if not c.is_eof and c.current.isdigit()
    ...     else fail(c, [Observation.create("Expected digit", ["digit"])])
    ... )
    >>> outcome = on_success(digit(Cursor("7x", 0)), lambda ok: digit(ok.remainder))
    >>> outcome.has_value
    False
    >>> outcome.remainder.pos
    1

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Literal, Never, TypeIs

from parsnip.constants import (
    FAILURE_INTRO,
    OBSERVATIONS_HEADER,
    RECENTLY_CONSUMED_WINDOW,
    SUCCESS_INTRO,
)
from parsnip.diagnostics import NoValueError, Observation, Severity

from .cursor import Cursor

__all__ = [
    "Failure",
    "Outcome",
    "Success",
    "describe",
    "fail",
    "is_failure",
    "is_success",
    "on_failure",
    "on_success",
    "succeed",
]

logger = logging.getLogger(__name__)


def _freeze(observations: Iterable[Observation] | None) -> tuple[Observation, ...]:
    if observations is None:
        return ()
    if isinstance(observations, tuple):
        return observations
    return tuple(observations)


class _ObservationFilters:
    """Severity filters shared by both outcome variants."""

    __slots__ = ()

    observations: tuple[Observation, ...]

    @property
    def errors(self) -> tuple[Observation, ...]:
        """Observations with ERROR severity."""
        return tuple(o for o in self.observations if o.severity is Severity.ERROR)

    @property
    def advisories(self) -> tuple[Observation, ...]:
        """Observations below ERROR severity (warnings and notes)."""
        return tuple(o for o in self.observations if o.severity is not Severity.ERROR)


@dataclass(frozen=True, slots=True)
class Success[T](_ObservationFilters):
    """Parsing step produced a value.

    Attributes:
        value: The parsed value
        remainder: Cursor just past the consumed input
        observations: Advisory observations (may be empty)
    """

    value: T
    remainder: Cursor
    observations: tuple[Observation, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "observations", _freeze(self.observations))

    @property
    def has_value(self) -> Literal[True]:
        return True

    def __str__(self) -> str:
        return describe(self)


@dataclass(frozen=True, slots=True)
class Failure[T](_ObservationFilters):
    """Parsing step produced no value.

    Attributes:
        remainder: Cursor at the failure point
        observations: Why the step failed (non-empty by convention)
    """

    remainder: Cursor
    observations: tuple[Observation, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "observations", _freeze(self.observations))

    @property
    def has_value(self) -> Literal[False]:
        return False

    @property
    def value(self) -> Never:
        """Always raises: a failed outcome has no value.

        Raises:
            NoValueError: Always. Reading the value of a failure is a bug
                in calling code, not a parse error.
        """
        raise NoValueError(self.remainder.pos)

    def __str__(self) -> str:
        return describe(self)


type Outcome[T] = Success[T] | Failure[T]


# ============================================================================
# CONSTRUCTION
# ============================================================================


def succeed[T](
    value: T, remainder: Cursor, observations: Iterable[Observation] = ()
) -> Success[T]:
    """Create a successful outcome.

    Args:
        value: The parsed value
        remainder: Cursor after the consumed input
        observations: Advisory observations (non-fatal notices)

    Returns:
        Success carrying value, remainder and observations
    """
    return Success(value, remainder, _freeze(observations))


def fail[T](remainder: Cursor, observations: Iterable[Observation] = ()) -> Failure[T]:
    """Create a failed outcome.

    Callers should supply at least one observation explaining the failure;
    this is not enforced.

    Args:
        remainder: Cursor at the failure point
        observations: Why the step failed

    Returns:
        Failure carrying remainder and observations
    """
    return Failure(remainder, _freeze(observations))


def is_success[T](outcome: Outcome[T]) -> TypeIs[Success[T]]:
    """Narrow outcome to Success."""
    return isinstance(outcome, Success)


def is_failure[T](outcome: Outcome[T]) -> TypeIs[Failure[T]]:
    """Narrow outcome to Failure."""
    return isinstance(outcome, Failure)


# ============================================================================
# CHAINING
# ============================================================================


def on_success[T, U](
    outcome: Outcome[T], next_step: Callable[[Success[T]], Outcome[U]]
) -> Outcome[U]:
    """Continue with next_step only if outcome holds a value.

    A failure short-circuits: next_step is not invoked and the failure is
    re-typed with its remainder and observations untouched, so later steps
    stop work while the caller still sees where and why parsing failed.

    Args:
        outcome: Result of the previous step
        next_step: Continuation receiving the successful outcome

    Returns:
        Whatever next_step returns, or the propagated failure
    """
    if isinstance(outcome, Success):
        return next_step(outcome)
    logger.debug(
        "Short-circuiting failure at position %d (%d observation(s))",
        outcome.remainder.pos,
        len(outcome.observations),
    )
    return Failure(outcome.remainder, outcome.observations)


def on_failure[T](
    outcome: Outcome[T], next_step: Callable[[Failure[T]], Outcome[T]]
) -> Outcome[T]:
    """Give next_step a chance to recover from a failed outcome.

    Successes pass through unchanged without invoking next_step. On failure
    next_step receives the failed outcome; its remainder can be used to
    retry from the same cursor.

    Args:
        outcome: Result of the previous step
        next_step: Recovery continuation receiving the failed outcome

    Returns:
        outcome itself on success, otherwise whatever next_step returns
    """
    if isinstance(outcome, Success):
        return outcome
    logger.debug("Attempting recovery from failure at position %d", outcome.remainder.pos)
    return next_step(outcome)


# ============================================================================
# RENDERING
# ============================================================================


def describe(outcome: Outcome[object]) -> str:
    """Render an outcome as a human-readable diagnostic.

    Failures show the last RECENTLY_CONSUMED_WINDOW characters consumed
    before the failure point; successes show the value. The intro is
    followed by each observation message on its own line.

    Example:
        >>> source = Cursor("abcdefghijklmno", 12)
        >>> describe(fail(source, [Observation.create("Expected digit")]))
        "Parsing failure. Recently consumed: 'cdefghijkl'. Errors: \\nExpected digit"
    """
    match outcome:
        case Success(value=value):
            intro = SUCCESS_INTRO.format(value=value)
        case Failure(remainder=remainder):
            window = remainder.recently_consumed(RECENTLY_CONSUMED_WINDOW)
            intro = FAILURE_INTRO.format(window=window)

    messages = "\n".join(o.message for o in outcome.observations)
    return f"{intro}{OBSERVATIONS_HEADER}\n{messages}"
