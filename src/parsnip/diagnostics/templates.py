"""Observation message templates.

Centralized templates for the observations parsing steps attach to their
outcomes, so messages stay consistent and testable.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Expectations, Observation, Severity

__all__ = ["ObservationTemplate"]


def _quote(text: str) -> str:
    return f"'{text}'"


class ObservationTemplate:
    """Centralized observation templates.

    Parsing steps build their observations here instead of formatting
    messages inline. Every template accepts an optional position; leave it
    unset when the observation travels inside an outcome whose remainder
    already marks the spot.
    """

    @staticmethod
    def unexpected_eof(
        expectations: Iterable[str] | str = (), position: int | None = None
    ) -> Observation:
        """Input ended before the step could match.

        Args:
            expectations: Labels of what would have been accepted; a single
                string is one label
            position: Offset of the end of input (optional)

        Returns:
            Observation for an unexpected end of input
        """
        labels = Expectations(expectations)
        msg = "Unexpected end of input"
        if labels:
            msg += f", expected {' or '.join(labels)}"
        return Observation(msg, labels, position)

    @staticmethod
    def unexpected_character(
        found: str, expectations: Iterable[str] | str = (), position: int | None = None
    ) -> Observation:
        """Step found a character it cannot accept.

        Args:
            found: The offending character
            expectations: Labels of what would have been accepted; a single
                string is one label
            position: Offset of the offending character (optional)

        Returns:
            Observation for an unexpected character
        """
        labels = Expectations(expectations)
        msg = f"Unexpected {_quote(found)}"
        if labels:
            msg += f"; expected {' or '.join(labels)}"
        return Observation(msg, labels, position)

    @staticmethod
    def expected(label: str, position: int | None = None) -> Observation:
        """Step required a single construct that was not there."""
        return Observation(f"Expected {label}", (label,), position)

    @staticmethod
    def unconsumed_input(remaining: str, position: int | None = None) -> Observation:
        """Parse finished with input left over.

        Reported as a warning: the value was produced, but the caller
        probably expected the whole source to be consumed.

        Args:
            remaining: Leading part of the unconsumed text
            position: Offset where consumption stopped (optional)

        Returns:
            Warning observation
        """
        msg = f"Input not fully consumed, stopped before {_quote(remaining)}"
        return Observation(msg, ("end of input",), position, Severity.WARNING)
