"""Diagnostic formatting service.

Renders observations for humans (compiler-style or single-line output) and
for tools (JSON). Outcome.describe() keeps its fixed format; this module is
the configurable alternative for error reporting surfaces.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from parsnip.constants import DEFAULT_MAX_CONTENT_LENGTH, EXPECTATION_SEPARATOR

from .codes import Observation, Severity

if TYPE_CHECKING:
    from parsnip.syntax.cursor import LineOffsetCache
    from parsnip.syntax.outcome import Outcome

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Compiler-style multi-line output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


# Control characters rendered as escapes so observation text cannot forge
# extra log lines or terminal sequences.
_CONTROL_ESCAPES: dict[int, str] = {
    code: f"\\x{code:02x}" for code in (*range(0x20), 0x7F)
} | {ord("\n"): "\\n", ord("\r"): "\\r", ord("\t"): "\\t"}

_SEVERITY_COLORS: dict[Severity, str] = {
    Severity.ERROR: "\033[1;31m",  # Bold red
    Severity.WARNING: "\033[1;33m",  # Bold yellow
    Severity.INFO: "\033[1;36m",  # Bold cyan
}


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Observation formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate messages to max_content_length
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum message length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> obs = Observation.at("Unexpected ')'", 3, ["digit"])
        >>> formatter.format(obs, source="(12)")
        "1:4: error: Unexpected ')' (expected: digit)"
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = DEFAULT_MAX_CONTENT_LENGTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_content_length is not positive.
        """
        if self.max_content_length <= 0:
            msg = "max_content_length must be positive"
            raise ValueError(msg)

    def format(
        self,
        observation: Observation,
        *,
        source: str | None = None,
        position: int | None = None,
    ) -> str:
        """Format a single observation.

        Args:
            observation: Observation to format
            source: Source text, enables line/column locations
            position: Offset to use when the observation has none

        Returns:
            Formatted observation string
        """
        return self._format(observation, source, position, None)

    def format_all(
        self,
        observations: Iterable[Observation],
        *,
        source: str | None = None,
        position: int | None = None,
    ) -> str:
        """Format multiple observations, separated by blank lines.

        JSON output is a single array instead.
        """
        cache = _line_cache(source)
        observations = tuple(observations)
        if self.output_format is OutputFormat.JSON:
            return json.dumps(
                [self._json_data(o, position, cache) for o in observations],
                ensure_ascii=False,
            )
        return "\n\n".join(self._format(o, source, position, cache) for o in observations)

    def format_outcome(self, outcome: "Outcome[object]") -> str:
        """Format an outcome's status and its observations.

        Observations without a position are located at the outcome's
        remainder.

        Returns:
            Status line followed by the formatted observations
        """
        remainder = outcome.remainder
        line, column = remainder.compute_line_col()
        status = "Parsed value" if outcome.has_value else "Parsing failed"
        summary = f"{status} at line {line}, column {column}"
        if not outcome.observations:
            return summary
        body = self.format_all(
            outcome.observations, source=remainder.source, position=remainder.pos
        )
        return f"{summary}\n{body}"

    def _format(
        self,
        observation: Observation,
        source: str | None,
        position: int | None,
        cache: "LineOffsetCache | None",
    ) -> str:
        if cache is None:
            cache = _line_cache(source)
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(observation, position, cache)
            case OutputFormat.SIMPLE:
                return self._format_simple(observation, position, cache)
            case OutputFormat.JSON:
                return json.dumps(
                    self._json_data(observation, position, cache), ensure_ascii=False
                )

    def _format_rust(
        self,
        observation: Observation,
        position: int | None,
        cache: "LineOffsetCache | None",
    ) -> str:
        """Format observation in compiler style.

        Example output:
            error: Unexpected ')'
              --> line 1, column 4
              = expected: digit, '('
        """
        severity = str(observation.severity)
        if self.color:
            severity = f"{_SEVERITY_COLORS[observation.severity]}{severity}\033[0m"

        parts = [f"{severity}: {self._clean(observation.message)}"]

        offset = _resolve_position(observation, position)
        if offset is not None:
            if cache is not None:
                line, column = cache.get_line_col(offset)
                parts.append(f"  --> line {line}, column {column}")
            else:
                parts.append(f"  --> offset {offset}")

        if observation.expectations:
            parts.append(f"  = expected: {self._expectations(observation)}")

        return "\n".join(parts)

    def _format_simple(
        self,
        observation: Observation,
        position: int | None,
        cache: "LineOffsetCache | None",
    ) -> str:
        """Format observation on one line.

        Example output:
            1:4: error: Unexpected ')' (expected: digit)
        """
        text = f"{observation.severity}: {self._clean(observation.message)}"
        offset = _resolve_position(observation, position)
        if offset is not None:
            if cache is not None:
                line, column = cache.get_line_col(offset)
                text = f"{line}:{column}: {text}"
            else:
                text = f"@{offset}: {text}"
        if observation.expectations:
            text += f" (expected: {self._expectations(observation)})"
        return text

    def _json_data(
        self,
        observation: Observation,
        position: int | None,
        cache: "LineOffsetCache | None",
    ) -> dict[str, object]:
        data: dict[str, object] = {
            "message": self._maybe_sanitize(observation.message),
            "severity": str(observation.severity),
            "expectations": list(observation.expectations),
        }
        offset = _resolve_position(observation, position)
        if offset is not None:
            data["position"] = offset
            if cache is not None:
                data["line"], data["column"] = cache.get_line_col(offset)
        return data

    def _expectations(self, observation: Observation) -> str:
        return self._clean(EXPECTATION_SEPARATOR.join(observation.expectations))

    def _clean(self, text: str) -> str:
        return self._maybe_sanitize(text).translate(_CONTROL_ESCAPES)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled."""
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text


def _resolve_position(observation: Observation, fallback: int | None) -> int | None:
    return observation.position if observation.position is not None else fallback


def _line_cache(source: str | None) -> "LineOffsetCache | None":
    if source is None:
        return None
    from parsnip.syntax.cursor import LineOffsetCache  # noqa: PLC0415 - circular

    return LineOffsetCache(source)
