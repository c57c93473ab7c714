"""parsnip - outcome and diagnostic model for parser combinators.

Every elementary parsing step takes an immutable Cursor and returns an
Outcome: a Success with the parsed value, or a Failure carrying the
position where parsing stopped. Both carry Observations explaining what
the step saw and expected. Failures are values, never exceptions, and
on_success / on_failure compose steps without unwrapping them.

Public API:
    Cursor - Immutable view over source text plus an offset
    Outcome, Success, Failure - Result of one parsing step
    succeed, fail - Outcome constructors
    on_success, on_failure - Short-circuiting chaining primitives
    Observation, Severity - Diagnostic records attached to outcomes
    Expectations - Ordered set of expected-token labels
    DiagnosticFormatter - Configurable observation rendering

Exceptions:
    ParsnipError - Base exception class
    ContractViolationError - API misuse by calling code
    InvalidObservationError - Observation built with a blank message
    NoValueError - Value read from a failed outcome

Submodules:
    parsnip.syntax - Cursor and Outcome model
    parsnip.diagnostics - Observations, templates, formatting, errors
    parsnip.constants - Rendering and formatting constants
"""

from .diagnostics import (
    ContractViolationError,
    DiagnosticFormatter,
    Expectations,
    InvalidObservationError,
    NoValueError,
    Observation,
    ObservationTemplate,
    OutputFormat,
    ParsnipError,
    Severity,
)
from .syntax import (
    Cursor,
    Failure,
    Outcome,
    Success,
    describe,
    fail,
    is_failure,
    is_success,
    on_failure,
    on_success,
    succeed,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("parsnip")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ContractViolationError",
    "Cursor",
    "DiagnosticFormatter",
    "Expectations",
    "Failure",
    "InvalidObservationError",
    "NoValueError",
    "Observation",
    "ObservationTemplate",
    "Outcome",
    "OutputFormat",
    "ParsnipError",
    "Severity",
    "Success",
    "__version__",
    "describe",
    "fail",
    "is_failure",
    "is_success",
    "on_failure",
    "on_success",
    "succeed",
]
