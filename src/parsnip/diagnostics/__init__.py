"""Diagnostic system for parse attempts.

Provides observations (message plus expected-token labels), message
templates, the exception hierarchy for API misuse, and formatting.

Python 3.13+. Zero external dependencies.
"""

from .codes import Expectations, Observation, Severity
from .errors import (
    ContractViolationError,
    InvalidObservationError,
    NoValueError,
    ParsnipError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ObservationTemplate

__all__ = [
    "ContractViolationError",
    "DiagnosticFormatter",
    "Expectations",
    "InvalidObservationError",
    "NoValueError",
    "Observation",
    "ObservationTemplate",
    "OutputFormat",
    "ParsnipError",
    "Severity",
]
