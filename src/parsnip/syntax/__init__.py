"""Cursor and outcome model for parsing steps.

Exports:
    Cursor: Immutable view over source text plus an offset
    LineOffsetCache: Repeated line:column lookups for one source
    Outcome: Success | Failure result of one parsing step
    succeed, fail: Outcome constructors
    on_success, on_failure: Short-circuiting chaining primitives
    describe: Human-readable outcome rendering

Python 3.13+.
"""

from .cursor import Cursor, LineOffsetCache
from .outcome import (
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

__all__ = [
    "Cursor",
    "Failure",
    "LineOffsetCache",
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
