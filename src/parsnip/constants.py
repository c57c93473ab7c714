"""Shared constants for parsnip.

Centralized configuration constants used across the syntax and diagnostics
packages. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Rendering: Failure-window size for outcome descriptions
- Formatting: Defaults for DiagnosticFormatter output

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Rendering
    "RECENTLY_CONSUMED_WINDOW",
    "FAILURE_INTRO",
    "SUCCESS_INTRO",
    "OBSERVATIONS_HEADER",
    # Formatting
    "DEFAULT_MAX_CONTENT_LENGTH",
    "EXPECTATION_SEPARATOR",
]

# ============================================================================
# RENDERING
# ============================================================================

# Number of characters shown before the failure point in Outcome.describe().
# Fixed so failure messages stay short and greppable; tools downstream match
# on the exact output.
RECENTLY_CONSUMED_WINDOW: int = 10

FAILURE_INTRO: str = "Parsing failure. Recently consumed: '{window}'."
SUCCESS_INTRO: str = "Successfully parsed value: {value}."

# Separates the intro sentence from the newline-joined observation messages.
OBSERVATIONS_HEADER: str = " Errors: "

# ============================================================================
# FORMATTING
# ============================================================================

# Maximum message length kept when DiagnosticFormatter sanitizes output.
DEFAULT_MAX_CONTENT_LENGTH: int = 100

EXPECTATION_SEPARATOR: str = ", "
