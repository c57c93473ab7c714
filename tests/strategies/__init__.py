"""Hypothesis strategies for parsnip property-based testing.

Usage:
    from tests.strategies import cursors, observations, outcomes
"""

from .outcomes import (
    cursors,
    expectation_labels,
    failures,
    messages,
    observation_lists,
    observations,
    outcomes,
    source_text,
    successes,
)

__all__ = [
    "cursors",
    "expectation_labels",
    "failures",
    "messages",
    "observation_lists",
    "observations",
    "outcomes",
    "source_text",
    "successes",
]
