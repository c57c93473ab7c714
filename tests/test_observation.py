"""Tests for Observation construction and equality."""

from __future__ import annotations

import pytest

from parsnip.diagnostics import (
    ContractViolationError,
    Expectations,
    InvalidObservationError,
    Observation,
    Severity,
)

# ============================================================================
# CONSTRUCTION
# ============================================================================


class TestObservationCreate:
    """Test the create() factory and its validation."""

    def test_create_with_message(self) -> None:
        """Message and expectations are exposed read-only."""
        obs = Observation.create("Expected digit", ["digit"])

        assert obs.message == "Expected digit"
        assert obs.expectations == {"digit"}
        assert obs.position is None
        assert obs.severity is Severity.ERROR

    @pytest.mark.parametrize("message", ["", " ", "  ", "\t\n"])
    def test_blank_message_rejected(self, message: str) -> None:
        """Empty and whitespace-only messages are construction errors."""
        with pytest.raises(InvalidObservationError, match="You must provide a message"):
            Observation.create(message, [])

    def test_blank_message_rejected_by_constructor(self) -> None:
        """The dataclass constructor applies the same validation."""
        with pytest.raises(InvalidObservationError) as exc_info:
            Observation("   ")

        assert exc_info.value.field_name == "message"

    def test_non_string_message_rejected(self) -> None:
        """Non-string messages are rejected rather than coerced."""
        with pytest.raises(InvalidObservationError):
            Observation(None)  # type: ignore[arg-type]

    def test_construction_error_is_contract_violation(self) -> None:
        """Construction errors belong to the misuse hierarchy and ValueError."""
        with pytest.raises(ContractViolationError):
            Observation.create("")
        with pytest.raises(ValueError):
            Observation.create("")

    def test_none_expectations_dropped(self) -> None:
        """None entries vanish; remaining order is preserved."""
        obs = Observation.create("msg", [None, "a", None, "b"])

        assert obs.expectations == {"a", "b"}
        assert list(obs.expectations) == ["a", "b"]

    def test_none_iterable_yields_empty_set(self) -> None:
        """A missing expectations iterable becomes the empty set."""
        assert Observation.create("msg", None).expectations == set()
        assert not Observation.create("msg", [None, None]).expectations

    def test_duplicate_expectations_collapse(self) -> None:
        """Expectations behave as a set, keeping first occurrence order."""
        obs = Observation.create("msg", ["b", "a", "b"])

        assert obs.expectations == {"a", "b"}
        assert list(obs.expectations) == ["b", "a"]

    def test_accepts_generators(self) -> None:
        """Any iterable of labels is accepted."""
        obs = Observation.create("msg", (label for label in ["x", None, "y"]))

        assert list(obs.expectations) == ["x", "y"]

    def test_constructor_normalizes_expectations(self) -> None:
        """Direct construction normalizes like create()."""
        obs = Observation("msg", ["a", None, "a"])  # type: ignore[arg-type]

        assert obs.expectations == {"a"}
        assert isinstance(obs.expectations, Expectations)

    def test_single_string_is_one_label(self) -> None:
        """A bare string is one label, not a run of characters."""
        obs = Observation.create("Expected digit", "digit")

        assert obs.expectations == {"digit"}
        assert list(obs.expectations) == ["digit"]

    def test_constructor_single_string_is_one_label(self) -> None:
        """Direct construction treats a bare string the same way."""
        obs = Observation("Expected digit", "digit")  # type: ignore[arg-type]

        assert list(obs.expectations) == ["digit"]
        assert Observation.at("Expected digit", 3, "digit").expectations == {"digit"}

    def test_severity_coerced_from_string(self) -> None:
        """Plain severity strings become Severity members."""
        obs = Observation("msg", (), None, "warning")  # type: ignore[arg-type]

        assert obs.severity is Severity.WARNING

    def test_unknown_severity_rejected(self) -> None:
        """Unknown severity strings raise ValueError."""
        with pytest.raises(ValueError):
            Observation("msg", (), None, "fatal")  # type: ignore[arg-type]

    def test_observation_is_immutable(self) -> None:
        """Observations are frozen."""
        obs = Observation.create("msg")

        with pytest.raises(AttributeError):
            obs.message = "other"  # type: ignore[misc]


# ============================================================================
# POSITIONED VARIANT
# ============================================================================


class TestPositionedObservation:
    """Test observations that carry their own position."""

    def test_at_sets_position(self) -> None:
        """at() pins the observation to an offset."""
        obs = Observation.at("Expected ')'", 12, ["')'"])

        assert obs.position == 12
        assert obs.is_positioned

    def test_negative_position_rejected(self) -> None:
        """Negative positions are construction errors."""
        with pytest.raises(InvalidObservationError, match="position"):
            Observation.at("msg", -1)

    def test_located_pins_unpositioned(self) -> None:
        """located() returns a positioned copy."""
        obs = Observation.create("msg", ["a"])
        pinned = obs.located(4)

        assert pinned.position == 4
        assert pinned.expectations == {"a"}
        assert obs.position is None

    def test_located_keeps_existing_position(self) -> None:
        """located() never overrides an existing position."""
        obs = Observation.at("msg", 2)

        assert obs.located(9) is obs


# ============================================================================
# EQUALITY
# ============================================================================


class TestObservationEquality:
    """Test value semantics."""

    def test_expectation_order_ignored_for_equality(self) -> None:
        """Observations with the same labels in different order are equal."""
        first = Observation.create("msg", ["a", "b"])
        second = Observation.create("msg", ["b", "a"])

        assert first == second
        assert hash(first) == hash(second)
        assert first.expectations == second.expectations
        assert list(first.expectations) == ["a", "b"]
        assert list(second.expectations) == ["b", "a"]

    def test_different_fields_not_equal(self) -> None:
        """Message, position and severity all participate in equality."""
        base = Observation.create("msg", ["a"])

        assert base != Observation.create("other", ["a"])
        assert base != Observation.create("msg", ["a", "b"])
        assert base != base.located(0)
        assert base != Observation.create("msg", ["a"], severity=Severity.WARNING)

    def test_usable_in_sets(self) -> None:
        """Equal observations deduplicate in sets."""
        observations = {
            Observation.create("msg", ["a", "b"]),
            Observation.create("msg", ["b", "a"]),
        }

        assert len(observations) == 1

    def test_not_equal_to_other_types(self) -> None:
        """Comparison with unrelated types is False, not an error."""
        assert Observation.create("msg") != "msg"


# ============================================================================
# EXPECTATION SETS
# ============================================================================


class TestExpectations:
    """Test the ordered label set."""

    def test_compares_with_builtin_sets(self) -> None:
        """Equality is set equality, in either direction."""
        labels = Expectations(["b", "a"])

        assert labels == {"a", "b"}
        assert {"a", "b"} == labels
        assert labels == frozenset({"a", "b"})
        assert labels != {"a"}

    def test_not_equal_to_sequences(self) -> None:
        """A tuple of the same labels is not a set."""
        assert Expectations(["a"]) != ("a",)

    def test_reordered_labels_hash_alike(self) -> None:
        """Reordered label sets hash alike."""
        first = Expectations(["a", "b"])
        second = Expectations(["b", "a"])

        assert hash(first) == hash(second)

    def test_iteration_keeps_first_seen_order(self) -> None:
        """Iteration and repr follow insertion order without duplicates."""
        labels = Expectations(["c", None, "a", "c", "b"])

        assert list(labels) == ["c", "a", "b"]
        assert len(labels) == 3
        assert repr(labels) == "Expectations(['c', 'a', 'b'])"

    def test_membership(self) -> None:
        """Membership checks the labels, not their characters."""
        labels = Expectations("digit")

        assert "digit" in labels
        assert "d" not in labels

    def test_set_operations_return_expectations(self) -> None:
        """Set algebra from the Set mixins yields the same type."""
        union = Expectations(["a"]) | Expectations(["b"])

        assert isinstance(union, Expectations)
        assert union == {"a", "b"}
        assert Expectations(["a", "b"]) & {"b"} == {"b"}

    def test_default_is_empty(self) -> None:
        """No argument and None both give the empty set."""
        assert not Expectations()
        assert Expectations(None) == set()
