"""Tests for ValidationError and its reason types."""

import pytest

from valknobs_common import ValknobsError
from valknobs_core import KeyedReasons, PositionalReasons, ValidationError


class TestValidationError:
    """Test the error type."""

    def test_leaf_error(self):
        """Test an error without reasons."""
        value = {"a": 1}
        error = ValidationError("bad", value)
        assert error.message == "bad"
        assert error.value is value
        assert error.reasons is None
        assert error.kind is None
        assert error.context == {"value": value}
        assert isinstance(error, ValknobsError)

    def test_list_becomes_positional(self):
        """Test a list of reasons is positional."""
        inner = ValidationError("inner", 1)
        error = ValidationError("outer", [1, 2], [None, inner])
        assert error.kind == "positional"
        assert isinstance(error.reasons, PositionalReasons)
        assert list(error.reasons) == [None, inner]
        assert list(error.reasons.failures()) == [(1, inner)]

    def test_dict_becomes_keyed(self):
        """Test a dict of reasons is keyed."""
        inner = ValidationError("inner", 1)
        reasons = {"a": inner}
        error = ValidationError("outer", {"a": 1}, reasons)
        reasons["b"] = inner
        assert error.kind == "keyed"
        assert dict(error.reasons) == {"a": inner}
        assert list(error.reasons.failures()) == [("a", inner)]

    def test_reasons_instances_kept(self):
        """Test prebuilt reasons are used as they are."""
        reasons = PositionalReasons([None])
        assert ValidationError("outer", [1], reasons).reasons is reasons

    def test_positional_equality(self):
        """Test positional reasons compare by their errors."""
        inner = ValidationError("inner", 1)
        assert PositionalReasons([None, inner]) == PositionalReasons((None, inner))
        assert PositionalReasons([None]) != PositionalReasons([inner])

    def test_keyed_and_positional_are_distinct(self):
        """Test an empty keyed reasons is not positional."""
        assert KeyedReasons({}).kind == "keyed"
        assert PositionalReasons([]).kind == "positional"

    def test_repr(self):
        """Test the debugging representation."""
        error = ValidationError("bad", 1, [None])
        assert repr(error) == "ValidationError('bad', 1, reasons=PositionalReasons([None]))"

    def test_raise_and_catch(self):
        """Test the error is raised and caught like any exception."""
        with pytest.raises(ValknobsError, match="bad"):
            raise ValidationError("bad", 1)
