"""Pytest configuration and fixtures for core package tests."""

import pytest

from valknobs_core import numbers, required, strings, transform, wrap


@pytest.fixture
def required_string():
    """Validator requiring a string."""
    return required().and_(strings.is_())


@pytest.fixture
def required_number():
    """Validator requiring a number."""
    return required().and_(numbers.is_())


@pytest.fixture
def increment():
    """Validator adding one to numbers."""
    return wrap("increment", transform(lambda value: value + 1))


@pytest.fixture
def broken():
    """Validator whose transform has a defect."""

    def explode(value):
        raise KeyError("defect")

    return wrap("broken", transform(explode))
