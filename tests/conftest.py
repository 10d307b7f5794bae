"""Pytest configuration and fixtures for quartzcron tests."""

import pytest
from quartzcron import QuartzCronValidator, ValidatorConfig


@pytest.fixture
def validator():
    """Create a fail-fast validator with default configuration."""
    return QuartzCronValidator()


@pytest.fixture
def full_validator():
    """Create a validator that checks every field."""
    return QuartzCronValidator(ValidatorConfig(fail_fast=False))


@pytest.fixture
def diagnostics():
    """Empty diagnostics list for field validators."""
    return []
