"""Pytest configuration and fixtures for tagcheck tests."""

import pytest

from sample_models import valid_user
from tagcheck.config import ValidatorConfig
from tagcheck.rules import RuleTable
from tagcheck.validator import Validator
from tagcheck.walker import GraphWalker


@pytest.fixture
def config():
    """Default configuration."""
    return ValidatorConfig()


@pytest.fixture
def rule_table():
    """Fresh built-in rule table."""
    return RuleTable()


@pytest.fixture
def walker(config, rule_table):
    """Walker with default tag keys."""
    return GraphWalker(config, rule_table)


@pytest.fixture
def validator():
    """Validator with default (zh) messages."""
    return Validator()


@pytest.fixture
def en_validator():
    """Validator with English messages."""
    return Validator(ValidatorConfig(locale="en"))


@pytest.fixture
def user():
    """A fully valid User graph."""
    return valid_user()


def pytest_collection_modifyitems(config, items):
    """Mark integration tests."""
    for item in items:
        if "integration" in item.nodeid.lower():
            item.add_marker(pytest.mark.integration)
