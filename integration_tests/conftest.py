"""Pytest configuration for end-to-end tests."""

import logging

import pytest


def pytest_collection_modifyitems(items):
    """Mark everything under integration_tests/ so it can be deselected."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def quiet_store_logging(caplog):
    """Keep store INFO chatter out of failure reports."""
    caplog.set_level(logging.WARNING, logger="selffit")
