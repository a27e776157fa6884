"""Shared test fixtures."""

import pendulum
import pytest

from pycoerce.format import formatters


@pytest.fixture
def instant():
    return pendulum.datetime(1998, 4, 25, tz="UTC")


@pytest.fixture
def precise_instant():
    return pendulum.datetime(1998, 4, 25, 13, 45, 30, 123000, tz="UTC")


@pytest.fixture
def restore_formatters():
    saved = dict(formatters)
    yield
    formatters.clear()
    formatters.update(saved)

