"""Pytest configuration and shared fixtures."""

import pytest

from tests.fakes import LONDON, FakeGeocoder, InMemoryDirectory, RecordingReply


@pytest.fixture
def london():
    return LONDON


@pytest.fixture
def geocoder():
    return FakeGeocoder()


@pytest.fixture
def directory():
    return InMemoryDirectory()


@pytest.fixture
def reply():
    return RecordingReply()
