"""Shared fixtures."""

from unittest.mock import MagicMock

import pytest

from enrichment.geolocator import GeoLocator
from listener.pipeline import AlertPipeline


@pytest.fixture
def locator():
    fake = MagicMock(spec=GeoLocator)
    fake.locate.return_value = "Testland"
    return fake


@pytest.fixture
def notifier():
    return MagicMock()


@pytest.fixture
def emitted():
    return []


@pytest.fixture
def pipeline(locator, notifier, emitted):
    return AlertPipeline(locator=locator, notifier=notifier, emit=emitted.append)
