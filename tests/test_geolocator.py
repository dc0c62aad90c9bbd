import logging
from unittest.mock import MagicMock

import pytest
import requests

from enrichment.geolocator import GeoLocator, UNKNOWN_LOCATION


def make_response(status=200, body=None, json_error=None):
    response = MagicMock()
    response.status_code = status
    if status >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(f"{status} Error")
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def locator(session):
    return GeoLocator(endpoint="http://geo.example/json/", timeout=2, session=session)


def test_returns_country(locator, session):
    session.get.return_value = make_response(body={"status": "success", "country": "Germany"})

    assert locator.locate("203.0.113.7") == "Germany"
    session.get.assert_called_once_with("http://geo.example/json/203.0.113.7", timeout=2)


def test_endpoint_without_trailing_slash(session):
    locator = GeoLocator(endpoint="http://geo.example/json", timeout=2, session=session)

    assert locator.build_url("8.8.8.8") == "http://geo.example/json/8.8.8.8"


def test_network_error_degrades_to_unknown(locator, session, caplog):
    session.get.side_effect = requests.exceptions.ConnectionError("unreachable")

    with caplog.at_level(logging.WARNING, logger="BlockWatch"):
        assert locator.locate("203.0.113.7") == UNKNOWN_LOCATION

    assert "203.0.113.7" in caplog.text


def test_timeout_degrades_to_unknown(locator, session):
    session.get.side_effect = requests.exceptions.Timeout("slow")

    assert locator.locate("203.0.113.7") == UNKNOWN_LOCATION


def test_bad_status_degrades_to_unknown(locator, session):
    session.get.return_value = make_response(status=503)

    assert locator.locate("203.0.113.7") == UNKNOWN_LOCATION


def test_missing_country_field(locator, session):
    session.get.return_value = make_response(body={"status": "fail", "message": "reserved range"})

    assert locator.locate("203.0.113.7") == UNKNOWN_LOCATION


def test_non_string_country(locator, session):
    session.get.return_value = make_response(body={"country": None})

    assert locator.locate("203.0.113.7") == UNKNOWN_LOCATION


def test_invalid_json(locator, session):
    session.get.return_value = make_response(json_error=ValueError("Expecting value"))

    assert locator.locate("203.0.113.7") == UNKNOWN_LOCATION


def test_non_object_body(locator, session):
    session.get.return_value = make_response(body=["Germany"])

    assert locator.locate("203.0.113.7") == UNKNOWN_LOCATION


def test_close_releases_session(locator, session):
    locator.close()

    session.close.assert_called_once()


def test_explicit_zero_timeout_is_kept(session):
    locator = GeoLocator(endpoint="http://geo.example/json/", timeout=0, session=session)

    assert locator.timeout == 0
