import pytest
import requests
import responses
from responses import matchers

from kicache.client import DEFAULT_BASE_URL, DragonBallClient, ExternalAPIError
from kicache.models import NotFoundError

GOKU_JSON = {
    "id": 1,
    "name": "Goku",
    "ki": "60.000.000",
    "maxKi": "90 Septillion",
    "race": "Saiyan",
    "gender": "Male",
    "description": "d",
    "image": "goku.webp",
    "affiliation": "Z Fighter",
    "deletedAt": None,
}


def test_fetch_returns_first_match():
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            DEFAULT_BASE_URL,
            json=[GOKU_JSON, dict(GOKU_JSON, id=2, name="Goku Jr")],
            match=[matchers.query_param_matcher({"name": "Goku"})],
        )
        ch = DragonBallClient().fetch_by_name("Goku")
    assert ch.id == 1
    assert ch.name == "Goku"
    assert ch.max_ki == "90 Santillion".replace("Santillion", "Septillion")


def test_name_is_query_encoded():
    roshi = dict(GOKU_JSON, id=13, name="Master Roshi")
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            DEFAULT_BASE_URL,
            json=[roshi],
            match=[matchers.query_param_matcher({"name": "Master Roshi"})],
        )
        ch = DragonBallClient().fetch_by_name("Master Roshi")
        assert rsps.calls[0].request.url.endswith("?name=Master+Roshi")
    assert ch.id == 13
    assert ch.name == "Master Roshi"


def test_empty_list_is_not_found():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, DEFAULT_BASE_URL, json=[])
        with pytest.raises(NotFoundError):
            DragonBallClient().fetch_by_name("Nobody")


def test_bad_status_raises():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, DEFAULT_BASE_URL, status=500)
        with pytest.raises(ExternalAPIError, match="500"):
            DragonBallClient().fetch_by_name("Goku")


def test_invalid_json_raises():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, DEFAULT_BASE_URL, body="not json")
        with pytest.raises(ExternalAPIError, match="unmarshal"):
            DragonBallClient().fetch_by_name("Goku")


def test_object_instead_of_list_raises():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, DEFAULT_BASE_URL, json={"items": []})
        with pytest.raises(ExternalAPIError):
            DragonBallClient().fetch_by_name("Goku")


def test_connection_failure_raises():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, DEFAULT_BASE_URL,
                 body=requests.ConnectionError("refused"))
        with pytest.raises(ExternalAPIError, match="request"):
            DragonBallClient().fetch_by_name("Goku")


def test_custom_base_url_is_used():
    base = "http://localhost:9999/chars"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, base, json=[GOKU_JSON])
        ch = DragonBallClient(base_url=base, timeout=1.0).fetch_by_name("Goku")
    assert ch.name == "Goku"