"""Shared fixtures: an in-memory players API behind a requests-compatible session."""
import json
import re

import pytest
import requests

from src.core.api_client import PlayerApiClient

BASE_URL = "https://puppy.test/api/TEST-COHORT"

_PLAYER_URL = re.compile(r"/players/(?P<id>[^/]+)$")


def make_response(status_code, body=None, raw=None):
    """Build a real `requests.Response` without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    if raw is not None:
        response._content = raw
    elif body is not None:
        response._content = json.dumps(body).encode("utf-8")
    else:
        response._content = b""
    response.encoding = "utf-8"
    response.headers["Content-Type"] = "application/json"
    return response


class FakePlayersSession:
    """Stands in for `requests.Session`, serving the players endpoints from memory."""

    def __init__(self, players=None):
        self.players = list(players or [])
        self.next_id = max([p["id"] for p in self.players], default=0) + 1
        self.calls = []
        self.overrides = {}

    def fail(self, method, status_code=None, exc=None, raw=None):
        """Make every `method` request answer with an error status, raw body or exception."""
        self.overrides[method] = (status_code, exc, raw)

    def request(self, method, url, json=None, timeout=None, **kwargs):
        self.calls.append({"method": method, "url": url, "json": json, "timeout": timeout})

        if method in self.overrides:
            status_code, exc, raw = self.overrides[method]
            if exc is not None:
                raise exc
            return make_response(status_code or 200, body={"success": False}, raw=raw)

        match = _PLAYER_URL.search(url)
        if match:
            return self._single(method, match.group("id"))
        if url.endswith("/players"):
            return self._collection(method, json)
        return make_response(404, {"success": False, "error": "Not found"})

    def _collection(self, method, payload):
        if method == "GET":
            return make_response(200, {"success": True, "data": {"players": self.players}})
        if method == "POST":
            player = {
                "id": self.next_id,
                "name": payload["name"],
                "breed": payload["breed"],
                "imageUrl": payload["imageUrl"],
                "status": "bench",
                "teamId": None,
                "cohortId": 1,
            }
            self.next_id += 1
            self.players.append(player)
            return make_response(200, {"success": True, "data": {"player": player}})
        return make_response(405, {"success": False})

    def _single(self, method, raw_id):
        found = next((p for p in self.players if str(p["id"]) == raw_id), None)
        if found is None:
            return make_response(404, {"success": False, "error": "Player not found"})
        if method == "GET":
            return make_response(200, {"success": True, "data": {"player": found}})
        if method == "DELETE":
            self.players.remove(found)
            return make_response(200, {"success": True, "data": None})
        return make_response(405, {"success": False})


@pytest.fixture
def sample_players():
    return [
        {
            "id": 1,
            "name": "Rex",
            "breed": "Boxer",
            "imageUrl": "https://img.test/rex.png",
            "status": "field",
            "teamId": 7,
            "team": {"id": 7, "name": "Ruff"},
        },
        {
            "id": 2,
            "name": "Fido",
            "breed": "Lab",
            "imageUrl": "https://img.test/fido.png",
            "status": "bench",
            "teamId": None,
        },
    ]


@pytest.fixture
def fake_session(sample_players):
    return FakePlayersSession(sample_players)


@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture
def client(fake_session, base_url):
    return PlayerApiClient(base_url, session=fake_session)


@pytest.fixture
def walk():
    """Return a function that yields every component of a Dash tree."""

    def _walk(node):
        if isinstance(node, (list, tuple)):
            for child in node:
                yield from _walk(child)
            return
        if node is None or isinstance(node, (str, int, float)):
            return
        yield node
        yield from _walk(getattr(node, "children", None))

    return _walk


@pytest.fixture
def texts(walk):
    """Return a function that collects the text children of a Dash tree."""

    def _texts(node):
        found = []
        for component in walk(node):
            children = getattr(component, "children", None)
            if isinstance(children, (str, int, float)):
                found.append(str(children))
        return found

    return _texts
