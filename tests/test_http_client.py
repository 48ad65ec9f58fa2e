from __future__ import annotations

import json

import pytest
import requests

from geo_services.providers import http as http_mod
from geo_services.providers.http import HTTPClient


class FakeResp:
    """Minimal fake response matching needed parts of requests.Response."""

    def __init__(self, status_code=200, data=None):
        self.status_code = status_code
        self._data = data if data is not None else {}

    def json(self):
        return self._data

    @property
    def text(self):
        return json.dumps(self._data)

    def raise_for_status(self):
        if 400 <= self.status_code:
            raise requests.exceptions.HTTPError(response=self)


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    monkeypatch.setattr(http_mod.time, "sleep", lambda s: None)


def test_retries_dropped_connections(monkeypatch):
    client = HTTPClient(user_agent="test", tries=3)
    calls = {"count": 0}

    def fake_get(url, params=None, headers=None, timeout=None):
        calls["count"] += 1
        if calls["count"] < 3:
            raise requests.exceptions.ConnectionError("reset")
        return FakeResp(200, {"ok": True, "params": params})

    monkeypatch.setattr(client.s, "get", fake_get)
    assert client.get_json("http://x", params={"a": 1}) == {"ok": True, "params": {"a": 1}}
    assert calls["count"] == 3


def test_gives_up_after_tries(monkeypatch):
    client = HTTPClient(user_agent="test", tries=2)

    def fake_get(url, params=None, headers=None, timeout=None):
        raise requests.exceptions.ReadTimeout("slow")

    monkeypatch.setattr(client.s, "get", fake_get)
    with pytest.raises(requests.exceptions.ReadTimeout):
        client.get_json("http://x")


def test_error_status(monkeypatch):
    client = HTTPClient(user_agent="test")
    monkeypatch.setattr(client.s, "get", lambda *a, **kw: FakeResp(400, {"error": {"code": "X"}}))

    with pytest.raises(requests.exceptions.HTTPError):
        client.get_json("http://x")
    assert client.get_json("http://x", raise_for_status=False) == {"error": {"code": "X"}}


def test_session_headers():
    client = HTTPClient(user_agent="geo-test/1.0")
    assert client.s.headers["User-Agent"] == "geo-test/1.0"
