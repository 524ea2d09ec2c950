"""Shared fixtures: a recording stand-in for requests.Session."""

import json

import pytest
import requests

import api_client
from utils.token_store import StaticTokenProvider


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        if text is not None:
            self.content = text.encode("utf-8")
        elif body is not None:
            self.content = json.dumps(body).encode("utf-8")
        else:
            self.content = b""

    @property
    def text(self):
        return self.content.decode("utf-8")

    def json(self):
        return json.loads(self.content)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    """Records every call; answers with `response` or raises `error`."""

    def __init__(self, response=None, error=None):
        self.response = response if response is not None else FakeResponse(body={})
        self.error = error
        self.calls = []

    def _call(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response

    def get(self, url, **kwargs):
        return self._call("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._call("POST", url, **kwargs)

    def put(self, url, **kwargs):
        return self._call("PUT", url, **kwargs)

    def delete(self, url, **kwargs):
        return self._call("DELETE", url, **kwargs)

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def client(session):
    return api_client.APIClient(
        "https://api.example.com", token_provider=StaticTokenProvider("abc123"), session=session
    )


@pytest.fixture
def tokenless_client(session):
    return api_client.APIClient(
        "https://api.example.com", token_provider=StaticTokenProvider(None), session=session
    )


@pytest.fixture(autouse=True)
def reset_default_client(monkeypatch):
    monkeypatch.setattr(api_client, "_client", None)
