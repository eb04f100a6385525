import pytest
import requests

from recipe_scraper.errors import FetchError, ScrapeStage
from recipe_scraper.ingest import fetch
from recipe_scraper.ingest.fetch import fetch_url


class DummyResponse:
    def __init__(self, content=b"", status_code=200, url="https://example.com/recipe"):
        self.content = content
        self.status_code = status_code
        self.url = url

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class DummySession:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        return self.response


def test_fetch_returns_body_bytes_and_sends_user_agent(monkeypatch):
    seen = {}

    def fake_get(url, headers=None, timeout=None, allow_redirects=None):
        seen.update(url=url, headers=headers, timeout=timeout, allow_redirects=allow_redirects)
        return DummyResponse(b"<html>ok</html>")

    monkeypatch.setattr(fetch.requests, "get", fake_get)
    monkeypatch.setattr(fetch.settings, "USER_AGENT", "test-agent/1.0")
    monkeypatch.setattr(fetch.settings, "REQUEST_TIMEOUT", 7.0)

    assert fetch_url("https://example.com/recipe") == b"<html>ok</html>"
    assert seen["headers"] == {"User-Agent": "test-agent/1.0"}
    assert seen["timeout"] == 7.0
    assert seen["allow_redirects"] is True


def test_fetch_uses_injected_session_and_timeout():
    session = DummySession(DummyResponse(b"data"))
    assert fetch_url("https://example.com", timeout=3, session=session) == b"data"
    url, kwargs = session.calls[0]
    assert url == "https://example.com"
    assert kwargs["timeout"] == 3


def test_empty_body_is_not_an_error():
    session = DummySession(DummyResponse(b""))
    assert fetch_url("https://example.com/empty", session=session) == b""


def test_http_error_status_raises_fetch_error():
    session = DummySession(DummyResponse(b"missing", status_code=404))
    with pytest.raises(FetchError) as excinfo:
        fetch_url("https://example.com/missing", session=session)
    assert excinfo.value.stage is ScrapeStage.FETCHING
    assert isinstance(excinfo.value.__cause__, requests.HTTPError)


def test_connection_error_raises_fetch_error(monkeypatch):
    def fake_get(url, **kwargs):
        raise requests.ConnectionError("not connected to internet")

    monkeypatch.setattr(fetch.requests, "get", fake_get)
    with pytest.raises(FetchError) as excinfo:
        fetch_url("https://example.com")
    assert "not connected" in str(excinfo.value)


def test_url_without_scheme_raises_fetch_error():
    with pytest.raises(FetchError) as excinfo:
        fetch_url("not a url")
    assert isinstance(excinfo.value.__cause__, requests.exceptions.MissingSchema)
