"""Tests for downloading the ECB document."""

import pytest
import requests

from core.config import DEFAULT_ECB_URL
from core.errors import UpstreamError
from core.fx_rates import fetch_ecb_document, load_ecb_document


class FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.content = text.encode("utf-8")
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")


@pytest.fixture
def calls(monkeypatch):
    recorded = []

    def install(response=None, error=None):
        def fake_get(url, timeout=None):
            recorded.append({"url": url, "timeout": timeout})
            if error is not None:
                raise error
            return response

        monkeypatch.setattr(requests, "get", fake_get)
        return recorded

    return install


class TestFetch:
    def test_returns_body(self, calls, sample_xml):
        recorded = calls(FakeResponse(sample_xml))
        assert fetch_ecb_document() == sample_xml
        assert recorded == [{"url": DEFAULT_ECB_URL, "timeout": 20.0}]

    def test_url_and_timeout_from_env(self, calls, monkeypatch):
        monkeypatch.setenv("ECB_URL", " http://mirror.test/hist.xml ")
        monkeypatch.setenv("ECB_HTTP_TIMEOUT_SECONDS", "3.5")
        recorded = calls(FakeResponse("<Cube/>"))
        fetch_ecb_document()
        assert recorded == [{"url": "http://mirror.test/hist.xml", "timeout": 3.5}]

    def test_invalid_timeout(self, calls, monkeypatch):
        monkeypatch.setenv("ECB_HTTP_TIMEOUT_SECONDS", "0")
        calls(FakeResponse("<Cube/>"))
        with pytest.raises(ValueError):
            fetch_ecb_document()

    def test_http_error_status(self, calls):
        calls(FakeResponse("oops", status_code=503))
        with pytest.raises(UpstreamError):
            fetch_ecb_document()

    def test_timeout(self, calls):
        calls(error=requests.Timeout("read timed out"))
        with pytest.raises(UpstreamError) as info:
            fetch_ecb_document()
        assert isinstance(info.value.__cause__, requests.Timeout)

    def test_single_attempt(self, calls):
        recorded = calls(error=requests.ConnectionError("refused"))
        with pytest.raises(UpstreamError):
            fetch_ecb_document()
        assert len(recorded) == 1

    def test_load_parses(self, calls, sample_xml):
        calls(FakeResponse(sample_xml))
        root = load_ecb_document()
        assert root.tag.endswith("Envelope")
