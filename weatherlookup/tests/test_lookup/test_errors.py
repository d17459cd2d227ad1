"""Tests for lookup error classification."""

import httpx

from weatherlookup.forecast.labels import EN, ID
from weatherlookup.lookup.errors import LookupFailure, classify_error
from weatherlookup.models.common import ErrorKind


def _status_error(code: int) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "https://test-owm.example.com/weather")
    response = httpx.Response(code, request=request)
    return httpx.HTTPStatusError(f"{code}", request=request, response=response)


class TestClassifyError:
    def test_unauthorized(self):
        assert classify_error(_status_error(401)).kind == ErrorKind.UNAUTHORIZED

    def test_not_found(self):
        assert classify_error(_status_error(404)).kind == ErrorKind.NOT_FOUND

    def test_rate_limited(self):
        assert classify_error(_status_error(429)).kind == ErrorKind.RATE_LIMITED

    def test_other_status_is_unexpected(self):
        failure = classify_error(_status_error(500))
        assert failure.kind == ErrorKind.UNEXPECTED
        assert failure.detail == "HTTP Error: 500"

    def test_connect_error(self):
        exc = httpx.ConnectError("refused")
        assert classify_error(exc).kind == ErrorKind.NETWORK_UNREACHABLE

    def test_timeout(self):
        exc = httpx.ReadTimeout("slow")
        assert classify_error(exc).kind == ErrorKind.NETWORK_UNREACHABLE

    def test_anything_else(self):
        failure = classify_error(ValueError("bad json"))
        assert failure.kind == ErrorKind.UNEXPECTED
        assert failure.detail == "bad json"

    def test_passthrough(self):
        original = LookupFailure(ErrorKind.NOT_FOUND, "Atlantis")
        assert classify_error(original) is original


class TestMessages:
    def test_not_found_names_query(self):
        failure = LookupFailure(ErrorKind.NOT_FOUND)
        assert failure.message(EN, "Atlantis") == "Location 'Atlantis' not found"
        assert failure.message(ID, "Atlantis") == "Lokasi 'Atlantis' tidak ditemukan"

    def test_unexpected_includes_detail(self):
        failure = LookupFailure(ErrorKind.UNEXPECTED, "HTTP Error: 500")
        assert failure.message(EN) == "Unexpected error: HTTP Error: 500"

    def test_fixed_messages(self):
        assert LookupFailure(ErrorKind.UNAUTHORIZED).message(EN) == "Invalid API key"
        assert "internet" in LookupFailure(ErrorKind.NETWORK_UNREACHABLE).message(EN)
        assert "coba lagi" in LookupFailure(ErrorKind.RATE_LIMITED).message(ID)
