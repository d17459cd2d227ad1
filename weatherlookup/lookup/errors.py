"""Lookup error taxonomy and classification of transport failures."""

import httpx

from weatherlookup.forecast.labels import EN, Labels
from weatherlookup.models.common import ErrorKind

STATUS_KINDS = {
    401: ErrorKind.UNAUTHORIZED,
    404: ErrorKind.NOT_FOUND,
    429: ErrorKind.RATE_LIMITED,
}


class LookupFailure(Exception):
    def __init__(self, kind: ErrorKind, detail: str = ""):
        super().__init__(f"{kind}: {detail}" if detail else str(kind))
        self.kind = kind
        self.detail = detail

    def message(self, labels: Labels = EN, query: str = "") -> str:
        """User-facing message; not-found names the looked-up place."""
        if self.kind == ErrorKind.NOT_FOUND:
            return labels.error(self.kind, query or self.detail)
        return labels.error(self.kind, self.detail)


def classify_error(exc: Exception) -> LookupFailure:
    """Map an exception raised during the primary call to a LookupFailure."""
    if isinstance(exc, LookupFailure):
        return exc
    if isinstance(exc, httpx.HTTPStatusError):
        code = exc.response.status_code
        kind = STATUS_KINDS.get(code)
        if kind is not None:
            return LookupFailure(kind)
        return LookupFailure(ErrorKind.UNEXPECTED, f"HTTP Error: {code}")
    # TimeoutException is a RequestError subclass
    if isinstance(exc, httpx.RequestError):
        return LookupFailure(ErrorKind.NETWORK_UNREACHABLE, str(exc))
    return LookupFailure(ErrorKind.UNEXPECTED, str(exc))
