from __future__ import annotations


class FetchError(Exception):
    """A feed page could not be turned into a list of stories."""


class TransportError(FetchError):
    """The request failed: DNS, connect, timeout or a non-2xx response."""


class SchemaError(FetchError):
    """The response body is not a JSON array of stories."""


class UrlOpenError(Exception):
    """The system URL handler refused or failed to open a link."""
