"""Error types raised by fixer_client.

Transport and JSON decode failures are not listed here: they propagate
unchanged from the injected transport and from ``json.loads``.
"""
from __future__ import annotations


class FixerClientError(Exception):
    pass


class ConfigurationError(FixerClientError):
    """Client was built without an API key or transport, or a request path is empty."""


class ValidationError(FixerClientError, ValueError):
    """A request or a rate snapshot is missing something the operation needs."""


class UpstreamError(FixerClientError):
    """Fixer answered with ``success: false``. Raised by the HTTP service only."""

    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.details = details
