from __future__ import annotations

import logging
import re
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

_KEY_RE = re.compile(r"(access_key=)[^&]*")


def redact(url: str) -> str:
    return _KEY_RE.sub(r"\1***", url)


class HTTPTransport:
    """Default transport: one GET per call through a shared ``httpx.Client``.

    Returns the ``httpx.Response`` as is. Status codes are not inspected and
    nothing is retried; connection errors raise ``httpx.HTTPError``.
    """

    def __init__(self, timeout: float = 8.0, client: Optional[httpx.Client] = None):
        self.timeout = timeout
        self._client = client or httpx.Client(timeout=self.timeout)

    def __call__(self, url: str) -> httpx.Response:
        logger.debug(f"GET {redact(url)}")
        resp = self._client.get(url)
        logger.debug(f"GET {redact(url)} -> {resp.status_code}")
        return resp

    def close(self):
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *exc):
        self.close()
