from __future__ import annotations

import json
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, Dict, Mapping, Optional

from .errors import ConfigurationError, ValidationError
from .params import build_params, build_url

ENDPOINT = "http://data.fixer.io/api/"

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# (url) -> str | bytes | object exposing the body as ``.text`` or ``getContentText()``
Transport = Callable[[str], Any]


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    transport: Transport
    default_base: Optional[str] = None
    endpoint: str = ENDPOINT


def _response_text(resp: Any) -> Any:
    if isinstance(resp, (str, bytes, bytearray)):
        return resp
    get_content_text = getattr(resp, "getContentText", None)
    if callable(get_content_text):
        return get_content_text()
    return resp.text


def _iso_date(value: Any) -> str:
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    s = str(value).strip()
    if not _DATE_RE.match(s):
        raise ValidationError(f"date must be YYYY-MM-DD, got {value!r}")
    try:
        date.fromisoformat(s)
    except ValueError:
        raise ValidationError(f"not a calendar date: {value!r}") from None
    return s


def hack_convert(
    result: Mapping[str, Any], from_: str, to: str, amount: float = 1
) -> Dict[str, Any]:
    """Emulate the paid ``convert`` endpoint from an already fetched snapshot.

    Both rates in a snapshot share its base currency, so ``rates[to] /
    rates[from_]`` is the cross-rate whatever that base was. The return value
    has the same shape as a real ``convert`` response. Nothing is rounded.
    """
    if not result.get("success"):
        raise ValidationError("cannot convert from a failed rate lookup")
    rates = result.get("rates") or {}
    from_rate = rates.get(from_)
    to_rate = rates.get(to)
    if not from_rate:
        raise ValidationError(f"currency {from_} not present in rate snapshot")
    if not to_rate:
        raise ValidationError(f"currency {to} not present in rate snapshot")
    for code, value in ((from_, from_rate), (to, to_rate)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValidationError(f"rate for {code} is not a number: {value!r}")

    rate = to_rate / from_rate
    return {
        "success": True,
        "query": {"from": from_, "to": to, "amount": amount},
        "info": {"timestamp": result.get("timestamp"), "rate": rate},
        "historical": result.get("historical", False),
        "date": result.get("date"),
        "result": rate * amount,
    }


class ExchangeRateClient:
    """Fixer API client over an injected transport.

    The transport is any callable taking the full request URL and returning
    the response body, either as text or as an object with a ``.text``
    attribute (``httpx.Response``, ``requests.Response``) or a
    ``getContentText()`` method. Transport and JSON
    decode errors reach the caller unchanged.
    """

    def __init__(
        self,
        api_key: str,
        transport: Transport,
        default_base: Optional[str] = None,
        endpoint: str = ENDPOINT,
    ):
        if not api_key:
            raise ConfigurationError("api_key is required")
        if transport is None or not callable(transport):
            raise ConfigurationError("a callable transport is required")
        if not endpoint:
            raise ConfigurationError("endpoint is required")
        self._config = ClientConfig(
            api_key=api_key,
            transport=transport,
            default_base=default_base or None,
            endpoint=endpoint,
        )

    @classmethod
    def from_config(cls, config: ClientConfig) -> "ExchangeRateClient":
        return cls(config.api_key, config.transport, config.default_base, config.endpoint)

    @property
    def config(self) -> ClientConfig:
        return self._config

    def build_url(
        self, path: str, params: Optional[Mapping[str, Any]] = None, with_base: bool = True
    ) -> str:
        cfg = self._config
        pairs = build_params(cfg.api_key, params, cfg.default_base, with_base=with_base)
        return build_url(cfg.endpoint, path, pairs)

    def request(
        self, path: str, params: Optional[Mapping[str, Any]] = None, with_base: bool = True
    ) -> Dict[str, Any]:
        url = self.build_url(path, params, with_base=with_base)
        resp = self._config.transport(url)
        return json.loads(_response_text(resp))

    def latest(self, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Latest rates, e.g. ``latest({"symbols": ["USD", "GBP"]})``."""
        return self.request("latest", params)

    def on_this_day(self, params: Mapping[str, Any]) -> Dict[str, Any]:
        """Historical rates for ``params["start_date"]`` (YYYY-MM-DD)."""
        params = dict(params or {})
        start_date = params.pop("start_date", None)
        if not start_date:
            raise ValidationError("start_date is required")
        return self.request(_iso_date(start_date), params)

    def symbols(self) -> Dict[str, Any]:
        return self.request("symbols", with_base=False)

    def convert(
        self, from_: str, to: str, amount: float = 1, date: Optional[Any] = None
    ) -> Dict[str, Any]:
        """Call the paid ``convert`` endpoint. See :meth:`hack_convert` for free plans."""
        params: Dict[str, Any] = {"from": from_, "to": to, "amount": amount}
        if date:
            params["date"] = _iso_date(date)
        return self.request("convert", params, with_base=False)

    def hack_convert(
        self, result: Mapping[str, Any], from_: str, to: str, amount: float = 1
    ) -> Dict[str, Any]:
        return hack_convert(result, from_, to, amount)
