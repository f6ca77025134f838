from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, Request

from .client import ExchangeRateClient
from .errors import ConfigurationError, UpstreamError
from .models import OkEnvelope
from .settings import Settings, get_settings

router = APIRouter()


def get_transport(request: Request):
    # created once in the app lifespan, shared by every request
    transport = getattr(request.app.state, "transport", None)
    if transport is None:
        raise ConfigurationError("HTTP transport is not initialised")
    return transport


def get_client(
    transport=Depends(get_transport), settings: Settings = Depends(get_settings)
) -> ExchangeRateClient:
    return ExchangeRateClient(
        settings.FIXER_API_KEY,
        transport,
        default_base=settings.FIXER_DEFAULT_BASE,
        endpoint=settings.endpoint,
    )


def ok(data: Dict[str, Any]) -> OkEnvelope:
    return OkEnvelope(data=data)


@router.get("/latest", response_model=OkEnvelope)
def latest(
    symbols: Optional[str] = Query(None, description="CSV list, e.g. USD,EUR"),
    base: Optional[str] = Query(None),
    client: ExchangeRateClient = Depends(get_client),
):
    return ok(client.latest({"symbols": symbols, "base": base}))


@router.get("/historical/{day}", response_model=OkEnvelope)
def historical(
    day: str,
    symbols: Optional[str] = Query(None),
    base: Optional[str] = Query(None),
    client: ExchangeRateClient = Depends(get_client),
):
    return ok(client.on_this_day({"start_date": day, "symbols": symbols, "base": base}))


@router.get("/convert", response_model=OkEnvelope)
def convert(
    from_: str = Query(..., alias="from", min_length=1),
    to: str = Query(..., min_length=1),
    amount: float = Query(1.0),
    date: Optional[str] = Query(None, description="YYYY-MM-DD; latest rates when omitted"),
    client: ExchangeRateClient = Depends(get_client),
):
    """
    Offline conversion against a single snapshot, for plans without the
    paid convert endpoint. Only the two requested symbols are fetched.
    """
    f = from_.strip().upper()
    t = to.strip().upper()
    params = {"symbols": [f, t]}
    if date:
        snapshot = client.on_this_day({"start_date": date, **params})
    else:
        snapshot = client.latest(params)
    if not snapshot.get("success"):
        raise UpstreamError("fixer rate lookup failed", details=snapshot.get("error"))
    return ok(client.hack_convert(snapshot, f, t, amount))


@router.get("/symbols", response_model=OkEnvelope)
def symbols(client: ExchangeRateClient = Depends(get_client)):
    return ok(client.symbols())
