"""Pydantic envelopes returned by the fixer_client service."""
from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ErrorCode(str, Enum):
    BAD_INPUT = "BAD_INPUT"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    INTERNAL = "INTERNAL"


class ErrorBody(BaseModel):
    code: ErrorCode
    message: str
    source: str = "fixer_client"
    retriable: bool = False
    details: Optional[Dict[str, Any]] = None


class OkEnvelope(BaseModel):
    ok: bool = True
    data: Dict[str, Any]
    ts: datetime = Field(default_factory=_now)


class ErrEnvelope(BaseModel):
    ok: bool = False
    error: ErrorBody
    ts: datetime = Field(default_factory=_now)
