"""Query string construction for Fixer requests.

Everything here is a pure function over its arguments so the ordering and
filtering rules can be tested without a client or a transport.

Order of the emitted pairs:

    access_key, base (explicit or default), <remaining caller params>

Values are inserted verbatim. They are not percent-encoded, so a value
containing ``&``, ``=`` or a space produces a broken URL; callers are
expected to pass currency codes, dates and numbers only.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Tuple

from .errors import ConfigurationError

Pair = Tuple[str, str]


def keep_param(value: Any) -> bool:
    """Filter predicate: falsy values ("", 0, None, False, []) are never sent."""
    return bool(value)


def format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


def build_params(
    api_key: str,
    params: Optional[Mapping[str, Any]] = None,
    default_base: Optional[str] = None,
    with_base: bool = True,
) -> List[Pair]:
    """Return the ordered ``(key, value)`` pairs for a request.

    An explicit truthy ``base`` wins over ``default_base``. ``with_base=False``
    stops the default from being injected (endpoints without a base). When no
    base ends up set the server default applies. A caller supplied
    ``access_key`` is ignored.
    """
    params = dict(params or {})
    pairs: List[Pair] = [("access_key", format_value(api_key))]

    explicit_base = params.pop("base", None)
    if keep_param(explicit_base):
        base = explicit_base
    else:
        base = default_base if with_base else None
    if keep_param(base):
        pairs.append(("base", format_value(base)))

    for key, value in params.items():
        if key == "access_key" or not keep_param(value):
            continue
        pairs.append((key, format_value(value)))
    return pairs


def build_query(pairs: Iterable[Pair]) -> str:
    joined = "&".join(f"{k}={v}" for k, v in pairs)
    return f"?{joined}" if joined else ""


def build_url(endpoint: str, path: Optional[str], pairs: Iterable[Pair]) -> str:
    if not path:
        raise ConfigurationError("request path is required")
    return f"{endpoint}{path}{build_query(pairs)}"
