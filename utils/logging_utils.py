"""Helpers for logging request payloads without leaking personal data."""

from typing import Any, Dict, Iterable, Mapping


def mask_value(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    if "@" in value:  # email
        name, _, domain = value.partition("@")
        return (name[:2] + "***@" + domain) if name else "***@" + domain
    if len(value) > 12:
        return value[:4] + "..." + value[-4:]
    return "***"


def sanitize_payload(payload: Mapping, allowed_keys: Iterable[str], visible_keys: Iterable[str] = ()) -> Dict:
    """
    Return a filtered copy of payload with only allowed keys.

    Values are masked unless their key is listed in ``visible_keys``.
    """
    visible = set(visible_keys)
    result = {}
    for key in allowed_keys:
        if key in payload:
            value = payload[key]
            result[key] = value if key in visible else mask_value(value)
    return result
