"""Redaction of sensitive fields in logged request/response bodies."""

import json
from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "checksum",
    "merchantsecretkey",
    "sessiontoken",
    "cardnumber",
    "cccardnumber",
    "cvv",
    "cctemptoken",
    "cardtoken",
    "password",
    "authorization",
})

REDACTED_VALUE = "[REDACTED]"


def redact_payload(payload: Any) -> Any:
    """Recursively redact sensitive keys.

    Creates a new structure - the original payload is never mutated.
    Key matching is case-insensitive.

    Args:
        payload: Decoded JSON value (dict, list or scalar).

    Returns:
        A copy with sensitive values replaced by "[REDACTED]".
    """
    if isinstance(payload, dict):
        result = {}
        for key, value in payload.items():
            key_lower = key.lower() if isinstance(key, str) else key
            if key_lower in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = redact_payload(value)
        return result
    elif isinstance(payload, list):
        return [redact_payload(item) for item in payload]
    else:
        return payload


def redact_json(body: str) -> str:
    """Redact a JSON document for logging.

    Bodies that are not valid JSON are returned unchanged.
    """
    try:
        decoded = json.loads(body)
    except ValueError:
        return body
    return json.dumps(redact_payload(decoded), separators=(",", ":"))
