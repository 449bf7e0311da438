"""Helpers for redacting API keys from log output."""

from __future__ import annotations

import re
from typing import Any

REDACTED = "[REDACTED]"

_SENSITIVE_KEY_RE = re.compile(
    r"(authorization|token|secret|api[_-]?key|x-ibm-client-(id|secret))",
    re.IGNORECASE,
)
_KEY_VALUE_SECRET_RE = re.compile(
    r"""(?ix)
    \b
    (
      authorization|
      token|
      secret|
      api[_-]?key|
      x-ibm-client-id|
      x-ibm-client-secret
    )
    \s*[:=]\s*
    ([^\s,;&"']+)
    """
)


def sanitize_text(text: str) -> str:
    """Redact credentials embedded in plain text, such as ``apikey: abc123``."""
    return _KEY_VALUE_SECRET_RE.sub(lambda m: f"{m.group(1)}={REDACTED}", text)


def sanitize_for_logging(value: Any) -> Any:
    """Recursively redact sensitive values in nested structures."""
    if isinstance(value, dict):
        sanitized: dict[Any, Any] = {}
        for key, child in value.items():
            if _SENSITIVE_KEY_RE.search(str(key)):
                sanitized[key] = REDACTED
            else:
                sanitized[key] = sanitize_for_logging(child)
        return sanitized
    if isinstance(value, list):
        return [sanitize_for_logging(item) for item in value]
    if isinstance(value, tuple):
        return tuple(sanitize_for_logging(item) for item in value)
    if isinstance(value, str):
        return sanitize_text(value)
    return value
