"""JSON Pointer (RFC 6901) helpers used for resolution reports.

Root is ``""`` (empty string); each level appends ``"/{token}"`` with ``~``
escaped as ``~0`` and ``/`` escaped as ``~1``.
"""

from __future__ import annotations

__all__ = ["ROOT", "join"]

ROOT = ""


def _escape(token: str) -> str:
    # Order matters: "~" first so the "~1" we produce is not re-escaped.
    return token.replace("~", "~0").replace("/", "~1")


def join(path: str, token: str | int) -> str:
    """Append one reference token to a JSON Pointer."""
    return f"{path}/{_escape(str(token))}"
