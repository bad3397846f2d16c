"""NodeKind StrEnum and classify() for the tagged view of a payload node.

A payload is an arbitrarily nested JSON-like value.  The resolver never
probes types ad hoc; it asks ``classify()`` once per node and dispatches on
the returned ``NodeKind``.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum, auto
from typing import Any

__all__ = ["NodeKind", "classify"]


class NodeKind(StrEnum):
    """The three structural kinds of payload node.

    - SEQUENCE -> "sequence" : JSON array (list or tuple)
    - RECORD   -> "record"   : JSON object (any Mapping)
    - SCALAR   -> "scalar"   : leaf value (string, number, bool, null, other)
    """

    SEQUENCE = auto()
    RECORD = auto()
    SCALAR = auto()


def classify(value: Any) -> NodeKind:
    """Return the ``NodeKind`` of ``value``.

    Strings and bytes are scalars even though they are sequences in Python.
    """
    if isinstance(value, (list, tuple)):
        return NodeKind.SEQUENCE
    if isinstance(value, Mapping):
        return NodeKind.RECORD
    return NodeKind.SCALAR
