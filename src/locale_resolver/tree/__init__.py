"""Tree subpackage for payload node primitives.

Re-exports the public API for the tree module:
- NodeKind: StrEnum of the three node kinds (SEQUENCE, RECORD, SCALAR)
- classify: maps any payload value to its NodeKind
"""

from locale_resolver.tree.nodes import NodeKind, classify

__all__ = ["NodeKind", "classify"]
