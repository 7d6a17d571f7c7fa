"""UI tree traversal - capability-based walking of mixed node kinds.

Main components:
- nodes: NodeKind, ChildRelation, NodeCapabilities, NodeAdapter, Node
- walker: iter_tree and walk
"""

from infrastructure.ui.nodes import (
    ATTACHED_RELATIONS,
    DEFAULT_ADAPTER,
    TEXT_EXEMPT_KINDS,
    AttributeNodeAdapter,
    ChildRelation,
    Node,
    NodeAdapter,
    NodeCapabilities,
    NodeKind,
    relations_for,
)
from infrastructure.ui.walker import iter_tree, walk

__all__ = [
    "ATTACHED_RELATIONS",
    "DEFAULT_ADAPTER",
    "TEXT_EXEMPT_KINDS",
    "AttributeNodeAdapter",
    "ChildRelation",
    "Node",
    "NodeAdapter",
    "NodeCapabilities",
    "NodeKind",
    "relations_for",
    "iter_tree",
    "walk",
]
