"""Depth-first traversal of heterogeneous UI trees.

The walker never edits tree structure. Callers may mutate the text of the
node being visited.
"""

from typing import Any, Callable, Iterator, List, Optional, Tuple

from infrastructure.ui.nodes import (
    ATTACHED_RELATIONS,
    DEFAULT_ADAPTER,
    NodeAdapter,
    NodeCapabilities,
)


def iter_tree(
    root: Any,
    adapter: Optional[NodeAdapter] = None,
) -> Iterator[Tuple[Any, NodeCapabilities]]:
    """Yield every reachable node in depth-first pre-order.

    A node's children are enumerated after the node has been yielded, so a
    consumer sees each node before any of its descendants. Nodes reached
    through an attached relation (a container's context menu) are expanded
    in place: their children are yielded, they are not.

    Args:
        root: Root node.
        adapter: Adapter for the tree representation (default: attribute access).

    Yields:
        (node, capabilities) pairs.
    """
    adapter = adapter or DEFAULT_ADAPTER
    stack: List[Tuple[Any, bool]] = [(root, True)]
    while stack:
        node, visible = stack.pop()
        capabilities = NodeCapabilities.describe(node, adapter)
        if visible:
            yield node, capabilities

        children: List[Tuple[Any, bool]] = []
        for relation in capabilities.relations:
            attached = relation in ATTACHED_RELATIONS
            children.extend((child, not attached) for child in adapter.children_of(node, relation))
        stack.extend(reversed(children))


def walk(
    root: Any,
    visit: Callable[[Any], None],
    adapter: Optional[NodeAdapter] = None,
) -> int:
    """Apply visit to root and every node reachable from it.

    Args:
        root: Root node.
        visit: Callback invoked once per node, parents before children.
        adapter: Adapter for the tree representation (default: attribute access).

    Returns:
        Number of visited nodes.

    Example:
        seen = []
        walk(form, seen.append)
    """
    count = 0
    for node, _ in iter_tree(root, adapter):
        visit(node)
        count += 1
    return count
