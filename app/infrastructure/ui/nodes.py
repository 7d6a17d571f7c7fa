"""Node kinds, child relations and capability descriptors for UI trees.

UI trees mix many widget types. Instead of dispatching on widget classes, each
node is classified into a set of NodeKind values; the kinds decide which child
relations are followed and whether the node's text may be translated. A node
may carry several kinds at once and every matching rule applies.

The protocol-based adapter lets the walker run over any concrete tree
representation (toolkit widgets, dicts, the bundled Node dataclass).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, FrozenSet, Iterable, List, Optional, Protocol, Sequence, Tuple


class NodeKind(str, Enum):
    """Closed set of node classifications."""

    TABULAR_LIST = "tabular-list"
    COLUMN_HEADER = "column-header"
    MENU_ITEM = "menu-item"
    MENU_BAR = "menu-bar"
    CONTEXT_MENU = "context-menu"
    GENERIC_CONTAINER = "generic-container"
    TEXT_INPUT = "text-input"
    SELECTION_LIST = "selection-list"
    CONTROL = "control"


class ChildRelation(str, Enum):
    """Named edges from a node to its children."""

    COLUMNS = "columns"
    DROP_DOWN_ITEMS = "drop_down_items"
    ITEMS = "items"
    CONTROLS = "controls"
    CONTEXT_MENU = "context_menu"


# Rule order matters: a generic container follows its controls before its
# attached context menu.
RELATIONS_BY_KIND: Tuple[Tuple[NodeKind, Tuple[ChildRelation, ...]], ...] = (
    (NodeKind.TABULAR_LIST, (ChildRelation.COLUMNS,)),
    (NodeKind.MENU_ITEM, (ChildRelation.DROP_DOWN_ITEMS,)),
    (NodeKind.MENU_BAR, (ChildRelation.ITEMS,)),
    (NodeKind.CONTEXT_MENU, (ChildRelation.ITEMS,)),
    (NodeKind.GENERIC_CONTAINER, (ChildRelation.CONTROLS, ChildRelation.CONTEXT_MENU)),
)

# Relations whose target is expanded in place: its children are walked but the
# attached node itself is not visited
ATTACHED_RELATIONS: FrozenSet[ChildRelation] = frozenset({ChildRelation.CONTEXT_MENU})

# Kinds whose text is user data and must never be translated
TEXT_EXEMPT_KINDS: FrozenSet[NodeKind] = frozenset(
    {NodeKind.TEXT_INPUT, NodeKind.SELECTION_LIST}
)


def relations_for(kinds: Iterable[NodeKind]) -> Tuple[ChildRelation, ...]:
    """Collect the child relations of every matching kind, each at most once.

    Args:
        kinds: Kinds a node belongs to.

    Returns:
        Relations in rule order without duplicates.
    """
    kinds = frozenset(kinds)
    relations: List[ChildRelation] = []
    for kind, kind_relations in RELATIONS_BY_KIND:
        if kind not in kinds:
            continue
        for relation in kind_relations:
            if relation not in relations:
                relations.append(relation)
    return tuple(relations)


class NodeAdapter(Protocol):
    """Access interface the walker needs on a concrete tree.

    Methods:
        kinds_of: Classify a node
        children_of: Enumerate a node's children along one relation
        get_text: Read the node's display text, None if it has none
        set_text: Replace the node's display text
    """

    def kinds_of(self, node: Any) -> FrozenSet[NodeKind]:
        ...

    def children_of(self, node: Any, relation: ChildRelation) -> Sequence[Any]:
        ...

    def get_text(self, node: Any) -> Optional[str]:
        ...

    def set_text(self, node: Any, text: str) -> None:
        ...


@dataclass(frozen=True)
class NodeCapabilities:
    """What a node can do, computed once per visit.

    Attributes:
        kinds: Kinds the node belongs to.
        relations: Child relations to follow, in order.
        has_text: Whether the node exposes a text field.
        is_text_exempt: Whether the node's text is user data.
    """

    kinds: FrozenSet[NodeKind]
    relations: Tuple[ChildRelation, ...]
    has_text: bool
    is_text_exempt: bool

    @property
    def is_leaf(self) -> bool:
        return not self.relations

    @property
    def is_translatable(self) -> bool:
        return self.has_text and not self.is_text_exempt

    @classmethod
    def describe(cls, node: Any, adapter: NodeAdapter) -> "NodeCapabilities":
        """Build the capability descriptor of a node.

        Args:
            node: Node to classify.
            adapter: Adapter for the node's tree representation.

        Returns:
            NodeCapabilities for the node.
        """
        kinds = frozenset(adapter.kinds_of(node))
        return cls(
            kinds=kinds,
            relations=relations_for(kinds),
            has_text=adapter.get_text(node) is not None,
            is_text_exempt=bool(kinds & TEXT_EXEMPT_KINDS),
        )


def _coerce_kinds(kinds: Iterable[Any]) -> FrozenSet[NodeKind]:
    if isinstance(kinds, (str, NodeKind)):
        kinds = (kinds,)
    return frozenset(NodeKind(kind) for kind in kinds)


@dataclass(eq=False)
class Node:
    """Plain in-memory UI tree node.

    Attributes:
        kinds: Kinds the node belongs to; a single kind or kind name is accepted.
        text: Display text, None if the node has no text field.
        name: Optional identifier, useful for debugging.
        columns: Column headers of a tabular list.
        drop_down_items: Items of a menu item's drop-down.
        items: Top-level items of a menu bar or context menu.
        controls: Child controls of a container.
        context_menu: Context menu attached to a container.
    """

    kinds: FrozenSet[NodeKind]
    text: Optional[str] = None
    name: str = ""
    columns: List["Node"] = field(default_factory=list)
    drop_down_items: List["Node"] = field(default_factory=list)
    items: List["Node"] = field(default_factory=list)
    controls: List["Node"] = field(default_factory=list)
    context_menu: Optional["Node"] = None

    def __post_init__(self):
        self.kinds = _coerce_kinds(self.kinds)

    def __repr__(self) -> str:
        kinds = ",".join(sorted(kind.value for kind in self.kinds))
        return f"Node({self.name or self.text!r}, kinds={kinds})"


def _kinds_attribute(node: Any) -> Iterable[Any]:
    return getattr(node, "kinds", ())


class AttributeNodeAdapter:
    """Adapter for trees exposing children and text as attributes.

    Child relations are read from attributes named after ChildRelation
    values ("columns", "items", "context_menu", ...). The context menu
    relation holds a single node or None; every other relation holds a
    sequence. Classification is delegated to a callable so that arbitrary
    widget objects can be mapped onto node kinds.

    Attributes:
        classify: Callable returning the kinds of a node.
        text_attr: Name of the display-text attribute.
    """

    def __init__(
        self,
        classify: Optional[Callable[[Any], Iterable[Any]]] = None,
        text_attr: str = "text",
    ):
        self.classify = classify or _kinds_attribute
        self.text_attr = text_attr

    def kinds_of(self, node: Any) -> FrozenSet[NodeKind]:
        return _coerce_kinds(self.classify(node))

    def children_of(self, node: Any, relation: ChildRelation) -> Sequence[Any]:
        value = getattr(node, relation.value, None)
        if value is None:
            return ()
        if relation is ChildRelation.CONTEXT_MENU:
            return (value,)
        return tuple(value)

    def get_text(self, node: Any) -> Optional[str]:
        text = getattr(node, self.text_attr, None)
        return text if isinstance(text, str) else None

    def set_text(self, node: Any, text: str) -> None:
        setattr(node, self.text_attr, text)


DEFAULT_ADAPTER = AttributeNodeAdapter()
