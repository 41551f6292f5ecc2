"""Render a node sequence into a tree of caller-supplied components"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from mdtailor.core.models import (
    Blank,
    DocumentNode,
    Heading,
    ListClose,
    ListItem,
    ListKind,
    ListOpen,
    Paragraph,
)


@dataclass(frozen=True)
class ComponentSet:
    """One factory per node kind. Every factory takes key and children keywords;
    heading also receives level. List factories get their item instances as children."""
    heading:        Callable[..., Any]
    unordered_list: Callable[..., Any]
    ordered_list:   Callable[..., Any]
    list_item:      Callable[..., Any]
    paragraph:      Callable[..., Any]

    def list_factory(self, kind: ListKind) -> Callable[..., Any]:
        return self.unordered_list if kind == ListKind.unordered else self.ordered_list


def render_components(nodes: Iterable[DocumentNode], components: ComponentSet) -> list[Any]:
    """Build component instances in document order.

    List items are keyed ``list-item-<n>`` from their own counter; all other
    instances are keyed ``node-<n>``, so adding or moving list items leaves
    sibling keys unchanged.
    """
    tree: list[Any] = []
    items: Optional[list[Any]] = None
    node_index = 0
    item_index = 0

    def node_key() -> str:
        nonlocal node_index
        key = f"node-{node_index}"
        node_index += 1
        return key

    for node in nodes:
        if isinstance(node, ListOpen):
            if items is not None:
                raise ValueError("List opened inside another list")
            items = []
        elif isinstance(node, ListItem):
            if items is None:
                raise ValueError("List item outside a list")
            items.append(components.list_item(key=f"list-item-{item_index}", children=node.text))
            item_index += 1
        elif isinstance(node, ListClose):
            if items is None:
                raise ValueError("List closed without being opened")
            tree.append(components.list_factory(node.kind)(key=node_key(), children=items))
            items = None
        elif isinstance(node, Heading):
            tree.append(components.heading(level=node.level, key=node_key(), children=node.text))
        elif isinstance(node, Paragraph):
            tree.append(components.paragraph(key=node_key(), children=node.text))
        elif isinstance(node, Blank):
            continue
        else:
            raise TypeError(f"Unsupported node type: {type(node).__name__}")

    if items is not None:
        raise ValueError("List left open at end of sequence")
    return tree
