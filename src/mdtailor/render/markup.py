"""Render a node sequence to an HTML string"""

from typing import Iterable

from markdown_it.common.utils import escapeHtml

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


LIST_TAGS: dict[ListKind, str] = {
    ListKind.unordered: "ul",
    ListKind.ordered:   "ol",
}


def render_node(node: DocumentNode, escape: bool = False) -> str:
    """Return the markup for a single node."""
    text = getattr(node, "text", "")
    if escape:
        text = escapeHtml(text)

    if isinstance(node, Heading):
        return f"<h{node.level}>{text}</h{node.level}>"
    if isinstance(node, ListOpen):
        return f"<{LIST_TAGS[node.kind]}>"
    if isinstance(node, ListClose):
        return f"</{LIST_TAGS[node.kind]}>"
    if isinstance(node, ListItem):
        return f"<li>{text}</li>"
    if isinstance(node, Paragraph):
        return f"<p>{text}</p>"
    if isinstance(node, Blank):
        return ""
    raise TypeError(f"Unsupported node type: {type(node).__name__}")


def render_markup(nodes: Iterable[DocumentNode], escape: bool = False) -> str:
    """Concatenate node markup; text is passed through unless escape is set."""
    return "".join(render_node(n, escape) for n in nodes)
