"""Line-oriented body parser: headings, flat lists, and paragraphs"""

import re

from mdtailor.core.models import (
    DocumentNode,
    Heading,
    ListClose,
    ListItem,
    ListKind,
    ListOpen,
    Paragraph,
)


HEADING_RE = re.compile(r'^#+')
UNORDERED_RE = re.compile(r'^- ')
ORDERED_RE = re.compile(r'^\d+\. ')


class BlockParser:
    """Single-pass parser holding one open list at most.

    A list line of a different kind closes the open list instead of nesting
    inside it; headings, paragraphs, and blank lines close it too.
    """

    def __init__(self):
        self.nodes: list[DocumentNode] = []
        self.list_stack: list[ListKind] = []

    def close_lists(self) -> None:
        while self.list_stack:
            self.nodes.append(ListClose(kind=self.list_stack.pop()))

    def _list_item(self, kind: ListKind, text: str) -> None:
        if not self.list_stack or self.list_stack[-1] != kind:
            self.close_lists()
            self.list_stack.append(kind)
            self.nodes.append(ListOpen(kind=kind))
        self.nodes.append(ListItem(text=text))

    def feed(self, line: str) -> None:
        """Classify one line and emit its nodes."""
        trimmed = line.strip()

        if m := HEADING_RE.match(trimmed):
            self.close_lists()
            level = m.end()
            self.nodes.append(Heading(level=level, text=trimmed[level + 1:]))
        elif UNORDERED_RE.match(trimmed):
            self._list_item(ListKind.unordered, trimmed[2:])
        elif m := ORDERED_RE.match(trimmed):
            self._list_item(ListKind.ordered, trimmed[m.end():])
        elif not trimmed:
            self.close_lists()
        else:
            self.close_lists()
            self.nodes.append(Paragraph(text=trimmed))

    def finish(self) -> list[DocumentNode]:
        self.close_lists()
        return self.nodes


def parse_blocks(body: str) -> list[DocumentNode]:
    """Parse body text into an ordered node sequence. Never raises."""
    parser = BlockParser()
    for line in body.split("\n"):
        parser.feed(line)
    return parser.finish()
