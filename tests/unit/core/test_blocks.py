"""Unit tests for core/blocks.py"""

import pytest

from mdtailor.core.blocks import parse_blocks
from mdtailor.core.models import (
    Heading,
    ListClose,
    ListItem,
    ListKind,
    ListOpen,
    Paragraph,
)


UL = ListKind.unordered
OL = ListKind.ordered


def _assert_lists_balanced(nodes):
    """Every ListOpen has one matching ListClose; items only appear inside."""
    open_kind = None
    for node in nodes:
        if isinstance(node, ListOpen):
            assert open_kind is None
            open_kind = node.kind
        elif isinstance(node, ListClose):
            assert open_kind == node.kind
            open_kind = None
        elif isinstance(node, ListItem):
            assert open_kind is not None
    assert open_kind is None


def test_heading_example():
    """'### Title' is a level-3 heading."""
    assert parse_blocks("### Title") == [Heading(level=3, text="Title")]


@pytest.mark.parametrize("hashes", [6, 7, 12])
def test_heading_level_is_unbounded(hashes):
    """Heading level is the run length of '#', with no cap at 6."""
    nodes = parse_blocks("#" * hashes + " Deep")
    assert nodes == [Heading(level=hashes, text="Deep")]


@pytest.mark.parametrize("line,expected", [
    ("#",              Heading(level=1, text="")),
    ("#  Two spaces",  Heading(level=1, text=" Two spaces")),
    ("   ## Indented", Heading(level=2, text="Indented")),
    ("#tight",         Heading(level=1, text="ight")),
])
def test_heading_text_skips_one_separator(line, expected):
    """Text starts one character after the '#' run, whatever that character is."""
    assert parse_blocks(line) == [expected]


def test_unordered_list():
    """Consecutive '- ' lines form one unordered list."""
    assert parse_blocks("- a\n- b\n- c") == [
        ListOpen(kind=UL), ListItem(text="a"), ListItem(text="b"), ListItem(text="c"), ListClose(kind=UL),
    ]


def test_ordered_list_discards_numbers():
    """Ordered items keep only the text; numbering is not checked."""
    assert parse_blocks("3. three\n10. ten\n1. one") == [
        ListOpen(kind=OL), ListItem(text="three"), ListItem(text="ten"), ListItem(text="one"), ListClose(kind=OL),
    ]


def test_switching_kind_closes_list():
    """A '1. ' line after '- ' lines closes the unordered list and opens an ordered one."""
    assert parse_blocks("- a\n- b\n1. c\n2. d") == [
        ListOpen(kind=UL), ListItem(text="a"), ListItem(text="b"), ListClose(kind=UL),
        ListOpen(kind=OL), ListItem(text="c"), ListItem(text="d"), ListClose(kind=OL),
    ]


def test_blank_closes_lists():
    """A blank line closes the list and emits no node of its own."""
    assert parse_blocks("- a\n- b\n\nc") == [
        ListOpen(kind=UL), ListItem(text="a"), ListItem(text="b"), ListClose(kind=UL), Paragraph(text="c"),
    ]


def test_blank_between_items_starts_new_list():
    """Items separated by a blank line land in two lists of the same kind."""
    assert parse_blocks("- a\n\n- b") == [
        ListOpen(kind=UL), ListItem(text="a"), ListClose(kind=UL),
        ListOpen(kind=UL), ListItem(text="b"), ListClose(kind=UL),
    ]


def test_heading_and_paragraph_close_lists():
    """Headings and paragraphs close any open list first."""
    assert parse_blocks("- a\n# H\n1. b\npara") == [
        ListOpen(kind=UL), ListItem(text="a"), ListClose(kind=UL),
        Heading(level=1, text="H"),
        ListOpen(kind=OL), ListItem(text="b"), ListClose(kind=OL),
        Paragraph(text="para"),
    ]


def test_list_closed_at_end_of_input():
    """A list still open at the end is closed."""
    nodes = parse_blocks("- last")
    assert nodes[-1] == ListClose(kind=UL)


@pytest.mark.parametrize("line", ["-no space", "1.no space", "1) paren", "* star", "-"])
def test_near_miss_list_lines_are_paragraphs(line):
    """Lines that only resemble list markers degrade to paragraphs."""
    assert parse_blocks(line) == [Paragraph(text=line)]


def test_lines_are_trimmed():
    """Indentation and trailing whitespace, including CR, are stripped."""
    assert parse_blocks("  - a  \r\n\tplain text \r\n") == [
        ListOpen(kind=UL), ListItem(text="a"), ListClose(kind=UL), Paragraph(text="plain text"),
    ]


@pytest.mark.parametrize("body", ["", "\n", "\n\n   \n"])
def test_blank_body(body):
    """Whitespace-only bodies produce no nodes."""
    assert parse_blocks(body) == []


def test_list_invariant_on_mixed_body():
    """Open/close pairs stay balanced across a body mixing every line type."""
    body = "\n".join([
        "# Title", "- a", "1. b", "- c", "", "text", "2. d", "### Sub", "- e", "- f", "#x", "9. g",
    ])
    _assert_lists_balanced(parse_blocks(body))


def test_end_to_end_body():
    """The body of the sample document parses to a heading and one list."""
    assert parse_blocks("\n# Hi\n- one\n- two\n") == [
        Heading(level=1, text="Hi"),
        ListOpen(kind=UL), ListItem(text="one"), ListItem(text="two"), ListClose(kind=UL),
    ]
