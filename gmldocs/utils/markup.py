"""Helpers for walking manual pages parsed with BeautifulSoup.

Every manual page follows the same loose template: an ``<h3>`` heading, a
whitespace text node, then the block holding that section's content. The
extractors rely on that layout through ``content_following`` and the hop
constants below, so a template change only has to be fixed here.
"""

from __future__ import annotations

import re
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

# Sibling hops from a section heading to the node holding its content.
SYNTAX_HOPS = 2
RETURNS_HOPS = 2
DESCRIPTION_HOPS = 2
EXAMPLE_CODE_HOPS = 2
# The example's explanation paragraph sits one block after the code.
EXAMPLE_DESCRIPTION_HOPS = 4

WHITESPACE_PATTERN = re.compile(r"\s+")
LINE_TERMINATOR_PATTERN = re.compile(r"\r?\n|\r")


class PageStructureError(ValueError):
    """Raised when a page does not match the manual's template."""


STRUCTURAL_ERRORS = (PageStructureError, AttributeError, IndexError, KeyError, TypeError)


def load_page(html: str) -> BeautifulSoup:
    """Parse a page and collapse whitespace runs inside its text nodes."""
    soup = BeautifulSoup(html, "html.parser")
    for node in list(soup.find_all(string=True)):
        if is_text(node):
            collapsed = WHITESPACE_PATTERN.sub(" ", str(node))
            if collapsed != node:
                node.replace_with(NavigableString(collapsed))
    return soup


def is_text(node: Optional[PageElement]) -> bool:
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def first_text(node: Optional[PageElement]) -> Optional[NavigableString]:
    """Descend through first children until a text node is reached."""
    current = node
    while not is_text(current):
        children = getattr(current, "contents", None)
        if not children:
            return None
        current = children[0]
    return current


def text_of(node: Optional[PageElement]) -> str:
    found = first_text(node)
    return str(found) if found is not None else ""


def content_following(node: PageElement, hops: int) -> PageElement:
    """Return the sibling ``hops`` positions after ``node``."""
    current = node
    for _ in range(hops):
        current = current.next_sibling
        if current is None:
            raise PageStructureError(f"page ended {hops} siblings after <{getattr(node, 'name', '?')}>")
    return current


def children_of(node: PageElement) -> List[PageElement]:
    if not isinstance(node, Tag):
        raise PageStructureError(f"expected an element, found {type(node).__name__}")
    return list(node.contents)


def clear_line_terminators(text: str) -> str:
    return LINE_TERMINATOR_PATTERN.sub(" ", text)
