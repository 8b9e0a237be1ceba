"""Extract the Description, Example and Returns sections of a page."""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Sequence

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag

from gmldocs.models.docs import DocExample
from gmldocs.models.draft import PageSections
from gmldocs.models.report import FailureReport
from gmldocs.utils.markup import (
    DESCRIPTION_HOPS,
    EXAMPLE_CODE_HOPS,
    EXAMPLE_DESCRIPTION_HOPS,
    RETURNS_HOPS,
    STRUCTURAL_ERRORS,
    children_of,
    clear_line_terminators,
    content_following,
    first_text,
    is_text,
    text_of,
)

logger = logging.getLogger(__name__)

RETURNS_LABEL = "Returns:"
# Pages with exactly this many <h3> headings keep "Returns:" in a paragraph.
RETURNS_PARAGRAPH_HEADING_COUNT = 3


def normalize_text(text: str) -> str:
    return clear_line_terminators(text).strip()


def find_heading(headings: Sequence[Tag], label: str) -> Optional[Tag]:
    for heading in headings:
        if label in text_of(heading):
            return heading
    return None


def find_headings(headings: Sequence[Tag], label: str) -> List[Tag]:
    return [heading for heading in headings if label in text_of(heading)]


def extract_returns(heading: Tag) -> str:
    return normalize_text(text_of(content_following(heading, RETURNS_HOPS)))


def scan_returns_paragraph(soup: BeautifulSoup) -> Optional[str]:
    """Find ``<p><b>Returns:</b> type</p>`` and return the type text.

    When a page repeats the label, the last paragraph with a value wins.
    """
    found: Optional[str] = None
    for paragraph in soup.find_all("p"):
        if text_of(paragraph).strip() != RETURNS_LABEL:
            continue
        if len(paragraph.contents) > 1 and is_text(paragraph.contents[1]):
            value = normalize_text(str(paragraph.contents[1]))
            if value:
                found = value
    return found


def _render_inline(node: PageElement) -> str:
    if is_text(node):
        return str(node)
    label = first_text(node)
    if label is None:
        return ""
    name = getattr(node, "name", None)
    if name == "a":
        return f"[{label}]({node['href']})"
    if name == "b":
        return f"**{label}**"
    if name == "i":
        return f"*{label}*"
    return str(label)


def iter_description_fragments(content: PageElement) -> Iterator[str]:
    """Yield the description flattened to Markdown-style inline text."""
    for child in children_of(content):
        if isinstance(child, Tag):
            for grandchild in child.contents:
                yield _render_inline(grandchild)
        elif is_text(child):
            yield str(child)


def _join_texts(nodes: List[PageElement]) -> str:
    return "".join(text_of(node) for node in nodes)


def extract_example_code(heading: Tag) -> str:
    code_block = content_following(heading, EXAMPLE_CODE_HOPS)
    return normalize_text(_join_texts(children_of(code_block)))


def extract_example_description(heading: Tag) -> str:
    explanation = content_following(heading, EXAMPLE_DESCRIPTION_HOPS)
    return normalize_text(_join_texts(children_of(explanation)))


def extract_sections(
    soup: BeautifulSoup,
    headings: Sequence[Tag],
    name: str,
    report: FailureReport,
) -> PageSections:
    """Run every section extractor, flagging ``name`` on structural failures.

    Every heading carrying a section label is read in page order, so a later
    heading overrides what an earlier one produced.
    """
    sections = PageSections()

    for description in find_headings(headings, "Description"):
        parts: List[str] = []
        try:
            for fragment in iter_description_fragments(
                content_following(description, DESCRIPTION_HOPS)
            ):
                parts.append(fragment)
        except STRUCTURAL_ERRORS as exc:
            logger.debug("Description of %s is malformed: %s", name, exc)
            report.flag_suspect(name)
        sections.documentation = normalize_text("".join(parts))

    for example in find_headings(headings, "Example"):
        try:
            # Code is kept even when the explanation paragraph is missing.
            sections.example = DocExample(code=extract_example_code(example), description="")
            sections.example.description = extract_example_description(example)
        except STRUCTURAL_ERRORS as exc:
            logger.debug("Example of %s is malformed: %s", name, exc)
            report.flag_suspect(name)

    for returns in find_headings(headings, "Returns"):
        try:
            sections.returns = extract_returns(returns)
        except STRUCTURAL_ERRORS as exc:
            logger.debug("Returns of %s is malformed: %s", name, exc)
            report.flag_suspect(name)
    if len(headings) == RETURNS_PARAGRAPH_HEADING_COUNT:
        scanned = scan_returns_paragraph(soup)
        if scanned is not None:
            sections.returns = scanned

    return sections
