"""Read a page's Syntax block into a name, kind and parameter arity."""

from __future__ import annotations

from typing import Optional, Tuple

from bs4.element import PageElement

from gmldocs.models.draft import Signature
from gmldocs.utils.markup import children_of, text_of


def infer_arity(signature: str, italic_index: Optional[int] = None) -> Tuple[int, int]:
    """Return ``(min_parameters, max_parameters)`` for a function signature.

    Optional arguments are written in square brackets, so the number of commas
    seen before the first ``[`` is the count of required arguments. A few
    pages mark optional arguments in italics instead; ``italic_index`` is the
    fallback for those.
    """
    commas = 0
    optional_from: Optional[int] = None
    for char in signature:
        if char == ",":
            commas += 1
        elif char == "[" and optional_from is None:
            optional_from = commas

    if commas:
        maximum = commas + 1
    elif "()" in signature:
        maximum = 0
    else:
        maximum = 1

    if optional_from is not None:
        minimum = optional_from
    elif italic_index is not None:
        minimum = italic_index
    else:
        minimum = maximum
    return minimum, maximum


def parse_signature(content: PageElement) -> Signature:
    """Build a ``Signature`` from the block following the Syntax heading."""
    text = ""
    italic_index: Optional[int] = None
    for index, child in enumerate(children_of(content)):
        text += text_of(child).strip()
        if getattr(child, "name", None) == "i" and italic_index is None:
            italic_index = index

    if "(" in text:
        minimum, maximum = infer_arity(text, italic_index)
        return Signature(
            kind="function",
            text=text,
            name=text[: text.index("(")],
            min_parameters=minimum,
            max_parameters=maximum,
        )

    name = text[: text.index(";")] if ";" in text else text
    return Signature(kind="variable", text=text, name=name)
