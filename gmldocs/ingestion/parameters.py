"""Parse the Argument/Description table of a function page."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from bs4.element import Tag
from pydantic import BaseModel, Field

from gmldocs.models.docs import UNBOUNDED_PARAMETERS, DocParam
from gmldocs.models.draft import FunctionDraft
from gmldocs.models.report import FailureReport
from gmldocs.utils.markup import STRUCTURAL_ERRORS, text_of

logger = logging.getLogger(__name__)

ARGUMENT_HEADER = "Argument"
DESCRIPTION_HEADER = "Description"
ELLIPSIS_TOKENS = ("...", "…")


class ParameterScan(BaseModel):
    """Parameters read from every argument table on a page."""

    parameters: List[DocParam] = Field(default_factory=list)
    variadic_index: Optional[int] = None


def is_variadic_label(label: str) -> bool:
    return any(token in label for token in ELLIPSIS_TOKENS)


def _cell_text(cell: Tag) -> str:
    return "".join(text_of(child) for child in cell.contents)


def _scan_body(body: Tag, scan: ParameterScan) -> None:
    found_argument = False
    found_description = False
    for row in body.children:
        if getattr(row, "name", None) != "tr":
            continue
        label = ""
        documentation = ""
        is_parameter = False
        for cell in row.children:
            cell_name = getattr(cell, "name", None)
            if cell_name == "th":
                header = text_of(cell).strip()
                if header == ARGUMENT_HEADER:
                    found_argument = True
                elif header == DESCRIPTION_HEADER:
                    found_description = True
                continue
            if cell_name != "td" or not (found_argument and found_description):
                continue
            is_parameter = True
            output = _cell_text(cell)
            if not label:
                label = output
            else:
                documentation = output

        if not is_parameter:
            continue
        if is_variadic_label(label):
            scan.variadic_index = len(scan.parameters)
        scan.parameters.append(DocParam(label=label, documentation=documentation))


def parse_parameter_tables(tables: Iterable[Tag], name: str, report: FailureReport) -> ParameterScan:
    """Collect parameters from every table that carries the argument headers.

    Tables without both header cells contribute nothing. When more than one
    table marks a variadic row, the last one scanned decides the minimum.
    """
    scan = ParameterScan()
    for table in tables:
        try:
            for body in table.children:
                if getattr(body, "name", None) == "tbody":
                    _scan_body(body, scan)
        except STRUCTURAL_ERRORS as exc:
            logger.debug("Parameter table of %s is malformed: %s", name, exc)
            report.flag_suspect(name)
    return scan


def apply_parameter_scan(draft: FunctionDraft, scan: ParameterScan) -> FunctionDraft:
    updates = {"parameters": scan.parameters}
    if scan.variadic_index is not None:
        updates["max_parameters"] = UNBOUNDED_PARAMETERS
        updates["min_parameters"] = scan.variadic_index
    return draft.model_copy(update=updates)
