"""Typed models shared across the importer."""

from .docs import (
    UNBOUNDED_PARAMETERS,
    DocExample,
    DocFile,
    DocFunction,
    DocParam,
    DocVariable,
    LegacyIndex,
    SpecialDocType,
)
from .draft import FunctionDraft, PageDraft, PageSections, Signature, VariableDraft
from .report import FailureReport

__all__ = [
    "DocExample",
    "DocFile",
    "DocFunction",
    "DocParam",
    "DocVariable",
    "FailureReport",
    "FunctionDraft",
    "LegacyIndex",
    "PageDraft",
    "PageSections",
    "Signature",
    "SpecialDocType",
    "UNBOUNDED_PARAMETERS",
    "VariableDraft",
]
