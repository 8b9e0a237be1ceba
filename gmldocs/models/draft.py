"""Loose per-page drafts assembled before schema validation."""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from .docs import DocExample, DocParam, SpecialDocType


class Signature(BaseModel):
    """Result of reading a page's Syntax block."""

    kind: Literal["function", "variable"]
    text: str
    name: str
    min_parameters: int = 0
    max_parameters: int = 0


class PageSections(BaseModel):
    """Narrative sections shared by both kinds of page."""

    documentation: str = ""
    example: DocExample = Field(default_factory=lambda: DocExample(code="", description=""))
    returns: str = ""


class FunctionDraft(BaseModel):
    kind: Literal["function"] = "function"
    name: str
    signature: str
    parameters: List[DocParam] = Field(default_factory=list)
    min_parameters: int = 0
    max_parameters: int = 0
    sections: PageSections = Field(default_factory=PageSections)
    link: str
    title: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """Return the draft in the shape of a ``DocFunction`` document."""
        return {
            "name": self.name,
            "signature": self.signature,
            "parameters": [param.model_dump() for param in self.parameters],
            "minParameters": self.min_parameters,
            "maxParameters": self.max_parameters,
            "example": self.sections.example.model_dump(),
            "documentation": self.sections.documentation,
            "return": self.sections.returns,
            "link": self.link,
        }


class VariableDraft(BaseModel):
    kind: Literal["variable"] = "variable"
    name: str
    sections: PageSections = Field(default_factory=PageSections)
    link: str
    title: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """Return the draft in the shape of a ``DocVariable`` document."""
        return {
            "name": self.name,
            "example": self.sections.example.model_dump(),
            "documentation": self.sections.documentation,
            "type": self.sections.returns,
            "link": self.link,
            "object": SpecialDocType.CONSTANT,
        }


PageDraft = Annotated[Union[FunctionDraft, VariableDraft], Field(discriminator="kind")]
