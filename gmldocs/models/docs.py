"""Committed documentation records and the final document set."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

UNBOUNDED_PARAMETERS = 9999

FUNCTION_NAME_PATTERN = r"^[A-Za-z_][A-Za-z0-9_]*$"
VARIABLE_NAME_PATTERN = r"^\S+$"


class SpecialDocType(str, Enum):
    """Marker characters used by the legacy ``fnames`` file."""

    CONSTANT = "#"
    READ_ONLY = "*"
    INSTANCE_VAR = "@"
    OBSOLETE = "&"
    SCRIPT = "!"


class DocParam(BaseModel):
    """One row of a function's argument table."""

    label: str
    documentation: str


class DocExample(BaseModel):
    """Example code block and the paragraph explaining it."""

    code: str
    description: str


class DocFunction(BaseModel):
    """A validated GML function."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., pattern=FUNCTION_NAME_PATTERN)
    signature: str = Field(..., min_length=3, pattern=r"\(")
    parameters: List[DocParam]
    min_parameters: int = Field(..., ge=0, strict=True, alias="minParameters")
    max_parameters: int = Field(..., ge=0, strict=True, alias="maxParameters")
    example: DocExample
    documentation: str
    return_: str = Field(..., alias="return")
    link: str = Field(..., min_length=1)

    @model_validator(mode="after")
    def _check_arity(self) -> "DocFunction":
        if self.min_parameters > self.max_parameters:
            raise ValueError(
                f"minParameters {self.min_parameters} exceeds maxParameters {self.max_parameters}"
            )
        return self

    @property
    def is_variadic(self) -> bool:
        return self.max_parameters == UNBOUNDED_PARAMETERS


class DocVariable(BaseModel):
    """A validated GML built-in variable or constant."""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    name: str = Field(..., pattern=VARIABLE_NAME_PATTERN)
    example: DocExample
    documentation: str
    type: str
    link: str = Field(..., min_length=1)
    object: SpecialDocType = SpecialDocType.CONSTANT
    do_not_auto_complete: Optional[bool] = Field(default=None, alias="doNotAutoComplete")


class LegacyIndex(BaseModel):
    """Symbol classification sets parsed from the ``fnames`` file."""

    model_config = ConfigDict(populate_by_name=True)

    instance_var: List[str] = Field(default_factory=list, alias="InstanceVar")
    constants: List[str] = Field(default_factory=list, alias="Constants")
    obsolete: List[str] = Field(default_factory=list, alias="Obsolete")
    read_only: List[str] = Field(default_factory=list, alias="ReadOnly")


class DocFile(BaseModel):
    """The document set written to ``docs.json``."""

    functions: List[DocFunction] = Field(default_factory=list)
    variables: List[DocVariable] = Field(default_factory=list)
    fnames: LegacyIndex = Field(default_factory=LegacyIndex)

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
