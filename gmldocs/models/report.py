"""Diagnostic failure report collected during an import run."""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field

SUSPECT_LABEL = "May have been parsed incorrectly:"
UNPARSED_LABEL = "Was not Parsed; likely not a function:"


class FailureReport(BaseModel):
    """Names of symbols that could not be extracted cleanly."""

    suspect: List[str] = Field(default_factory=list)
    unparsed: List[str] = Field(default_factory=list)

    def flag_suspect(self, name: str) -> None:
        if name not in self.suspect:
            self.suspect.append(name)

    def flag_unparsed(self, name: str) -> None:
        # Pages already flagged during extraction are only reported once.
        if name in self.suspect or name in self.unparsed:
            return
        self.unparsed.append(name)

    @property
    def is_empty(self) -> bool:
        return not self.suspect and not self.unparsed

    def as_buckets(self) -> Dict[str, List[str]]:
        return {SUSPECT_LABEL: list(self.suspect), UNPARSED_LABEL: list(self.unparsed)}
