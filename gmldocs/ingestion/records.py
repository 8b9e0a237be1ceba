"""Validate drafts and commit them to the document set."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional, Set, Type, TypeVar

from pydantic import BaseModel, ValidationError

from gmldocs.models.docs import DocFile, DocFunction, DocVariable, LegacyIndex, SpecialDocType
from gmldocs.models.draft import FunctionDraft, VariableDraft
from gmldocs.models.report import FailureReport
from gmldocs.utils.markup import clear_line_terminators

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

UK_SPELLINGS: Dict[str, str] = {
    "colour": "color",
    "randomise": "randomize",
    "normalised": "normalized",
    "maximise": "maximized",
}

# Pages whose Syntax block names the wrong function; the <h2> title is right.
HARDCODED_NAME_FIXES = frozenset(
    {
        "keyboard_get_map",
        "gpu_set_blendmode",
        "gpu_get_tex_mip_filter",
        "physics_particle_get_damping",
        "steam_activate_overlay",
    }
)

LINK_WHITESPACE_PATTERN = re.compile(r"\s")


def validate_record(model: Type[RecordT], payload: Dict[str, Any]) -> Optional[RecordT]:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        logger.debug("Schema rejected %s: %s", payload.get("name"), exc)
        return None


def clear_record_terminators(record: RecordT) -> RecordT:
    """Replace line breaks in every string field, nested models included."""
    updates: Dict[str, Any] = {}
    for field_name in type(record).model_fields:
        value = getattr(record, field_name)
        if isinstance(value, str):
            updates[field_name] = clear_line_terminators(value)
        elif isinstance(value, BaseModel):
            updates[field_name] = clear_record_terminators(value)
        elif isinstance(value, list):
            updates[field_name] = [
                clear_record_terminators(item) if isinstance(item, BaseModel) else item
                for item in value
            ]
    return record.model_copy(update=updates)


def sanitize_link(link: str) -> str:
    return LINK_WHITESPACE_PATTERN.sub("%20", link)


def has_uk_spelling(name: str) -> bool:
    return any(spelling in name for spelling in UK_SPELLINGS)


def to_us_spelling(text: str) -> str:
    for uk, us in UK_SPELLINGS.items():
        text = text.replace(uk, us)
    return text


def us_function(record: DocFunction) -> DocFunction:
    return record.model_copy(
        update={
            "name": to_us_spelling(record.name),
            "signature": to_us_spelling(record.signature),
            "return_": to_us_spelling(record.return_),
            "link": to_us_spelling(record.link),
        },
        deep=True,
    )


def us_variable(record: DocVariable) -> DocVariable:
    return record.model_copy(
        update={
            "name": to_us_spelling(record.name),
            "type": to_us_spelling(record.type),
            "link": to_us_spelling(record.link),
        },
        deep=True,
    )


class DocSetBuilder:
    """Accumulates committed records and the failure report for one run."""

    def __init__(self, fnames: LegacyIndex, report: Optional[FailureReport] = None):
        self.fnames = fnames
        self.report = report or FailureReport()
        self._functions: List[DocFunction] = []
        self._variables: List[DocVariable] = []
        self._function_names: Set[str] = set()
        self._instance_vars = set(fnames.instance_var)

    def reject(self, name: str) -> None:
        logger.info("Invalid parse for %s", name)
        self.report.flag_unparsed(name)

    def _commit_function(self, record: DocFunction) -> None:
        self._functions.append(record)
        self._function_names.add(record.name)

    def add_function(self, draft: FunctionDraft) -> Optional[DocFunction]:
        record = validate_record(DocFunction, draft.to_payload())
        if record is None:
            self.reject(draft.name)
            return None

        record = clear_record_terminators(record)
        record = record.model_copy(update={"link": sanitize_link(record.link)})
        if record.name in HARDCODED_NAME_FIXES and draft.title:
            record = record.model_copy(update={"name": draft.title.strip()})

        if record.name in self._function_names:
            logger.info("Found duplicate name at: %s", record.link)
            return None

        if has_uk_spelling(record.name):
            american = us_function(record)
            if american.name in self._function_names:
                logger.info("US spelling %s already documented", american.name)
            else:
                self._commit_function(american)

        self._commit_function(record)
        return record

    def _classify(self, record: DocVariable) -> DocVariable:
        if record.name in self._instance_vars:
            return record.model_copy(update={"object": SpecialDocType.INSTANCE_VAR.value})
        return record

    def add_variable(self, draft: VariableDraft) -> Optional[DocVariable]:
        record = validate_record(DocVariable, draft.to_payload())
        if record is None:
            self.reject(draft.name)
            return None

        record = clear_record_terminators(record)
        record = record.model_copy(update={"link": sanitize_link(record.link)})
        if record.name in HARDCODED_NAME_FIXES and draft.title:
            record = record.model_copy(update={"name": draft.title.strip()})

        if has_uk_spelling(record.name):
            self._variables.append(self._classify(us_variable(record)))
            record = record.model_copy(update={"do_not_auto_complete": True})

        record = self._classify(record)
        self._variables.append(record)
        return record

    @property
    def functions(self) -> List[DocFunction]:
        return list(self._functions)

    @property
    def variables(self) -> List[DocVariable]:
        return list(self._variables)

    def build(self) -> DocFile:
        return DocFile(functions=self.functions, variables=self.variables, fnames=self.fnames)
