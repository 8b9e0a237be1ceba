"""Build ``docs.json`` from the installed GameMaker Studio 2 manual."""

from __future__ import annotations

import json
import logging
import zipfile
from pathlib import Path
from typing import Iterable, Optional, Tuple

from gmldocs.config import Settings, settings
from gmldocs.ingestion.fnames import read_fnames
from gmldocs.ingestion.parameters import apply_parameter_scan, parse_parameter_tables
from gmldocs.ingestion.records import DocSetBuilder
from gmldocs.ingestion.scan_manual import (
    ArchiveEntry,
    build_link,
    is_doc_page,
    iter_archive_entries,
    locate_manual,
)
from gmldocs.ingestion.sections import extract_sections, find_heading
from gmldocs.ingestion.signature import parse_signature
from gmldocs.models.docs import DocFile, LegacyIndex
from gmldocs.models.draft import FunctionDraft, PageDraft, VariableDraft
from gmldocs.models.report import FailureReport
from gmldocs.utils.markup import STRUCTURAL_ERRORS, SYNTAX_HOPS, content_following, load_page, text_of

logger = logging.getLogger(__name__)

# Pages with fewer section headings are overviews, not symbol references.
MIN_SECTION_HEADINGS = 3


def parse_page(html: str, link: str, report: FailureReport) -> Optional[PageDraft]:
    """Turn one manual page into a function or variable draft.

    Returns ``None`` when the page has no Syntax block to classify it by.
    """
    soup = load_page(html)
    headings = soup.find_all("h3")
    if len(headings) < MIN_SECTION_HEADINGS:
        return None
    syntax = find_heading(headings, "Syntax")
    if syntax is None:
        return None
    try:
        signature = parse_signature(content_following(syntax, SYNTAX_HOPS))
    except STRUCTURAL_ERRORS as exc:
        logger.debug("Unreadable Syntax block at %s: %s", link, exc)
        # No name is known yet, so the page link identifies it.
        report.flag_suspect(link)
        return None

    sections = extract_sections(soup, headings, signature.name, report)
    title_heading = soup.find("h2")
    title = text_of(title_heading) if title_heading is not None else None

    if signature.kind == "variable":
        return VariableDraft(name=signature.name, sections=sections, link=link, title=title)

    draft = FunctionDraft(
        name=signature.name,
        signature=signature.text,
        min_parameters=signature.min_parameters,
        max_parameters=signature.max_parameters,
        sections=sections,
        link=link,
        title=title,
    )
    scan = parse_parameter_tables(soup.find_all("table"), signature.name, report)
    return apply_parameter_scan(draft, scan)


def build_docs(
    entries: Iterable[ArchiveEntry],
    fnames: LegacyIndex,
    config: Optional[Settings] = None,
) -> Tuple[DocFile, FailureReport]:
    """Parse every documentation page, in archive order, into a ``DocFile``."""
    config = config or settings
    builder = DocSetBuilder(fnames)
    pages = 0
    for entry in entries:
        if not is_doc_page(entry, config.doc_roots):
            continue
        pages += 1
        link = build_link(entry.entry_name, config.link_base)
        draft = parse_page(entry.text(), link, builder.report)
        if isinstance(draft, FunctionDraft):
            builder.add_function(draft)
        elif isinstance(draft, VariableDraft):
            builder.add_variable(draft)

    doc_file = builder.build()
    logger.info(
        "Parsed %s pages into %s functions and %s variables",
        pages,
        len(doc_file.functions),
        len(doc_file.variables),
    )
    return doc_file, builder.report


def build_manual(config: Optional[Settings] = None) -> Optional[Tuple[DocFile, FailureReport]]:
    """Locate the manual and build its document set, or ``None`` if it cannot."""
    config = config or settings
    root = locate_manual(config)
    if root is None:
        return None

    fnames = read_fnames(root / config.fnames_relpath)
    if fnames is None:
        return None

    try:
        return build_docs(iter_archive_entries(root / config.archive_relpath), fnames, config)
    except zipfile.BadZipFile as exc:
        logger.error("Manual archive is unreadable: %s", exc)
        return None


def write_doc_file(doc_file: DocFile, output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as handle:
        handle.write(json.dumps(doc_file.to_json_dict(), indent=4, ensure_ascii=False))
    logger.info("Wrote documentation to %s", output_path)


def log_failure_report(report: FailureReport) -> None:
    for label, names in report.as_buckets().items():
        if names:
            logger.warning("%s %s", label, ", ".join(names))


def main() -> int:
    logging.basicConfig(level=settings.log_level)
    result = build_manual()
    if result is None:
        logger.error("We couldn't make a Doc File!")
        return 1
    doc_file, report = result
    log_failure_report(report)
    write_doc_file(doc_file, settings.output_path_obj)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
