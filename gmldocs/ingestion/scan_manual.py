"""Locate the installed manual and enumerate its documentation pages."""

from __future__ import annotations

import logging
import re
import sys
import zipfile
from pathlib import Path, PurePosixPath
from typing import Iterable, Iterator, Optional

from pydantic import BaseModel

from gmldocs.config import Settings, settings

logger = logging.getLogger(__name__)

PAGE_NAME_PATTERN = re.compile(r"^[a-z_]+[a-z0-9_().]*$", re.IGNORECASE)
SKIPPED_PAGE_NAMES = {"index.html"}
SKIPPED_NAME_FRAGMENTS = (" ", ".png", ".gif")


class ArchiveEntry(BaseModel):
    """One file inside the manual archive."""

    entry_name: str
    name: str
    is_directory: bool = False
    data: bytes = b""

    def text(self) -> str:
        return self.data.decode("utf-8", errors="replace")


def default_manual_root() -> Path:
    """Return the default GameMaker Studio 2 install folder for this platform."""
    if sys.platform == "win32":
        return Path("C:/Program Files/GameMaker Studio 2")
    return Path("/Applications/GameMaker Studio 2.app/Contents/MonoBundle")


def locate_manual(config: Optional[Settings] = None) -> Optional[Path]:
    """Return the install folder if it holds the manual archive."""
    config = config or settings
    root = config.manual_root_path or default_manual_root()
    archive = root / config.archive_relpath
    if not archive.is_file():
        logger.error("Manual archive not found at %s", archive)
        return None
    return root


def iter_archive_entries(archive_path: Path) -> Iterator[ArchiveEntry]:
    """Yield every archive entry in the order the archive stores them."""
    with zipfile.ZipFile(archive_path) as archive:
        for info in archive.infolist():
            is_directory = info.is_dir()
            yield ArchiveEntry(
                entry_name=info.filename,
                name=PurePosixPath(info.filename).name,
                is_directory=is_directory,
                data=b"" if is_directory else archive.read(info),
            )


def is_doc_page(entry: ArchiveEntry, doc_roots: Iterable[str]) -> bool:
    """Return True for scripting reference pages worth parsing."""
    if not any(root in entry.entry_name for root in doc_roots):
        return False
    if entry.is_directory or entry.name in SKIPPED_PAGE_NAMES:
        return False
    if not PAGE_NAME_PATTERN.match(entry.name):
        return False
    return not any(fragment in entry.name for fragment in SKIPPED_NAME_FRAGMENTS)


def build_link(entry_name: str, base: str) -> str:
    return base + entry_name
