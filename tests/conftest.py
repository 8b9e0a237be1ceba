"""Shared fixtures: manual pages laid out like the GameMaker Studio 2 help."""

from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

import pytest

from gmldocs.config import Settings
from gmldocs.ingestion.scan_manual import ArchiveEntry

REFERENCE_ROOT = "source/_build/3_scripting/4_gml_reference"


def argument_table(rows: List[Tuple[str, str]]) -> str:
    body = "".join(f"<tr>\n<td>{label}</td>\n<td>{doc}</td>\n</tr>\n" for label, doc in rows)
    return (
        "<table>\n<tbody>\n"
        "<tr>\n<th>Argument</th>\n<th>Description</th>\n</tr>\n"
        f"{body}"
        "</tbody>\n</table>\n"
    )


def build_page(
    signature: str,
    title: str = "",
    rows: Optional[List[Tuple[str, str]]] = None,
    returns: str = "N/A",
    description: str = "<p>Does something.</p>",
    example_code: str = "show_debug_message(x);",
    example_text: str = "This shows x.",
    extra_tables: str = "",
) -> str:
    table = argument_table(rows) if rows is not None else ""
    return (
        "<html>\n<body>\n"
        f"<h2>{title}</h2>\n"
        "<h3>Syntax:</h3>\n"
        f'<p class="code">{signature}</p>\n'
        f"{table}"
        f"{extra_tables}"
        "<h3>Returns:</h3>\n"
        f'<p class="code">{returns}</p>\n'
        "<h3>Description</h3>\n"
        f"<blockquote>\n{description}\n</blockquote>\n"
        "<h3>Example:</h3>\n"
        f'<p class="code">{example_code}</p>\n'
        f"<p>{example_text}</p>\n"
        "</body>\n</html>\n"
    )


def make_entry(name: str, html: str, folder: str = "drawing") -> ArchiveEntry:
    return ArchiveEntry(
        entry_name=f"{REFERENCE_ROOT}/{folder}/{name}",
        name=name,
        data=html.encode("utf-8"),
    )


@pytest.fixture
def page() -> Callable[..., str]:
    return build_page


@pytest.fixture
def entry() -> Callable[..., ArchiveEntry]:
    return make_entry


@pytest.fixture
def config(tmp_path: Path) -> Settings:
    return Settings(manual_root=str(tmp_path / "gms2"), output_path=str(tmp_path / "docs.json"))


@pytest.fixture
def install_manual(config: Settings) -> Callable[[Dict[str, str], Optional[str]], Path]:
    """Lay out a fake install folder with an archive and an fnames file."""

    def _install(pages: Dict[str, str], fnames: Optional[str] = "") -> Path:
        root = config.manual_root_path
        archive = root / config.archive_relpath
        archive.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(archive, "w") as handle:
            for entry_name, html in pages.items():
                handle.writestr(entry_name, html)
        if fnames is not None:
            fnames_path = root / config.fnames_relpath
            fnames_path.parent.mkdir(parents=True, exist_ok=True)
            fnames_path.write_text(fnames, encoding="utf-8")
        return root

    return _install
