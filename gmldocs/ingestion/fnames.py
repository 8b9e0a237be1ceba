"""Parse the legacy ``fnames`` marker file into classification sets."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Optional

from gmldocs.models.docs import LegacyIndex, SpecialDocType

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "//"
MARKER_PATTERN = re.compile(r"^(.*?[^#*@&$£!])[#*@&$£!]*$")
EOL_PATTERN = re.compile(r"\r\n|\r")


def normalize_line_endings(text: str) -> str:
    return EOL_PATTERN.sub("\n", text) if text else ""


def strip_markers(line: str) -> Optional[str]:
    """Return the symbol name with its trailing marker characters removed."""
    match = MARKER_PATTERN.match(line)
    if match:
        return match.group(1)
    return None


def _add(bucket: List[str], name: str) -> None:
    if name not in bucket:
        bucket.append(name)


def parse_fnames(text: str) -> LegacyIndex:
    index = LegacyIndex()
    for raw_line in normalize_line_endings(text).split("\n"):
        line = raw_line.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        base = strip_markers(line)
        if not base:
            continue
        # Markers are tested independently; one line may land in several sets.
        if SpecialDocType.CONSTANT.value in line:
            _add(index.constants, base)
        if SpecialDocType.INSTANCE_VAR.value in line:
            _add(index.instance_var, base)
        if SpecialDocType.OBSOLETE.value in line:
            _add(index.obsolete, base)
        if SpecialDocType.READ_ONLY.value in line:
            _add(index.read_only, base)
    return index


def read_fnames(path: Path) -> Optional[LegacyIndex]:
    """Read and parse the fnames file, or ``None`` when it cannot be read."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Could not read fnames file %s: %s", path, exc)
        return None
    index = parse_fnames(text)
    logger.info(
        "Parsed fnames: %s constants, %s instance variables, %s read-only, %s obsolete",
        len(index.constants),
        len(index.instance_var),
        len(index.read_only),
        len(index.obsolete),
    )
    return index
