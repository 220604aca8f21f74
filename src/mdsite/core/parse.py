"""Front-matter splitting, metadata extraction, and source file discovery"""

import json
import logging
from pathlib import Path
from typing import Any

from mdsite.core.models import ExtractedDoc, SplitDoc


logger = logging.getLogger(__name__)

DELIMITER = '---'
MD_EXTENSIONS = {'.md', '.markdown'}


def split_header(text: str) -> SplitDoc:
    """Split text at the first '---' line after the opening one.

    The opening line is dropped and the header ends with the closing delimiter.
    Without a closing delimiter everything after line 0 is header and the
    content is empty.
    """
    lines = text.split('\n')
    end = 1
    while end < len(lines) - 1 and lines[end] != DELIMITER:
        end += 1
    return SplitDoc(
        header='\n'.join(lines[1:end + 1]),
        content='\n'.join(lines[end + 1:]),
    )


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Not a JSON literal: {name}")


def parse_value(raw: str) -> Any:
    """Return raw decoded as strict JSON, or raw itself when it does not decode."""
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        return raw


def extract_metadata(text: str) -> ExtractedDoc:
    """Parse 'key: value' header lines into a metadata dict; later keys overwrite earlier ones."""
    split = split_header(text)
    metadata: dict[str, Any] = {}
    # last header line is the closing delimiter
    for line in split.header.split('\n')[:-1]:
        key, _, value = line.partition(':')
        metadata[key.strip()] = parse_value(value.strip())
    return ExtractedDoc(metadata=metadata, raw_content=split.content)


def discover_files(root: Path) -> list[Path]:
    """Return sorted files with an extension under root, skipping hidden files and dirs.

    Errors are logged and yield [].
    """
    if not root.is_dir():
        logger.error("Source directory not found: %s", root)
        return []
    try:
        return sorted(
            p for p in root.rglob('*.*')
            if p.is_file() and not any(part.startswith('.') for part in p.relative_to(root).parts)
        )
    except OSError as e:
        logger.error("Failed to scan %s: %s", root, e)
        return []
