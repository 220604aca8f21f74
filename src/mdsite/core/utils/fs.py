"""Filesystem helpers for generated output"""

from pathlib import Path


def write_file(path: Path, content: str) -> Path:
    """Write content, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding='utf-8', newline='\n')
    return path


def remove_file(path: Path) -> bool:
    """Delete path; False if it was already gone."""
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    return True
