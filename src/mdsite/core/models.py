"""Intermediate data models for the convert pipeline"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class SplitDoc:
    """Raw text split at the front-matter delimiter; header keeps its closing '---' line."""
    header:  str
    content: str


@dataclass
class ExtractedDoc:
    metadata:    dict[str, Any]
    raw_content: str            # body after the header, unchanged


class MetadataIndex(BaseModel):
    """Generated index contract: one record per converted file plus JSON sidecars by basename."""
    files:    list[dict[str, Any]] = Field(default_factory=list)
    sidecars: dict[str, Any]       = Field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialized shape is {"files": [...], **sidecars}; a sidecar named "files" wins."""
        return {"files": self.files, **self.sidecars}


@dataclass
class BuildReport:
    """Summary of one execute() run."""
    removed: list[Path]
    docs:    MetadataIndex
    blog:    MetadataIndex
    pages:   list[tuple[str, Path]] = field(default_factory=list)   # (source label, module path)
