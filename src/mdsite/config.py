"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:           str = "mdsite"
    docs_dir:           str = Field(default="../docs",               description="Docs Markdown tree (+ JSON sidecars)")
    blog_dir:           str = Field(default="../blog",               description="Blog tree of YYYY-MM-DD-slug.md posts")
    readme_path:        str = Field(default="../README.md",          description="README patched with the getting started guide")
    getting_started:    str = Field(default="GettingStarted.md",     description="Guide filename inside docs_dir")
    pages_dir:          str = Field(default="src/jest",              description="Root directory for generated page modules")
    metadata_file:      str = Field(default="core/metadata.js",      description="Generated docs index module")
    blog_metadata_file: str = Field(default="core/metadata-blog.js", description="Generated blog index module")
    link_prefix:        str = Field(default="/jest/",                description="Relative link prefix rewritten in the guide")
    site_url:           str = Field(default="https://facebook.github.io/jest/", description="Absolute URL replacing link_prefix")
    module_ext:         str = Field(default=".js", pattern=r"^\.\w+$", description="Extension of generated page modules")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDSITE_<FIELD> env vars, then non-None overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDSITE_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
