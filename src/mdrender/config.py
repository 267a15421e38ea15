"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "MDRENDER_"


class Settings(BaseModel):
    app_name:         str  = "mdrender"
    parser_preset:    str  = Field(default="gfm-like", description="MarkdownIt preset name")
    html:             bool = Field(default=True,  description="Pass raw HTML in the source through")
    linkify:          bool = Field(default=True,  description="Turn bare URLs into links")
    typographer:      bool = Field(default=False, description="Smart quotes and dashes")
    highlight:        bool = Field(default=True,  description="Highlight fenced code with Pygments")
    output_extension: str  = Field(default=".html", pattern=r"^\.\w+$", description="Extension for rendered files")
    toc:              bool = Field(default=True,  description="Write a <name>.toc.json outline beside each page")
    overwrite:        bool = Field(default=False, description="Replace existing output files")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDRENDER_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
