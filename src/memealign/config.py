"""
--------------------------------------------------------------------------------
<memealign project>
src/memealign/config.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError

Alphabet = Literal["dna", "rna", "protein"]
ExportFormat = Literal["json", "fasta", "clustal", "stockholm", "phylip-relaxed"]


class ReaderConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    alphabet: Optional[Alphabet] = None
    encoding: str = "utf-8"

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"unknown encoding '{v}'") from e
        return v


class ExportConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    format: ExportFormat = "fasta"
    out_dir: Optional[str] = None
    overwrite: bool = False


class RootConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    reader: ReaderConfig = Field(default_factory=ReaderConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)


def load_config(path: Path) -> RootConfig:
    """Load a YAML config; an empty file yields the defaults."""
    try:
        raw = yaml.safe_load(Path(path).read_text()) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"Config root must be a mapping: {path}")
    # accept either a bare mapping or one nested under 'memealign:'
    if "memealign" in raw and isinstance(raw["memealign"], dict):
        raw = raw["memealign"]
    try:
        return RootConfig(**raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}:\n{e}") from e


def discover_config(provided: Optional[Path]) -> Optional[Path]:
    if provided:
        if not provided.is_file():
            raise ConfigError(f"Config not found: {provided}")
        return provided.resolve()
    cwd_cfg = Path.cwd() / "memealign.yaml"
    if cwd_cfg.is_file():
        return cwd_cfg.resolve()
    return None
