# link_crawler/config.py
"""
Loading and validation of LinkCrawler settings.

Pydantic describes the schema; values come from an optional YAML/JSON file
with command-line overrides layered on top.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_OUTPUT = Path("./urls.txt")
DEFAULT_BATCH_SIZE = 5


class CrawlerConfig(BaseModel):
    """Settings for one crawl run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    seed_url: Optional[str] = Field(None, description="URL the crawl starts from.")
    batch_size: int = Field(DEFAULT_BATCH_SIZE, ge=1, description="Links crawled concurrently per page.")
    output_file: Path = Field(DEFAULT_OUTPUT, description="Append-only list of discovered links.")
    timeout: Optional[float] = Field(30.0, gt=0, description="Per-request timeout (seconds).")
    max_concurrency: Optional[int] = Field(
        None, ge=1, description="Global cap on in-flight fetches (unbounded if unset)."
    )

    @field_validator("seed_url", mode="before")
    def _empty_seed_is_missing(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def read_config_file(path: Union[str, Path]) -> dict[str, Any]:
    """Read a YAML or JSON config file into a plain mapping."""
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: Union[str, Path]) -> CrawlerConfig:
    """
    Read YAML or JSON and return a validated CrawlerConfig.
    Raises FileNotFoundError when the file does not exist.
    """
    return CrawlerConfig(**read_config_file(path))


def build_config(path: Union[str, Path, None] = None, **overrides: Any) -> CrawlerConfig:
    """
    Combine an optional config file with command-line overrides.

    Overrides whose value is ``None`` are ignored, so unset options keep the
    file (or default) value.
    """
    data: dict[str, Any] = read_config_file(path) if path is not None else {}
    data.update({k: v for k, v in overrides.items() if v is not None})
    return CrawlerConfig(**data)
