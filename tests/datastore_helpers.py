"""Helper types and functions shared by datastore tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel


class RecordFormat(BaseModel):
    """Record shape used by complete.yaml and no_tags.yaml."""

    name: str
    id: int
    rating: float | None = None
    complete: bool = False
    tags: list[str] = []


def write_yaml(path: Path, data: dict[str, Any] | str) -> Path:
    """Write a dict as YAML or raw string to a file, creating parent dirs."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(data, str):
        path.write_text(data)
    else:
        path.write_text(yaml.dump(data, default_flow_style=False))
    return path
