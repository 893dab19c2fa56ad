from __future__ import annotations

from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from tablut.search import SearchConfig


def load_yaml_config(path_str: Optional[str]) -> Dict[str, Any]:
    """Read a YAML mapping; a missing path yields an empty config."""
    if not path_str:
        return {}
    path = Path(path_str)
    if not path.exists():
        return {}
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping, got {type(data).__name__}.")
    return data


def build_search_config(cfg: Dict[str, Any], **overrides: Any) -> SearchConfig:
    """SearchConfig from the ``search`` section of CFG; non-None OVERRIDES win."""
    section = dict(cfg.get("search") or {})
    known = {f.name for f in fields(SearchConfig)}
    unknown = set(section) - known
    if unknown:
        raise ValueError(f"Unknown search options: {sorted(unknown)}")
    section.update({key: value for key, value in overrides.items() if value is not None})
    return SearchConfig(**section)
