"""
Reading MOEA/D settings from JSON or YAML files.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

YAML_SUFFIXES = {".yaml", ".yml"}


def load_config_file(path: str) -> Dict[str, Any]:
    """
    Return the top-level mapping stored in ``path``.

    Keys are MOEADConfig field names, e.g.
    ``{"num_problems": 50, "neighborhood_size": 10, "similarity": "cosine"}``.
    YAML files need PyYAML (the ``yaml`` extra); anything else is read as JSON.
    """
    cfg_path = Path(path).expanduser()
    if not cfg_path.is_file():
        raise FileNotFoundError(f"Config file '{cfg_path}' does not exist.")
    text = cfg_path.read_text(encoding="utf-8")
    if cfg_path.suffix.lower() not in YAML_SUFFIXES:
        return json.loads(text)
    try:
        import yaml
    except ImportError as exc:  # pragma: no cover - optional dependency
        raise ImportError("Reading YAML configs requires PyYAML: pip install 'moeadkit[yaml]'.") from exc
    return yaml.safe_load(text) or {}


__all__ = ["load_config_file"]
