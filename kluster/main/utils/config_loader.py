"""Settings loader that merges multiple YAML files into a single dict.
Load order defines precedence (later overrides earlier). Missing files are skipped."""
from __future__ import annotations
import yaml
from typing import List, Dict, Any
import os


def load_yaml_file(path: str) -> Dict[str, Any]:
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Settings file not found: {path}")
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file must contain a mapping: {path}")
    return data


def merge_dicts(dicts: List[Dict[str, Any]]) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for d in dicts:
        for k, v in d.items():
            if isinstance(v, dict) and isinstance(result.get(k), dict):
                result[k] = merge_dicts([result[k], v])  # type: ignore[arg-type]
            else:
                result[k] = v
    return result


def load_configs(paths: List[str]) -> Dict[str, Any]:
    configs = [load_yaml_file(p) for p in paths if os.path.isfile(p)]
    return merge_dicts(configs)

__all__ = ["load_configs", "merge_dicts", "load_yaml_file"]
