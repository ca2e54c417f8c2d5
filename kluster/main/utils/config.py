"""Helpers for strict YAML-driven settings."""
from __future__ import annotations
from typing import Any, Dict, Iterable

class MissingConfigError(RuntimeError):
    pass

def ensure_keys(section: Dict[str, Any], required: Iterable[str], section_name: str):
    for k in required:
        if k not in section or section[k] is None:
            raise MissingConfigError(f"Missing required key '{k}' in section '{section_name}'")

__all__ = ['MissingConfigError', 'ensure_keys']
