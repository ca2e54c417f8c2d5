"""Discovery of extra kubeconfig files in a directory by filename suffix."""
from __future__ import annotations
import logging
import os
from typing import Iterable, List

from .errors import DirectoryUnavailable

logger = logging.getLogger(__name__)

__all__ = ['list_directory', 'deduplicate', 'scan_directory']


def list_directory(directory: str) -> List[os.DirEntry]:
    try:
        with os.scandir(directory) as it:
            return sorted(it, key=lambda e: e.name)
    except OSError as exc:
        raise DirectoryUnavailable(directory, exc) from exc


def deduplicate(names: Iterable[str]) -> List[str]:
    """Drop repeated names, keeping the first occurrence and the original order."""
    seen = set()
    out: List[str] = []
    for name in names:
        if name in seen:
            continue
        seen.add(name)
        out.append(name)
    return out


def _is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def scan_directory(directory: str, suffix: str) -> List[str]:
    """Return names of non-directory entries in `directory` ending with `suffix`.

    An unlistable directory yields an empty list.
    """
    try:
        entries = list_directory(directory)
    except DirectoryUnavailable as exc:
        logger.debug("skipping kubeconfig scan: %s", exc)
        return []
    matches = [e.name for e in entries if e.name.endswith(suffix) and not _is_dir(e)]
    return deduplicate(matches)
