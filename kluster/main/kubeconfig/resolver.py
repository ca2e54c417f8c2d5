"""Merge resolution over a loader chain.

Effective view: later sources overwrite earlier ones name by name in each
mapping, but current-context comes from the first source that sets one. The
primary must be readable; discovered files that fail are skipped.

Per-file view: every readable source as-is, in chain order, nothing merged.
"""
from __future__ import annotations
import logging
from typing import Iterable, List, Tuple

from .chain import LoaderChain, SourceDescriptor
from .errors import SourceReadError
from .model import Configuration, LoadedSource, MergedView
from .paths import default_primary_path
from .reader import read_config

logger = logging.getLogger(__name__)

__all__ = ['merge_configs', 'get_effective_config', 'get_all_configs', 'get_merged_view']


def merge_configs(configs: Iterable[Configuration]) -> Configuration:
    merged = Configuration()
    for cfg in configs:
        merged.clusters.update(cfg.clusters)
        merged.contexts.update(cfg.contexts)
        merged.users.update(cfg.users)
        merged.preferences.update(cfg.preferences)
        if not merged.current_context and cfg.current_context:
            merged.current_context = cfg.current_context
    return merged


def _is_strict(index: int, source: SourceDescriptor) -> bool:
    return index == 0 or source.primary


def _load_strict(chain: LoaderChain) -> List[LoadedSource]:
    loaded: List[LoadedSource] = []
    for i, source in enumerate(chain):
        try:
            loaded.append(source.load())
        except SourceReadError as exc:
            if _is_strict(i, source):
                raise
            logger.warning("skipping unreadable kubeconfig %s: %s", source.origin, exc.cause)
    return loaded


def get_merged_view(chain: LoaderChain) -> MergedView:
    if len(chain) == 0:
        path = default_primary_path()
        cfg = read_config(path)
        return MergedView(effective=merge_configs([cfg]), sources=[(path, cfg)])
    loaded = _load_strict(chain)
    sources = [(s.origin, s.config) for s in loaded]
    return MergedView(effective=merge_configs(s.config for s in loaded), sources=sources)


def get_effective_config(chain: LoaderChain) -> Configuration:
    if len(chain) == 0:
        return read_config(default_primary_path())
    return merge_configs(s.config for s in _load_strict(chain))


def get_all_configs(chain: LoaderChain) -> Tuple[List[str], List[Configuration]]:
    origins: List[str] = []
    configs: List[Configuration] = []
    for source in chain:
        try:
            loaded = source.load()
        except SourceReadError as exc:
            logger.warning("omitting unreadable kubeconfig %s from listing: %s", source.origin, exc.cause)
            continue
        origins.append(loaded.origin)
        configs.append(loaded.config)
    return origins, configs
