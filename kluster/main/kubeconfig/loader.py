"""Query facade used by the API and any other presentation layer.

Two narrow capabilities so callers depend only on what they use: one for the
effective (merged) configuration, one for the per-file listing.
"""
from __future__ import annotations
from typing import List, Optional, Protocol, Tuple

from .chain import LoaderChain, build_chain
from .model import Configuration, MergedView
from .resolver import get_all_configs, get_effective_config, get_merged_view
from ..utils.settings import KlusterSettings


class EffectiveConfigProvider(Protocol):
    def get_effective_config(self) -> Configuration: ...


class ConfigListingProvider(Protocol):
    def get_all_configs(self) -> Tuple[List[str], List[Configuration]]: ...


class KubeconfigLoader:
    """Stateless view over a loader chain; every call re-reads the files."""

    def __init__(self, chain: LoaderChain):
        self.chain = chain

    @classmethod
    def from_settings(cls, settings: KlusterSettings, primary_path: Optional[str] = None) -> 'KubeconfigLoader':
        return cls(build_chain(primary_path, settings))

    def get_effective_config(self) -> Configuration:
        return get_effective_config(self.chain)

    def get_all_configs(self) -> Tuple[List[str], List[Configuration]]:
        return get_all_configs(self.chain)

    def get_merged_view(self) -> MergedView:
        return get_merged_view(self.chain)


__all__ = ['EffectiveConfigProvider', 'ConfigListingProvider', 'KubeconfigLoader']
