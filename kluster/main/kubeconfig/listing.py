"""Cluster rows for display: one row per cluster entry across all files."""
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import List

from .loader import ConfigListingProvider, EffectiveConfigProvider


@dataclass(frozen=True)
class ClusterRow:
    name: str
    config_file: str   # base name of the originating kubeconfig
    server: str
    current: bool = False


def list_clusters(effective: EffectiveConfigProvider, listing: ConfigListingProvider) -> List[ClusterRow]:
    current_cluster = effective.get_effective_config().current_cluster_name()
    origins, configs = listing.get_all_configs()

    rows: List[ClusterRow] = []
    for origin, cfg in zip(origins, configs):
        for name, cluster in cfg.clusters.items():
            rows.append(ClusterRow(
                name=name,
                config_file=os.path.basename(origin),
                server=cluster.server,
                current=bool(current_cluster) and name == current_cluster,
            ))
    # stable: equal names keep chain order
    rows.sort(key=lambda r: r.name)
    return rows

__all__ = ['ClusterRow', 'list_clusters']
