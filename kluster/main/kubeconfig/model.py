"""Kubeconfig data model.

Entries are keyed by name inside one source. A Configuration is what one file
parses into; the merged (effective) view uses the same type.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class ClusterEntry:
    name: str
    server: str = ''
    certificate_authority: Optional[str] = None
    certificate_authority_data: Optional[str] = None
    insecure_skip_tls_verify: bool = False
    tls_server_name: Optional[str] = None
    proxy_url: Optional[str] = None
    location_of_origin: str = ''


@dataclass(frozen=True)
class ContextEntry:
    name: str
    cluster: str = ''
    user: str = ''
    namespace: Optional[str] = None
    location_of_origin: str = ''


@dataclass(frozen=True)
class AuthInfo:
    name: str
    client_certificate: Optional[str] = None
    client_certificate_data: Optional[str] = None
    client_key: Optional[str] = None
    client_key_data: Optional[str] = None
    token: Optional[str] = None
    token_file: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    exec_config: Optional[Dict[str, Any]] = field(default=None, hash=False, compare=False)
    auth_provider: Optional[Dict[str, Any]] = field(default=None, hash=False, compare=False)
    location_of_origin: str = ''


@dataclass
class Configuration:
    clusters: Dict[str, ClusterEntry] = field(default_factory=dict)
    contexts: Dict[str, ContextEntry] = field(default_factory=dict)
    users: Dict[str, AuthInfo] = field(default_factory=dict)
    current_context: str = ''
    preferences: Dict[str, Any] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not (self.clusters or self.contexts or self.users or self.current_context or self.preferences)

    def current_context_entry(self) -> Optional[ContextEntry]:
        if not self.current_context:
            return None
        return self.contexts.get(self.current_context)

    def current_cluster_name(self) -> str:
        ctx = self.current_context_entry()
        return ctx.cluster if ctx is not None else ''


class SourceStatus(str, Enum):
    LOADED = 'loaded'
    MISSING = 'missing'


@dataclass(frozen=True)
class LoadedSource:
    """One origin plus what was read from it.

    A missing file is a valid, empty source (status MISSING); read failures are
    raised as SourceReadError and never appear here.
    """
    origin: str
    config: Configuration = field(hash=False)
    status: SourceStatus = SourceStatus.LOADED

    @property
    def missing(self) -> bool:
        return self.status is SourceStatus.MISSING


@dataclass
class MergedView:
    effective: Configuration
    sources: List[Tuple[str, Configuration]] = field(default_factory=list)

    @property
    def origins(self) -> List[str]:
        return [origin for origin, _ in self.sources]

    @property
    def configs(self) -> List[Configuration]:
        return [cfg for _, cfg in self.sources]


__all__ = [
    'ClusterEntry', 'ContextEntry', 'AuthInfo', 'Configuration',
    'SourceStatus', 'LoadedSource', 'MergedView',
]
