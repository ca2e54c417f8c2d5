"""Loader chain: the primary kubeconfig followed by every discovered extra file.

Building a chain only lists the recommended directory; files are read later,
at query time, through SourceDescriptor.load().
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .model import LoadedSource
from .paths import RECOMMENDED_FILE_NAME, resolve_primary_path
from .reader import load_source
from .scanner import scan_directory
from ..utils.settings import KlusterSettings, settings_from_env

logger = logging.getLogger(__name__)

__all__ = ['SourceDescriptor', 'LoaderChain', 'primary_descriptor', 'build_chain']


@dataclass(frozen=True)
class SourceDescriptor:
    origin: str
    primary: bool = False

    def load(self) -> LoadedSource:
        return load_source(self.origin)


@dataclass(frozen=True)
class LoaderChain:
    sources: Tuple[SourceDescriptor, ...] = ()

    def __len__(self) -> int:
        return len(self.sources)

    def __iter__(self) -> Iterator[SourceDescriptor]:
        return iter(self.sources)

    @property
    def primary(self) -> Optional[SourceDescriptor]:
        return self.sources[0] if self.sources else None

    @property
    def discovered(self) -> Tuple[SourceDescriptor, ...]:
        return self.sources[1:]

    @property
    def origins(self) -> Tuple[str, ...]:
        return tuple(s.origin for s in self.sources)


def primary_descriptor(settings: KlusterSettings, primary_path: Optional[str] = None) -> SourceDescriptor:
    origin = resolve_primary_path(
        explicit=primary_path or settings.kubeconfig,
        env_value=settings.env_kubeconfig,
        default_path=os.path.join(settings.recommended_dir, RECOMMENDED_FILE_NAME),
    )
    return SourceDescriptor(origin=origin, primary=True)


def build_chain(primary_path: Optional[str] = None, settings: Optional[KlusterSettings] = None) -> LoaderChain:
    """Primary descriptor first, then one descriptor per scanned file, in scan order.

    A scanned file whose path equals the primary path is skipped rather than
    appended a second time.
    """
    settings = settings or settings_from_env()
    primary = primary_descriptor(settings, primary_path)
    sources = [primary]
    primary_abs = os.path.abspath(primary.origin)

    for name in scan_directory(settings.recommended_dir, settings.suffix):
        origin = os.path.join(settings.recommended_dir, name)
        if os.path.abspath(origin) == primary_abs:
            continue
        sources.append(SourceDescriptor(origin=origin))

    logger.debug("kubeconfig chain: %s", [s.origin for s in sources])
    return LoaderChain(sources=tuple(sources))
