"""Tool settings, constructed explicitly and passed down to the loaders.

Settings files are optional YAML documents merged in order (later overrides
earlier):

    kubeconfig: /path/to/primary        # optional primary override
    discovery:
      dir: /home/me/.kube               # recommended extra-configs directory
      suffix: .kubeconfig
"""
from __future__ import annotations
import os
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Mapping, Optional

from .config import MissingConfigError, ensure_keys
from .config_loader import load_configs
from ..kubeconfig.paths import (
    KUBECONFIG_SUFFIX,
    RECOMMENDED_CONFIG_PATH_ENV_VAR,
    first_env_path,
    recommended_config_dir,
)

SETTINGS_PATH_ENV_VAR = 'KLUSTER_CONFIG'


@dataclass(frozen=True)
class KlusterSettings:
    recommended_dir: str
    suffix: str = KUBECONFIG_SUFFIX
    kubeconfig: Optional[str] = None       # explicit primary path from settings/flags
    env_kubeconfig: Optional[str] = None   # value captured from $KUBECONFIG

    @classmethod
    def defaults(cls, home: Optional[str] = None) -> 'KlusterSettings':
        return cls(recommended_dir=recommended_config_dir(home))


def settings_from_dict(data: Dict[str, Any], base: Optional[KlusterSettings] = None) -> KlusterSettings:
    settings = base or KlusterSettings.defaults()
    discovery = data.get('discovery')
    if discovery is not None:
        if not isinstance(discovery, dict):
            raise MissingConfigError("Section 'discovery' must be a mapping")
        ensure_keys(discovery, ['dir', 'suffix'], 'discovery')
        settings = replace(
            settings,
            recommended_dir=os.path.expanduser(str(discovery['dir'])),
            suffix=str(discovery['suffix']),
        )
    if data.get('kubeconfig'):
        settings = replace(settings, kubeconfig=os.path.expanduser(str(data['kubeconfig'])))
    return settings


def load_settings(paths: List[str], base: Optional[KlusterSettings] = None) -> KlusterSettings:
    return settings_from_dict(load_configs(paths), base)


def settings_from_env(environ: Optional[Mapping[str, str]] = None) -> KlusterSettings:
    """Build settings from the process environment (or a given mapping).

    $KUBECONFIG is captured here once; $KLUSTER_CONFIG optionally names a
    settings YAML file.
    """
    env = os.environ if environ is None else environ
    settings = replace(
        KlusterSettings.defaults(env.get('HOME')),
        env_kubeconfig=first_env_path(env.get(RECOMMENDED_CONFIG_PATH_ENV_VAR)),
    )
    settings_path = env.get(SETTINGS_PATH_ENV_VAR)
    if settings_path:
        settings = load_settings([os.path.expanduser(settings_path)], settings)
    return settings


__all__ = [
    'SETTINGS_PATH_ENV_VAR', 'KlusterSettings', 'settings_from_dict', 'load_settings', 'settings_from_env',
]
