"""Conventional kubeconfig locations and the primary path resolution rule."""
from __future__ import annotations
import os
from typing import Mapping, Optional

RECOMMENDED_HOME_DIR = '.kube'
RECOMMENDED_FILE_NAME = 'config'
RECOMMENDED_CONFIG_PATH_ENV_VAR = 'KUBECONFIG'
KUBECONFIG_SUFFIX = '.kubeconfig'

__all__ = [
    'RECOMMENDED_HOME_DIR', 'RECOMMENDED_FILE_NAME', 'RECOMMENDED_CONFIG_PATH_ENV_VAR', 'KUBECONFIG_SUFFIX',
    'recommended_config_dir', 'recommended_home_file', 'first_env_path', 'resolve_primary_path',
    'default_primary_path',
]


def recommended_config_dir(home: Optional[str] = None) -> str:
    home = home or os.path.expanduser('~')
    return os.path.join(home, RECOMMENDED_HOME_DIR)


def recommended_home_file(home: Optional[str] = None) -> str:
    return os.path.join(recommended_config_dir(home), RECOMMENDED_FILE_NAME)


def first_env_path(value: Optional[str]) -> Optional[str]:
    """First non-empty entry of a KUBECONFIG-style path list."""
    if not value:
        return None
    for part in value.split(os.pathsep):
        part = part.strip()
        if part:
            return part
    return None


def resolve_primary_path(
    explicit: Optional[str] = None,
    env_value: Optional[str] = None,
    default_path: Optional[str] = None,
) -> str:
    """explicit override > $KUBECONFIG > ~/.kube/config"""
    if explicit:
        return explicit
    from_env = first_env_path(env_value)
    if from_env:
        return from_env
    return default_path or recommended_home_file()


def default_primary_path(environ: Optional[Mapping[str, str]] = None) -> str:
    env = os.environ if environ is None else environ
    return resolve_primary_path(
        env_value=env.get(RECOMMENDED_CONFIG_PATH_ENV_VAR),
        default_path=recommended_home_file(env.get('HOME')),
    )
