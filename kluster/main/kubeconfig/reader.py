"""Reading a single kubeconfig file into a Configuration.

Missing files are empty configurations. Anything else that goes wrong while
reading or parsing raises SourceReadError; whether that is fatal is the
caller's decision.
"""
from __future__ import annotations
import logging
import os
from typing import Any, Callable, Dict, List, Optional, TypeVar

import yaml

from .errors import SourceReadError
from .model import AuthInfo, ClusterEntry, Configuration, ContextEntry, LoadedSource, SourceStatus

logger = logging.getLogger(__name__)

__all__ = ['parse_config', 'read_config', 'load_source']

T = TypeVar('T')


def _resolve(base_dir: str, value: Optional[str]) -> Optional[str]:
    # relative file references are relative to the kubeconfig file
    if not value or not base_dir or os.path.isabs(value):
        return value
    return os.path.join(base_dir, value)


def _str_field(body: Dict[str, Any], key: str, where: str, origin: str) -> Optional[str]:
    value = body.get(key)
    if value is None or isinstance(value, str):
        return value
    raise SourceReadError(origin, f"'{where}.{key}' must be a string, got {type(value).__name__}")


def _bool_field(body: Dict[str, Any], key: str, where: str, origin: str) -> bool:
    value = body.get(key, False)
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    raise SourceReadError(origin, f"'{where}.{key}' must be a boolean, got {type(value).__name__}")


def _map_field(body: Dict[str, Any], key: str, where: str, origin: str) -> Optional[Dict[str, Any]]:
    value = body.get(key)
    if value is None or isinstance(value, dict):
        return value
    raise SourceReadError(origin, f"'{where}.{key}' must be a mapping")


def _named_items(data: Dict[str, Any], section: str, inner_key: str, origin: str) -> List[tuple[str, Dict[str, Any]]]:
    raw = data.get(section)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise SourceReadError(origin, f"'{section}' must be a list")
    items = []
    for item in raw:
        if not isinstance(item, dict):
            raise SourceReadError(origin, f"entry in '{section}' is not a mapping")
        name = item.get('name')
        if not name:
            raise SourceReadError(origin, f"entry in '{section}' has no name")
        if not isinstance(name, str):
            raise SourceReadError(origin, f"name of entry in '{section}' must be a string")
        body = item.get(inner_key) or {}
        if not isinstance(body, dict):
            raise SourceReadError(origin, f"'{section}.{name}.{inner_key}' is not a mapping")
        items.append((name, body))
    return items


def _build_map(items: List[tuple[str, Dict[str, Any]]], factory: Callable[[str, Dict[str, Any]], T]) -> Dict[str, T]:
    out: Dict[str, T] = {}
    for name, body in items:
        # duplicate names: last one in the file wins
        out[name] = factory(name, body)
    return out


def parse_config(data: Any, origin: str = '') -> Configuration:
    """Build a Configuration from an already-decoded kubeconfig document.

    Scalar fields must have the types the kubeconfig format defines; a wrong
    type is a SourceReadError, never coerced.
    """
    if data is None:
        return Configuration()
    if not isinstance(data, dict):
        raise SourceReadError(origin, "top-level document is not a mapping")

    base_dir = os.path.dirname(os.path.abspath(origin)) if origin else ''

    def cluster(name: str, body: Dict[str, Any]) -> ClusterEntry:
        where = f'clusters.{name}'
        return ClusterEntry(
            name=name,
            server=_str_field(body, 'server', where, origin) or '',
            certificate_authority=_resolve(base_dir, _str_field(body, 'certificate-authority', where, origin)),
            certificate_authority_data=_str_field(body, 'certificate-authority-data', where, origin),
            insecure_skip_tls_verify=_bool_field(body, 'insecure-skip-tls-verify', where, origin),
            tls_server_name=_str_field(body, 'tls-server-name', where, origin),
            proxy_url=_str_field(body, 'proxy-url', where, origin),
            location_of_origin=origin,
        )

    def context(name: str, body: Dict[str, Any]) -> ContextEntry:
        where = f'contexts.{name}'
        return ContextEntry(
            name=name,
            cluster=_str_field(body, 'cluster', where, origin) or '',
            user=_str_field(body, 'user', where, origin) or '',
            namespace=_str_field(body, 'namespace', where, origin),
            location_of_origin=origin,
        )

    def user(name: str, body: Dict[str, Any]) -> AuthInfo:
        where = f'users.{name}'
        token_file = _str_field(body, 'tokenFile', where, origin) or _str_field(body, 'token-file', where, origin)
        return AuthInfo(
            name=name,
            client_certificate=_resolve(base_dir, _str_field(body, 'client-certificate', where, origin)),
            client_certificate_data=_str_field(body, 'client-certificate-data', where, origin),
            client_key=_resolve(base_dir, _str_field(body, 'client-key', where, origin)),
            client_key_data=_str_field(body, 'client-key-data', where, origin),
            token=_str_field(body, 'token', where, origin),
            token_file=_resolve(base_dir, token_file),
            username=_str_field(body, 'username', where, origin),
            password=_str_field(body, 'password', where, origin),
            exec_config=_map_field(body, 'exec', where, origin),
            auth_provider=_map_field(body, 'auth-provider', where, origin),
            location_of_origin=origin,
        )

    preferences = data.get('preferences') or {}
    if not isinstance(preferences, dict):
        raise SourceReadError(origin, "'preferences' is not a mapping")
    current_context = data.get('current-context') or ''
    if not isinstance(current_context, str):
        raise SourceReadError(origin, "'current-context' must be a string")

    return Configuration(
        clusters=_build_map(_named_items(data, 'clusters', 'cluster', origin), cluster),
        contexts=_build_map(_named_items(data, 'contexts', 'context', origin), context),
        users=_build_map(_named_items(data, 'users', 'user', origin), user),
        current_context=current_context,
        preferences=dict(preferences),
    )


def load_source(path: str) -> LoadedSource:
    """Read `path`, reporting a missing file as an empty MISSING source."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        logger.debug("kubeconfig not found, using empty config: %s", path)
        return LoadedSource(origin=path, config=Configuration(), status=SourceStatus.MISSING)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise SourceReadError(path, exc) from exc
    try:
        config = parse_config(data, path)
    except (TypeError, ValueError) as exc:
        raise SourceReadError(path, exc) from exc
    return LoadedSource(origin=path, config=config)


def read_config(path: str) -> Configuration:
    return load_source(path).config
