import pytest
import yaml


def kubeconfig_doc(clusters=None, current_context='', contexts=None, users=None):
    """clusters: {name: server}; contexts: {name: (cluster, user)}; users: list of names"""
    return {
        'apiVersion': 'v1',
        'kind': 'Config',
        'clusters': [{'name': n, 'cluster': {'server': s}} for n, s in (clusters or {}).items()],
        'contexts': [{'name': n, 'context': {'cluster': c, 'user': u}} for n, (c, u) in (contexts or {}).items()],
        'users': [{'name': n, 'user': {'token': f'token-{n}'}} for n in (users or [])],
        'current-context': current_context,
    }


@pytest.fixture
def write_kubeconfig():
    def _write(path, **kwargs):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(kubeconfig_doc(**kwargs)), encoding='utf-8')
        return path
    return _write
