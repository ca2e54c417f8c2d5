from fastapi.testclient import TestClient

from app import create_app
from kluster.main.utils.settings import KlusterSettings


def _client(kube):
    return TestClient(create_app(KlusterSettings(recommended_dir=str(kube))))


def test_health(tmp_path):
    assert _client(tmp_path).get('/health').json() == {'status': 'ok'}


def test_clusters_and_effective(tmp_path, write_kubeconfig):
    kube = tmp_path / '.kube'
    write_kubeconfig(
        kube / 'config',
        clusters={'prod': 'https://p'},
        contexts={'prod-ctx': ('prod', 'admin')},
        users=['admin'],
        current_context='prod-ctx',
    )
    write_kubeconfig(kube / 'extra.kubeconfig', clusters={'staging': 'https://s'})
    client = _client(kube)

    rows = client.get('/clusters').json()
    assert rows == [
        {'name': 'prod', 'config': 'config', 'server': 'https://p', 'current': True},
        {'name': 'staging', 'config': 'extra.kubeconfig', 'server': 'https://s', 'current': False},
    ]

    eff = client.get('/config/effective').json()
    assert eff['current_context'] == 'prod-ctx'
    assert eff['current_cluster'] == 'prod'
    assert eff['clusters'] == ['prod', 'staging']
    assert eff['sources'] == [str(kube / 'config'), str(kube / 'extra.kubeconfig')]


def test_primary_override_query_param(tmp_path, write_kubeconfig):
    other = write_kubeconfig(tmp_path / 'elsewhere', clusters={'lab': 'https://l'})
    client = _client(tmp_path / 'empty')
    rows = client.get('/clusters', params={'kubeconfig': str(other)}).json()
    assert [r['name'] for r in rows] == ['lab']


def test_broken_primary_is_server_error(tmp_path):
    kube = tmp_path / '.kube'
    kube.mkdir()
    (kube / 'config').write_text('clusters: [unclosed\n')
    resp = _client(kube).get('/config/effective')
    assert resp.status_code == 500
    assert 'config' in resp.json()['detail']


def test_wrongly_typed_primary_is_handled_error(tmp_path):
    kube = tmp_path / '.kube'
    kube.mkdir()
    (kube / 'config').write_text('clusters:\n- name: x\n  cluster:\n    certificate-authority: 123\n')
    resp = _client(kube).get('/clusters')
    assert resp.status_code == 500
    assert 'certificate-authority' in resp.json()['detail']
