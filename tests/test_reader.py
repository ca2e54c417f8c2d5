import os
import pytest

from kluster.main.kubeconfig.errors import SourceReadError
from kluster.main.kubeconfig.model import Configuration, LoadedSource, SourceStatus
from kluster.main.kubeconfig.reader import load_source, parse_config, read_config


def test_missing_file_is_empty_config(tmp_path):
    path = str(tmp_path / 'absent')
    cfg = read_config(path)
    assert cfg.is_empty()
    assert cfg.current_context == ''
    src = load_source(path)
    assert src.status is SourceStatus.MISSING
    assert src.missing


def test_reads_named_entries(tmp_path, write_kubeconfig):
    path = write_kubeconfig(
        tmp_path / 'config',
        clusters={'prod': 'https://p'},
        contexts={'prod-ctx': ('prod', 'admin')},
        users=['admin'],
        current_context='prod-ctx',
    )
    src = load_source(str(path))
    assert src.status is SourceStatus.LOADED
    cfg = src.config
    assert cfg.clusters['prod'].server == 'https://p'
    assert cfg.clusters['prod'].location_of_origin == str(path)
    assert cfg.contexts['prod-ctx'].cluster == 'prod'
    assert cfg.users['admin'].token == 'token-admin'
    assert cfg.current_context == 'prod-ctx'
    assert cfg.current_cluster_name() == 'prod'


def test_empty_document_is_empty_config(tmp_path):
    path = tmp_path / 'config'
    path.write_text('')
    assert read_config(str(path)).is_empty()


def test_duplicate_names_last_wins():
    data = {'clusters': [
        {'name': 'a', 'cluster': {'server': 'https://first'}},
        {'name': 'a', 'cluster': {'server': 'https://second'}},
    ]}
    assert parse_config(data).clusters['a'].server == 'https://second'


def test_invalid_yaml_raises_source_read_error(tmp_path):
    path = tmp_path / 'bad.kubeconfig'
    path.write_text('clusters: [unclosed\n')
    with pytest.raises(SourceReadError) as info:
        read_config(str(path))
    assert info.value.path == str(path)
    assert info.value.cause is not None


def test_directory_in_place_of_file_raises(tmp_path):
    with pytest.raises(SourceReadError):
        read_config(str(tmp_path))


@pytest.mark.parametrize('data', [
    ['not', 'a', 'mapping'],
    {'clusters': {'a': 'b'}},
    {'clusters': ['just-a-string']},
    {'contexts': [{'context': {'cluster': 'x'}}]},
])
def test_malformed_documents(data):
    with pytest.raises(SourceReadError):
        parse_config(data, 'somefile')


def test_relative_paths_resolved_against_file_dir(tmp_path):
    data = {
        'clusters': [{'name': 'c', 'cluster': {'server': 'https://c', 'certificate-authority': 'ca.crt'}}],
        'users': [{'name': 'u', 'user': {'client-certificate': '/abs/cert.pem', 'client-key': 'keys/u.key'}}],
    }
    origin = str(tmp_path / 'config')
    cfg = parse_config(data, origin)
    assert cfg.clusters['c'].certificate_authority == os.path.join(str(tmp_path), 'ca.crt')
    assert cfg.users['u'].client_certificate == '/abs/cert.pem'
    assert cfg.users['u'].client_key == os.path.join(str(tmp_path), 'keys/u.key')


def test_insecure_skip_tls_verify_requires_boolean():
    ok = {'clusters': [{'name': 'c', 'cluster': {'server': 'https://c', 'insecure-skip-tls-verify': True}}]}
    assert parse_config(ok).clusters['c'].insecure_skip_tls_verify is True
    assert parse_config({'clusters': [{'name': 'c', 'cluster': {}}]}).clusters['c'].insecure_skip_tls_verify is False
    quoted = {'clusters': [{'name': 'c', 'cluster': {'server': 'https://c', 'insecure-skip-tls-verify': 'false'}}]}
    with pytest.raises(SourceReadError):
        parse_config(quoted, 'somefile')


@pytest.mark.parametrize('data', [
    {'clusters': [{'name': 'c', 'cluster': {'certificate-authority': 123}}]},
    {'clusters': [{'name': 'c', 'cluster': {'server': ['https://c']}}]},
    {'contexts': [{'name': 'x', 'context': {'cluster': 7}}]},
    {'users': [{'name': 'u', 'user': {'client-key': 1.5}}]},
    {'users': [{'name': 'u', 'user': {'exec': 'aws'}}]},
    {'clusters': [{'name': 12, 'cluster': {}}]},
    {'current-context': 42},
])
def test_wrongly_typed_fields(data):
    with pytest.raises(SourceReadError):
        parse_config(data, 'somefile')


def test_wrongly_typed_file_reports_path(tmp_path):
    path = tmp_path / 'bad.kubeconfig'
    path.write_text('clusters:\n- name: x\n  cluster:\n    certificate-authority: 123\n')
    with pytest.raises(SourceReadError) as info:
        load_source(str(path))
    assert info.value.path == str(path)


def test_loaded_sources_compare_by_config():
    a = LoadedSource('f', Configuration(current_context='a'))
    b = LoadedSource('f', Configuration(current_context='b'))
    assert a != b
    assert a == LoadedSource('f', Configuration(current_context='a'))
