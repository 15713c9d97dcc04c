import socket

import pytest

from vespa_doc.target import get_target

from .fake_document_api import FakeDocumentApi


@pytest.fixture
def document_api():
    api = FakeDocumentApi()
    api.start()
    yield api
    api.stop()


@pytest.fixture
def target(document_api):
    return get_target(document_api.url)


@pytest.fixture
def closed_port_url():
    with socket.socket() as s:
        s.bind(('127.0.0.1', 0))
        port = s.getsockname()[1]
    return f'http://127.0.0.1:{port}'


@pytest.fixture
def doc_file(tmp_path):
    path = tmp_path / 'doc.json'
    path.write_bytes(b'{"fields":{"a":1}}')
    return path
