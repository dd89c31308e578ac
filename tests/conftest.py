from typing import Dict, List, Tuple
from urllib.parse import unquote

import httpx
import pytest
from fastapi.testclient import TestClient

from geneannot.api.app import create_app
from geneannot.core.config import Config

ANNOQ_URL = "http://annoq.test/api/query"
PANTHER_URL = "http://panther.test/api/query"


class StubServices:
    """
    In-process stand-in for the ANNOq and PANTHER endpoints.

    ``annoq`` and ``panther`` map a gene ID to either a JSON body (served
    with 200), a ``(status, body)`` tuple, or an exception instance to raise.
    Unknown genes answer 404. Every request is recorded in ``calls``.
    """

    def __init__(self):
        self.annoq: Dict[str, object] = {}
        self.panther: Dict[str, object] = {}
        self.calls: List[Tuple[str, str]] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        service = "annoq" if request.url.host == "annoq.test" else "panther"
        gene_id = unquote(request.url.raw_path.decode("ascii").rsplit("/", 1)[-1])
        self.calls.append((service, gene_id))

        table = self.annoq if service == "annoq" else self.panther
        if gene_id not in table:
            return httpx.Response(404)

        entry = table[gene_id]
        if isinstance(entry, Exception):
            raise entry
        status, body = entry if isinstance(entry, tuple) else (200, entry)
        if isinstance(body, (bytes, str)):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def stubs():
    return StubServices()


@pytest.fixture
def http_client(stubs):
    with httpx.Client(transport=stubs.transport) as client:
        yield client


@pytest.fixture
def config():
    return Config(
        ANNOQ_API_URL=ANNOQ_URL,
        PANTHER_API_URL=PANTHER_URL,
        ANNOTATION_TIMEOUT="5",
        SESSION_TTL_SECONDS=3600,
        CORS_ALLOW_ORIGINS="*",
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def app(config, stubs):
    return create_app(config, transport=stubs.transport)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
