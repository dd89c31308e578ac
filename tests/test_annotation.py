import httpx
import pytest

from geneannot.annotation import AnnoqClient, PantherClient
from geneannot.annotation.http import build_http_client, build_url
from geneannot.core.errors import DecodeError, NetworkError, UpstreamStatusError

from tests.conftest import ANNOQ_URL, PANTHER_URL


@pytest.fixture
def annoq(http_client):
    return AnnoqClient(http_client, ANNOQ_URL)


@pytest.fixture
def panther(http_client):
    return PantherClient(http_client, PANTHER_URL)


def test_annoq_decodes_record(annoq, stubs):
    stubs.annoq["BRCA1"] = {"gene_id": "BRCA1", "annotation": "DNA repair"}

    record = annoq.query("BRCA1")

    assert record.gene_id == "BRCA1"
    assert record.annotation == "DNA repair"
    assert stubs.calls == [("annoq", "BRCA1")]


def test_panther_decodes_record(panther, stubs):
    stubs.panther["TP53"] = {"gene_id": "TP53", "additional_info": "PTHR11447"}

    record = panther.query("TP53")

    assert record.additional_info == "PTHR11447"


def test_unknown_fields_ignored_and_missing_fields_default_to_empty(annoq, panther, stubs):
    stubs.annoq["EGFR"] = {"annotation": "kinase", "score": 0.9}
    stubs.panther["EGFR"] = {"gene_id": None}

    assert annoq.query("EGFR").gene_id == ""
    assert panther.query("EGFR").additional_info == ""
    assert panther.query("EGFR").gene_id == ""


def test_non_success_status_raises(annoq, stubs):
    stubs.annoq["BRCA1"] = (503, {"error": "maintenance"})

    with pytest.raises(UpstreamStatusError) as exc_info:
        annoq.query("BRCA1")

    assert exc_info.value.status_code == 503
    assert exc_info.value.service == "ANNOq"
    assert exc_info.value.gene_id == "BRCA1"


def test_other_2xx_statuses_are_accepted(panther, stubs):
    stubs.panther["TP53"] = (203, {"additional_info": "cached"})

    assert panther.query("TP53").additional_info == "cached"


def test_connection_failure_raises_network_error(annoq, stubs):
    stubs.annoq["BRCA1"] = httpx.ConnectError("connection refused")

    with pytest.raises(NetworkError):
        annoq.query("BRCA1")


def test_timeout_raises_network_error(panther, stubs):
    stubs.panther["BRCA1"] = httpx.ReadTimeout("timed out")

    with pytest.raises(NetworkError) as exc_info:
        panther.query("BRCA1")

    assert exc_info.value.service == "PANTHER"


def test_invalid_json_raises_decode_error(annoq, stubs):
    stubs.annoq["BRCA1"] = "<html>not json</html>"

    with pytest.raises(DecodeError):
        annoq.query("BRCA1")


@pytest.mark.parametrize("body", [["BRCA1"], {"annotation": 42}, "null"])
def test_unexpected_shape_raises_decode_error(annoq, stubs, body):
    stubs.annoq["BRCA1"] = body

    with pytest.raises(DecodeError):
        annoq.query("BRCA1")


def test_each_call_is_attempted_once(annoq, stubs):
    stubs.annoq["BRCA1"] = (500, {})

    with pytest.raises(UpstreamStatusError):
        annoq.query("BRCA1")

    assert stubs.calls == [("annoq", "BRCA1")]


def test_gene_id_is_escaped_as_one_path_segment(annoq, stubs):
    stubs.annoq["HLA-A/B"] = {"gene_id": "HLA-A/B", "annotation": "MHC"}

    assert annoq.query("HLA-A/B").annotation == "MHC"
    assert build_url(ANNOQ_URL + "/", "HLA-A/B") == f"{ANNOQ_URL}/HLA-A%2FB"


def redirect_to_https(final: httpx.Response):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.scheme == "http":
            return httpx.Response(301, headers={"Location": str(request.url.copy_with(scheme="https"))})
        return final

    return httpx.MockTransport(handler)


def test_redirects_are_followed():
    transport = redirect_to_https(httpx.Response(200, json={"gene_id": "BRCA1", "annotation": "x"}))

    with build_http_client(5.0, transport=transport) as http:
        record = AnnoqClient(http, ANNOQ_URL).query("BRCA1")

    assert record.annotation == "x"


def test_status_is_judged_after_redirects():
    transport = redirect_to_https(httpx.Response(404))

    with build_http_client(5.0, transport=transport) as http:
        with pytest.raises(UpstreamStatusError) as exc_info:
            PantherClient(http, PANTHER_URL).query("BRCA1")

    assert exc_info.value.status_code == 404
