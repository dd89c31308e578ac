"""
Single-call HTTP helper shared by the annotation clients.

Issues one ``GET {base_url}/{gene_id}`` and decodes the JSON object into a
pydantic record. There are no retries: every failure is raised as the
matching AnnotationServiceError subclass on the first attempt.
"""

import logging
from typing import Optional, Type, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from geneannot.core.errors import DecodeError, NetworkError, UpstreamStatusError

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def build_http_client(
    timeout: Optional[float],
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """Shared client for both services; success is judged on the final response after redirects."""
    return httpx.Client(timeout=timeout, transport=transport, follow_redirects=True)


def build_url(base_url: str, gene_id: str) -> str:
    return f"{base_url.rstrip('/')}/{quote(gene_id, safe='')}"


def fetch_record(
    http: httpx.Client,
    service: str,
    base_url: str,
    gene_id: str,
    model: Type[RecordT],
) -> RecordT:
    """
    Fetch and decode one record from an annotation service.

    Args:
        http: Shared HTTP client (carries the configured timeout)
        service: Display name used in errors and logs
        base_url: Endpoint prefix; the gene identifier is appended as a path segment
        gene_id: Identifier to query
        model: Record type the JSON object is decoded into

    Raises:
        NetworkError: Connection failure or timeout
        UpstreamStatusError: Non-2xx response
        DecodeError: Body is not a JSON object of the expected shape
    """
    url = build_url(base_url, gene_id)
    logger.debug(f"GET {url}")

    try:
        response = http.get(url)
    except httpx.TransportError as exc:
        logger.warning(f"{service} request for '{gene_id}' failed: {exc!r}")
        raise NetworkError(service, gene_id, str(exc) or type(exc).__name__) from exc

    if not response.is_success:
        logger.warning(f"{service} returned HTTP {response.status_code} for '{gene_id}'")
        raise UpstreamStatusError(service, gene_id, response.status_code)

    try:
        payload = response.json()
    except ValueError as exc:
        logger.warning(f"{service} returned a non-JSON body for '{gene_id}'")
        raise DecodeError(service, gene_id, f"invalid JSON: {exc}") from exc

    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        logger.warning(f"{service} returned an unexpected payload for '{gene_id}'")
        raise DecodeError(service, gene_id, f"unexpected payload: {exc.error_count()} error(s)") from exc
