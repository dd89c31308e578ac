"""
Exception hierarchy for the gene annotation service.

Every error raised by the pipeline derives from GeneAnnotError. The API
layer maps each family to an HTTP status and a short message:
- ClientInputError -> 400
- UploadReadError, ParseError, AnnotationServiceError -> 500
"""

from typing import Optional


class GeneAnnotError(Exception):
    """Base class for all service errors."""


class ConfigError(GeneAnnotError, RuntimeError):
    """Raised when the service configuration is missing or invalid."""


class ClientInputError(GeneAnnotError):
    """Raised when the caller sends a missing or unusable upload."""


class SessionNotFoundError(ClientInputError):
    """Raised when a query names no session, or one that is unknown or expired."""


class UploadReadError(GeneAnnotError):
    """Raised when an uploaded file cannot be read."""


class ParseError(GeneAnnotError):
    """Raised when an uploaded file is not well-formed delimited text."""


class AnnotationServiceError(GeneAnnotError):
    """
    Raised when a call to an external annotation service fails.

    Attributes:
        service: Display name of the failing service (e.g. "ANNOq").
        gene_id: Identifier that was being queried.
    """

    def __init__(self, service: str, gene_id: str, message: str):
        super().__init__(f"{service} query for '{gene_id}' failed: {message}")
        self.service = service
        self.gene_id = gene_id


class NetworkError(AnnotationServiceError):
    """The connection could not be established or timed out."""


class UpstreamStatusError(AnnotationServiceError):
    """The service answered with a non-2xx status."""

    def __init__(self, service: str, gene_id: str, status_code: int, message: Optional[str] = None):
        super().__init__(service, gene_id, message or f"HTTP {status_code}")
        self.status_code = status_code


class DecodeError(AnnotationServiceError):
    """The response body did not decode into the expected record."""
