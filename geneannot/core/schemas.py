"""
Pydantic schemas for request/response validation and data models.

This module defines the data structures used throughout the application
for type safety and API documentation. Schemas include:
- Records decoded from the ANNOq and PANTHER responses
- The combined per-gene result
- Upload and error response bodies
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _UpstreamRecord(BaseModel):
    """Shared decoding rules: unknown keys are ignored, missing or null keys become ''."""

    model_config = ConfigDict(extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return "" if value is None else value


class AnnoqRecord(_UpstreamRecord):
    """Annotation returned by the ANNOq service."""

    gene_id: str = ""
    annotation: str = ""


class PantherRecord(_UpstreamRecord):
    """Supplementary information returned by the PANTHER service."""

    gene_id: str = ""
    additional_info: str = ""


class CombinedResult(BaseModel):
    """One gene's identifier merged with both external annotations."""

    GeneID: str
    Annotation: str
    AdditionalInfo: str

    @classmethod
    def merge(cls, annoq: AnnoqRecord, panther: PantherRecord) -> "CombinedResult":
        return cls(
            GeneID=annoq.gene_id,
            Annotation=annoq.annotation,
            AdditionalInfo=panther.additional_info,
        )


class UploadResponse(BaseModel):
    """Body returned after a successful upload."""

    message: str = "File uploaded successfully"
    genes: List[str] = Field(default_factory=list)
    session_id: str


class ErrorResponse(BaseModel):
    """Body returned for every error response."""

    error: str
