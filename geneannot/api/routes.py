"""
API route definitions.

This module defines the HTTP endpoints for the annotation service:
- POST /upload - Parse an uploaded gene list and open a session for it
- GET /query - Annotate the genes of a session with ANNOq and PANTHER
"""

import io
import logging
from typing import List, Optional

from fastapi import APIRouter, Cookie, Depends, File, Header, Query, Request, Response, UploadFile

from geneannot.core.errors import ClientInputError, UploadReadError
from geneannot.core.schemas import CombinedResult, UploadResponse
from geneannot.enrichment import AnnotationPipeline
from geneannot.ingestion import delimiter_for, parse_genes
from geneannot.session import SessionStore

logger = logging.getLogger(__name__)

SESSION_COOKIE = "session_id"

router = APIRouter()


def get_sessions(request: Request) -> SessionStore:
    return request.app.state.sessions


def get_pipeline(request: Request) -> AnnotationPipeline:
    return request.app.state.pipeline


@router.post("/upload", response_model=UploadResponse)
def upload(
    response: Response,
    file: Optional[UploadFile] = File(None),
    sessions: SessionStore = Depends(get_sessions),
):
    """
    Parse an uploaded gene list and store it in a new session.

    The session token is returned in the body and set as a cookie so a
    browser client can call /query without passing it explicitly.
    """
    if file is None or not file.filename:
        raise ClientInputError("Upload must include a file under the 'file' field")

    try:
        content = file.file.read()
    except OSError as exc:
        raise UploadReadError(f"Could not read '{file.filename}': {exc}") from exc

    genes = parse_genes(io.BytesIO(content), delimiter=delimiter_for(file.filename))
    session_id = sessions.create(genes)
    logger.info(f"Uploaded '{file.filename}' with {len(genes)} gene(s)")

    response.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
    return UploadResponse(genes=genes, session_id=session_id)


@router.get("/query", response_model=List[CombinedResult])
def query(
    session_id: Optional[str] = Query(None),
    session_header: Optional[str] = Header(None, alias="X-Session-ID"),
    session_cookie: Optional[str] = Cookie(None, alias=SESSION_COOKIE),
    sessions: SessionStore = Depends(get_sessions),
    pipeline: AnnotationPipeline = Depends(get_pipeline),
):
    """Annotate every gene of the caller's session, failing on the first upstream error."""
    token = session_id or session_header or session_cookie
    genes = sessions.get(token)
    return pipeline.run(genes)
