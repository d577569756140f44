"""
Résumé endpoints — thin HTTP layer, delegates all logic to services.

AI failures come back as {"detail": {"kind": ..., "message": ...}}:
401 for a missing credential (the editor opens its key dialog),
502 for everything the AI backend got wrong.
"""

import logging
import os

from fastapi import APIRouter, Depends, HTTPException, UploadFile, status

from resume_ai.dependencies import get_api_key, get_document_parser, get_transformation_service
from resume_ai.domain.errors import TransformationError
from resume_ai.domain.models import (
    AnalyzeRequest,
    AppendBulletsRequest,
    FitAnalysis,
    ParseRequest,
    ResumeDocument,
    SuggestionsResponse,
    SuggestRequest,
)
from resume_ai.domain.samples import sample_resume
from resume_ai.ports.document_port import DocumentPort
from resume_ai.services.resume_editor import append_bullets
from resume_ai.services.transformation_service import TransformationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/resume", tags=["Resume"])


def _to_http(exc: TransformationError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.to_dict())


@router.post("/parse", response_model=ResumeDocument, response_model_exclude_none=True)
async def parse_resume(
    body: ParseRequest,
    api_key: str | None = Depends(get_api_key),
    svc: TransformationService = Depends(get_transformation_service),
):
    """Turn pasted résumé text into a structured résumé."""
    try:
        return await svc.extract_resume(body.text, api_key=api_key)
    except TransformationError as exc:
        raise _to_http(exc)


@router.post("/parse-file", response_model=ResumeDocument, response_model_exclude_none=True)
async def parse_resume_file(
    file: UploadFile,
    api_key: str | None = Depends(get_api_key),
    doc_parser: DocumentPort = Depends(get_document_parser),
    svc: TransformationService = Depends(get_transformation_service),
):
    """Extract text from an uploaded PDF, DOCX or text file, then parse it."""
    if not file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filename is required",
        )

    file_bytes = await file.read()
    if not file_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Empty file uploaded",
        )

    ext = os.path.splitext(file.filename)[1]
    try:
        text = await doc_parser.extract_text(file_bytes, ext)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        )

    logger.info("Extracted %d chars from %s", len(text), file.filename)
    try:
        return await svc.extract_resume(text, api_key=api_key)
    except TransformationError as exc:
        raise _to_http(exc)


@router.post("/analyze", response_model=FitAnalysis)
async def analyze_resume(
    body: AnalyzeRequest,
    api_key: str | None = Depends(get_api_key),
    svc: TransformationService = Depends(get_transformation_service),
):
    """Score the résumé against a job description."""
    try:
        return await svc.analyze_fit(body.resume, body.job_description, api_key=api_key)
    except TransformationError as exc:
        raise _to_http(exc)


@router.post("/suggestions", response_model=SuggestionsResponse)
async def suggest_bullets(
    body: SuggestRequest,
    api_key: str | None = Depends(get_api_key),
    svc: TransformationService = Depends(get_transformation_service),
):
    """Suggest bullet points for an experience entry's role."""
    role = body.role.strip()
    try:
        suggestions = await svc.suggest_bullets(role, api_key=api_key)
    except TransformationError as exc:
        raise _to_http(exc)
    return SuggestionsResponse(role=role, suggestions=suggestions)


@router.post(
    "/experience/{index}/bullets",
    response_model=ResumeDocument,
    response_model_exclude_none=True,
)
async def add_bullets(index: int, body: AppendBulletsRequest):
    """Append chosen suggestions to an experience entry, dropping its blank lines."""
    try:
        return append_bullets(body.resume, index, body.bullets)
    except IndexError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.post("/normalize", response_model=ResumeDocument, response_model_exclude_none=True)
async def normalize_resume(body: ResumeDocument):
    """Validate JSON edited by hand and return it with every field filled in."""
    return body


@router.get("/sample", response_model=ResumeDocument, response_model_exclude_none=True)
async def get_sample_resume():
    """The starter résumé a new editing session opens with."""
    return sample_resume()
