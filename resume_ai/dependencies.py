"""
Dependency Injection container.

Wires abstract ports → concrete adapters. The AI backend is not a
singleton: the transformation service builds one adapter per call from
the credential it resolves.
"""

from functools import lru_cache

from fastapi import Header

from resume_ai.adapters.document_adapter import DocumentAdapter
from resume_ai.adapters.openai_adapter import OpenAIAdapter
from resume_ai.config import settings
from resume_ai.ports.ai_port import AIPort
from resume_ai.ports.document_port import DocumentPort
from resume_ai.services.transformation_service import TransformationService


def _build_openai_adapter(api_key: str) -> AIPort:
    return OpenAIAdapter(
        api_key=api_key,
        model=settings.openai_model,
        timeout=settings.openai_timeout_seconds,
        temperature=settings.openai_temperature,
    )


# ── Singletons (cached) ──────────────────────────────────────


@lru_cache(maxsize=1)
def _get_transformation_service() -> TransformationService:
    return TransformationService(
        backend_factory=_build_openai_adapter,
        fallback_key=settings.openai_api_key,
    )


@lru_cache(maxsize=1)
def _get_document_adapter() -> DocumentAdapter:
    return DocumentAdapter()


# ── FastAPI Dependencies (return abstract types) ──────────────


def get_transformation_service() -> TransformationService:
    """Inject the AI transformation service."""
    return _get_transformation_service()


def get_document_parser() -> DocumentPort:
    """Inject the document text extractor (PDF, DOCX, plain text)."""
    return _get_document_adapter()


def get_api_key(x_api_key: str | None = Header(default=None)) -> str | None:
    """Caller-supplied API key from the X-API-Key header, if any."""
    return x_api_key
