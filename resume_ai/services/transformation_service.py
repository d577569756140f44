"""
AI transformation service — résumé extraction, job-fit analysis and
bullet-point suggestions over a schema-constrained generative backend.

Every call resolves its own credential and builds its own backend client,
so a caller-supplied key never leaks into another request. No retries:
a failed attempt is surfaced immediately as a classified error.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from pydantic import ValidationError

from resume_ai.domain.enums import AIOperation
from resume_ai.domain.errors import (
    AnalysisError,
    BackendError,
    ExtractionError,
    SuggestionError,
    TransformationError,
)
from resume_ai.domain.models import FitAnalysis, ResumeDocument
from resume_ai.domain.schemas import OPERATION_SCHEMAS
from resume_ai.ports.ai_port import AIPort
from resume_ai.services.credentials import resolve_credential
from resume_ai.services.decoding import decode_json
from resume_ai.services.prompts import (
    Prompt,
    build_extraction_prompt,
    build_fit_analysis_prompt,
    build_suggestion_prompt,
)

logger = logging.getLogger(__name__)

BackendFactory = Callable[[str], AIPort]


class TransformationService:
    """Runs the three AI operations and classifies their failures."""

    def __init__(self, backend_factory: BackendFactory, fallback_key: str | None = None) -> None:
        self._backend_factory = backend_factory
        self._fallback_key = fallback_key

    async def extract_resume(self, raw_text: str, api_key: str | None = None) -> ResumeDocument:
        """Parse freeform résumé text into a ResumeDocument."""
        logger.info("Résumé extraction requested (%d chars)", len(raw_text))
        data = await self._generate(
            AIOperation.EXTRACT_RESUME,
            build_extraction_prompt(raw_text),
            ExtractionError,
            api_key,
        )
        if not isinstance(data, dict):
            raise self._fail(
                AIOperation.EXTRACT_RESUME,
                ExtractionError("The AI service did not return a résumé object."),
            )
        try:
            return ResumeDocument.model_validate(data)
        except ValidationError as exc:
            raise self._fail(
                AIOperation.EXTRACT_RESUME,
                ExtractionError(f"The parsed résumé did not match the expected shape: {_summarize(exc)}"),
            ) from exc

    async def analyze_fit(
        self, resume: ResumeDocument, job_description: str, api_key: str | None = None
    ) -> FitAnalysis:
        """
        Score a résumé against a job description.

        The job description is not re-validated here; callers reject blank input.
        """
        logger.info("Fit analysis requested (job description: %d chars)", len(job_description))
        data = await self._generate(
            AIOperation.ANALYZE_FIT,
            build_fit_analysis_prompt(resume, job_description),
            AnalysisError,
            api_key,
        )
        if not isinstance(data, dict):
            raise self._fail(
                AIOperation.ANALYZE_FIT,
                AnalysisError("The AI service did not return an analysis object."),
            )
        try:
            return FitAnalysis.model_validate(data)
        except ValidationError as exc:
            raise self._fail(
                AIOperation.ANALYZE_FIT,
                AnalysisError(f"The analysis did not match the expected shape: {_summarize(exc)}"),
            ) from exc

    async def suggest_bullets(self, role: str, api_key: str | None = None) -> list[str]:
        """Return bullet-point suggestions for a role, in the order the model gave them."""
        logger.info("Bullet suggestions requested for role %r", role)
        data = await self._generate(
            AIOperation.SUGGEST_BULLETS,
            build_suggestion_prompt(role),
            SuggestionError,
            api_key,
        )
        if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
            raise self._fail(
                AIOperation.SUGGEST_BULLETS,
                SuggestionError("The AI service did not return a list of suggestions."),
            )
        suggestions = [item for item in data if item.strip()]
        if not suggestions:
            raise self._fail(
                AIOperation.SUGGEST_BULLETS,
                SuggestionError("The AI service returned no suggestions."),
            )
        return suggestions

    # ── internals ─────────────────────────────────────────────

    async def _generate(
        self,
        operation: AIOperation,
        prompt: Prompt,
        error_cls: type[TransformationError],
        api_key: str | None,
    ) -> Any:
        """Resolve the credential, call the backend once and decode its JSON."""
        key = resolve_credential(api_key, self._fallback_key)
        backend = self._backend_factory(key)
        schema = OPERATION_SCHEMAS[operation]

        try:
            raw = await backend.generate_json(prompt.system, prompt.user, schema)
        except BackendError as exc:
            raise self._fail(operation, error_cls(f"The AI service request failed: {exc}")) from exc

        try:
            return decode_json(raw, error_cls)
        except TransformationError as exc:
            self._fail(operation, exc)
            raise

    @staticmethod
    def _fail(operation: AIOperation, error: TransformationError) -> TransformationError:
        logger.warning("%s failed (%s): %s", operation.value, error.kind.value, error.detail)
        return error


def _summarize(exc: ValidationError) -> str:
    """First validation problem as 'path: message'."""
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "root"
    extra = f" (+{exc.error_count() - 1} more)" if exc.error_count() > 1 else ""
    return f"{location}: {first['msg']}{extra}"
