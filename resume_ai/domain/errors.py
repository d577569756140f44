"""
Error taxonomy for the AI transformation layer.

Callers only ever see TransformationError subclasses. BackendError is raised
by adapters and converted into the per-operation error by the service.
"""

from __future__ import annotations

from resume_ai.domain.enums import FailureKind


class TransformationError(Exception):
    """Base class for every classified failure surfaced to callers."""

    kind: FailureKind
    status_code: int = 502

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind.value, "message": self.detail}


class MissingCredentialError(TransformationError):
    """No usable API key: the UI should open its credential-entry surface."""

    kind = FailureKind.MISSING_CREDENTIAL
    status_code = 401


class ExtractionError(TransformationError):
    kind = FailureKind.EXTRACTION_ERROR


class AnalysisError(TransformationError):
    kind = FailureKind.ANALYSIS_ERROR


class SuggestionError(TransformationError):
    kind = FailureKind.SUGGESTION_ERROR


class BackendError(Exception):
    """Transport failure, refusal or malformed envelope from the AI backend."""
