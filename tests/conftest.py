from __future__ import annotations

import json

import pytest

from resume_ai.domain.errors import BackendError
from resume_ai.domain.schemas import ResponseSchema
from resume_ai.ports.ai_port import AIPort
from resume_ai.services.transformation_service import TransformationService


class FakeBackend(AIPort):
    """In-memory AIPort returning a canned response or raising a canned error."""

    def __init__(self, response: str | None = None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    async def generate_json(
        self, system_prompt: str, user_prompt: str, schema: ResponseSchema
    ) -> str:
        self.calls.append({"system": system_prompt, "user": user_prompt, "schema": schema})
        if self.error is not None:
            raise self.error
        return self.response  # type: ignore[return-value]


class BackendFactory:
    """Records the keys it was asked to build a backend for."""

    def __init__(self, backend: FakeBackend) -> None:
        self.backend = backend
        self.keys: list[str] = []

    def __call__(self, api_key: str) -> AIPort:
        self.keys.append(api_key)
        return self.backend


def make_service(
    response: object = None,
    *,
    error: Exception | None = None,
    fallback_key: str | None = "server-key",
) -> tuple[TransformationService, BackendFactory]:
    if response is not None and not isinstance(response, str):
        response = json.dumps(response)
    factory = BackendFactory(FakeBackend(response=response, error=error))
    return TransformationService(backend_factory=factory, fallback_key=fallback_key), factory


@pytest.fixture
def backend_error() -> BackendError:
    return BackendError("APIConnectionError: Connection error.")


@pytest.fixture
def john_doe_payload() -> dict:
    return {
        "fullName": "John Doe",
        "title": "Software Engineer",
        "contact": {"email": "john@x.com", "phone": "", "location": ""},
        "summary": "",
        "experience": [],
        "education": [],
        "skills": [],
    }


@pytest.fixture
def fit_payload() -> dict:
    return {
        "score": 72,
        "summary": "Solid design background with partial overlap.",
        "strengths": ["Design systems", "Mentoring", "SaaS experience"],
        "improvements": ["Quantify impact", "Add research methods", "Mention accessibility"],
        "missingKeywords": ["Accessibility", "WCAG"],
    }
