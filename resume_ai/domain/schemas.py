"""
Response schemas declared to the AI backend, one per operation.

Defined once at import time and checked against the pydantic models by
validate_schemas(), which the app runs on startup.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from resume_ai.domain.enums import AIOperation
from resume_ai.domain.models import (
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    FitAnalysis,
    ResumeDocument,
)

# OpenAI's limit for json_schema names
_SCHEMA_NAME_RE = re.compile(r"^[A-Za-z0-9_-]{1,64}$")
_ROOT_TYPES = {"object", "array"}

_STRING = {"type": "string"}
_STRING_LIST = {"type": "array", "items": _STRING}


@dataclass(frozen=True)
class ResponseSchema:
    """A named JSON schema the backend must conform to."""

    name: str
    description: str
    schema: dict[str, Any]

    @property
    def root_type(self) -> str:
        return self.schema.get("type", "")


RESUME_SCHEMA = ResponseSchema(
    name="resume_document",
    description="A résumé parsed into structured fields.",
    schema={
        "type": "object",
        "properties": {
            "fullName": _STRING,
            "title": _STRING,
            "contact": {
                "type": "object",
                "properties": {
                    "email": _STRING,
                    "phone": _STRING,
                    "location": _STRING,
                    "linkedin": _STRING,
                    "website": _STRING,
                },
                "required": ["email"],
            },
            "summary": _STRING,
            "experience": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "company": _STRING,
                        "role": _STRING,
                        "start": _STRING,
                        "end": _STRING,
                        "description": _STRING_LIST,
                    },
                },
            },
            "education": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "school": _STRING,
                        "degree": _STRING,
                        "year": _STRING,
                    },
                },
            },
            "skills": _STRING_LIST,
        },
        "required": ["fullName", "title", "contact", "summary", "experience", "education", "skills"],
    },
)

FIT_ANALYSIS_SCHEMA = ResponseSchema(
    name="fit_analysis",
    description="An honest evaluation of a résumé against a job description.",
    schema={
        "type": "object",
        "properties": {
            "score": {
                "type": "integer",
                "minimum": 0,
                "maximum": 100,
                "description": "A score from 0 to 100 based on fit for the job description.",
            },
            "summary": {"type": "string", "description": "A 2-3 sentence summary of the résumé's fit."},
            "strengths": {**_STRING_LIST, "description": "List of 3-5 key strengths."},
            "improvements": {**_STRING_LIST, "description": "List of 3-5 specific actionable improvements."},
            "missingKeywords": {
                **_STRING_LIST,
                "description": "Important keywords from the job description missing in the résumé.",
            },
        },
        "required": ["score", "summary", "strengths", "improvements", "missingKeywords"],
    },
)

BULLET_SUGGESTIONS_SCHEMA = ResponseSchema(
    name="bullet_suggestions",
    description="Five résumé bullet points for a role.",
    schema={**_STRING_LIST, "minItems": 1},
)

OPERATION_SCHEMAS: dict[AIOperation, ResponseSchema] = {
    AIOperation.EXTRACT_RESUME: RESUME_SCHEMA,
    AIOperation.ANALYZE_FIT: FIT_ANALYSIS_SCHEMA,
    AIOperation.SUGGEST_BULLETS: BULLET_SUGGESTIONS_SCHEMA,
}

_contact = RESUME_SCHEMA.schema["properties"]["contact"]
_experience = RESUME_SCHEMA.schema["properties"]["experience"]["items"]
_education = RESUME_SCHEMA.schema["properties"]["education"]["items"]

# object nodes that must line up with a model
_MODEL_BINDINGS: tuple[tuple[str, dict[str, Any], type[BaseModel]], ...] = (
    ("resume_document", RESUME_SCHEMA.schema, ResumeDocument),
    ("resume_document.contact", _contact, ContactInfo),
    ("resume_document.experience[]", _experience, ExperienceEntry),
    ("resume_document.education[]", _education, EducationEntry),
    ("fit_analysis", FIT_ANALYSIS_SCHEMA.schema, FitAnalysis),
)


def _wire_keys(model: type[BaseModel]) -> tuple[set[str], set[str]]:
    """Return (all wire keys, required wire keys) for a model."""
    keys: set[str] = set()
    required: set[str] = set()
    for name, field in model.model_fields.items():
        key = field.alias or name
        keys.add(key)
        if field.is_required():
            required.add(key)
    return keys, required


def _check_node(path: str, node: dict[str, Any], errors: list[str]) -> None:
    node_type = node.get("type")
    if node_type == "object":
        properties = node.get("properties")
        if not isinstance(properties, dict) or not properties:
            errors.append(f"{path}: object schema has no properties")
            return
        undeclared = set(node.get("required", [])) - set(properties)
        if undeclared:
            errors.append(f"{path}: required keys not declared: {sorted(undeclared)}")
        for key, child in properties.items():
            _check_node(f"{path}.{key}", child, errors)
    elif node_type == "array":
        items = node.get("items")
        if not isinstance(items, dict):
            errors.append(f"{path}: array schema has no items")
            return
        _check_node(f"{path}[]", items, errors)
    elif node_type not in {"string", "integer", "number", "boolean"}:
        errors.append(f"{path}: unsupported type {node_type!r}")


def validate_schemas() -> None:
    """
    Check every declared schema is well formed and agrees with its model.

    Raises ValueError listing every problem found.
    """
    errors: list[str] = []

    for operation, response_schema in OPERATION_SCHEMAS.items():
        if not _SCHEMA_NAME_RE.match(response_schema.name):
            errors.append(f"{operation.value}: invalid schema name {response_schema.name!r}")
        if response_schema.root_type not in _ROOT_TYPES:
            errors.append(f"{operation.value}: root must be an object or array")
        _check_node(response_schema.name, response_schema.schema, errors)

    for path, node, model in _MODEL_BINDINGS:
        keys, required = _wire_keys(model)
        declared = set(node.get("properties", {}))
        unknown = declared - keys
        if unknown:
            errors.append(f"{path}: keys not on {model.__name__}: {sorted(unknown)}")
        missing = required - declared
        if missing:
            errors.append(f"{path}: required {model.__name__} keys not declared: {sorted(missing)}")

    if errors:
        raise ValueError("Invalid response schemas:\n  " + "\n  ".join(errors))
