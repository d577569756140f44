"""
Decoding of raw model output shared by every AI operation.

Models sometimes wrap JSON in a markdown code fence even when a response
schema is declared, so fences are stripped before parsing.
"""

from __future__ import annotations

import json
import re
from typing import Any

from resume_ai.domain.errors import TransformationError

_LEADING_FENCE = re.compile(r"^```[\w-]*[ \t]*(?:\r?\n)?")
_TRAILING_FENCE = re.compile(r"(?:\r?\n)?[ \t]*```$")


def strip_code_fence(text: str) -> str:
    """Remove a leading and/or trailing ``` fence marker. Unfenced text is returned trimmed."""
    body = text.strip()
    body = _LEADING_FENCE.sub("", body, count=1)
    body = _TRAILING_FENCE.sub("", body, count=1)
    return body.strip()


def decode_json(raw: str | None, error_cls: type[TransformationError]) -> Any:
    """
    Parse model output into JSON.

    Raises `error_cls` when the output is empty or is not valid JSON.
    """
    if raw is None or not raw.strip():
        raise error_cls("The AI service returned an empty response.")

    body = strip_code_fence(raw)
    if not body:
        raise error_cls("The AI service returned an empty response.")

    try:
        return json.loads(body)
    except json.JSONDecodeError as exc:
        raise error_cls(
            f"The AI service returned malformed JSON ({exc.msg} at line {exc.lineno}, column {exc.colno})."
        ) from exc
