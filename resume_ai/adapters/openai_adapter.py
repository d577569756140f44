"""
Concrete implementation of AIPort using OpenAI chat completions with a
json_schema response format.

One adapter is built per request from the resolved API key.
"""

from __future__ import annotations

import json
from typing import Any

from openai import AsyncOpenAI, OpenAIError

from resume_ai.domain.errors import BackendError
from resume_ai.domain.schemas import ResponseSchema
from resume_ai.ports.ai_port import AIPort
from resume_ai.services.decoding import strip_code_fence

# json_schema response formats need an object root; arrays travel under this key
ENVELOPE_KEY = "items"


class OpenAIAdapter(AIPort):
    """Talks to OpenAI's chat completions API for schema-constrained JSON output."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        timeout: float = 30.0,
        temperature: float | None = None,
    ) -> None:
        # max_retries=0: failures surface to the caller on the first attempt
        self._client = AsyncOpenAI(api_key=api_key, timeout=timeout, max_retries=0)
        self._model = model
        self._temperature = temperature

    async def generate_json(
        self, system_prompt: str, user_prompt: str, schema: ResponseSchema
    ) -> str:
        """Request JSON matching `schema`; array schemas are enveloped and unwrapped."""
        enveloped = schema.root_type != "object"
        wire_schema = _envelope(schema.schema) if enveloped else schema.schema

        kwargs: dict[str, Any] = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "response_format": {
                "type": "json_schema",
                "json_schema": {
                    "name": schema.name,
                    "description": schema.description,
                    "schema": wire_schema,
                    "strict": False,
                },
            },
        }
        if self._temperature is not None:
            kwargs["temperature"] = self._temperature

        try:
            response = await self._client.chat.completions.create(**kwargs)
        except OpenAIError as exc:
            raise BackendError(f"{type(exc).__name__}: {exc}") from exc

        if not response.choices:
            raise BackendError("OpenAI returned no choices")

        message = response.choices[0].message
        refusal = getattr(message, "refusal", None)
        if refusal:
            raise BackendError(f"The model refused the request: {refusal}")

        content = message.content or ""
        if not enveloped:
            return content
        return _unwrap(content)


def _envelope(schema: dict[str, Any]) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {ENVELOPE_KEY: schema},
        "required": [ENVELOPE_KEY],
    }


def _unwrap(content: str) -> str:
    """Return the enveloped value as JSON text. Empty content passes through for the decoder."""
    if not content.strip():
        return content
    try:
        payload = json.loads(strip_code_fence(content))
    except json.JSONDecodeError as exc:
        raise BackendError(f"Malformed response envelope: {exc.msg}") from exc
    if isinstance(payload, dict) and ENVELOPE_KEY in payload:
        return json.dumps(payload[ENVELOPE_KEY])
    # model ignored the envelope and answered with the bare value
    return json.dumps(payload)
