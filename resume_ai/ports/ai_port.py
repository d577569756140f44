"""
Abstract interface for the generative-AI backend.
Concrete implementations (OpenAI, etc.) must implement this port.
"""

from abc import ABC, abstractmethod

from resume_ai.domain.schemas import ResponseSchema


class AIPort(ABC):
    """Port for schema-constrained JSON generation."""

    @abstractmethod
    async def generate_json(
        self, system_prompt: str, user_prompt: str, schema: ResponseSchema
    ) -> str:
        """
        Ask the model for JSON conforming to `schema` and return the raw text.

        The text is returned undecoded: it may be empty or wrapped in a
        markdown code fence. Raises BackendError on transport failures,
        refusals or a malformed response envelope.
        """
        ...
