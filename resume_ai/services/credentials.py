"""
Credential resolution for AI calls.

A key sent by the caller wins over the process-wide configured key.
Resolved on every call and never cached here.
"""

from resume_ai.domain.errors import MissingCredentialError

MISSING_CREDENTIAL_MESSAGE = (
    "No API key is configured. Add your API key in Settings to use AI features."
)


def resolve_credential(explicit_key: str | None, fallback_key: str | None = None) -> str:
    """
    Return the first non-blank key of (explicit_key, fallback_key).

    Raises MissingCredentialError when neither is usable.
    """
    for candidate in (explicit_key, fallback_key):
        if candidate and candidate.strip():
            return candidate.strip()
    raise MissingCredentialError(MISSING_CREDENTIAL_MESSAGE)
