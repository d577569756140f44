import pytest

from resume_ai.domain.errors import AnalysisError, ExtractionError, SuggestionError
from resume_ai.services.decoding import decode_json, strip_code_fence

PAYLOAD = '{"fullName": "John Doe", "skills": ["Python", "SQL"]}'


@pytest.mark.parametrize(
    "raw",
    [
        PAYLOAD,
        f"```json\n{PAYLOAD}\n```",
        f"```\n{PAYLOAD}\n```",
        f"  ```JSON\r\n{PAYLOAD}\r\n```  \n",
        f"```{PAYLOAD}```",
    ],
)
def test_fenced_and_unfenced_decode_identically(raw: str) -> None:
    assert decode_json(raw, ExtractionError) == decode_json(PAYLOAD, ExtractionError)


def test_strip_code_fence_leaves_plain_text_alone() -> None:
    assert strip_code_fence("  [1, 2]\n") == "[1, 2]"


def test_strip_code_fence_handles_unterminated_fence() -> None:
    assert strip_code_fence('```json\n["a"]') == '["a"]'


def test_strip_code_fence_is_idempotent() -> None:
    once = strip_code_fence(f"```json\n{PAYLOAD}\n```")
    assert strip_code_fence(once) == once


@pytest.mark.parametrize("raw", [None, "", "   \n", "```json\n```"])
def test_empty_response_raises_operation_error(raw) -> None:
    with pytest.raises(AnalysisError, match="empty"):
        decode_json(raw, AnalysisError)


def test_malformed_json_raises_operation_error() -> None:
    with pytest.raises(SuggestionError, match="malformed JSON") as info:
        decode_json('["one", "two"', SuggestionError)
    assert info.value.__cause__ is not None
