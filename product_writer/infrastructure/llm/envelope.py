"""
Gemini Response Envelope
========================

generateContent answers with:

    {"candidates": [{"content": {"parts": [{"text": "..."}]}}],
     "promptFeedback": {"blockReason": "..."}}

The shape is decoded through pydantic models so that an unexpected
upstream schema surfaces as MalformedResponseError instead of a KeyError
deep inside the client. Unknown keys are ignored.
"""

from typing import Any, Optional

import pydantic
from pydantic import BaseModel, ConfigDict, StrictStr

from ...domain.errors import EmptyResponseError, MalformedResponseError


class _Envelope(BaseModel):
    model_config = ConfigDict(extra="ignore")


class Part(_Envelope):
    text: Optional[StrictStr] = None


class Content(_Envelope):
    parts: list[Part] = []


class Candidate(_Envelope):
    content: Optional[Content] = None
    finishReason: Optional[StrictStr] = None


class PromptFeedback(_Envelope):
    blockReason: Optional[StrictStr] = None


class GenerateContentResponse(_Envelope):
    candidates: list[Candidate] = []
    promptFeedback: Optional[PromptFeedback] = None

    def first_text(self) -> Optional[str]:
        """Text of the first part of the first candidate, if any."""
        if not self.candidates:
            return None
        content = self.candidates[0].content
        if content is None or not content.parts:
            return None
        return content.parts[0].text


def decode(payload: Any) -> GenerateContentResponse:
    try:
        return GenerateContentResponse.model_validate(payload)
    except pydantic.ValidationError as e:
        raise MalformedResponseError() from e


def extract_text(payload: Any) -> str:
    """
    Pull the generated text out of a decoded JSON payload.

    Raises:
        MalformedResponseError: payload does not match the envelope.
        EmptyResponseError: envelope matches but holds no text.
    """
    response = decode(payload)
    text = response.first_text()

    if not text:
        block_reason = (
            response.promptFeedback.blockReason
            if response.promptFeedback else None
        )
        if block_reason:
            raise EmptyResponseError(
                f"No description was generated (blocked: {block_reason}). "
                "Please try again."
            )
        raise EmptyResponseError()

    return text
