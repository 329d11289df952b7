"""
Gemini Client - Google generateContent over HTTP
================================================

ARCHITECTURAL DECISION:
- Plain `requests` POST to the REST endpoint (no SDK)
- One call per generate(); no retry, no caching
- API key checked once at construction, not per call
- Response shape validated by envelope.extract_text()

EXTENSIBILITY:
- To use a different model: set GEMINI_MODEL
- To use another provider: add a client with the same generate(prompt) method
"""

import logging
from typing import Any, Optional

import requests

from ..config import GeminiSettings, get_settings
from ...domain.errors import (
    EmptyResponseError,
    MalformedResponseError,
    MissingCredentialError,
    TransportError,
)
from .envelope import extract_text

logger = logging.getLogger(__name__)


class GeminiClient:
    """
    Text generation client for the Gemini REST API.

    USAGE:
        client = GeminiClient()
        text = client.generate("Write a haiku about chairs")

    ERRORS:
    - No API key: MissingCredentialError from the constructor
    - Non-2xx or no response: TransportError
    - Body is not the documented envelope: MalformedResponseError
    - Envelope holds no text: EmptyResponseError
    """

    def __init__(
        self,
        settings: Optional[GeminiSettings] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize client with settings; fails fast without an API key."""
        self._settings = settings or get_settings().gemini

        if not self._settings.api_key:
            logger.error("Missing GEMINI_API_KEY in environment variables")
            raise MissingCredentialError()

        self._session = session or requests.Session()

    @property
    def model(self) -> str:
        return self._settings.model

    def build_payload(self, prompt: str) -> dict[str, Any]:
        """Request body for generateContent."""
        s = self._settings
        return {
            "contents": [
                {"parts": [{"text": prompt}]}
            ],
            "generationConfig": {
                "temperature": s.temperature,
                "topK": s.top_k,
                "topP": s.top_p,
                "maxOutputTokens": s.max_output_tokens,
            },
            "safetySettings": [
                {"category": category, "threshold": s.safety_threshold}
                for category in s.safety_categories
            ],
        }

    def generate(self, prompt: str) -> str:
        """
        Send one prompt and return the generated text.

        Args:
            prompt: Full prompt text.

        Returns:
            Text of the first candidate's first part.
        """
        logger.debug(f"Sending prompt to {self.model} ({len(prompt)} chars)")

        try:
            response = self._session.post(
                self._settings.endpoint,
                params={"key": self._settings.api_key},
                headers={"Content-Type": "application/json"},
                json=self.build_payload(prompt),
            )
        except requests.RequestException as e:
            logger.warning(f"Gemini API unreachable: {e}")
            raise TransportError(None, str(e)) from e

        if not response.ok:
            body = self._error_body(response)
            logger.warning(f"Gemini API error: {response.status_code} {response.reason}")
            raise TransportError(response.status_code, response.reason or "", body)

        try:
            data = response.json()
        except ValueError as e:
            logger.warning("Gemini API returned a non-JSON body")
            raise MalformedResponseError() from e

        try:
            text = extract_text(data)
        except (MalformedResponseError, EmptyResponseError) as e:
            logger.warning(f"Unusable Gemini response: {e}")
            raise

        logger.info(f"Gemini generated {len(text)} chars")
        return text

    @staticmethod
    def _error_body(response: requests.Response) -> Any:
        """Error details from a failed response, JSON if possible."""
        try:
            return response.json()
        except ValueError:
            return response.text or None
