"""
Description Service - Generate and Track Product Descriptions
=============================================================

DescriptionService is the use case: validate the product, build the prompt,
make exactly one call to the text generator.

DescriptionSession holds what a UI needs between renders (last input, last
description, last error, busy flag) as an explicit GenerationState value.
The web and CLI surfaces read the state; they never mutate it directly.
"""

import logging
import threading
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Optional, Protocol

from ..domain import (
    DescriptionError,
    DisplayBlock,
    GenerationRequest,
    MissingCredentialError,
    ProductDetails,
    format_description,
)

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    def generate(self, prompt: str) -> str:
        ...


class DescriptionService:
    """
    Turns ProductDetails into generated marketing text.

    USAGE:
        service = DescriptionService(GeminiClient())
        text = service.request_description(details)
    """

    def __init__(self, generator: TextGenerator):
        self._generator = generator

    def request_description(self, details: ProductDetails) -> str:
        """
        Generate a description for one product.

        Raises:
            ValidationError: a field is empty; no call is made.
            TransportError, MalformedResponseError, EmptyResponseError:
                propagated from the generator unchanged.
        """
        request = GenerationRequest.from_details(details)
        logger.info(f"Generating description for '{details.name}'")
        return self._generator.generate(request.prompt)


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one generation: text on success, error on failure."""
    text: Optional[str] = None
    error: Optional[DescriptionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class GenerationState:
    """Snapshot of the UI state around generation."""
    details: ProductDetails = field(default_factory=ProductDetails)
    description: str = ""
    error: Optional[str] = None
    busy: bool = False
    generated_on: Optional[date] = None

    @property
    def blocks(self) -> list[DisplayBlock]:
        return format_description(self.description)


class DescriptionSession:
    """
    One user's generation workflow.

    - Only one generation runs at a time; calling generate() while busy
      returns None and leaves the state untouched.
    - A failure clears the previous description and stores the message.
    - A success clears the previous error.

    service is None when the app started without credentials; every
    attempt then fails with MissingCredentialError.
    """

    def __init__(self, service: Optional[DescriptionService] = None):
        self._service = service
        self._state = GenerationState()
        self._lock = threading.Lock()

    @property
    def state(self) -> GenerationState:
        return self._state

    @property
    def configured(self) -> bool:
        return self._service is not None

    def generate(self, details: ProductDetails) -> Optional[GenerationResult]:
        """Run one generation and update the state. Returns None if busy."""
        if not self._lock.acquire(blocking=False):
            logger.info("Generation already in progress, ignoring request")
            return None

        try:
            self._state = replace(self._state, details=details, error=None, busy=True)

            try:
                if self._service is None:
                    raise MissingCredentialError()
                text = self._service.request_description(details)
            except DescriptionError as e:
                logger.error(f"Error generating description: {e}")
                self._state = replace(
                    self._state, description="", error=str(e),
                    busy=False, generated_on=None,
                )
                return GenerationResult(error=e)

            self._state = replace(
                self._state, description=text, error=None,
                busy=False, generated_on=date.today(),
            )
            return GenerationResult(text=text)
        finally:
            if self._state.busy:
                self._state = replace(self._state, busy=False)
            self._lock.release()
