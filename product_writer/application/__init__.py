# Application Layer
# =================
# Use cases that tie domain logic to infrastructure:
# - description_service.py: generate a description, track session state

from .description_service import (
    DescriptionService,
    DescriptionSession,
    GenerationResult,
    GenerationState,
    TextGenerator,
)

__all__ = [
    "DescriptionService",
    "DescriptionSession",
    "GenerationResult",
    "GenerationState",
    "TextGenerator",
]
