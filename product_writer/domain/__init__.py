# Domain Layer
# ============
# Pure logic with no network or framework dependencies:
# - product.py:   ProductDetails and prompt construction
# - formatter.py: raw model text -> display blocks
# - errors.py:    typed failures shared by every layer

from .errors import (
    DescriptionError,
    ValidationError,
    MissingCredentialError,
    TransportError,
    MalformedResponseError,
    EmptyResponseError,
)
from .product import ProductDetails, GenerationRequest, PROMPT_TEMPLATE
from .formatter import (
    Heading,
    Paragraph,
    DisplayBlock,
    format_description,
    strip_bold,
    blocks_to_text,
)

__all__ = [
    "DescriptionError",
    "ValidationError",
    "MissingCredentialError",
    "TransportError",
    "MalformedResponseError",
    "EmptyResponseError",
    "ProductDetails",
    "GenerationRequest",
    "PROMPT_TEMPLATE",
    "Heading",
    "Paragraph",
    "DisplayBlock",
    "format_description",
    "strip_bold",
    "blocks_to_text",
]
