"""
Product Details - Form Input and Prompt Construction
====================================================

ProductDetails holds the four free-text fields the user fills in.
GenerationRequest is the immutable prompt derived from them.
"""

from dataclasses import dataclass, fields

from .errors import ValidationError


PROMPT_TEMPLATE = (
    "Write a compelling, SEO-friendly product description for the following product:\n"
    "\n"
    "Product Name: {name}\n"
    "Key Features: {features}\n"
    "Benefits: {benefits}\n"
    "Target Audience: {target_audience}\n"
    "\n"
    "Make it engaging, persuasive, and optimized for conversion. Include emojis where appropriate.\n"
    "Format it with clear sections for features and benefits.\n"
    "End with a strong call to action."
)


@dataclass(frozen=True)
class ProductDetails:
    """
    Product attributes entered by the user.

    Values are kept verbatim; only emptiness is checked.
    """
    name: str = ""
    features: str = ""
    benefits: str = ""
    target_audience: str = ""

    def missing_fields(self) -> list[str]:
        """Return names of fields that are empty or whitespace-only."""
        return [
            f.name for f in fields(self)
            if not (getattr(self, f.name) or "").strip()
        ]

    def validate(self) -> None:
        """Raise ValidationError if any field is missing."""
        missing = self.missing_fields()
        if missing:
            raise ValidationError(missing)


@dataclass(frozen=True)
class GenerationRequest:
    """Prompt sent to the generative-text API."""
    prompt: str

    @classmethod
    def from_details(cls, details: ProductDetails) -> "GenerationRequest":
        details.validate()
        return cls(
            prompt=PROMPT_TEMPLATE.format(
                name=details.name,
                features=details.features,
                benefits=details.benefits,
                target_audience=details.target_audience,
            )
        )
