"""
Settings Module - Centralized Configuration Management
=======================================================

ARCHITECTURAL DECISION:
- All configuration is loaded from environment variables (no hardcoded secrets)
- Settings are immutable dataclasses
- Single source of truth for all configurable values

EXTENSIBILITY:
- To switch Gemini model: set GEMINI_MODEL
- To point at a proxy or emulator: set GEMINI_API_BASE
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv

# Load .env file if present (development convenience)
load_dotenv()


def _env_bool(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class GeminiSettings:
    """Google Gemini generateContent settings."""

    api_key: str = field(default_factory=lambda: os.getenv("GEMINI_API_KEY", ""))
    api_base: str = field(
        default_factory=lambda: os.getenv(
            "GEMINI_API_BASE",
            "https://generativelanguage.googleapis.com/v1beta"
        )
    )
    model: str = field(default_factory=lambda: os.getenv("GEMINI_MODEL", "gemini-2.0-flash"))

    # Generation parameters expected by the prompt
    temperature: float = 0.7
    top_k: int = 40
    top_p: float = 0.95
    max_output_tokens: int = 1024

    # Content safety: block medium and above in every category
    safety_categories: tuple[str, ...] = (
        "HARM_CATEGORY_HARASSMENT",
        "HARM_CATEGORY_HATE_SPEECH",
        "HARM_CATEGORY_SEXUALLY_EXPLICIT",
        "HARM_CATEGORY_DANGEROUS_CONTENT",
    )
    safety_threshold: str = "BLOCK_MEDIUM_AND_ABOVE"

    @property
    def endpoint(self) -> str:
        return f"{self.api_base.rstrip('/')}/models/{self.model}:generateContent"


@dataclass(frozen=True)
class WebSettings:
    """Dashboard server settings."""

    host: str = field(default_factory=lambda: os.getenv("WEB_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("WEB_PORT", "8000")))
    reload: bool = field(default_factory=lambda: _env_bool("WEB_RELOAD"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "info").strip().lower())


@dataclass(frozen=True)
class Settings:
    """
    Root settings container - Single source of truth for all configuration.

    Usage:
        from product_writer.infrastructure.config import get_settings
        settings = get_settings()
        print(settings.gemini.model)
    """

    gemini: GeminiSettings = field(default_factory=GeminiSettings)
    web: WebSettings = field(default_factory=WebSettings)

    def validate(self) -> list[str]:
        """
        Validate settings and return list of warnings.
        Returns empty list if all settings are valid.
        """
        issues = []

        if not self.gemini.api_key:
            issues.append(
                "WARNING: GEMINI_API_KEY not set. "
                "Descriptions cannot be generated until it is configured."
            )

        return issues


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get singleton Settings instance.
    Cached to ensure consistent settings throughout application lifecycle.
    """
    return Settings()
