from .envelope import GenerateContentResponse, extract_text
from .gemini_client import GeminiClient

__all__ = ["GenerateContentResponse", "extract_text", "GeminiClient"]
