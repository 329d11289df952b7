from .settings import Settings, GeminiSettings, WebSettings, get_settings

__all__ = ["Settings", "GeminiSettings", "WebSettings", "get_settings"]
