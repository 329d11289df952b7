from product_writer.infrastructure.config import GeminiSettings, Settings, WebSettings


def test_gemini_settings_from_environment(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "env-key")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-pro")
    monkeypatch.setenv("GEMINI_API_BASE", "https://proxy.example/v1beta/")

    settings = GeminiSettings()

    assert settings.api_key == "env-key"
    assert settings.endpoint == "https://proxy.example/v1beta/models/gemini-pro:generateContent"


def test_gemini_defaults(monkeypatch):
    monkeypatch.delenv("GEMINI_MODEL", raising=False)
    monkeypatch.delenv("GEMINI_API_BASE", raising=False)

    settings = GeminiSettings()

    assert settings.endpoint == (
        "https://generativelanguage.googleapis.com/v1beta/models/"
        "gemini-2.0-flash:generateContent"
    )
    assert (settings.temperature, settings.top_k, settings.top_p) == (0.7, 40, 0.95)
    assert settings.max_output_tokens == 1024
    assert len(settings.safety_categories) == 4


def test_web_settings(monkeypatch):
    monkeypatch.setenv("WEB_PORT", "9000")
    monkeypatch.setenv("WEB_RELOAD", "yes")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    web = WebSettings()

    assert (web.port, web.reload, web.log_level) == (9000, True, "debug")


def test_validate_warns_without_api_key():
    settings = Settings(gemini=GeminiSettings(api_key=""))
    issues = settings.validate()
    assert len(issues) == 1
    assert "GEMINI_API_KEY" in issues[0]


def test_validate_clean_with_api_key():
    assert Settings(gemini=GeminiSettings(api_key="k")).validate() == []
