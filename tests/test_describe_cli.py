import describe
from conftest import FakeHttpSession, envelope, make_response
from product_writer.domain import format_description
from product_writer.infrastructure.config import GeminiSettings, Settings
from product_writer.infrastructure.llm import GeminiClient

ARGS = [
    "--name", "Chair",
    "--features", "Soft",
    "--benefits", "Comfy",
    "--audience", "Everyone",
]


def use_settings(monkeypatch, api_key):
    settings = Settings(gemini=GeminiSettings(api_key=api_key))
    monkeypatch.setattr(describe, "get_settings", lambda: settings)


def use_http(monkeypatch, http):
    monkeypatch.setattr(
        describe, "GeminiClient",
        lambda settings: GeminiClient(settings, session=http),
    )


def test_render_blocks():
    text = describe.render_blocks(format_description("# Chair\n\nSit 🎉\nwell\n\nplain"))
    assert text == "Chair\n─────\n\n★ Sit 🎉\n  well\n\nplain\n"


def test_run_prints_formatted_description(monkeypatch, capsys):
    use_settings(monkeypatch, "key")
    http = FakeHttpSession(make_response(payload=envelope("## Hello\n\n**World**")))
    use_http(monkeypatch, http)

    assert describe.run(ARGS) == 0

    out = capsys.readouterr().out
    assert "Hello\n─────" in out
    assert "World" in out
    assert "**" not in out
    assert len(http.calls) == 1


def test_run_prompts_for_missing_fields(monkeypatch, capsys):
    use_settings(monkeypatch, "key")
    http = FakeHttpSession(make_response(payload=envelope("Text")))
    use_http(monkeypatch, http)
    answers = iter(["Everyone"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(answers))

    assert describe.run(ARGS[:6] + ["--raw"]) == 0
    assert "Target Audience: Everyone" in http.calls[0][1]["json"]["contents"][0]["parts"][0]["text"]


def test_run_without_api_key(monkeypatch, capsys):
    use_settings(monkeypatch, "")
    assert describe.run(ARGS) == 2
    assert "API key is not configured" in capsys.readouterr().out


def test_run_reports_errors(monkeypatch, capsys):
    use_settings(monkeypatch, "key")
    use_http(monkeypatch, FakeHttpSession(make_response(payload={"candidates": []})))

    assert describe.run(ARGS) == 1
    assert "No description was generated" in capsys.readouterr().out
