"""
Process entry point: startup validation and exit codes.
"""
import pytest
from pydantic import ValidationError

from claude_chat import app
from claude_chat.config import get_settings


def test_missing_api_key_aborts(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    get_settings.cache_clear()

    called = []
    monkeypatch.setattr(app, "chat", lambda api_key: called.append(api_key))

    assert app.main() == 1
    assert called == []
    assert "ANTHROPIC_API_KEY environment variable must be set" in capsys.readouterr().err


def test_runs_session_with_key(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
    get_settings.cache_clear()

    called = []

    async def fake_chat(api_key: str) -> None:
        called.append(api_key)

    monkeypatch.setattr(app, "chat", fake_chat)

    assert app.main() == 0
    assert called == ["sk-test"]
    get_settings.cache_clear()


def test_key_read_from_dotenv_file(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    (tmp_path / ".env").write_text("ANTHROPIC_API_KEY=sk-from-file\n")
    get_settings.cache_clear()

    assert get_settings().api_key == "sk-from-file"
    get_settings.cache_clear()


def test_other_settings_errors_propagate(monkeypatch):
    error = ValidationError.from_exception_data(
        "Settings",
        [{"type": "missing", "loc": ("some_other_field",), "input": {}}],
    )

    def broken_settings():
        raise error

    monkeypatch.setattr(app, "get_settings", broken_settings)
    with pytest.raises(ValidationError):
        app.main()
