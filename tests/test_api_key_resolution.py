from pathlib import Path
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from promptraits.config import DEFAULT_TIMEOUT_S, load_settings, resolve_api_key
from promptraits.gemini_client import GeminiDispatcher


def test_resolve_api_key_prefers_explicit(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "env-value")
    assert resolve_api_key(" explicit ", "GEMINI_API_KEY") == "explicit"


def test_resolve_api_key_falls_back_to_first_non_empty_env(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setenv("GOOGLE_API_KEY", "google-value")
    assert resolve_api_key(None, "GEMINI_API_KEY", "GOOGLE_API_KEY") == "google-value"


def test_resolve_api_key_empty_when_nothing_set(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    assert resolve_api_key("  ", "GEMINI_API_KEY", "GOOGLE_API_KEY") == ""


def test_load_settings_reads_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setenv("GOOGLE_API_KEY", "google-value")
    monkeypatch.setenv("PROMPTRAITS_MODEL", "gemini-test")
    monkeypatch.setenv("PROMPTRAITS_KNOWLEDGE_DIR", str(tmp_path))
    monkeypatch.setenv("PROMPTRAITS_TIMEOUT_S", "12.5")
    monkeypatch.setenv("PROMPTRAITS_ALLOWED_ORIGIN", "https://promptraits.example")

    settings = load_settings()

    assert settings.api_key == "google-value"
    assert settings.model == "gemini-test"
    assert settings.knowledge_dir == tmp_path
    assert settings.timeout_s == 12.5
    assert settings.allowed_origin == "https://promptraits.example"


def test_load_settings_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("PROMPTRAITS_MODEL", "PROMPTRAITS_TIMEOUT_S", "PROMPTRAITS_ALLOWED_ORIGIN"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings(api_key="explicit")

    assert settings.api_key == "explicit"
    assert settings.model == "gemini-2.5-flash"
    assert settings.timeout_s == DEFAULT_TIMEOUT_S
    assert settings.allowed_origin == "*"


def test_dispatcher_unavailable_without_key():
    assert GeminiDispatcher(api_key="").available is False
    assert GeminiDispatcher(api_key="k").available is True


def test_load_settings_rejects_non_numeric_timeout(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PROMPTRAITS_TIMEOUT_S", "soon")

    with pytest.raises(ValueError, match="PROMPTRAITS_TIMEOUT_S") as exc:
        load_settings()
    assert isinstance(exc.value.__cause__, ValueError)
