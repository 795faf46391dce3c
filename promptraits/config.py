"""Runtime settings read from the environment (and a local .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from promptraits.models import DEFAULT_MODEL

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_KNOWLEDGE_DIR = PROJECT_ROOT / "knowledge"
DEFAULT_TIMEOUT_S = 60.0


def resolve_api_key(explicit: str | None, *env_names: str) -> str:
    """Return the explicit key if given, else the first non-empty env var."""
    if explicit and explicit.strip():
        return explicit.strip()
    for name in env_names:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return ""


@dataclass(frozen=True)
class Settings:
    api_key: str = ""
    model: str = DEFAULT_MODEL
    knowledge_dir: Path = DEFAULT_KNOWLEDGE_DIR
    timeout_s: float = DEFAULT_TIMEOUT_S
    allowed_origin: str = "*"
    analyze_image_only: bool = False


def load_settings(api_key: str | None = None) -> Settings:
    load_dotenv()

    timeout_raw = os.environ.get("PROMPTRAITS_TIMEOUT_S", "")
    try:
        timeout_s = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT_S
    except ValueError as e:
        raise ValueError(f"PROMPTRAITS_TIMEOUT_S must be a number, got {timeout_raw!r}") from e

    return Settings(
        api_key=resolve_api_key(api_key, "GEMINI_API_KEY", "GOOGLE_API_KEY"),
        model=os.environ.get("PROMPTRAITS_MODEL") or DEFAULT_MODEL,
        knowledge_dir=Path(os.environ.get("PROMPTRAITS_KNOWLEDGE_DIR") or DEFAULT_KNOWLEDGE_DIR),
        timeout_s=timeout_s,
        allowed_origin=os.environ.get("PROMPTRAITS_ALLOWED_ORIGIN") or "*",
        analyze_image_only=os.environ.get("PROMPTRAITS_ANALYZE_IMAGE_ONLY", "false").lower() in ("1", "true", "yes"),
    )
