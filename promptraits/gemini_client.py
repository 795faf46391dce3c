"""Single-shot Gemini dispatcher for assembled portrait requests."""

from __future__ import annotations

import base64
import logging
from typing import Any, Sequence

from promptraits.errors import UpstreamFailure
from promptraits.models import DEFAULT_MODEL, ContentPart, InlineImagePart, TextPart

logger = logging.getLogger(__name__)


class GeminiDispatcher:
    """Sends one ``generate_content`` call per request and returns its text."""

    def __init__(
        self,
        api_key: str = "",
        model: str = DEFAULT_MODEL,
        timeout_s: float = 60.0,
        client: Any = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.timeout_s = timeout_s
        self._client = client

    def _get_client(self):
        if self._client is None:
            from google import genai
            from google.genai import types

            self._client = genai.Client(
                api_key=self.api_key,
                http_options=types.HttpOptions(timeout=int(self.timeout_s * 1000)),
            )
        return self._client

    @property
    def available(self) -> bool:
        return bool(self.api_key) or self._client is not None

    @staticmethod
    def to_sdk_parts(parts: Sequence[ContentPart]) -> list:
        from google.genai import types

        sdk_parts = []
        for part in parts:
            if isinstance(part, TextPart):
                sdk_parts.append(types.Part.from_text(text=part.text))
            elif isinstance(part, InlineImagePart):
                sdk_parts.append(
                    types.Part.from_bytes(
                        data=base64.b64decode(part.data), mime_type=part.mime_type
                    )
                )
            else:
                raise TypeError(f"Unsupported content part: {part!r}")
        return sdk_parts

    def generate(
        self,
        parts: Sequence[ContentPart],
        system_instruction: str,
        model: str | None = None,
    ) -> str:
        model = model or self.model
        if not self.available:
            raise UpstreamFailure("Gemini API key is not configured (set GEMINI_API_KEY).")

        try:
            from google.genai import types

            client = self._get_client()
            response = client.models.generate_content(
                model=model,
                contents=self.to_sdk_parts(parts),
                config=types.GenerateContentConfig(system_instruction=system_instruction),
            )
            text = response.text
        except Exception as e:
            logger.error("Gemini generation failed: %s", e)
            raise UpstreamFailure(str(e) or type(e).__name__) from e

        if not text:
            raise UpstreamFailure("Gemini returned an empty response.")

        logger.info("Gemini model=%s returned %d chars", model, len(text))
        return text
