"""HTTP client for a deployed Promptraits handler."""

from __future__ import annotations

import logging

import httpx

from promptraits.errors import InvalidRequest, UpstreamFailure
from promptraits.models import PromptRequest

logger = logging.getLogger(__name__)


class PromptraitsClient:
    """Posts requests to the handler endpoint and returns the generated text."""

    def __init__(
        self,
        endpoint_url: str,
        timeout: float = 120.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not endpoint_url:
            raise ValueError("endpoint_url is required")
        self.endpoint_url = endpoint_url
        self.timeout = timeout
        self._transport = transport

    def generate(self, request: PromptRequest) -> str:
        logger.info("Posting request to %s", self.endpoint_url)
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as http:
                resp = http.post(self.endpoint_url, json=request.to_body())
        except httpx.HTTPError as e:
            raise UpstreamFailure(f"Request to {self.endpoint_url} failed: {e}") from e

        if resp.is_success:
            return resp.text

        message, details = _error_fields(resp)
        if resp.status_code == 400:
            raise InvalidRequest(message, details)
        raise UpstreamFailure(details or f"HTTP {resp.status_code}: {message}")


def _error_fields(resp: httpx.Response) -> tuple[str, str | None]:
    try:
        payload = resp.json()
    except ValueError:
        return resp.text or resp.reason_phrase, None
    if not isinstance(payload, dict):
        return resp.text, None
    return str(payload.get("error") or resp.reason_phrase), payload.get("details")
