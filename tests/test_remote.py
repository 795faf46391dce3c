from pathlib import Path
import json
import sys

import httpx
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from promptraits.errors import InvalidRequest, UpstreamFailure
from promptraits.models import ImageInput, PromptRequest
from promptraits.remote import PromptraitsClient

ENDPOINT = "https://promptraits.example/.netlify/functions/gemini-processor"


def _client(handler):
    return PromptraitsClient(ENDPOINT, transport=httpx.MockTransport(handler))


def test_generate_posts_body_and_returns_text():
    seen = {}

    def handler(request):
        seen["body"] = json.loads(request.content)
        seen["url"] = str(request.url)
        return httpx.Response(200, text="PORTRAIT_PROMPT")

    text = _client(handler).generate(PromptRequest(prompt="studio", selfie=ImageInput("AAA")))

    assert text == "PORTRAIT_PROMPT"
    assert seen["url"] == ENDPOINT
    assert seen["body"] == {"prompt": "studio", "selfieImage": "AAA", "selfieMimeType": "image/jpeg"}


def test_400_maps_to_invalid_request():
    def handler(request):
        return httpx.Response(400, json={"error": "Debes proporcionar un prompt o una imagen"})

    with pytest.raises(InvalidRequest) as exc:
        _client(handler).generate(PromptRequest())
    assert exc.value.message == "Debes proporcionar un prompt o una imagen"


def test_500_maps_to_upstream_failure_with_details():
    def handler(request):
        return httpx.Response(500, json={"error": "Fallo", "details": "quota exceeded"})

    with pytest.raises(UpstreamFailure) as exc:
        _client(handler).generate(PromptRequest(prompt="x"))
    assert exc.value.details == "quota exceeded"


def test_transport_error_maps_to_upstream_failure():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(UpstreamFailure):
        _client(handler).generate(PromptRequest(prompt="x"))


def test_endpoint_is_required():
    with pytest.raises(ValueError):
        PromptraitsClient("")
