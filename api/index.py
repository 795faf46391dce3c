"""Serverless entrypoint for the portrait prompt generator.

Accepts Netlify/Lambda-style events (``httpMethod``, ``body``,
``isBase64Encoded``) and returns ``statusCode``/``headers``/``body`` dicts.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable

# Ensure project root is on the path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from promptraits.config import load_settings
from promptraits.errors import InvalidRequest, MethodNotAllowed, PromptraitsError, UpstreamFailure
from promptraits.models import PromptRequest
from promptraits.service import PromptraitsService, build_service

logger = logging.getLogger(__name__)

Handler = Callable[..., dict]


def cors_headers(allowed_origin: str = "*") -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": allowed_origin,
        "Access-Control-Allow-Methods": "POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    }


def _json_response(status: int, body: dict, headers: dict[str, str]) -> dict:
    return {
        "statusCode": status,
        "headers": {**headers, "Content-Type": "application/json"},
        "body": json.dumps(body, ensure_ascii=False),
    }


def parse_body(event: dict[str, Any]) -> dict[str, Any]:
    raw = event.get("body") or ""
    try:
        if event.get("isBase64Encoded"):
            raw = base64.b64decode(raw).decode("utf-8")
        data = json.loads(raw) if raw else {}
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InvalidRequest("Cuerpo de la petición inválido", str(e)) from e

    if not isinstance(data, dict):
        raise InvalidRequest("Cuerpo de la petición inválido", "expected a JSON object")
    return data


def make_handler(service: PromptraitsService, allowed_origin: str = "*") -> Handler:
    headers = cors_headers(allowed_origin)

    def handler(event: dict[str, Any], context: Any = None) -> dict:
        method = (event.get("httpMethod") or "").upper()

        if method == "OPTIONS":
            return {"statusCode": 204, "headers": headers, "body": ""}

        try:
            if method != "POST":
                raise MethodNotAllowed(method)

            request = PromptRequest.from_body(parse_body(event), service.policy)
            text = service.generate(request)
        except PromptraitsError as e:
            if isinstance(e, UpstreamFailure):
                logger.error("Upstream failure: %s", e.details)
            elif isinstance(e, MethodNotAllowed):
                logger.warning("Rejected %s request", e.method or "<no method>")
            return _json_response(e.status_code, e.to_dict(), headers)
        except Exception as e:
            logger.exception("Unhandled error while generating prompt")
            return _json_response(500, UpstreamFailure(str(e)).to_dict(), headers)

        return {
            "statusCode": 200,
            "headers": {**headers, "Content-Type": "text/plain; charset=utf-8"},
            "body": text,
        }

    return handler


def create_handler() -> Handler:
    logging.basicConfig(level=logging.INFO)
    settings = load_settings()
    return make_handler(build_service(settings), settings.allowed_origin)


handler = create_handler()
