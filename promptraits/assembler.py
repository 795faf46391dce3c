"""Turns a validated request into the ordered content parts sent to Gemini."""

from __future__ import annotations

import logging

from prompts.templates import REFERENCE_MARKER, SELFIE_MARKER, USER_REQUEST
from promptraits.errors import InvalidRequest
from promptraits.models import (
    ContentPart,
    GenerationPolicy,
    ImageInput,
    InlineImagePart,
    PromptRequest,
    TextPart,
)

logger = logging.getLogger(__name__)


def validate(request: PromptRequest) -> None:
    if request.is_empty:
        raise InvalidRequest("Debes proporcionar un prompt o una imagen")


def _image_parts(image: ImageInput, marker: str) -> list[ContentPart]:
    return [InlineImagePart(data=image.data, mime_type=image.mime_type), TextPart(marker)]


def assemble(
    request: PromptRequest,
    knowledge_block: str,
    policy: GenerationPolicy | None = None,
) -> list[ContentPart]:
    """Build the content sequence for one request.

    Order is knowledge, user request, selfie then its marker, reference then
    its marker. The system instruction travels separately and never appears
    here.
    """
    validate(request)
    policy = policy or GenerationPolicy()

    parts: list[ContentPart] = [TextPart(knowledge_block)]

    prompt = request.prompt
    if prompt is None and request.has_images:
        prompt = policy.default_prompt
    if prompt is not None:
        parts.append(TextPart(USER_REQUEST.substitute(prompt=prompt)))

    if request.selfie is not None:
        parts.extend(_image_parts(request.selfie, SELFIE_MARKER))

    if request.reference is not None:
        parts.extend(_image_parts(request.reference, REFERENCE_MARKER))

    logger.debug(
        "Assembled %d parts (prompt=%s, selfie=%s, reference=%s)",
        len(parts), prompt is not None, request.selfie is not None, request.reference is not None,
    )
    return parts
