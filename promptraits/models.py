"""Data models for portrait prompt requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from prompts.templates import SYSTEM_INSTRUCTION

DEFAULT_MIME_TYPE = "image/jpeg"
DEFAULT_MODEL = "gemini-2.5-flash"


class RequestStatus(str, Enum):
    VALIDATING = "validating"
    DISPATCHING = "dispatching"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class ImageInput:
    """A base64-encoded image as supplied by the caller."""

    data: str
    mime_type: str = DEFAULT_MIME_TYPE


@dataclass(frozen=True)
class TextPart:
    text: str


@dataclass(frozen=True)
class InlineImagePart:
    data: str
    mime_type: str = DEFAULT_MIME_TYPE


ContentPart = Union[TextPart, InlineImagePart]


@dataclass(frozen=True)
class GenerationPolicy:
    """Everything that distinguishes one deployment of the handler from another."""

    system_instruction: str = SYSTEM_INSTRUCTION
    model: str = DEFAULT_MODEL
    prompt_field: str = "prompt"
    selfie_field: str = "selfieImage"
    selfie_mime_field: str = "selfieMimeType"
    reference_field: str = "referenceImage"
    reference_mime_fields: tuple[str, ...] = ("referenceMimeType", "mimeType")
    knowledge_extensions: tuple[str, ...] = (".txt", ".md")
    default_prompt: str | None = None


def _text(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    return value if value.strip() else None


@dataclass(frozen=True)
class PromptRequest:
    prompt: str | None = None
    selfie: ImageInput | None = None
    reference: ImageInput | None = None

    @property
    def has_images(self) -> bool:
        return self.selfie is not None or self.reference is not None

    @property
    def is_empty(self) -> bool:
        return self.prompt is None and not self.has_images

    @classmethod
    def from_body(cls, body: dict[str, Any], policy: GenerationPolicy | None = None) -> PromptRequest:
        """Build a request from a decoded JSON body.

        Non-string and blank values are treated as absent. A missing MIME type
        falls back to JPEG.
        """
        policy = policy or GenerationPolicy()

        selfie = None
        selfie_data = _text(body.get(policy.selfie_field))
        if selfie_data:
            selfie = ImageInput(
                data=selfie_data,
                mime_type=_text(body.get(policy.selfie_mime_field)) or DEFAULT_MIME_TYPE,
            )

        reference = None
        reference_data = _text(body.get(policy.reference_field))
        if reference_data:
            mime_type = next(
                (m for m in (_text(body.get(f)) for f in policy.reference_mime_fields) if m),
                DEFAULT_MIME_TYPE,
            )
            reference = ImageInput(data=reference_data, mime_type=mime_type)

        return cls(
            prompt=_text(body.get(policy.prompt_field)),
            selfie=selfie,
            reference=reference,
        )

    def to_body(self, policy: GenerationPolicy | None = None) -> dict[str, str]:
        """Inverse of ``from_body``: the JSON body a client should POST."""
        policy = policy or GenerationPolicy()
        body: dict[str, str] = {}
        if self.prompt is not None:
            body[policy.prompt_field] = self.prompt
        if self.selfie is not None:
            body[policy.selfie_field] = self.selfie.data
            body[policy.selfie_mime_field] = self.selfie.mime_type
        if self.reference is not None:
            body[policy.reference_field] = self.reference.data
            body[policy.reference_mime_fields[0]] = self.reference.mime_type
        return body


@dataclass
class GenerationTrace:
    """What happened to one request; kept for logging and the front end."""

    status: RequestStatus = RequestStatus.VALIDATING
    part_count: int = 0
    output_chars: int = 0
    error: str | None = None
    history: list[RequestStatus] = field(default_factory=lambda: [RequestStatus.VALIDATING])

    def advance(self, status: RequestStatus) -> None:
        self.status = status
        self.history.append(status)
