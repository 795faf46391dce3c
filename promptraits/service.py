"""Request lifecycle: validate, assemble, dispatch."""

from __future__ import annotations

import logging
from typing import Protocol, Sequence

from prompts.templates import IMAGE_ANALYSIS_PROMPT
from promptraits.assembler import assemble
from promptraits.config import Settings, load_settings
from promptraits.errors import PromptraitsError
from promptraits.gemini_client import GeminiDispatcher
from promptraits.knowledge import load_knowledge_base
from promptraits.models import (
    ContentPart,
    GenerationPolicy,
    GenerationTrace,
    PromptRequest,
    RequestStatus,
)

logger = logging.getLogger(__name__)


class Dispatcher(Protocol):
    def generate(
        self, parts: Sequence[ContentPart], system_instruction: str, model: str | None = None
    ) -> str: ...


class PromptraitsService:
    """Holds the per-process knowledge block and serves requests against it."""

    def __init__(
        self,
        knowledge_block: str,
        dispatcher: Dispatcher,
        policy: GenerationPolicy | None = None,
    ) -> None:
        self.knowledge_block = knowledge_block
        self.dispatcher = dispatcher
        self.policy = policy or GenerationPolicy()

    def generate(self, request: PromptRequest, trace: GenerationTrace | None = None) -> str:
        trace = trace if trace is not None else GenerationTrace()
        try:
            parts = assemble(request, self.knowledge_block, self.policy)
            trace.part_count = len(parts)

            trace.advance(RequestStatus.DISPATCHING)
            logger.info("Dispatching %d parts to model=%s", len(parts), self.policy.model)
            text = self.dispatcher.generate(
                parts, self.policy.system_instruction, model=self.policy.model
            )
        except PromptraitsError as e:
            self._fail(trace, e.message)
            raise
        except Exception as e:
            self._fail(trace, str(e) or type(e).__name__)
            raise

        trace.output_chars = len(text)
        trace.advance(RequestStatus.COMPLETED)
        return text

    @staticmethod
    def _fail(trace: GenerationTrace, message: str) -> None:
        trace.error = message
        trace.advance(RequestStatus.FAILED)
        logger.warning("Request failed during %s: %s", trace.history[-2].value, message)


def build_service(
    settings: Settings | None = None,
    policy: GenerationPolicy | None = None,
) -> PromptraitsService:
    """Load the knowledge base once and wire a Gemini-backed service."""
    settings = settings or load_settings()
    policy = policy or GenerationPolicy(
        model=settings.model,
        default_prompt=IMAGE_ANALYSIS_PROMPT if settings.analyze_image_only else None,
    )

    knowledge_block = load_knowledge_base(settings.knowledge_dir, policy.knowledge_extensions)
    dispatcher = GeminiDispatcher(
        api_key=settings.api_key,
        model=policy.model,
        timeout_s=settings.timeout_s,
    )
    if not dispatcher.available:
        logger.warning("Gemini API key not set; requests will fail at dispatch")

    return PromptraitsService(knowledge_block, dispatcher, policy)
