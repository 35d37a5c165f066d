import logging
from typing import Any

from pydantic import ValidationError

from content_generator.api.schemas import FIELD_ORDER, GenerationRequest
from content_generator.config import Settings, get_settings
from content_generator.errors import GenerationFailedError, MissingCredentialError, MissingFieldsError
from content_generator.providers.factory import build_text_generator
from content_generator.providers.llm.base import TextGenerator

logger = logging.getLogger(__name__)
ERROR_LOG_LIMIT = 1000

PROMPT_TEMPLATE = """Please generate content based on the following requirements:

Topic: {topic}
Context: {context}
Tone: {tone}
Target Audience: {audience}
Special Requirements: {requirements}

Please create comprehensive, well-structured content that addresses all these aspects. \
The content should be engaging, informative, and tailored to the specified audience and tone."""


class GenerateService:
    def __init__(self, settings: Settings | None = None, generator: TextGenerator | None = None) -> None:
        self.settings = settings or get_settings()
        self.generator = generator or build_text_generator(self.settings)

    def ensure_configured(self) -> None:
        if not self.settings.google_api_key:
            logger.error("generate.config_missing key=GOOGLE_GENERATIVE_AI_API_KEY")
            raise MissingCredentialError()

    def parse_request(self, payload: Any) -> GenerationRequest:
        if not isinstance(payload, dict) or not all(payload.get(field) for field in FIELD_ORDER):
            raise MissingFieldsError()
        try:
            return GenerationRequest.model_validate({field: self._scalar_text(payload[field]) for field in FIELD_ORDER})
        except ValidationError as exc:
            logger.info("generate.invalid_fields errors=%d", exc.error_count())
            raise MissingFieldsError() from exc

    @staticmethod
    def _scalar_text(value: Any) -> Any:
        # Truthy scalars are interpolated as text; containers still fail validation.
        if value is True:
            return "true"
        return value

    @staticmethod
    def build_prompt(req: GenerationRequest) -> str:
        # Values go in verbatim: no trimming, escaping or length cap.
        return PROMPT_TEMPLATE.format(
            topic=req.topic,
            context=req.context,
            tone=req.tone,
            audience=req.audience,
            requirements=req.requirements,
        )

    async def generate(self, req: GenerationRequest) -> str:
        prompt = self.build_prompt(req)
        logger.info(
            "generate.request topic=%s prompt_chars=%d max_output_tokens=%d",
            self._clip(req.topic, 80),
            len(prompt),
            self.settings.max_output_tokens,
        )
        try:
            text = await self.generator.generate(prompt, self.settings.max_output_tokens)
        except Exception as exc:
            logger.exception(
                "generate.failed type=%s detail=%s",
                exc.__class__.__name__,
                self._extract_error_detail(exc),
            )
            raise GenerationFailedError(exc) from exc
        logger.info("generate.success chars=%d", len(text))
        return text

    @staticmethod
    def _clip(text: str, limit: int) -> str:
        normalized = " ".join(text.split()).strip()
        if len(normalized) <= limit:
            return normalized
        return f"{normalized[:limit]}...(truncated)"

    def _extract_error_detail(self, exc: BaseException) -> str:
        status_code = getattr(exc, "status_code", None)
        message = getattr(exc, "message", None) or str(exc)
        body = getattr(exc, "body", None)
        details = [f"status_code={status_code}" if status_code is not None else ""]
        if body is not None:
            details.append(f"body={body}")
        details.append(f"message={message}")
        return self._clip(" ".join([part for part in details if part]).strip(), ERROR_LOG_LIMIT)
