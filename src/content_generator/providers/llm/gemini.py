import logging
from typing import Any

from content_generator.config import Settings

logger = logging.getLogger(__name__)


class GeminiTextGenerator:
    """Google Gemini via its OpenAI-compatible endpoint, driven through LangChain."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.model = settings.gemini_model
        self._llm: Any | None = None
        self._llm_max_tokens: int | None = None

    async def generate(self, prompt: str, max_output_tokens: int) -> str:
        llm = self._get_llm(max_output_tokens)
        logger.info("llm.call model=%s max_output_tokens=%d prompt_chars=%d", self.model, max_output_tokens, len(prompt))
        response = await llm.ainvoke(prompt)
        text = self._message_text(getattr(response, "content", response))
        logger.info("llm.response model=%s chars=%d", self.model, len(text))
        return text

    def _get_llm(self, max_output_tokens: int):
        if self._llm is None or self._llm_max_tokens != max_output_tokens:
            from langchain_openai import ChatOpenAI

            self._llm = ChatOpenAI(
                model=self.model,
                api_key=self.settings.google_api_key or None,
                base_url=self.settings.gemini_base_url,
                max_tokens=max_output_tokens,
                max_retries=0,
            )
            self._llm_max_tokens = max_output_tokens
        return self._llm

    @staticmethod
    def _message_text(content: Any) -> str:
        if isinstance(content, str):
            return content
        if isinstance(content, list):
            parts: list[str] = []
            for item in content:
                if isinstance(item, dict) and "text" in item:
                    parts.append(str(item["text"]))
                else:
                    parts.append(str(item))
            return "\n".join(parts)
        return str(content)
