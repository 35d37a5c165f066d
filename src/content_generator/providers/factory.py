from content_generator.config import Settings
from content_generator.providers.llm.base import TextGenerator
from content_generator.providers.llm.gemini import GeminiTextGenerator
from content_generator.providers.llm.static import StaticTextGenerator


def build_text_generator(settings: Settings) -> TextGenerator:
    if settings.llm_provider == "static":
        return StaticTextGenerator(settings.static_text)
    if settings.llm_provider == "gemini":
        return GeminiTextGenerator(settings)
    raise ValueError(f"unknown LLM_PROVIDER: {settings.llm_provider}")
