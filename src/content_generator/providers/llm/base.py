from typing import Protocol


class TextGenerator(Protocol):
    """Capability the relay needs from a hosted model: one prompt in, one text out."""

    async def generate(self, prompt: str, max_output_tokens: int) -> str:
        ...
