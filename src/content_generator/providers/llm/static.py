class StaticTextGenerator:
    """Offline generator returning a fixed text; records every prompt it receives."""

    def __init__(self, text: str, error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: list[tuple[str, int]] = []

    async def generate(self, prompt: str, max_output_tokens: int) -> str:
        self.calls.append((prompt, max_output_tokens))
        if self.error is not None:
            raise self.error
        return self.text
