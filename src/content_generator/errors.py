class RelayError(Exception):
    """Base for failures that end a relay request with a JSON error body."""

    status_code = 500
    message = "Internal error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message

    def as_payload(self, include_details: bool = False) -> dict:
        return {"error": self.message}


class MissingCredentialError(RelayError):
    status_code = 500
    message = "Missing GOOGLE_GENERATIVE_AI_API_KEY environment variable."


class MissingFieldsError(RelayError):
    status_code = 400
    message = "All fields are required"


class GenerationFailedError(RelayError):
    status_code = 500
    message = "Failed to generate content. Please try again."

    def __init__(self, cause: BaseException) -> None:
        super().__init__()
        self.cause = cause

    def as_payload(self, include_details: bool = False) -> dict:
        payload = {"error": self.message}
        if include_details:
            payload["details"] = str(self.cause)
        return payload
