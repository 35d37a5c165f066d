"""Form state and view state for the content generator page.

The page shows exactly one of four regions at a time, so the view is a single
value (:class:`Idle`, :class:`Loading`, :class:`Error` or :class:`Result`)
instead of separate loading/error/result flags.
"""

import logging
from dataclasses import dataclass

import httpx
from pydantic import BaseModel

from content_generator.api.schemas import FIELD_ORDER

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Failed to generate content"
UNEXPECTED_ERROR = "An unexpected error occurred"
EMPTY_STATE_MESSAGE = 'Fill out the form and click "Generate Content" to see AI-generated text here.'

FIELD_LABELS = {
    "topic": "Topic",
    "context": "Context",
    "tone": "Tone",
    "audience": "Target Audience",
    "requirements": "Special Requirements",
}

FIELD_PLACEHOLDERS = {
    "topic": "What is the main topic or subject?",
    "context": "Provide background context or setting",
    "tone": "What tone should the content have? (e.g., professional, casual, friendly)",
    "audience": "Who is the intended audience?",
    "requirements": "Any specific requirements or constraints?",
}


class FormState(BaseModel):
    topic: str = ""
    context: str = ""
    tone: str = ""
    audience: str = ""
    requirements: str = ""

    def with_field(self, name: str, value: str) -> "FormState":
        if name not in FIELD_ORDER:
            raise KeyError(name)
        return self.model_copy(update={name: value})

    @property
    def is_valid(self) -> bool:
        return all(getattr(self, name).strip() != "" for name in FIELD_ORDER)


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Error:
    message: str


@dataclass(frozen=True)
class Result:
    text: str


ViewState = Idle | Loading | Error | Result


def can_submit(form: FormState, view: ViewState) -> bool:
    return form.is_valid and not isinstance(view, Loading)


class FormController:
    """Posts the form to the relay and turns the outcome into a view state."""

    def __init__(self, relay_url: str, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.relay_url = relay_url
        self.transport = transport
        self.view: ViewState = Idle()

    async def submit(self, form: FormState) -> ViewState:
        # Prior error and result are cleared by entering Loading.
        self.view = Loading()
        try:
            text = await self._post(form)
            self.view = Result(text)
        except Exception as exc:
            logger.error("ui.submit_failed type=%s detail=%s", exc.__class__.__name__, exc)
            self.view = Error(str(exc) or UNEXPECTED_ERROR)
        finally:
            if isinstance(self.view, Loading):
                self.view = Idle()
        return self.view

    async def _post(self, form: FormState) -> str:
        async with httpx.AsyncClient(transport=self.transport) as client:
            response = await client.post(self.relay_url, json=form.model_dump())
        if not response.is_success:
            raise RuntimeError(GENERIC_FAILURE)
        data = response.json()
        text = data.get("text") if isinstance(data, dict) else None
        if not isinstance(text, str):
            raise RuntimeError(GENERIC_FAILURE)
        return text
