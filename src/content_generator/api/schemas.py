from pydantic import BaseModel, ConfigDict, Field

FIELD_ORDER = ("topic", "context", "tone", "audience", "requirements")


class GenerationRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    topic: str = Field(..., description="Main topic or subject.")
    context: str = Field(..., description="Background context or setting.")
    tone: str = Field(..., description="Tone of the content, e.g. professional or friendly.")
    audience: str = Field(..., description="Intended audience.")
    requirements: str = Field(..., description="Special requirements or constraints.")


class GenerateResponse(BaseModel):
    text: str


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
