import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from content_generator.api.schemas import ErrorResponse, GenerateResponse
from content_generator.config import Settings, get_settings
from content_generator.errors import GenerationFailedError, RelayError
from content_generator.service.generator import GenerateService

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, service: GenerateService | None = None) -> FastAPI:
    settings = settings or get_settings()
    service = service or GenerateService(settings)

    app = FastAPI(title="content-generator", version="0.1.0")
    app.state.service = service

    @app.exception_handler(RelayError)
    async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.as_payload(include_details=not settings.is_production),
        )

    @app.get("/healthz")
    async def healthz() -> dict:
        return {"status": "ok"}

    @app.post(
        "/api/generate",
        response_model=GenerateResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def generate(request: Request) -> GenerateResponse:
        # Credential is checked before the body is read.
        service.ensure_configured()
        try:
            payload = await request.json()
        except ValueError as exc:
            logger.exception("generate.failed type=%s detail=invalid json body", exc.__class__.__name__)
            raise GenerationFailedError(exc) from exc
        req = service.parse_request(payload)
        text = await service.generate(req)
        return GenerateResponse(text=text)

    return app


app = create_app()
