import logging

import pytest
from fastapi.testclient import TestClient

from content_generator.api.app import app, create_app
from content_generator.config import Settings
from content_generator.providers.llm.static import StaticTextGenerator
from content_generator.service.generator import GenerateService

FORM = {
    "topic": "Cats",
    "context": "Pet care blog",
    "tone": "friendly",
    "audience": "new owners",
    "requirements": "under 200 words",
}


def _settings(api_key: str = "test-key", app_env: str = "production") -> Settings:
    return Settings(GOOGLE_GENERATIVE_AI_API_KEY=api_key, APP_ENV=app_env)


def _client(generator: StaticTextGenerator, settings: Settings | None = None) -> TestClient:
    settings = settings or _settings()
    return TestClient(create_app(settings, GenerateService(settings, generator)))


def test_healthz() -> None:
    resp = TestClient(app).get("/healthz")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_generate_returns_model_text() -> None:
    generator = StaticTextGenerator("Cats are wonderful companions...")
    resp = _client(generator).post("/api/generate", json=FORM)

    assert resp.status_code == 200
    assert resp.json() == {"text": "Cats are wonderful companions..."}
    assert len(generator.calls) == 1
    prompt, max_output_tokens = generator.calls[0]
    assert "Topic: Cats" in prompt
    assert max_output_tokens == 1000


def test_generate_keeps_model_text_untouched() -> None:
    generator = StaticTextGenerator("  leading and trailing space \n")
    resp = _client(generator).post("/api/generate", json=FORM)
    assert resp.json() == {"text": "  leading and trailing space \n"}


@pytest.mark.parametrize(
    "body",
    [FORM, {}, {"topic": ""}, [1, 2, 3]],
)
def test_missing_credential_is_reported_before_body(body) -> None:
    generator = StaticTextGenerator("unused")
    client = _client(generator, _settings(api_key=""))

    resp = client.post("/api/generate", json=body)

    assert resp.status_code == 500
    assert resp.json() == {"error": "Missing GOOGLE_GENERATIVE_AI_API_KEY environment variable."}
    assert generator.calls == []


def test_missing_credential_with_unparseable_body() -> None:
    client = _client(StaticTextGenerator("unused"), _settings(api_key=""))
    resp = client.post("/api/generate", content=b"{not json", headers={"content-type": "application/json"})
    assert resp.status_code == 500
    assert resp.json()["error"] == "Missing GOOGLE_GENERATIVE_AI_API_KEY environment variable."


@pytest.mark.parametrize("field", list(FORM))
@pytest.mark.parametrize("value", ["<absent>", "", None, False, 0])
def test_missing_field_returns_400(field: str, value) -> None:
    body = dict(FORM)
    if value == "<absent>":
        del body[field]
    else:
        body[field] = value
    generator = StaticTextGenerator("unused")

    resp = _client(generator).post("/api/generate", json=body)

    assert resp.status_code == 400
    assert resp.json() == {"error": "All fields are required"}
    assert generator.calls == []


def test_non_object_body_returns_400() -> None:
    generator = StaticTextGenerator("unused")
    resp = _client(generator).post("/api/generate", json=["Cats"])
    assert resp.status_code == 400
    assert resp.json() == {"error": "All fields are required"}
    assert generator.calls == []


def test_whitespace_fields_are_forwarded() -> None:
    generator = StaticTextGenerator("ok")
    resp = _client(generator).post("/api/generate", json={**FORM, "tone": "   "})
    assert resp.status_code == 200
    assert "Tone:    \n" in generator.calls[0][0]


def test_numeric_fields_are_stringified() -> None:
    generator = StaticTextGenerator("ok")
    resp = _client(generator).post("/api/generate", json={**FORM, "requirements": 200})
    assert resp.status_code == 200
    assert "Special Requirements: 200" in generator.calls[0][0]


def test_provider_failure_hides_details_in_production() -> None:
    generator = StaticTextGenerator("unused", error=RuntimeError("quota exceeded"))
    resp = _client(generator, _settings(app_env="production")).post("/api/generate", json=FORM)

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to generate content. Please try again."}
    assert "details" not in resp.json()


def test_provider_failure_exposes_details_outside_production() -> None:
    generator = StaticTextGenerator("unused", error=RuntimeError("quota exceeded"))
    resp = _client(generator, _settings(app_env="development")).post("/api/generate", json=FORM)

    assert resp.status_code == 500
    assert resp.json() == {
        "error": "Failed to generate content. Please try again.",
        "details": "quota exceeded",
    }


def test_provider_failure_is_logged_with_stack(caplog) -> None:
    generator = StaticTextGenerator("unused", error=ConnectionError("network down"))

    with caplog.at_level(logging.INFO):
        _client(generator).post("/api/generate", json=FORM)

    failed = [record for record in caplog.records if record.getMessage().startswith("generate.failed")]
    assert failed
    assert "type=ConnectionError" in failed[0].getMessage()
    assert "network down" in failed[0].getMessage()
    assert failed[0].exc_info is not None


def test_unparseable_body_is_generic_failure() -> None:
    generator = StaticTextGenerator("unused")
    resp = _client(generator, _settings(app_env="development")).post(
        "/api/generate",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert resp.status_code == 500
    assert resp.json()["error"] == "Failed to generate content. Please try again."
    assert "details" in resp.json()
    assert generator.calls == []


def test_boolean_field_is_interpolated_as_text() -> None:
    generator = StaticTextGenerator("ok")
    resp = _client(generator).post("/api/generate", json={**FORM, "topic": True})
    assert resp.status_code == 200
    assert "Topic: true\n" in generator.calls[0][0]
