import threading
import uuid

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from flashgen.api.deps import get_content_generator, get_generation_service
from flashgen.core.config import settings
from flashgen.generation.errors import GenerationFailure, GenerationFailureCategory
from flashgen.generation.providers import MockContentGenerator
from flashgen.main import app
from flashgen.models import Generation, GenerationErrorLog
from conftest import make_source_text

URL = "/api/generations"


def _body(length: int = 1500, model: str = "test-model") -> dict:
    return {"generationSourceText": make_source_text(length), "generationModel": model}


def _assert_error(resp, status_code: int, code: str):
    assert resp.status_code == status_code, resp.text
    body = resp.json()
    assert body["apiError"]["apiErrorCode"] == code
    assert body["apiError"]["apiErrorMessage"]
    assert body["apiMetadata"]["apiRequestId"]
    assert body["apiMetadata"]["apiTimestamp"]
    return body


def test_generates_proposals_with_reference_generator(client, count_rows):
    # Scenario A, real mock generator instead of the scripted double
    app.dependency_overrides[get_content_generator] = lambda: MockContentGenerator(seed=11)

    resp = client.post(URL, json=_body(1500))
    assert resp.status_code == 201, resp.text

    data = resp.json()["apiData"]
    proposals = data["generationFlashcardProposals"]
    assert 3 <= data["generationCount"] <= 10
    assert data["generationCount"] == len(proposals)
    assert isinstance(data["generationDuration"], int)
    for p in proposals:
        assert p["flashcardFront"] and p["flashcardBack"]
        assert p["flashcardSource"] == "ai-full"
        assert p["flashcardStatus"] == "pending"
        assert p["flashcardGenerationId"] == data["generationId"]
    assert count_rows(Generation) == 1


def test_envelope_echoes_request_id(client):
    resp = client.post(URL, json=_body(), headers={"x-request-id": "req-123"})
    assert resp.status_code == 201
    assert resp.headers["x-request-id"] == "req-123"
    assert resp.json()["apiMetadata"]["apiRequestId"] == "req-123"


def test_initial_status_from_query(client):
    resp = client.post(URL, params={"flashcardStatus": "accepted"}, json=_body())
    assert resp.status_code == 201
    statuses = {p["flashcardStatus"] for p in resp.json()["apiData"]["generationFlashcardProposals"]}
    assert statuses == {"accepted"}


def test_unknown_status_query_falls_back_to_pending(client):
    resp = client.post(URL, params={"flashcardStatus": "custom"}, json=_body())
    assert resp.status_code == 201
    statuses = {p["flashcardStatus"] for p in resp.json()["apiData"]["generationFlashcardProposals"]}
    assert statuses == {"pending"}


@pytest.mark.parametrize(
    "length,code",
    [
        (999, "INVALID_INPUT.TEXT_TOO_SHORT"),    # Scenario B
        (10001, "INVALID_INPUT.TEXT_TOO_LONG"),   # Scenario C
    ],
)
def test_text_bounds_fail_fast(client, generator, count_rows, length, code):
    resp = client.post(URL, json=_body(length))
    _assert_error(resp, 400, code)
    assert generator.calls == 0
    assert count_rows(Generation) == 0


@pytest.mark.parametrize("length", [1000, 10000])
def test_text_bounds_are_inclusive(client, length):
    assert client.post(URL, json=_body(length)).status_code == 201


@pytest.mark.parametrize("body", [{"generationSourceText": make_source_text(1500)}, _body(model="")])
def test_model_required(client, body):
    _assert_error(client.post(URL, json=body), 400, "INVALID_INPUT.MODEL_REQUIRED")


def test_malformed_json(client):
    resp = client.post(URL, content=b"{not json", headers={"content-type": "application/json"})
    _assert_error(resp, 400, "INVALID_INPUT.MALFORMED_JSON")


@pytest.mark.parametrize("body", [[1, 2, 3], {"generationSourceText": 12345, "generationModel": "m"}])
def test_other_shapes_are_generic_validation_errors(client, body):
    _assert_error(client.post(URL, json=body), 400, "INVALID_INPUT.VALIDATION_ERROR")


@pytest.mark.parametrize(
    "category,status_code,code",
    [
        (GenerationFailureCategory.CONTENT_POLICY, 400, "INVALID_INPUT.CONTENT_POLICY_VIOLATION"),
        (GenerationFailureCategory.INVALID_RESPONSE, 500, "INTERNAL_ERROR.AI_SERVICE_ERROR"),
        (GenerationFailureCategory.UNKNOWN, 500, "INTERNAL_ERROR.AI_SERVICE_ERROR"),
    ],
)
def test_non_retryable_generator_failures(client, generator, session_factory, category, status_code, code):
    generator.steps.append(GenerationFailure(category, "simulated"))

    body = _assert_error(client.post(URL, json=_body()), status_code, code)

    assert body["apiError"]["apiErrorDetails"] == {"message": "simulated"}
    assert generator.calls == 1
    with session_factory() as db:
        logs = db.scalars(select(GenerationErrorLog)).all()
    assert [log.error_code for log in logs] == [f"AI_SERVICE_ERROR.{category.value}"]


def test_overload_exhausts_retries_then_503(client, generator, count_rows):
    generator.steps.extend([GenerationFailure(GenerationFailureCategory.SERVICE_OVERLOAD, "busy")] * 3)

    _assert_error(client.post(URL, json=_body()), 503, "INTERNAL_ERROR.AI_SERVICE_OVERLOADED")
    assert generator.calls == 3
    assert count_rows(GenerationErrorLog) == 1


def test_timeouts_exhaust_retries_then_500(client, generator):
    generator.steps.extend([GenerationFailure(GenerationFailureCategory.TIMEOUT, "slow")] * 3)
    _assert_error(client.post(URL, json=_body()), 500, "INTERNAL_ERROR.AI_SERVICE_TIMEOUT")


def test_timeouts_then_success_is_201(client, generator, count_rows):
    # Scenario D through HTTP
    generator.steps.extend(
        [
            GenerationFailure(GenerationFailureCategory.TIMEOUT, "slow"),
            GenerationFailure(GenerationFailureCategory.TIMEOUT, "slow"),
            6,
        ]
    )
    resp = client.post(URL, json=_body())
    assert resp.status_code == 201
    assert resp.json()["apiData"]["generationCount"] == 6
    assert count_rows(GenerationErrorLog) == 0


def test_proposal_persistence_failure_is_database_error(client, monkeypatch, session_factory):
    # Scenario F through HTTP
    def broken_insert(self, **kwargs):
        raise OperationalError("INSERT INTO flashcards", {}, Exception("disk I/O error"))

    monkeypatch.setattr(
        "flashgen.repos.flashcard.write.FlashcardWriteRepo.bulk_insert_proposals",
        broken_insert,
    )

    _assert_error(client.post(URL, json=_body()), 500, "INTERNAL_ERROR.DATABASE_ERROR")

    with session_factory() as db:
        attempt = db.scalars(select(Generation)).one()
        logs = db.scalars(select(GenerationErrorLog)).all()
    assert attempt.generated_count == 0
    assert [log.error_code for log in logs] == ["GENERAL_ERROR"]


def test_lost_connection_on_attempt_create(client, monkeypatch, count_rows):
    def dropped(self, **kwargs):
        raise OperationalError("INSERT INTO generations", {}, Exception("server closed"), connection_invalidated=True)

    monkeypatch.setattr(
        "flashgen.repos.generation.write.GenerationWriteRepo.create_generation",
        dropped,
    )

    _assert_error(client.post(URL, json=_body()), 500, "INTERNAL_ERROR.DATABASE_CONNECTION")
    # no attempt id yet, so nothing to log against
    assert count_rows(GenerationErrorLog) == 0


def test_unexpected_generator_error_is_unknown(client, generator):
    generator.steps.append(RuntimeError("kaboom"))
    _assert_error(client.post(URL, json=_body()), 500, "INTERNAL_ERROR.UNKNOWN")


def test_user_identity_is_injected(client, session_factory):
    from flashgen.api.deps import get_current_user_id

    other = uuid.UUID("11111111-2222-4333-8444-555555555555")
    app.dependency_overrides[get_current_user_id] = lambda: other

    assert client.post(URL, json=_body()).status_code == 201
    with session_factory() as db:
        assert db.scalars(select(Generation.user_id)).one() == other


def test_hung_proposal_insert_times_out_as_database_error(client, monkeypatch, session_factory):
    release = threading.Event()

    def stalled_insert(self, **kwargs):
        release.wait(5)
        raise RuntimeError("released")

    monkeypatch.setattr(
        "flashgen.repos.flashcard.write.FlashcardWriteRepo.bulk_insert_proposals",
        stalled_insert,
    )
    monkeypatch.setattr(settings, "PERSISTENCE_TIMEOUT_SECONDS", 0.25)

    try:
        _assert_error(client.post(URL, json=_body()), 500, "INTERNAL_ERROR.DATABASE_ERROR")
    finally:
        release.set()

    with session_factory() as db:
        logs = db.scalars(select(GenerationErrorLog)).all()
    assert [log.error_code for log in logs] == ["GENERAL_ERROR"]


def test_long_model_label_is_stored_whole(client, session_factory):
    model = "vendor/" + "m" * 300
    resp = client.post(URL, json=_body(model=model))
    assert resp.status_code == 201, resp.text

    with session_factory() as db:
        assert db.scalars(select(Generation.model)).one() == model


def test_unhandled_error_envelope_keeps_request_id(client):
    def broken_service():
        raise RuntimeError("wiring failed")

    app.dependency_overrides[get_generation_service] = broken_service

    resp = client.post(URL, json=_body(), headers={"x-request-id": "req-boom"})

    body = _assert_error(resp, 500, "INTERNAL_ERROR.UNKNOWN")
    assert body["apiMetadata"]["apiRequestId"] == "req-boom"
    assert resp.headers["x-request-id"] == "req-boom"
