import uuid

from sqlalchemy.exc import IntegrityError

from flashgen.models import Flashcard
from conftest import make_source_text

URL = "/api/flashcards/batch"


def _generate(client) -> str:
    resp = client.post(
        "/api/generations",
        json={"generationSourceText": make_source_text(1500), "generationModel": "test-model"},
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["apiData"]["generationId"]


def test_creates_manual_and_ai_cards(client, count_rows):
    generation_id = _generate(client)
    before = count_rows(Flashcard)

    resp = client.post(
        URL,
        json={
            "flashcardList": [
                {"flashcardFront": "Q1", "flashcardBack": "A1", "flashcardSource": "manual"},
                {
                    "flashcardFront": "Q2",
                    "flashcardBack": "A2",
                    "flashcardSource": "ai-edited",
                    "flashcardGenerationId": generation_id,
                },
            ]
        },
    )

    assert resp.status_code == 201, resp.text
    data = resp.json()["apiData"]
    assert data["listTotal"] == 2
    manual, edited = data["listItems"]
    assert manual["flashcardGenerationId"] is None
    assert manual["flashcardStatus"] == "accepted"
    assert edited["flashcardSource"] == "ai-edited"
    assert edited["flashcardGenerationId"] == generation_id
    assert all("flashcardAiMetadata" not in item for item in data["listItems"])
    assert count_rows(Flashcard) == before + 2


def test_manual_card_with_generation_id_is_rejected(client, count_rows):
    resp = client.post(
        URL,
        json={
            "flashcardList": [
                {
                    "flashcardFront": "Q",
                    "flashcardBack": "A",
                    "flashcardSource": "manual",
                    "flashcardGenerationId": str(uuid.uuid4()),
                }
            ]
        },
    )
    assert resp.status_code == 400
    err = resp.json()["apiError"]
    assert err["apiErrorCode"] == "INVALID_INPUT.SOURCE_GENERATION_MISMATCH"
    assert err["apiErrorDetails"]["index"] == 0
    assert count_rows(Flashcard) == 0


def test_ai_card_without_generation_id_rejects_whole_batch(client, count_rows):
    resp = client.post(
        URL,
        json={
            "flashcardList": [
                {"flashcardFront": "Q1", "flashcardBack": "A1", "flashcardSource": "manual"},
                {"flashcardFront": "Q2", "flashcardBack": "A2", "flashcardSource": "ai-full"},
            ]
        },
    )
    assert resp.status_code == 400
    assert resp.json()["apiError"]["apiErrorDetails"]["index"] == 1
    assert count_rows(Flashcard) == 0


def test_length_limits_and_empty_list(client):
    too_long = {"flashcardFront": "x" * 201, "flashcardBack": "A", "flashcardSource": "manual"}
    for body in ({"flashcardList": [too_long]}, {"flashcardList": []}, {}):
        resp = client.post(URL, json=body)
        assert resp.status_code == 400
        assert resp.json()["apiError"]["apiErrorCode"] == "INVALID_INPUT.VALIDATION_ERROR"


def test_malformed_json(client):
    resp = client.post(URL, content=b"[{", headers={"content-type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["apiError"]["apiErrorCode"] == "INVALID_INPUT.MALFORMED_JSON"


def test_storage_failure_is_database_error(client, monkeypatch):
    def broken(self, **kwargs):
        raise IntegrityError("INSERT INTO flashcards", {}, Exception("constraint failed"))

    monkeypatch.setattr("flashgen.repos.flashcard.write.FlashcardWriteRepo.create_many", broken)

    resp = client.post(
        URL,
        json={"flashcardList": [{"flashcardFront": "Q", "flashcardBack": "A", "flashcardSource": "manual"}]},
    )
    assert resp.status_code == 500
    assert resp.json()["apiError"]["apiErrorCode"] == "INTERNAL_ERROR.DATABASE_ERROR"
