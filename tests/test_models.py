from sqlalchemy import Text

from flashgen.models import Flashcard, Generation, GenerationErrorLog


def test_model_label_columns_are_unbounded():
    assert isinstance(Generation.__table__.c.model.type, Text)
    assert isinstance(GenerationErrorLog.__table__.c.model.type, Text)


def test_flashcards_carry_no_unused_columns():
    columns = set(Flashcard.__table__.c.keys())
    assert "ai_metadata" not in columns
    assert "deleted_at" not in columns
