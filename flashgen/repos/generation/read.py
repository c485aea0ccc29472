from sqlalchemy.orm import Session

from flashgen.models.generation import Generation


class GenerationReadRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, generation_id) -> Generation | None:
        return self.db.get(Generation, generation_id)
