# flashgen/generation/base.py
from typing import Protocol, Sequence

from flashgen.constants.statuses import FlashcardStatus
from flashgen.generation.types import FlashcardProposal


class ContentGenerator(Protocol):
    """
    Turns source text into proposed front/back pairs.

    Single attempt; no internal retry. Implementations raise
    GenerationFailure with a category so the caller can decide retry
    eligibility. Proposals carry fresh ids, the given status and the
    AI source tag.
    """

    async def generate(
        self,
        text: str,
        model: str,
        status: FlashcardStatus = FlashcardStatus.PENDING,
    ) -> Sequence[FlashcardProposal]:
        ...
