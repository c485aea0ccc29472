# flashgen/generation/chaos.py
"""
Failure injection around any ContentGenerator.

Kept apart from the generators so a test harness (or a chaos run in
staging) decides when upstream flakiness is simulated.
"""

from __future__ import annotations

import random
from typing import Sequence

from flashgen.constants.statuses import FlashcardStatus
from flashgen.generation.base import ContentGenerator
from flashgen.generation.errors import GenerationFailure, GenerationFailureCategory
from flashgen.generation.types import FlashcardProposal

FAILURE_MESSAGES: dict[GenerationFailureCategory, str] = {
    GenerationFailureCategory.TIMEOUT: "AI service request timed out after 60 seconds",
    GenerationFailureCategory.CONTENT_POLICY: "Input text violates content policy guidelines",
    GenerationFailureCategory.SERVICE_OVERLOAD: "AI service is currently overloaded, try again later",
    GenerationFailureCategory.INVALID_RESPONSE: "AI service returned invalid response format",
    GenerationFailureCategory.UNKNOWN: "Unknown error occurred in AI service",
}


class FailureInjectingGenerator:
    def __init__(
        self,
        inner: ContentGenerator,
        *,
        failure_rate: float,
        categories: Sequence[GenerationFailureCategory] = tuple(GenerationFailureCategory),
        rng: random.Random | None = None,
    ):
        if not 0.0 <= failure_rate <= 1.0:
            raise ValueError("failure_rate must be within [0, 1]")
        if not categories:
            raise ValueError("categories must not be empty")
        self.inner = inner
        self.failure_rate = failure_rate
        self.categories = tuple(categories)
        self._rng = rng or random.Random()

    async def generate(
        self,
        text: str,
        model: str,
        status: FlashcardStatus = FlashcardStatus.PENDING,
    ) -> Sequence[FlashcardProposal]:
        if self._rng.random() < self.failure_rate:
            category = self._rng.choice(self.categories)
            raise GenerationFailure(category, FAILURE_MESSAGES[category])
        return await self.inner.generate(text, model, status)
