# flashgen/generation/providers/mock.py
from __future__ import annotations

import asyncio
import random
import re
from dataclasses import dataclass, field

from flashgen.constants.statuses import FlashcardSource, FlashcardStatus
from flashgen.generation.errors import GenerationFailure, GenerationFailureCategory
from flashgen.generation.types import FlashcardProposal

MIN_SENTENCE_LENGTH = 10
SPLIT_STRATEGIES = ("comma", "midpoint", "cloze")

_SENTENCE_END = re.compile(r"[.!?]")
_WHITESPACE = re.compile(r"\s+")


def split_sentences(text: str) -> list[str]:
    flat = _WHITESPACE.sub(" ", text or "")
    return [s.strip() for s in _SENTENCE_END.split(flat) if len(s.strip()) > MIN_SENTENCE_LENGTH]


def split_at_comma(sentence: str) -> tuple[str, str] | None:
    head, sep, tail = sentence.partition(",")
    if not sep or not head.strip() or not tail.strip():
        return None
    return head.strip(), tail.strip()


def split_at_midpoint(sentence: str) -> tuple[str, str]:
    mid = len(sentence) // 2
    # prefer the space closest to the middle so words stay whole
    left = sentence.rfind(" ", 0, mid + 1)
    right = sentence.find(" ", mid)
    candidates = [i for i in (left, right) if 0 < i < len(sentence) - 1]
    cut = min(candidates, key=lambda i: abs(i - mid)) if candidates else mid
    return sentence[:cut].strip(), sentence[cut:].strip()


def split_cloze(sentence: str) -> tuple[str, str]:
    words = sentence.split(" ")
    if len(words) < 2:
        return split_at_midpoint(sentence)
    mid = len(words) // 2
    return " ".join(words[:mid]) + "...", " ".join(words[mid:])


@dataclass
class MockContentGenerator:
    """
    Reference generator: picks sentences from the source text and turns each
    into a front/back pair with a simple split heuristic. Deterministic when
    seeded; never fails on its own (see FailureInjectingGenerator).
    """
    min_proposals: int = 3
    max_proposals: int = 10
    min_latency_ms: int = 0
    max_latency_ms: int = 0
    seed: int | None = None
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def _split(self, sentence: str) -> tuple[str, str]:
        strategy = self._rng.choice(SPLIT_STRATEGIES)
        if strategy == "comma":
            return split_at_comma(sentence) or split_at_midpoint(sentence)
        if strategy == "cloze":
            return split_cloze(sentence)
        return split_at_midpoint(sentence)

    async def generate(
        self,
        text: str,
        model: str,
        status: FlashcardStatus = FlashcardStatus.PENDING,
    ) -> list[FlashcardProposal]:
        if self.max_latency_ms > 0:
            delay_ms = self._rng.uniform(self.min_latency_ms, self.max_latency_ms)
            await asyncio.sleep(delay_ms / 1000)

        sentences = split_sentences(text)
        if not sentences:
            raise GenerationFailure(
                GenerationFailureCategory.INVALID_RESPONSE,
                "AI service returned invalid response format",
            )

        count = self._rng.randint(self.min_proposals, self.max_proposals)
        proposals: list[FlashcardProposal] = []
        for _ in range(count):
            front, back = self._split(self._rng.choice(sentences))
            proposals.append(
                FlashcardProposal(
                    front=front,
                    back=back,
                    status=status,
                    source=FlashcardSource.AI_FULL,
                )
            )
        return proposals
