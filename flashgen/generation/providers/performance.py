# flashgen/generation/providers/performance.py
"""
Generator for load/perf testing: configurable latency, CPU burn and
failure rate, fixed proposal count. Output text is synthetic.
"""

from __future__ import annotations

import asyncio
import math
import random
from dataclasses import dataclass, field

from starlette.concurrency import run_in_threadpool

from flashgen.constants.statuses import FlashcardSource, FlashcardStatus
from flashgen.generation.errors import GenerationFailure, GenerationFailureCategory
from flashgen.generation.types import FlashcardProposal

CPU_ITERATIONS_PER_LEVEL = 100_000
LATENCY_VARIANCE = 0.3


def _burn_cpu(iterations: int) -> float:
    acc = 0.0
    for i in range(iterations):
        acc += math.sin(i) * math.cos(i)
    return acc


@dataclass
class PerformanceTestGenerator:
    response_delay_ms: int = 2000
    failure_rate: float = 10.0      # percent, 0-100
    cpu_intensity: int = 3          # 0-10
    variable_latency: bool = True
    flashcard_count: int = 5
    seed: int | None = None
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    async def _simulate_latency(self) -> None:
        delay = float(self.response_delay_ms)
        if self.variable_latency:
            variance = delay * LATENCY_VARIANCE
            delay += self._rng.uniform(-variance, variance)
        if delay > 0:
            await asyncio.sleep(delay / 1000)

    async def generate(
        self,
        text: str,
        model: str,
        status: FlashcardStatus = FlashcardStatus.PENDING,
    ) -> list[FlashcardProposal]:
        if self._rng.random() * 100 < self.failure_rate:
            await self._simulate_latency()
            raise GenerationFailure(
                GenerationFailureCategory.UNKNOWN,
                f"Performance test simulated failure ({self.failure_rate:g}% chance)",
            )

        if self.cpu_intensity > 0:
            await run_in_threadpool(_burn_cpu, self.cpu_intensity * CPU_ITERATIONS_PER_LEVEL)

        await self._simulate_latency()

        return [
            FlashcardProposal(
                front=f"Test question {i + 1} under model: {model}",
                back=f"Test answer {i + 1} for input text of length: {len(text)}",
                status=status,
                source=FlashcardSource.AI_FULL,
            )
            for i in range(self.flashcard_count)
        ]
