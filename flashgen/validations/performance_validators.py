"""
performance_validators.py
- Purpose: Normalize the optional performanceOptions block of a
  performance-test request.
- Design: Never reject. Missing or wrongly-typed values fall back to defaults,
  out-of-range numbers are clamped.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PerformanceOptions:
    response_delay_ms: int = 2000
    failure_rate: float = 10.0
    cpu_intensity: int = 3
    variable_latency: bool = True
    flashcard_count: int = 5
    retries: int = 2


DEFAULT_PERFORMANCE_OPTIONS = PerformanceOptions()


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _clamp(v: Any, default: float, lo: float, hi: float) -> float:
    if not _is_number(v) or v != v:  # NaN
        return default
    return max(lo, min(hi, v))


def normalize_performance_options(raw: Any) -> PerformanceOptions:
    if not isinstance(raw, dict):
        return DEFAULT_PERFORMANCE_OPTIONS

    d = DEFAULT_PERFORMANCE_OPTIONS
    variable_latency = raw.get("variableLatency")
    return PerformanceOptions(
        response_delay_ms=int(_clamp(raw.get("responseDelay"), d.response_delay_ms, 0, 10000)),
        failure_rate=float(_clamp(raw.get("failureRate"), d.failure_rate, 0, 100)),
        cpu_intensity=int(_clamp(raw.get("cpuIntensity"), d.cpu_intensity, 0, 10)),
        variable_latency=variable_latency if isinstance(variable_latency, bool) else d.variable_latency,
        flashcard_count=int(_clamp(raw.get("flashcardCount"), d.flashcard_count, 1, 50)),
        retries=int(_clamp(raw.get("retries"), d.retries, 0, 5)),
    )
