import uuid

import pytest

from flashgen.constants.statuses import FlashcardSource
from flashgen.core import AppError, ErrorCode
from flashgen.validations.flashcard_validators import source_matches_generation
from flashgen.validations.generation_validators import validate_generation_command, validate_source_text_bounds
from flashgen.validations.performance_validators import DEFAULT_PERFORMANCE_OPTIONS, normalize_performance_options
from conftest import make_source_text


def test_normalize_defaults_for_missing_or_bad_input():
    assert normalize_performance_options(None) == DEFAULT_PERFORMANCE_OPTIONS
    assert normalize_performance_options("fast") == DEFAULT_PERFORMANCE_OPTIONS
    assert normalize_performance_options({"variableLatency": "yes", "cpuIntensity": True}) == DEFAULT_PERFORMANCE_OPTIONS


def test_normalize_clamps_ranges():
    opts = normalize_performance_options(
        {"responseDelay": 20000, "failureRate": 150, "cpuIntensity": -1, "flashcardCount": 0, "retries": 3}
    )
    assert opts.response_delay_ms == 10000
    assert opts.failure_rate == 100
    assert opts.cpu_intensity == 0
    assert opts.flashcard_count == 1
    assert opts.retries == 3


@pytest.mark.parametrize(
    "source,has_generation,ok",
    [
        (FlashcardSource.MANUAL, False, True),
        (FlashcardSource.MANUAL, True, False),
        (FlashcardSource.AI_FULL, True, True),
        (FlashcardSource.AI_FULL, False, False),
        (FlashcardSource.AI_EDITED, True, True),
        (FlashcardSource.AI_EDITED, False, False),
    ],
)
def test_source_generation_consistency(source, has_generation, ok):
    generation_id = uuid.uuid4() if has_generation else None
    assert source_matches_generation(source, generation_id) is ok


def test_text_error_wins_over_model_error():
    with pytest.raises(AppError) as ei:
        validate_generation_command({"generationSourceText": "short", "generationModel": ""})
    assert ei.value.code == ErrorCode.TEXT_TOO_SHORT


def test_snake_case_body_is_accepted():
    cmd = validate_generation_command({"generation_source_text": make_source_text(1000), "generation_model": "m"})
    assert cmd.generation_model == "m"


@pytest.mark.parametrize(
    "text,model,code",
    [
        (make_source_text(999), "m", ErrorCode.TEXT_TOO_SHORT),
        (make_source_text(10001), "m", ErrorCode.TEXT_TOO_LONG),
        (make_source_text(1000), "   ", ErrorCode.MODEL_REQUIRED),
    ],
)
def test_bounds_guard(text, model, code):
    with pytest.raises(AppError) as ei:
        validate_source_text_bounds(text, model)
    assert ei.value.code == code
