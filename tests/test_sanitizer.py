import pytest

from flashgen.generation.sanitize import sanitize_text
from conftest import make_source_text

SAMPLES = [
    make_source_text(1000),
    make_source_text(10000),
    "  <script>alert('x')</script> " + make_source_text(1200) + "\n\t",
    "<<<" + make_source_text(1500) + ">>>",
    "   <b>bold</b> and <i>italic</i>   " * 40,
]


@pytest.mark.parametrize("text", SAMPLES)
def test_sanitize_never_grows_and_strips_angle_brackets(text):
    out = sanitize_text(text)
    assert len(out) <= len(text)
    assert "<" not in out
    assert ">" not in out


@pytest.mark.parametrize("text", SAMPLES)
def test_sanitize_is_a_fixed_point(text):
    once = sanitize_text(text)
    assert sanitize_text(once) == once


def test_sanitize_trims_and_handles_empty():
    assert sanitize_text("  hello <world>  ") == "hello world"
    assert sanitize_text("") == ""
    assert sanitize_text("<>") == ""
