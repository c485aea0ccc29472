# flashgen/generation/sanitize.py
import re

_MARKUP_CHARS = re.compile(r"[<>]")


def sanitize_text(text: str) -> str:
    """Drop angle brackets and trim surrounding whitespace."""
    return _MARKUP_CHARS.sub("", text or "").strip()
