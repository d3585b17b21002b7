import re

_LEADING_FENCE_RE = re.compile(r"^```(?:html)?\s*", re.IGNORECASE)
_TRAILING_FENCE_RE = re.compile(r"\s*```$")

EMPTY_GENERATION_PLACEHOLDER = "<!-- Failed to generate content -->"


def clean_response(text: str) -> str:
    """Strip the markdown code fence a model may wrap markup in, then trim.

    Passes repeat until nothing changes, which keeps the function idempotent.
    Trimmed markup without a fence is returned as is.
    """
    cleaned = text.strip()
    while True:
        stripped = _LEADING_FENCE_RE.sub("", cleaned, count=1)
        stripped = _TRAILING_FENCE_RE.sub("", stripped, count=1).strip()
        if stripped == cleaned:
            return cleaned
        cleaned = stripped
