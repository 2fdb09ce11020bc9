"""Turn raw LLM replies into candidate domain names.

The model is asked for one name per line, but replies routinely carry
numbering, bullets, intro sentences and blank lines. This module keeps only
lines that look like a bare `.com` name, in the order the model wrote them.
"""

from __future__ import annotations

import re

MAX_CANDIDATE_LENGTH = 30
REQUIRED_SUFFIX = ".com"
FILLER_PHRASES: tuple[str, ...] = ("here are", "based on")

_DECORATION_RE = re.compile(r"^[-\d.]+\s*")
_ALLOWED_RE = re.compile(r"[a-zA-Z0-9.-]+")
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def strip_decoration(line: str) -> str:
    """Drop a leading "1.", "-", "12." style prefix, then surrounding whitespace.

    The prefix must start the line: an indented "  3. name.com" keeps its
    numbering and is rejected later by the character check.
    """

    return _DECORATION_RE.sub("", line, count=1).strip()


def is_candidate(value: str) -> bool:
    if not value or len(value) > MAX_CANDIDATE_LENGTH:
        return False
    if not _ALLOWED_RE.fullmatch(value):
        return False
    lowered = value.lower()
    if not lowered.endswith(REQUIRED_SUFFIX):
        return False
    return not any(phrase in lowered for phrase in FILLER_PHRASES)


def extract_candidates(raw_text: str | None) -> list[str]:
    """Return the candidate names found in `raw_text`, in input order.

    Never raises: `None`, empty or junk input yields an empty list. Duplicates
    are kept on purpose; the scanner treats each line independently.
    """

    if not raw_text:
        return []

    candidates: list[str] = []
    for line in _LINE_BREAK_RE.split(raw_text):
        value = strip_decoration(line)
        if is_candidate(value):
            candidates.append(value)
    return candidates
