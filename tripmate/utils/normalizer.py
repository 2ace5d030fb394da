"""
Cleanup of text returned by the generation API.

Gemini output is not guaranteed to be clean HTML or clean JSON: it may be
wrapped in markdown fences, carry grounding citation markers such as ``[1]``
or ``[2, 7]``, or bury a JSON object inside a sentence of prose. Route
handlers use :func:`strip_markup` for display text and :func:`extract_json`
for structured records. Neither function raises on bad input.
"""
import json
import re
from enum import Enum
from typing import Any, Dict, NamedTuple, Optional

from ..settings.logging import app_logger as logger

# Opening fence with an optional language hint, or a bare closing fence.
# A hint must run to the end of its line so text glued to a closing fence is kept.
FENCE_PATTERN = re.compile(r"```(?:[A-Za-z0-9_+-]+(?=[ \t]*(?:\r?\n|$)))?")
CITATION_PATTERN = re.compile(r"\[\s*\d+(?:\s*,\s*\d+)*\s*\]")
TRAILING_COMMA_PATTERN = re.compile(r",\s*([\]}])")
JSON_OBJECT_PATTERN = re.compile(r"\{[\s\S]*\}")


def _reject_constant(name: str):
    # NaN and Infinity are not JSON
    raise ValueError(f"invalid JSON constant {name}")


class ExtractionKind(str, Enum):
    OK = "ok"
    EMPTY = "empty"
    NO_JSON = "no_json"
    MALFORMED = "malformed"


class ExtractionResult(NamedTuple):
    kind: ExtractionKind
    data: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.kind is ExtractionKind.OK


def _remove_until_stable(text: str, *patterns: re.Pattern) -> str:
    # A removal can join two fragments into a new marker, e.g. "[[1]2]".
    while True:
        cleaned = text
        for pattern in patterns:
            cleaned = pattern.sub("", cleaned)
        if cleaned == text:
            return cleaned
        text = cleaned


def strip_citations(text: Optional[str]) -> str:
    if not text:
        return ""
    return _remove_until_stable(text, CITATION_PATTERN).strip()


def strip_markup(raw: Optional[str]) -> str:
    """
    Remove markdown fences and citation markers, then trim.

    Args:
        raw: Text from the generation API. ``None`` is treated as empty.

    Returns:
        The cleaned text, possibly empty.
    """
    if not raw:
        return ""
    return _remove_until_stable(raw, FENCE_PATTERN, CITATION_PATTERN).strip()


def extract_json_result(raw: Optional[str]) -> ExtractionResult:
    """
    Locate and parse the JSON object embedded in ``raw``.

    The candidate runs from the first ``{`` to the last ``}`` after citation
    markers are removed. A trailing comma before ``}`` or ``]`` is repaired
    before parsing; nothing else is.

    Returns:
        An :class:`ExtractionResult` whose ``kind`` tells why ``data`` is
        missing when extraction fails.
    """
    cleaned = strip_citations(raw)
    if not cleaned:
        logger.debug("extract_json: empty AI response")
        return ExtractionResult(ExtractionKind.EMPTY)

    match = JSON_OBJECT_PATTERN.search(cleaned)
    if not match:
        logger.warning("extract_json: no JSON object found in AI response: %s", cleaned[:100])
        return ExtractionResult(ExtractionKind.NO_JSON)

    candidate = TRAILING_COMMA_PATTERN.sub(r"\1", match.group(0))
    try:
        data = json.loads(candidate, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        logger.warning("extract_json: failed to parse JSON (%s): %s", e, candidate[:200])
        return ExtractionResult(ExtractionKind.MALFORMED)

    return ExtractionResult(ExtractionKind.OK, data)


def extract_json(raw: Optional[str]) -> Optional[Dict[str, Any]]:
    """Best-effort JSON object extraction; ``None`` when nothing usable is found."""
    return extract_json_result(raw).data
