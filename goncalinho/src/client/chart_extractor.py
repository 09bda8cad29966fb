"""Extraction of the chart descriptor the model appends to an answer.

When an answer compares numbers, the model ends it with a JSON object such as
``{"chart": {"type": "bar", "title": "...", "data": [{"label": "A", "value": 1}]}}``.
The scan below walks the text for balanced, string-aware ``{...}`` candidates
instead of matching a single greedy regex, so prose braces before the chart
and nested objects inside it do not break the parse.
"""

import json
import logging
import re
from typing import Any, Dict, Iterator, Optional

from pydantic import ValidationError as PydanticValidationError

from goncalinho.conf.prompts import CHART_PLACEHOLDER_TEXT
from goncalinho.src.data_classes import ChartData, ChartExtraction

logger = logging.getLogger(__name__)

MAX_BRACE_DEPTH = 32
CODE_FENCE = "```"
_FENCE_PATTERN = re.compile(r"```(?:json)?\s*")


def _find_object_end(text: str, start: int) -> Optional[int]:
    """Find the index of the brace closing the object opened at ``start``.

    Braces inside JSON strings are ignored. Gives up past MAX_BRACE_DEPTH.
    """
    depth = 0
    in_string = False
    escaped = False

    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char == "{":
            depth += 1
            if depth > MAX_BRACE_DEPTH:
                return None
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index
    return None


def iter_json_candidates(text: str) -> Iterator[str]:
    """Yield every balanced top-level ``{...}`` substring, in order.

    Args:
        text: Full answer text

    Yields:
        str: Candidate JSON object texts
    """
    position = text.find("{")
    while position != -1:
        end = _find_object_end(text, position)
        if end is None:
            position = text.find("{", position + 1)
            continue
        yield text[position : end + 1]
        position = text.find("{", end + 1)


def _parse_candidate(candidate: str) -> Optional[Dict[str, Any]]:
    cleaned = _FENCE_PATTERN.sub("", candidate)
    try:
        parsed = json.loads(cleaned)
    except (ValueError, RecursionError):
        # Array nesting is not bounded by the brace scan
        return None
    return parsed if isinstance(parsed, dict) else None


def extract_chart(full_text: str) -> ChartExtraction:
    """Split an answer into display text and its chart descriptor.

    The first candidate object with a ``chart`` key wins. Display text is the
    object's ``message`` field if present, a short placeholder when the chart
    came inside a code fence, and the original answer otherwise.

    Args:
        full_text: The complete answer

    Returns:
        ChartExtraction: Display text and the chart, or the original text
        and no chart when nothing usable is found
    """
    for candidate in iter_json_candidates(full_text):
        parsed = _parse_candidate(candidate)
        if parsed is None or "chart" not in parsed:
            continue

        try:
            chart = ChartData.model_validate(parsed["chart"])
        except PydanticValidationError as e:
            logger.warning(f"Ignoring malformed chart descriptor: {e.error_count()} errors")
            return ChartExtraction(text=full_text)

        message = parsed.get("message")
        if isinstance(message, str) and message:
            text = message
        elif CODE_FENCE in full_text:
            text = CHART_PLACEHOLDER_TEXT
        else:
            text = full_text
        return ChartExtraction(text=text, chart=chart)

    return ChartExtraction(text=full_text)
