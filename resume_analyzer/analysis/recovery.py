"""Recovers a JSON object from free-form model replies.

Models often wrap the requested JSON in commentary or code fences. Two
strategies are available:

``outermost``
    Take everything from the first ``{`` to the last ``}``. Cheap and right
    whenever the reply holds a single object; it mis-extracts when prose
    before the payload contains braces.

``balanced``
    Try each ``{`` in turn with the JSON decoder itself, which tracks nesting
    and string literals, and keep the first complete object.

Both fall back to decoding the whole reply when no candidate is found.
"""

import json
from typing import Any

from resume_analyzer.processor.exceptions import MalformedStructuredResultError

OUTERMOST = "outermost"
BALANCED = "balanced"
RECOVERY_MODES = frozenset({OUTERMOST, BALANCED})

_decoder = json.JSONDecoder()
_TOO_DEEP = "JSON response is nested too deeply"


def recover_json_object(raw: str, mode: str = OUTERMOST) -> dict[str, Any]:
    """Extract the JSON object embedded in a model reply.

    Raises:
        MalformedStructuredResultError: if no JSON object can be decoded.
        ValueError: if ``mode`` is not a known strategy.
    """
    if mode == OUTERMOST:
        parsed = _decode(_outermost_span(raw), raw)
    elif mode == BALANCED:
        parsed = _first_balanced_object(raw)
        if parsed is None:
            parsed = _decode(raw, raw)
    else:
        raise ValueError(
            f"Unknown JSON recovery mode '{mode}'. Choose from: {sorted(RECOVERY_MODES)}"
        )

    if not isinstance(parsed, dict):
        raise MalformedStructuredResultError(raw, "JSON response must be an object")
    return parsed


def _outermost_span(raw: str) -> str:
    start = raw.find("{")
    end = raw.rfind("}")
    if start == -1 or end < start:
        return raw
    return raw[start : end + 1]


def _first_balanced_object(raw: str) -> dict[str, Any] | None:
    start = raw.find("{")
    while start != -1:
        try:
            parsed, _end = _decoder.raw_decode(raw, start)
        except json.JSONDecodeError:
            pass
        except RecursionError as exc:
            raise MalformedStructuredResultError(raw, _TOO_DEEP) from exc
        else:
            if isinstance(parsed, dict):
                return parsed
        start = raw.find("{", start + 1)
    return None


def _decode(candidate: str, raw: str) -> Any:
    try:
        return json.loads(candidate)
    except json.JSONDecodeError as exc:
        raise MalformedStructuredResultError(raw, f"Invalid JSON response: {exc}") from exc
    except RecursionError as exc:
        raise MalformedStructuredResultError(raw, _TOO_DEEP) from exc
