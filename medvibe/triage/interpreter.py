"""
Turns the raw model output into the suggestion object returned to clients.

The model is asked for a single JSON object but is not forced to comply, so
parsing degrades in steps instead of failing:

1. the whole text as JSON;
2. the span from the first "{" to the last "}" as JSON;
3. the raw text wrapped as {"texto": raw}.

Step 2 is greedy: output with several separate objects yields a span that
does not parse, and the answer falls through to step 3.
"""
import json
import logging
import re
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

_OBJECT_SPAN = re.compile(r"\{[\s\S]*\}")


def _load_object(text: str) -> Optional[Dict[str, Any]]:
    try:
        value = json.loads(text)
    except ValueError:
        return None
    if isinstance(value, dict):
        return value
    return None


def interpret_response(raw: str) -> Dict[str, Any]:
    """
    Parse the model output into a suggestion dict.

    Args:
        raw: Text returned by the inference service

    Returns:
        dict: The parsed object, or {"texto": raw} when nothing parses
    """
    parsed = _load_object(raw)
    if parsed is not None:
        return parsed

    match = _OBJECT_SPAN.search(raw)
    if match:
        parsed = _load_object(match.group(0))
        if parsed is not None:
            logger.warning("Model output had text around the JSON object; extracted the object span")
            return parsed

    logger.warning("Model output is not JSON; returning it as plain text")
    return {"texto": raw}
