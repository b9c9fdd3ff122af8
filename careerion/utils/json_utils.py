"""
JSON extraction from model output.

Models asked for "only JSON" still wrap it in ```json fences or trail it
with prose. extract_json() digs out the first value that parses.
"""

import json
import re
from typing import Any, Optional

_FENCED_JSON = re.compile(r"```json([\s\S]*?)```", re.IGNORECASE)
_FENCED_ANY = re.compile(r"```([\s\S]*?)```")
_JSON_START = re.compile(r"[\[{]")


def strip_code_fences(text: str) -> str:
    """Drop ``` markers (keeping the fenced content)."""
    text = _FENCED_JSON.sub(lambda m: m.group(1), text)
    text = _FENCED_ANY.sub(lambda m: m.group(1), text)
    return text.strip()


def extract_json(text: Any) -> Optional[Any]:
    """
    Return the first JSON object/array found in text, or None.

    After stripping fences, everything before the first '{' or '[' is
    dropped and ever shorter prefixes of the rest are tried until one
    parses. Trailing prose is therefore tolerated.
    """
    if not text or not isinstance(text, str):
        return None

    cleaned = strip_code_fences(text)
    match = _JSON_START.search(cleaned)
    if not match:
        return None
    cleaned = cleaned[match.start():]

    for end in range(len(cleaned), 0, -1):
        candidate = cleaned[:end].strip()
        # Only a closing bracket can end a valid object/array
        if not candidate or candidate[-1] not in "}]":
            continue
        try:
            return json.loads(candidate)
        except ValueError:
            continue
    return None
