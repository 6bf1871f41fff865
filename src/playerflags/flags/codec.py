"""Encode/decode policy shared by flag handles and the registry.

Structured values (dicts, lists, tuples) are stored as compact JSON text;
scalars are stored as-is. On the way out any string that starts with ``{``
or ``[`` is tried as JSON. A literal string such as ``"[1, 2]"`` is therefore
indistinguishable from an encoded list and comes back as ``[1, 2]``; text
that is not valid JSON (or nested too deeply to parse) comes back unchanged.
Tuples are encoded as JSON arrays and therefore come back as lists.
"""
from __future__ import annotations
import json
from typing import Any
from ..core.logging import logger

STRUCTURED_TYPES = (dict, list, tuple)
JSON_OPENERS = ("{", "[")

def is_structured(value: Any) -> bool:
    return isinstance(value, STRUCTURED_TYPES)

def looks_encoded(stored: Any) -> bool:
    return isinstance(stored, str) and stored.startswith(JSON_OPENERS)

def encode(value: Any) -> Any:
    if is_structured(value):
        return json.dumps(value, separators=(",", ":"))
    return value

def decode(stored: Any) -> Any:
    if not looks_encoded(stored):
        return stored
    try:
        return json.loads(stored)
    except (ValueError, RecursionError):
        logger.debug("FlagDecodeFallback", raw=stored[:80])
        return stored

def decode_with_default(stored: Any, default: Any) -> Any:
    """Decode ``stored``, preferring ``default`` over undecodable text when the default is structured."""
    if not is_structured(default) or not isinstance(stored, str):
        return decode(stored)
    try:
        return json.loads(stored)
    except (ValueError, RecursionError):
        logger.debug("FlagDecodeFallback", raw=stored[:80], used_default=True)
        return default
