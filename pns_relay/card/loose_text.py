# -*- coding: utf-8 -*-
"""
Loose-Text Parser

Fallback for bodies that are not a JSON object. Each `key: value` line
becomes a document entry (typed back into bool / number / string); lines
that do not match are collected, in order, under the "raw" key.
"""

import json
import logging
import re
from typing import Any, Union

logger = logging.getLogger(__name__)

RAW_KEY = "raw"

_LINE_SPLIT = re.compile(r"\r?\n")
_KEY_VALUE = re.compile(r'^\s*"?([\w.-]+)"?\s*:\s*(.+?)\s*$')
_BOOLEAN = re.compile(r"^(true|false)$", re.IGNORECASE)
_NUMBER = re.compile(r"^\d+(\.\d+)?$")


def coerce_value(text: str) -> Any:
    """
    Type a loose value: "true"/"false" → bool, digits → int/float,
    anything else → string with one layer of surrounding quotes removed.
    """
    if _BOOLEAN.match(text):
        return text.lower() == "true"
    number = _NUMBER.match(text)
    if number:
        return float(text) if number.group(1) else int(text)
    if text.startswith('"'):
        text = text[1:]
    if text.endswith('"'):
        text = text[:-1]
    return text


def parse_loose(raw_text: str) -> dict:
    """
    Extract key/value pairs from free text.

    Args:
        raw_text: request body that failed JSON parsing

    Returns:
        dict: document; never raises
    """
    document: dict = {}
    lines = [line for line in _LINE_SPLIT.split(raw_text or "") if line.strip()]

    for line in lines:
        match = _KEY_VALUE.match(line)
        if match:
            key, value = match.group(1), match.group(2)
            if value.endswith(","):
                value = value[:-1]
            document[key] = coerce_value(value)
            continue

        raw_lines = document.get(RAW_KEY)
        if isinstance(raw_lines, list):
            raw_lines.append(line)
        elif raw_lines is None:
            document[RAW_KEY] = [line]
        else:
            # "raw" was already set by a `raw: ...` line; keep that value first
            document[RAW_KEY] = [raw_lines, line]

    return document


def load_document(raw: Union[str, bytes]) -> dict:
    """
    Parse raw input: a JSON object is used as-is, anything else (invalid
    JSON, or JSON that is not an object) goes through parse_loose.
    """
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8", errors="replace")

    try:
        parsed = json.loads(raw)
    except (ValueError, RecursionError):
        parsed = None

    if isinstance(parsed, dict):
        return parsed

    logger.debug("Input is not a JSON object, using loose-text parser")
    return parse_loose(raw)
