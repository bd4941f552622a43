# -*- coding: utf-8 -*-
"""
Converter Error Types

Raised only for caller mistakes (missing options, unusable document type).
Malformed input text is never an error: it goes to the loose-text parser.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional


class CardErrorCode(Enum):
    """Converter error codes"""

    MISSING_OPTIONS = "missing_options"      # options record not supplied
    INVALID_OPTIONS = "invalid_options"      # options is not a RenderOptions
    INVALID_DOCUMENT = "invalid_document"    # neither a mapping nor text


ERROR_MESSAGES = {
    CardErrorCode.MISSING_OPTIONS: "Render options are required",
    CardErrorCode.INVALID_OPTIONS: "Render options must be RenderOptions, got {type_name}",
    CardErrorCode.INVALID_DOCUMENT: "Document must be a mapping or text, got {type_name}",
}


@dataclass
class CardError(Exception):
    """Converter programming error"""

    code: CardErrorCode
    message: str
    details: Optional[dict] = None

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_code(cls, code: CardErrorCode, **kwargs) -> "CardError":
        template = ERROR_MESSAGES.get(code, "Converter error")
        message = template.format(**kwargs) if kwargs else template
        return cls(code=code, message=message, details=kwargs if kwargs else None)
