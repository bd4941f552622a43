# -*- coding: utf-8 -*-
"""
Card Types

Shared types for the origin → Adaptive Card converter.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


DEFAULT_INDENT_WIDTH = 5
DEFAULT_TRUNCATE_LENGTH = 0
DEFAULT_SCHEMA_VERSION = "1.5"
DEFAULT_TITLE = "PNS"
SUBSCRIPTION_TITLE = "Subscription PNS"

CARD_SCHEMA = "http://adaptivecards.io/schemas/adaptive-card.json"
CARD_CONTENT_TYPE = "application/vnd.microsoft.card.adaptive"
CARD_WIDTH = "Full"


class LayoutMode(Enum):
    """How rendered lines are packed into TextRuns"""

    LINE_PER_ENTRY = "line-per-entry"  # one TextRun per line (default)
    SINGLE_BLOCK = "single-block"      # one TextRun, lines joined by \n

    @classmethod
    def from_string(cls, value: Optional[str]) -> "LayoutMode":
        """Parse a layout name; unknown names fall back to LINE_PER_ENTRY"""
        aliases = {
            "line-per-entry": cls.LINE_PER_ENTRY,
            "textblock": cls.LINE_PER_ENTRY,
            "single-block": cls.SINGLE_BLOCK,
            "single": cls.SINGLE_BLOCK,
        }
        return aliases.get((value or "").strip().lower(), cls.LINE_PER_ENTRY)


class OrderingPolicy(Enum):
    """Field ordering policy, chosen once per document"""

    SUBSCRIPTION = "subscription"  # Policy A
    GENERIC = "generic"            # Policy B


def _parse_non_negative_int(value: Any, default: int) -> int:
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, float):
        if not value.is_integer():
            return default
        value = int(value)
    if isinstance(value, int):
        return value if value >= 0 else default
    try:
        parsed = int(str(value).strip())
    except ValueError:
        return default
    return parsed if parsed >= 0 else default


@dataclass(frozen=True)
class RenderOptions:
    """Converter options (all fields have defaults)"""

    indent_width: int = DEFAULT_INDENT_WIDTH
    truncate_length: int = DEFAULT_TRUNCATE_LENGTH   # 0 = disabled
    title: Optional[str] = None                      # None = pick by policy
    schema_version: str = DEFAULT_SCHEMA_VERSION
    use_monospace: bool = True
    layout_mode: LayoutMode = LayoutMode.LINE_PER_ENTRY

    def __post_init__(self):
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "indent_width", _parse_non_negative_int(self.indent_width, DEFAULT_INDENT_WIDTH))
        object.__setattr__(self, "truncate_length", _parse_non_negative_int(self.truncate_length, DEFAULT_TRUNCATE_LENGTH))
        object.__setattr__(self, "schema_version", str(self.schema_version or DEFAULT_SCHEMA_VERSION))
        object.__setattr__(self, "use_monospace", bool(self.use_monospace))
        object.__setattr__(self, "title", self.title or None)
        if not isinstance(self.layout_mode, LayoutMode):
            object.__setattr__(self, "layout_mode", LayoutMode.from_string(self.layout_mode))

    @classmethod
    def from_flags(
        cls,
        indent: Any = None,
        truncate: Any = None,
        title: Optional[str] = None,
        version: Optional[str] = None,
        single: bool = False,
        no_mono: bool = False,
    ) -> "RenderOptions":
        """
        Build options from raw flag values (CLI arguments or env strings).

        Non-numeric or negative indent/truncate values fail closed to
        their defaults instead of raising.
        """
        return cls(
            indent_width=_parse_non_negative_int(indent, DEFAULT_INDENT_WIDTH),
            truncate_length=_parse_non_negative_int(truncate, DEFAULT_TRUNCATE_LENGTH),
            title=title or None,
            schema_version=version or DEFAULT_SCHEMA_VERSION,
            use_monospace=not no_mono,
            layout_mode=LayoutMode.SINGLE_BLOCK if single else LayoutMode.LINE_PER_ENTRY,
        )

    def resolve_title(self, policy: OrderingPolicy) -> str:
        if self.title:
            return self.title
        if policy == OrderingPolicy.SUBSCRIPTION:
            return SUBSCRIPTION_TITLE
        return DEFAULT_TITLE


@dataclass(frozen=True)
class OrderedDocument:
    """Field Orderer output: the resolved policy plus ordered (key, value) pairs"""

    policy: OrderingPolicy
    entries: tuple = ()

    def keys(self) -> list[str]:
        return [key for key, _ in self.entries]


@dataclass(frozen=True)
class TextFragment:
    """One inline TextRun of the card body"""

    text: str
    new_line: bool = True
    emphasis: bool = False
    monospace: bool = False

    def to_dict(self) -> dict:
        run = {"type": "TextRun", "text": f"\n{self.text}" if self.new_line else self.text}
        if self.emphasis:
            run["weight"] = "bolder"
        if self.monospace:
            run["fontType"] = "Monospace"
        return run


@dataclass(frozen=True)
class CardEnvelope:
    """Converter output: title fragment + line fragments, ready for to_dict()"""

    title: str
    fragments: tuple = ()
    version: str = DEFAULT_SCHEMA_VERSION
    lines: tuple = field(default=(), compare=False)

    def to_dict(self) -> dict:
        """Serialise as a Teams message carrying one Adaptive Card"""
        return {
            "type": "message",
            "attachments": [
                {
                    "contentType": CARD_CONTENT_TYPE,
                    "contentUrl": None,
                    "content": {
                        "$schema": CARD_SCHEMA,
                        "type": "AdaptiveCard",
                        "version": self.version,
                        "msteams": {"width": CARD_WIDTH},
                        "body": [
                            {
                                "type": "RichTextBlock",
                                "inlines": [fragment.to_dict() for fragment in self.fragments],
                            }
                        ],
                    },
                }
            ],
        }
