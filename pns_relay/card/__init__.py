# -*- coding: utf-8 -*-
"""
Origin → Adaptive Card converter

Pure transformation: no network, filesystem or environment access. The
only side effect is reading the clock for the title timestamp.

Pipeline:
    load_document (text only) → order → render → assemble

Usage:
    from pns_relay.card import convert, RenderOptions
    envelope = convert({"msgVersion": "1.0"}, RenderOptions())
    payload = envelope.to_dict()
"""

from datetime import datetime
from typing import Any, Mapping, Optional

from pns_relay.card.assemble import assemble, kst_timestamp
from pns_relay.card.errors import CardError, CardErrorCode
from pns_relay.card.loose_text import load_document, parse_loose
from pns_relay.card.ordering import classify, order
from pns_relay.card.render_lines import render
from pns_relay.card.types import (
    CardEnvelope,
    LayoutMode,
    OrderedDocument,
    OrderingPolicy,
    RenderOptions,
    TextFragment,
)


def convert(document: Any, options: Optional[RenderOptions], *, now: Optional[datetime] = None) -> CardEnvelope:
    """
    Convert an origin document into a card envelope.

    Args:
        document: parsed document (mapping) or raw body text/bytes
        options: render options (required)
        now: clock override for the title timestamp

    Returns:
        CardEnvelope

    Raises:
        CardError: options missing, or document of an unusable type
    """
    if options is None:
        raise CardError.from_code(CardErrorCode.MISSING_OPTIONS)
    if not isinstance(options, RenderOptions):
        raise CardError.from_code(CardErrorCode.INVALID_OPTIONS, type_name=type(options).__name__)

    if isinstance(document, (str, bytes, bytearray)):
        document = load_document(document)
    elif not isinstance(document, Mapping):
        raise CardError.from_code(CardErrorCode.INVALID_DOCUMENT, type_name=type(document).__name__)

    ordered = order(document)
    lines = render(ordered, options)
    return assemble(lines, options, title=options.resolve_title(ordered.policy), now=now)


__all__ = [
    "convert",
    "order",
    "classify",
    "render",
    "assemble",
    "kst_timestamp",
    "parse_loose",
    "load_document",
    "CardEnvelope",
    "CardError",
    "CardErrorCode",
    "LayoutMode",
    "OrderedDocument",
    "OrderingPolicy",
    "RenderOptions",
    "TextFragment",
]
