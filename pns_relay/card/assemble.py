# -*- coding: utf-8 -*-
"""
Card Assembler

Wraps rendered lines into a CardEnvelope: a bold title run carrying the
KST generation time, followed by the line runs.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from pns_relay.card.types import CardEnvelope, LayoutMode, RenderOptions, TextFragment

KST = timezone(timedelta(hours=9), "KST")


def kst_timestamp(now: Optional[datetime] = None) -> str:
    """
    Format a moment as KST wall-clock time, "YYYY-MM-DD HH:MM:SS".

    Naive datetimes are taken as UTC.
    """
    moment = now or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(KST).strftime("%Y-%m-%d %H:%M:%S")


def assemble(
    lines: list[str],
    options: RenderOptions,
    *,
    title: Optional[str] = None,
    now: Optional[datetime] = None,
) -> CardEnvelope:
    """
    Build the envelope for a list of rendered lines.

    Args:
        lines: Line Renderer output
        options: version, monospace and layout mode are used here
        title: resolved title (defaults to options.title or "PNS")
        now: clock override for the title timestamp

    Returns:
        CardEnvelope
    """
    heading = title or options.title or "PNS"
    fragments = [
        TextFragment(text=f"{heading} ({kst_timestamp(now)})", new_line=False, emphasis=True),
    ]

    if options.layout_mode == LayoutMode.SINGLE_BLOCK:
        fragments.append(TextFragment(text="\n".join(lines), monospace=options.use_monospace))
    else:
        for line in lines:
            fragments.append(TextFragment(text=line, monospace=options.use_monospace))

    return CardEnvelope(
        title=heading,
        fragments=tuple(fragments),
        version=options.schema_version,
        lines=tuple(lines),
    )
