# -*- coding: utf-8 -*-
"""
Line Renderer

Turns an OrderedDocument into JSON-looking text lines:
- "{" first, "}" last
- one `"key": value` line per entry
- subscriptionNotification (Policy A) and paymentTypeList (Policy B) are
  expanded into sub-blocks; any other nested value becomes a placeholder

Indentation uses NBSP so renderers that collapse spaces keep the alignment.
"""

import json
from typing import Any, Mapping

from pns_relay.card.ordering import PAYMENT_TYPE_LIST_KEY, SUBSCRIPTION_KEY
from pns_relay.card.types import OrderedDocument, OrderingPolicy, RenderOptions

NBSP = "\u00a0"
ELLIPSIS = "..."
ARRAY_PLACEHOLDER = "[Array]"
OBJECT_PLACEHOLDER = "{Object}"

# Sub-keys of subscriptionNotification that get two extra NBSPs
EMPHASISED_SUBSCRIPTION_KEYS = ("version", "productId", "notificationType", "purchaseToken")


def indent(width: int) -> str:
    return NBSP * width


def truncate(text: str, limit: int) -> str:
    """Cut text to `limit` characters plus "..."; limit 0 disables"""
    if limit > 0 and len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text


def format_value(value: Any, truncate_length: int = 0) -> str:
    """
    Format one value the way it would look in JSON.

    Strings keep their quotes (no escaping), numbers and booleans keep their
    literal text, arrays and objects collapse to a placeholder token.
    """
    if isinstance(value, str):
        return f'"{truncate(value, truncate_length)}"'
    # bool first: bool is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return json.dumps(value)
    if isinstance(value, (list, tuple)):
        return ARRAY_PLACEHOLDER
    if isinstance(value, Mapping):
        return OBJECT_PLACEHOLDER
    return "null"


def _render_subscription_block(key: str, value: Mapping, options: RenderOptions) -> list[str]:
    base = indent(options.indent_width)
    nested = indent(options.indent_width + 2)
    lines = [f'{base}"{key}": {{']

    sub_keys = list(value)
    for idx, sub_key in enumerate(sub_keys):
        formatted = format_value(value[sub_key], options.truncate_length)
        comma = "," if idx < len(sub_keys) - 1 else ""
        prefix = nested + indent(2) if sub_key in EMPHASISED_SUBSCRIPTION_KEYS else nested
        lines.append(f'{prefix}"{sub_key}": {formatted}{comma}')

    lines.append(f"{base}}},")
    return lines


def _render_payment_type_list(key: str, items: list, options: RenderOptions) -> list[str]:
    base = indent(options.indent_width)
    item_indent = indent(options.indent_width + 4)
    lines = [f'{base}"{key}": [']

    for idx, item in enumerate(items):
        if not isinstance(item, Mapping):
            item = {}
        method = format_value(item.get("paymentMethod"), options.truncate_length)
        amount = format_value(item.get("amount"), options.truncate_length)
        comma = "," if idx < len(items) - 1 else ""
        lines.append(f'{item_indent}{{ "paymentMethod": {method}, "amount": {amount} }}{comma}')

    lines.append(f"{base}],")
    return lines


def render(ordered: OrderedDocument, options: RenderOptions) -> list[str]:
    """
    Render ordered entries into text lines.

    Args:
        ordered: Field Orderer output
        options: indent width and truncate length are used here

    Returns:
        list[str]: lines, starting with "{" and ending with "}"
    """
    base = indent(options.indent_width)
    lines = ["{"]
    last_index = len(ordered.entries) - 1

    for idx, (key, value) in enumerate(ordered.entries):
        if (
            ordered.policy == OrderingPolicy.SUBSCRIPTION
            and key == SUBSCRIPTION_KEY
            and isinstance(value, Mapping)
        ):
            lines.extend(_render_subscription_block(key, value, options))
            continue

        if (
            ordered.policy == OrderingPolicy.GENERIC
            and key == PAYMENT_TYPE_LIST_KEY
            and isinstance(value, (list, tuple))
        ):
            lines.extend(_render_payment_type_list(key, value, options))
            continue

        comma = "," if idx < last_index else ""
        lines.append(f'{base}"{key}": {format_value(value, options.truncate_length)}{comma}')

    lines.append("}")
    return lines
