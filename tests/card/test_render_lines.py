# -*- coding: utf-8 -*-
"""
Unit tests for the Line Renderer.
"""

import pytest

from pns_relay.card.ordering import order
from pns_relay.card.render_lines import (
    ARRAY_PLACEHOLDER,
    NBSP,
    OBJECT_PLACEHOLDER,
    format_value,
    render,
    truncate,
)
from pns_relay.card.types import RenderOptions

I5 = NBSP * 5
I7 = NBSP * 7
I9 = NBSP * 9


def _render(document, **option_kwargs):
    return render(order(document), RenderOptions(**option_kwargs))


class TestFormatValue:
    """Tests for format_value()"""

    def test_string_is_quoted_verbatim(self):
        assert format_value('say "hi"') == '"say "hi""'

    def test_integer_literal(self):
        assert format_value(100) == "100"

    def test_float_literal(self):
        assert format_value(1.5) == "1.5"

    def test_booleans(self):
        assert format_value(True) == "true"
        assert format_value(False) == "false"

    def test_none(self):
        assert format_value(None) == "null"

    def test_placeholders(self):
        assert format_value([1, 2]) == ARRAY_PLACEHOLDER
        assert format_value({"a": 1}) == OBJECT_PLACEHOLDER
        assert ARRAY_PLACEHOLDER != OBJECT_PLACEHOLDER

    def test_truncation_only_applies_to_strings(self):
        assert format_value(1234567890, truncate_length=3) == "1234567890"
        assert format_value("abcdef", truncate_length=3) == '"abc..."'


class TestTruncate:
    """Tests for truncate()"""

    def test_disabled_when_zero(self):
        assert truncate("x" * 100, 0) == "x" * 100

    def test_exact_length_not_truncated(self):
        assert truncate("abcde", 5) == "abcde"

    @pytest.mark.parametrize("limit", [3, 10, 50])
    def test_truncating_twice_gives_same_result(self, limit):
        text = "this text is definitely longer than ten"
        once = truncate(text, limit)

        assert truncate(once, limit) == once
        assert truncate(once, limit + 3) == once
        assert truncate(once, limit + 10) == once

    def test_retruncating_just_above_limit_cuts_into_ellipsis(self):
        """Limits of L+1 and L+2 see the marker as content and append another one"""
        once = truncate("this text is definitely longer than ten", 10)

        assert once == "this text ..."
        assert truncate(once, 10) == "this text ..."
        assert truncate(once, 11) == "this text ...."
        assert truncate(once, 12) == "this text ....."
        assert truncate(once, 13) == "this text ..."


class TestRenderGeneric:
    """Policy B rendering"""

    def test_two_scalars(self):
        lines = _render({"msgVersion": "1.0", "clientId": "abc"})

        assert lines == [
            "{",
            f'{I5}"msgVersion": "1.0",',
            f'{I5}"clientId": "abc"',
            "}",
        ]

    def test_empty_document_renders_braces_only(self):
        assert _render({}) == ["{", "}"]

    def test_truncated_value(self):
        lines = _render({"note": "this text is definitely longer than ten"}, truncate_length=10)

        assert lines[1] == f'{I5}"note": "this text ..."'

    def test_payment_type_list_block(self):
        lines = _render({"paymentTypeList": [{"paymentMethod": "CARD", "amount": 100}]})

        assert lines == [
            "{",
            f'{I5}"paymentTypeList": [',
            f'{I9}{{ "paymentMethod": "CARD", "amount": 100 }}',
            f"{I5}],",
            "}",
        ]

    def test_payment_type_list_item_commas(self):
        lines = _render({
            "paymentTypeList": [
                {"paymentMethod": "CARD", "amount": 100},
                {"paymentMethod": "POINT", "amount": 50, "extra": "ignored"},
            ],
            "billingKey": "bk",
        })

        assert lines[2].endswith("},")
        assert lines[3] == f'{I9}{{ "paymentMethod": "POINT", "amount": 50 }}'
        assert lines[4] == f"{I5}],"
        assert lines[5] == f'{I5}"billingKey": "bk"'

    def test_payment_item_missing_fields_render_null(self):
        lines = _render({"paymentTypeList": [{"paymentMethod": "CARD"}, "oops"]})

        assert lines[2] == f'{I9}{{ "paymentMethod": "CARD", "amount": null }},'
        assert lines[3] == f'{I9}{{ "paymentMethod": null, "amount": null }}'

    def test_other_nested_values_use_placeholders(self):
        lines = _render({"meta": {"a": 1}, "tags": ["x"]})

        assert lines == [
            "{",
            f'{I5}"meta": {OBJECT_PLACEHOLDER},',
            f'{I5}"tags": {ARRAY_PLACEHOLDER}',
            "}",
        ]

    def test_custom_indent_width(self):
        lines = _render({"msgVersion": "1.0"}, indent_width=2)

        assert lines[1] == f'{NBSP * 2}"msgVersion": "1.0"'

    def test_zero_indent_width(self):
        lines = _render({"msgVersion": "1.0"}, indent_width=0)

        assert lines[1] == '"msgVersion": "1.0"'


class TestRenderSubscription:
    """Policy A rendering"""

    def test_full_block(self, subscription_document):
        lines = _render(subscription_document)

        assert lines == [
            "{",
            f'{I5}"msgVersion": "3.1.0",',
            f'{I5}"clientId": "c1",',
            f'{I5}"eventTimeMillis": 1700000000000,',
            f'{I5}"subscriptionNotification": {{',
            f'{I9}"version": "1.0",',
            f'{I9}"notificationType": 4,',
            f'{I9}"purchaseToken": "tok",',
            f'{I7}"subscriptionId": "sub1"',
            f"{I5}}},",
            f'{I5}"environment": "QA",',
            f'{I5}"marketCode": "MKT"',
            "}",
        ]

    def test_unlisted_keys_absent(self, subscription_document):
        lines = _render(subscription_document)

        assert not any('"extra"' in line for line in lines)

    def test_nested_values_inside_subscription_are_placeholders(self):
        lines = _render({"subscriptionNotification": {"detail": {"a": 1}, "items": [1]}})

        assert lines[2] == f'{I7}"detail": {OBJECT_PLACEHOLDER},'
        assert lines[3] == f'{I7}"items": {ARRAY_PLACEHOLDER}'

    def test_sub_values_are_truncated(self):
        lines = _render({"subscriptionNotification": {"purchaseToken": "abcdefghij"}}, truncate_length=4)

        assert lines[2] == f'{I9}"purchaseToken": "abcd..."'

    def test_payment_type_list_not_expanded_under_subscription_policy(self):
        """paymentTypeList is not in the subscription order, so it is dropped"""
        lines = _render({"subscriptionNotification": {}, "paymentTypeList": [{"amount": 1}]})

        assert lines == ["{", f'{I5}"subscriptionNotification": {{', f"{I5}}},", "}"]
