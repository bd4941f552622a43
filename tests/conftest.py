from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from pns_relay.card import RenderOptions


def _top_level_tests_group(path: Path) -> str | None:
    parts = path.parts
    try:
        tests_index = parts.index("tests")
    except ValueError:
        return None
    if tests_index + 1 >= len(parts):
        return None
    return parts[tests_index + 1]


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    for item in items:
        group = _top_level_tests_group(Path(str(item.fspath)))
        if group == "unit":
            item.add_marker(pytest.mark.unit)
        elif group == "integration":
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def frozen_now() -> datetime:
    """2026-01-01 15:30:00 UTC == 2026-01-02 00:30:00 KST"""
    return datetime(2026, 1, 1, 15, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def default_options() -> RenderOptions:
    return RenderOptions()


@pytest.fixture
def subscription_document() -> dict:
    return {
        "msgVersion": "3.1.0",
        "clientId": "c1",
        "eventTimeMillis": 1700000000000,
        "subscriptionNotification": {
            "version": "1.0",
            "notificationType": 4,
            "purchaseToken": "tok",
            "subscriptionId": "sub1",
        },
        "environment": "QA",
        "marketCode": "MKT",
        "extra": "x",
    }
