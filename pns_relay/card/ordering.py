# -*- coding: utf-8 -*-
"""
Field Orderer

Selects and orders top-level keys of an origin document.

- Policy A (subscription): only keys from SUBSCRIPTION_ORDER, in that order.
- Policy B (generic): keys from GENERIC_ORDER first, then every other key in
  the document's own order.
"""

import logging
from typing import Any, Mapping

from pns_relay.card.types import OrderedDocument, OrderingPolicy

logger = logging.getLogger(__name__)

SUBSCRIPTION_KEY = "subscriptionNotification"
PAYMENT_TYPE_LIST_KEY = "paymentTypeList"

SUBSCRIPTION_ORDER = (
    "msgVersion",
    "clientId",
    "eventTimeMillis",
    SUBSCRIPTION_KEY,
    "environment",
    "marketCode",
)

GENERIC_ORDER = (
    "msgVersion", "clientId", "productId", "messageType", "purchaseId",
    "developerPayload", "purchaseTimeMillis", "purchaseState",
    "price", "priceCurrencyCode", "productName",
    PAYMENT_TYPE_LIST_KEY, "billingKey", "isTestMdn",
    "purchaseToken", "environment", "marketCode", "signature",
)


def classify(document: Mapping[str, Any]) -> OrderingPolicy:
    """Subscription documents carry a nested subscriptionNotification object"""
    if isinstance(document.get(SUBSCRIPTION_KEY), Mapping):
        return OrderingPolicy.SUBSCRIPTION
    return OrderingPolicy.GENERIC


def order(document: Mapping[str, Any]) -> OrderedDocument:
    """
    Order the document's top-level entries.

    Args:
        document: origin document (not modified)

    Returns:
        OrderedDocument: resolved policy and ordered (key, value) pairs
    """
    policy = classify(document)
    logger.debug(f"Ordering {len(document)} keys with {policy.value} policy")

    if policy == OrderingPolicy.SUBSCRIPTION:
        keys = [key for key in SUBSCRIPTION_ORDER if key in document]
    else:
        keys = [key for key in GENERIC_ORDER if key in document]
        keys += [key for key in document if key not in GENERIC_ORDER]

    return OrderedDocument(
        policy=policy,
        entries=tuple((key, document[key]) for key in keys),
    )
