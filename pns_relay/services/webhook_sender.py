# -*- coding: utf-8 -*-
"""
Webhook Sender Module

This module posts converted Adaptive Card messages to the target webhook.
Retries apply to delivery only; conversion is never repeated.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from pns_relay.config import WEBHOOK_MAX_RETRIES, WEBHOOK_RETRY_DELAY, WEBHOOK_TIMEOUT

logger = logging.getLogger(__name__)


@dataclass
class DeliveryResult:
    """Outcome of one webhook delivery (after retries)"""

    ok: bool
    status: Optional[int] = None
    status_text: str = ""
    error: Optional[str] = None
    attempts: int = 0

    def to_log_dict(self) -> Optional[Dict[str, Any]]:
        """`sendResult` shape used in the relay log and HTTP responses"""
        if self.status is None:
            return None
        return {"status": self.status, "statusText": self.status_text}


def send_card(
    url: str,
    payload: Dict[str, Any],
    *,
    timeout: Optional[float] = None,
    max_retries: Optional[int] = None,
    retry_delay: Optional[float] = None,
) -> DeliveryResult:
    """
    Send a card message to the webhook URL.

    Args:
        url: target webhook URL
        payload: envelope dict (CardEnvelope.to_dict())
        timeout: per-request timeout in seconds
        max_retries: extra attempts after the first one
        retry_delay: seconds to wait between attempts

    Returns:
        DeliveryResult

    Error handling:
        - HTTP 2xx: success
        - HTTP 4xx: failure, not retried
        - HTTP 5xx, timeout, connection error: retried, then failure
    """
    if not url:
        logger.warning("Target URL not configured, skipping webhook send")
        return DeliveryResult(ok=False, error="Target URL not configured")

    timeout = WEBHOOK_TIMEOUT if timeout is None else timeout
    max_retries = WEBHOOK_MAX_RETRIES if max_retries is None else max(0, max_retries)
    retry_delay = WEBHOOK_RETRY_DELAY if retry_delay is None else retry_delay

    result = DeliveryResult(ok=False)
    for attempt in range(1, max_retries + 2):
        result = _post_once(url, payload, timeout)
        result.attempts = attempt

        if result.ok:
            logger.info(f"Webhook sent successfully (status {result.status}, attempt {attempt})")
            return result

        retryable = result.status is None or result.status >= 500
        if not retryable or attempt > max_retries:
            break

        logger.warning(f"Webhook attempt {attempt} failed ({result.error}), retrying in {retry_delay}s")
        time.sleep(retry_delay)

    logger.error(f"Webhook failed after {result.attempts} attempt(s): {result.error}")
    return result


def _post_once(url: str, payload: Dict[str, Any], timeout: float) -> DeliveryResult:
    try:
        response = requests.post(
            url,
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
    except requests.Timeout:
        return DeliveryResult(ok=False, error=f"Webhook request timed out after {timeout}s")
    except requests.RequestException as e:
        return DeliveryResult(ok=False, error=f"Webhook request failed: {e}")

    status_text = response.reason or ""
    if 200 <= response.status_code < 300:
        return DeliveryResult(ok=True, status=response.status_code, status_text=status_text)

    return DeliveryResult(
        ok=False,
        status=response.status_code,
        status_text=status_text,
        error=f"Request failed with status code {response.status_code}",
    )
