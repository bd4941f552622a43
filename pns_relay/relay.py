# -*- coding: utf-8 -*-
"""
PNS Relay

Per-message flow: convert → deliver → log.

- conversion runs exactly once per inbound message
- retries belong to the webhook sender, never to conversion
- every message is logged, whether it succeeded or not
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from pns_relay import config
from pns_relay.card import RenderOptions, convert
from pns_relay.services.log_store import append_log, current_time_ms, prune_old_logs
from pns_relay.services.webhook_sender import DeliveryResult, send_card

logger = logging.getLogger(__name__)


class TargetEnvironment(Enum):
    """Delivery target"""

    QA = "qa"
    PROD = "prod"

    def target_url(self) -> str:
        if self == TargetEnvironment.PROD:
            return config.TARGET_URL_PROD
        return config.TARGET_URL_QA


@dataclass
class RelayOutcome:
    """Result of relaying one message"""

    ok: bool
    send_result: Optional[DeliveryResult] = None
    error: Optional[str] = None
    adaptive: Optional[Dict[str, Any]] = None


def default_render_options() -> RenderOptions:
    """Relay-wide card options from CARD_* environment variables"""
    return RenderOptions.from_flags(
        indent=config.CARD_INDENT,
        truncate=config.CARD_TRUNCATE,
        title=config.CARD_TITLE,
        version=config.CARD_VERSION,
        single=config.CARD_SINGLE,
        no_mono=config.CARD_NO_MONO,
    )


def relay_message(
    message: Any,
    environment: TargetEnvironment,
    *,
    options: Optional[RenderOptions] = None,
    log_path: Optional[str] = None,
) -> RelayOutcome:
    """
    Convert one inbound message, deliver it and log the exchange.

    Args:
        message: parsed JSON body (dict) or raw body text
        environment: QA or PROD target
        options: card options (defaults to default_render_options())
        log_path: override for LOG_PATH

    Returns:
        RelayOutcome: never raises for data or network errors
    """
    received_at = current_time_ms()
    adaptive = None
    send_result = None
    error = None

    try:
        envelope = convert(message, options or default_render_options())
        adaptive = envelope.to_dict()

        url = environment.target_url()
        logger.info(f"Current target URL ({environment.value}): {url}")
        if not url:
            error = f"Target URL for {environment.value} is not configured"
        else:
            send_result = send_card(url, adaptive)
            if not send_result.ok:
                error = send_result.error
    except Exception as e:
        error = str(e) or e.__class__.__name__

    if error:
        logger.error(f"Relay to {environment.value} failed: {error}")

    try:
        append_log(
            {
                "timestamp": received_at,
                "environment": environment.value,
                "received": message,
                "adaptive": adaptive,
                "sendResult": send_result.to_log_dict() if send_result else None,
                "error": error,
            },
            log_path,
        )
        prune_old_logs(log_path)
    except (OSError, TypeError, ValueError) as e:
        # Log file problems must not hide the delivery outcome
        logger.warning(f"Relay log write failed (non-critical): {e}")

    return RelayOutcome(ok=error is None, send_result=send_result, error=error, adaptive=adaptive)
