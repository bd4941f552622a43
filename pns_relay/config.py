"""
Environment configuration module
Loads relay settings from environment variables (.env supported).

The converter core (pns_relay.card) never imports this module; options are
passed to it as plain values.
"""

import os
from dotenv import load_dotenv

# Load .env file (for local development)
load_dotenv()


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def _bool_env(name: str) -> bool:
    return os.getenv(name, '').strip().lower() in ('1', 'true', 'yes', 'on')


# Delivery targets (checked per request, not at import)
TARGET_URL_QA = os.getenv('TARGET_URL_QA', '')
TARGET_URL_PROD = os.getenv('TARGET_URL_PROD', '')

# Relay log (JSON Lines, pruned after every request)
LOG_PATH = os.getenv('LOG_PATH', 'adaptive-log.jsonl')
LOG_RETENTION_DAYS = _int_env('LOG_RETENTION_DAYS', 7)

# Webhook delivery
WEBHOOK_TIMEOUT = _int_env('WEBHOOK_TIMEOUT', 10)
WEBHOOK_MAX_RETRIES = _int_env('WEBHOOK_MAX_RETRIES', 2)
WEBHOOK_RETRY_DELAY = _float_env('WEBHOOK_RETRY_DELAY', 0.5)

PORT = _int_env('PORT', 5001)

# Card options (raw strings; RenderOptions.from_flags falls back on bad values)
CARD_TITLE = os.getenv('CARD_TITLE', '')
CARD_VERSION = os.getenv('CARD_VERSION', '')
CARD_INDENT = os.getenv('CARD_INDENT')
CARD_TRUNCATE = os.getenv('CARD_TRUNCATE')
CARD_SINGLE = _bool_env('CARD_SINGLE')
CARD_NO_MONO = _bool_env('CARD_NO_MONO')
