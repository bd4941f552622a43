# -*- coding: utf-8 -*-
"""
Relay Log Store

Append-only JSON Lines log of relayed messages. Entries older than the
retention window are pruned after each append.
"""

import json
import logging
import threading
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

from pns_relay.config import LOG_PATH, LOG_RETENTION_DAYS

logger = logging.getLogger(__name__)

_DAY_MS = 24 * 60 * 60 * 1000

# Serialises writers; prune rewrites the whole file
_LOG_LOCK = threading.Lock()


def _resolve_path(log_path: Optional[str]) -> Path:
    return Path(log_path or LOG_PATH)


def current_time_ms() -> int:
    """Current epoch time in milliseconds (log entry timestamp unit)"""
    return int(time.time() * 1000)


def append_log(entry: Dict[str, Any], log_path: Optional[str] = None) -> None:
    """
    Append one entry as a JSON line.

    Args:
        entry: log record (must be JSON serialisable)
        log_path: override for LOG_PATH
    """
    path = _resolve_path(log_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    line = json.dumps(entry, ensure_ascii=False) + "\n"
    with _LOG_LOCK:
        with open(path, "a", encoding="utf-8") as f:
            f.write(line)


def _parse_line(line: str) -> Optional[Dict[str, Any]]:
    try:
        record = json.loads(line)
    except ValueError:
        return None
    return record if isinstance(record, dict) else None


def prune_old_logs(
    log_path: Optional[str] = None,
    *,
    now_ms: Optional[int] = None,
    retention_days: Optional[int] = None,
) -> int:
    """
    Drop entries older than the retention window (and unparseable lines).

    Returns:
        int: number of removed lines
    """
    path = _resolve_path(log_path)
    days = LOG_RETENTION_DAYS if retention_days is None else retention_days
    current = now_ms if now_ms is not None else current_time_ms()
    cutoff = current - days * _DAY_MS

    with _LOG_LOCK:
        if not path.exists():
            return 0

        lines = [line for line in path.read_text(encoding="utf-8").split("\n") if line]
        kept = []
        for line in lines:
            record = _parse_line(line)
            timestamp = record.get("timestamp") if record else None
            if isinstance(timestamp, (int, float)) and not isinstance(timestamp, bool) and timestamp >= cutoff:
                kept.append(line)

        path.write_text("\n".join(kept) + ("\n" if kept else ""), encoding="utf-8")

    removed = len(lines) - len(kept)
    if removed:
        logger.info(f"Pruned {removed} log entries older than {days} days")
    return removed


def read_logs(log_path: Optional[str] = None) -> List[Dict[str, Any]]:
    """Return all parseable entries, oldest first ([] if no log yet)"""
    entries = []
    for line in read_log_text(log_path).split("\n"):
        if not line:
            continue
        record = _parse_line(line)
        if record is not None:
            entries.append(record)
    return entries


def read_log_text(log_path: Optional[str] = None) -> str:
    """Return the raw log file contents ("" if no log yet)"""
    path = _resolve_path(log_path)
    with _LOG_LOCK:
        if not path.exists():
            return ""
        return path.read_text(encoding="utf-8")
