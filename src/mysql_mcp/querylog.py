"""Per-call audit trail as daily JSONL files, one directory per database.

Every tool call that gets past name lookup writes exactly one line here,
keyed by its correlation id. Rejected calls are recorded with
``blocked=True`` and the fault code; executed calls carry either the
driver error or the duration and row count.
"""

from __future__ import annotations

import asyncio
import json
import logging
import re
from datetime import UTC, date, datetime, timedelta
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_RETENTION_DAYS = 30
_LOG_ROOT = Path.home() / ".mysql-mcp" / "logs"
_UNNAMED = "_default"

_enabled = True


def set_enabled(enabled: bool) -> None:
    """Turn query logging on or off for this process."""
    global _enabled
    _enabled = enabled


def _db_dir(db: str | None) -> Path:
    safe = re.sub(r"[^A-Za-z0-9_.-]", "_", db) if db else _UNNAMED
    return _LOG_ROOT / safe


def _file_for(db: str | None, day: date) -> Path:
    return _db_dir(db) / f"{day.isoformat()}.jsonl"


def log_query(
    *,
    correlation_id: str,
    tool: str,
    sql: str,
    category: str | None = None,
    db: str | None = None,
    tables: list[str] | None = None,
    blocked: bool = False,
    fault: str | None = None,
    error: str | None = None,
    duration_ms: float | None = None,
    row_count: int | None = None,
) -> None:
    """Append one entry for a tool call to today's file.

    A failed write is logged and dropped; it never fails the call itself.
    """
    if not _enabled:
        return

    now = datetime.now(UTC)
    entry: dict[str, Any] = {
        "ts": now.isoformat(),
        "correlation_id": correlation_id,
        "tool": tool,
        "db": db,
        "category": category,
        "sql": sql,
        "tables": tables or [],
    }
    if blocked:
        entry.update(blocked=True, fault=fault)
    elif error is not None:
        entry["error"] = error
    else:
        entry.update(duration_ms=duration_ms, row_count=row_count)

    path = _file_for(db, now.date())
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry, default=str) + "\n")
    except OSError as e:
        logger.warning("[%s] query log write to %s failed: %s", correlation_id, path, e)


async def record(**fields: Any) -> None:
    """Run :func:`log_query` in a worker thread."""
    await asyncio.to_thread(log_query, **fields)


def cleanup_old_logs(*, retention_days: int = DEFAULT_RETENTION_DAYS) -> int:
    """Remove day files older than ``retention_days`` across all databases.

    Returns the number of files removed. Files whose names are not dates
    are left alone.
    """
    if not _LOG_ROOT.exists():
        return 0

    cutoff = (datetime.now(UTC) - timedelta(days=retention_days)).date()
    removed = 0
    for path in _LOG_ROOT.glob("*/*.jsonl"):
        try:
            day = date.fromisoformat(path.stem)
        except ValueError:
            continue
        if day < cutoff:
            path.unlink()
            removed += 1
    return removed
