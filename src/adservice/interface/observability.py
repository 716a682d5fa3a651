"""Observability: structured logs (trace_id, rpc, latency_ms), in-process metrics stub."""

from __future__ import annotations

import logging
import sys
import threading
from typing import Any

_LOGGER = logging.getLogger("adservice.rpc")

# Metrics stub: calls[rpc] = count, errors[rpc] = count
METRICS: dict[str, dict[str, int]] = {"calls": {}, "errors": {}}
_METRICS_LOCK = threading.Lock()

# Attributes every LogRecord carries; anything else came in through ``extra=``
_RESERVED = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class KeyValueFormatter(logging.Formatter):
    """Append ``extra=`` fields to the message as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {k: v for k, v in vars(record).items() if k not in _RESERVED}
        if not extras:
            return base
        return base + " " + " ".join(f"{k}={v!r}" for k, v in sorted(extras.items()))


def configure_logging(level: str = "INFO") -> None:
    """Install one stderr handler on the ``adservice`` logger tree."""
    root = logging.getLogger("adservice")
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
    # stdout belongs to the MCP stdio transport
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(KeyValueFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    root.addHandler(handler)
    root.propagate = False


def get_logger() -> logging.Logger:
    return _LOGGER


def log_call(
    rpc: str,
    trace_id: str | None,
    latency_ms: float,
    error: str | None = None,
    extra: dict[str, Any] | None = None,
) -> None:
    """Emit structured log and update metrics stub."""
    payload: dict[str, Any] = {
        "rpc": rpc,
        "trace_id": trace_id,
        "latency_ms": round(latency_ms, 2),
    }
    if error:
        payload["error"] = error
    if extra:
        payload.update(extra)
    if error:
        _LOGGER.warning("rpc_invocation", extra=payload)
    else:
        _LOGGER.info("rpc_invocation", extra=payload)
    with _METRICS_LOCK:
        METRICS["calls"][rpc] = METRICS["calls"].get(rpc, 0) + 1
        if error:
            METRICS["errors"][rpc] = METRICS["errors"].get(rpc, 0) + 1


def metrics_snapshot() -> dict[str, dict[str, int]]:
    """Return current metrics (for health output or tests)."""
    with _METRICS_LOCK:
        return {k: dict(v) for k, v in METRICS.items()}


def reset_metrics() -> None:
    with _METRICS_LOCK:
        for bucket in METRICS.values():
            bucket.clear()
