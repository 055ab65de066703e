"""
Observability Metrics Snapshot
------------------------------
In-process counters and a submit latency sample, consumed by /admin/metrics.
Everything lives in memory and resets with the process, like the forms themselves.
"""
from __future__ import annotations
import time
from collections import Counter
from typing import List, Tuple

# Counter keys
K_EVENTS = "events"                  # per event kind: input/blur/focus/submit/reset
K_SUBMITS = "submits"                # per outcome: accepted/rejected/in_progress
K_FORMS_CREATED = "forms_created"
K_FORMS_EVICTED = "forms_evicted"
K_FORMS_CLOSED = "forms_closed"
K_CASCADES = "cascades"

_MAX_SAMPLES = 500  # cap to bound percentile computation cost

_counters: Counter = Counter()
_submit_latencies_ms: List[int] = []
_started_at = int(time.time())


def _percentile(data: List[float], p: float) -> float:
    """Deterministic percentile (nearest-rank on sorted data)."""
    if not data:
        return 0.0
    d = sorted(data)
    k = max(1, int(round(p * len(d))))
    return float(d[k - 1])


def _p50_p95(samples: List[float]) -> Tuple[float, float]:
    if not samples:
        return 0.0, 0.0
    return _percentile(samples, 0.50), _percentile(samples, 0.95)


def increment_event(kind: str) -> None:
    _counters[f"{K_EVENTS}:{kind}"] += 1


def increment_cascade() -> None:
    _counters[K_CASCADES] += 1


def increment_submit(outcome: str) -> None:
    _counters[f"{K_SUBMITS}:{outcome}"] += 1


def increment_forms_created() -> None:
    _counters[K_FORMS_CREATED] += 1


def increment_forms_evicted() -> None:
    _counters[K_FORMS_EVICTED] += 1


def increment_forms_closed() -> None:
    _counters[K_FORMS_CLOSED] += 1


def record_submit_latency(ms: int) -> None:
    try:
        ms = int(ms)
    except (TypeError, ValueError):
        return
    _submit_latencies_ms.insert(0, ms)
    del _submit_latencies_ms[_MAX_SAMPLES:]


def _grouped(prefix: str) -> dict:
    head = f"{prefix}:"
    return {k[len(head):]: v for k, v in _counters.items() if k.startswith(head)}


def get_metrics_snapshot() -> dict:
    p50, p95 = _p50_p95([float(x) for x in _submit_latencies_ms])
    return {
        "events": _grouped(K_EVENTS),
        "submits": _grouped(K_SUBMITS),
        "cascades": int(_counters[K_CASCADES]),
        "forms_created": int(_counters[K_FORMS_CREATED]),
        "forms_evicted": int(_counters[K_FORMS_EVICTED]),
        "forms_closed": int(_counters[K_FORMS_CLOSED]),
        "p50_submit_latency_ms": round(p50, 3),
        "p95_submit_latency_ms": round(p95, 3),
        "uptime_seconds": int(time.time()) - _started_at,
        "snapshot_at": int(time.time()),
    }


def reset_metrics() -> None:
    _counters.clear()
    _submit_latencies_ms.clear()
