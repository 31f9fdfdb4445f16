"""
Session metrics.

Track fetch reliability and latency, and how often submits were
served straight from the result store.
"""

import time
from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "FetchMetrics",
    "get_fetch_metrics",
    "format_metrics_report",
]

# ══════════════════════════════════════════════════════════════════════════════
# Metrics Classes
# ══════════════════════════════════════════════════════════════════════════════


@dataclass
class FetchMetrics:
    """Track fetch and store statistics for a session."""

    start_time: float = field(default_factory=time.time)
    total_fetches: int = 0
    successful_fetches: int = 0
    failed_fetches: int = 0
    total_latency_ms: float = 0.0
    hits_received: int = 0
    cache_hits: int = 0
    dismissed: int = 0
    error_types: dict[str, int] = field(default_factory=dict)

    @property
    def success_rate(self) -> float:
        if self.total_fetches == 0:
            return 0.0
        return (self.successful_fetches / self.total_fetches) * 100

    @property
    def avg_latency_ms(self) -> float:
        if self.successful_fetches == 0:
            return 0.0
        return self.total_latency_ms / self.successful_fetches

    @property
    def uptime_seconds(self) -> float:
        return time.time() - self.start_time

    def record_success(self, latency_ms: float, hit_count: int = 0):
        self.total_fetches += 1
        self.successful_fetches += 1
        self.total_latency_ms += latency_ms
        self.hits_received += hit_count

    def record_failure(self, error_type: str):
        self.total_fetches += 1
        self.failed_fetches += 1
        self.error_types[error_type] = self.error_types.get(error_type, 0) + 1

    def record_cache_hit(self):
        self.cache_hits += 1

    def record_dismiss(self):
        self.dismissed += 1

    def summary(self) -> dict[str, Any]:
        return {
            "uptime_seconds": round(self.uptime_seconds, 1),
            "total_fetches": self.total_fetches,
            "success_rate": round(self.success_rate, 1),
            "avg_latency_ms": round(self.avg_latency_ms, 0),
            "hits_received": self.hits_received,
            "cache_hits": self.cache_hits,
            "dismissed": self.dismissed,
        }


# ══════════════════════════════════════════════════════════════════════════════
# Global Instance
# ══════════════════════════════════════════════════════════════════════════════

_fetch_metrics = FetchMetrics()


def get_fetch_metrics() -> FetchMetrics:
    return _fetch_metrics


def format_metrics_report(metrics: FetchMetrics | None = None) -> str:
    """Generate human-readable metrics report."""
    m = metrics or _fetch_metrics

    lines = [
        "# Session Metrics",
        "",
        "## Fetches",
        f"- Uptime: {m.uptime_seconds:.0f}s",
        f"- Total Fetches: {m.total_fetches}",
        f"- Success Rate: {m.success_rate:.1f}%",
        f"- Failed: {m.failed_fetches}",
        f"- Avg Latency: {m.avg_latency_ms:.0f}ms",
        f"- Hits Received: {m.hits_received}",
        "",
        "## Store",
        f"- Submits Served From Store: {m.cache_hits}",
        f"- Rows Dismissed: {m.dismissed}",
    ]

    if m.error_types:
        lines.append("")
        lines.append("## Errors")
        for err, count in sorted(m.error_types.items(), key=lambda x: -x[1]):
            lines.append(f"- {err}: {count}")

    return "\n".join(lines)
