from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Metrics:
    counters: dict[str, float] = field(default_factory=dict)
    gauges: dict[str, float] = field(default_factory=dict)

    def inc(self, path: str, n: float = 1.0) -> float:
        self.counters[path] = self.counters.get(path, 0.0) + float(n)
        return self.counters[path]

    def get(self, path: str, default: float = 0.0) -> float:
        return self.counters.get(path, default)

    def set_gauge(self, path: str, value: float) -> float:
        self.gauges[path] = float(value)
        return self.gauges[path]


def record_command(metrics: Metrics, command: str, *, ok: bool) -> float:
    outcome = "ok" if ok else "rejected"
    return metrics.inc(f"commands.{command}.{outcome}")


__all__ = ["Metrics", "record_command"]
