from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Sequence

import numpy as np

from benchman.constants import P95, P99


def percentile(sorted_durations: Sequence[float], p: int) -> float:
    """
    Nearest-rank percentile of an ascending sequence.

    Selects the element at index ``ceil(p * N / 100) - 1``, clamped to
    ``[0, N - 1]``. The index is computed with integer arithmetic so that the
    result does not depend on floating point rounding, e.g. for N = 10 both
    p95 and p99 select index 9.
    """
    if not 0 < p <= 100:
        raise ValueError(f"Percentile must be in (0, 100], got {p}")

    n = len(sorted_durations)
    if n == 0:
        raise ValueError("Cannot compute a percentile of an empty sequence")

    index = -(-p * n // 100) - 1
    index = min(max(index, 0), n - 1)
    return float(sorted_durations[index])


@dataclass(frozen=True)
class StatisticsSummary:
    count: int
    mean: Optional[float] = None
    median: Optional[float] = None
    p95: Optional[float] = None
    p99: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None
    std: Optional[float] = None

    @classmethod
    def empty(cls) -> "StatisticsSummary":
        return cls(count=0)

    @property
    def has_data(self) -> bool:
        return self.count > 0

    def get(self, metric: str) -> Optional[float]:
        return getattr(self, metric)

    def scaled(self, factor: float) -> "StatisticsSummary":
        # count is not a duration
        if not self.has_data:
            return self

        return StatisticsSummary(
            count=self.count,
            mean=self.mean * factor,
            median=self.median * factor,
            p95=self.p95 * factor,
            p99=self.p99 * factor,
            min=self.min * factor,
            max=self.max * factor,
            std=self.std * factor,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def summarize(durations: Sequence[float]) -> StatisticsSummary:
    if len(durations) == 0:
        return StatisticsSummary.empty()

    # np.sort returns a copy, the caller's snapshot stays untouched
    sorted_durations = np.sort(np.asarray(durations, dtype=np.float64))

    return StatisticsSummary(
        count=len(sorted_durations),
        mean=float(np.mean(sorted_durations)),
        median=float(np.median(sorted_durations)),
        p95=percentile(sorted_durations, P95),
        p99=percentile(sorted_durations, P99),
        min=float(sorted_durations[0]),
        max=float(sorted_durations[-1]),
        std=float(np.std(sorted_durations)),
    )
