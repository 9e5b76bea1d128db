import threading
from typing import Dict, List, Optional


class SampleStore:
    """
    Label keyed collection of elapsed times, in seconds.

    Labels are kept in first-use order, either when a stopwatch is handed out
    (``reserve``) or when the first sample arrives (``record``). All access goes
    through a single lock; reads hand out copies so callers never observe a
    list while it is being appended to.
    """

    def __init__(self) -> None:
        # re-entrant, a stopwatch collected inside a critical section commits here
        # re-entrant: a stopwatch collected while the lock is held commits through record()
        self._lock = threading.RLock()
        # dicts preserve insertion order, which is the first-use order
        self._timing_stats: Dict[str, List[float]] = {}
        self._parents: Dict[str, Optional[str]] = {}
        self._num_samples = 0

    def _reserve(self, label: str, parent: Optional[str]) -> None:
        if label in self._parents:
            return

        if parent is not None and parent not in self._parents:
            self._reserve(parent, None)

        if parent == label:
            parent = None

        self._parents[label] = parent
        self._timing_stats[label] = []

    def reserve(self, label: str, parent: Optional[str] = None) -> None:
        with self._lock:
            self._reserve(label, parent)

    def record(self, label: str, duration: float) -> None:
        with self._lock:
            if label not in self._parents:
                self._reserve(label, None)

            self._timing_stats[label].append(duration)
            self._num_samples += 1

    def snapshot(self, label: str) -> List[float]:
        with self._lock:
            return list(self._timing_stats.get(label, ()))

    def labels(self) -> List[str]:
        with self._lock:
            return list(self._parents)

    def get_parent(self, label: str) -> Optional[str]:
        with self._lock:
            return self._parents.get(label)

    def get_children(self, label: str) -> List[str]:
        with self._lock:
            return [
                child for child, parent in self._parents.items() if parent == label
            ]

    def get_parents(self) -> Dict[str, Optional[str]]:
        with self._lock:
            return dict(self._parents)

    def __contains__(self, label: str) -> bool:
        with self._lock:
            return label in self._parents

    def __len__(self) -> int:
        with self._lock:
            return self._num_samples
