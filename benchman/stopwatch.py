import threading
from time import perf_counter
from typing import Callable, Optional

from benchman.logger import init_logger
from benchman.store import SampleStore

logger = init_logger(__name__)


class Stopwatch:
    """
    Times one section and commits exactly one sample to the store.

    The sample is committed by whichever comes first: ``stop()``, leaving a
    ``with`` block, or the object being garbage collected. Any later attempt
    is a no-op.
    """

    def __init__(
        self,
        label: str,
        store: SampleStore,
        parent: Optional[str] = None,
        clock: Callable[[], float] = perf_counter,
        on_commit: Optional[Callable[["Stopwatch"], None]] = None,
    ) -> None:
        self._label = label
        self._parent = parent
        self._store = store
        self._clock = clock
        self._on_commit = on_commit

        self._lock = threading.Lock()
        self._committed = False
        self._elapsed = None
        self._start_time = self._clock()

    @property
    def label(self) -> str:
        return self._label

    @property
    def parent(self) -> Optional[str]:
        return self._parent

    @property
    def is_committed(self) -> bool:
        return self._committed

    @property
    def elapsed(self) -> float:
        with self._lock:
            if self._committed:
                return self._elapsed
        return self._clock() - self._start_time

    def stop(self) -> None:
        with self._lock:
            if self._committed:
                logger.debug(f"Stopwatch {self._label} already committed, ignoring")
                return

            # _elapsed is always set before _committed
            self._elapsed = self._clock() - self._start_time
            self._store.record(self._label, self._elapsed)
            self._committed = True

        if self._on_commit is not None:
            self._on_commit(self)

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.stop()

    def __del__(self):
        # partially constructed instances have nothing to commit
        if hasattr(self, "_start_time"):
            self.stop()

    def __repr__(self) -> str:
        state = "committed" if self._committed else "armed"
        return f"Stopwatch(label={self._label!r}, {state})"
