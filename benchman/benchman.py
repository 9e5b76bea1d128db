import itertools
import threading
from typing import Any, Callable, List, Optional, Sequence, TextIO, Tuple

from benchman.config import BenchManConfig
from benchman.logger import init_logger
from benchman.report import Report, ReportBuilder, ReportExporter, ReportRenderer
from benchman.stats import StatisticsSummary, summarize
from benchman.stopwatch import Stopwatch
from benchman.store import SampleStore
from benchman.types import ReportOrderType

logger = init_logger(__name__)


class BenchMan:
    """
    Hands out stopwatches that share one sample store and reports on it.

    Usage::

        bm = BenchMan("bm_tag")
        with bm.get_stopwatch("sw_tag"):
            total = sum(range(10))
        print(bm)
    """

    def __init__(
        self,
        tag: Optional[str] = None,
        config: Optional[BenchManConfig] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self._config = config if config is not None else BenchManConfig()
        self._tag = tag if tag is not None else self._config.tag
        self._clock = clock

        self._store = SampleStore()
        self._report_builder = ReportBuilder(self._config.report_config)
        self._report_renderer = ReportRenderer(self._config.report_config)

        # per thread stack of (token, label) for the armed stopwatches
        self._scopes = threading.local()
        self._token_counter = itertools.count()

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def config(self) -> BenchManConfig:
        return self._config

    def _get_scope(self) -> Tuple[Any, List]:
        if not hasattr(self._scopes, "stack"):
            # stopwatches committed on other threads pop from this stack too
            self._scopes.lock = threading.RLock()
            self._scopes.stack = []
        return self._scopes.lock, self._scopes.stack

    def get_stopwatch(self, label: str, parent: Optional[str] = None) -> Stopwatch:
        scope = None
        on_commit = None

        if self._config.track_nesting:
            scope = self._get_scope()
            scope_lock, stack = scope
            with scope_lock:
                if parent is None and stack:
                    parent = stack[-1][1]

        self._store.reserve(label, parent)

        if scope is not None:
            entry = (next(self._token_counter), label)
            with scope_lock:
                stack.append(entry)

            def on_commit(_stopwatch: Stopwatch) -> None:
                # stopwatches may be released out of order, tokens are unique
                with scope_lock:
                    stack.remove(entry)

        kwargs = {} if self._clock is None else {"clock": self._clock}
        return Stopwatch(label, self._store, parent, on_commit=on_commit, **kwargs)

    def labels(self) -> List[str]:
        return self._store.labels()

    def snapshot(self, label: str) -> List[float]:
        return self._store.snapshot(label)

    def summary(self, label: str) -> StatisticsSummary:
        return summarize(self._store.snapshot(label))

    def report(
        self,
        order: Optional[ReportOrderType] = None,
        label_order: Optional[Sequence[str]] = None,
    ) -> Report:
        return self._report_builder.build(
            self._store, self._tag, order=order, label_order=label_order
        )

    def render(self, color: Optional[bool] = None, **report_kwargs) -> str:
        return self._report_renderer.render(self.report(**report_kwargs), color=color)

    def print_report(
        self, file: Optional[TextIO] = None, color: Optional[bool] = None
    ) -> None:
        self._report_renderer.print(self.report(), file=file, color=color)

    def save(self, output_dir: str) -> None:
        ReportExporter(self._config.report_config).save(self.report(), output_dir)

    def __str__(self) -> str:
        return self.render()
