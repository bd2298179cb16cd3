import logging
import sys
import time
from typing import Callable, Optional, TextIO

from core.formatter import render, render_record
from core.models import ProgressState
from core.progress import ProgressAccumulator
from core.scheduler import AdaptiveLogScheduler
from search.listener import SearchListener
from utils.config_loader import EstimatorConfig

logger = logging.getLogger(__name__)


def wall_clock_ms() -> float:
    return time.time() * 1000.0


class PathCountEstimator(SearchListener):
    """
    Estimates how much of a depth-first search tree has been explored and
    prints a running ETA.

    Every completed path (end, error or already visited state) adds the
    product of 1/branching_factor along its choice points to the progress
    estimate. Reports are written to `out` on the first advance after a
    backtrack, throttled by `log_period_ms` and by the content gate, plus one
    unconditional report when the search finishes.
    """

    def __init__(
        self,
        config: Optional[EstimatorConfig] = None,
        out: Optional[TextIO] = None,
        clock: Callable[[], float] = wall_clock_ms,
    ):
        self.config = config or EstimatorConfig()
        self.out = out if out is not None else sys.stdout
        self.clock = clock
        self.scheduler = AdaptiveLogScheduler(self.config.log_period_ms)

        self._state: Optional[ProgressState] = None
        self._accumulator: Optional[ProgressAccumulator] = None

    @property
    def state(self) -> ProgressState:
        if self._state is None:
            raise RuntimeError("PathCountEstimator received an event before search_started")
        return self._state

    # ––––– listener hooks –––––
    def search_started(self, search) -> None:
        self._state = ProgressState.start(self.clock())
        self._accumulator = ProgressAccumulator(self._state)
        logger.info(f"Path count estimation started (log period {self.config.log_period_ms} ms)")
        self._record("SearchStarted", search)

    def state_advanced(self, search) -> None:
        state = self.state
        if self.scheduler.on_advance(state, self.clock(), self._report):
            self._record("StateAdvanced", search)

        if search.is_end_state() or search.is_error_state() or search.is_visited_state():
            self._accumulator.on_path_completed(search.current_path())

    def state_backtracked(self, search) -> None:
        self.scheduler.on_backtrack(self.state)

    def search_finished(self, search) -> None:
        state = self.state
        self._report()
        self._record("SearchFinished", search)
        logger.info(
            f"Path count estimation finished: {state.path_count} paths, "
            f"progress={state.cumulative_progress:.6f}, actions={state.action_counter}"
        )

    # ––––– output –––––
    def _report(self) -> None:
        state = self.state
        elapsed = self.clock() - state.search_start_ms
        self._println(render(state.path_count, state.cumulative_progress, elapsed))

    def _record(self, event: str, search) -> None:
        if self.config.record_events:
            self._println(render_record(event, search.state_id, self.state.action_counter))

    def _println(self, line: str) -> None:
        self.out.write(line + "\n")
        self.out.flush()
