import logging
from typing import Callable, Optional

from core.models import ProgressState

logger = logging.getLogger(__name__)

# Progress must grow by more than one percentage point between reports
MIN_PROGRESS_DELTA = 0.01


class ContentGate:
    """Rejects reports that would not show new paths or visible progress."""

    def __init__(self, min_progress_delta: float = MIN_PROGRESS_DELTA):
        self.min_progress_delta = min_progress_delta

    def accept(self, state: ProgressState) -> bool:
        if state.path_count <= state.last_logged_path_count:
            return False
        if state.cumulative_progress - state.last_logged_progress <= self.min_progress_delta:
            return False
        state.last_logged_path_count = state.path_count
        state.last_logged_progress = state.cumulative_progress
        return True


class AdaptiveLogScheduler:
    """
    Decides when a progress report is worth writing.

    Reports are only considered on the first advance after a backtrack, and
    at most once per `log_period_ms` of wall-clock time. A period of 0 leaves
    only the content gate in place.

    States:
      * Idle           – pending_backtrack is False
      * PendingReport  – a backtrack happened, no report decision made yet
    """

    def __init__(self, log_period_ms: int = 0, gate: Optional[ContentGate] = None):
        if log_period_ms < 0:
            raise ValueError(f"log_period_ms must be >= 0, got {log_period_ms}")
        self.log_period_ms = log_period_ms
        self.gate = gate or ContentGate()

    def on_backtrack(self, state: ProgressState) -> None:
        state.action_counter += 1
        state.pending_backtrack = True

    def on_advance(self, state: ProgressState, now_ms: float,
                   report: Callable[[], None]) -> bool:
        """
        Returns True when `report` was called. The caller still accounts for
        the advanced-to state afterwards, whatever this returns.
        """
        state.action_counter += 1
        if not state.pending_backtrack:
            return False

        if now_ms < state.next_eligible_log_ms:
            # Stay pending, retried on the next advance
            return False

        state.pending_backtrack = False
        if not self.gate.accept(state):
            logger.debug(
                f"Report skipped: paths={state.path_count}, progress={state.cumulative_progress:.6f}"
            )
            return False

        state.next_eligible_log_ms = now_ms + self.log_period_ms
        report()
        return True
