from dataclasses import dataclass
from typing import Tuple


class InvalidChoicePointError(ValueError):
    """Raised when the search reports a choice point with no alternatives."""


@dataclass(frozen=True)
class ChoicePoint:
    branching_factor: int           # total alternatives available, >= 1
    choice: int = 0                 # index actually taken (diagnostic only)

    def __post_init__(self):
        if self.branching_factor < 1:
            raise InvalidChoicePointError(
                f"Choice point must offer at least one alternative, got branching_factor={self.branching_factor}"
            )
        if not 0 <= self.choice < self.branching_factor:
            raise InvalidChoicePointError(
                f"Choice index {self.choice} out of range for branching_factor={self.branching_factor}"
            )


# Root-to-current sequence of choices; read-only for the estimator.
ExecutionPath = Tuple[ChoicePoint, ...]


@dataclass
class ProgressState:
    """Run-scoped estimator state. Built at search start, dropped at search end."""
    search_start_ms: float
    cumulative_progress: float = 0.0
    path_count: int = 0
    last_logged_progress: float = -1.0    # "never logged"
    last_logged_path_count: int = -1      # "never logged"
    next_eligible_log_ms: float = 0.0
    pending_backtrack: bool = False
    action_counter: int = 0

    @classmethod
    def start(cls, now_ms: float) -> "ProgressState":
        return cls(search_start_ms=now_ms)
