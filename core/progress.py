import logging
from typing import Iterable

from core.models import ChoicePoint, InvalidChoicePointError, ProgressState

logger = logging.getLogger(__name__)


def path_probability(path: Iterable[ChoicePoint]) -> float:
    """
    Probability of reaching the end of `path` if every choice point picked
    uniformly among its alternatives. An empty path has probability 1.0.
    """
    probability = 1.0
    for depth, cp in enumerate(path):
        # Dataclass validation can be bypassed by duck-typed choice points
        if cp.branching_factor < 1:
            raise InvalidChoicePointError(
                f"Choice point at depth {depth} has branching_factor={cp.branching_factor}"
            )
        probability /= cp.branching_factor
    return probability


class ProgressAccumulator:
    """
    Sums the probability mass of completed paths.

    Under a uniform-random-choice model the sum converges to exactly 1.0 once
    the whole tree has been visited, and pathCount / progress estimates the
    total number of paths. The raw sum is never clamped, so floating point
    drift can push it slightly past 1.0.
    """

    def __init__(self, state: ProgressState):
        self.state = state

    def on_path_completed(self, path: Iterable[ChoicePoint]) -> float:
        contribution = path_probability(path)   # raises before mutating state
        self.state.cumulative_progress += contribution
        self.state.path_count += 1
        logger.debug(
            f"Path #{self.state.path_count} completed: p={contribution:.3g}, "
            f"progress={self.state.cumulative_progress:.6f}"
        )
        return contribution
