import logging
from typing import Iterable, List, Optional, Set

from core.models import ChoicePoint, ExecutionPath
from search.listener import SearchListener
from search.tree import TreeNode

logger = logging.getLogger(__name__)


class DepthFirstSearch:
    """
    Backtracking search over a TreeNode tree that notifies listeners.

    Every child of a node is a choice point alternative. The search advances
    into each child in order, descends unless the child is an end, error or
    already visited state, then backtracks to the parent.
    """

    def __init__(self, root: TreeNode, listeners: Optional[Iterable[SearchListener]] = None,
                 stop_on_error: bool = False):
        self.root = root
        self.listeners: List[SearchListener] = list(listeners or [])
        self.stop_on_error = stop_on_error

        self._path: List[ChoicePoint] = []
        self._current = root
        self._visited = False
        self._seen: Set[int] = set()
        self._stopped = False
        self.advances = 0
        self.backtracks = 0

    def add_listener(self, listener: SearchListener) -> None:
        self.listeners.append(listener)

    # ––––– state view for listeners –––––
    @property
    def state_id(self) -> int:
        return self._current.state_id

    def current_path(self) -> ExecutionPath:
        return tuple(self._path)

    def is_end_state(self) -> bool:
        return self._current.is_leaf

    def is_error_state(self) -> bool:
        return self._current.is_error

    def is_visited_state(self) -> bool:
        return self._visited

    # ––––– driver –––––
    def run(self) -> None:
        self._path = []
        self._current = self.root
        self._visited = False
        self._seen = {self.root.state_id}
        self._stopped = False
        self.advances = 0
        self.backtracks = 0

        logger.info(f"Depth-first search started with {len(self.listeners)} listener(s)")
        self._notify("search_started")
        self._explore(self.root)
        self._notify("search_finished")
        logger.info(
            f"Depth-first search finished: advances={self.advances}, backtracks={self.backtracks}, "
            f"states={len(self._seen)}, stopped_on_error={self._stopped}"
        )

    def _explore(self, node: TreeNode) -> None:
        width = len(node.children)
        for index, child in enumerate(node.children):
            self._path.append(ChoicePoint(width, index))
            self._current = child
            self._visited = child.state_id in self._seen
            self._seen.add(child.state_id)
            self.advances += 1
            self._notify("state_advanced")

            if child.is_error and self.stop_on_error:
                logger.warning(f"Error state {child.state_id} reached, stopping search")
                self._stopped = True
                return

            if not (self._visited or child.is_error or child.is_leaf):
                self._explore(child)
                if self._stopped:
                    return

            self._path.pop()
            self._current = node
            self._visited = False
            self.backtracks += 1
            self._notify("state_backtracked")

    def _notify(self, hook: str) -> None:
        for listener in self.listeners:
            getattr(listener, hook)(self)
