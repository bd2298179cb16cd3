import itertools
import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TreeNode:
    state_id: int
    children: Tuple["TreeNode", ...] = ()
    is_error: bool = False

    @property
    def is_leaf(self) -> bool:
        return not self.children


def uniform_tree(branching: int, depth: int) -> TreeNode:
    """Complete tree: every internal node has `branching` children."""
    if branching < 1:
        raise ValueError(f"branching must be >= 1, got {branching}")
    ids = itertools.count()

    def build(level: int) -> TreeNode:
        state_id = next(ids)
        if level >= depth:
            return TreeNode(state_id)
        return TreeNode(state_id, tuple(build(level + 1) for _ in range(branching)))

    return build(0)


def random_tree(
    max_depth: int,
    max_branching: int,
    leaf_probability: float = 0.15,
    error_probability: float = 0.0,
    revisit_probability: float = 0.0,
    seed: Optional[int] = None,
) -> TreeNode:
    """
    Irregular tree for exercising the estimator. Nodes are generated in the
    same preorder the depth-first search visits them, so a revisit node only
    ever reuses the id of a state the search has already seen.
    """
    if max_branching < 1:
        raise ValueError(f"max_branching must be >= 1, got {max_branching}")
    rng = random.Random(seed)
    ids = itertools.count()
    seen: List[int] = []

    def build(depth: int) -> TreeNode:
        if depth > 0 and seen and rng.random() < revisit_probability:
            return TreeNode(rng.choice(seen))

        state_id = next(ids)
        seen.append(state_id)
        if depth > 0 and rng.random() < error_probability:
            return TreeNode(state_id, is_error=True)
        if depth >= max_depth or (depth > 0 and rng.random() < leaf_probability):
            return TreeNode(state_id)

        width = rng.randint(1, max_branching)
        return TreeNode(state_id, tuple(build(depth + 1) for _ in range(width)))

    root = build(0)
    logger.info(f"Generated random tree with {len(seen)} distinct states (seed={seed})")
    return root
