import argparse
import logging
from typing import List, Optional

from core.estimator import PathCountEstimator
from search.engine import DepthFirstSearch
from search.tree import TreeNode, random_tree, uniform_tree
from utils.config_loader import load_config, AppConfig, SearchConfig
from utils.logging_setup import setup_logging


logger = logging.getLogger(__name__) # Will be configured by setup_logging

def build_tree(search_cfg: SearchConfig) -> TreeNode:
    if search_cfg.tree == "uniform":
        return uniform_tree(search_cfg.max_branching, search_cfg.max_depth)
    return random_tree(
        max_depth=search_cfg.max_depth,
        max_branching=search_cfg.max_branching,
        leaf_probability=search_cfg.leaf_probability,
        error_probability=search_cfg.error_probability,
        revisit_probability=search_cfg.revisit_probability,
        seed=search_cfg.seed,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Path count estimator: run a depth-first search and report progress/ETA.")
    parser.add_argument("--config", type=str, default=None, help="Path to the YAML configuration file (defaults apply if omitted).")
    parser.add_argument("--log-period", type=int, default=None, help="Override the minimum milliseconds between progress reports.")
    parser.add_argument("--no-record", action="store_true", help="Suppress [RECORD] lines.")
    parser.add_argument("--seed", type=int, default=None, help="Override the random tree seed.")

    args = parser.parse_args(argv)

    config = load_config(args.config) if args.config else AppConfig()
    setup_logging(config.logging_level)

    if args.log_period is not None:
        if args.log_period < 0:
            parser.error("--log-period must be >= 0")
        config.estimator.log_period_ms = args.log_period
    if args.no_record:
        config.estimator.record_events = False
    if args.seed is not None:
        config.search.seed = args.seed

    logger.info(f"Using configuration from: {args.config or '<defaults>'}")
    logger.info(f"Search settings: {config.search}")

    root = build_tree(config.search)
    search = DepthFirstSearch(root, stop_on_error=config.search.stop_on_error)
    search.add_listener(PathCountEstimator(config.estimator))
    search.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
