import yaml
import logging
from dataclasses import dataclass, fields
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
#  Small config records – all simple dataclasses                              #
# --------------------------------------------------------------------------- #
@dataclass
class EstimatorConfig:
    log_period_ms: int = 0          # 0 = no time-based throttling
    record_events: bool = True      # [RECORD] lines at search start/finish

    def __post_init__(self):
        if self.log_period_ms < 0:
            raise ValueError(f"log_period_ms must be >= 0, got {self.log_period_ms}")


# Tree building and the bundled search both recurse once per level
MAX_TREE_DEPTH = 200


@dataclass
class SearchConfig:
    tree: str = "random"            # random | uniform
    max_depth: int = 12
    max_branching: int = 4
    leaf_probability: float = 0.15
    error_probability: float = 0.0
    revisit_probability: float = 0.05
    stop_on_error: bool = False
    seed: Optional[int] = 42

    def __post_init__(self):
        if self.tree not in ("random", "uniform"):
            raise ValueError(f"Unknown tree type '{self.tree}', expected 'random' or 'uniform'")
        if not 0 <= self.max_depth <= MAX_TREE_DEPTH:
            raise ValueError(f"max_depth must be between 0 and {MAX_TREE_DEPTH}, got {self.max_depth}")
        if self.max_branching < 1:
            raise ValueError(f"max_branching must be >= 1, got {self.max_branching}")


def _record_from(cls, data: Optional[Dict[str, Any]]):
    data = data or {}
    known = {f.name for f in fields(cls)}
    unknown = set(data) - known
    if unknown:
        logger.warning(f"Ignoring unknown {cls.__name__} keys: {sorted(unknown)}")
    return cls(**{k: v for k, v in data.items() if k in known})


# --------------------------------------------------------------------------- #
#  Top-level wrapper – uses the small records above                           #
# --------------------------------------------------------------------------- #
class AppConfig:
    def __init__(self, data: Optional[Dict[str, Any]] = None):
        data = data or {}
        self.estimator: EstimatorConfig = _record_from(EstimatorConfig, data.get("path_count_estimator"))
        self.search: SearchConfig = _record_from(SearchConfig, data.get("search"))
        self.logging_level: str = data.get("logging_level", "INFO")


# --------------------------------------------------------------------------- #
#  Loader helper                                                              #
# --------------------------------------------------------------------------- #
def load_config(config_path: str) -> AppConfig:
    """
    Parse a YAML config file into an AppConfig instance.
    """
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f)
        logger.info(f"Configuration loaded from {config_path}")
        return AppConfig(cfg)
    except FileNotFoundError:
        logger.error(f"Config file '{config_path}' not found.")
        raise
    except yaml.YAMLError as e:
        logger.error(f"YAML parse error in '{config_path}': {e}")
        raise
    except Exception as e:
        logger.error(f"Error loading or validating config '{config_path}': {e}")
        raise
