import logging
import sys

logger = logging.getLogger(__name__)

def setup_logging(level_str: str = "INFO"):
    """Configures basic logging for the application."""
    numeric_level = getattr(logging, level_str.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level_str}")

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)-5.5s] [%(name)-20.20s]: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)], # stdout carries the [PATH]/[RECORD] lines
    )
    logger.info(f"Logging initialized at level {level_str.upper()}")
