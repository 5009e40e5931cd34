"""
Centralized logging configuration for the engine.
"""

# Python Packages
import logging
import sys
from typing import Optional

# Constants
from ..base import constants





def setup_logging(level: Optional[str] = None) -> None:
    """
    Setup centralized logging configuration.

    Args:
        level: Log level name, defaults to LOG_LEVEL from the environment
    """

    level = (level or constants.LOG_LEVEL).upper()

    logging.basicConfig(
        level = getattr(logging, level, logging.INFO),
        format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers = [logging.StreamHandler(sys.stdout)]
    )
