"""
Logging setup shared by the API server and the command-line scripts.
"""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once; later calls only adjust the level."""
    if level is None:
        from price_insight.core.config import settings

        level = settings.log_level

    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())
