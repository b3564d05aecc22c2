"""Logging setup for the ir-openapi CLI.

The library modules only create loggers; nothing is configured on import.
"""

import logging
import os

LOG_LEVEL_ENV = "IR_OPENAPI_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def configure_logging(default_level: str | None = None) -> None:
    """Configure root logging level and format.

    ``default_level`` wins over the IR_OPENAPI_LOG_LEVEL environment variable,
    which wins over WARNING. Unrecognized level names fall back to WARNING.
    """
    level_name = default_level or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    level = getattr(logging, level_name.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
