"""
Configuration for gemreadme.

Engine limits are fixed constants. Process-level settings (log level) are read
from the environment, with a local .env file loaded first if present.
"""

import os
import logging

from dotenv import load_dotenv, find_dotenv

load_dotenv(find_dotenv())

# Usage example extraction
MAX_USAGE_EXAMPLES = 10

# Example descriptions: trimmed length must be strictly between these bounds
EXAMPLE_DESCRIPTION_MIN_LENGTH = 10
EXAMPLE_DESCRIPTION_MAX_LENGTH = 200

# Lead description
LEAD_LINE_MIN_LENGTH = 20
LEAD_DESCRIPTION_MAX_LENGTH = 300
FALLBACK_DESCRIPTION = "No description available"

# Markdown cleanup
MIN_IMAGE_ALT_LENGTH = 3

LOG_LEVEL_ENV_VAR = "GEMREADME_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def get_log_level() -> int:
    """
    Resolve the log level from GEMREADME_LOG_LEVEL.

    Unknown level names fall back to WARNING.
    """
    name = os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.WARNING
