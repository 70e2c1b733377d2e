"""
Configuration constants for the Word Ladder Explorer.

All tunable settings are defined here. Values that make sense to override
per machine are read from environment variables (a local .env is honoured).
"""

import os
import string

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Graph Configuration
# =============================================================================

# Letters tried at each position when generating neighbours, in order
ALPHABET = string.ascii_uppercase

# =============================================================================
# Dictionary Configuration
# =============================================================================

# Text encoding for plain dictionary files
DICTIONARY_ENCODING = os.environ.get("WORDLADDER_ENCODING", "utf-8")

# Dictionaries with this suffix are read as a msgpack array of strings
MSGPACK_SUFFIX = ".msgpack"

# =============================================================================
# Exit Codes
# =============================================================================

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_DICTIONARY = 2
EXIT_MISSING_WORD = 3
EXIT_LENGTH_MISMATCH = 4

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING").upper()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
