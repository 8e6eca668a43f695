"""Centralized configuration for the multiples calculator.

This module defines:
- Record layout (fields per line, accepted token pattern, value bounds)
- Output formatting (delimiter, bounded-line separator, line formats)
- Computation chunking for large ranges
- Logging defaults

Run-time choices are made via CLI flags (see cli.py).
"""

import importlib.metadata
import re

# Version is defined in pyproject.toml [project] section
try:
    VERSION = importlib.metadata.version("multiples")
except importlib.metadata.PackageNotFoundError:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Record layout: "a b end"
FIELDS_PER_RECORD = 3
FIELD_NAMES = ("a", "b", "end")
MAX_FIELD_VALUE = 2**32 - 1  # unsigned 32-bit range

# ASCII decimal digits only, no sign
INTEGER_TOKEN_RE = re.compile(r"^[0-9]+$")

INPUT_ENCODING = "utf-8"

# Output formatting
OUTPUT_DELIMITER = " "
BOUND_SEPARATOR = ":"  # "end:n1 n2 ..." in bounded format
LINE_FORMATS = ("plain", "bounded")
DEFAULT_LINE_FORMAT = "plain"

# Number of candidates checked per numpy batch
RANGE_CHUNK_SIZE = 1_000_000

# Logging
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LOG_LEVEL = "WARNING"
