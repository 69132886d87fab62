"""
Reference Data

Static configuration for the rate sheet export.
"""

from .settings import (
    CLIENT_ID,
    TABLE_NAME,
    MAX_WORKERS,
    ZERO_FILL,
    OUTPUT_DIR,
    OUTPUT_NAME,
    DEFAULT_FORMAT,
)

__all__ = [
    "CLIENT_ID",
    "TABLE_NAME",
    "MAX_WORKERS",
    "ZERO_FILL",
    "OUTPUT_DIR",
    "OUTPUT_NAME",
    "DEFAULT_FORMAT",
]
