"""
Rate Sheet Data

Configuration and database loaders for the rate sheet export.

Structure:
    - reference/: Static settings (client, table, export defaults)
    - loaders/: Rate loaders (rates database)
"""

from .reference import (
    CLIENT_ID,
    TABLE_NAME,
    MAX_WORKERS,
    ZERO_FILL,
    OUTPUT_DIR,
    OUTPUT_NAME,
    DEFAULT_FORMAT,
)
from .loaders import (
    load_sheet_groups,
    load_group_rates,
)

__all__ = [
    # Settings
    "CLIENT_ID",
    "TABLE_NAME",
    "MAX_WORKERS",
    "ZERO_FILL",
    "OUTPUT_DIR",
    "OUTPUT_NAME",
    "DEFAULT_FORMAT",
    # Loaders
    "load_sheet_groups",
    "load_group_rates",
]
