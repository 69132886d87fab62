"""
Data Loaders

Rate loaders for the rates database.
"""

from .rates import (
    load_sheet_groups,
    load_group_rates,
)

__all__ = [
    "load_sheet_groups",
    "load_group_rates",
]
