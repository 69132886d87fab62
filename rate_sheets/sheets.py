"""
Rate Sheets

A sheet is one (locale, shipping_speed) group of a client's rates,
identified by the key "<locale>,<shipping_speed>" and titled for export:

    "domestic,ground"           -> "Domestic Ground Rates"
    "international,groundintl"  -> "International Ground Rates"
"""

from dataclasses import dataclass
from typing import Iterable

import polars as pl

from .pivot import Cell, HEADER_PREFIX, pivot_rates
from .records import RateRecord


KEY_SEPARATOR = ","
INTL_SUFFIX = "intl"
TITLE_FORMAT = "{locale} {speed} Rates"


@dataclass
class SheetData:
    """One named table, exported as one spreadsheet tab."""
    name: str
    rows: list[list[Cell]]

    @property
    def header(self) -> list[Cell]:
        return self.rows[0] if self.rows else list(HEADER_PREFIX)

    @property
    def zone_labels(self) -> list[Cell]:
        return self.header[len(HEADER_PREFIX):]

    @property
    def data_rows(self) -> list[list[Cell]]:
        return self.rows[1:]


# =============================================================================
# SHEET KEYS
# =============================================================================

def sheet_key(locale: str, shipping_speed: str) -> str:
    return f"{locale}{KEY_SEPARATOR}{shipping_speed}"


def split_sheet_key(key: str) -> tuple[str, str]:
    """
    Split a sheet key into (locale, shipping_speed) on its first comma.

    Raises:
        ValueError: If the key has no comma
    """
    locale, sep, shipping_speed = key.partition(KEY_SEPARATOR)
    if not sep:
        raise ValueError(f"Sheet key must be '<locale>,<shipping_speed>', got '{key}'")
    return locale, shipping_speed


def enumerate_sheet_keys(groups: Iterable[tuple[str, str]]) -> list[str]:
    """
    Distinct sheet keys in first-occurrence order.

    Args:
        groups: (locale, shipping_speed) pairs, duplicates allowed
    """
    keys: dict[str, None] = {}
    for locale, shipping_speed in groups:
        keys.setdefault(sheet_key(locale, shipping_speed), None)
    return list(keys)


def sheet_keys_from_frame(df: pl.DataFrame) -> list[str]:
    """
    Distinct sheet keys of a frame with locale and shipping_speed columns.

    Null parts become "", as they do for rate records.
    """
    groups = df.select([
        pl.col("locale").cast(pl.Utf8).fill_null(""),
        pl.col("shipping_speed").cast(pl.Utf8).fill_null(""),
    ])
    return enumerate_sheet_keys(groups.iter_rows())


# =============================================================================
# TITLES
# =============================================================================

def _upper_first(value: str) -> str:
    return value[:1].upper() + value[1:]


def sheet_title(key: str) -> str:
    """
    Human-readable title of a sheet key.

    The first "intl" is dropped from the shipping speed and the first
    letter of each part is upper-cased; the rest is left as is.
    """
    locale, shipping_speed = split_sheet_key(key)
    speed = shipping_speed.replace(INTL_SUFFIX, "", 1)
    return TITLE_FORMAT.format(locale=_upper_first(locale), speed=_upper_first(speed))


# =============================================================================
# ASSEMBLY
# =============================================================================

def build_sheet(
    key: str,
    records: Iterable[RateRecord],
    zero_fill: bool = True,
) -> SheetData:
    """Pivot a group's records and name the result after its key."""
    return SheetData(
        name=sheet_title(key),
        rows=pivot_rates(records, zero_fill=zero_fill),
    )
