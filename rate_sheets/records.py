"""
Rate Records

Typed view of a rate row. Missing values are defaulted once, on the
DataFrame, before any record is built:

    start_weight    null -> "0"   (kept as a string, never parsed)
    end_weight      null -> 0.0
    rate            null -> 0.0

Columns absent from the frame are treated as all-null.
"""

from dataclasses import dataclass

import polars as pl


RATE_COLUMNS = [
    "client_id",
    "locale",
    "shipping_speed",
    "zone",
    "start_weight",
    "end_weight",
    "rate",
]

DEFAULT_START_WEIGHT = "0"
DEFAULT_END_WEIGHT = 0.0
DEFAULT_RATE = 0.0


@dataclass(frozen=True)
class RateRecord:
    client_id: int | None
    locale: str
    shipping_speed: str
    zone: str
    start_weight: str = DEFAULT_START_WEIGHT
    end_weight: float = DEFAULT_END_WEIGHT
    rate: float = DEFAULT_RATE

    @property
    def zone_label(self) -> str:
        """Header label of the record's zone column."""
        return f"Zone {self.zone}"


def normalize_rates(df: pl.DataFrame) -> pl.DataFrame:
    """
    Cast rate columns and apply the default for every missing value.

    Args:
        df: Raw rate rows (any subset of RATE_COLUMNS)

    Returns:
        DataFrame with exactly RATE_COLUMNS, in that order
    """
    missing = [c for c in RATE_COLUMNS if c not in df.columns]
    if missing:
        df = df.with_columns([pl.lit(None).alias(c) for c in missing])

    return df.select([
        pl.col("client_id").cast(pl.Int64),
        pl.col("locale").cast(pl.Utf8).fill_null(""),
        pl.col("shipping_speed").cast(pl.Utf8).fill_null(""),
        pl.col("zone").cast(pl.Utf8).fill_null(""),
        pl.col("start_weight").cast(pl.Utf8).fill_null(DEFAULT_START_WEIGHT),
        pl.col("end_weight").cast(pl.Float64).fill_null(DEFAULT_END_WEIGHT),
        pl.col("rate").cast(pl.Float64).fill_null(DEFAULT_RATE),
    ])


def records_from_frame(df: pl.DataFrame) -> list[RateRecord]:
    """Build RateRecords from raw rate rows, preserving row order."""
    return [RateRecord(**row) for row in normalize_rates(df).iter_rows(named=True)]
