"""
Load Rates

Pulls rate rows for the rate sheet export from the rates database.
"""

from pathlib import Path

import polars as pl

from shared.database import build_filters, pull_data

from ..reference.settings import CLIENT_ID, TABLE_NAME


SQL_DIR = Path(__file__).parent / "sql"


def load_sheet_groups(client_id: int = CLIENT_ID) -> pl.DataFrame:
    """
    Load the distinct (locale, shipping_speed) pairs for a client.

    Args:
        client_id: Client whose rates are exported

    Returns:
        DataFrame with columns: locale, shipping_speed
    """
    query = (SQL_DIR / "sheet_groups.sql").read_text().format(
        table_name=TABLE_NAME,
        filters=build_filters(client_id=client_id),
    )

    return pull_data(query)


def load_group_rates(
    locale: str,
    shipping_speed: str,
    client_id: int = CLIENT_ID,
) -> pl.DataFrame:
    """
    Load every rate row of one sheet group.

    Args:
        locale: Locale of the group (e.g. "domestic")
        shipping_speed: Shipping speed of the group (e.g. "ground")
        client_id: Client whose rates are exported

    Returns:
        DataFrame with columns: client_id, locale, shipping_speed, zone,
        start_weight, end_weight, rate (raw, nulls not yet defaulted)
    """
    query = (SQL_DIR / "group_rates.sql").read_text().format(
        table_name=TABLE_NAME,
        filters=build_filters(
            client_id=client_id,
            locale=locale,
            shipping_speed=shipping_speed,
        ),
    )

    return pull_data(query)
