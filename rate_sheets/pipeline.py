"""
Rate Sheet Generator

Database in, spreadsheet out. For one client:

    1. Load the distinct (locale, shipping_speed) groups
    2. Per group, load its rates and pivot them into a weight x zone sheet
    3. Export every sheet once all groups are done

Group queries run on a bounded thread pool. Sheets come back in group
order whatever order the queries finish in. If any group fails the error
is raised once the pool has drained and nothing is exported.

USAGE
-----
    from rate_sheets.pipeline import generate_rate_sheets, run
    sheets = generate_rate_sheets()
    run()   # generate and write the default workbook
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from shared.database import close_connection

from .data import (
    CLIENT_ID,
    MAX_WORKERS,
    ZERO_FILL,
    OUTPUT_DIR,
    OUTPUT_NAME,
    DEFAULT_FORMAT,
    load_sheet_groups,
    load_group_rates,
)
from .export import export_sheets
from .records import records_from_frame
from .sheets import SheetData, build_sheet, sheet_keys_from_frame, split_sheet_key


# =============================================================================
# PIPELINE STEPS
# =============================================================================

def get_sheet_keys(client_id: int = CLIENT_ID) -> list[str]:
    """Sheet keys ("<locale>,<shipping_speed>") present for a client."""
    return sheet_keys_from_frame(load_sheet_groups(client_id=client_id))


def get_sheet(
    key: str,
    client_id: int = CLIENT_ID,
    zero_fill: bool = ZERO_FILL,
) -> SheetData:
    """Query one group's rates and assemble its sheet."""
    locale, shipping_speed = split_sheet_key(key)
    rates = load_group_rates(locale, shipping_speed, client_id=client_id)
    return build_sheet(key, records_from_frame(rates), zero_fill=zero_fill)


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def generate_rate_sheets(
    client_id: int = CLIENT_ID,
    max_workers: int = MAX_WORKERS,
    zero_fill: bool = ZERO_FILL,
    verbose: bool = True,
) -> list[SheetData]:
    """
    Build every rate sheet of a client.

    Args:
        client_id: Client whose rates are exported
        max_workers: Upper bound on concurrent group queries
        zero_fill: Pad rows with 0.0 for zones they did not receive
        verbose: If True, print progress messages

    Returns:
        One SheetData per (locale, shipping_speed) group, in group order

    Raises:
        ValueError: If max_workers is less than 1
        RuntimeError: If any query fails
    """
    if max_workers < 1:
        raise ValueError(f"max_workers must be at least 1, got {max_workers}")

    if verbose:
        print(f"\nStep 1: Loading sheet groups for client {client_id}...")
    keys = get_sheet_keys(client_id)
    if verbose:
        print(f"  {len(keys)} group(s): {', '.join(keys) if keys else '-'}")

    if not keys:
        return []

    if verbose:
        print(f"\nStep 2: Building sheets ({min(max_workers, len(keys))} worker(s))...")

    with ThreadPoolExecutor(max_workers=min(max_workers, len(keys))) as pool:
        futures = [
            pool.submit(get_sheet, key, client_id, zero_fill)
            for key in keys
        ]
        try:
            sheets = [future.result() for future in futures]
        except BaseException:
            # Drop queued groups; running ones finish before the pool exits
            for future in futures:
                future.cancel()
            raise

    if verbose:
        for sheet in sheets:
            print(
                f"  {sheet.name}: {len(sheet.data_rows):,} weight(s) "
                f"x {len(sheet.zone_labels)} zone(s)"
            )

    return sheets


def default_output_path(fmt: str = DEFAULT_FORMAT, client_id: int = CLIENT_ID) -> Path:
    """Workbook path for xlsx, directory for csv."""
    name = f"{OUTPUT_NAME}_{client_id}"
    if fmt == "xlsx":
        return OUTPUT_DIR / f"{name}.xlsx"
    return OUTPUT_DIR / name


def run() -> None:
    """Generate all rate sheets for the configured client and export them."""
    try:
        sheets = generate_rate_sheets()
        print("\nStep 3: Exporting...")
        export_sheets(sheets, default_output_path(), fmt=DEFAULT_FORMAT)
    finally:
        close_connection()


if __name__ == "__main__":
    run()
