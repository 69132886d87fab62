"""
Rate Sheet Settings

Client, source table and export defaults for the rate sheet export.
"""

from pathlib import Path

# Source
CLIENT_ID = 1240
TABLE_NAME = "rates"

# Per-group queries run on a bounded worker pool
MAX_WORKERS = 4

# Pad every data row with 0 for header zones it never received
ZERO_FILL = True

# Output
OUTPUT_DIR = Path(__file__).parent.parent.parent.parent / "output"
OUTPUT_NAME = "rate_sheets"
DEFAULT_FORMAT = "xlsx"
