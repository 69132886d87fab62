"""
Rate Pivot

Turns the flat rate rows of one sheet into a weight x zone table.

    Start Weight | End Weight | Zone 1 | Zone 2 | ...
    "0"          | 1.0        | 5.0    | 7.0    | ...

- One row per distinct start weight, in first-seen order.
- One column per distinct zone, in first-seen order across the sheet.
- Rates sharing (start weight, zone) are summed.
- The first record of a start weight sets its end weight.

Start weights are compared as raw strings, so "10" and "10.0" are
separate rows.

With zero_fill (default) every row has a cell for every header zone, in
header order, with 0.0 where the row saw no rate. Without it a row only
carries the zones it received, in the order it received them, so rows
can be shorter than the header and cells can shift between columns.
"""

from dataclasses import dataclass, field
from typing import Iterable

from .records import RateRecord


HEADER_PREFIX = ["Start Weight", "End Weight"]
ZERO_FILL_VALUE = 0.0

Cell = str | float


@dataclass
class WeightRow:
    """Accumulated rates for one start weight."""
    start_weight: str
    end_weight: float
    zones: dict[str, float] = field(default_factory=dict)

    def add(self, zone_label: str, rate: float) -> None:
        self.zones[zone_label] = self.zones.get(zone_label, 0.0) + rate

    def cells(self, zone_labels: list[str] | None = None) -> list[Cell]:
        """
        Render the row.

        Args:
            zone_labels: Header zones to align to. None keeps the row's own
                zones in the order they were added.
        """
        if zone_labels is None:
            values = list(self.zones.values())
        else:
            values = [self.zones.get(z, ZERO_FILL_VALUE) for z in zone_labels]
        return [self.start_weight, self.end_weight, *values]


class RatePivot:
    """
    Insertion-ordered weight x zone accumulator.

    Both the rows (keyed by start weight) and the zone labels keep the
    order in which they were first seen; that order is what the table
    is rendered in.
    """

    def __init__(self):
        self._rows: dict[str, WeightRow] = {}
        self._zones: dict[str, None] = {}

    def add(self, record: RateRecord) -> None:
        zone_label = record.zone_label
        self._zones.setdefault(zone_label, None)

        row = self._rows.get(record.start_weight)
        if row is None:
            row = WeightRow(record.start_weight, record.end_weight)
            self._rows[record.start_weight] = row
        row.add(zone_label, record.rate)

    def extend(self, records: Iterable[RateRecord]) -> "RatePivot":
        for record in records:
            self.add(record)
        return self

    @property
    def zone_labels(self) -> list[str]:
        return list(self._zones)

    @property
    def header(self) -> list[str]:
        return HEADER_PREFIX + self.zone_labels

    @property
    def rows(self) -> list[WeightRow]:
        return list(self._rows.values())

    def table(self, zero_fill: bool = True) -> list[list[Cell]]:
        """Header row followed by one row per start weight."""
        zone_labels = self.zone_labels if zero_fill else None
        return [self.header] + [row.cells(zone_labels) for row in self._rows.values()]


def pivot_rates(
    records: Iterable[RateRecord],
    zero_fill: bool = True,
) -> list[list[Cell]]:
    """
    Pivot one sheet's rate records into a table.

    Args:
        records: Rate records of a single (locale, shipping_speed) group
        zero_fill: Pad rows to the header width with 0.0 (see module docstring)

    Returns:
        [["Start Weight", "End Weight", "Zone ...", ...], [start, end, rate, ...], ...]
    """
    return RatePivot().extend(records).table(zero_fill=zero_fill)
