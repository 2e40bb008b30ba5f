"""Fixed-width text table of an angular size series."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from angular_size_tools.angular_size import AngularSizeResult


class TableRow:
    """Row buffer: fields joined by a single blank, trailing blanks stripped."""

    def __init__(self) -> None:
        self._fields: list[str] = []

    def append(self, field: str) -> None:
        """Add one pre-formatted field."""
        self._fields.append(field)

    def get_line(self) -> str:
        return ' '.join(self._fields).rstrip()

    def write(self, stream: TextIO) -> None:
        """Write the row (if non-empty) and clear the buffer."""
        line = self.get_line()
        if line:
            stream.write(line + '\n')
        self._fields = []


def _format_distance(distance_km: float) -> str:
    """Distance in a 12-character column, exponent form when it does not fit."""
    s = f'{distance_km:12.0f}'
    if len(s) > 12:
        s = f'{distance_km:12.5e}'
    return s


def write_series_table(stream: TextIO, result: AngularSizeResult) -> None:
    """Write one row per sample: date, observer-target distance, angular size.

    Parameters:
        stream: Output text stream.
        result: Computed angular size result.
    """
    row = TableRow()
    row.append('      date')
    row.append('    obs_dist')
    row.append('    arcsec')
    row.write(stream)
    for date, dist, arcsec in zip(
        result.dates, result.distances_km, result.angles_arcsec, strict=True
    ):
        row.append(f'{date:>10s}')
        row.append(_format_distance(dist))
        row.append(f'{arcsec:10.4f}')
        row.write(stream)
