"""Input Parameters and Results summary sections written before the table."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from angular_size_tools.bodies import display_label

if TYPE_CHECKING:
    from angular_size_tools.angular_size import AngularSizeResult
    from angular_size_tools.params import AngularSizeParams


def _w(stream: TextIO, line: str) -> None:
    """Write a line to the stream."""
    stream.write(line + '\n')


def _plural_years(years: int) -> str:
    return '1 year' if years == 1 else f'{years} years'


def write_input_parameters(stream: TextIO, params: AngularSizeParams) -> None:
    """Write the Input Parameters section for an angular size request.

    Parameters:
        stream: Output text stream.
        params: Request parameters to summarize.
    """
    _w(stream, 'Input Parameters')
    _w(stream, '----------------')
    _w(stream, ' ')
    _w(stream, f'       Observer: {display_label(params.observer)}')
    _w(stream, f'         Target: {display_label(params.target)}')
    _w(stream, f'         Window: {_plural_years(params.years)}')
    if params.title.strip():
        _w(stream, f'          Title: {params.title.strip()}')
    _w(stream, ' ')


def write_result_summary(stream: TextIO, result: AngularSizeResult) -> None:
    """Write the time span and the apsis-based angular size bounds.

    Parameters:
        stream: Output text stream.
        result: Computed angular size result.
    """
    _w(stream, 'Results')
    _w(stream, '-------')
    _w(stream, ' ')
    if result.start_date is not None:
        _w(stream, f'     Start date: {result.start_date}')
        _w(stream, f'       End date: {result.end_date}')
    _w(stream, f'        Samples: {len(result.dates)}')
    _w(stream, f'   Min diameter: {result.min_label}')
    _w(stream, f'   Max diameter: {result.max_label}')
    for message in result.warnings:
        _w(stream, f'        Skipped: {message}')
    _w(stream, ' ')
