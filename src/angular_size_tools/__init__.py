"""Apparent angular size of one solar-system body as seen from another.

This package computes a time series of angular diameters from precomputed
weekly heliocentric position samples:
- Timestamp parsing of ephemeris-style dates ("A.D. 2020-Jan-01 00:00:00.0000")
- Line-of-sight distances and angular diameters from paired position vectors
- Theoretical minimum/maximum angular size from orbital apsides
- Year-range windowing of the series, text tables, and matplotlib charts

Vector math uses cspyce and calendar conversions use rms-julian.
"""

__all__: list[str] = []
