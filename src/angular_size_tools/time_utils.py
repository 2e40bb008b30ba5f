"""Ephemeris timestamp parsing and calendar arithmetic on top of rms-julian."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

import julian

from angular_size_tools.config import get_leapsecs_path
from angular_size_tools.constants import ERA_AD, ERA_BC, MONTH_NUMBERS
from angular_size_tools.errors import TimestampParseError

logger = logging.getLogger(__name__)

# Leap seconds loaded once at first use.
_leapsecs_loaded = False

_TIME_RE = re.compile(r'(\d{1,2}):(\d{2})(?::(\d{2}))?')


@dataclass(frozen=True, order=True)
class Instant:
    """UTC instant as days since J2000 plus seconds into that day."""

    day: int
    sec: float = 0.0

    def ymd(self) -> tuple[int, int, int]:
        """Calendar (year, month, day) of this instant."""
        return ymd_from_day(self.day)

    def date_label(self) -> str:
        """Date as YYYY-MM-DD (UTC)."""
        year, month, day = self.ymd()
        return f'{year:04d}-{month:02d}-{day:02d}'

    def isoformat(self) -> str:
        """ISO-8601 UTC string, whole seconds (YYYY-MM-DDTHH:MM:SSZ)."""
        hour, minute, second = hms_from_sec(self.sec)
        return f'{self.date_label()}T{hour:02d}:{minute:02d}:{int(second):02d}Z'


def _ensure_leapsecs() -> None:
    """Load the leap seconds kernel into rms-julian if not already loaded.

    Uses the configured LSK when one is available and falls back to
    rms-julian's bundled LSK otherwise.
    """
    global _leapsecs_loaded
    if _leapsecs_loaded:
        return
    path = get_leapsecs_path()
    if path is not None:
        try:
            julian.load_lsk(path)
            _leapsecs_loaded = True
            return
        except (OSError, KeyError, ValueError) as e:
            logger.info(
                'Leap seconds from %s not used (%s); using rms-julian bundled LSK.',
                path,
                e,
            )
    julian.load_lsk()
    _leapsecs_loaded = True


def parse_datetime(string: str) -> tuple[int, float] | None:
    """Parse an ISO date/time string to UTC (day, sec).

    Parameters:
        string: Date/time string accepted by rms-julian; a trailing "Z" is allowed.

    Returns:
        (day, sec) where day is days since J2000, sec is seconds within that day;
        None on parse failure.
    """
    _ensure_leapsecs()
    candidate_strings = [string]
    stripped = string.strip()
    if stripped.endswith(('Z', 'z')):
        # rms-julian does not parse the ISO UTC suffix "Z"; the value is UTC either way.
        candidate_strings.append(stripped[:-1])
    for candidate in candidate_strings:
        try:
            result = julian.day_sec_from_string(candidate)
            day, sec = result[0], result[1]
            return (int(day), float(sec))
        except (ValueError, TypeError, LookupError, OSError):
            continue
    return None


def _strip_era(string: str) -> str:
    """Remove a leading A.D. marker; B.C. dates are rejected."""
    s = string.strip()
    upper = s.upper()
    if upper.startswith(ERA_BC):
        raise TimestampParseError(string, 'B.C. dates are not supported')
    if upper.startswith(ERA_AD):
        s = s[len(ERA_AD):].strip()
    return s


def ephemeris_to_iso(string: str) -> str:
    """Rewrite an ephemeris timestamp as an ISO-8601 UTC string.

    "A.D. 2020-Jan-01 00:00:00.0000" becomes "2020-01-01T00:00:00Z". The era
    marker and the fractional seconds are optional; a missing time of day
    means midnight.

    Parameters:
        string: Ephemeris timestamp.

    Returns:
        ISO-8601 string ending in "Z".

    Raises:
        TimestampParseError: Unknown month abbreviation or malformed structure.
    """
    s = _strip_era(string)
    if not s:
        raise TimestampParseError(string, 'empty timestamp')
    date_part, _, time_part = s.partition(' ')
    fields = date_part.split('-')
    if len(fields) != 3:
        raise TimestampParseError(string, 'date must be YYYY-Mon-DD')
    year, month_abbr, day = fields
    month = MONTH_NUMBERS.get(month_abbr.strip().capitalize())
    if month is None:
        raise TimestampParseError(string, f'unrecognized month {month_abbr!r}')
    if not (year.isdigit() and len(year) == 4):
        raise TimestampParseError(string, f'bad year {year!r}')
    if not (day.isdigit() and 1 <= len(day) <= 2):
        raise TimestampParseError(string, f'bad day {day!r}')

    # Drop fractional seconds.
    hms = time_part.strip().split('.', 1)[0] or '00:00:00'
    match = _TIME_RE.fullmatch(hms)
    if match is None:
        raise TimestampParseError(string, f'bad time of day {hms!r}')
    hour, minute, second = match.group(1), match.group(2), match.group(3) or '00'
    return f'{year}-{month}-{int(day):02d}T{int(hour):02d}:{minute}:{second}Z'


def parse_ephemeris_timestamp(string: str) -> Instant:
    """Parse an ephemeris-style timestamp into a UTC Instant.

    Parameters:
        string: Timestamp such as "A.D. 2020-Jan-01 00:00:00.0000".

    Returns:
        Instant for the timestamp, truncated to whole seconds.

    Raises:
        TimestampParseError: If the month is unknown or the string is malformed,
            including calendar-invalid dates such as Feb 30.
    """
    iso = ephemeris_to_iso(string)
    parsed = parse_datetime(iso)
    if parsed is None:
        raise TimestampParseError(string, f'{iso} is not a valid UTC time')
    day, sec = parsed
    instant = Instant(day, sec)
    # Catch day-of-month overflow (e.g. Feb 30) that the parser may normalize.
    if instant.date_label() != iso[:10]:
        raise TimestampParseError(string, f'{iso[:10]} is not a calendar date')
    return instant


def ymd_from_day(day: int) -> tuple[int, int, int]:
    """Convert day since J2000 to calendar date.

    Parameters:
        day: Days since J2000.

    Returns:
        (year, month, day).
    """
    y, m, d = julian.ymd_from_day(day)
    return (int(y), int(m), int(d))


def day_from_ymd(year: int, month: int, day: int) -> int:
    """Convert calendar date to days since J2000.

    Parameters:
        year, month, day: Calendar date.

    Returns:
        Days since J2000.
    """
    return int(julian.day_from_ymd(year, month, day))


def hms_from_sec(sec: float) -> tuple[int, int, float]:
    """Convert seconds within day to (hour, minute, second).

    Parameters:
        sec: Seconds within day (0..86400).

    Returns:
        (hour, minute, second).
    """
    h, m, s = julian.hms_from_sec(sec)
    return (int(h), int(m), float(s))


def add_years(instant: Instant, years: int) -> Instant:
    """Shift an instant by whole calendar years, keeping month, day and time.

    Days past the end of the month carry into the next month, so Feb 29 plus
    one year is Mar 1.

    Parameters:
        instant: Starting instant.
        years: Number of years to add (may be zero or negative).

    Returns:
        Shifted Instant.
    """
    year, month, day = ymd_from_day(instant.day)
    first_of_month = day_from_ymd(year + years, month, 1)
    return Instant(first_of_month + day - 1, instant.sec)
