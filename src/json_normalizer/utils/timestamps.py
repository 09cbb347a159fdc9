"""RFC 3339 timestamp detection."""

import calendar
import re
from datetime import datetime
from typing import Optional

# Seconds in one 400-year Gregorian cycle; datetime has no year 0.
GREGORIAN_CYCLE_YEARS = 400
GREGORIAN_CYCLE_SECONDS = 146097 * 86400

_RFC3339 = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r"T(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    r"(?:\.[0-9]+)?"
    r"(?:(?P<utc>Z)|(?P<sign>[+-])(?P<tz_hour>[0-9]{2}):(?P<tz_minute>[0-9]{2}))"
)


def parse_rfc3339(value: str) -> Optional[int]:
    """
    Parse an RFC 3339 date-time into Unix epoch seconds.

    Args:
        value: Candidate string, e.g. "2023-01-15T10:30:00Z"

    Returns:
        Whole seconds since 1970-01-01T00:00:00Z (negative before 1970,
        fractional seconds discarded), or None if the string is not a
        valid RFC 3339 timestamp
    """
    match = _RFC3339.fullmatch(value)
    if match is None:
        return None

    year = int(match.group("year"))
    shift = 0
    if year == 0:
        year += GREGORIAN_CYCLE_YEARS
        shift = GREGORIAN_CYCLE_SECONDS

    try:
        moment = datetime(
            year,
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second")),
        )
    except ValueError:
        return None

    offset = 0
    if match.group("utc") is None:
        tz_hour = int(match.group("tz_hour"))
        tz_minute = int(match.group("tz_minute"))
        if tz_hour > 23 or tz_minute > 59:
            return None
        offset = tz_hour * 3600 + tz_minute * 60
        if match.group("sign") == "-":
            offset = -offset

    return calendar.timegm(moment.timetuple()) - shift - offset
