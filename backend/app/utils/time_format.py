"""Print-time parsing and formatting.

Print durations are entered either as bare minutes ("90") or in the
compound slicer style ("2h 30m", "1h", "45m"). Both forms resolve to
whole minutes.
"""

import re

_BARE_NUMBER_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*$")
_COMPOUND_RE = re.compile(
    r"^\s*(?:(?P<hours>\d+(?:\.\d+)?)\s*h)?\s*(?:(?P<minutes>\d+(?:\.\d+)?)\s*m)?\s*$",
    re.IGNORECASE,
)


class ParseError(ValueError):
    """Raised when a print-time string cannot be interpreted."""

    def __init__(self, value: object, message: str | None = None):
        self.value = value
        super().__init__(message or f"Cannot parse print time: {value!r}")


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def parse_time_to_minutes(value: str | int) -> int:
    """Parse a print time into total minutes.

    Accepts a non-negative integer (already minutes), a numeric string
    ("90") or an "<H>h <M>m" string where either part may be omitted.
    Anything else, including the empty string and negative durations,
    raises ParseError.
    """
    if isinstance(value, bool):
        raise ParseError(value)
    if isinstance(value, int):
        if value < 0:
            raise ParseError(value, f"Print time cannot be negative: {value}")
        return value
    if not isinstance(value, str):
        raise ParseError(value)

    bare = _BARE_NUMBER_RE.match(value)
    if bare:
        return _round_half_up(float(bare.group(1)))

    match = _COMPOUND_RE.match(value)
    if not match or (match.group("hours") is None and match.group("minutes") is None):
        raise ParseError(value)

    total = 0.0
    if match.group("hours") is not None:
        total += float(match.group("hours")) * 60
    if match.group("minutes") is not None:
        total += float(match.group("minutes"))
    return _round_half_up(total)


def format_time(minutes: int) -> str:
    """Format minutes as "45m", "2h" or "2h 30m"."""
    hours, mins = divmod(int(minutes), 60)
    if hours == 0:
        return f"{mins}m"
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}m"
