"""Parsing of credential expiry timestamps and remaining-time display."""
import re
import time
from datetime import datetime

from ssoutil.errors import InvalidTimeFormatError

# Expiry times in the credential cache look like "2006-01-02 15:04:05 -0700 MST".
TIME_LAYOUT = "%Y-%m-%d %H:%M:%S %z"
_TIME_RE = re.compile(
    r"(?P<stamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} [+-]\d{4}) "
    r"(?P<zone>[A-Z]{3,5}|GMT[+-]\d{1,2})",
    re.ASCII,
)

EXPIRED = "Expired"
LONG_WIDTH = 5


def _now() -> float:
    return time.time()


def parse_time_string(value: str) -> int:
    """Convert '1970-01-01 00:00:00 +0000 GMT' style timestamps to epoch seconds."""
    match = _TIME_RE.fullmatch(value)
    if not match:
        raise InvalidTimeFormatError(f"Unable to parse time '{value}'")
    try:
        parsed = datetime.strptime(match.group("stamp"), TIME_LAYOUT)
    except ValueError as e:
        raise InvalidTimeFormatError(f"Unable to parse time '{value}': {e}") from e
    return int(parsed.timestamp())


def time_remain(expires: int, long: bool = False) -> str:
    """Return how long until the epoch time `expires` as '5h5m' / '5m'.

    With long=True the hours and minutes are separated by a space and the
    result is right-justified so columns line up ('5h 5m', '   5m').
    """
    delta = expires - _now()
    if delta <= 0:
        return EXPIRED

    # nearest minute, halves up
    minutes = int(delta // 60)
    if delta - minutes * 60 >= 30:
        minutes += 1
    if minutes == 0:
        return EXPIRED

    hours, minutes = divmod(minutes, 60)
    if long:
        text = f"{hours}h {minutes}m" if hours else f"{minutes}m"
        return text.rjust(LONG_WIDTH)
    return f"{hours}h{minutes}m" if hours else f"{minutes}m"
