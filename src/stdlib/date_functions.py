"""
nativekit date helpers
Millisecond timestamps and simplified ISO 8601 parsing
"""

import calendar
import re
import time
from typing import Union

_ISO_DATE = re.compile(
    r'^(\d{4})'                  # year
    r'(?:-(\d{2})'               # month
    r'(?:-(\d{2})'               # day
    r'(?:T(\d{2}):(\d{2})'       # hours and minutes
    r'(?::(\d{2})(?:\.(\d{3}))?)?'  # seconds and milliseconds
    r'(?:Z|([-+])(\d{2}):(\d{2}))?'  # UTC offset
    r')?)?)?$'
)

def now() -> int:
    """Milliseconds since the Unix epoch"""
    return int(time.time() * 1000)

def parse(text: str) -> Union[int, float]:
    """
    Milliseconds since the epoch for a simplified ISO 8601 string.

    Accepts ``YYYY``, ``YYYY-MM``, ``YYYY-MM-DD`` and
    ``YYYY-MM-DDTHH:MM[:SS[.sss]][Z|+HH:MM|-HH:MM]``. Times without an
    offset are UTC. Returns NaN for anything else, including offsets
    beyond 23:59 and out-of-range fields.
    """
    if not isinstance(text, str):
        return float('nan')
    match = _ISO_DATE.match(text)
    if match is None:
        return float('nan')

    year, month, day, hour, minute, second, millis, sign, off_hour, off_minute = match.groups()
    month = int(month or 1)
    day = int(day or 1)
    hour, minute, second = int(hour or 0), int(minute or 0), int(second or 0)
    millis = int(millis or 0)

    offset = 0
    if sign:
        off_hour, off_minute = int(off_hour), int(off_minute)
        if off_hour > 23 or off_minute > 59:
            return float('nan')
        # local time east of UTC is ahead of UTC
        offset = (off_hour * 60 + off_minute) * 60000 * (-1 if sign == '+' else 1)

    if int(year) < 1 or not 1 <= month <= 12 or hour > 24 or minute > 59 or second > 59:
        return float('nan')
    if not 1 <= day <= calendar.monthrange(int(year), month)[1]:
        return float('nan')
    if hour == 24 and (minute or second or millis):
        return float('nan')

    days = calendar.timegm((int(year), month, day, 0, 0, 0)) // 86400
    seconds = days * 86400 + hour * 3600 + minute * 60 + second
    return seconds * 1000 + millis + offset
