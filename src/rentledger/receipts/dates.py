"""Calendar date extraction from receipt text.

Only the first three-part numeric date (``/``, ``-`` or ``.`` separated) is
considered. A four-digit first part means year-month-day. Otherwise the
third part is the year (two or four digits) and the first two parts are
read per the configured convention. A candidate that is not a real calendar
date is dropped; other orderings are not retried.
"""

import re
from datetime import date
from typing import Literal

DateConvention = Literal["day-first", "month-first"]

_DATE_RE = re.compile(r"(?<!\d)(\d{1,4})[/.\-](\d{1,2})[/.\-](\d{1,4})(?!\d)")


def interpret_date_parts(
    first: str,
    second: str,
    third: str,
    convention: DateConvention = "day-first",
    century_prefix: str = "20",
) -> date | None:
    """Turn three numeric date parts into a date, or None if they do not form one."""
    if len(first) == 4:
        year, month, day = first, second, third
    elif len(third) in (2, 4):
        year = century_prefix + third if len(third) == 2 else third
        if convention == "month-first":
            month, day = first, second
        else:
            day, month = first, second
    else:
        return None

    try:
        return date(int(year), int(month), int(day))
    except ValueError:
        return None


def extract_date(
    text: str,
    convention: DateConvention = "day-first",
    century_prefix: str = "20",
) -> date | None:
    """Return the date named by the first date-shaped substring of ``text``."""
    match = _DATE_RE.search(text)
    if match is None:
        return None
    return interpret_date_parts(*match.groups(), convention=convention, century_prefix=century_prefix)
