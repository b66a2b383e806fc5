"""Locale-aware date rendering backed by Babel's CLDR data."""

import datetime
from typing import Union

from babel.dates import format_date as babel_format_date

from infrastructure.i18n.models import Locale

DateLike = Union[datetime.date, datetime.datetime]

# Long month name with numeric day and year: "5 mars 2024" / "March 5, 2024".
DATE_FORMAT = "long"


def format_date(value: DateLike, locale: Locale) -> str:
    """Render ``value`` as a long date in ``locale``.

    Datetimes are rendered from their own calendar date; no timezone
    conversion is applied.
    """
    if isinstance(value, datetime.datetime):
        value = value.date()
    return babel_format_date(value, format=DATE_FORMAT, locale=locale.babel_code)


class DateFormatter:
    """Formats dates for a single locale."""

    def __init__(self, locale: Locale):
        self.locale = locale

    def format(self, value: DateLike) -> str:
        return format_date(value, self.locale)
