import datetime
from typing import Optional, Union


def today() -> datetime.date:
    """
    Returns the current calendar date (no time-of-day component).
    """
    return datetime.date.today()


def as_date(value: Optional[Union[datetime.date, datetime.datetime]]) -> Optional[datetime.date]:
    """
    Truncates a datetime to its calendar date. Dates and None pass through.
    """
    # datetime is a subclass of date, so check it first
    if isinstance(value, datetime.datetime):
        return value.date()
    return value


def add_days(start_date: datetime.date, days: int) -> datetime.date:
    """
    Calculates the date N days after start_date.
    Negative values move backwards.
    """
    return as_date(start_date) + datetime.timedelta(days=days)


def days_until(end_date: datetime.date, reference: Optional[datetime.date] = None) -> int:
    """
    Calculates the number of days remaining until end_date.
    Returns negative numbers if the date has passed.
    """
    return (as_date(end_date) - as_date(reference or today())).days
