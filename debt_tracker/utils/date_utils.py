"""Date manipulation utilities"""

from datetime import date, datetime, timedelta
from typing import List
from zoneinfo import ZoneInfo


def generate_date_range(start: date, end: date) -> List[date]:
    """Generate list of dates from start to end (inclusive), empty if end < start"""
    days = (end - start).days + 1
    return [start + timedelta(days=i) for i in range(max(days, 0))]


def weekday_ordinal(day: date) -> int:
    """Weekday with Sunday = 0 through Saturday = 6"""
    return day.isoweekday() % 7


def today_in(timezone: str) -> date:
    """Current calendar date in the given IANA timezone"""
    return datetime.now(ZoneInfo(timezone)).date()
