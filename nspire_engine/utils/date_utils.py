"""Date manipulation utilities"""

from datetime import date, timedelta


def add_calendar_days(from_date: date, days: int) -> date:
    """Add calendar days to a date (repair clocks run on calendar days, not business days)"""
    return from_date + timedelta(days=days)


def is_heating_season(day: date | None = None) -> bool:
    """Oct 1 - Mar 31"""
    month = (day or date.today()).month
    return month >= 10 or month <= 3


def is_cooling_season(day: date | None = None) -> bool:
    """Apr 1 - Sep 30"""
    month = (day or date.today()).month
    return 4 <= month <= 9
