"""Named recency windows used by the item and flashcard listings."""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta, timezone
from typing import Optional

DATE_FILTERS = ('all', 'day', 'week', 'biweekly', 'month')

_DAY_WINDOWS = {
    'day': 1,
    'week': 7,
    'biweekly': 14,
}


def subtract_months(moment: datetime, months: int) -> datetime:
    """Step back ``months`` calendar months, clamping the day to the target month's length."""

    month_index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def date_threshold(date_filter: Optional[str], now: Optional[datetime] = None) -> Optional[datetime]:
    """
    Return the earliest ``created_at`` admitted by ``date_filter``.

    ``None`` means no lower bound (the ``all`` filter). Raises ``ValueError``
    for an unknown filter name.
    """
    name = (date_filter or 'all').strip().lower()
    if name not in DATE_FILTERS:
        raise ValueError(f"Unknown date filter '{date_filter}'")
    if name == 'all':
        return None

    now = now or datetime.now(timezone.utc)
    if name == 'month':
        return subtract_months(now, 1)
    return now - timedelta(days=_DAY_WINDOWS[name])
