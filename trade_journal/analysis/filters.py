"""Close-date filters for selecting the trades a report covers."""
from datetime import date, timedelta
from typing import Iterable, List, Optional

from trade_journal.models import Trade


def filter_by_close_date(trades: Iterable[Trade], start: Optional[date] = None,
                         end: Optional[date] = None) -> List[Trade]:
    """Trades closed within [start, end], both ends inclusive and optional."""
    return [
        t for t in trades
        if (start is None or t.date_close >= start)
        and (end is None or t.date_close <= end)
    ]


def filter_last_days(trades: Iterable[Trade], days: int, today: date) -> List[Trade]:
    """Trades closed in the `days` days up to and including `today`."""
    return filter_by_close_date(trades, today - timedelta(days=days), today)
