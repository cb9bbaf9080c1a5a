# trade_journal/parsers/helpers.py

import math
import re
from datetime import date
from typing import Optional

import pandas as pd

# Longest numeric prefix; trailing text is ignored
_LEADING_NUMBER = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?')


def _leading_number(s: str, default: float) -> float:
    match = _LEADING_NUMBER.match(s)
    if not match:
        return default
    value = float(match.group(0))
    return value if math.isfinite(value) else default


def parse_currency(x, default: float = 0.0) -> float:
    """
    Convert strings like '$1,234.50', '-$200.00' or '($200.00)' into a float.
    Only the leading number counts, so '152.50abc' reads as 152.5.
    Returns `default` if the input is empty, can't be parsed, or isn't finite.
    """
    s = str(x).strip() if x is not None else ""
    negative = s.startswith("(") and s.endswith(")")
    if negative:
        s = s[1:-1]
    s = s.replace("$", "").replace(",", "").strip()
    value = _leading_number(s, default)
    return -value if negative else value


def parse_quantity(x, default: float = 0.0) -> float:
    """
    Parse a quantity cell. Broker exports sometimes tag quantities with a
    suffix (e.g. '1S'), so only the leading number is read.
    """
    s = str(x).strip().replace(",", "") if x is not None else ""
    return _leading_number(s, default)


def _to_date(ts) -> Optional[date]:
    if ts is None or pd.isnull(ts):
        return None
    return ts.date()


def parse_iso_date(s) -> Optional[date]:
    """Parse an ISO-8601 date (or datetime) string. None if absent or invalid."""
    s = str(s).strip() if s is not None else ""
    if not s:
        return None
    return _to_date(pd.to_datetime(s, format="ISO8601", errors="coerce"))


def parse_mixed_date(s, formats=("%m/%d/%Y",)) -> Optional[date]:
    """
    Attempt to parse a date string using known formats first,
    then fall back to automatic pandas parsing.

    Returns None if parsing fails entirely.
    """
    s = str(s).strip() if s is not None else ""
    if not s:
        return None
    for fmt in formats:
        try:
            return _to_date(pd.to_datetime(s, format=fmt))
        except (ValueError, TypeError):
            pass
    # fallback
    return _to_date(pd.to_datetime(s, errors="coerce"))


def optional_text(s) -> Optional[str]:
    """Stripped text, or None for a missing/blank cell."""
    if s is None:
        return None
    s = str(s).strip()
    return s or None
