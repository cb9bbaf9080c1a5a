"""
Exception hierarchy for the trade journal.

Per-row data problems (bad dates, unparsable numbers, unmatched legs) are
never raised; rows are dropped and logged instead. These exceptions cover
input that cannot be interpreted at all.
"""


class TradeJournalError(Exception):
    """Base class for all trade journal errors."""


class CSVFormatError(TradeJournalError):
    """CSV text is structurally unusable (e.g. a header with no column names)."""


class TradeNotFoundError(TradeJournalError, KeyError):
    """No trade with the requested id exists in the store."""

    def __init__(self, trade_id: str):
        super().__init__(trade_id)
        self.trade_id = trade_id

    def __str__(self):
        return f"Trade not found: {self.trade_id}"
