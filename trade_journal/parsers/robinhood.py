"""
Robinhood activity parser: turns option ledger rows into transactions and
hands them to the FIFO matcher.
"""
from typing import Dict, List, Optional, Sequence

from trade_journal.config import BROKER_DATE_FORMATS, OPTION_TRANS_CODES
from trade_journal.models import TradeCandidate
from trade_journal.processing.transactions import OptionTransaction, match_option_trades
from .base import BaseTradeParser
from .helpers import parse_currency, parse_mixed_date, parse_quantity


class RobinhoodParser(BaseTradeParser):
    """
    Parses rows from a Robinhood activity CSV export. Columns include:
      Activity Date, Process Date, Settle Date, Instrument, Description,
      Trans Code, Quantity, Price, Amount
    e.g.
      '1/5/2024', '1/5/2024', '1/8/2024', 'SPY', 'SPY 1/19/2024 Call $480.00',
      'BTO', '2', '$1.00', '($200.00)'
    Only option legs (BTO, STC, STO, BTC) are kept; everything else
    (stock buys, dividends, transfers, the footer disclaimer) is skipped.
    """
    name = "robinhood"

    def parse_row(self, record: Dict[str, str]) -> Optional[OptionTransaction]:
        code = record.get("trans code", "").upper()
        if code not in OPTION_TRANS_CODES:
            return None

        instrument = record.get("instrument", "")
        description = record.get("description", "")
        if not instrument or not description:
            return None

        tx_date = parse_mixed_date(record.get("activity date"), BROKER_DATE_FORMATS)
        if tx_date is None:
            return None

        return OptionTransaction(
            date=tx_date,
            code=code,
            instrument=instrument,
            description=description,
            qty=abs(parse_quantity(record.get("quantity"))),
            amount=parse_currency(record.get("amount")),
        )

    def parse(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> List[TradeCandidate]:
        transactions = super().parse(headers, rows)
        return match_option_trades(transactions)
