# trade_journal.processing package
from .transactions import (
    OptionTransaction,
    group_by_contract,
    fifo_match,
    match_option_trades,
)
