"""
config.py
---------
Centralized constants for parsing, matching and scoring trades.
"""
# Net P&L band (in dollars) treated as breakeven
BREAKEVEN_THRESHOLD = 0.01

# --- Brokerage options ledger ---
# Header columns that identify a Robinhood activity export (lowercased)
BROKER_SIGNATURE_COLUMNS = ("activity date", "trans code")

LONG_OPEN = "BTO"     # buy to open
LONG_CLOSE = "STC"    # sell to close
SHORT_OPEN = "STO"    # sell to open
SHORT_CLOSE = "BTC"   # buy to close
OPTION_TRANS_CODES = (LONG_OPEN, LONG_CLOSE, SHORT_OPEN, SHORT_CLOSE)

# Activity dates are M/D/YYYY; anything else goes through pandas' parser
BROKER_DATE_FORMATS = ("%m/%d/%Y",)

# --- Generic CSV ---
# Logical field -> accepted (lowercased) header spellings, in priority order
HEADER_ALIASES = {
    "date_open":    ("date_open", "dateopen", "date open", "open_date", "open date"),
    "time_open":    ("time_open", "timeopen", "time open"),
    "date_close":   ("date_close", "dateclose", "date close", "close_date", "close date"),
    "time_close":   ("time_close", "timeclose", "time close"),
    "symbol":       ("symbol", "ticker"),
    "side":         ("side",),
    "qty":          ("qty", "quantity"),
    "entry_price":  ("entry_price", "entryprice", "entry price", "entry"),
    "exit_price":   ("exit_price", "exitprice", "exit price", "exit"),
    "fees":         ("fees", "commission"),
    "strategy_tag": ("strategy_tag", "strategytag", "strategy tag", "strategy", "tag"),
    "notes":        ("notes",),
}

# --- Output ---
DEFAULT_OUTPUT_DIR = "data/cleaned"
TRADES_FILENAME = "trades.csv"
REPORT_FILENAME = "docs/report.html"
