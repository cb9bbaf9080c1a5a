"""
csv_text.py
-----------
Turn raw CSV text into trade candidates: tokenize, detect the export
format, and dispatch to the matching parser.
"""
import csv
import logging
from typing import List, Sequence, Tuple

from trade_journal.config import BROKER_SIGNATURE_COLUMNS
from trade_journal.exceptions import CSVFormatError
from trade_journal.models import TradeCandidate
from trade_journal.parsers import BaseTradeParser, GenericParser, RobinhoodParser

logger = logging.getLogger(__name__)


def split_csv_line(line: str) -> List[str]:
    """
    Split one CSV line into fields. Commas inside double quotes are not
    delimiters:  '"Option, Inc",100,BTO' -> ['Option, Inc', '100', 'BTO']
    """
    return next(csv.reader([line]), [])


def non_blank_lines(text: str) -> List[str]:
    return [line for line in text.splitlines() if line.strip()]


def read_csv_rows(text: str) -> Tuple[List[str], List[List[str]]]:
    """
    Return (headers, data rows). Headers are trimmed and lowercased.
    Returns ([], []) when there is no header plus at least one data line.
    Each physical line is one row, so an unclosed quote ends with its line.
    """
    lines = non_blank_lines(text)
    if len(lines) < 2:
        return [], []

    headers = [h.strip().lower() for h in split_csv_line(lines[0])]
    if not any(headers):
        raise CSVFormatError("CSV header row has no column names")
    rows = [split_csv_line(line) for line in lines[1:]]
    rows = [row for row in rows if any(cell.strip() for cell in row)]
    return headers, rows


def detect_parser(headers: Sequence[str]) -> BaseTradeParser:
    """Robinhood options ledger if its signature columns are present, else generic."""
    if all(col in headers for col in BROKER_SIGNATURE_COLUMNS):
        return RobinhoodParser()
    return GenericParser()


def parse_csv(text: str) -> List[TradeCandidate]:
    """
    Parse raw CSV text into trade candidates. Empty input, or a header with
    no data rows, gives an empty list. Unusable rows are dropped.
    """
    headers, rows = read_csv_rows(text or "")
    if not rows:
        logger.debug("No data rows in CSV input")
        return []

    parser = detect_parser(headers)
    candidates = parser.parse(headers, rows)
    logger.info("Parsed %d trade(s) from %d %s row(s)", len(candidates), len(rows), parser.name)
    return candidates
