"""
Tests for CSV tokenizing, format detection and parse_csv dispatch.
"""

import pytest

from trade_journal.exceptions import CSVFormatError
from trade_journal.parsers import GenericParser, RobinhoodParser
from trade_journal.processing.csv_text import (
    detect_parser,
    non_blank_lines,
    parse_csv,
    read_csv_rows,
    split_csv_line,
)


class TestSplitCsvLine:

    def test_comma_inside_quotes_is_not_a_delimiter(self):
        fields = split_csv_line('"Option, Inc",100,BTO')
        assert fields == ["Option, Inc", "100", "BTO"]

    def test_plain_line(self):
        assert split_csv_line("a,b,,d") == ["a", "b", "", "d"]

    def test_empty_line(self):
        assert split_csv_line("") == []


class TestReadCsvRows:

    def test_blank_lines_discarded(self):
        text = "\nsymbol,qty\n\n   \nAAPL,1\n\n"
        assert non_blank_lines(text) == ["symbol,qty", "AAPL,1"]
        headers, rows = read_csv_rows(text)
        assert headers == ["symbol", "qty"]
        assert rows == [["AAPL", "1"]]

    def test_headers_trimmed_and_lowercased(self):
        headers, _ = read_csv_rows(" Date_Open , SYMBOL\n2024-01-01,aapl")
        assert headers == ["date_open", "symbol"]

    def test_header_only_is_empty(self):
        assert read_csv_rows("date_open,date_close\n") == ([], [])

    def test_header_without_names_raises(self):
        with pytest.raises(CSVFormatError):
            read_csv_rows(",,\n1,2,3")

    def test_unclosed_quote_stays_on_its_line(self):
        text = (
            "date_open,date_close,symbol,notes\n"
            "2024-01-05,2024-01-05,AAPL,\"oops\n"
            "2024-01-06,2024-01-06,MSFT,ok\n"
            "2024-01-07,2024-01-07,TSLA,ok\n"
        )
        _, rows = read_csv_rows(text)
        assert len(rows) == 3

        candidates = parse_csv(text)
        assert [c.symbol for c in candidates] == ["AAPL", "MSFT", "TSLA"]
        assert candidates[0].notes == "oops"

    def test_line_break_inside_quotes_splits_the_row(self, robinhood_csv):
        _, rows = read_csv_rows(robinhood_csv)
        cells = [cell for row in rows for cell in row]
        assert "Apple" in cells
        assert not any("AppleCUSIP" in cell for cell in cells)


class TestParseCsv:

    @pytest.mark.parametrize("text", ["", "   \n\n", "date_open,date_close,symbol"])
    def test_degenerate_input_returns_empty(self, text):
        assert parse_csv(text) == []

    def test_none_input_returns_empty(self):
        assert parse_csv(None) == []

    def test_generic_dispatch(self, generic_csv):
        candidates = parse_csv(generic_csv)
        assert len(candidates) == 1
        assert candidates[0].symbol == "AAPL"

    def test_robinhood_dispatch(self, robinhood_csv):
        candidates = parse_csv(robinhood_csv)
        assert len(candidates) == 2
        assert all(c.notes == "SPY 1/19/2024 Call $480.00" for c in candidates)


class TestDetectParser:

    def test_signature_columns_select_robinhood(self):
        headers = ["activity date", "instrument", "description", "trans code", "amount"]
        assert isinstance(detect_parser(headers), RobinhoodParser)

    def test_one_signature_column_is_not_enough(self):
        assert isinstance(detect_parser(["activity date", "symbol"]), GenericParser)
