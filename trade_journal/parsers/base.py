"""
Base parser abstraction for trade CSV rows.
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Sequence

logger = logging.getLogger(__name__)


def zip_row(headers: Sequence[str], values: Sequence[str]) -> Dict[str, str]:
    """Map header -> trimmed cell; short rows read as empty trailing cells."""
    return {
        h: (values[i].strip() if i < len(values) else '')
        for i, h in enumerate(headers)
    }


class BaseTradeParser(ABC):
    name = "base"

    @abstractmethod
    def parse_row(self, record: Dict[str, str]):  # noqa: U100
        """
        Parse one data row (already keyed by lowercased header) and return
        the parser's record for it, or None if the row is not usable.
        """
        pass

    def parse(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> List:
        """
        Parse every data row, dropping the ones `parse_row` rejects.
        File order is preserved.
        """
        out = []
        for line_no, values in enumerate(rows, start=2):
            parsed = self.parse_row(zip_row(headers, values))
            if parsed is None:
                logger.debug("%s parser dropped row %d: %r", self.name, line_no, values)
                continue
            out.append(parsed)
        return out
