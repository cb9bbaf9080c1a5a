# trade_journal/parsers package
from .base import BaseTradeParser
from .generic import GenericParser
from .robinhood import RobinhoodParser
