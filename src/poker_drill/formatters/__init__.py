"""Output formatting for terminal and tables."""

from poker_drill.formatters.text import TextFormatter
from poker_drill.formatters.table import TableFormatter

__all__ = ["TextFormatter", "TableFormatter"]
