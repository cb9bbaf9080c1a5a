# trade_journal.report package
from .renderer import DEFAULT_TEMPLATE, build_report_context, render_report
