"""
renderer.py
-----------
Render the journal summary report from a Jinja2 template.
"""
import logging
from pathlib import Path
from typing import List

from jinja2 import Template

from trade_journal.analysis.formatting import (
    format_currency,
    format_hold_time,
    format_percent,
    format_profit_factor,
)
from trade_journal.analysis.summary import (
    calculate_overall_stats,
    get_daily_stats,
    get_ticker_stats,
)
from trade_journal.models import Trade

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = Path(__file__).parent / "templates" / "report.html"


def build_report_context(trades: List[Trade]) -> dict:
    """Formatted overall, per-symbol, per-day and per-trade tables."""
    overall = calculate_overall_stats(trades)
    return {
        "overall": {
            "Trades": overall.total_trades,
            "Net P&L": format_currency(overall.net_pnl),
            "Win Rate": f"{overall.win_rate:.1f}%",
            "Profit Factor": format_profit_factor(overall.profit_factor),
            "Avg Win": format_currency(overall.avg_win),
            "Avg Loss": format_currency(-overall.avg_loss),
            "Expectancy": format_currency(overall.expectancy),
            "Max Drawdown": format_currency(-overall.max_drawdown),
            "Best Day": format_currency(overall.best_day),
            "Worst Day": format_currency(overall.worst_day),
            "Avg Hold": format_hold_time(overall.avg_hold_time),
        },
        "tickers": [
            {
                "symbol": s.symbol,
                "trades": s.trades,
                "net_pnl": format_currency(s.net_pnl),
                "win_rate": f"{s.win_rate:.1f}%",
                "profit_factor": format_profit_factor(s.profit_factor),
                "expectancy": format_currency(s.expectancy),
                "largest_win": format_currency(s.largest_win),
                "largest_loss": format_currency(s.largest_loss),
                "avg_hold_time": format_hold_time(s.avg_hold_time),
            }
            for s in get_ticker_stats(trades)
        ],
        "days": [
            {
                "date": d.date.isoformat(),
                "net_pnl": format_currency(d.net_pnl),
                "trades": d.trades,
                "wins": d.wins,
                "losses": d.losses,
            }
            for d in get_daily_stats(trades)
        ],
        "trades": [
            {
                "date_close": t.date_close.isoformat(),
                "symbol": t.symbol,
                "side": t.side.value,
                "qty": f"{t.qty:g}",
                "net_pnl": format_currency(t.net_pnl),
                "pnl_percent": format_percent(t.pnl_percent),
                "hold_time": format_hold_time(t.hold_time),
                "outcome": t.outcome.value,
                "strategy_tag": t.strategy_tag or "",
            }
            for t in sorted(trades, key=lambda t: t.date_close, reverse=True)
        ],
    }


def render_report(template_file, context: dict, output_file) -> str:
    """
    Render the provided Jinja2 template with context to output_file.
    Returns the rendered HTML.
    """
    with open(template_file, 'r', encoding='utf-8') as f:
        template_str = f.read()
    template = Template(template_str, autoescape=True)
    report_html = template.render(context)
    Path(output_file).parent.mkdir(parents=True, exist_ok=True)
    with open(output_file, 'w', encoding='utf-8') as f:
        f.write(report_html)
    logger.info("Report written to %s", output_file)
    return report_html
