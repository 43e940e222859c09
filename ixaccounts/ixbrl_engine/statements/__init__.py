"""
Statement generators.

Each generator is a pure function ``(context, size, record) -> str`` that
returns one XHTML fragment built from the tag primitives.
"""

from ixaccounts.ixbrl_engine.statements.balance_sheet import generate_balance_sheet
from ixaccounts.ixbrl_engine.statements.cash_flow import generate_cash_flow
from ixaccounts.ixbrl_engine.statements.directors_report import generate_directors_report
from ixaccounts.ixbrl_engine.statements.notes import generate_accounting_policies, generate_notes
from ixaccounts.ixbrl_engine.statements.profit_loss import generate_profit_loss
from ixaccounts.ixbrl_engine.statements.strategic_report import generate_strategic_report

__all__ = [
    "generate_balance_sheet",
    "generate_profit_loss",
    "generate_cash_flow",
    "generate_strategic_report",
    "generate_directors_report",
    "generate_notes",
    "generate_accounting_policies",
]
