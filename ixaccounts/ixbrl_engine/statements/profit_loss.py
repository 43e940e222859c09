"""
Profit and loss account generator.

Detail depends on the size tier: micro entities show an abridged account,
small companies the standard Format 1 lines and medium/large companies add
cost of sales and gross profit.
"""

from typing import List, Optional, Sequence

from markupsafe import Markup

from ixaccounts.ixbrl_engine import concepts
from ixaccounts.ixbrl_engine.contexts import CURRENT_PERIOD, PREVIOUS_PERIOD, previous_period
from ixaccounts.ixbrl_engine.models import (
    ComparativeProfitLoss,
    EntitySize,
    FilingContext,
    ProfitLossData,
)
from ixaccounts.ixbrl_engine.rendering import render
from ixaccounts.ixbrl_engine.size_policy import ProfitLossFormat, get_size_policy
from ixaccounts.ixbrl_engine.statements.common import Columns, Row, amount_row, column_headings

LABELS = dict(ProfitLossData.ENTRY_LINES + ProfitLossData.COMPUTED_LINES)

OPERATING_LINES = (
    "other_operating_income",
    "distribution_costs",
    "administrative_expenses",
    "other_operating_charges",
)
FINANCE_LINES = ("interest_receivable", "interest_payable")

# (line, kind) where kind is "mandatory", "optional" or "total"
LAYOUTS = {
    ProfitLossFormat.ABRIDGED: (
        ("turnover", "mandatory"),
        ("staff_costs", "optional"),
        ("tax_on_profit", "optional"),
        ("profit_for_financial_year", "mandatory"),
    ),
    ProfitLossFormat.STANDARD: (
        ("turnover", "mandatory"),
        ("cost_of_sales", "optional"),
        *((name, "optional") for name in OPERATING_LINES),
        ("operating_profit", "total"),
        *((name, "optional") for name in FINANCE_LINES),
        ("profit_before_tax", "total"),
        ("tax_on_profit", "optional"),
        ("profit_for_financial_year", "mandatory"),
    ),
    ProfitLossFormat.DETAILED: (
        ("turnover", "mandatory"),
        ("cost_of_sales", "optional"),
        ("gross_profit", "total"),
        *((name, "optional") for name in OPERATING_LINES),
        ("operating_profit", "total"),
        *((name, "optional") for name in FINANCE_LINES),
        ("profit_before_tax", "total"),
        ("tax_on_profit", "optional"),
        ("profit_for_financial_year", "mandatory"),
    ),
}


def _rows(
    layout: Sequence,
    current: ProfitLossData,
    previous: Optional[ProfitLossData],
    columns: Columns,
    unit: str,
) -> List[Row]:
    rows = []
    for name, kind in layout:
        current_value = getattr(current, name)
        previous_value = getattr(previous, name) if previous is not None else None
        if kind == "optional" and current_value is None and previous_value is None:
            continue
        rows.append(amount_row(
            LABELS[name],
            concepts.PROFIT_LOSS[name],
            current_value,
            previous_value,
            columns,
            unit,
            mandatory=kind == "mandatory",
            total=kind == "total" or name == "profit_for_financial_year",
        ))
    return rows


def generate_profit_loss(
    context: FilingContext,
    size: EntitySize,
    record: ComparativeProfitLoss,
) -> Markup:
    """Render the profit and loss account in the tier's format."""
    policy = get_size_policy(size)
    current = record.current_year
    previous = record.previous_year
    columns = Columns(CURRENT_PERIOD, PREVIOUS_PERIOD if previous is not None else None)
    prior_end = previous_period(context.period_start)[1] if context.period_start else None

    rows = _rows(LAYOUTS[policy.profit_loss_format], current, previous, columns, context.currency)

    return render(
        "statements/period_statement.xhtml.j2",
        section_class="profit-loss",
        title="Profit and Loss Account",
        period_end=context.period_end,
        headings=column_headings(context, columns, prior_end),
        currency=context.currency,
        rows=rows,
        table_class=f"statement profit-loss-{policy.profit_loss_format.value}",
    )
