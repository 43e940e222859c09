"""
Cash flow statement generator (indirect method).

Flows are tagged against the reporting periods; opening and closing cash are
instants, so they use the balance sheet contexts either side of each period.
"""

from typing import List, Optional

from markupsafe import Markup

from ixaccounts.ixbrl_engine import concepts
from ixaccounts.ixbrl_engine.contexts import (
    CURRENT_INSTANT,
    CURRENT_PERIOD,
    OPENING_INSTANT,
    PREVIOUS_INSTANT,
    PREVIOUS_PERIOD,
    previous_period,
)
from ixaccounts.ixbrl_engine.models import (
    CashFlowData,
    ComparativeCashFlow,
    EntitySize,
    FilingContext,
)
from ixaccounts.ixbrl_engine.rendering import render
from ixaccounts.ixbrl_engine.statements.common import Columns, Row, amount_row, column_headings, subheading_row

LABELS = dict(CashFlowData.ENTRY_LINES + CashFlowData.COMPUTED_LINES)

OPERATING_ADJUSTMENTS = (
    "depreciation",
    "amortisation",
    "interest_payable",
    "interest_receivable",
    "gain_on_disposal",
    "increase_in_stocks",
    "increase_in_debtors",
    "increase_in_creditors",
)
OPERATING_PAYMENTS = ("interest_paid", "tax_paid")
INVESTING_LINES = (
    "purchase_of_tangible_assets",
    "purchase_of_intangible_assets",
    "purchase_of_investments",
    "proceeds_from_disposals",
)
FINANCING_LINES = (
    "proceeds_from_share_issue",
    "new_loans_received",
    "repayment_of_borrowings",
    "dividends_paid",
)


class _Renderer:
    """Row builder bound to one current/prior pair."""

    def __init__(self, current: CashFlowData, previous: Optional[CashFlowData], unit: str):
        self.current = current
        self.previous = previous
        self.unit = unit
        comparative = previous is not None
        self.flows = Columns(CURRENT_PERIOD, PREVIOUS_PERIOD if comparative else None)
        self.opening = Columns(PREVIOUS_INSTANT, OPENING_INSTANT if comparative else None)
        self.closing = Columns(CURRENT_INSTANT, PREVIOUS_INSTANT if comparative else None)

    def _values(self, name: str):
        previous = getattr(self.previous, name) if self.previous is not None else None
        return getattr(self.current, name), previous

    def row(self, name: str, columns: Optional[Columns] = None, mandatory: bool = False, total: bool = False) -> Row:
        current, previous = self._values(name)
        return amount_row(
            LABELS[name],
            concepts.CASH_FLOW[name],
            current,
            previous,
            columns or self.flows,
            self.unit,
            mandatory=mandatory,
            total=total,
        )

    def optional_rows(self, names) -> List[Row]:
        return [
            self.row(name)
            for name in names
            if any(value is not None for value in self._values(name))
        ]


def generate_cash_flow(
    context: FilingContext,
    size: EntitySize,
    record: ComparativeCashFlow,
) -> Markup:
    """Render the cash flow statement. Tier gating is applied by the caller."""
    renderer = _Renderer(record.current_year, record.previous_year, context.currency)
    columns = renderer.flows
    prior_end = previous_period(context.period_start)[1] if context.period_start else None

    rows: List[Row] = [subheading_row("Cash flows from operating activities")]
    rows.append(renderer.row("profit_before_tax", mandatory=True))
    rows.extend(renderer.optional_rows(OPERATING_ADJUSTMENTS))
    rows.append(renderer.row("cash_generated_from_operations", total=True))
    rows.extend(renderer.optional_rows(OPERATING_PAYMENTS))
    rows.append(renderer.row("net_operating_cash", total=True))

    rows.append(subheading_row("Cash flows from investing activities"))
    rows.extend(renderer.optional_rows(INVESTING_LINES))
    rows.append(renderer.row("net_investing_cash", total=True))

    rows.append(subheading_row("Cash flows from financing activities"))
    rows.extend(renderer.optional_rows(FINANCING_LINES))
    rows.append(renderer.row("net_financing_cash", total=True))

    rows.append(renderer.row("net_change_in_cash", total=True))
    rows.append(renderer.row("opening_cash", columns=renderer.opening, mandatory=True))
    rows.append(renderer.row("closing_cash", columns=renderer.closing, mandatory=True, total=True))

    return render(
        "statements/period_statement.xhtml.j2",
        section_class="cash-flow",
        title="Cash Flow Statement",
        period_end=context.period_end,
        headings=column_headings(context, columns, prior_end),
        currency=context.currency,
        rows=rows,
        table_class="statement",
    )
