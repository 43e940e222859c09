"""
Balance sheet generator (Companies Act Format 1, vertical).
"""

from datetime import date
from typing import List, Optional

from markupsafe import Markup

from ixaccounts.ixbrl_engine import concepts
from ixaccounts.ixbrl_engine.contexts import CURRENT_INSTANT, CURRENT_PERIOD, PREVIOUS_INSTANT, previous_period
from ixaccounts.ixbrl_engine.models import (
    BalanceSheetData,
    ComparativeBalanceSheet,
    EntitySize,
    FilingContext,
)
from ixaccounts.ixbrl_engine.rendering import render
from ixaccounts.ixbrl_engine.statements.common import (
    Columns,
    Row,
    amount_row,
    column_headings,
    subheading_row,
    tagged_date_or_placeholder,
    tagged_text_or_placeholder,
)

FIXED_ASSET_LINES = ("intangible_assets", "tangible_assets", "investments")
CURRENT_ASSET_LINES = ("stocks", "debtors", "cash")
RESERVE_LINES = ("share_premium", "revaluation_reserve", "other_reserves")

LABELS = dict(BalanceSheetData.ENTRY_LINES + BalanceSheetData.COMPUTED_LINES)


def _present(record: Optional[BalanceSheetData], name: str) -> bool:
    return record is not None and getattr(record, name) is not None


def _value(record: Optional[BalanceSheetData], name: str):
    return getattr(record, name) if record is not None else None


def _row(
    name: str,
    current: BalanceSheetData,
    previous: Optional[BalanceSheetData],
    columns: Columns,
    unit: str,
    mandatory: bool = False,
    total: bool = False,
    label: Optional[str] = None,
) -> Row:
    return amount_row(
        label or LABELS[name],
        concepts.BALANCE_SHEET[name],
        getattr(current, name),
        _value(previous, name),
        columns,
        unit,
        mandatory=mandatory,
        total=total,
    )


def _optional_rows(names, current, previous, columns, unit) -> List[Row]:
    return [
        _row(name, current, previous, columns, unit)
        for name in names
        if _present(current, name) or _present(previous, name)
    ]


def generate_balance_sheet(
    context: FilingContext,
    size: EntitySize,
    record: ComparativeBalanceSheet,
    approval_date: Optional[date] = None,
    signatory: str = "",
) -> Markup:
    """
    Render the balance sheet with optional prior-year column.

    Args:
        context: Filing identity and period.
        size: Resolved size tier.
        record: Current and optional prior-year balance sheet.
        approval_date: Board approval date tagged in the approval statement.
        signatory: Director signing on behalf of the board.
    """
    current = record.current_year
    previous = record.previous_year
    unit = context.currency
    columns = Columns(CURRENT_INSTANT, PREVIOUS_INSTANT if previous is not None else None)
    prior_end = previous_period(context.period_start)[1] if context.period_start else None

    rows: List[Row] = []

    fixed = _optional_rows(FIXED_ASSET_LINES, current, previous, columns, unit)
    if fixed:
        rows.append(subheading_row("Fixed assets"))
        rows.extend(fixed)
        rows.append(_row("fixed_assets", current, previous, columns, unit, total=True))

    rows.append(subheading_row("Current assets"))
    rows.extend(_optional_rows(CURRENT_ASSET_LINES, current, previous, columns, unit))
    rows.append(_row("current_assets", current, previous, columns, unit, total=True))

    rows.extend(_optional_rows(("creditors_within_one_year",), current, previous, columns, unit))
    rows.append(_row("net_current_assets", current, previous, columns, unit, total=True))
    rows.append(_row("total_assets_less_current_liabilities", current, previous, columns, unit, total=True))

    rows.extend(_optional_rows(("creditors_after_one_year", "provisions"), current, previous, columns, unit))
    rows.append(_row("net_assets", current, previous, columns, unit, total=True))

    rows.append(subheading_row("Capital and reserves"))
    rows.append(_row("called_up_share_capital", current, previous, columns, unit, mandatory=True))
    rows.extend(_optional_rows(RESERVE_LINES, current, previous, columns, unit))
    rows.append(_row("profit_and_loss_account", current, previous, columns, unit, mandatory=True))
    rows.append(_row(
        "capital_and_reserves", current, previous, columns, unit, total=True,
        label="Shareholders' funds",
    ))

    return render(
        "statements/balance_sheet.xhtml.j2",
        as_at=context.balance_sheet_date,
        headings=column_headings(context, columns, prior_end),
        currency=unit,
        rows=rows,
        small_companies_regime=size in (EntitySize.MICRO, EntitySize.SMALL),
        approved_on=tagged_date_or_placeholder(approval_date, concepts.APPROVAL_DATE, CURRENT_PERIOD),
        signed_by=tagged_text_or_placeholder(signatory, concepts.DIRECTOR_SIGNING_ACCOUNTS, CURRENT_PERIOD),
    )
