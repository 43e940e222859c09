"""
Context and unit declarations for the hidden ix:header block.

Context ids are fixed strings shared with the statement generators:
durations ``current``/``previous`` and instants ``balance-sheet``/
``balance-sheet-previous``. ``balance-sheet-opening`` is the instant before
the prior period and is only needed for prior-year opening cash.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional, Tuple

from markupsafe import Markup

from ixaccounts.ixbrl_engine.concepts import COMPANIES_HOUSE_SCHEME
from ixaccounts.ixbrl_engine.models import FilingContext
from ixaccounts.ixbrl_engine.rendering import render
from ixaccounts.ixbrl_engine.tagging import PURE_UNIT

CURRENT_PERIOD = "current"
PREVIOUS_PERIOD = "previous"
CURRENT_INSTANT = "balance-sheet"
PREVIOUS_INSTANT = "balance-sheet-previous"
OPENING_INSTANT = "balance-sheet-opening"


@dataclass(frozen=True)
class ContextDeclaration:
    """One xbrli:context: either a duration or an instant."""
    id: str
    start: Optional[date] = None
    end: Optional[date] = None
    instant: Optional[date] = None

    @property
    def is_instant(self) -> bool:
        return self.instant is not None


def _shift_years(value: date, years: int) -> date:
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        # 29 February in a non-leap year
        return value.replace(year=value.year + years, day=28)


def previous_period(period_start: date) -> Tuple[date, date]:
    """The twelve months ending the day before ``period_start``."""
    end = period_start - timedelta(days=1)
    start = _shift_years(end, -1) + timedelta(days=1)
    return start, end


def build_contexts(
    context: FilingContext,
    comparatives: bool = False,
    cash_flow: bool = False,
    cash_flow_comparatives: bool = False,
) -> List[ContextDeclaration]:
    """
    Declarations needed by a document.

    Args:
        context: Filing identity and period.
        comparatives: Any prior-year record is rendered.
        cash_flow: A cash flow statement is rendered (tags opening cash).
        cash_flow_comparatives: The cash flow has a prior-year column.
    """
    balance_sheet_date = context.balance_sheet_date or context.period_end
    declarations = [
        ContextDeclaration(CURRENT_PERIOD, start=context.period_start, end=context.period_end),
        ContextDeclaration(CURRENT_INSTANT, instant=balance_sheet_date),
    ]

    if context.period_start is None:
        return declarations

    previous_start, previous_end = previous_period(context.period_start)
    if comparatives:
        declarations.append(
            ContextDeclaration(PREVIOUS_PERIOD, start=previous_start, end=previous_end)
        )
    if comparatives or cash_flow:
        declarations.append(ContextDeclaration(PREVIOUS_INSTANT, instant=previous_end))
    if cash_flow_comparatives:
        declarations.append(
            ContextDeclaration(OPENING_INSTANT, instant=previous_start - timedelta(days=1))
        )
    return declarations


def render_context(declaration: ContextDeclaration, company_number: str) -> Markup:
    return render(
        "ix_context.xhtml.j2",
        declaration=declaration,
        scheme=COMPANIES_HOUSE_SCHEME,
        company_number=company_number,
    )


def render_units(currency: str) -> Markup:
    return render("ix_units.xhtml.j2", currency=currency, pure_unit=PURE_UNIT)


def render_header_block(
    context: FilingContext,
    declarations: List[ContextDeclaration],
    schema_url: str,
) -> Markup:
    """Hidden ix:header with schema reference, contexts and units."""
    return render(
        "ix_header.xhtml.j2",
        schema_url=schema_url,
        contexts=[render_context(declaration, context.company_number) for declaration in declarations],
        units=render_units(context.currency),
    )
