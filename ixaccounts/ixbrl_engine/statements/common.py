"""
Row models and cell helpers shared by the statement generators.

Every tagged value still goes through tagging.py, and layout lives in the
templates. These helpers only turn record values into rows and cells.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import List, NamedTuple, Optional, Tuple, Union

from markupsafe import Markup

from ixaccounts.ixbrl_engine.models import ZERO, FilingContext
from ixaccounts.ixbrl_engine.tagging import tag_date, tag_monetary, tag_text

PLACEHOLDER = Markup('<span class="placeholder">Not provided</span>')
ABSENT = "-"

# Plain text is escaped by the templates; Markup is inserted as is
Cell = Union[str, Markup]


@dataclass(frozen=True)
class Columns:
    """Context references for the current and (optional) prior column."""
    current: str
    previous: Optional[str] = None

    @property
    def comparative(self) -> bool:
        return self.previous is not None


@dataclass(frozen=True)
class Row:
    """One table line: a label followed by its amount cells."""
    label: Cell
    cells: Tuple[Cell, ...] = ()
    total: bool = False
    subheading: bool = False


class Narrative(NamedTuple):
    title: str
    content: Cell


def year_label(value: Optional[date]) -> str:
    return str(value.year) if value else ""


def column_headings(context: FilingContext, columns: Columns, prior_end: Optional[date] = None) -> List[str]:
    """Year headings for the amount columns, current first."""
    headings = [year_label(context.period_end)]
    if columns.comparative:
        headings.append(year_label(prior_end))
    return headings


def monetary_cell(
    value: Optional[Decimal],
    concept: str,
    context_ref: str,
    unit: str,
    missing: Cell = ABSENT,
) -> Cell:
    if value is None:
        return missing
    return tag_monetary(value, concept, context_ref, unit)


def amount_row(
    label: str,
    concept: str,
    current: Optional[Decimal],
    previous: Optional[Decimal],
    columns: Columns,
    unit: str,
    mandatory: bool = False,
    total: bool = False,
) -> Row:
    """
    One statement line with its current and optional prior value.

    A missing mandatory current value renders a placeholder rather than
    failing; validation reports it separately. An optional line reported
    only for the prior year is tagged as zero for the current year.
    """
    if current is None and not mandatory and columns.comparative and previous is not None:
        current = ZERO
    cells = [
        monetary_cell(current, concept, columns.current, unit, PLACEHOLDER if mandatory else ABSENT),
    ]
    if columns.comparative:
        cells.append(monetary_cell(previous, concept, columns.previous, unit))
    return Row(label, tuple(cells), total=total)


def subheading_row(label: str) -> Row:
    return Row(label, subheading=True)


def tagged_text_or_placeholder(value: Optional[str], concept: str, context_ref: str) -> Markup:
    if not value:
        return PLACEHOLDER
    return tag_text(value, concept, context_ref)


def tagged_date_or_placeholder(value: Optional[date], concept: str, context_ref: str) -> Markup:
    if value is None:
        return PLACEHOLDER
    return tag_date(value, concept, context_ref)
