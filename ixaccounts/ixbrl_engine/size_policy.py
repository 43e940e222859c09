"""
Size-tier policy tables.

All decisions that depend on the entity size tier live here so the statement
generators and the validator read one table instead of branching on tier names.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from ixaccounts.ixbrl_engine.models import EntitySize

DEFAULT_TAXONOMY_VERSION = "2025-01-01"
SCHEMA_BASE_URL = "http://xbrl.frc.org.uk/fr"


class ProfitLossFormat(str, Enum):
    """Level of detail shown in the profit and loss account."""
    ABRIDGED = "abridged"  # profit for the year only
    STANDARD = "standard"
    DETAILED = "detailed"  # cost of sales and gross profit


# Note names checked by validation; attribute names on NotesData
NOTE_ACCOUNTING_POLICIES = "accounting_policies"
NOTE_EMPLOYEE_NUMBERS = "employee_numbers"
NOTE_EMPLOYEE_COSTS = "employee_costs"
NOTE_DIRECTORS_REMUNERATION = "directors_remuneration"


@dataclass(frozen=True)
class SizePolicy:
    """What a filing of one size tier must and may contain."""
    size: EntitySize
    include_strategic_report: bool
    include_cash_flow: bool
    include_business_review: bool
    include_financial_instruments: bool
    include_directors_remuneration: bool
    profit_loss_format: ProfitLossFormat
    taxonomy_family: str
    framework: str
    alternative_frameworks: Tuple[str, ...]
    available_formats: Tuple[str, ...]
    disclosure_requirements: Tuple[str, ...]
    mandatory_notes: Tuple[str, ...]


SIZE_POLICIES: Dict[EntitySize, SizePolicy] = {
    EntitySize.MICRO: SizePolicy(
        size=EntitySize.MICRO,
        include_strategic_report=False,
        include_cash_flow=False,
        include_business_review=False,
        include_financial_instruments=False,
        include_directors_remuneration=False,
        profit_loss_format=ProfitLossFormat.ABRIDGED,
        taxonomy_family="uk-gaap-frs-105",
        framework="FRS 105 - The Financial Reporting Standard applicable to the Micro-entities Regime",
        alternative_frameworks=("UKSEF - UK Small Entities Framework",),
        available_formats=(
            "Micro-entity accounts (FRS 105 or UKSEF)",
            "Abridged accounts",
        ),
        disclosure_requirements=(
            "Basic balance sheet",
            "Notes to accounts (minimal)",
            "No P&L required for public filing",
        ),
        mandatory_notes=(NOTE_ACCOUNTING_POLICIES,),
    ),
    EntitySize.SMALL: SizePolicy(
        size=EntitySize.SMALL,
        include_strategic_report=False,
        include_cash_flow=False,
        include_business_review=False,
        include_financial_instruments=False,
        include_directors_remuneration=True,
        profit_loss_format=ProfitLossFormat.STANDARD,
        taxonomy_family="uk-gaap-frs-102",
        framework="FRS 102 Section 1A - Small Entities",
        alternative_frameworks=(
            "FRS 102 - Full Framework",
            "FRS 101 - Reduced Disclosure Framework",
        ),
        available_formats=(
            "Small company accounts (FRS 102 Section 1A)",
            "Abridged accounts",
            "Full accounts",
        ),
        disclosure_requirements=(
            "Balance sheet",
            "P&L account",
            "Notes to accounts",
            "Directors' report",
        ),
        mandatory_notes=(NOTE_ACCOUNTING_POLICIES, NOTE_EMPLOYEE_NUMBERS),
    ),
    EntitySize.MEDIUM: SizePolicy(
        size=EntitySize.MEDIUM,
        include_strategic_report=False,
        include_cash_flow=True,
        include_business_review=True,
        include_financial_instruments=False,
        include_directors_remuneration=True,
        profit_loss_format=ProfitLossFormat.DETAILED,
        taxonomy_family="uk-gaap-frs-102",
        framework="FRS 102 - The Financial Reporting Standard applicable in the UK and Republic of Ireland",
        alternative_frameworks=(
            "UK IFRS",
            "FRS 101 - Reduced Disclosure Framework",
        ),
        available_formats=(
            "Full accounts (FRS 102)",
            "Full accounts (UK IFRS)",
        ),
        disclosure_requirements=(
            "Balance sheet",
            "P&L account",
            "Cash flow statement",
            "Notes to accounts",
            "Directors' report",
            "Strategic report",
        ),
        mandatory_notes=(
            NOTE_ACCOUNTING_POLICIES,
            NOTE_EMPLOYEE_NUMBERS,
            NOTE_EMPLOYEE_COSTS,
            NOTE_DIRECTORS_REMUNERATION,
        ),
    ),
    EntitySize.LARGE: SizePolicy(
        size=EntitySize.LARGE,
        include_strategic_report=True,
        include_cash_flow=True,
        include_business_review=True,
        include_financial_instruments=True,
        include_directors_remuneration=True,
        profit_loss_format=ProfitLossFormat.DETAILED,
        taxonomy_family="uk-ifrs",
        framework="UK IFRS - International Financial Reporting Standards",
        alternative_frameworks=("FRS 102", "IFRS (full)"),
        available_formats=(
            "Full accounts (FRS 102)",
            "Full accounts (UK IFRS)",
            "Full accounts (IFRS)",
        ),
        disclosure_requirements=(
            "Balance sheet",
            "P&L account",
            "Cash flow statement",
            "Notes to accounts",
            "Directors' report",
            "Strategic report",
            "Corporate governance statement",
        ),
        mandatory_notes=(
            NOTE_ACCOUNTING_POLICIES,
            NOTE_EMPLOYEE_NUMBERS,
            NOTE_EMPLOYEE_COSTS,
            NOTE_DIRECTORS_REMUNERATION,
        ),
    ),
}


def get_size_policy(size: EntitySize) -> SizePolicy:
    """Policy for a tier."""
    return SIZE_POLICIES[EntitySize(size)]


def taxonomy_entry_point(size: EntitySize, version: str = DEFAULT_TAXONOMY_VERSION) -> str:
    """Taxonomy entry point name, e.g. ``uk-gaap-frs-102-2025-01-01``."""
    return f"{get_size_policy(size).taxonomy_family}-{version}"


def schema_ref(size: EntitySize, version: str = DEFAULT_TAXONOMY_VERSION) -> str:
    """Schema URL referenced from the document header."""
    return f"{SCHEMA_BASE_URL}/{version}/{taxonomy_entry_point(size, version)}.xsd"
