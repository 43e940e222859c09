"""
Filing validation.

The one place that decides whether a package can be filed. Generators never
raise on missing data; every problem is collected here as a readable message
and the orchestrator refuses to package while any remain.

Also hosts the post-composition reference check, which guards against
generator bugs rather than bad input.
"""

import re
from decimal import Decimal
from typing import List, Optional

import structlog

from ixaccounts.ixbrl_engine.models import (
    BalanceSheetData,
    CashFlowData,
    FilingPackage,
    ProfitLossData,
)
from ixaccounts.ixbrl_engine.packaging import COMPANY_NUMBER_PATTERN
from ixaccounts.ixbrl_engine.size_policy import (
    NOTE_ACCOUNTING_POLICIES,
    NOTE_DIRECTORS_REMUNERATION,
    NOTE_EMPLOYEE_COSTS,
    NOTE_EMPLOYEE_NUMBERS,
    get_size_policy,
)
from ixaccounts.ixbrl_engine.tagging import format_number

logger = structlog.get_logger(__name__)

NOTE_LABELS = {
    NOTE_ACCOUNTING_POLICIES: "accounting policies",
    NOTE_EMPLOYEE_NUMBERS: "employee numbers",
    NOTE_EMPLOYEE_COSTS: "employee costs",
    NOTE_DIRECTORS_REMUNERATION: "directors' remuneration",
}

CONTEXT_REF_PATTERN = re.compile(r'contextRef="([^"]*)"')
UNIT_REF_PATTERN = re.compile(r'unitRef="([^"]*)"')
CONTEXT_DECL_PATTERN = re.compile(r'<xbrli:context id="([^"]*)"')
UNIT_DECL_PATTERN = re.compile(r'<xbrli:unit id="([^"]*)"')


class FilingValidator:
    """
    Validator for a complete filing package.

    Checks:
    1. Company identity and accounting period
    2. Balance sheet balances (current and prior year)
    3. Mandatory statement lines and tier-required notes
    4. Directors' report approval
    5. Cash flow reconciles when it will be rendered
    """

    # Balance sheet tolerance in currency units
    TOLERANCE = Decimal("1")

    def __init__(self, tolerance: Optional[Decimal] = None):
        self.tolerance = self.TOLERANCE if tolerance is None else Decimal(tolerance)

    def validate(self, package: FilingPackage) -> List[str]:
        """
        Validate a package.

        Args:
            package: The filing package to check.

        Returns:
            List of error messages; empty when the package can be filed.
        """
        errors: List[str] = []
        errors.extend(self._validate_context(package))
        errors.extend(self._validate_balance_sheet(package))
        errors.extend(self._validate_profit_loss(package))
        errors.extend(self._validate_directors_report(package))
        errors.extend(self._validate_notes(package))
        errors.extend(self._validate_cash_flow(package))

        logger.info(
            "Filing validation complete",
            company_number=package.context.company_number,
            entity_size=package.entity_size.value,
            error_count=len(errors),
        )
        return errors

    def _validate_context(self, package: FilingPackage) -> List[str]:
        context = package.context
        errors = []
        if not context.company_number or not COMPANY_NUMBER_PATTERN.match(context.company_number):
            errors.append("Invalid company number")
        if context.period_start is None or context.period_end is None:
            errors.append("Missing accounting period dates")
        elif context.period_end < context.period_start:
            errors.append("Accounting period end date is before the start date")
        if context.balance_sheet_date is None:
            errors.append("Missing balance sheet date")
        return errors

    def _check_balance(self, record: BalanceSheetData, label: str) -> Optional[str]:
        net_assets = record.net_assets
        capital = record.capital_and_reserves
        if abs(net_assets - capital) > self.tolerance:
            prefix = "Balance sheet" if not label else f"{label} balance sheet"
            return (
                f"{prefix} does not balance: Net Assets {format_number(net_assets)} "
                f"!= Total Capital {format_number(capital)}"
            )
        return None

    def _missing_lines(self, record, statement: str) -> List[str]:
        labels = dict(record.ENTRY_LINES)
        return [
            f"Missing {labels[name].lower()} in {statement}"
            for name in record.MANDATORY_FIELDS
            if getattr(record, name) is None
        ]

    def _validate_balance_sheet(self, package: FilingPackage) -> List[str]:
        errors = []
        current = package.balance_sheet.current_year
        previous = package.balance_sheet.previous_year

        errors.extend(self._missing_lines(current, "balance sheet"))
        imbalance = self._check_balance(current, "")
        if imbalance:
            errors.append(imbalance)
        if previous is not None:
            imbalance = self._check_balance(previous, "Prior year")
            if imbalance:
                errors.append(imbalance)
        return errors

    def _validate_profit_loss(self, package: FilingPackage) -> List[str]:
        current: ProfitLossData = package.profit_loss.current_year
        return self._missing_lines(current, "profit and loss account")

    def _validate_directors_report(self, package: FilingPackage) -> List[str]:
        report = package.directors_report
        errors = []
        if not report.directors:
            errors.append("No directors listed in directors' report")
        if not report.principal_activities:
            errors.append("Missing principal activities description")
        if report.approval_date is None:
            errors.append("Missing director approval date")
        if not report.director_signature:
            errors.append("Missing director signature")
        return errors

    def _validate_notes(self, package: FilingPackage) -> List[str]:
        notes = package.notes
        errors = []
        framework = notes.accounting_policies.accounting_framework or package.context.accounting_framework
        if not framework:
            errors.append("Missing accounting framework declaration")

        policy = get_size_policy(package.entity_size)
        for note in policy.mandatory_notes:
            if note == NOTE_ACCOUNTING_POLICIES:
                continue
            if getattr(notes, note) is None:
                errors.append(
                    f"Missing {NOTE_LABELS[note]} note required for {policy.size.value} companies"
                )
        return errors

    def _check_cash_reconciliation(self, record: CashFlowData, prior: bool = False) -> List[str]:
        statement = "prior year cash flow statement" if prior else "cash flow statement"
        errors = self._missing_lines(record, statement)
        if record.opening_cash is None or record.closing_cash is None:
            return errors
        expected = Decimal(record.opening_cash) + record.net_change_in_cash
        if abs(expected - Decimal(record.closing_cash)) > self.tolerance:
            errors.append(
                f"{'Prior year cash flow' if prior else 'Cash flow'} does not reconcile: "
                f"Closing Cash {format_number(record.closing_cash)} != Opening Cash "
                f"{format_number(record.opening_cash)} + Net Change {format_number(record.net_change_in_cash)}"
            )
        return errors

    def _validate_cash_flow(self, package: FilingPackage) -> List[str]:
        policy = get_size_policy(package.entity_size)
        if not policy.include_cash_flow or package.cash_flow is None:
            return []
        current = package.cash_flow.current_year
        prior = package.cash_flow.previous_year
        errors = self._check_cash_reconciliation(current)
        if prior is not None:
            errors.extend(self._check_cash_reconciliation(prior, prior=True))
            errors.extend(self._check_cash_continuity(current, prior))
        return errors

    def _check_cash_continuity(self, current: CashFlowData, prior: CashFlowData) -> List[str]:
        # Both values are tagged at the prior balance sheet date
        if current.opening_cash is None or prior.closing_cash is None:
            return []
        if abs(Decimal(current.opening_cash) - Decimal(prior.closing_cash)) > self.tolerance:
            return [
                f"Cash flow opening cash {format_number(current.opening_cash)} does not match "
                f"prior year closing cash {format_number(prior.closing_cash)}"
            ]
        return []


# Singleton instance
_validator: Optional[FilingValidator] = None


def get_filing_validator() -> FilingValidator:
    """Get singleton validator instance."""
    global _validator
    if _validator is None:
        _validator = FilingValidator()
    return _validator


def validate_package(package: FilingPackage, tolerance: Optional[Decimal] = None) -> List[str]:
    """Validate a package; an empty list means it can be filed."""
    if tolerance is None:
        return get_filing_validator().validate(package)
    return FilingValidator(tolerance).validate(package)


def check_document_references(document: str) -> List[str]:
    """
    Find context and unit references with no declaration in the header.

    Returns:
        Sorted ``context:<id>`` / ``unit:<id>`` entries; empty when consistent.
    """
    declared_contexts = set(CONTEXT_DECL_PATTERN.findall(document))
    declared_units = set(UNIT_DECL_PATTERN.findall(document))

    missing = {
        f"context:{ref}" for ref in CONTEXT_REF_PATTERN.findall(document)
        if ref not in declared_contexts
    }
    missing.update(
        f"unit:{ref}" for ref in UNIT_REF_PATTERN.findall(document)
        if ref not in declared_units
    )
    return sorted(missing)
