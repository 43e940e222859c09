"""
Fixtures for the iXBRL engine tests.

The base package is a small company with a balanced balance sheet:
net assets 110,000 against share capital 1,000 and retained earnings 109,000.
"""
from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Callable

import pytest

from ixaccounts.ixbrl_engine.entity_size import build_size_result
from ixaccounts.ixbrl_engine.models import (
    AccountingPolicies,
    BalanceSheetData,
    CashFlowData,
    ComparativeBalanceSheet,
    ComparativeCashFlow,
    ComparativeProfitLoss,
    Director,
    DirectorsRemuneration,
    DirectorsReportData,
    EmployeeCosts,
    EmployeeNumbers,
    EntitySize,
    FilingContext,
    FilingPackage,
    NotesData,
    ProfitLossData,
    StrategicReportData,
)


@pytest.fixture
def filing_context() -> FilingContext:
    return FilingContext(
        company_name="Acme Widgets Limited",
        company_number="12345678",
        period_start=date(2024, 1, 1),
        period_end=date(2024, 12, 31),
        balance_sheet_date=date(2024, 12, 31),
    )


@pytest.fixture
def balance_sheet() -> BalanceSheetData:
    return BalanceSheetData(
        tangible_assets=Decimal("50000"),
        debtors=Decimal("40000"),
        cash=Decimal("80000"),
        creditors_within_one_year=Decimal("60000"),
        called_up_share_capital=Decimal("1000"),
        profit_and_loss_account=Decimal("109000"),
    )


@pytest.fixture
def prior_balance_sheet() -> BalanceSheetData:
    return BalanceSheetData(
        tangible_assets=Decimal("40000"),
        debtors=Decimal("30000"),
        cash=Decimal("50000"),
        creditors_within_one_year=Decimal("45000"),
        called_up_share_capital=Decimal("1000"),
        profit_and_loss_account=Decimal("74000"),
    )


@pytest.fixture
def profit_loss() -> ProfitLossData:
    return ProfitLossData(
        turnover=Decimal("500000"),
        cost_of_sales=Decimal("300000"),
        administrative_expenses=Decimal("150000"),
        tax_on_profit=Decimal("15000"),
        profit_for_financial_year=Decimal("35000"),
    )


@pytest.fixture
def cash_flow() -> CashFlowData:
    # 50,000 + 10,000 - 10,000 + 15,000 - 15,000 - 20,000 = 30,000 net change
    return CashFlowData(
        profit_before_tax=Decimal("50000"),
        depreciation=Decimal("10000"),
        increase_in_debtors=Decimal("10000"),
        increase_in_creditors=Decimal("15000"),
        tax_paid=Decimal("15000"),
        purchase_of_tangible_assets=Decimal("20000"),
        opening_cash=Decimal("50000"),
        closing_cash=Decimal("80000"),
    )


@pytest.fixture
def directors_report() -> DirectorsReportData:
    return DirectorsReportData(
        directors=(Director(name="Jane Smith"), Director(name="John Brown")),
        principal_activities="Manufacture and sale of widgets.",
        approval_date=date(2025, 3, 15),
        director_signature="Jane Smith",
        small_company_regime=True,
    )


@pytest.fixture
def notes() -> NotesData:
    return NotesData(
        accounting_policies=AccountingPolicies(
            accounting_framework="FRS 102 Section 1A",
            turnover_recognition="Turnover is recognised on delivery of goods.",
            tangible_fixed_assets_depreciation="Straight line over five years.",
            taxation="Current tax is provided at amounts expected to be paid.",
        ),
        employee_numbers=EmployeeNumbers(average=8),
    )


@pytest.fixture
def full_notes(notes: NotesData) -> NotesData:
    """Notes satisfying the medium and large tier requirements."""
    return replace(
        notes,
        employee_costs=EmployeeCosts(
            wages=Decimal("250000"),
            social_security=Decimal("25000"),
            pension=Decimal("10000"),
        ),
        directors_remuneration=DirectorsRemuneration(total=Decimal("90000"), highest_paid=Decimal("60000")),
    )


@pytest.fixture
def strategic_report() -> StrategicReportData:
    return StrategicReportData(
        business_model="We design and sell widgets.",
        business_review="Revenue grew by 10%.",
        approval_date=date(2025, 3, 15),
    )


@pytest.fixture
def make_package(
    filing_context: FilingContext,
    balance_sheet: BalanceSheetData,
    profit_loss: ProfitLossData,
    directors_report: DirectorsReportData,
    notes: NotesData,
) -> Callable[..., FilingPackage]:
    """Factory for packages; keyword arguments replace package fields."""

    def _make(size: EntitySize = EntitySize.SMALL, **overrides) -> FilingPackage:
        fields = dict(
            context=filing_context,
            size=build_size_result(size, (size,)),
            balance_sheet=ComparativeBalanceSheet(current_year=balance_sheet),
            profit_loss=ComparativeProfitLoss(current_year=profit_loss),
            directors_report=directors_report,
            notes=notes,
        )
        fields.update(overrides)
        return FilingPackage(**fields)

    return _make


@pytest.fixture
def sample_package(make_package) -> FilingPackage:
    return make_package()


@pytest.fixture
def medium_package(make_package, full_notes, cash_flow) -> FilingPackage:
    """Medium company with a current-year cash flow statement."""
    return make_package(
        EntitySize.MEDIUM,
        notes=full_notes,
        cash_flow=ComparativeCashFlow(current_year=cash_flow),
    )
