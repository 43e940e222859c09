"""
Data structures for the iXBRL accounts engine.

Every record is an immutable value: the caller assembles one FilingPackage per
filing attempt and the engine only reads it. Amounts are Decimal throughout.

Statement records keep preparer-entered lines as fields and derive subtotal
lines as properties; line_items() exposes both with an ``editable`` flag.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import ClassVar, List, Optional, Tuple


class EntitySize(str, Enum):
    """Companies Act size tiers, smallest first."""
    MICRO = "micro"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


ZERO = Decimal("0")


def amount(value: Optional[Decimal]) -> Decimal:
    """Treat a missing line as zero for arithmetic."""
    return ZERO if value is None else Decimal(value)


# =============================================================================
# Filing Context
# =============================================================================

@dataclass(frozen=True)
class FilingContext:
    """Company identity and reporting period shared by every generator."""
    company_name: str
    company_number: str
    period_start: Optional[date]
    period_end: Optional[date]
    balance_sheet_date: Optional[date]
    currency: str = "GBP"
    accounting_framework: str = "FRS 102"


# =============================================================================
# Entity Size
# =============================================================================

@dataclass(frozen=True)
class EntityMetrics:
    """One year of size metrics."""
    turnover: Decimal
    balance_sheet_total: Decimal
    employees: int


@dataclass(frozen=True)
class SizeCriteria:
    """Which of the three threshold criteria were met."""
    turnover: bool = False
    balance_sheet: bool = False
    employees: bool = False

    @property
    def met_count(self) -> int:
        return sum([self.turnover, self.balance_sheet, self.employees])


@dataclass(frozen=True)
class EntitySizeResult:
    """Outcome of size classification, read-only input to every generator."""
    size: EntitySize
    qualifies_as: Tuple[EntitySize, ...] = ()
    criteria: SizeCriteria = field(default_factory=SizeCriteria)
    requires_audit: bool = True
    can_use_abridged: bool = False
    can_use_micro_entity: bool = False


# =============================================================================
# Line Items
# =============================================================================

@dataclass(frozen=True)
class LineItem:
    """A named statement line; computed subtotals are not editable."""
    name: str
    label: str
    amount: Optional[Decimal]
    editable: bool = True


def _collect_lines(record, entry_lines, computed_lines) -> List[LineItem]:
    items = [
        LineItem(name=name, label=label, amount=getattr(record, name), editable=True)
        for name, label in entry_lines
    ]
    items.extend(
        LineItem(name=name, label=label, amount=getattr(record, name), editable=False)
        for name, label in computed_lines
    )
    return items


# =============================================================================
# Balance Sheet
# =============================================================================

@dataclass(frozen=True)
class BalanceSheetData:
    """Balance sheet at one instant."""
    # Fixed assets
    intangible_assets: Optional[Decimal] = None
    tangible_assets: Optional[Decimal] = None
    investments: Optional[Decimal] = None
    # Current assets
    stocks: Optional[Decimal] = None
    debtors: Optional[Decimal] = None
    cash: Optional[Decimal] = None
    # Liabilities
    creditors_within_one_year: Optional[Decimal] = None
    creditors_after_one_year: Optional[Decimal] = None
    provisions: Optional[Decimal] = None
    # Capital and reserves
    called_up_share_capital: Optional[Decimal] = None
    share_premium: Optional[Decimal] = None
    revaluation_reserve: Optional[Decimal] = None
    other_reserves: Optional[Decimal] = None
    profit_and_loss_account: Optional[Decimal] = None

    MANDATORY_FIELDS: ClassVar[Tuple[str, ...]] = (
        "called_up_share_capital",
        "profit_and_loss_account",
    )
    ENTRY_LINES: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ("intangible_assets", "Intangible assets"),
        ("tangible_assets", "Tangible assets"),
        ("investments", "Investments"),
        ("stocks", "Stocks"),
        ("debtors", "Debtors"),
        ("cash", "Cash at bank and in hand"),
        ("creditors_within_one_year", "Creditors: amounts falling due within one year"),
        ("creditors_after_one_year", "Creditors: amounts falling due after more than one year"),
        ("provisions", "Provisions for liabilities"),
        ("called_up_share_capital", "Called up share capital"),
        ("share_premium", "Share premium account"),
        ("revaluation_reserve", "Revaluation reserve"),
        ("other_reserves", "Other reserves"),
        ("profit_and_loss_account", "Profit and loss account"),
    )
    COMPUTED_LINES: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ("fixed_assets", "Total fixed assets"),
        ("current_assets", "Total current assets"),
        ("net_current_assets", "Net current assets"),
        ("total_assets", "Total assets"),
        ("total_assets_less_current_liabilities", "Total assets less current liabilities"),
        ("total_liabilities", "Total liabilities"),
        ("net_assets", "Net assets"),
        ("capital_and_reserves", "Total capital and reserves"),
    )

    @property
    def fixed_assets(self) -> Decimal:
        return amount(self.intangible_assets) + amount(self.tangible_assets) + amount(self.investments)

    @property
    def current_assets(self) -> Decimal:
        return amount(self.stocks) + amount(self.debtors) + amount(self.cash)

    @property
    def total_assets(self) -> Decimal:
        return self.fixed_assets + self.current_assets

    @property
    def net_current_assets(self) -> Decimal:
        return self.current_assets - amount(self.creditors_within_one_year)

    @property
    def total_assets_less_current_liabilities(self) -> Decimal:
        return self.fixed_assets + self.net_current_assets

    @property
    def total_liabilities(self) -> Decimal:
        return (
            amount(self.creditors_within_one_year)
            + amount(self.creditors_after_one_year)
            + amount(self.provisions)
        )

    @property
    def net_assets(self) -> Decimal:
        return self.total_assets - self.total_liabilities

    @property
    def capital_and_reserves(self) -> Decimal:
        return (
            amount(self.called_up_share_capital)
            + amount(self.share_premium)
            + amount(self.revaluation_reserve)
            + amount(self.other_reserves)
            + amount(self.profit_and_loss_account)
        )

    def line_items(self) -> List[LineItem]:
        return _collect_lines(self, self.ENTRY_LINES, self.COMPUTED_LINES)


@dataclass(frozen=True)
class ComparativeBalanceSheet:
    current_year: BalanceSheetData
    previous_year: Optional[BalanceSheetData] = None


# =============================================================================
# Profit and Loss
# =============================================================================

@dataclass(frozen=True)
class ProfitLossData:
    """Profit and loss account for one period. Costs are positive amounts."""
    turnover: Optional[Decimal] = None
    other_operating_income: Optional[Decimal] = None
    cost_of_sales: Optional[Decimal] = None
    administrative_expenses: Optional[Decimal] = None
    distribution_costs: Optional[Decimal] = None
    other_operating_charges: Optional[Decimal] = None
    staff_costs: Optional[Decimal] = None
    interest_receivable: Optional[Decimal] = None
    interest_payable: Optional[Decimal] = None
    tax_on_profit: Optional[Decimal] = None
    profit_for_financial_year: Optional[Decimal] = None

    MANDATORY_FIELDS: ClassVar[Tuple[str, ...]] = (
        "turnover",
        "profit_for_financial_year",
    )
    ENTRY_LINES: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ("turnover", "Turnover"),
        ("other_operating_income", "Other operating income"),
        ("cost_of_sales", "Cost of sales"),
        ("administrative_expenses", "Administrative expenses"),
        ("distribution_costs", "Distribution costs"),
        ("other_operating_charges", "Other operating charges"),
        ("staff_costs", "Staff costs"),
        ("interest_receivable", "Interest receivable and similar income"),
        ("interest_payable", "Interest payable and similar charges"),
        ("tax_on_profit", "Tax on profit"),
        ("profit_for_financial_year", "Profit for the financial year"),
    )
    COMPUTED_LINES: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ("gross_profit", "Gross profit"),
        ("operating_profit", "Operating profit"),
        ("profit_before_tax", "Profit before taxation"),
    )

    @property
    def gross_profit(self) -> Decimal:
        return amount(self.turnover) - amount(self.cost_of_sales)

    @property
    def operating_profit(self) -> Decimal:
        return (
            self.gross_profit
            - amount(self.administrative_expenses)
            - amount(self.distribution_costs)
            - amount(self.other_operating_charges)
            + amount(self.other_operating_income)
        )

    @property
    def profit_before_tax(self) -> Decimal:
        return self.operating_profit + amount(self.interest_receivable) - amount(self.interest_payable)

    def line_items(self) -> List[LineItem]:
        return _collect_lines(self, self.ENTRY_LINES, self.COMPUTED_LINES)


@dataclass(frozen=True)
class ComparativeProfitLoss:
    current_year: ProfitLossData
    previous_year: Optional[ProfitLossData] = None


# =============================================================================
# Cash Flow
# =============================================================================

@dataclass(frozen=True)
class CashFlowData:
    """
    Cash flow statement, indirect method.

    Outflows (purchases, repayments, tax paid) are entered as positive amounts
    and subtracted; working capital movements are increases in the balance.
    """
    profit_before_tax: Optional[Decimal] = None
    # Non-cash adjustments
    depreciation: Optional[Decimal] = None
    amortisation: Optional[Decimal] = None
    interest_payable: Optional[Decimal] = None
    interest_receivable: Optional[Decimal] = None
    gain_on_disposal: Optional[Decimal] = None
    # Working capital
    increase_in_stocks: Optional[Decimal] = None
    increase_in_debtors: Optional[Decimal] = None
    increase_in_creditors: Optional[Decimal] = None
    # Interest and tax paid
    interest_paid: Optional[Decimal] = None
    tax_paid: Optional[Decimal] = None
    # Investing
    purchase_of_tangible_assets: Optional[Decimal] = None
    purchase_of_intangible_assets: Optional[Decimal] = None
    purchase_of_investments: Optional[Decimal] = None
    proceeds_from_disposals: Optional[Decimal] = None
    # Financing
    proceeds_from_share_issue: Optional[Decimal] = None
    new_loans_received: Optional[Decimal] = None
    repayment_of_borrowings: Optional[Decimal] = None
    dividends_paid: Optional[Decimal] = None
    # Cash balances
    opening_cash: Optional[Decimal] = None
    closing_cash: Optional[Decimal] = None

    MANDATORY_FIELDS: ClassVar[Tuple[str, ...]] = (
        "profit_before_tax",
        "opening_cash",
        "closing_cash",
    )
    ENTRY_LINES: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ("profit_before_tax", "Profit before taxation"),
        ("depreciation", "Depreciation of tangible assets"),
        ("amortisation", "Amortisation of intangible assets"),
        ("interest_payable", "Interest payable"),
        ("interest_receivable", "Interest receivable"),
        ("gain_on_disposal", "Gain on disposal of fixed assets"),
        ("increase_in_stocks", "Increase in stocks"),
        ("increase_in_debtors", "Increase in debtors"),
        ("increase_in_creditors", "Increase in creditors"),
        ("interest_paid", "Interest paid"),
        ("tax_paid", "Tax paid"),
        ("purchase_of_tangible_assets", "Purchase of tangible fixed assets"),
        ("purchase_of_intangible_assets", "Purchase of intangible assets"),
        ("purchase_of_investments", "Purchase of investments"),
        ("proceeds_from_disposals", "Proceeds from disposal of fixed assets"),
        ("proceeds_from_share_issue", "Proceeds from issue of share capital"),
        ("new_loans_received", "New loans received"),
        ("repayment_of_borrowings", "Repayment of borrowings"),
        ("dividends_paid", "Dividends paid"),
        ("opening_cash", "Cash and cash equivalents at beginning of year"),
        ("closing_cash", "Cash and cash equivalents at end of year"),
    )
    COMPUTED_LINES: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ("cash_generated_from_operations", "Cash generated from operations"),
        ("net_operating_cash", "Net cash from operating activities"),
        ("net_investing_cash", "Net cash from investing activities"),
        ("net_financing_cash", "Net cash from financing activities"),
        ("net_change_in_cash", "Net increase/(decrease) in cash and cash equivalents"),
    )

    @property
    def cash_generated_from_operations(self) -> Decimal:
        return (
            amount(self.profit_before_tax)
            + amount(self.depreciation)
            + amount(self.amortisation)
            + amount(self.interest_payable)
            - amount(self.interest_receivable)
            - amount(self.gain_on_disposal)
            - amount(self.increase_in_stocks)
            - amount(self.increase_in_debtors)
            + amount(self.increase_in_creditors)
        )

    @property
    def net_operating_cash(self) -> Decimal:
        return self.cash_generated_from_operations - amount(self.interest_paid) - amount(self.tax_paid)

    @property
    def net_investing_cash(self) -> Decimal:
        return (
            amount(self.proceeds_from_disposals)
            - amount(self.purchase_of_tangible_assets)
            - amount(self.purchase_of_intangible_assets)
            - amount(self.purchase_of_investments)
        )

    @property
    def net_financing_cash(self) -> Decimal:
        return (
            amount(self.proceeds_from_share_issue)
            + amount(self.new_loans_received)
            - amount(self.repayment_of_borrowings)
            - amount(self.dividends_paid)
        )

    @property
    def net_change_in_cash(self) -> Decimal:
        return self.net_operating_cash + self.net_investing_cash + self.net_financing_cash

    def line_items(self) -> List[LineItem]:
        return _collect_lines(self, self.ENTRY_LINES, self.COMPUTED_LINES)


@dataclass(frozen=True)
class ComparativeCashFlow:
    current_year: CashFlowData
    previous_year: Optional[CashFlowData] = None


# =============================================================================
# Directors' Report
# =============================================================================

@dataclass(frozen=True)
class Director:
    name: str
    appointment_date: Optional[date] = None
    resignation_date: Optional[date] = None


@dataclass(frozen=True)
class DirectorsReportData:
    """Directors' report content and board approval."""
    directors: Tuple[Director, ...] = ()
    principal_activities: str = ""
    business_review: Optional[str] = None
    key_performance_indicators: Optional[str] = None
    principal_risks: Optional[str] = None
    future_developments: Optional[str] = None
    research_and_development: Optional[str] = None
    dividends_proposed: Optional[Decimal] = None
    dividends_paid: Optional[Decimal] = None
    audit_exemption: bool = False
    audit_exemption_reason: Optional[str] = None
    small_company_regime: bool = False
    approval_date: Optional[date] = None
    director_signature: str = ""
    director_position: str = "Director"


# =============================================================================
# Notes to the Accounts
# =============================================================================

@dataclass(frozen=True)
class AccountingPolicies:
    """Note 1: accounting policy choices."""
    accounting_framework: str = ""
    going_concern: bool = True
    going_concern_uncertainties: Optional[str] = None
    turnover_recognition: str = ""
    tangible_fixed_assets_depreciation: str = ""
    stocks_valuation: Optional[str] = None
    taxation: str = ""
    pension_costs: Optional[str] = None
    foreign_currency: Optional[str] = None
    leases: Optional[str] = None
    government_grants: Optional[str] = None
    research_and_development: Optional[str] = None


@dataclass(frozen=True)
class EmployeeNumbers:
    average: int
    administration: Optional[int] = None
    production: Optional[int] = None
    distribution: Optional[int] = None


@dataclass(frozen=True)
class EmployeeCosts:
    wages: Decimal
    social_security: Decimal
    pension: Decimal

    @property
    def total(self) -> Decimal:
        return amount(self.wages) + amount(self.social_security) + amount(self.pension)


@dataclass(frozen=True)
class DirectorsRemuneration:
    total: Decimal
    highest_paid: Optional[Decimal] = None


@dataclass(frozen=True)
class TangibleFixedAssets:
    land_buildings: Optional[Decimal] = None
    plant_machinery: Optional[Decimal] = None
    fixtures_fittings: Optional[Decimal] = None
    motor_vehicles: Optional[Decimal] = None

    @property
    def total(self) -> Decimal:
        return (
            amount(self.land_buildings)
            + amount(self.plant_machinery)
            + amount(self.fixtures_fittings)
            + amount(self.motor_vehicles)
        )


@dataclass(frozen=True)
class DebtorsBreakdown:
    trade_debtors: Decimal
    other_debtors: Optional[Decimal] = None
    prepayments: Optional[Decimal] = None


@dataclass(frozen=True)
class CreditorsBreakdown:
    trade_creditors: Decimal
    taxation_social_security: Optional[Decimal] = None
    other_creditors: Optional[Decimal] = None
    accruals: Optional[Decimal] = None


@dataclass(frozen=True)
class ShareClass:
    share_class: str
    number_of_shares: int
    nominal_value: Decimal


@dataclass(frozen=True)
class ShareCapital:
    issued: ShareClass
    authorised: Optional[ShareClass] = None


@dataclass(frozen=True)
class RelatedPartyTransaction:
    party: str
    nature: str
    amount: Decimal


@dataclass(frozen=True)
class NotesData:
    """Accounting policies plus the optional supplementary notes."""
    accounting_policies: AccountingPolicies
    employee_numbers: Optional[EmployeeNumbers] = None
    employee_costs: Optional[EmployeeCosts] = None
    directors_remuneration: Optional[DirectorsRemuneration] = None
    tangible_fixed_assets: Optional[TangibleFixedAssets] = None
    debtors: Optional[DebtorsBreakdown] = None
    creditors: Optional[CreditorsBreakdown] = None
    share_capital: Optional[ShareCapital] = None
    related_party_transactions: Tuple[RelatedPartyTransaction, ...] = ()
    post_balance_sheet_events: Optional[str] = None
    ultimate_controlling_party: Optional[str] = None


# =============================================================================
# Strategic Report
# =============================================================================

@dataclass(frozen=True)
class KeyPerformanceIndicator:
    name: str
    value: str
    analysis: str = ""


@dataclass(frozen=True)
class PrincipalRisk:
    risk: str
    impact: str = ""
    mitigation: str = ""


@dataclass(frozen=True)
class StrategicReportData:
    """Strategic report narrative (s414A), large companies only."""
    business_model: Optional[str] = None
    strategy_and_objectives: Optional[str] = None
    business_review: Optional[str] = None
    key_performance_indicators: Tuple[KeyPerformanceIndicator, ...] = ()
    financial_performance: Optional[str] = None
    principal_risks: Tuple[PrincipalRisk, ...] = ()
    environmental_matters: Optional[str] = None
    employees: Optional[str] = None
    social_matters: Optional[str] = None
    human_rights: Optional[str] = None
    anti_corruption: Optional[str] = None
    future_developments: Optional[str] = None
    approval_date: Optional[date] = None
    approved_by_director: Optional[str] = None
    director_position: Optional[str] = None


# =============================================================================
# Aggregate Filing Package
# =============================================================================

@dataclass(frozen=True)
class FilingPackage:
    """Everything one filing attempt needs. Consumed whole by the orchestrator."""
    context: FilingContext
    size: EntitySizeResult
    balance_sheet: ComparativeBalanceSheet
    profit_loss: ComparativeProfitLoss
    directors_report: DirectorsReportData
    notes: NotesData
    cash_flow: Optional[ComparativeCashFlow] = None
    strategic_report: Optional[StrategicReportData] = None

    @property
    def entity_size(self) -> EntitySize:
        return self.size.size

    @property
    def has_comparatives(self) -> bool:
        return (
            self.balance_sheet.previous_year is not None
            or self.profit_loss.previous_year is not None
            or (self.cash_flow is not None and self.cash_flow.previous_year is not None)
        )


# =============================================================================
# Result
# =============================================================================

@dataclass
class SubmissionResult:
    """Final result of a generation run."""
    success: bool
    errors: List[str] = field(default_factory=list)
    filename: str = ""
    archive: bytes = b""
    document: str = ""
    entity_size: Optional[EntitySize] = None
