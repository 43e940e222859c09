"""
Taxonomy concept names used by the statement generators.

Names come from the FRC 2025 taxonomy suite: ``core`` for financial
statements and notes, ``bus`` for entity and report information and
``direp`` for the directors' report.
"""

from typing import Dict

# Namespace declarations for the document root
NAMESPACES: Dict[str, str] = {
    "ix": "http://www.xbrl.org/2013/inlineXBRL",
    "ixt": "http://www.xbrl.org/inlineXBRL/transformation/2020-02-12",
    "xbrli": "http://www.xbrl.org/2003/instance",
    "link": "http://www.xbrl.org/2003/linkbase",
    "xlink": "http://www.w3.org/1999/xlink",
    "iso4217": "http://www.xbrl.org/2003/iso4217",
    "core": "http://xbrl.frc.org.uk/fr/2025-01-01/core",
    "bus": "http://xbrl.frc.org.uk/cd/2025-01-01/business",
    "direp": "http://xbrl.frc.org.uk/reports/2025-01-01/direp",
}

COMPANIES_HOUSE_SCHEME = "http://www.companieshouse.gov.uk/"


def core(name: str) -> str:
    return f"core:{name}"


def bus(name: str) -> str:
    return f"bus:{name}"


def direp(name: str) -> str:
    return f"direp:{name}"


# =============================================================================
# Entity information
# =============================================================================

ENTITY_NAME = bus("EntityCurrentLegalOrRegisteredName")
ENTITY_NUMBER = bus("UKCompaniesHouseRegisteredNumber")
PERIOD_START = bus("StartDateForPeriodCoveredByReport")
PERIOD_END = bus("EndDateForPeriodCoveredByReport")
BALANCE_SHEET_DATE = bus("BalanceSheetDate")

# =============================================================================
# Balance sheet (field name -> concept)
# =============================================================================

BALANCE_SHEET: Dict[str, str] = {
    "intangible_assets": core("IntangibleAssets"),
    "tangible_assets": core("PropertyPlantEquipment"),
    "investments": core("FixedAssetInvestments"),
    "fixed_assets": core("FixedAssets"),
    "stocks": core("Stocks"),
    "debtors": core("Debtors"),
    "cash": core("CashBankInHand"),
    "current_assets": core("CurrentAssets"),
    "creditors_within_one_year": core("CreditorsDueWithinOneYear"),
    "net_current_assets": core("NetCurrentAssetsLiabilities"),
    "total_assets_less_current_liabilities": core("TotalAssetsLessCurrentLiabilities"),
    "creditors_after_one_year": core("CreditorsDueAfterOneYear"),
    "provisions": core("ProvisionsForLiabilitiesBalanceSheetSubtotal"),
    "net_assets": core("NetAssetsLiabilities"),
    "called_up_share_capital": core("CalledUpShareCapital"),
    "share_premium": core("SharePremiumAccount"),
    "revaluation_reserve": core("RevaluationReserve"),
    "other_reserves": core("OtherReserves"),
    "profit_and_loss_account": core("RetainedEarningsAccumulatedLosses"),
    "capital_and_reserves": core("Equity"),
}

APPROVAL_DATE = core("DateAuthorisationFinancialStatementsForIssue")
DIRECTOR_SIGNING_ACCOUNTS = core("NameDirectorSigningFinancialStatements")

# =============================================================================
# Profit and loss
# =============================================================================

PROFIT_LOSS: Dict[str, str] = {
    "turnover": core("TurnoverRevenue"),
    "other_operating_income": core("OtherOperatingIncomeFormat1"),
    "cost_of_sales": core("CostSales"),
    "gross_profit": core("GrossProfitLoss"),
    "administrative_expenses": core("AdministrativeExpenses"),
    "distribution_costs": core("DistributionCosts"),
    "other_operating_charges": core("OtherOperatingExpensesFormat1"),
    "staff_costs": core("StaffCostsEmployeeBenefitsExpense"),
    "operating_profit": core("OperatingProfitLoss"),
    "interest_receivable": core("OtherInterestReceivableSimilarIncomeFinanceIncome"),
    "interest_payable": core("InterestPayableSimilarChargesFinanceCosts"),
    "profit_before_tax": core("ProfitLossOnOrdinaryActivitiesBeforeTax"),
    "tax_on_profit": core("TaxTaxCreditOnProfitOrLossOnOrdinaryActivities"),
    "profit_for_financial_year": core("ProfitLoss"),
}

# =============================================================================
# Cash flow
# =============================================================================

CASH_FLOW: Dict[str, str] = {
    "profit_before_tax": core("ProfitLossBeforeTax"),
    "depreciation": core("DepreciationExpensePropertyPlantEquipment"),
    "amortisation": core("AmortisationExpenseIntangibleAssets"),
    "interest_payable": core("InterestPayableSimilarChargesFinanceCosts"),
    "interest_receivable": core("OtherInterestReceivableSimilarIncomeFinanceIncome"),
    "gain_on_disposal": core("GainLossOnDisposalsPropertyPlantEquipment"),
    "increase_in_stocks": core("IncreaseDecreaseInStocks"),
    "increase_in_debtors": core("IncreaseDecreaseInDebtors"),
    "increase_in_creditors": core("IncreaseDecreaseInCreditors"),
    "cash_generated_from_operations": core("CashGeneratedFromOperations"),
    "interest_paid": core("InterestPaidClassifiedAsOperatingActivities"),
    "tax_paid": core("IncomeTaxesPaidRefundClassifiedAsOperatingActivities"),
    "net_operating_cash": core("NetCashFlowsFromUsedInOperatingActivities"),
    "purchase_of_tangible_assets": core("PurchasePropertyPlantEquipment"),
    "purchase_of_intangible_assets": core("PurchaseIntangibleAssets"),
    "purchase_of_investments": core("PurchaseFinancialAssets"),
    "proceeds_from_disposals": core("ProceedsFromSalesPropertyPlantEquipment"),
    "net_investing_cash": core("NetCashFlowsFromUsedInInvestingActivities"),
    "proceeds_from_share_issue": core("ProceedsFromIssuingShares"),
    "new_loans_received": core("ProceedsFromBorrowingsClassifiedAsFinancingActivities"),
    "repayment_of_borrowings": core("RepaymentsBorrowingsClassifiedAsFinancingActivities"),
    "dividends_paid": core("DividendsPaidClassifiedAsFinancingActivities"),
    "net_financing_cash": core("NetCashFlowsFromUsedInFinancingActivities"),
    "net_change_in_cash": core("IncreaseDecreaseInCashCashEquivalents"),
    "opening_cash": core("CashCashEquivalents"),
    "closing_cash": core("CashCashEquivalents"),
}

# =============================================================================
# Directors' report
# =============================================================================

DIRECTOR_NAME = direp("NameEntityOfficer")
PRINCIPAL_ACTIVITIES = direp("DescriptionPrincipalActivities")
BUSINESS_REVIEW = direp("BusinessReview")
DIRECTORS_KPIS = direp("DescriptionKeyPerformanceIndicators")
DIRECTORS_PRINCIPAL_RISKS = direp("DescriptionPrincipalRisksUncertainties")
FUTURE_DEVELOPMENTS = direp("DescriptionFutureDevelopments")
RESEARCH_DEVELOPMENT = direp("DescriptionResearchDevelopmentActivities")
DIVIDENDS_PAID = core("DividendsPaidOnShares")
DIVIDENDS_PROPOSED = core("DividendsProposed")
AUDIT_EXEMPTION_STATEMENT = direp("StatementThatMembersHaveNotRequiredCompanyToObtainAnAudit")
SMALL_COMPANY_STATEMENT = direp("StatementThatAccountsHaveBeenPreparedInAccordanceWithProvisionsSmallCompaniesRegime")
DIRECTORS_REPORT_APPROVAL_DATE = direp("DateApprovalDirectorsReport")
DIRECTOR_SIGNING_REPORT = direp("NameDirectorSigningDirectorsReport")

# =============================================================================
# Accounting policies
# =============================================================================

ACCOUNTING_POLICIES: Dict[str, str] = {
    "accounting_framework": core("StatementComplianceWithApplicableReportingFramework"),
    "going_concern": core("GoingConcernBasisAccountingPolicy"),
    "going_concern_uncertainties": core("DescriptionMaterialUncertaintiesRelatedToGoingConcern"),
    "turnover_recognition": core("RevenueRecognitionPolicy"),
    "tangible_fixed_assets_depreciation": core("PropertyPlantEquipmentPolicy"),
    "stocks_valuation": core("InventoriesPolicy"),
    "taxation": core("IncomeTaxPolicy"),
    "pension_costs": core("PensionsOtherPost-employmentBenefitsPolicy"),
    "foreign_currency": core("ForeignCurrencyTranslationOperationsPolicy"),
    "leases": core("LeasesPolicy"),
    "government_grants": core("GovernmentGrantsPolicy"),
    "research_and_development": core("ResearchDevelopmentExpenditurePolicy"),
}

# =============================================================================
# Notes
# =============================================================================

EMPLOYEES_AVERAGE = core("AverageNumberEmployeesDuringPeriod")
EMPLOYEES_ADMINISTRATION = core("AverageNumberEmployeesAdministration")
EMPLOYEES_PRODUCTION = core("AverageNumberEmployeesProduction")
EMPLOYEES_DISTRIBUTION = core("AverageNumberEmployeesDistribution")

WAGES_SALARIES = core("WagesSalaries")
SOCIAL_SECURITY_COSTS = core("SocialSecurityCosts")
PENSION_COSTS = core("PensionOtherPost-employmentBenefitCostsOtherPensionCosts")
STAFF_COSTS_TOTAL = core("StaffCostsEmployeeBenefitsExpense")

DIRECTORS_REMUNERATION = core("DirectorRemuneration")
HIGHEST_PAID_DIRECTOR = core("RemunerationHighestPaidDirector")

TANGIBLE_ASSET_CLASSES: Dict[str, str] = {
    "land_buildings": core("LandBuildings"),
    "plant_machinery": core("PlantMachinery"),
    "fixtures_fittings": core("FixturesFittings"),
    "motor_vehicles": core("MotorVehicles"),
}

DEBTORS_BREAKDOWN: Dict[str, str] = {
    "trade_debtors": core("TradeDebtorsTradeReceivables"),
    "other_debtors": core("OtherDebtors"),
    "prepayments": core("PrepaymentsAccruedIncome"),
}

CREDITORS_BREAKDOWN: Dict[str, str] = {
    "trade_creditors": core("TradeCreditorsTradePayables"),
    "taxation_social_security": core("TaxationSocialSecurityPayable"),
    "other_creditors": core("OtherCreditors"),
    "accruals": core("AccrualsDeferredIncome"),
}

SHARE_CLASS_NAME = core("DescriptionShareType")
SHARES_ISSUED = core("NumberSharesIssuedFullyPaid")
SHARES_AUTHORISED = core("NumberSharesAuthorised")
NOMINAL_VALUE = core("NominalValueShares")

RELATED_PARTY_NAME = core("NameRelatedParty")
RELATED_PARTY_NATURE = core("DescriptionRelationshipBetweenEntityRelatedParty")
RELATED_PARTY_AMOUNT = core("AmountTransactionsWithRelatedParty")

POST_BALANCE_SHEET_EVENTS = core("DescriptionNonadjustingEventAfterReportingPeriod")
ULTIMATE_CONTROLLING_PARTY = core("NameUltimateControllingParty")

# =============================================================================
# Strategic report
# =============================================================================

STRATEGIC_REPORT: Dict[str, str] = {
    "business_model": core("DescriptionBusinessModel"),
    "strategy_and_objectives": core("DescriptionStrategyObjectives"),
    "business_review": core("DescriptionFairReviewBusiness"),
    "financial_performance": core("AnalysisFinancialPerformance"),
    "environmental_matters": core("DescriptionEnvironmentalMatters"),
    "employees": core("DescriptionEmployeeMatters"),
    "social_matters": core("DescriptionSocialCommunityMatters"),
    "human_rights": core("DescriptionRespectForHumanRights"),
    "anti_corruption": core("DescriptionAntiCorruptionAntiBriberyMatters"),
    "future_developments": core("DescriptionLikelyFutureDevelopments"),
}

KPI_NAME = core("NameKeyPerformanceIndicator")
KPI_VALUE = core("ValueKeyPerformanceIndicator")
PRINCIPAL_RISK = core("DescriptionPrincipalRisk")
STRATEGIC_REPORT_APPROVAL_DATE = core("DateApprovalStrategicReport")
STRATEGIC_REPORT_SIGNATORY = core("NameDirectorSigningStrategicReport")
