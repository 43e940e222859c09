"""
Pydantic schemas for the accounts API endpoints.

Request bodies wrap the engine's dataclasses directly; pydantic validates
them field by field, so the engine never sees raw JSON.
"""
from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ixaccounts.config import get_settings
from ixaccounts.exceptions import InvalidEntitySizeError
from ixaccounts.ixbrl_engine.entity_size import build_size_result, classify_entity_size
from ixaccounts.ixbrl_engine.models import (
    ComparativeBalanceSheet,
    ComparativeCashFlow,
    ComparativeProfitLoss,
    DirectorsReportData,
    EntityMetrics,
    EntitySize,
    EntitySizeResult,
    FilingContext,
    FilingPackage,
    NotesData,
    StrategicReportData,
)


class EntityMetricsRequest(BaseModel):
    """One or two years of size metrics."""

    current: EntityMetrics = Field(..., description="Metrics for the year being filed")
    previous: Optional[EntityMetrics] = Field(None, description="Metrics for the preceding year")

    def classify(self) -> EntitySizeResult:
        return classify_entity_size(self.current, self.previous)


class SizeCriteriaResponse(BaseModel):
    """Which threshold criteria were met."""

    turnover: bool
    balance_sheet: bool
    employees: bool


class FilingRecommendationsResponse(BaseModel):
    """Accounts formats and disclosures for a tier."""

    recommended_format: str
    available_formats: List[str]
    disclosure_requirements: List[str]
    requires_audit: bool


class FrameworkResponse(BaseModel):
    """Accounting framework and taxonomy for a tier."""

    primary: str
    alternatives: List[str]
    taxonomy: str


class EntitySizeResponse(BaseModel):
    """Response for entity size classification."""

    size: EntitySize
    qualifies_as: List[EntitySize]
    criteria: SizeCriteriaResponse
    requires_audit: bool
    can_use_abridged: bool
    can_use_micro_entity: bool
    recommendations: FilingRecommendationsResponse
    framework: FrameworkResponse


class FilingContextRequest(BaseModel):
    """Company identity and reporting period."""

    company_name: str = Field(..., description="Registered company name")
    company_number: str = Field(..., description="Companies House registration number")
    period_start: Optional[date] = Field(None, description="First day of the accounting period")
    period_end: Optional[date] = Field(None, description="Last day of the accounting period")
    balance_sheet_date: Optional[date] = Field(None, description="Balance sheet date")
    currency: Optional[str] = Field(None, description="ISO 4217 code; defaults from settings")
    accounting_framework: str = Field("FRS 102", description="Accounting framework display text")

    def to_context(self) -> FilingContext:
        return FilingContext(
            company_name=self.company_name,
            company_number=self.company_number,
            period_start=self.period_start,
            period_end=self.period_end,
            balance_sheet_date=self.balance_sheet_date,
            currency=self.currency or get_settings().default_currency,
            accounting_framework=self.accounting_framework,
        )


class FilingPackageRequest(BaseModel):
    """Complete filing package. Give either entity_size or metrics."""

    context: FilingContextRequest
    entity_size: Optional[EntitySize] = Field(None, description="Pre-computed size tier")
    metrics: Optional[EntityMetricsRequest] = Field(None, description="Metrics to classify the company")
    balance_sheet: ComparativeBalanceSheet
    profit_loss: ComparativeProfitLoss
    directors_report: DirectorsReportData
    notes: NotesData
    cash_flow: Optional[ComparativeCashFlow] = None
    strategic_report: Optional[StrategicReportData] = None

    def resolve_size(self) -> EntitySizeResult:
        """Explicit tier wins; otherwise classify from metrics."""
        if self.entity_size is not None:
            return build_size_result(self.entity_size, (self.entity_size,))
        if self.metrics is not None:
            return self.metrics.classify()
        raise InvalidEntitySizeError()

    def to_package(self) -> FilingPackage:
        return FilingPackage(
            context=self.context.to_context(),
            size=self.resolve_size(),
            balance_sheet=self.balance_sheet,
            profit_loss=self.profit_loss,
            directors_report=self.directors_report,
            notes=self.notes,
            cash_flow=self.cash_flow,
            strategic_report=self.strategic_report,
        )


class ValidationResponse(BaseModel):
    """Result of validating a filing package."""

    valid: bool
    errors: List[str]
    entity_size: EntitySize


def size_response(
    result: EntitySizeResult,
    recommendations: Dict[str, object],
    framework: Dict[str, object],
) -> EntitySizeResponse:
    return EntitySizeResponse(
        size=result.size,
        qualifies_as=list(result.qualifies_as),
        criteria=SizeCriteriaResponse(
            turnover=result.criteria.turnover,
            balance_sheet=result.criteria.balance_sheet,
            employees=result.criteria.employees,
        ),
        requires_audit=result.requires_audit,
        can_use_abridged=result.can_use_abridged,
        can_use_micro_entity=result.can_use_micro_entity,
        recommendations=FilingRecommendationsResponse(**recommendations),
        framework=FrameworkResponse(**framework),
    )
