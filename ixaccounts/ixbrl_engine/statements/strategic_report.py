"""
Strategic report generator (Companies Act 2006 s414A).

Only rendered for large companies that supplied a strategic report record.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from markupsafe import Markup

from ixaccounts.ixbrl_engine import concepts
from ixaccounts.ixbrl_engine.contexts import CURRENT_PERIOD
from ixaccounts.ixbrl_engine.models import (
    EntitySize,
    FilingContext,
    StrategicReportData,
)
from ixaccounts.ixbrl_engine.rendering import render
from ixaccounts.ixbrl_engine.statements.common import Narrative, tagged_date_or_placeholder
from ixaccounts.ixbrl_engine.tagging import tag_text

STRATEGY = (
    ("business_model", "Business Model"),
    ("strategy_and_objectives", "Strategy and Objectives"),
)
PERFORMANCE = (("financial_performance", "Financial Performance"),)
NON_FINANCIAL = (
    ("environmental_matters", "Environmental Matters"),
    ("employees", "Employees"),
    ("social_matters", "Social Matters"),
    ("human_rights", "Human Rights"),
    ("anti_corruption", "Anti-Corruption and Anti-Bribery Matters"),
)


def _tagged(record: StrategicReportData, name: str) -> Optional[Markup]:
    value = getattr(record, name)
    if not value:
        return None
    return tag_text(value, concepts.STRATEGIC_REPORT[name], CURRENT_PERIOD)


def _narratives(record: StrategicReportData, parts: Sequence[Tuple[str, str]]) -> List[Narrative]:
    return [
        Narrative(title, _tagged(record, name))
        for name, title in parts
        if getattr(record, name)
    ]


def _kpis(record: StrategicReportData) -> List[Dict]:
    return [
        {
            "name": tag_text(kpi.name, concepts.KPI_NAME, CURRENT_PERIOD),
            "value": tag_text(kpi.value, concepts.KPI_VALUE, CURRENT_PERIOD),
            "analysis": kpi.analysis,
        }
        for kpi in record.key_performance_indicators
    ]


def _risks(record: StrategicReportData) -> List[Dict]:
    return [
        {
            "risk": tag_text(risk.risk, concepts.PRINCIPAL_RISK, CURRENT_PERIOD),
            "impact": risk.impact,
            "mitigation": risk.mitigation,
        }
        for risk in record.principal_risks
    ]


def generate_strategic_report(
    context: FilingContext,
    size: EntitySize,
    record: StrategicReportData,
    signatory: Optional[str] = None,
) -> Markup:
    """Render the strategic report narrative sections present in the record."""
    name = record.approved_by_director or signatory or ""
    signed_by = tag_text(name, concepts.STRATEGIC_REPORT_SIGNATORY, CURRENT_PERIOD) if name else ""

    return render(
        "statements/strategic_report.xhtml.j2",
        period_end=context.period_end,
        strategy=_narratives(record, STRATEGY),
        business_review=_tagged(record, "business_review"),
        performance=_narratives(record, PERFORMANCE),
        kpis=_kpis(record),
        risks=_risks(record),
        non_financial=_narratives(record, NON_FINANCIAL),
        future_developments=_tagged(record, "future_developments"),
        approved_on=tagged_date_or_placeholder(
            record.approval_date, concepts.STRATEGIC_REPORT_APPROVAL_DATE, CURRENT_PERIOD
        ),
        signed_by=signed_by,
        director_position=record.director_position or "Director",
    )
