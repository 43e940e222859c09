"""
Directors' report generator.
"""

from typing import Dict, List, Optional

from markupsafe import Markup

from ixaccounts.ixbrl_engine import concepts
from ixaccounts.ixbrl_engine.contexts import CURRENT_PERIOD
from ixaccounts.ixbrl_engine.models import (
    DirectorsReportData,
    EntitySize,
    FilingContext,
)
from ixaccounts.ixbrl_engine.rendering import render
from ixaccounts.ixbrl_engine.size_policy import get_size_policy
from ixaccounts.ixbrl_engine.statements.common import (
    PLACEHOLDER,
    Narrative,
    tagged_date_or_placeholder,
    tagged_text_or_placeholder,
)
from ixaccounts.ixbrl_engine.tagging import format_date, tag_monetary, tag_text

SMALL_COMPANY_STATEMENT = (
    "This report has been prepared in accordance with the provisions applicable to "
    "companies entitled to the small companies exemption."
)

BUSINESS_REVIEW_PARTS = (
    ("business_review", "Business Review", concepts.BUSINESS_REVIEW),
    ("key_performance_indicators", "Key Performance Indicators", concepts.DIRECTORS_KPIS),
    ("principal_risks", "Principal Risks and Uncertainties", concepts.DIRECTORS_PRINCIPAL_RISKS),
    ("future_developments", "Future Developments", concepts.FUTURE_DEVELOPMENTS),
    ("research_and_development", "Research and Development", concepts.RESEARCH_DEVELOPMENT),
)


def _directors(record: DirectorsReportData) -> List[Dict]:
    return [
        {
            "name": tag_text(director.name, concepts.DIRECTOR_NAME, CURRENT_PERIOD),
            "appointed": director.appointment_date,
            "resigned": director.resignation_date,
        }
        for director in record.directors
    ]


def _business_review(record: DirectorsReportData) -> List[Narrative]:
    return [
        Narrative(title, tag_text(getattr(record, name), concept, CURRENT_PERIOD))
        for name, title, concept in BUSINESS_REVIEW_PARTS
        if getattr(record, name)
    ]


def _dividend(value, concept: str, currency: str) -> Optional[Markup]:
    if value is None:
        return None
    return tag_monetary(value, concept, CURRENT_PERIOD, currency)


def _audit_exemption(context: FilingContext) -> Markup:
    year_end = format_date(context.period_end) if context.period_end else "the period"
    statement = (
        "For the year ending "
        f"{year_end} the company was entitled to exemption from audit under section 477 "
        "of the Companies Act 2006 relating to small companies. The members have not "
        "required the company to obtain an audit of its accounts for the year in "
        "question in accordance with section 476."
    )
    return tag_text(statement, concepts.AUDIT_EXEMPTION_STATEMENT, CURRENT_PERIOD)


def generate_directors_report(
    context: FilingContext,
    size: EntitySize,
    record: DirectorsReportData,
) -> Markup:
    """Render the directors' report, ending with the signing director."""
    policy = get_size_policy(size)
    small_company_statement = None
    if record.small_company_regime:
        small_company_statement = tag_text(
            SMALL_COMPANY_STATEMENT, concepts.SMALL_COMPANY_STATEMENT, CURRENT_PERIOD
        )

    return render(
        "statements/directors_report.xhtml.j2",
        period_end=context.period_end,
        directors=_directors(record),
        placeholder=PLACEHOLDER,
        principal_activities=tagged_text_or_placeholder(
            record.principal_activities, concepts.PRINCIPAL_ACTIVITIES, CURRENT_PERIOD
        ),
        business_review=_business_review(record) if policy.include_business_review else [],
        financial_instruments=policy.include_financial_instruments,
        dividends_paid=_dividend(record.dividends_paid, concepts.DIVIDENDS_PAID, context.currency),
        dividends_proposed=_dividend(record.dividends_proposed, concepts.DIVIDENDS_PROPOSED, context.currency),
        audit_exemption=_audit_exemption(context) if record.audit_exemption else None,
        audit_exemption_reason=record.audit_exemption_reason,
        small_company_statement=small_company_statement,
        approved_on=tagged_date_or_placeholder(
            record.approval_date, concepts.DIRECTORS_REPORT_APPROVAL_DATE, CURRENT_PERIOD
        ),
        signed_by=tagged_text_or_placeholder(
            record.director_signature, concepts.DIRECTOR_SIGNING_REPORT, CURRENT_PERIOD
        ),
        director_position=record.director_position,
    )
