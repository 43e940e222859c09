"""
Document composition.

Assembles the XHTML wrapper, the hidden header block and the statement
fragments in filing order. The same composed string feeds both the submission
archive and the preview.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

import structlog
from markupsafe import Markup

from ixaccounts.ixbrl_engine import concepts
from ixaccounts.ixbrl_engine.contexts import CURRENT_PERIOD, build_contexts, render_header_block
from ixaccounts.ixbrl_engine.models import FilingPackage
from ixaccounts.ixbrl_engine.rendering import render
from ixaccounts.ixbrl_engine.size_policy import DEFAULT_TAXONOMY_VERSION, get_size_policy, schema_ref
from ixaccounts.ixbrl_engine.statements import (
    generate_balance_sheet,
    generate_cash_flow,
    generate_directors_report,
    generate_notes,
    generate_profit_loss,
    generate_strategic_report,
)
from ixaccounts.ixbrl_engine.statements.common import tagged_date_or_placeholder, tagged_text_or_placeholder

logger = structlog.get_logger(__name__)

DEFAULT_GENERATOR = "IXAccounts iXBRL Generator"

# Section names in filing order
STRATEGIC_REPORT = "strategic_report"
DIRECTORS_REPORT = "directors_report"
BALANCE_SHEET = "balance_sheet"
PROFIT_LOSS = "profit_loss"
CASH_FLOW = "cash_flow"
NOTES = "notes"


@dataclass(frozen=True)
class DocumentPlan:
    """Which optional parts a package renders."""
    sections: List[str]
    comparatives: bool
    cash_flow_comparatives: bool

    @property
    def has_cash_flow(self) -> bool:
        return CASH_FLOW in self.sections


def plan_document(package: FilingPackage) -> DocumentPlan:
    """Decide section order and context needs from the tier and the records supplied."""
    policy = get_size_policy(package.entity_size)
    sections = []
    if policy.include_strategic_report and package.strategic_report is not None:
        sections.append(STRATEGIC_REPORT)
    sections.extend([DIRECTORS_REPORT, BALANCE_SHEET, PROFIT_LOSS])
    include_cash_flow = policy.include_cash_flow and package.cash_flow is not None
    if include_cash_flow:
        sections.append(CASH_FLOW)
    sections.append(NOTES)

    cash_flow_comparatives = include_cash_flow and package.cash_flow.previous_year is not None
    return DocumentPlan(sections, package.has_comparatives, cash_flow_comparatives)


def _render_section(name: str, package: FilingPackage) -> Markup:
    context = package.context
    size = package.entity_size
    report = package.directors_report
    if name == STRATEGIC_REPORT:
        return generate_strategic_report(context, size, package.strategic_report, signatory=report.director_signature)
    if name == DIRECTORS_REPORT:
        return generate_directors_report(context, size, report)
    if name == BALANCE_SHEET:
        return generate_balance_sheet(
            context, size, package.balance_sheet,
            approval_date=report.approval_date,
            signatory=report.director_signature,
        )
    if name == PROFIT_LOSS:
        return generate_profit_loss(context, size, package.profit_loss)
    if name == CASH_FLOW:
        return generate_cash_flow(context, size, package.cash_flow)
    if name == NOTES:
        return generate_notes(context, size, package.notes)
    raise ValueError(f"Unknown document section: {name}")


def _identity(package: FilingPackage) -> Dict[str, Markup]:
    context = package.context
    return {
        "company_name": tagged_text_or_placeholder(context.company_name, concepts.ENTITY_NAME, CURRENT_PERIOD),
        "company_number": tagged_text_or_placeholder(context.company_number, concepts.ENTITY_NUMBER, CURRENT_PERIOD),
        "period_start": tagged_date_or_placeholder(context.period_start, concepts.PERIOD_START, CURRENT_PERIOD),
        "period_end": tagged_date_or_placeholder(context.period_end, concepts.PERIOD_END, CURRENT_PERIOD),
        "balance_sheet_date": tagged_date_or_placeholder(
            context.balance_sheet_date, concepts.BALANCE_SHEET_DATE, CURRENT_PERIOD
        ),
    }


def compose_document(
    package: FilingPackage,
    taxonomy_version: str = DEFAULT_TAXONOMY_VERSION,
    generator_name: Optional[str] = None,
) -> str:
    """
    Build the complete inline XBRL document for a package.

    Args:
        package: The filing package. Not validated here.
        taxonomy_version: FRC taxonomy release for the schema reference.
        generator_name: Value for the generator meta tag.

    Returns:
        XHTML document as a string.
    """
    plan = plan_document(package)
    declarations = build_contexts(
        package.context,
        comparatives=plan.comparatives,
        cash_flow=plan.has_cash_flow,
        cash_flow_comparatives=plan.cash_flow_comparatives,
    )
    header_block = render_header_block(
        package.context,
        declarations,
        schema_ref(package.entity_size, taxonomy_version),
    )

    sections = [_render_section(name, package) for name in plan.sections]

    logger.debug(
        "Document composed",
        company_number=package.context.company_number,
        entity_size=package.entity_size.value,
        sections=plan.sections,
        contexts=[declaration.id for declaration in declarations],
    )

    document = render(
        "document.xhtml.j2",
        namespaces=concepts.NAMESPACES,
        generator=generator_name or DEFAULT_GENERATOR,
        company_name=package.context.company_name,
        period_end=package.context.period_end,
        header_block=header_block,
        identity=_identity(package),
        sections=sections,
    )
    return str(document)
