"""
Notes to the financial statements, including Note 1 accounting policies.

Notes are numbered in the order they are rendered. Notes the tier requires
but the record lacks render a placeholder so the gap is visible in preview.
"""

from decimal import Decimal
from typing import Callable, List, Optional

from markupsafe import Markup

from ixaccounts.ixbrl_engine import concepts
from ixaccounts.ixbrl_engine.contexts import CURRENT_INSTANT, CURRENT_PERIOD
from ixaccounts.ixbrl_engine.models import (
    AccountingPolicies,
    EntitySize,
    FilingContext,
    NotesData,
    ShareCapital,
)
from ixaccounts.ixbrl_engine.rendering import render
from ixaccounts.ixbrl_engine.size_policy import (
    NOTE_DIRECTORS_REMUNERATION,
    NOTE_EMPLOYEE_COSTS,
    NOTE_EMPLOYEE_NUMBERS,
    get_size_policy,
)
from ixaccounts.ixbrl_engine.statements.common import (
    PLACEHOLDER,
    Narrative,
    Row,
    tagged_text_or_placeholder,
)
from ixaccounts.ixbrl_engine.tagging import tag_count, tag_monetary, tag_text

GOING_CONCERN_STATEMENT = (
    "The directors have prepared the financial statements on a going concern basis as "
    "they have a reasonable expectation that the company has adequate resources to "
    "continue in operational existence for the foreseeable future."
)

# (field, heading) for the optional policy paragraphs after going concern
POLICY_PARAGRAPHS = (
    ("turnover_recognition", "Turnover"),
    ("tangible_fixed_assets_depreciation", "Tangible Fixed Assets"),
    ("stocks_valuation", "Stocks"),
    ("taxation", "Taxation"),
    ("pension_costs", "Pension Costs"),
    ("foreign_currency", "Foreign Currency Translation"),
    ("leases", "Leases"),
    ("government_grants", "Government Grants"),
    ("research_and_development", "Research and Development"),
)
# Policies every filing describes, shown with a placeholder when blank
REQUIRED_POLICIES = ("turnover_recognition", "tangible_fixed_assets_depreciation", "taxation")


def _money(value: Decimal, concept: str, context_ref: str, unit: str, decimals: int = 0) -> Markup:
    return tag_monetary(value, concept, context_ref, unit, decimals)


def _amounts(rows: List[Row]) -> Markup:
    return render("notes/amounts.xhtml.j2", rows=rows)


def _narrative(value: str, concept: str) -> Markup:
    return render("notes/narrative.xhtml.j2", content=tag_text(value, concept, CURRENT_PERIOD))


def generate_accounting_policies(
    context: FilingContext,
    size: EntitySize,
    record: AccountingPolicies,
) -> Markup:
    """Note 1 body: basis of preparation, going concern and policy paragraphs."""
    concept_for = concepts.ACCOUNTING_POLICIES
    framework = record.accounting_framework or context.accounting_framework
    basis = PLACEHOLDER
    if framework:
        basis = tag_text(
            f"These financial statements have been prepared in accordance with {framework} "
            "and the Companies Act 2006.",
            concept_for["accounting_framework"],
            CURRENT_PERIOD,
        )

    going_concern = uncertainties = None
    if record.going_concern:
        going_concern = tag_text(GOING_CONCERN_STATEMENT, concept_for["going_concern"], CURRENT_PERIOD)
        if record.going_concern_uncertainties:
            uncertainties = tag_text(
                record.going_concern_uncertainties,
                concept_for["going_concern_uncertainties"],
                CURRENT_PERIOD,
            )

    policies = [
        Narrative(title, tagged_text_or_placeholder(getattr(record, name), concept_for[name], CURRENT_PERIOD))
        for name, title in POLICY_PARAGRAPHS
        if getattr(record, name) or name in REQUIRED_POLICIES
    ]

    return render(
        "notes/accounting_policies.xhtml.j2",
        basis=basis,
        size=EntitySize(size).value,
        going_concern=going_concern,
        uncertainties=uncertainties,
        policies=policies,
    )


def _employees(record: NotesData, context: FilingContext, required: bool) -> Optional[Markup]:
    numbers, costs = record.employee_numbers, record.employee_costs
    if numbers is None and costs is None and not required:
        return None
    number_rows = []
    if numbers is not None:
        number_rows.append(Row(
            "Average number of employees",
            (tag_count(numbers.average, concepts.EMPLOYEES_AVERAGE, CURRENT_PERIOD),),
        ))
        for label, value, concept in (
            ("Administration", numbers.administration, concepts.EMPLOYEES_ADMINISTRATION),
            ("Production", numbers.production, concepts.EMPLOYEES_PRODUCTION),
            ("Distribution", numbers.distribution, concepts.EMPLOYEES_DISTRIBUTION),
        ):
            if value is not None:
                number_rows.append(Row(label, (tag_count(value, concept, CURRENT_PERIOD),)))
    cost_rows = []
    if costs is not None:
        unit = context.currency
        cost_rows = [
            Row("Wages and salaries", (_money(costs.wages, concepts.WAGES_SALARIES, CURRENT_PERIOD, unit),)),
            Row("Social security costs", (_money(costs.social_security, concepts.SOCIAL_SECURITY_COSTS, CURRENT_PERIOD, unit),)),
            Row("Pension costs", (_money(costs.pension, concepts.PENSION_COSTS, CURRENT_PERIOD, unit),)),
            Row("Total staff costs", (_money(costs.total, concepts.STAFF_COSTS_TOTAL, CURRENT_PERIOD, unit),)),
        ]
    return render(
        "notes/employees.xhtml.j2",
        number_rows=number_rows,
        cost_rows=cost_rows,
        placeholder=PLACEHOLDER,
    )


def _directors_remuneration(record: NotesData, context: FilingContext) -> Markup:
    remuneration = record.directors_remuneration
    if remuneration is None:
        return render("notes/narrative.xhtml.j2", content=PLACEHOLDER)
    unit = context.currency
    rows = [Row(
        "Directors' aggregate remuneration",
        (_money(remuneration.total, concepts.DIRECTORS_REMUNERATION, CURRENT_PERIOD, unit),),
    )]
    if remuneration.highest_paid is not None:
        rows.append(Row(
            "Highest paid director",
            (_money(remuneration.highest_paid, concepts.HIGHEST_PAID_DIRECTOR, CURRENT_PERIOD, unit),),
        ))
    return _amounts(rows)


def _breakdown(record, labels, concept_map, unit: str) -> Markup:
    return _amounts([
        Row(label, (_money(getattr(record, name), concept_map[name], CURRENT_INSTANT, unit),))
        for name, label in labels
        if getattr(record, name) is not None
    ])


def _share_capital(share_capital: ShareCapital, unit: str) -> Markup:
    authorised = share_capital.authorised
    issued = share_capital.issued
    return render(
        "notes/share_capital.xhtml.j2",
        authorised=authorised,
        authorised_count=(
            tag_count(authorised.number_of_shares, concepts.SHARES_AUTHORISED, CURRENT_INSTANT)
            if authorised is not None else None
        ),
        issued={
            "share_class": tag_text(issued.share_class, concepts.SHARE_CLASS_NAME, CURRENT_INSTANT),
            "number": tag_count(issued.number_of_shares, concepts.SHARES_ISSUED, CURRENT_INSTANT),
            "nominal_value": _money(issued.nominal_value, concepts.NOMINAL_VALUE, CURRENT_INSTANT, unit, 2),
        },
    )


def _related_parties(record: NotesData, unit: str) -> Markup:
    transactions = [
        {
            "party": tag_text(transaction.party, concepts.RELATED_PARTY_NAME, CURRENT_PERIOD),
            "nature": tag_text(transaction.nature, concepts.RELATED_PARTY_NATURE, CURRENT_PERIOD),
            "amount": _money(transaction.amount, concepts.RELATED_PARTY_AMOUNT, CURRENT_PERIOD, unit),
        }
        for transaction in record.related_party_transactions
    ]
    return render("notes/related_parties.xhtml.j2", transactions=transactions)


def generate_notes(
    context: FilingContext,
    size: EntitySize,
    record: NotesData,
) -> Markup:
    """Render all notes present in the record, numbered from 1."""
    policy = get_size_policy(size)
    unit = context.currency
    notes: List[Narrative] = [
        Narrative("Accounting Policies", generate_accounting_policies(context, size, record.accounting_policies)),
    ]

    def add(title: str, build: Callable[[], Optional[Markup]]) -> None:
        body = build()
        if body is not None:
            notes.append(Narrative(title, body))

    employees_required = (
        NOTE_EMPLOYEE_NUMBERS in policy.mandatory_notes
        or NOTE_EMPLOYEE_COSTS in policy.mandatory_notes
    )
    add("Employees", lambda: _employees(record, context, employees_required))

    if policy.include_directors_remuneration and (
        record.directors_remuneration is not None
        or NOTE_DIRECTORS_REMUNERATION in policy.mandatory_notes
    ):
        add("Directors' Remuneration", lambda: _directors_remuneration(record, context))

    if record.tangible_fixed_assets is not None:
        assets = record.tangible_fixed_assets
        add("Tangible Fixed Assets", lambda: _breakdown(
            assets,
            (
                ("land_buildings", "Land and buildings"),
                ("plant_machinery", "Plant and machinery"),
                ("fixtures_fittings", "Fixtures and fittings"),
                ("motor_vehicles", "Motor vehicles"),
            ),
            concepts.TANGIBLE_ASSET_CLASSES,
            unit,
        ))

    if record.debtors is not None:
        add("Debtors", lambda: _breakdown(
            record.debtors,
            (
                ("trade_debtors", "Trade debtors"),
                ("other_debtors", "Other debtors"),
                ("prepayments", "Prepayments and accrued income"),
            ),
            concepts.DEBTORS_BREAKDOWN,
            unit,
        ))

    if record.creditors is not None:
        add("Creditors: amounts falling due within one year", lambda: _breakdown(
            record.creditors,
            (
                ("trade_creditors", "Trade creditors"),
                ("taxation_social_security", "Taxation and social security"),
                ("other_creditors", "Other creditors"),
                ("accruals", "Accruals and deferred income"),
            ),
            concepts.CREDITORS_BREAKDOWN,
            unit,
        ))

    if record.share_capital is not None:
        add("Share Capital", lambda: _share_capital(record.share_capital, unit))

    if record.related_party_transactions:
        add("Related Party Transactions", lambda: _related_parties(record, unit))

    if record.post_balance_sheet_events:
        add("Events after the Reporting Period", lambda: _narrative(
            record.post_balance_sheet_events, concepts.POST_BALANCE_SHEET_EVENTS
        ))

    if record.ultimate_controlling_party:
        add("Ultimate Controlling Party", lambda: _narrative(
            record.ultimate_controlling_party, concepts.ULTIMATE_CONTROLLING_PARTY
        ))

    return render("statements/notes.xhtml.j2", period_end=context.period_end, notes=notes)
