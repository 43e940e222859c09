"""
Tests for document composition and the preview filter.
"""

import re
from dataclasses import replace
from decimal import Decimal

from ixaccounts.ixbrl_engine.document import (
    BALANCE_SHEET,
    CASH_FLOW,
    DIRECTORS_REPORT,
    NOTES,
    PROFIT_LOSS,
    STRATEGIC_REPORT,
    compose_document,
    plan_document,
)
from ixaccounts.ixbrl_engine.models import (
    ComparativeBalanceSheet,
    ComparativeCashFlow,
    ComparativeProfitLoss,
    EntitySize,
)
from ixaccounts.ixbrl_engine.preview import PREVIEW_BANNER_TEXT, strip_tags
from ixaccounts.ixbrl_engine.validation import check_document_references

TAG_PATTERN = re.compile(r"</?ix:(?:nonFraction|nonNumeric)\b[^>]*>")


class TestDocumentPlan:
    """Section order and context needs."""

    def test_small_sections(self, sample_package):
        plan = plan_document(sample_package)

        assert plan.sections == [DIRECTORS_REPORT, BALANCE_SHEET, PROFIT_LOSS, NOTES]
        assert not plan.comparatives
        assert not plan.has_cash_flow

    def test_cash_flow_skipped_for_small(self, make_package, cash_flow):
        plan = plan_document(make_package(cash_flow=ComparativeCashFlow(cash_flow)))
        assert CASH_FLOW not in plan.sections

    def test_large_sections(self, make_package, full_notes, cash_flow, strategic_report):
        package = make_package(
            EntitySize.LARGE,
            notes=full_notes,
            cash_flow=ComparativeCashFlow(cash_flow, cash_flow),
            strategic_report=strategic_report,
        )
        plan = plan_document(package)

        assert plan.sections == [STRATEGIC_REPORT, DIRECTORS_REPORT, BALANCE_SHEET, PROFIT_LOSS, CASH_FLOW, NOTES]
        assert plan.comparatives
        assert plan.cash_flow_comparatives

    def test_prior_profit_loss_enables_comparatives(self, make_package, profit_loss):
        package = make_package(profit_loss=ComparativeProfitLoss(profit_loss, profit_loss))
        plan = plan_document(package)

        assert plan.comparatives
        assert plan.comparatives == package.has_comparatives
        assert not plan.cash_flow_comparatives

    def test_strategic_report_ignored_below_large(self, make_package, strategic_report):
        plan = plan_document(make_package(EntitySize.MEDIUM, strategic_report=strategic_report))
        assert STRATEGIC_REPORT not in plan.sections


class TestComposeDocument:
    """Complete document structure."""

    def test_wrapper(self, sample_package):
        document = compose_document(sample_package)

        assert document.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert 'xmlns:ix="http://www.xbrl.org/2013/inlineXBRL"' in document
        assert 'xmlns:ixt="http://www.xbrl.org/inlineXBRL/transformation/2020-02-12"' in document
        assert "<title>Annual Accounts - Acme Widgets Limited - 2024-12-31</title>" in document
        assert "uk-gaap-frs-102-2025-01-01.xsd" in document

    def test_section_order(self, sample_package):
        document = compose_document(sample_package)

        positions = [
            document.index('class="directors-report"'),
            document.index('class="balance-sheet"'),
            document.index('class="profit-loss"'),
            document.index('class="notes"'),
        ]
        assert positions == sorted(positions)

    def test_identity_tagged(self, sample_package):
        document = compose_document(sample_package)

        assert ">Acme Widgets Limited</ix:nonNumeric>" in document
        assert ">12345678</ix:nonNumeric>" in document

    def test_references_declared(self, sample_package):
        assert check_document_references(compose_document(sample_package)) == []

    def test_references_declared_with_comparatives_and_cash_flow(
        self, medium_package, balance_sheet, prior_balance_sheet, cash_flow
    ):
        package = replace(
            medium_package,
            balance_sheet=ComparativeBalanceSheet(balance_sheet, prior_balance_sheet),
            cash_flow=ComparativeCashFlow(cash_flow, cash_flow),
        )
        document = compose_document(package)

        assert check_document_references(document) == []
        assert '<xbrli:context id="balance-sheet-opening">' in document

    def test_current_cash_flow_declares_prior_instant(self, medium_package):
        document = compose_document(medium_package)

        assert '<xbrli:context id="balance-sheet-previous">' in document
        assert '<xbrli:context id="previous">' not in document
        assert check_document_references(document) == []

    def test_generator_name(self, sample_package):
        document = compose_document(sample_package, generator_name="Test Suite")
        assert '<meta name="generator" content="Test Suite"/>' in document

    def test_deterministic(self, sample_package):
        assert compose_document(sample_package) == compose_document(sample_package)


class TestPreview:
    """Tag stripping."""

    def test_preview_has_no_tagging(self, sample_package):
        preview = strip_tags(compose_document(sample_package))

        assert "<ix:" not in preview
        assert "</ix:" not in preview
        assert "xbrli:context" not in preview

    def test_banner_after_body(self, sample_package):
        preview = strip_tags(compose_document(sample_package))
        assert preview.index(PREVIEW_BANNER_TEXT) > preview.index("<body>")

    def test_visible_text_unchanged(self, sample_package):
        """Preview equals the document minus header, wrappers and banner."""
        document = compose_document(sample_package)
        header_start = document.index('<div style="display:none">')
        header_end = document.index("</ix:header>\n</div>") + len("</ix:header>\n</div>\n")
        visible = TAG_PATTERN.sub("", document[:header_start] + document[header_end:])

        preview = strip_tags(document)
        banner_line = next(line for line in preview.splitlines() if PREVIEW_BANNER_TEXT in line)

        assert preview.replace(banner_line + "\n", "", 1) == visible

    def test_preview_keeps_negative_brackets(self, make_package, profit_loss):
        package = make_package(
            profit_loss=ComparativeProfitLoss(replace(profit_loss, profit_for_financial_year=Decimal("-35000")))
        )
        assert "(35,000)" in strip_tags(compose_document(package))
