"""
Tests for the orchestrator entry points.

Covers:
- Validation failures return errors without an archive
- Successful runs produce a deterministic single-entry archive
- Preview renders incomplete packages
- Generator inconsistencies surface as packaging defects
"""

import io
import zipfile
from dataclasses import replace
from decimal import Decimal
from unittest.mock import patch

import pytest

from ixaccounts.config import Settings
from ixaccounts.exceptions import UndeclaredReferenceError
from ixaccounts.ixbrl_engine.models import ComparativeBalanceSheet, DirectorsReportData, EntitySize
from ixaccounts.ixbrl_engine.orchestrator import (
    GenerationOptions,
    create_submission_package,
    generate_document,
    generate_preview,
    validate_filing,
)
from ixaccounts.ixbrl_engine.preview import PREVIEW_BANNER_TEXT


class TestGenerationOptions:
    """Options loaded from settings."""

    def test_defaults(self):
        options = GenerationOptions()
        assert options.balance_tolerance == Decimal("1")
        assert options.document_extension == "html"

    def test_from_settings(self):
        settings = Settings(taxonomy_version="2024-01-01", document_extension="xhtml", balance_tolerance="5")
        options = GenerationOptions.from_settings(settings)

        assert options.taxonomy_version == "2024-01-01"
        assert options.document_extension == "xhtml"
        assert options.balance_tolerance == Decimal("5")


class TestSubmissionPackage:
    """create_submission_package()."""

    def test_success(self, sample_package):
        result = create_submission_package(sample_package)

        assert result.success
        assert result.errors == []
        assert result.filename == "12345678-20241231-accounts.html"
        assert result.entity_size == EntitySize.SMALL

        with zipfile.ZipFile(io.BytesIO(result.archive)) as zf:
            assert zf.namelist() == [result.filename]
            assert zf.read(result.filename).decode("utf-8") == result.document

    def test_deterministic_archive(self, sample_package):
        first = create_submission_package(sample_package)
        second = create_submission_package(sample_package)
        assert first.archive == second.archive

    def test_validation_failure(self, make_package, balance_sheet):
        record = replace(balance_sheet, profit_and_loss_account=Decimal("1"))
        result = create_submission_package(make_package(balance_sheet=ComparativeBalanceSheet(record)))

        assert not result.success
        assert len(result.errors) == 1
        assert result.archive == b""
        assert result.filename == ""

    def test_separator_in_company_number_rejected_before_packaging(self, make_package, filing_context):
        """A number the archive name cannot carry is a validation error, not a defect."""
        result = create_submission_package(
            make_package(context=replace(filing_context, company_number="1234-5678"))
        )

        assert not result.success
        assert "Invalid company number" in result.errors
        assert result.archive == b""

    def test_options_applied(self, sample_package):
        options = GenerationOptions(document_extension="xhtml", taxonomy_version="2024-01-01")
        result = create_submission_package(sample_package, options)

        assert result.filename.endswith(".xhtml")
        assert "uk-gaap-frs-102-2024-01-01.xsd" in result.document

    def test_medium_with_cash_flow(self, medium_package):
        result = create_submission_package(medium_package)

        assert result.success
        assert 'class="cash-flow"' in result.document

    def test_undeclared_reference_is_defect(self, sample_package):
        with patch(
            "ixaccounts.ixbrl_engine.orchestrator.check_document_references",
            return_value=["context:previous"],
        ):
            with pytest.raises(UndeclaredReferenceError) as exc_info:
                create_submission_package(sample_package)

        assert exc_info.value.details["references"] == ["context:previous"]


class TestDocumentAndPreview:
    """generate_document(), generate_preview() and validate_filing()."""

    def test_generate_document(self, sample_package):
        document = generate_document(sample_package)
        assert "<ix:header>" in document

    def test_validate_filing(self, sample_package):
        assert validate_filing(sample_package) == []

    def test_validate_filing_uses_tolerance(self, make_package, balance_sheet):
        record = replace(balance_sheet, profit_and_loss_account=Decimal("109050"))
        package = make_package(balance_sheet=ComparativeBalanceSheet(record))

        assert validate_filing(package) != []
        assert validate_filing(package, GenerationOptions(balance_tolerance=Decimal("100"))) == []

    def test_preview_of_incomplete_package(self, make_package):
        """Preview renders placeholders instead of failing."""
        package = make_package(directors_report=DirectorsReportData())
        preview = generate_preview(package)

        assert PREVIEW_BANNER_TEXT in preview
        assert "Not provided" in preview
        assert "<ix:" not in preview
