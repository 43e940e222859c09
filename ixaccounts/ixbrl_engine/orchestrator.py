"""
Orchestrator for the iXBRL accounts engine.

Main entry point that coordinates one filing attempt:
Step 1: Validate (identity, balance, mandatory content)
Step 2: Compose (header, statements in filing order)
Step 3: Check references (every context/unit used is declared)
Step 4: Package (single-entry deterministic ZIP)

Preview reuses step 2 and strips the tagging instead of packaging.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

import structlog

from ixaccounts.config import Settings, get_settings
from ixaccounts.exceptions import FilenameDerivationError, UndeclaredReferenceError
from ixaccounts.ixbrl_engine.document import DEFAULT_GENERATOR, compose_document
from ixaccounts.ixbrl_engine.models import FilingPackage, SubmissionResult
from ixaccounts.ixbrl_engine.packaging import DEFAULT_EXTENSION, build_filename, write_archive
from ixaccounts.ixbrl_engine.preview import strip_tags
from ixaccounts.ixbrl_engine.size_policy import DEFAULT_TAXONOMY_VERSION
from ixaccounts.ixbrl_engine.validation import check_document_references, validate_package

logger = structlog.get_logger(__name__)


@dataclass
class GenerationOptions:
    """Configuration options for a generation run."""
    # Balance sheet and cash reconciliation tolerance, currency units
    balance_tolerance: Decimal = Decimal("1")
    # FRC taxonomy release for the schema reference
    taxonomy_version: str = DEFAULT_TAXONOMY_VERSION
    # Archive entry extension
    document_extension: str = DEFAULT_EXTENSION
    generator_name: str = DEFAULT_GENERATOR

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "GenerationOptions":
        settings = settings or get_settings()
        return cls(
            balance_tolerance=settings.balance_tolerance,
            taxonomy_version=settings.taxonomy_version,
            document_extension=settings.document_extension,
            generator_name=settings.generator_name,
        )


def validate_filing(package: FilingPackage, options: Optional[GenerationOptions] = None) -> List[str]:
    """Validation errors for a package; empty when it can be filed."""
    options = options or GenerationOptions()
    return validate_package(package, tolerance=options.balance_tolerance)


def generate_document(package: FilingPackage, options: Optional[GenerationOptions] = None) -> str:
    """
    Compose the inline XBRL document and check its references.

    Does not validate the package; callers filing the result should use
    create_submission_package().

    Raises:
        UndeclaredReferenceError: A fact uses a context or unit with no declaration.
    """
    options = options or GenerationOptions()
    document = compose_document(
        package,
        taxonomy_version=options.taxonomy_version,
        generator_name=options.generator_name,
    )
    undeclared = check_document_references(document)
    if undeclared:
        logger.error(
            "Undeclared references in composed document",
            company_number=package.context.company_number,
            references=undeclared,
        )
        raise UndeclaredReferenceError(undeclared)
    return document


def create_submission_package(
    package: FilingPackage,
    options: Optional[GenerationOptions] = None,
) -> SubmissionResult:
    """
    Main entry point: validate, compose and archive one filing.

    Args:
        package: Fully populated filing package.
        options: Generation options; defaults when omitted.

    Returns:
        SubmissionResult. On validation failure success is False and only
        errors is populated.

    Raises:
        PackagingDefectError: The generator produced an inconsistent document.
    """
    options = options or GenerationOptions()
    context = package.context

    logger.info(
        "Starting submission package generation",
        company_number=context.company_number,
        entity_size=package.entity_size.value,
    )

    errors = validate_filing(package, options)
    if errors:
        logger.warning(
            "Filing package failed validation",
            company_number=context.company_number,
            errors=errors,
        )
        return SubmissionResult(success=False, errors=errors, entity_size=package.entity_size)

    document = generate_document(package, options)

    if context.period_end is None:
        raise FilenameDerivationError("")
    filename = build_filename(context.company_number, context.period_end, options.document_extension)
    archive = write_archive(document, filename)

    logger.info(
        "Submission package created",
        company_number=context.company_number,
        filename=filename,
        archive_bytes=len(archive),
    )

    return SubmissionResult(
        success=True,
        filename=filename,
        archive=archive,
        document=document,
        entity_size=package.entity_size,
    )


def generate_preview(package: FilingPackage, options: Optional[GenerationOptions] = None) -> str:
    """Human-readable preview. Incomplete packages render with placeholders."""
    options = options or GenerationOptions()
    document = compose_document(
        package,
        taxonomy_version=options.taxonomy_version,
        generator_name=options.generator_name,
    )
    logger.info("Preview generated", company_number=package.context.company_number)
    return strip_tags(document)
