"""
Accounts API routes.

Classify company size, validate filing packages, render previews and build
the Companies House submission archive.
"""

from pathlib import PurePosixPath

import structlog
from fastapi import APIRouter
from fastapi.responses import HTMLResponse, Response

from ixaccounts.config import get_settings
from ixaccounts.exceptions import FilingValidationError
from ixaccounts.ixbrl_engine.entity_size import applicable_framework, filing_recommendations
from ixaccounts.ixbrl_engine.orchestrator import (
    GenerationOptions,
    create_submission_package,
    generate_preview,
    validate_filing,
)
from ixaccounts.schemas.accounts import (
    EntityMetricsRequest,
    EntitySizeResponse,
    FilingPackageRequest,
    ValidationResponse,
    size_response,
)

logger = structlog.get_logger(__name__)
settings = get_settings()

router = APIRouter()


# =============================================================================
# API Endpoints
# =============================================================================

@router.post(
    "/accounts/entity-size",
    response_model=EntitySizeResponse,
    summary="Classify entity size",
    description="Apply the Companies Act size thresholds to one or two years of metrics.",
)
def classify_size(request: EntityMetricsRequest) -> EntitySizeResponse:
    """Classify a company and list its filing options."""
    result = request.classify()
    return size_response(
        result,
        filing_recommendations(result),
        applicable_framework(result.size, settings.taxonomy_version),
    )


@router.post(
    "/accounts/validate",
    response_model=ValidationResponse,
    summary="Validate filing package",
    description="Run every filing check and return the list of problems found.",
)
def validate_accounts(request: FilingPackageRequest) -> ValidationResponse:
    """Validate without generating anything."""
    package = request.to_package()
    errors = validate_filing(package, GenerationOptions.from_settings(settings))
    return ValidationResponse(valid=not errors, errors=errors, entity_size=package.entity_size)


@router.post(
    "/accounts/preview",
    response_class=HTMLResponse,
    summary="Preview accounts",
    description="Render the accounts without inline XBRL tags. Not for submission.",
)
def preview_accounts(request: FilingPackageRequest) -> HTMLResponse:
    """Render a preview; incomplete packages show placeholders."""
    package = request.to_package()
    return HTMLResponse(content=generate_preview(package, GenerationOptions.from_settings(settings)))


@router.post(
    "/accounts/package",
    summary="Build submission package",
    description="Validate and build the ZIP archive containing the iXBRL accounts.",
    responses={
        200: {"content": {"application/zip": {}}, "description": "Submission archive"},
        422: {"description": "Filing package failed validation"},
    },
)
def package_accounts(request: FilingPackageRequest) -> Response:
    """Build the archive or fail with the validation errors."""
    package = request.to_package()
    result = create_submission_package(package, GenerationOptions.from_settings(settings))

    if not result.success:
        raise FilingValidationError(
            result.errors,
            details={"company_number": package.context.company_number},
        )

    archive_name = f"{PurePosixPath(result.filename).stem}.zip"
    logger.info(
        "Submission archive served",
        company_number=package.context.company_number,
        archive=archive_name,
    )
    return Response(
        content=result.archive,
        media_type="application/zip",
        headers={
            "Content-Disposition": f'attachment; filename="{archive_name}"',
            "X-Document-Filename": result.filename,
        },
    )
