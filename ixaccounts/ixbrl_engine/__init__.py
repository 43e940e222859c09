"""
IXAccounts Engine - UK statutory accounts as inline XBRL.

Turns a fully populated FilingPackage into a Companies House ready
submission archive, or a list of reasons it cannot be filed.

Key Principles:
1. Validate once, centrally - generators never raise on missing data
2. Every tagged value goes through the tag primitives
3. Size tier decides content through one policy table
4. Identical input gives identical archive bytes
"""

from ixaccounts.ixbrl_engine.entity_size import (
    applicable_framework,
    classify_entity_size,
    filing_recommendations,
)
from ixaccounts.ixbrl_engine.models import (
    EntitySize,
    EntitySizeResult,
    FilingPackage,
    SubmissionResult,
)
from ixaccounts.ixbrl_engine.orchestrator import (
    GenerationOptions,
    create_submission_package,
    generate_document,
    generate_preview,
    validate_filing,
)

__version__ = "1.0.0"
__all__ = [
    "classify_entity_size",
    "filing_recommendations",
    "applicable_framework",
    "create_submission_package",
    "generate_document",
    "generate_preview",
    "validate_filing",
    "GenerationOptions",
    "EntitySize",
    "EntitySizeResult",
    "FilingPackage",
    "SubmissionResult",
]
