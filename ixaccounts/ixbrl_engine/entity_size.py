"""
Entity size classification under the Companies Act 2006.

A company falls in a size band when it meets at least two of the three
criteria (turnover, balance sheet total, average employees) for that band.
Where two years are supplied the company must qualify in both, so the result
is the smallest band common to both years.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

import structlog

from ixaccounts.ixbrl_engine.models import (
    EntityMetrics,
    EntitySize,
    EntitySizeResult,
    SizeCriteria,
)
from ixaccounts.ixbrl_engine.size_policy import (
    DEFAULT_TAXONOMY_VERSION,
    get_size_policy,
    taxonomy_entry_point,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SizeThreshold:
    """Upper bounds for one size band (inclusive)."""
    turnover: Decimal
    balance_sheet_total: Decimal
    employees: int


# Thresholds in GBP for financial years beginning on or after 6 April 2025
THRESHOLDS: Dict[EntitySize, SizeThreshold] = {
    EntitySize.MICRO: SizeThreshold(Decimal("632000"), Decimal("316000"), 10),
    EntitySize.SMALL: SizeThreshold(Decimal("10200000"), Decimal("5100000"), 50),
    EntitySize.MEDIUM: SizeThreshold(Decimal("36000000"), Decimal("18000000"), 250),
}

# A band is satisfied when this many criteria hold
CRITERIA_REQUIRED = 2


def evaluate_criteria(metrics: EntityMetrics, size: EntitySize) -> SizeCriteria:
    """Check one year's metrics against one band's thresholds."""
    threshold = THRESHOLDS[size]
    return SizeCriteria(
        turnover=Decimal(metrics.turnover) <= threshold.turnover,
        balance_sheet=Decimal(metrics.balance_sheet_total) <= threshold.balance_sheet_total,
        employees=metrics.employees <= threshold.employees,
    )


def qualifying_sizes(metrics: EntityMetrics) -> List[EntitySize]:
    """Bands (smallest first) for which the metrics meet two of three criteria."""
    return [
        size for size in THRESHOLDS
        if evaluate_criteria(metrics, size).met_count >= CRITERIA_REQUIRED
    ]


def build_size_result(
    size: EntitySize,
    qualifies_as: Tuple[EntitySize, ...] = (),
    criteria: Optional[SizeCriteria] = None,
) -> EntitySizeResult:
    """Assemble a result with the derived filing permissions for a tier."""
    return EntitySizeResult(
        size=size,
        qualifies_as=tuple(qualifies_as),
        criteria=criteria or SizeCriteria(),
        # Simplified: ignores public company status and member-requested audits
        requires_audit=size in (EntitySize.MEDIUM, EntitySize.LARGE),
        can_use_abridged=size in (EntitySize.MICRO, EntitySize.SMALL),
        can_use_micro_entity=size == EntitySize.MICRO,
    )


def classify_entity_size(
    current: EntityMetrics,
    previous: Optional[EntityMetrics] = None,
) -> EntitySizeResult:
    """
    Classify a company from one or two years of metrics.

    Args:
        current: Metrics for the financial year being filed.
        previous: Metrics for the preceding year, if available.

    Returns:
        EntitySizeResult with the resolved tier and filing permissions.
    """
    current_bands = qualifying_sizes(current)

    if previous is not None:
        previous_bands = qualifying_sizes(previous)
        bands = [size for size in current_bands if size in previous_bands]
    else:
        bands = current_bands

    size = bands[0] if bands else EntitySize.LARGE

    # Large has no thresholds of its own; report how close it came to medium
    criteria_band = EntitySize.MEDIUM if size == EntitySize.LARGE else size
    criteria = evaluate_criteria(current, criteria_band)

    logger.info(
        "Entity size classified",
        size=size.value,
        qualifies_as=[band.value for band in bands],
        two_year=previous is not None,
    )

    return build_size_result(size, tuple(bands), criteria)


def filing_recommendations(result: EntitySizeResult) -> Dict[str, object]:
    """Recommended accounts format and disclosures for a classified company."""
    policy = get_size_policy(result.size)
    return {
        "recommended_format": policy.available_formats[0],
        "available_formats": list(policy.available_formats),
        "disclosure_requirements": list(policy.disclosure_requirements),
        "requires_audit": result.requires_audit,
    }


def applicable_framework(
    size: EntitySize,
    taxonomy_version: str = DEFAULT_TAXONOMY_VERSION,
) -> Dict[str, object]:
    """Primary accounting framework, alternatives and taxonomy for a tier."""
    policy = get_size_policy(size)
    return {
        "primary": policy.framework,
        "alternatives": list(policy.alternative_frameworks),
        "taxonomy": taxonomy_entry_point(size, taxonomy_version),
    }

