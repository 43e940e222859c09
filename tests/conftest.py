"""
Pytest configuration and fixtures.
"""
import copy
from typing import Any, Dict, Generator

import pytest
from fastapi.testclient import TestClient

from ixaccounts.main import app


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    """Create a test client for the application."""
    with TestClient(app) as test_client:
        yield test_client


SAMPLE_PACKAGE: Dict[str, Any] = {
    "context": {
        "company_name": "Acme Widgets Limited",
        "company_number": "12345678",
        "period_start": "2024-01-01",
        "period_end": "2024-12-31",
        "balance_sheet_date": "2024-12-31",
    },
    "entity_size": "small",
    "balance_sheet": {
        "current_year": {
            "tangible_assets": "50000",
            "debtors": "40000",
            "cash": "80000",
            "creditors_within_one_year": "60000",
            "called_up_share_capital": "1000",
            "profit_and_loss_account": "109000",
        },
    },
    "profit_loss": {
        "current_year": {
            "turnover": "500000",
            "cost_of_sales": "300000",
            "administrative_expenses": "150000",
            "tax_on_profit": "15000",
            "profit_for_financial_year": "35000",
        },
    },
    "directors_report": {
        "directors": [{"name": "Jane Smith"}, {"name": "John Brown", "appointment_date": "2024-06-01"}],
        "principal_activities": "Manufacture and sale of widgets.",
        "approval_date": "2025-03-15",
        "director_signature": "Jane Smith",
        "small_company_regime": True,
    },
    "notes": {
        "accounting_policies": {
            "accounting_framework": "FRS 102 Section 1A",
            "turnover_recognition": "Turnover is recognised on delivery of goods.",
            "tangible_fixed_assets_depreciation": "Straight line over five years.",
            "taxation": "Current tax is provided at amounts expected to be paid.",
        },
        "employee_numbers": {"average": 8},
    },
}


@pytest.fixture
def package_payload() -> Dict[str, Any]:
    """A valid small-company filing package request body."""
    return copy.deepcopy(SAMPLE_PACKAGE)
