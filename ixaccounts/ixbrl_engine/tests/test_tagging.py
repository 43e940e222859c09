"""
Tests for the inline XBRL tag primitives.
"""

from datetime import date
from decimal import Decimal

import pytest
from markupsafe import Markup

from ixaccounts.ixbrl_engine.tagging import (
    DATE_FORMAT,
    NUMBER_FORMAT,
    format_date,
    format_number,
    round_value,
    tag_count,
    tag_date,
    tag_monetary,
    tag_text,
)


class TestRounding:
    """Half-up rounding and number formatting."""

    def test_half_up(self):
        assert round_value(Decimal("2.5")) == Decimal("3")
        assert round_value(Decimal("-2.5")) == Decimal("-3")
        assert round_value(Decimal("1.005"), 2) == Decimal("1.01")

    def test_negative_decimals_rejected(self):
        with pytest.raises(ValueError):
            round_value(Decimal("1"), -1)

    def test_format_number(self):
        assert format_number(Decimal("1234.5")) == "1,235"
        assert format_number(Decimal("-1234")) == "(1,234)"
        assert format_number(Decimal("0")) == "0"
        assert format_number(Decimal("1.5"), 2) == "1.50"

    def test_format_date(self):
        assert format_date(date(2024, 12, 31)) == "31 December 2024"
        assert format_date(date(2025, 3, 5)) == "5 March 2025"


class TestNumericTags:
    """Monetary and count tags."""

    def test_monetary_tag(self):
        tag = tag_monetary(Decimal("50000"), "core:Debtors", "balance-sheet")

        assert tag == (
            '<ix:nonFraction name="core:Debtors" contextRef="balance-sheet" unitRef="GBP" '
            f'decimals="0" scale="0" format="{NUMBER_FORMAT}">50,000</ix:nonFraction>'
        )

    def test_negative_value_sign_attribute(self):
        """Brackets sit outside the tag and the tagged digits are unsigned."""
        tag = tag_monetary(Decimal("-1234"), "core:ProfitLoss", "current")

        assert tag.startswith("(<ix:nonFraction")
        assert tag.endswith("</ix:nonFraction>)")
        assert 'sign="-"' in tag
        assert ">1,234</ix:nonFraction>" in tag

    def test_rounded_to_zero_is_not_negative(self):
        tag = tag_monetary(Decimal("-0.4"), "core:ProfitLoss", "current")
        assert 'sign="-"' not in tag
        assert not tag.startswith("(")

    def test_visible_text_matches_rounded_value(self):
        tag = tag_monetary(Decimal("1234.56"), "core:Stocks", "balance-sheet", decimals=2)
        assert 'decimals="2"' in tag
        assert ">1,234.56<" in tag

    def test_custom_unit(self):
        tag = tag_monetary(Decimal("10"), "core:Stocks", "balance-sheet", unit="EUR")
        assert 'unitRef="EUR"' in tag

    def test_count_uses_pure_unit(self):
        tag = tag_count(12, "core:AverageNumberEmployeesDuringPeriod", "current")
        assert 'unitRef="pure"' in tag
        assert ">12<" in tag


class TestNonNumericTags:
    """Date and text tags."""

    def test_date_tag(self):
        tag = tag_date(date(2025, 3, 15), "core:DateAuthorisationFinancialStatementsForIssue", "current")
        assert f'format="{DATE_FORMAT}"' in tag
        assert ">15 March 2025</ix:nonNumeric>" in tag

    def test_text_is_escaped(self):
        tag = tag_text("Smith & Sons <Holdings>", "bus:EntityCurrentLegalOrRegisteredName", "current")
        assert "Smith &amp; Sons &lt;Holdings&gt;" in tag
        assert "<Holdings>" not in tag

    def test_attributes_are_escaped(self):
        tag = tag_text("x", 'core:"Odd"', "current")
        assert 'name="core:&#34;Odd&#34;"' in tag

    def test_tags_are_markup(self):
        """Templates insert tags verbatim instead of escaping them again."""
        tag = tag_text("Acme", "bus:EntityCurrentLegalOrRegisteredName", "current")
        assert isinstance(tag, Markup)
        assert isinstance(tag_monetary(Decimal("-5"), "core:Debtors", "current"), Markup)
