"""
Tests for the template environment.
"""

from datetime import date
from decimal import Decimal

from markupsafe import Markup

from ixaccounts.ixbrl_engine.rendering import get_environment, render
from ixaccounts.ixbrl_engine.tagging import tag_text


class TestEnvironment:
    """Shared jinja2 environment."""

    def test_environment_cached(self):
        assert get_environment() is get_environment()

    def test_autoescape_on(self):
        assert get_environment().autoescape is True

    def test_filters_registered(self):
        filters = get_environment().filters
        assert filters["long_date"](date(2024, 12, 31)) == "31 December 2024"
        assert filters["iso_date"](None) == ""
        assert filters["amount"](Decimal("1234.5"), 2) == "1,234.50"


class TestRender:
    """Plain text is escaped, tags pass through."""

    def test_plain_text_escaped(self):
        markup = render("notes/narrative.xhtml.j2", content="Smith & Sons <Holdings>")
        assert markup == "<p>Smith &amp; Sons &lt;Holdings&gt;</p>"

    def test_tag_inserted_verbatim(self):
        tag = tag_text("Acme & Co", "bus:EntityCurrentLegalOrRegisteredName", "current")
        markup = render("notes/narrative.xhtml.j2", content=tag)

        assert markup == f"<p>{tag}</p>"
        assert "Acme &amp; Co</ix:nonNumeric>" in markup

    def test_returns_markup(self):
        assert isinstance(render("notes/narrative.xhtml.j2", content="x"), Markup)

    def test_preview_banner_single_line(self):
        banner = render("preview_banner.xhtml.j2", text="PREVIEW")
        assert "\n" not in banner
        assert banner.endswith(">PREVIEW</div>")
