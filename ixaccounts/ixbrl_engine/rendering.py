"""
Template rendering.

Document layout lives in jinja2 templates shipped inside the package. Autoescape
is on: plain strings handed to a template are escaped, while tags from
tagging.py and already rendered fragments arrive as Markup and are inserted
verbatim.
"""

from datetime import date
from functools import lru_cache
from typing import Any, Optional

from jinja2 import Environment, PackageLoader, StrictUndefined
from markupsafe import Markup

from ixaccounts.ixbrl_engine.tagging import format_date, format_number

TEMPLATE_PACKAGE = "ixaccounts.ixbrl_engine"
TEMPLATE_DIRECTORY = "templates"


def iso_date(value: Optional[date]) -> str:
    return value.isoformat() if value else ""


@lru_cache
def get_environment() -> Environment:
    """Shared template environment, built once per process."""
    environment = Environment(
        loader=PackageLoader(TEMPLATE_PACKAGE, TEMPLATE_DIRECTORY),
        autoescape=True,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    environment.filters["long_date"] = format_date
    environment.filters["iso_date"] = iso_date
    environment.filters["amount"] = format_number
    return environment


def render(template_name: str, **context: Any) -> Markup:
    """Render a template as markup that can be embedded in another template."""
    template = get_environment().get_template(template_name)
    return Markup(template.render(**context))
