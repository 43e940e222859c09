"""
Preview rendering.

A text filter over the composed document: drops the hidden header block and
the inline XBRL wrappers and leaves every visible value exactly as composed.
"""

import re

from ixaccounts.ixbrl_engine.rendering import render

PREVIEW_BANNER_TEXT = "PREVIEW ONLY - This is not the final submission document"

HEADER_BLOCK = re.compile(
    r'<div style="display:none">\s*<ix:header>.*?</ix:header>\s*</div>\s*',
    re.DOTALL,
)
INLINE_TAG = re.compile(r"</?ix:(?:nonFraction|nonNumeric)\b[^>]*>")
BODY_OPEN = re.compile(r"<body[^>]*>")


def strip_tags(document: str) -> str:
    """Remove tagging from a composed document and add the preview banner."""
    banner = str(render("preview_banner.xhtml.j2", text=PREVIEW_BANNER_TEXT))
    preview = HEADER_BLOCK.sub("", document)
    preview = INLINE_TAG.sub("", preview)
    return BODY_OPEN.sub(lambda match: f"{match.group(0)}\n{banner}", preview, count=1)
