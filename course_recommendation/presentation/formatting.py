"""
Text formatting for course summaries.
"""

from typing import Optional
from bs4 import BeautifulSoup

from ..logic.constants import SUMMARY_MAX_LENGTH, SUMMARY_TRUNCATE_AT, SUMMARY_ELLIPSIS


def strip_tags(html: Optional[str]) -> str:
    """Return the plain text of an HTML fragment."""
    if not html:
        return ""
    return BeautifulSoup(html, "html.parser").get_text()


def format_summary(summary: Optional[str]) -> str:
    """
    Plain-text summary for the mobile app.

    Markup is stripped; text longer than SUMMARY_MAX_LENGTH characters is cut to
    SUMMARY_TRUNCATE_AT characters plus an ellipsis (SUMMARY_MAX_LENGTH in total).
    """
    text = strip_tags(summary)
    if len(text) > SUMMARY_MAX_LENGTH:
        text = text[:SUMMARY_TRUNCATE_AT] + SUMMARY_ELLIPSIS
    return text
