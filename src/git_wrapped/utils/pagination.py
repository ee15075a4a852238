"""Pagination helpers for the GitHub and GitLab REST APIs."""

import re
from collections.abc import Mapping

LINK_PATTERN = re.compile(r'<([^>]+)>;\s*rel="([^"]+)"')


def parse_link_header(link_header: str | None) -> dict[str, str]:
    """Parse an RFC 5988 Link header into a dictionary of rel -> url.

    Both GitHub and GitLab send these, e.g.:
    <https://api.github.com/user/repos?page=2>; rel="next",
    <https://api.github.com/user/repos?page=5>; rel="last"
    """
    if not link_header:
        return {}
    return {rel: url for url, rel in LINK_PATTERN.findall(link_header)}


def get_next_page_url(link_header: str | None) -> str | None:
    """Extract the 'next' page URL from a Link header."""
    return parse_link_header(link_header).get("next")


def get_next_page_number(headers: Mapping[str, str]) -> int | None:
    """Read GitLab's ``x-next-page`` header (empty on the last page)."""
    value = headers.get("x-next-page", "")
    try:
        return int(value) if value else None
    except ValueError:
        return None
