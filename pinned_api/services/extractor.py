"""
Markup adapter for GitHub profile and repository pages.

Every selector that depends on GitHub's HTML lives in this module. The rest
of the service only sees plain strings and ints, so when GitHub reshuffles
its class names this is the one file to touch.
"""

import math
from dataclasses import dataclass
from typing import Literal

from bs4 import BeautifulSoup, Tag

PINNED_ITEMS_SELECTOR = ".js-pinned-items-reorder-list > li"
WEBSITE_SELECTOR = '[class*="BorderGrid-cell"] a[href^="https"]'
LANGUAGE_MARKER_SELECTOR = '[class*="language-color"]'

FieldSource = Literal["text", "attr", "style", "next_text"]


@dataclass(frozen=True)
class FieldSpec:
    """Where a single value lives relative to a container element."""

    selector: str
    source: FieldSource = "text"
    attr: str | None = None
    style: str | None = None


PINNED_ITEM_FIELDS: dict[str, FieldSpec] = {
    "repo": FieldSpec('[class*="repo"]'),
    "description": FieldSpec(".pinned-item-desc"),
    "language": FieldSpec(LANGUAGE_MARKER_SELECTOR, source="next_text"),
    "language_color": FieldSpec(
        LANGUAGE_MARKER_SELECTOR, source="style", style="background-color"
    ),
    "stars": FieldSpec('a[href*="/stargazers"]'),
    "forks": FieldSpec('a[href*="/forks"]'),
}


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def _style_value(element: Tag, prop: str) -> str | None:
    """Read one property out of an inline ``style`` attribute."""
    style = element.get("style") or ""
    for declaration in style.split(";"):
        name, sep, value = declaration.partition(":")
        if sep and name.strip().lower() == prop:
            return value.strip()
    return None


def extract_field(element: Tag, spec: FieldSpec) -> str | None:
    """
    Apply a FieldSpec to an element.

    Returns the trimmed value, or None when the target is missing or empty.
    """
    target = element.select_one(spec.selector)
    if target is None:
        return None

    if spec.source == "text":
        value = target.get_text()
    elif spec.source == "attr":
        value = target.get(spec.attr or "")
    elif spec.source == "style":
        value = _style_value(target, spec.style or "")
    elif spec.source == "next_text":
        sibling = target.find_next_sibling()
        value = sibling.get_text() if sibling is not None else None
    else:
        raise ValueError(f"Unknown field source: {spec.source}")

    if isinstance(value, list):
        value = " ".join(value)
    if value is None:
        return None
    value = value.strip()
    return value or None


def find_pinned_items(html: str) -> list[Tag]:
    """Pinned item containers in document order."""
    return parse_html(html).select(PINNED_ITEMS_SELECTOR)


def parse_pinned_item(item: Tag) -> dict[str, str | None]:
    return {name: extract_field(item, spec) for name, spec in PINNED_ITEM_FIELDS.items()}


def find_website(html: str) -> str | None:
    """First external https link in a repository page's sidebar."""
    soup = parse_html(html)
    return extract_field(soup, FieldSpec(WEBSITE_SELECTOR, source="attr", attr="href"))


def parse_numeric_value(value: str | None) -> int:
    """
    Normalize a star/fork counter such as "42" or "1.2k" to an int.

    Anything that does not parse (including "3,400") yields 0.
    """
    if not value:
        return 0
    normalized = value.lower().strip()

    try:
        if normalized.endswith("k"):
            number = math.floor(float(normalized[:-1]) * 1000 + 0.5)
        else:
            number = int(normalized, 10)
    except (ValueError, OverflowError):
        return 0
    return max(number, 0)


def repo_link(github_base_url: str, owner: str, repo: str) -> str:
    return f"{github_base_url.rstrip('/')}/{owner}/{repo}"


def repo_image(opengraph_base_url: str, owner: str, repo: str) -> str:
    return f"{opengraph_base_url.rstrip('/')}/{owner}/{repo}"
