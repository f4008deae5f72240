# pricehunt/scrapers/extraction.py

"""Field extraction with ordered selector fallbacks."""

from collections.abc import Iterable
from typing import Protocol


class ElementLike(Protocol):
    """Minimal surface of a matched listing element."""

    def child_text(self, selector: str) -> str: ...

    def child_attr(self, selector: str, attr: str) -> str: ...


def extract_text(
    element: ElementLike, selectors: Iterable[str],
) -> str:
    """Return the text of the first selector that matches non-empty.

    An empty string means the field is absent on this markup variant.
    """
    for selector in selectors:
        text = element.child_text(selector)
        if text:
            return text
    return ""


def extract_attr(
    element: ElementLike, selectors: Iterable[str], attr: str,
) -> str:
    """Return *attr* from the first selector that yields a non-empty value."""
    for selector in selectors:
        value = element.child_attr(selector, attr)
        if value:
            return value
    return ""
