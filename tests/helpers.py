# tests/helpers.py

"""Test helpers shared across modules."""

from pathlib import Path
from unittest.mock import MagicMock

from bs4 import BeautifulSoup

from pricehunt.scrapers.collector import HTMLElement

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    """Read an HTML fixture as text."""
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


def make_response(text: str, status_code: int = 200) -> MagicMock:
    """Build a fake curl_cffi response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text
    return resp


def element_from_html(html: str) -> HTMLElement:
    """Wrap an HTML snippet in a listing-like container element."""
    soup = BeautifulSoup(f"<div id='root'>{html}</div>", "lxml")
    root = soup.select_one("#root")
    assert root is not None
    return HTMLElement(root)
