# pricehunt/config/settings.py

"""Central configuration for the pricehunt engine."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the pricehunt engine."""

    # --- Scraping ---
    RATE_LIMIT: float = float(
        os.getenv("PRICEHUNT_RATE_LIMIT", "2.0")
    )                                   # Upper bound of the random per-request delay
    REQUEST_TIMEOUT: int = int(
        os.getenv("PRICEHUNT_REQUEST_TIMEOUT", "15")
    )                                   # Seconds before a request times out
    PAGE_COUNT: int = int(
        os.getenv("PRICEHUNT_PAGE_COUNT", "3")
    )                                   # Result pages fetched per search
    MAX_CONCURRENT_PAGES: int = int(
        os.getenv("PRICEHUNT_MAX_CONCURRENT_PAGES", "2")
    )                                   # Page fetches in flight per search

    # --- Browser Impersonation ---
    USER_AGENT: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome120"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": (
            "text/html,application/xhtml+xml,"
            "application/xml;q=0.9,image/avif,"
            "image/webp,image/apng,*/*;q=0.8"
        ),
        "Accept-Language": "pt-BR,pt;q=0.9,en-US;q=0.8,en;q=0.7",
    }

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    SELECTORS_PATH: Path = BASE_DIR / "pricehunt" / "config" / "selectors.json"
    LOGS_DIR: Path = BASE_DIR / "logs"

    # --- Sources ---
    AVAILABLE_SOURCES: list[dict[str, str]] = [
        {
            "id": "amazon",
            "label": "Amazon",
            "scraper": "pricehunt.scrapers.amazon_scraper.AmazonScraper",
        },
    ]
