# pricehunt/scrapers/amazon_scraper.py

"""Scraper for amazon.com.br (Brazil)."""

from typing import Any

from pricehunt.models.scraper_config import ScraperConfig
from pricehunt.scrapers.base_scraper import SiteScraper


class AmazonScraper(SiteScraper):
    """Scraper for amazon.com.br (Brazil)."""

    SITE_ID = "amazon"
    SITE_NAME = "Amazon"
    ORIGIN = "https://www.amazon.com.br"
    SEARCH_URL = f"{ORIGIN}/s?k="
    DOMAIN_GLOB = "*amazon.com.br*"

    def __init__(self, **overrides: Any) -> None:
        super().__init__(
            ScraperConfig.from_selectors(
                self.SITE_ID,
                site_name=self.SITE_NAME,
                search_url=self.SEARCH_URL,
                origin=self.ORIGIN,
                domain_glob=self.DOMAIN_GLOB,
                **overrides,
            )
        )
