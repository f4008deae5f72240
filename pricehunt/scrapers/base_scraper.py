# pricehunt/scrapers/base_scraper.py

"""Common scraper capability and the config-driven site scraper."""

import logging
import threading
from abc import ABC, abstractmethod

from pricehunt.models.product import Product
from pricehunt.models.scraper_config import ScraperConfig
from pricehunt.scrapers.collector import (
    Collector,
    FetchError,
    HTMLElement,
    LimitRule,
)
from pricehunt.scrapers.errors import PageScrapeError
from pricehunt.scrapers.extraction import (
    ElementLike,
    extract_attr,
    extract_text,
)
from pricehunt.scrapers.normalizers import (
    canonicalize_link,
    parse_price,
    parse_rating,
    parse_sold_count,
)
from pricehunt.services.search_orchestrator import (
    PageSearchOrchestrator,
    build_page_urls,
)


class BaseScraper(ABC):
    """What callers can rely on from any site scraper."""

    @property
    @abstractmethod
    def site_name(self) -> str:
        """Display name of the source site."""
        ...

    @abstractmethod
    async def search(
        self,
        product_name: str,
        min_price: float,
        max_price: float,
    ) -> tuple[list[Product], PageScrapeError | None]:
        """Search the site and return products plus the first page error."""
        ...


class SiteScraper(BaseScraper):
    """Scrapes one site entirely from its :class:`ScraperConfig`."""

    def __init__(self, config: ScraperConfig) -> None:
        self.config = config
        self.logger = logging.getLogger(
            f"pricehunt.{config.site_name.lower()}"
        )
        self._orchestrator = PageSearchOrchestrator(
            config.max_concurrent_pages
        )

    @property
    def site_name(self) -> str:
        return self.config.site_name

    # ── Product assembly ─────────────────────────────────

    def extract_product(
        self,
        element: ElementLike,
        min_price: float,
        max_price: float,
    ) -> Product | None:
        """Build a Product from one listing element, or None.

        None covers missing name/link/price, an unparseable price and a
        price outside ``[min_price, max_price]``.
        """
        cfg = self.config
        name = extract_text(element, cfg.name_selectors)
        link = extract_attr(element, cfg.link_selectors, "href")
        price_text = extract_text(element, cfg.price_selectors)

        if not name or not link or not price_text:
            return None

        link = canonicalize_link(link, cfg.origin)

        try:
            price = parse_price(price_text)
        except ValueError:
            self.logger.debug(
                "[%s] Unparseable price %r for %s",
                cfg.site_name,
                price_text,
                link,
            )
            return None
        if price < min_price or price > max_price:
            return None

        rating = parse_rating(
            extract_text(element, cfg.rating_selectors)
        )
        sold_count = parse_sold_count(
            extract_text(element, cfg.sold_selectors)
        )

        return Product(
            name=name.strip(),
            price=price,
            rating=rating,
            sold_count=sold_count,
            link=link,
            site=cfg.site_name,
        )

    # ── Single page ──────────────────────────────────────

    def _new_collector(self) -> Collector:
        collector = Collector(
            user_agent=self.config.user_agent,
            timeout=self.config.request_timeout,
        )
        collector.limit(
            LimitRule(
                domain_glob=self.config.domain_glob,
                random_delay=self.config.rate_limit,
                parallelism=1,
            )
        )
        return collector

    def scrape_page(
        self,
        url: str,
        min_price: float,
        max_price: float,
    ) -> list[Product]:
        """Scrape one results page.

        Raises:
            PageScrapeError: If the page could not be fetched.  Anything
                collected before the failure is discarded.
        """
        products: list[Product] = []
        lock = threading.Lock()

        def on_listing(element: HTMLElement) -> None:
            product = self.extract_product(element, min_price, max_price)
            if product is not None:
                with lock:
                    products.append(product)

        collector = self._new_collector()
        for selector in self.config.container_selectors:
            collector.on_html(selector, on_listing)

        try:
            collector.visit(url)
        except FetchError as exc:
            self.logger.error(
                "[%s] Failed to fetch %s: %s",
                self.config.site_name,
                url,
                exc,
                exc_info=True,
            )
            raise PageScrapeError(url, exc) from exc
        finally:
            collector.close()

        self.logger.info(
            "[%s] %d products in range on %s",
            self.config.site_name,
            len(products),
            url,
        )
        return products

    # ── Whole search ─────────────────────────────────────

    async def search(
        self,
        product_name: str,
        min_price: float,
        max_price: float,
    ) -> tuple[list[Product], PageScrapeError | None]:
        """Scrape the first ``page_count`` result pages for *product_name*."""
        urls = build_page_urls(
            self.config.search_url,
            product_name,
            self.config.page_count,
            self.config.page_param,
        )
        self.logger.info(
            "[%s] Searching '%s' in [%.2f, %.2f] across %d pages",
            self.config.site_name,
            product_name,
            min_price,
            max_price,
            len(urls),
        )
        return await self._orchestrator.run(
            urls, self.scrape_page, min_price, max_price
        )
