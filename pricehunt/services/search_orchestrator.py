# pricehunt/services/search_orchestrator.py

"""Fan-out/fan-in of result pages and of whole site scrapers."""

import asyncio
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from urllib.parse import quote_plus

from pricehunt.filters.deduplicator import ProductDeduplicator
from pricehunt.models.product import Product, SearchRequest
from pricehunt.scrapers.errors import PageScrapeError

if TYPE_CHECKING:
    from pricehunt.scrapers.base_scraper import BaseScraper

logger = logging.getLogger("pricehunt.orchestrator")

PageScrapeFn = Callable[[str, float, float], list[Product]]


def build_page_urls(
    search_url: str,
    query: str,
    page_count: int,
    page_param: str = "page",
) -> list[str]:
    """Return the URLs of the first *page_count* result pages.

    Page 1 is the bare search URL; later pages add ``&<page_param>=N``.
    """
    base = search_url + quote_plus(query)
    urls: list[str] = []
    for page in range(1, page_count + 1):
        if page == 1:
            urls.append(base)
        else:
            urls.append(f"{base}&{page_param}={page}")
    return urls


class PageSearchOrchestrator:
    """Scrapes a fixed set of pages with at most ``max_concurrent`` in flight.

    Each page runs in a worker thread once it passes the admission
    semaphore.  Successful pages are merged in completion order.  Only
    the first page failure is reported back; later ones are logged.
    """

    def __init__(self, max_concurrent: int = 2) -> None:
        if max_concurrent < 1:
            raise ValueError("max_concurrent must be >= 1")
        self.max_concurrent = max_concurrent

    async def run(
        self,
        urls: Sequence[str],
        scrape_page: PageScrapeFn,
        min_price: float,
        max_price: float,
    ) -> tuple[list[Product], PageScrapeError | None]:
        """Scrape every URL and merge the results.

        Returns the merged products and the first page error, if any.
        A non-empty list together with an error is a partial success.

        Every page task is awaited before returning.  An exception other
        than :class:`PageScrapeError` is re-raised once all pages have
        finished.
        """
        if not urls:
            return [], None

        semaphore = asyncio.Semaphore(self.max_concurrent)

        async def run_page(url: str) -> list[Product]:
            async with semaphore:
                logger.debug("Scraping page %s", url)
                return await asyncio.to_thread(
                    scrape_page, url, min_price, max_price
                )

        tasks = [asyncio.ensure_future(run_page(url)) for url in urls]

        products: list[Product] = []
        first_error: PageScrapeError | None = None
        unexpected: Exception | None = None
        for next_done in asyncio.as_completed(tasks):
            try:
                page_products = await next_done
            except PageScrapeError as exc:
                if first_error is None:
                    first_error = exc
                else:
                    logger.warning(
                        "Dropping additional page error: %s", exc
                    )
                continue
            except Exception as exc:
                logger.error(
                    "Unexpected error while scraping a page: %s",
                    exc,
                    exc_info=True,
                )
                if unexpected is None:
                    unexpected = exc
                continue
            products.extend(page_products)

        if unexpected is not None:
            raise unexpected

        logger.info(
            "Scraped %d pages: %d products, %s",
            len(urls),
            len(products),
            "with errors" if first_error else "no errors",
        )
        return products, first_error


@dataclass
class SearchResult:
    """Merged outcome of a search across several site scrapers."""

    request: SearchRequest
    products: list[Product] = field(
        default_factory=lambda: list[Product]()
    )
    deduplicated_count: int = 0
    errors: list[str] = field(
        default_factory=lambda: list[str]()
    )


async def search_sites(
    scrapers: Sequence["BaseScraper"],
    request: SearchRequest,
) -> SearchResult:
    """Run every scraper concurrently and merge their products.

    Partial site results are kept; each site's error is recorded as a
    message prefixed with the site name.
    """
    result = SearchResult(request=request)
    outcomes = await asyncio.gather(
        *(
            scraper.search(
                request.query, request.min_price, request.max_price
            )
            for scraper in scrapers
        ),
        return_exceptions=True,
    )

    merged: list[Product] = []
    for scraper, outcome in zip(scrapers, outcomes):
        if isinstance(outcome, Exception):
            result.errors.append(f"{scraper.site_name}: {outcome}")
            logger.error(
                "Scraper %s failed for query '%s': %s",
                scraper.site_name,
                request.query,
                outcome,
                exc_info=outcome,
            )
            continue
        if isinstance(outcome, BaseException):
            raise outcome
        products, error = outcome
        merged.extend(products)
        if error is not None:
            result.errors.append(f"{scraper.site_name}: {error}")
            logger.warning(
                "Partial results from %s (%d products): %s",
                scraper.site_name,
                len(products),
                error,
            )

    result.products, result.deduplicated_count = (
        ProductDeduplicator.deduplicate(merged)
    )
    return result
