# pricehunt/scrapers/errors.py

"""Errors surfaced by scrapers to their callers."""


class PageScrapeError(Exception):
    """A results page could not be fetched; its products are discarded."""

    def __init__(self, url: str, cause: Exception) -> None:
        super().__init__(f"error visiting page {url}: {cause}")
        self.url = url
        self.cause = cause
