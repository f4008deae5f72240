# pricehunt/models/scraper_config.py

"""Static per-site scraper configuration."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pricehunt.config.settings import Settings


def load_selectors(
    site_id: str, path: Path | None = None,
) -> dict[str, list[str]]:
    """Load the selector lists for *site_id* from selectors.json."""
    with open(path or Settings.SELECTORS_PATH, encoding="utf-8") as f:
        all_selectors: dict[str, Any] = json.load(f)
    result: dict[str, list[str]] = all_selectors.get(site_id, {})
    return result


@dataclass(frozen=True)
class ScraperConfig:
    """Everything a site scraper needs, fixed at construction.

    Each ``*_selectors`` tuple is a field candidate list: tried in
    order, most reliable selector first.
    """

    site_name: str
    search_url: str
    origin: str
    domain_glob: str
    container_selectors: tuple[str, ...]
    name_selectors: tuple[str, ...]
    link_selectors: tuple[str, ...]
    price_selectors: tuple[str, ...]
    rating_selectors: tuple[str, ...] = ()
    sold_selectors: tuple[str, ...] = ()
    rate_limit: float = Settings.RATE_LIMIT
    page_count: int = Settings.PAGE_COUNT
    max_concurrent_pages: int = Settings.MAX_CONCURRENT_PAGES
    request_timeout: int = Settings.REQUEST_TIMEOUT
    user_agent: str = Settings.USER_AGENT
    page_param: str = "page"

    @classmethod
    def from_selectors(
        cls,
        site_id: str,
        *,
        site_name: str,
        search_url: str,
        origin: str,
        domain_glob: str,
        selectors_path: Path | None = None,
        **overrides: Any,
    ) -> "ScraperConfig":
        """Build a config whose selector lists come from selectors.json."""
        selectors = load_selectors(site_id, selectors_path)
        if not selectors.get("containers"):
            raise ValueError(
                f"No container selectors configured for '{site_id}'"
            )
        return cls(
            site_name=site_name,
            search_url=search_url,
            origin=origin,
            domain_glob=domain_glob,
            container_selectors=tuple(selectors["containers"]),
            name_selectors=tuple(selectors.get("name", [])),
            link_selectors=tuple(selectors.get("link", [])),
            price_selectors=tuple(selectors.get("price", [])),
            rating_selectors=tuple(selectors.get("rating", [])),
            sold_selectors=tuple(selectors.get("sold_count", [])),
            **overrides,
        )
