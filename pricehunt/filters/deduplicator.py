# pricehunt/filters/deduplicator.py

"""Product deduplication across pages and sites."""

import logging
import re

from pricehunt.models.product import Product

logger = logging.getLogger("pricehunt.filters")


class ProductDeduplicator:
    """Remove listings that point at the same product page.

    Overlapping container selectors can feed the same listing to the
    assembler twice, and sponsored slots repeat across result pages.
    """

    _FRAGMENT_RE = re.compile(r"#.*$")

    @staticmethod
    def _normalise_link(link: str) -> str:
        """Lowercase, drop fragment and trailing slash."""
        cleaned = ProductDeduplicator._FRAGMENT_RE.sub("", link)
        return cleaned.rstrip("/").lower()

    @staticmethod
    def deduplicate(
        products: list[Product],
    ) -> tuple[list[Product], int]:
        """Keep one product per (site, link), the cheapest.

        Products without a link are always kept.  Returns the
        deduplicated list and the number removed.
        """
        seen: dict[tuple[str, str], int] = {}
        kept: list[Product] = []
        removed = 0

        for product in products:
            norm_link = ProductDeduplicator._normalise_link(product.link)
            if not norm_link:
                kept.append(product)
                continue

            key = (product.site, norm_link)
            if key in seen:
                existing_idx = seen[key]
                if product.price < kept[existing_idx].price:
                    kept[existing_idx] = product
                removed += 1
                continue

            seen[key] = len(kept)
            kept.append(product)

        if removed:
            logger.info(
                "Deduplication removed %d duplicate products",
                removed,
            )

        return kept, removed
