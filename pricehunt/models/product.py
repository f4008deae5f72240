# pricehunt/models/product.py

"""Product and search request records passed between modules."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Product:
    """A single product listing accepted from a search results page.

    Only the product assembler builds these, after the price has been
    checked against the requested range.  ``rating`` and ``sold_count``
    use 0 for "unknown".
    """

    name: str
    price: float
    rating: float = 0.0
    sold_count: int = 0
    link: str = ""
    site: str = ""

    def to_dict(self) -> dict[str, object]:
        """Serialise to a JSON-ready dict."""
        return asdict(self)


@dataclass(frozen=True)
class SearchRequest:
    """Query text plus inclusive price bounds.

    ``min_price <= max_price`` is the caller's responsibility.
    """

    query: str
    min_price: float
    max_price: float
