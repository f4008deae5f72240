# tests/test_deduplicator.py

"""Tests for ProductDeduplicator."""

import unittest

from pricehunt.filters.deduplicator import ProductDeduplicator
from pricehunt.models.product import Product


def _make(
    name: str,
    price: float = 10.0,
    site: str = "Amazon",
    link: str = "",
) -> Product:
    """Create a minimal Product."""
    return Product(name=name, price=price, site=site, link=link)


class TestDeduplicate(unittest.TestCase):
    """ProductDeduplicator.deduplicate behaviour."""

    def test_empty_list(self) -> None:
        """Empty input returns empty output."""
        kept, removed = ProductDeduplicator.deduplicate([])
        self.assertEqual(kept, [])
        self.assertEqual(removed, 0)

    def test_no_duplicates(self) -> None:
        """Distinct links are all kept."""
        products = [
            _make("Alpha", link="https://a.com/1"),
            _make("Beta", link="https://a.com/2"),
        ]
        kept, removed = ProductDeduplicator.deduplicate(products)
        self.assertEqual(len(kept), 2)
        self.assertEqual(removed, 0)

    def test_same_link_keeps_cheapest(self) -> None:
        """Duplicates collapse to the lowest price."""
        products = [
            _make("Widget", price=20.0, link="https://shop.com/dp/1"),
            _make("Widget", price=15.0, link="https://shop.com/dp/1"),
        ]
        kept, removed = ProductDeduplicator.deduplicate(products)
        self.assertEqual(len(kept), 1)
        self.assertEqual(removed, 1)
        self.assertEqual(kept[0].price, 15.0)

    def test_link_normalisation(self) -> None:
        """Case, fragments and trailing slashes are ignored."""
        products = [
            _make("Item", link="https://Shop.com/dp/1/"),
            _make("Item", link="https://shop.com/dp/1#reviews"),
        ]
        kept, removed = ProductDeduplicator.deduplicate(products)
        self.assertEqual(len(kept), 1)
        self.assertEqual(removed, 1)

    def test_different_sites_not_merged(self) -> None:
        """The same link reported by two sites stays twice."""
        products = [
            _make("Item", site="Amazon", link="https://x.com/1"),
            _make("Item", site="Outra", link="https://x.com/1"),
        ]
        kept, removed = ProductDeduplicator.deduplicate(products)
        self.assertEqual(len(kept), 2)
        self.assertEqual(removed, 0)

    def test_products_without_link_kept(self) -> None:
        """Listings without a link are never treated as duplicates."""
        products = [_make("A"), _make("A")]
        kept, removed = ProductDeduplicator.deduplicate(products)
        self.assertEqual(len(kept), 2)
        self.assertEqual(removed, 0)

    def test_order_preserved(self) -> None:
        """First occurrence position is kept."""
        products = [
            _make("A", link="https://s.com/a"),
            _make("B", link="https://s.com/b"),
            _make("A", price=5.0, link="https://s.com/a"),
        ]
        kept, _ = ProductDeduplicator.deduplicate(products)
        self.assertEqual([p.name for p in kept], ["A", "B"])
        self.assertEqual(kept[0].price, 5.0)


if __name__ == "__main__":
    unittest.main()
