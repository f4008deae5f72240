# tests/test_normalizers.py

"""Tests for pt-BR price, rating, sold-count and link normalisation."""

import unittest

from pricehunt.scrapers.normalizers import (
    canonicalize_link,
    parse_price,
    parse_rating,
    parse_sold_count,
)


class TestParsePrice(unittest.TestCase):
    """parse_price behaviour."""

    def test_known_formats(self) -> None:
        """Currency-formatted strings parse to their numeric value."""
        cases = {
            "R$ 1.234,56": 1234.56,
            "R$ 99,90": 99.90,
            "1.000,00": 1000.00,
            "R$ 12.345.678,90": 12345678.90,
            "42": 42.0,
        }
        for text, expected in cases.items():
            with self.subTest(text=text):
                self.assertAlmostEqual(parse_price(text), expected)

    def test_non_breaking_space(self) -> None:
        """A non-breaking space after the symbol is stripped."""
        self.assertAlmostEqual(parse_price("R$\xa0129,90"), 129.90)

    def test_trailing_decimal_separator(self) -> None:
        """Whole-price spans end with a bare decimal comma."""
        self.assertEqual(parse_price("4.299,"), 4299.0)

    def test_malformed_raises(self) -> None:
        """Unparseable text raises ValueError rather than crashing."""
        for text in ("grátis", "", "   ", "R$", "1,2,3", "1_000", "-5,00"):
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    parse_price(text)

    def test_non_finite_rejected(self) -> None:
        """'nan' and 'inf' are not prices."""
        for text in ("nan", "inf", "R$ infinity"):
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    parse_price(text)

    def test_signs_and_underscores_rejected(self) -> None:
        """Signed or underscore-grouped numbers are not listing prices."""
        for text in ("1_000", "R$ -5,00", "-5,00", "+7", "R$ 1e3"):
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    parse_price(text)


class TestParseRating(unittest.TestCase):
    """parse_rating behaviour."""

    def test_leading_token(self) -> None:
        """Only the first whitespace token is parsed."""
        self.assertEqual(parse_rating("4.6 out of 5 stars"), 4.6)

    def test_decimal_comma(self) -> None:
        """pt-BR decimal comma is accepted."""
        self.assertEqual(parse_rating("4,5 de 5 estrelas"), 4.5)

    def test_unparseable_defaults_to_zero(self) -> None:
        """Garbage, empty and out-of-scale values give 0."""
        for text in ("", "sem avaliações", "7 de 5", "-1"):
            with self.subTest(text=text):
                self.assertEqual(parse_rating(text), 0.0)


class TestParseSoldCount(unittest.TestCase):
    """parse_sold_count behaviour."""

    def test_thousands_marker(self) -> None:
        """'mil' expands to three zeros."""
        self.assertEqual(parse_sold_count("2 mil vendidos"), 2000)

    def test_thousands_marker_with_plus(self) -> None:
        """A trailing '+' on the count is tolerated."""
        self.assertEqual(
            parse_sold_count("2 mil+ comprados no mês passado"), 2000
        )

    def test_plain_count(self) -> None:
        """A plain number is parsed as is."""
        self.assertEqual(parse_sold_count("50 comprados"), 50)

    def test_unparseable_defaults_to_zero(self) -> None:
        """Text not starting with a count gives 0."""
        for text in ("", "Mais de 1 mil compras", "vendidos", "-5 vendidos"):
            with self.subTest(text=text):
                self.assertEqual(parse_sold_count(text), 0)

    def test_mil_inside_word_untouched(self) -> None:
        """'milhões' is not the thousands marker."""
        self.assertEqual(parse_sold_count("3 milhões"), 3)


class TestCanonicalizeLink(unittest.TestCase):
    """canonicalize_link behaviour."""

    ORIGIN = "https://example.com"

    def test_relative_with_query(self) -> None:
        """Relative links get the origin and lose the query string."""
        self.assertEqual(
            canonicalize_link("/dp/XYZ?ref=123", self.ORIGIN),
            "https://example.com/dp/XYZ",
        )

    def test_absolute_with_query(self) -> None:
        """Absolute links keep their host and lose the query string."""
        self.assertEqual(
            canonicalize_link(
                "https://other.com/p/1?a=b&c=d", self.ORIGIN
            ),
            "https://other.com/p/1",
        )

    def test_no_other_normalisation(self) -> None:
        """Trailing slashes and escapes are left alone."""
        self.assertEqual(
            canonicalize_link("/dp/caf%C3%A9/", self.ORIGIN),
            "https://example.com/dp/caf%C3%A9/",
        )


if __name__ == "__main__":
    unittest.main()
