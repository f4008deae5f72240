# pricehunt/scrapers/normalizers.py

"""Turn locale-formatted listing text (pt-BR) into typed values."""

import re

CURRENCY_SYMBOL = "R$"
THOUSANDS_SEPARATOR = "."
DECIMAL_SEPARATOR = ","

# Unsigned digits with an optional fraction, after separators are normalised.
_PRICE_RE = re.compile(r"[0-9]+(\.[0-9]*)?")

# "2 mil" / "2mil" -> "2000"
_THOUSANDS_MARKER_RE = re.compile(r"(\d+)\s*mil\b", re.IGNORECASE)

MAX_RATING = 5.0


def parse_price(text: str) -> float:
    """Parse a price like ``'R$ 1.234,56'`` into ``1234.56``.

    Raises:
        ValueError: If the cleaned text is not plain unsigned digits with
            an optional decimal part (signs, underscores, ``nan`` and
            ``inf`` are all refused).
    """
    cleaned = text.replace(CURRENCY_SYMBOL, "")
    cleaned = "".join(cleaned.split())
    cleaned = cleaned.replace(THOUSANDS_SEPARATOR, "")
    cleaned = cleaned.replace(DECIMAL_SEPARATOR, ".")
    if not _PRICE_RE.fullmatch(cleaned):
        raise ValueError(f"Malformed price: {text!r}")
    return float(cleaned)


def parse_rating(text: str) -> float:
    """Parse the leading token of ``'4,5 de 5 estrelas'``; 0.0 if unknown."""
    tokens = text.split()
    if not tokens:
        return 0.0
    try:
        rating = float(tokens[0].replace(DECIMAL_SEPARATOR, "."))
    except ValueError:
        return 0.0
    if not 0.0 <= rating <= MAX_RATING:
        return 0.0
    return rating


def parse_sold_count(text: str) -> int:
    """Parse ``'2 mil vendidos'`` into 2000; 0 if unknown."""
    expanded = _THOUSANDS_MARKER_RE.sub(r"\g<1>000", text)
    tokens = expanded.split()
    if not tokens:
        return 0
    token = tokens[0].rstrip("+")
    if not token.isdecimal():
        return 0
    return int(token)


def canonicalize_link(link: str, origin: str) -> str:
    """Make a site-relative link absolute and drop its query string."""
    if link.startswith("/"):
        link = origin + link
    return link.split("?", 1)[0]
