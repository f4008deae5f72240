# pricehunt/cli/runner.py

"""Headless CLI search runner."""

import importlib
import json
import logging
import sys
from typing import Any

from rich.console import Console
from rich.table import Table

from pricehunt.config.settings import Settings
from pricehunt.models.product import Product, SearchRequest
from pricehunt.scrapers.base_scraper import BaseScraper
from pricehunt.services.search_orchestrator import search_sites

logger = logging.getLogger("pricehunt.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def load_scraper(dotted_path: str) -> BaseScraper:
    """Import and instantiate a scraper from its dotted class path."""
    module_path, class_name = dotted_path.rsplit(".", 1)
    module = importlib.import_module(module_path)
    scraper_cls: type[Any] = getattr(module, class_name)
    scraper: BaseScraper = scraper_cls()
    return scraper


def select_scrapers(source_csv: str | None) -> list[BaseScraper]:
    """Instantiate the scrapers named in *source_csv*.

    ``None`` selects every registered source.  Repeated ids run once.

    Raises:
        ValueError: If an id is not registered or no id is given.
    """
    registry = {s["id"]: s["scraper"] for s in Settings.AVAILABLE_SOURCES}
    if source_csv is None:
        wanted = list(registry)
    else:
        wanted = list(dict.fromkeys(
            part.strip() for part in source_csv.split(",") if part.strip()
        ))
    unknown = [source_id for source_id in wanted if source_id not in registry]
    if unknown:
        raise ValueError(f"Unknown source(s): {', '.join(unknown)}")
    if not wanted:
        raise ValueError("No source selected")
    return [load_scraper(registry[source_id]) for source_id in wanted]


def _print_table(products: list[Product]) -> None:
    """Render a Rich table of products, cheapest first."""
    table = Table(
        title="Search Results",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Name", max_width=60)
    table.add_column("Price", justify="right", style="green")
    table.add_column("Rating", justify="center")
    table.add_column("Sold", justify="right")
    table.add_column("Site", style="magenta")
    table.add_column("Link", overflow="fold", style="dim")

    for idx, p in enumerate(sorted(products, key=lambda p: p.price), 1):
        table.add_row(
            str(idx),
            p.name[:60],
            f"R$ {p.price:,.2f}",
            f"{p.rating:.1f}" if p.rating else "-",
            str(p.sold_count) if p.sold_count else "-",
            p.site,
            p.link,
        )

    Console().print(table)


async def cli_search(
    query: str,
    min_price: float,
    max_price: float,
    source_csv: str | None,
    output_format: str,
) -> int:
    """Run a headless search and return an exit code (0=ok, 1=fail)."""
    if min_price > max_price:
        _err.print(
            "[red]--min must not be greater than --max[/red]"
        )
        return 1

    try:
        scrapers = select_scrapers(source_csv)
    except ValueError as exc:
        valid = ", ".join(s["id"] for s in Settings.AVAILABLE_SOURCES)
        _err.print(f"[red]{exc}[/red]")
        _err.print(f"[dim]Available: {valid}[/dim]")
        return 1
    request = SearchRequest(query, min_price, max_price)

    source_labels = ", ".join(s.site_name for s in scrapers)
    _err.print(
        f"[bold]Searching:[/bold] {query}  "
        f"[dim]R$ {min_price:,.2f} - R$ {max_price:,.2f}, "
        f"sources={source_labels}[/dim]"
    )

    result = await search_sites(scrapers, request)

    for error_msg in result.errors:
        _err.print(f"[red]Error: {error_msg}[/red]")

    if not result.products:
        _err.print("[yellow]No products found.[/yellow]")
        return 1

    detail = (
        f" ({result.deduplicated_count} deduped)"
        if result.deduplicated_count
        else ""
    )
    _err.print(
        f"[green]✓ {len(result.products)} products{detail}[/green]"
    )

    if output_format == "table":
        _print_table(result.products)
    else:
        json.dump(
            [p.to_dict() for p in result.products],
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")

    return 0
