# src/cli/runner.py

"""Offline inspection of saved product pages from the command line."""

import json
import logging
import math
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Any, cast

from rich.console import Console
from rich.table import Table

from src.config.settings import Settings
from src.extractors.product_page_parser import ProductPageParser
from src.models.notification import Notification
from src.models.price_history_item import PriceHistoryItem
from src.models.product import ProductSnapshot
from src.parsing.soup_node_set import load_document
from src.services.tracking_service import TrackingService

logger = logging.getLogger("price_tracker.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def format_number(num: float = 0) -> str:
    """Format *num* with thousands separators and no fraction digits.

    NaN and infinities are returned as plain text.
    """
    if not math.isfinite(num):
        return str(num)
    rounded = Decimal(str(num)).quantize(
        Decimal("1"), rounding=ROUND_HALF_UP,
    )
    return f"{int(rounded):,}"


def _as_price(value: Any) -> float | None:
    """Return a finite price from a JSON number or numeric string."""
    # JSON true/false arrive as bool, which is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return None
    try:
        price = float(value)
    except ValueError:
        return None
    return price if math.isfinite(price) else None


def _as_flag(value: Any) -> bool:
    """Read a JSON boolean, accepting "true"/"false" strings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return False


def _parse_history_item(raw: Any) -> PriceHistoryItem | None:
    """Build a history item from ``{"price": n, "date": iso}`` or a number."""
    if isinstance(raw, dict):
        entry = cast(dict[str, Any], raw)
        price = _as_price(entry.get("price"))
    else:
        entry = {}
        price = _as_price(raw)
    if price is None:
        logger.warning("Skipping history entry without a price: %r", raw)
        return None
    date_raw = entry.get("date")
    date = None
    if isinstance(date_raw, str) and date_raw:
        try:
            date = datetime.fromisoformat(date_raw)
        except ValueError:
            logger.debug("Ignoring bad history date %r", date_raw)
    return PriceHistoryItem(price=price, date=date)


def load_stored_product(path: Path) -> ProductSnapshot:
    """Read a stored product from a JSON file.

    Accepts either a bare list of history entries or an object with
    ``price_history`` and optional ``is_out_of_stock`` /
    ``current_price`` / ``title`` keys.
    """
    with open(path, encoding="utf-8") as f:
        data: Any = json.load(f)

    fields: dict[str, Any] = {}
    if isinstance(data, list):
        raw_history = cast(list[Any], data)
    elif isinstance(data, dict):
        fields = cast(dict[str, Any], data)
        raw_history = list(fields.get("price_history", []))
    else:
        raise ValueError(f"unsupported history format in {path.name}")

    history = [
        item
        for item in (_parse_history_item(r) for r in raw_history)
        if item is not None
    ]
    return ProductSnapshot(
        current_price=(
            _as_price(fields.get("current_price"))
            or (history[-1].price if history else 0.0)
        ),
        is_out_of_stock=_as_flag(fields.get("is_out_of_stock")),
        title=str(fields.get("title", "")),
        price_history=history,
    )


def snapshot_to_dict(
    product: ProductSnapshot,
    notification: Notification | None,
) -> dict[str, object]:
    """Serialise a snapshot and its notification for JSON output."""
    return {
        "title": product.title,
        "url": product.url,
        "current_price": product.current_price,
        "original_price": product.original_price,
        "currency": product.currency,
        "discount_rate": product.discount_rate,
        "is_out_of_stock": product.is_out_of_stock,
        "image_url": product.image_url,
        "description": product.description,
        "lowest_price": product.lowest_price,
        "highest_price": product.highest_price,
        "average_price": product.average_price,
        "history_count": len(product.price_history),
        "notification": notification.value if notification else None,
    }


def _print_table(
    product: ProductSnapshot,
    notification: Notification | None,
) -> None:
    """Render a Rich table of the extracted snapshot to stdout."""
    table = Table(
        title=product.title or "Product",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("Field", style="dim")
    table.add_column("Value", overflow="fold")

    def money(value: float) -> str:
        return f"{product.currency}{format_number(value)}" if value else "N/A"

    table.add_row("Current price", money(product.current_price))
    table.add_row("Original price", money(product.original_price))
    table.add_row("Discount", f"{product.discount_rate:g}%")
    table.add_row(
        "Stock",
        "[red]Out of stock[/red]"
        if product.is_out_of_stock
        else "[green]In stock[/green]",
    )
    table.add_row("Lowest", money(product.lowest_price))
    table.add_row("Highest", money(product.highest_price))
    table.add_row("Average", money(product.average_price))
    table.add_row(
        "Notification",
        notification.value if notification else "—",
    )
    table.add_row("Description", product.description[:500] or "—")

    Console().print(table)


def run_inspect(
    page_path: str,
    history_path: str | None = None,
    source: str | None = None,
    url: str = "",
    output_format: str = "json",
) -> int:
    """Extract a snapshot from a saved page and classify it.

    Returns a process exit code: 0 on success, 1 for an unknown source or an
    input file that cannot be read.
    """
    try:
        html = Path(page_path).read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Cannot read page %s: %s", page_path, exc)
        _err.print(f"[red]Cannot read page: {exc}[/red]")
        return 1

    source_id = source or Settings.DEFAULT_SOURCE
    known = {s["id"] for s in Settings.AVAILABLE_SOURCES}
    if source_id not in known:
        _err.print(f"[red]Unknown source: {source_id}[/red]")
        _err.print(f"[dim]Available: {', '.join(sorted(known))}[/dim]")
        return 1

    stored: ProductSnapshot | None = None
    if history_path:
        try:
            stored = load_stored_product(Path(history_path))
        except (OSError, TypeError, ValueError) as exc:
            logger.error(
                "Cannot load history %s: %s",
                history_path,
                exc,
                exc_info=True,
            )
            _err.print(f"[red]Cannot load history: {exc}[/red]")
            return 1

    parser = ProductPageParser(source_id)
    scraped = parser.parse(load_document(html), url=url)

    if stored is not None and not stored.price_history:
        _err.print("[yellow]Stored history is empty, treating as new[/yellow]")
        stored = None

    result = TrackingService().evaluate(scraped, stored)
    logger.info(
        "Inspected %s: price=%s notification=%s",
        page_path,
        result.product.current_price,
        result.notification.value if result.notification else "none",
    )

    if output_format == "table":
        _print_table(result.product, result.notification)
    else:
        print(
            json.dumps(
                snapshot_to_dict(result.product, result.notification),
                ensure_ascii=False,
                indent=2,
            )
        )
    return 0
