"""Pure formatters for the inventory report texts shown by the UI."""

from __future__ import annotations

from collections.abc import Sequence

from shared.protocol import ProductRow, StatisticsResponse

_TABLE_HEADERS = ("SKU", "Name", "Category", "Price", "Qty", "Value")
_TABLE_RULE_WIDTH = 85
_EMPTY_PRODUCTS = "No products found!"
_EMPTY_LOW_STOCK = "No low stock items!"
_EMPTY_TRANSACTIONS = "No transactions recorded."


def format_amount(amount: float) -> str:
    """Formats a plain amount with two decimals and no currency symbol."""
    return f"{amount:.2f}"


def format_product_table(rows: Sequence[ProductRow]) -> str:
    """Builds a fixed-width table with one product per line."""
    if not rows:
        return _EMPTY_PRODUCTS

    lines = [
        "{:<10} {:<20} {:<15} {:<10} {:<8} {:<12}".format(*_TABLE_HEADERS),
        "-" * _TABLE_RULE_WIDTH,
    ]
    for row in rows:
        lines.append(
            f"{row.sku:<10} {row.nombre:<20} {row.categoria:<15} "
            f"{format_amount(row.precio):<10} {row.cantidad:<8} "
            f"{format_amount(row.valor_inventario):<12}".rstrip()
        )
    return "\n".join(lines)


def format_low_stock(rows: Sequence[ProductRow]) -> str:
    """Numbers low-stock entries starting at 1, in queue order."""
    if not rows:
        return _EMPTY_LOW_STOCK

    return "\n".join(
        f"{position}. {row.sku} - {row.nombre} (Stock: {row.cantidad})"
        for position, row in enumerate(rows, start=1)
    )


def format_transactions(entries: Sequence[str]) -> str:
    if not entries:
        return _EMPTY_TRANSACTIONS
    return "\n".join(entries)


def format_statistics(stats: StatisticsResponse) -> str:
    """Builds the totals block followed by the category breakdown."""
    lines = [
        f"Total Products: {stats.total_productos}",
        f"Total Inventory Value: {format_amount(stats.valor_total_inventario)}",
    ]
    if stats.categorias:
        lines.append("")
        lines.append("Category-wise Breakdown:")
        for row in stats.categorias:
            lines.append(
                f"• {row.categoria}: {row.cantidad_productos} products, "
                f"Value: {format_amount(row.valor)} ({row.porcentaje:.1f}%)"
            )
    return "\n".join(lines)
