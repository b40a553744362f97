"""Tests for the inventory report text formatters."""

from __future__ import annotations

import unittest

from cliente.backend.report_formatter import (
    format_amount,
    format_low_stock,
    format_product_table,
    format_statistics,
    format_transactions,
)
from shared.protocol import CategoryBreakdownRow, ProductRow, StatisticsResponse


class ReportFormatterTests(unittest.TestCase):
    """Validates the text blocks rendered by the report dialog."""

    def test_format_amount_uses_two_decimals(self) -> None:
        """Formats amounts without currency symbol."""
        self.assertEqual(format_amount(4990), "4990.00")
        self.assertEqual(format_amount(0.126), "0.13")

    def test_product_table_has_header_and_rows(self) -> None:
        """Renders header, rule and one line per product."""
        text = format_product_table(
            [
                self._row("A-1", "Casco", cantidad=2, precio=10.0),
                self._row("B-2", "Luces", cantidad=1, precio=5.5),
            ]
        )

        lines = text.splitlines()
        self.assertEqual(len(lines), 4)
        self.assertTrue(lines[0].startswith("SKU"))
        self.assertEqual(lines[1], "-" * 85)
        self.assertTrue(lines[2].startswith("A-1"))
        self.assertIn("20.00", lines[2])
        self.assertIn("5.50", lines[3])

    def test_product_table_empty(self) -> None:
        """Shows a notice instead of an empty table."""
        self.assertEqual(format_product_table([]), "No products found!")

    def test_low_stock_numbering_starts_at_one(self) -> None:
        """Numbers entries in queue order."""
        text = format_low_stock(
            [
                self._row("A-1", "Casco", cantidad=2),
                self._row("B-2", "Luces", cantidad=0),
            ]
        )

        self.assertEqual(
            text,
            "1. A-1 - Casco (Stock: 2)\n2. B-2 - Luces (Stock: 0)",
        )
        self.assertEqual(format_low_stock([]), "No low stock items!")

    def test_transactions_join_lines(self) -> None:
        """Keeps entries in the given order."""
        self.assertEqual(format_transactions(["b", "a"]), "b\na")
        self.assertEqual(format_transactions([]), "No transactions recorded.")

    def test_statistics_block(self) -> None:
        """Includes totals and a line per category."""
        stats = StatisticsResponse(
            total_productos=3,
            valor_total_inventario=100.0,
            categorias=[
                CategoryBreakdownRow("Frenos", 2, 40.0, 40.0),
                CategoryBreakdownRow("Luces", 1, 60.0, 60.0),
            ],
        )

        text = format_statistics(stats)

        self.assertIn("Total Products: 3", text)
        self.assertIn("Total Inventory Value: 100.00", text)
        self.assertIn("• Frenos: 2 products, Value: 40.00 (40.0%)", text)
        self.assertIn("• Luces: 1 products, Value: 60.00 (60.0%)", text)

    def test_statistics_without_categories(self) -> None:
        """Omits the breakdown header for an empty inventory."""
        text = format_statistics(StatisticsResponse(0, 0.0))

        self.assertEqual(text, "Total Products: 0\nTotal Inventory Value: 0.00")

    @staticmethod
    def _row(
        sku: str,
        nombre: str,
        *,
        cantidad: int = 1,
        precio: float = 1.0,
    ) -> ProductRow:
        return ProductRow(
            sku=sku,
            nombre=nombre,
            categoria="General",
            precio=precio,
            cantidad=cantidad,
            valor_inventario=precio * cantidad,
        )


if __name__ == "__main__":
    unittest.main()
