"""Tests para validaciones de entradas del cliente."""

from __future__ import annotations

import unittest

from cliente.backend.validators import (
    parse_history_count,
    parse_price,
    parse_quantity,
    parse_required_text,
)
from shared.errors import ValidationError


class ValidatorsTests(unittest.TestCase):
    """Valida conversion de texto crudo a valores tipados."""

    def test_parse_required_text_strips(self) -> None:
        """Debe quitar espacios extremos."""
        self.assertEqual(parse_required_text("  SKU-1 ", "SKU"), "SKU-1")

    def test_parse_required_text_rejects_blank(self) -> None:
        """Debe rechazar textos vacios indicando el campo."""
        with self.assertRaisesRegex(ValidationError, "SKU"):
            parse_required_text("   ", "SKU")

    def test_parse_price_accepts_comma_decimal(self) -> None:
        """Debe aceptar coma como separador decimal."""
        self.assertEqual(parse_price("12,50"), 12.5)
        self.assertEqual(parse_price(" 3 "), 3.0)
        self.assertEqual(parse_price("0"), 0.0)

    def test_parse_price_rejects_invalid_values(self) -> None:
        """Debe rechazar texto no numerico, negativos e infinitos."""
        for raw in ("abc", "", "-1", "inf", "nan"):
            with self.subTest(raw=raw):
                with self.assertRaises(ValidationError):
                    parse_price(raw)

    def test_parse_quantity(self) -> None:
        """Debe aceptar enteros no negativos y rechazar el resto."""
        self.assertEqual(parse_quantity(" 7 "), 7)
        self.assertEqual(parse_quantity("0"), 0)
        for raw in ("1.5", "-2", "diez", ""):
            with self.subTest(raw=raw):
                with self.assertRaises(ValidationError):
                    parse_quantity(raw)

    def test_parse_history_count_requires_positive(self) -> None:
        """El numero de transacciones debe ser mayor a cero."""
        self.assertEqual(parse_history_count("3"), 3)
        with self.assertRaises(ValidationError):
            parse_history_count("0")
        with self.assertRaises(ValidationError):
            parse_history_count("x")


if __name__ == "__main__":
    unittest.main()
