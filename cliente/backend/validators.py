"""Validaciones para entradas del cliente."""

from __future__ import annotations

import math

from shared.errors import ValidationError


def parse_required_text(value: str, field_name: str) -> str:
    """Retorna el texto sin espacios extremos o falla si queda vacio."""
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(f"El campo {field_name} no puede estar vacio.")
    return cleaned


def parse_price(value: str) -> float:
    """Convierte texto a precio no negativo. Acepta coma como separador decimal."""
    cleaned = (value or "").strip().replace(",", ".")
    try:
        price = float(cleaned)
    except ValueError as exc:
        raise ValidationError(f"Precio invalido: {value!r}") from exc

    if not math.isfinite(price):
        raise ValidationError(f"Precio invalido: {value!r}")
    if price < 0:
        raise ValidationError("El precio no puede ser negativo.")
    return price


def parse_quantity(value: str) -> int:
    """Convierte texto a cantidad entera no negativa."""
    cleaned = (value or "").strip()
    try:
        quantity = int(cleaned)
    except ValueError as exc:
        raise ValidationError(f"Cantidad invalida: {value!r}") from exc

    if quantity < 0:
        raise ValidationError("La cantidad no puede ser negativa.")
    return quantity


def parse_history_count(value: str) -> int:
    """Convierte texto a cantidad positiva de transacciones a mostrar."""
    cleaned = (value or "").strip()
    try:
        count = int(cleaned)
    except ValueError as exc:
        raise ValidationError(f"Numero de transacciones invalido: {value!r}") from exc

    if count <= 0:
        raise ValidationError("El numero de transacciones debe ser mayor a 0.")
    return count
