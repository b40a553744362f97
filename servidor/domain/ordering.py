"""Criterios de ordenamiento de productos para reportes."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from shared.errors import InvalidSortCriterionError

from .models import Producto


@dataclass(frozen=True, slots=True)
class SortPolicy:
    """Clave de ordenamiento y direccion para un criterio."""

    key: Callable[[Producto], Any]
    descending: bool = False


def _by_sku(producto: Producto) -> str:
    return producto.sku


def _by_price(producto: Producto) -> float:
    return producto.precio


def _by_value(producto: Producto) -> float:
    return producto.inventory_value()


def _by_name(producto: Producto) -> str:
    return producto.nombre


SORT_POLICIES: dict[str, SortPolicy] = {
    "sku": SortPolicy(key=_by_sku),
    "price": SortPolicy(key=_by_price),
    "value": SortPolicy(key=_by_value, descending=True),
    "name": SortPolicy(key=_by_name),
}


def resolve_policy(criterio: str) -> SortPolicy:
    """Obtiene la politica para un criterio, sin distinguir mayusculas."""
    policy = SORT_POLICIES.get(criterio.lower())
    if policy is None:
        raise InvalidSortCriterionError(criterio)
    return policy


def sort_products(productos: Iterable[Producto], criterio: str) -> list[Producto]:
    """Ordena productos segun el criterio indicado.

    ``sorted`` es estable incluso con ``reverse=True``, por lo que los empates
    conservan el orden de entrada.
    """
    policy = resolve_policy(criterio)
    return sorted(productos, key=policy.key, reverse=policy.descending)
