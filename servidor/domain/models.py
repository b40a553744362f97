"""Modelos de dominio de inventario."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(slots=True, eq=False)
class Producto:
    """Representa un producto en inventario.

    La identidad es el SKU: dos productos son iguales si comparten SKU,
    sin importar el resto de los campos.
    """

    sku: str
    nombre: str
    categoria: str
    precio: float
    cantidad: int
    ultima_actualizacion: datetime = field(default_factory=datetime.now)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Producto):
            return NotImplemented
        return self.sku == other.sku

    def __hash__(self) -> int:
        return hash(self.sku)

    def set_precio(self, precio: float) -> None:
        """Actualiza el precio y la marca de tiempo."""
        self.precio = precio
        self.ultima_actualizacion = datetime.now()

    def set_cantidad(self, cantidad: int) -> None:
        """Actualiza la cantidad y la marca de tiempo."""
        self.cantidad = cantidad
        self.ultima_actualizacion = datetime.now()

    def inventory_value(self) -> float:
        """Valor de inventario: precio por cantidad."""
        return self.precio * self.cantidad

    def snapshot(self) -> Producto:
        """Retorna una copia independiente con los valores actuales."""
        return Producto(
            sku=self.sku,
            nombre=self.nombre,
            categoria=self.categoria,
            precio=self.precio,
            cantidad=self.cantidad,
            ultima_actualizacion=self.ultima_actualizacion,
        )


@dataclass(frozen=True, slots=True)
class EstadisticaCategoria:
    """Agregado de una categoria dentro de las estadisticas."""

    cantidad_productos: int
    valor: float
    porcentaje: float


@dataclass(frozen=True, slots=True)
class EstadisticasInventario:
    """Resumen de totales del inventario y desglose por categoria."""

    total_productos: int
    valor_total_inventario: float
    por_categoria: dict[str, EstadisticaCategoria]
