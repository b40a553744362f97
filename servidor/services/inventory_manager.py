"""Servicio de inventario en memoria."""

from __future__ import annotations

import logging
from collections import deque
from datetime import datetime
from itertools import islice

from parametros import LOW_STOCK_THRESHOLD, TIMESTAMP_FORMAT
from servidor.domain.models import (
    EstadisticaCategoria,
    EstadisticasInventario,
    Producto,
)
from servidor.domain.ordering import sort_products
from shared.errors import (
    DuplicateSkuError,
    NothingToUndoError,
    ProductNotFoundError,
)

LOGGER = logging.getLogger(__name__)


class InventoryManager:
    """Mantiene el catalogo y sus vistas derivadas consistentes.

    Vistas administradas:

    * mapa de identidad ``sku -> Producto`` (unica fuente de verdad; la vista
      ordenada por SKU se deriva de aqui al momento de listar),
    * historial de transacciones, mas reciente primero,
    * pila de snapshots para deshacer cambios de cantidad,
    * cola de stock bajo, solo de agregado (no se reevalua ni se depura),
    * totales acumulados, actualizados por diferencia en cada mutacion.
    """

    def __init__(self, low_stock_threshold: int = LOW_STOCK_THRESHOLD) -> None:
        self._low_stock_threshold = low_stock_threshold
        self._productos: dict[str, Producto] = {}
        self._historial: deque[str] = deque()
        self._undo_stack: list[Producto] = []
        self._low_stock_queue: deque[Producto] = deque()
        self._total_productos = 0
        self._valor_total_inventario = 0.0

    def __len__(self) -> int:
        return len(self._productos)

    def __contains__(self, sku: object) -> bool:
        return sku in self._productos

    @property
    def total_productos(self) -> int:
        return self._total_productos

    @property
    def valor_total_inventario(self) -> float:
        return self._valor_total_inventario

    def add_product(self, producto: Producto) -> None:
        """Agrega un producto nuevo y actualiza todas las vistas."""
        if producto.sku in self._productos:
            LOGGER.warning("Producto duplicado rechazado: sku=%s", producto.sku)
            raise DuplicateSkuError(producto.sku)

        self._productos[producto.sku] = producto
        self._total_productos += 1
        self._valor_total_inventario += producto.inventory_value()
        self._record(
            f"ADD: {producto.sku} - {producto.nombre} "
            f"(Qty: {producto.cantidad}) at {_timestamp(datetime.now())}"
        )

        if producto.cantidad < self._low_stock_threshold:
            self._low_stock_queue.append(producto)
            LOGGER.info(
                "Producto en stock bajo: sku=%s, cantidad=%s",
                producto.sku,
                producto.cantidad,
            )

        LOGGER.info("Producto agregado: sku=%s, nombre=%s", producto.sku, producto.nombre)

    def get_product(self, sku: str) -> Producto:
        """Retorna el producto vivo asociado al SKU."""
        producto = self._productos.get(sku)
        if producto is None:
            LOGGER.warning("Producto no encontrado: sku=%s", sku)
            raise ProductNotFoundError(sku)
        return producto

    def update_product_quantity(self, sku: str, nueva_cantidad: int) -> tuple[int, int]:
        """Cambia la cantidad de un producto y retorna ``(anterior, nueva)``.

        Antes de mutar se apila un snapshot para poder deshacer. La cola de
        stock bajo no se reevalua.
        """
        producto = self.get_product(sku)

        self._undo_stack.append(producto.snapshot())
        cantidad_anterior = producto.cantidad
        producto.set_cantidad(nueva_cantidad)
        self._valor_total_inventario += producto.precio * (nueva_cantidad - cantidad_anterior)
        self._record(
            f"UPDATE: {sku} Quantity {cantidad_anterior} -> {nueva_cantidad} "
            f"at {_timestamp(producto.ultima_actualizacion)}"
        )

        LOGGER.info(
            "Cantidad actualizada: sku=%s, %s -> %s",
            sku,
            cantidad_anterior,
            nueva_cantidad,
        )
        return cantidad_anterior, nueva_cantidad

    def update_product_price(self, sku: str, nuevo_precio: float) -> tuple[float, float]:
        """Cambia el precio de un producto y retorna ``(anterior, nuevo)``.

        Los cambios de precio no se apilan para deshacer.
        """
        producto = self.get_product(sku)

        precio_anterior = producto.precio
        producto.set_precio(nuevo_precio)
        self._valor_total_inventario += producto.cantidad * (nuevo_precio - precio_anterior)
        self._record(
            f"PRICE: {sku} Price {precio_anterior:.2f} -> {nuevo_precio:.2f} "
            f"at {_timestamp(producto.ultima_actualizacion)}"
        )

        LOGGER.info(
            "Precio actualizado: sku=%s, %.2f -> %.2f",
            sku,
            precio_anterior,
            nuevo_precio,
        )
        return precio_anterior, nuevo_precio

    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    def undo_last_update(self) -> tuple[int, int]:
        """Deshace el ultimo cambio de cantidad con una actualizacion compensatoria.

        La restauracion pasa por ``update_product_quantity``: queda registrada
        en el historial y apila su propio snapshot, asi que un segundo deshacer
        revierte el deshacer anterior.
        """
        if not self._undo_stack:
            LOGGER.warning("Deshacer solicitado sin operaciones pendientes.")
            raise NothingToUndoError()

        anterior = self._undo_stack.pop()
        result = self.update_product_quantity(anterior.sku, anterior.cantidad)
        LOGGER.info("Ultima actualizacion deshecha: sku=%s", anterior.sku)
        return result

    def list_products(self) -> list[Producto]:
        """Lista productos en el orden por defecto (SKU ascendente)."""
        return self.list_sorted_by("sku")

    def list_sorted_by(self, criterio: str) -> list[Producto]:
        """Lista productos segun ``sku``, ``price``, ``value`` o ``name``."""
        return sort_products(self._productos.values(), criterio)

    def list_low_stock(self) -> list[Producto]:
        """Retorna la cola de stock bajo en orden de ingreso."""
        return list(self._low_stock_queue)

    def list_transactions(self, count: int) -> list[str]:
        """Retorna hasta ``count`` transacciones, la mas reciente primero."""
        if count <= 0:
            return []
        return list(islice(self._historial, count))

    def get_statistics(self) -> EstadisticasInventario:
        """Totales acumulados y desglose por categoria.

        El desglose se calcula recorriendo el catalogo completo; solo los
        totales se mantienen de forma incremental.
        """
        valores: dict[str, float] = {}
        conteos: dict[str, int] = {}
        for producto in self._productos.values():
            valores[producto.categoria] = (
                valores.get(producto.categoria, 0.0) + producto.inventory_value()
            )
            conteos[producto.categoria] = conteos.get(producto.categoria, 0) + 1

        total = self._valor_total_inventario
        por_categoria = {
            categoria: EstadisticaCategoria(
                cantidad_productos=conteos[categoria],
                valor=valor,
                porcentaje=(valor / total) * 100 if total != 0 else 0.0,
            )
            for categoria, valor in valores.items()
        }
        return EstadisticasInventario(
            total_productos=self._total_productos,
            valor_total_inventario=total,
            por_categoria=por_categoria,
        )

    def _record(self, entry: str) -> None:
        """Registra una transaccion al inicio del historial."""
        self._historial.appendleft(entry)


def _timestamp(value: datetime) -> str:
    return value.strftime(TIMESTAMP_FORMAT)
