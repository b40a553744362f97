"""Gateway de comunicacion cliente-servidor."""

from __future__ import annotations

import logging
from typing import Protocol

from servidor.domain.models import Producto
from servidor.services.inventory_manager import InventoryManager
from shared.errors import ServiceError
from shared.protocol import (
    AddProductRequest,
    AddProductResponse,
    CategoryBreakdownRow,
    ListProductsRequest,
    ListProductsResponse,
    LowStockResponse,
    ProductRow,
    StatisticsResponse,
    TransactionsRequest,
    TransactionsResponse,
    UndoResponse,
    UpdatePriceRequest,
    UpdatePriceResponse,
    UpdateQuantityRequest,
    UpdateQuantityResponse,
)

LOGGER = logging.getLogger(__name__)


class ServerGateway(Protocol):
    """Interfaz de acceso del cliente a servicios del servidor."""

    def add_product(self, request: AddProductRequest) -> AddProductResponse:
        """Solicita el registro de un producto."""

    def update_quantity(self, request: UpdateQuantityRequest) -> UpdateQuantityResponse:
        """Solicita el cambio de cantidad de un producto."""

    def update_price(self, request: UpdatePriceRequest) -> UpdatePriceResponse:
        """Solicita el cambio de precio de un producto."""

    def undo_last_update(self) -> UndoResponse:
        """Solicita deshacer el ultimo cambio de cantidad."""

    def list_products(self, request: ListProductsRequest) -> ListProductsResponse:
        """Solicita el listado ordenado de productos."""

    def list_low_stock(self) -> LowStockResponse:
        """Solicita la cola de stock bajo."""

    def list_transactions(self, request: TransactionsRequest) -> TransactionsResponse:
        """Solicita las ultimas transacciones."""

    def get_statistics(self) -> StatisticsResponse:
        """Solicita estadisticas del inventario."""

    def can_undo(self) -> bool:
        """Indica si hay cambios de cantidad para deshacer."""


class LocalServerGateway:
    """Implementacion local del gateway usando servicios en memoria."""

    def __init__(self, inventory_manager: InventoryManager | None = None) -> None:
        self._inventory_manager = inventory_manager or InventoryManager()

    def add_product(self, request: AddProductRequest) -> AddProductResponse:
        """Construye el producto y lo registra en el inventario."""
        draft = request.product
        producto = Producto(
            sku=draft.sku,
            nombre=draft.nombre,
            categoria=draft.categoria,
            precio=draft.precio,
            cantidad=draft.cantidad,
        )
        try:
            self._inventory_manager.add_product(producto)
        except ServiceError:
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al agregar producto.")
            raise ServiceError("No fue posible agregar el producto.") from exc

        return AddProductResponse(sku=producto.sku)

    def update_quantity(self, request: UpdateQuantityRequest) -> UpdateQuantityResponse:
        """Cambia la cantidad delegando en el servicio."""
        try:
            anterior, nueva = self._inventory_manager.update_product_quantity(
                request.sku,
                request.cantidad,
            )
        except ServiceError:
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al actualizar cantidad.")
            raise ServiceError("No fue posible actualizar la cantidad.") from exc

        return UpdateQuantityResponse(
            sku=request.sku,
            cantidad_anterior=anterior,
            cantidad_nueva=nueva,
        )

    def update_price(self, request: UpdatePriceRequest) -> UpdatePriceResponse:
        """Cambia el precio delegando en el servicio."""
        try:
            anterior, nuevo = self._inventory_manager.update_product_price(
                request.sku,
                request.precio,
            )
        except ServiceError:
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al actualizar precio.")
            raise ServiceError("No fue posible actualizar el precio.") from exc

        return UpdatePriceResponse(
            sku=request.sku,
            precio_anterior=anterior,
            precio_nuevo=nuevo,
        )

    def undo_last_update(self) -> UndoResponse:
        """Deshace el ultimo cambio de cantidad."""
        try:
            anterior, nueva = self._inventory_manager.undo_last_update()
        except ServiceError:
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al deshacer actualizacion.")
            raise ServiceError("No fue posible deshacer la ultima actualizacion.") from exc

        return UndoResponse(cantidad_anterior=anterior, cantidad_nueva=nueva)

    def list_products(self, request: ListProductsRequest) -> ListProductsResponse:
        """Retorna productos ordenados por el criterio solicitado."""
        productos = self._inventory_manager.list_sorted_by(request.criterio)
        return ListProductsResponse(
            criterio=request.criterio.lower(),
            rows=[_to_row(producto) for producto in productos],
        )

    def list_low_stock(self) -> LowStockResponse:
        """Retorna la cola de stock bajo en orden de ingreso."""
        productos = self._inventory_manager.list_low_stock()
        return LowStockResponse(rows=[_to_row(producto) for producto in productos])

    def list_transactions(self, request: TransactionsRequest) -> TransactionsResponse:
        """Retorna las ultimas transacciones solicitadas."""
        return TransactionsResponse(
            entries=self._inventory_manager.list_transactions(request.count)
        )

    def get_statistics(self) -> StatisticsResponse:
        """Retorna totales y desglose por categoria."""
        stats = self._inventory_manager.get_statistics()
        categorias = [
            CategoryBreakdownRow(
                categoria=categoria,
                cantidad_productos=detalle.cantidad_productos,
                valor=detalle.valor,
                porcentaje=detalle.porcentaje,
            )
            for categoria, detalle in stats.por_categoria.items()
        ]
        return StatisticsResponse(
            total_productos=stats.total_productos,
            valor_total_inventario=stats.valor_total_inventario,
            categorias=categorias,
        )

    def can_undo(self) -> bool:
        return self._inventory_manager.can_undo()


def _to_row(producto: Producto) -> ProductRow:
    """Convierte un producto vivo en una fila inmutable para la UI."""
    return ProductRow(
        sku=producto.sku,
        nombre=producto.nombre,
        categoria=producto.categoria,
        precio=producto.precio,
        cantidad=producto.cantidad,
        valor_inventario=producto.inventory_value(),
    )
