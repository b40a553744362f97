"""Controlador principal del cliente."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from parametros import DEFAULT_HISTORY_COUNT
from shared.protocol import (
    AddProductRequest,
    ListProductsRequest,
    ProductDraft,
    TransactionsRequest,
    UndoResponse,
    UpdatePriceRequest,
    UpdatePriceResponse,
    UpdateQuantityRequest,
    UpdateQuantityResponse,
)

from .gateway import LocalServerGateway, ServerGateway
from .report_formatter import (
    format_low_stock,
    format_product_table,
    format_statistics,
    format_transactions,
)
from .validators import (
    parse_history_count,
    parse_price,
    parse_quantity,
    parse_required_text,
)

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

LOGGER = logging.getLogger(__name__)


class AppController:
    """Coordina acciones de UI y servicios de inventario."""

    def __init__(self, gateway: ServerGateway | None = None) -> None:
        self._gateway = gateway or LocalServerGateway()

    def on_add_product(
        self,
        sku: str,
        nombre: str,
        categoria: str,
        precio: str,
        cantidad: str,
    ) -> str:
        """Valida los campos del formulario y registra el producto."""
        draft = ProductDraft(
            sku=parse_required_text(sku, "SKU"),
            nombre=parse_required_text(nombre, "Nombre"),
            categoria=parse_required_text(categoria, "Categoria"),
            precio=parse_price(precio),
            cantidad=parse_quantity(cantidad),
        )
        response = self._gateway.add_product(AddProductRequest(product=draft))
        LOGGER.info("Accion ejecutada: agregar producto sku=%s", response.sku)
        return response.sku

    def on_update_quantity(self, sku: str, cantidad: str) -> UpdateQuantityResponse:
        """Valida y aplica un cambio de cantidad."""
        request = UpdateQuantityRequest(
            sku=parse_required_text(sku, "SKU"),
            cantidad=parse_quantity(cantidad),
        )
        response = self._gateway.update_quantity(request)
        LOGGER.info(
            "Accion ejecutada: actualizar cantidad sku=%s (%s -> %s)",
            response.sku,
            response.cantidad_anterior,
            response.cantidad_nueva,
        )
        return response

    def on_update_price(self, sku: str, precio: str) -> UpdatePriceResponse:
        """Valida y aplica un cambio de precio."""
        request = UpdatePriceRequest(
            sku=parse_required_text(sku, "SKU"),
            precio=parse_price(precio),
        )
        response = self._gateway.update_price(request)
        LOGGER.info("Accion ejecutada: actualizar precio sku=%s", response.sku)
        return response

    def on_undo(self) -> UndoResponse:
        """Deshace el ultimo cambio de cantidad."""
        response = self._gateway.undo_last_update()
        LOGGER.info("Accion ejecutada: deshacer ultima actualizacion")
        return response

    def can_undo(self) -> bool:
        return self._gateway.can_undo()

    def build_products_report(self, criterio: str) -> str:
        """Retorna la tabla de productos ordenada por el criterio."""
        LOGGER.info("Accion ejecutada: listar productos por %s", criterio)
        response = self._gateway.list_products(ListProductsRequest(criterio=criterio))
        return format_product_table(response.rows)

    def build_low_stock_report(self) -> str:
        """Retorna las alertas de stock bajo numeradas."""
        LOGGER.info("Accion ejecutada: alertas de stock bajo")
        return format_low_stock(self._gateway.list_low_stock().rows)

    def build_history_report(self, count: str | None = None) -> str:
        """Retorna las ultimas transacciones; sin ``count`` usa el valor por defecto."""
        parsed_count = DEFAULT_HISTORY_COUNT if count is None else parse_history_count(count)
        LOGGER.info("Accion ejecutada: historial de %s transacciones", parsed_count)
        response = self._gateway.list_transactions(TransactionsRequest(count=parsed_count))
        return format_transactions(response.entries)

    def build_statistics_report(self) -> str:
        """Retorna el bloque de estadisticas del inventario."""
        LOGGER.info("Accion ejecutada: estadisticas de inventario")
        return format_statistics(self._gateway.get_statistics())

    def on_exit(
        self,
        app: QApplication | Callable[[], None] | None,
    ) -> None:
        """Cierra la aplicacion."""
        LOGGER.info("Accion ejecutada: salir")

        if callable(app):
            app()
            return

        if app is not None:
            app.quit()
