"""Excepciones compartidas del proyecto."""

from __future__ import annotations


class ValidationError(Exception):
    """Error de validacion de datos de entrada."""


class ServiceError(Exception):
    """Error en la ejecucion de servicios."""


class DuplicateSkuError(ServiceError):
    """Se intento agregar un producto con un SKU ya registrado."""

    def __init__(self, sku: str) -> None:
        super().__init__(f"Ya existe un producto con SKU {sku}.")
        self.sku = sku


class ProductNotFoundError(ServiceError):
    """No existe un producto con el SKU solicitado."""

    def __init__(self, sku: str) -> None:
        super().__init__(f"No se encontro el producto con SKU {sku}.")
        self.sku = sku


class NothingToUndoError(ServiceError):
    """No hay actualizaciones para deshacer."""

    def __init__(self) -> None:
        super().__init__("No hay operaciones para deshacer.")


class InvalidSortCriterionError(ServiceError):
    """Criterio de ordenamiento desconocido."""

    def __init__(self, criterio: str) -> None:
        super().__init__(f"Criterio de ordenamiento invalido: {criterio}")
        self.criterio = criterio
