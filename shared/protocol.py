"""DTOs del protocolo cliente-servidor."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class ProductDraft:
    """DTO con los datos tipados de un producto a registrar."""

    sku: str
    nombre: str
    categoria: str
    precio: float
    cantidad: int


@dataclass(slots=True)
class ProductRow:
    """Fila de producto lista para mostrar."""

    sku: str
    nombre: str
    categoria: str
    precio: float
    cantidad: int
    valor_inventario: float


@dataclass(slots=True)
class AddProductRequest:
    """Solicitud para agregar un producto al inventario."""

    product: ProductDraft


@dataclass(slots=True)
class AddProductResponse:
    """Respuesta de agregado de producto."""

    sku: str


@dataclass(slots=True)
class UpdateQuantityRequest:
    """Solicitud para cambiar la cantidad de un producto."""

    sku: str
    cantidad: int


@dataclass(slots=True)
class UpdateQuantityResponse:
    """Respuesta con la cantidad anterior y la nueva."""

    sku: str
    cantidad_anterior: int
    cantidad_nueva: int


@dataclass(slots=True)
class UpdatePriceRequest:
    """Solicitud para cambiar el precio de un producto."""

    sku: str
    precio: float


@dataclass(slots=True)
class UpdatePriceResponse:
    """Respuesta con el precio anterior y el nuevo."""

    sku: str
    precio_anterior: float
    precio_nuevo: float


@dataclass(slots=True)
class UndoResponse:
    """Respuesta de la actualizacion compensatoria aplicada al deshacer."""

    cantidad_anterior: int
    cantidad_nueva: int


@dataclass(slots=True)
class ListProductsRequest:
    """Solicitud de listado ordenado de productos."""

    criterio: str


@dataclass(slots=True)
class ListProductsResponse:
    """Listado ordenado de productos."""

    criterio: str
    rows: list[ProductRow] = field(default_factory=list)


@dataclass(slots=True)
class LowStockResponse:
    """Productos registrados en la cola de stock bajo."""

    rows: list[ProductRow] = field(default_factory=list)


@dataclass(slots=True)
class TransactionsRequest:
    """Solicitud de las ultimas transacciones."""

    count: int


@dataclass(slots=True)
class TransactionsResponse:
    """Transacciones, la mas reciente primero."""

    entries: list[str] = field(default_factory=list)


@dataclass(slots=True)
class CategoryBreakdownRow:
    """Desglose de una categoria en las estadisticas."""

    categoria: str
    cantidad_productos: int
    valor: float
    porcentaje: float


@dataclass(slots=True)
class StatisticsResponse:
    """Totales del inventario y desglose por categoria."""

    total_productos: int
    valor_total_inventario: float
    categorias: list[CategoryBreakdownRow] = field(default_factory=list)
