"""Ventana principal de Stock Tracker."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QFont, QGuiApplication
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGraphicsDropShadowEffect,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from cliente.backend.controller import AppController
from cliente.frontend.dialogs import ask_choice, ask_text, show_error, show_info
from cliente.frontend.product_form_dialog import ProductFormDialog
from cliente.frontend.report_dialog import ReportDialog
from parametros import APP_TITLE, DEFAULT_HISTORY_COUNT, SORT_CRITERIA
from shared.errors import ServiceError, ValidationError


class MainWindow(QMainWindow):
    """Ventana principal con el menu de acciones del inventario."""

    def __init__(self, controller: AppController) -> None:
        super().__init__()
        self._controller = controller

        self._add_button: QPushButton
        self._quantity_button: QPushButton
        self._price_button: QPushButton
        self._list_button: QPushButton
        self._low_stock_button: QPushButton
        self._history_button: QPushButton
        self._statistics_button: QPushButton
        self._undo_button: QPushButton
        self._exit_button: QPushButton

        self.setWindowTitle(APP_TITLE)
        screen = QGuiApplication.primaryScreen()
        geo = screen.availableGeometry()  # tamaño usable (sin taskbar/dock)
        w = int(geo.width() * 0.45)
        h = int(geo.height() * 0.85)
        self.resize(w, h)
        self.setMinimumSize(int(w * 0.70), int(h * 0.70))
        self._build_ui()
        self._apply_styles()
        self._connect_signals()
        self._refresh_undo_state()

    def _build_ui(self) -> None:
        """Construye la pagina de menu principal."""
        page = QWidget(self)
        self.setCentralWidget(page)

        root_layout = QVBoxLayout(page)
        root_layout.setContentsMargins(40, 40, 40, 40)
        root_layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        card = QFrame(page)
        card.setObjectName("mainCard")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(40, 40, 40, 40)
        card_layout.setSpacing(12)

        title_label = QLabel(card)
        title_label.setObjectName("titleLabel")
        title_label.setFont(QFont("Segoe UI", 24, QFont.Weight.Bold))
        title_label.setTextFormat(Qt.TextFormat.RichText)
        title_label.setText(
            '<span style="color:#C80202;">S</span>'
            '<span style="color:#111827;">tock </span>'
            '<span style="color:#C80202;">T</span>'
            '<span style="color:#111827;">racker</span>'
        )
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._add_button = self._build_button("Agregar producto")
        self._quantity_button = self._build_button("Actualizar cantidad")
        self._price_button = self._build_button("Actualizar precio")
        self._list_button = self._build_button("Visualizar productos")
        self._low_stock_button = self._build_button("Alertas de stock bajo")
        self._history_button = self._build_button("Historial de transacciones")
        self._statistics_button = self._build_button("Estadisticas de inventario")
        self._undo_button = self._build_button("Deshacer ultima actualizacion")
        self._exit_button = self._build_button("Salir")
        self._exit_button.setObjectName("exitButton")

        card_layout.addWidget(title_label)
        card_layout.addSpacing(18)
        for button in (
            self._add_button,
            self._quantity_button,
            self._price_button,
            self._list_button,
            self._low_stock_button,
            self._history_button,
            self._statistics_button,
            self._undo_button,
        ):
            card_layout.addWidget(button)
        card_layout.addSpacing(8)
        card_layout.addWidget(self._exit_button)

        shadow = QGraphicsDropShadowEffect(card)
        shadow.setBlurRadius(38)
        shadow.setOffset(0, 8)
        shadow.setColor(QColor(0, 0, 0, 38))
        card.setGraphicsEffect(shadow)

        root_layout.addWidget(card)

    def _apply_styles(self) -> None:
        """Aplica estilos QSS de la interfaz."""
        self.setStyleSheet(
            """
            QMainWindow {
                background-color: #eef1f4;
            }
            QFrame#mainCard {
                background-color: #ffffff;
                border-radius: 18px;
                min-width: 460px;
                max-width: 520px;
            }
            QPushButton {
                background-color: #C80202;
                border: none;
                border-radius: 10px;
                color: #ffffff;
                font-family: "Segoe UI";
                font-size: 15px;
                font-weight: 600;
                min-height: 44px;
                padding: 8px 14px;
            }
            QPushButton:hover {
                background-color: #A30202;
            }
            QPushButton:pressed {
                background-color: #820101;
            }
            QPushButton:disabled {
                background-color: #d5a3a3;
                color: #f5e8e8;
            }
            QPushButton#exitButton {
                background-color: #e5e7eb;
                color: #1f2937;
            }
            QPushButton#exitButton:hover {
                background-color: #d1d5db;
            }
            QPushButton#exitButton:pressed {
                background-color: #b9c0c9;
            }
            """
        )

    def _connect_signals(self) -> None:
        """Conecta botones de UI con acciones del controller."""
        self._add_button.clicked.connect(self._on_add_clicked)
        self._quantity_button.clicked.connect(self._on_update_quantity_clicked)
        self._price_button.clicked.connect(self._on_update_price_clicked)
        self._list_button.clicked.connect(self._on_list_clicked)
        self._low_stock_button.clicked.connect(self._on_low_stock_clicked)
        self._history_button.clicked.connect(self._on_history_clicked)
        self._statistics_button.clicked.connect(self._on_statistics_clicked)
        self._undo_button.clicked.connect(self._on_undo_clicked)
        self._exit_button.clicked.connect(self._on_exit_clicked)

    def _refresh_undo_state(self) -> None:
        """Habilita deshacer solo si hay cambios de cantidad pendientes."""
        self._undo_button.setEnabled(self._controller.can_undo())

    def _on_add_clicked(self, _checked: bool = False) -> None:
        """Abre dialogo modal para agregar un producto."""
        dialog = ProductFormDialog(controller=self._controller, parent=self)
        dialog.exec()

    def _on_update_quantity_clicked(self, _checked: bool = False) -> None:
        """Pide SKU y nueva cantidad y aplica el cambio."""
        sku = ask_text(self, "Actualizar cantidad", "SKU a actualizar:")
        if sku is None:
            return
        cantidad = ask_text(self, "Actualizar cantidad", "Nueva cantidad:")
        if cantidad is None:
            return

        try:
            response = self._controller.on_update_quantity(sku, cantidad)
        except (ValidationError, ServiceError) as exc:
            show_error(self, "Error al actualizar cantidad", str(exc))
            return
        finally:
            self._refresh_undo_state()

        show_info(
            self,
            "Cantidad actualizada",
            f"{response.sku}: {response.cantidad_anterior} -> {response.cantidad_nueva}",
        )

    def _on_update_price_clicked(self, _checked: bool = False) -> None:
        """Pide SKU y nuevo precio y aplica el cambio."""
        sku = ask_text(self, "Actualizar precio", "SKU a actualizar:")
        if sku is None:
            return
        precio = ask_text(self, "Actualizar precio", "Nuevo precio:")
        if precio is None:
            return

        try:
            response = self._controller.on_update_price(sku, precio)
        except (ValidationError, ServiceError) as exc:
            show_error(self, "Error al actualizar precio", str(exc))
            return

        show_info(
            self,
            "Precio actualizado",
            f"{response.sku}: {response.precio_anterior:.2f} -> {response.precio_nuevo:.2f}",
        )

    def _on_list_clicked(self, _checked: bool = False) -> None:
        """Muestra productos ordenados por el criterio elegido."""
        criterio = ask_choice(self, "Visualizar productos", "Ordenar por:", SORT_CRITERIA)
        if criterio is None:
            return

        try:
            report = self._controller.build_products_report(criterio)
        except (ValidationError, ServiceError) as exc:
            show_error(self, "Error al listar productos", str(exc))
            return

        self._show_report(f"Productos ordenados por {criterio.upper()}", report)

    def _on_low_stock_clicked(self, _checked: bool = False) -> None:
        self._show_report("Alertas de stock bajo", self._controller.build_low_stock_report())

    def _on_history_clicked(self, _checked: bool = False) -> None:
        """Pide cuantas transacciones mostrar y abre el historial."""
        count = ask_text(
            self,
            "Historial de transacciones",
            "Cantidad de transacciones a mostrar:",
            default=str(DEFAULT_HISTORY_COUNT),
        )
        if count is None:
            return

        try:
            report = self._controller.build_history_report(count)
        except (ValidationError, ServiceError) as exc:
            show_error(self, "Error en historial", str(exc))
            return

        self._show_report("Historial de transacciones", report)

    def _on_statistics_clicked(self, _checked: bool = False) -> None:
        self._show_report(
            "Estadisticas de inventario",
            self._controller.build_statistics_report(),
        )

    def _on_undo_clicked(self, _checked: bool = False) -> None:
        """Deshace el ultimo cambio de cantidad."""
        try:
            response = self._controller.on_undo()
        except ServiceError as exc:
            show_error(self, "Error al deshacer", str(exc))
            return
        finally:
            self._refresh_undo_state()

        show_info(
            self,
            "Ultima actualizacion deshecha",
            f"Cantidad restaurada: {response.cantidad_anterior} -> {response.cantidad_nueva}",
        )

    def _on_exit_clicked(self) -> None:
        """Solicita al controller el cierre de la app."""
        self._controller.on_exit(QApplication.instance())

    def _show_report(self, title: str, report: str) -> None:
        dialog = ReportDialog(title=title, report=report, parent=self)
        dialog.exec()

    @staticmethod
    def _build_button(text: str) -> QPushButton:
        """Construye un boton estandar del menu principal."""
        button = QPushButton(text)
        button.setCursor(Qt.CursorShape.PointingHandCursor)
        return button
