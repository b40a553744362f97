"""Dialogo para registrar nuevos productos en el inventario."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import (
    QDialog,
    QFormLayout,
    QFrame,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from cliente.frontend.dialogs import show_error, show_info
from shared.errors import ServiceError, ValidationError

if TYPE_CHECKING:
    from cliente.backend.controller import AppController


class ProductFormDialog(QDialog):
    """Dialogo modal con el formulario de alta de producto."""

    def __init__(
        self,
        controller: AppController,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._sku_input: QLineEdit
        self._nombre_input: QLineEdit
        self._categoria_input: QLineEdit
        self._precio_input: QLineEdit
        self._cantidad_input: QLineEdit

        self.setWindowTitle("Agregar producto")
        self.setModal(True)
        self.setMinimumSize(460, 380)
        self.resize(500, 420)

        self._build_ui()
        self._apply_styles()

    def _build_ui(self) -> None:
        """Construye widgets del dialogo."""
        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(18, 18, 18, 18)

        card = QFrame(self)
        card.setObjectName("dialogCard")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(24, 24, 24, 24)
        card_layout.setSpacing(12)

        title_label = QLabel("Agregar producto", card)
        title_label.setObjectName("titleLabel")
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        form_layout = QFormLayout()
        form_layout.setSpacing(10)

        self._sku_input = self._build_input(card, "SKU-001")
        self._nombre_input = self._build_input(card, "Nombre del producto")
        self._categoria_input = self._build_input(card, "Categoria")
        self._precio_input = self._build_input(card, "0.00")
        self._cantidad_input = self._build_input(card, "0")

        form_layout.addRow(self._build_label(card, "SKU"), self._sku_input)
        form_layout.addRow(self._build_label(card, "Nombre"), self._nombre_input)
        form_layout.addRow(self._build_label(card, "Categoria"), self._categoria_input)
        form_layout.addRow(self._build_label(card, "Precio"), self._precio_input)
        form_layout.addRow(self._build_label(card, "Cantidad"), self._cantidad_input)

        buttons_layout = QHBoxLayout()
        buttons_layout.addStretch(1)

        cancel_button = QPushButton("Cancelar", card)
        cancel_button.setObjectName("cancelButton")
        save_button = QPushButton("Agregar", card)

        cancel_button.clicked.connect(self.reject)
        save_button.clicked.connect(self._on_save_clicked)

        buttons_layout.addWidget(cancel_button)
        buttons_layout.addWidget(save_button)

        card_layout.addWidget(title_label)
        card_layout.addSpacing(4)
        card_layout.addLayout(form_layout)
        card_layout.addSpacing(4)
        card_layout.addLayout(buttons_layout)

        shadow = QGraphicsDropShadowEffect(card)
        shadow.setBlurRadius(30)
        shadow.setOffset(0, 6)
        shadow.setColor(QColor(0, 0, 0, 35))
        card.setGraphicsEffect(shadow)

        root_layout.addWidget(card)
        self._sku_input.setFocus()

    def _apply_styles(self) -> None:
        """Aplica estilos visuales consistentes con la app."""
        self.setStyleSheet(
            """
            QDialog {
                background-color: #eef1f4;
            }
            QFrame#dialogCard {
                background-color: #ffffff;
                border-radius: 16px;
            }
            QLabel#titleLabel {
                color: #20232a;
                font-family: "Segoe UI";
                font-size: 22px;
                font-weight: 700;
            }
            QLabel#fieldLabel {
                color: #334155;
                font-family: "Segoe UI";
                font-size: 13px;
                font-weight: 600;
            }
            QLineEdit {
                background-color: #f8fafc;
                border: 1px solid #d1d5db;
                border-radius: 8px;
                color: #111827;
                font-family: "Segoe UI";
                font-size: 13px;
                padding: 8px;
            }
            QLineEdit:focus {
                border: 1px solid #2563eb;
                background-color: #ffffff;
            }
            QPushButton {
                background-color: #2563eb;
                border: none;
                border-radius: 10px;
                color: #ffffff;
                font-family: "Segoe UI";
                font-size: 13px;
                font-weight: 600;
                min-height: 40px;
                min-width: 100px;
                padding: 8px 12px;
            }
            QPushButton:hover {
                background-color: #1d4ed8;
            }
            QPushButton#cancelButton {
                background-color: #e5e7eb;
                color: #1f2937;
            }
            QPushButton#cancelButton:hover {
                background-color: #d1d5db;
            }
            """
        )

    def _on_save_clicked(self) -> None:
        """Valida el formulario y registra el producto usando el controller."""
        try:
            sku = self._controller.on_add_product(
                sku=self._sku_input.text(),
                nombre=self._nombre_input.text(),
                categoria=self._categoria_input.text(),
                precio=self._precio_input.text(),
                cantidad=self._cantidad_input.text(),
            )
        except (ValidationError, ServiceError) as exc:
            show_error(self, "Error al agregar producto", str(exc))
            return

        show_info(self, "Producto agregado", f"Producto agregado: {sku}")
        self.accept()

    @staticmethod
    def _build_input(parent: QWidget, placeholder: str) -> QLineEdit:
        line_edit = QLineEdit(parent)
        line_edit.setPlaceholderText(placeholder)
        return line_edit

    @staticmethod
    def _build_label(parent: QWidget, text: str) -> QLabel:
        label = QLabel(text, parent)
        label.setObjectName("fieldLabel")
        return label
