"""Dialogo para visualizar y copiar reportes de inventario."""

from __future__ import annotations

from PyQt6.QtGui import QColor, QFont
from PyQt6.QtWidgets import (
    QApplication,
    QDialog,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)


class ReportDialog(QDialog):
    """Dialogo de solo lectura con el texto de un reporte."""

    def __init__(self, title: str, report: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._title = title
        self._report = report

        self.setWindowTitle(title)
        self.setModal(True)
        self.resize(820, 480)

        self._build_ui()
        self._apply_styles()

    def _build_ui(self) -> None:
        """Construye layout y widgets del dialogo."""
        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(18, 18, 18, 18)
        root_layout.setSpacing(12)

        title_label = QLabel(self._title, self)
        title_label.setObjectName("reportTitle")

        self._report_view = QTextEdit(self)
        self._report_view.setReadOnly(True)
        self._report_view.setLineWrapMode(QTextEdit.LineWrapMode.NoWrap)
        # Las tablas usan ancho fijo por columna.
        self._report_view.setFont(QFont("Consolas", 11))
        self._report_view.setPlainText(self._report)

        buttons_layout = QHBoxLayout()
        buttons_layout.setSpacing(10)

        copy_button = QPushButton("Copiar", self)
        back_button = QPushButton("Regresar", self)
        back_button.setObjectName("backButton")

        copy_button.clicked.connect(self._copy_to_clipboard)
        back_button.clicked.connect(self.close)

        buttons_layout.addWidget(copy_button)
        buttons_layout.addWidget(back_button)

        root_layout.addWidget(title_label)
        root_layout.addWidget(self._report_view)
        root_layout.addLayout(buttons_layout)

        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(22)
        shadow.setOffset(0, 4)
        shadow.setColor(QColor(0, 0, 0, 24))
        self.setGraphicsEffect(shadow)

    def _apply_styles(self) -> None:
        """Aplica estilos alineados al look general de la app."""
        self.setStyleSheet(
            """
            QDialog {
                background-color: #ffffff;
                border: 1px solid #dbe2ea;
                border-radius: 14px;
            }
            QLabel#reportTitle {
                color: #334155;
                font-family: "Segoe UI";
                font-size: 16px;
                font-weight: 600;
            }
            QTextEdit {
                background-color: #f8fafc;
                border: 1px solid #d1d5db;
                border-radius: 8px;
                color: #111827;
                padding: 10px;
            }
            QPushButton {
                background-color: #2563eb;
                border: none;
                border-radius: 10px;
                color: #ffffff;
                font-family: "Segoe UI";
                font-size: 13px;
                font-weight: 600;
                min-height: 36px;
                padding: 6px 12px;
            }
            QPushButton:hover {
                background-color: #1d4ed8;
            }
            QPushButton#backButton {
                background-color: #e5e7eb;
                color: #1f2937;
            }
            QPushButton#backButton:hover {
                background-color: #d1d5db;
            }
            """
        )

    def _copy_to_clipboard(self) -> None:
        """Copia el reporte al portapapeles."""
        QApplication.clipboard().setText(self._report)
