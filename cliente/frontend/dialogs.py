"""Helpers de dialogos para frontend."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtWidgets import QInputDialog, QMessageBox, QWidget


def show_info(parent: QWidget | None, title: str, message: str) -> None:
    """Muestra un dialogo informativo."""
    QMessageBox.information(parent, title, message)


def show_error(parent: QWidget | None, title: str, message: str) -> None:
    """Muestra un dialogo de error."""
    QMessageBox.critical(parent, title, message)


def ask_text(
    parent: QWidget | None,
    title: str,
    label: str,
    default: str = "",
) -> str | None:
    """Pide un texto al usuario. Retorna None si cancela."""
    text, accepted = QInputDialog.getText(parent, title, label, text=default)
    if not accepted:
        return None
    return text


def ask_choice(
    parent: QWidget | None,
    title: str,
    label: str,
    options: Sequence[str],
) -> str | None:
    """Pide elegir una opcion de la lista. Retorna None si cancela."""
    choice, accepted = QInputDialog.getItem(parent, title, label, list(options), 0, False)
    if not accepted:
        return None
    return choice
