"""Promotion dialog - lets the user pick the promotion piece."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from puzzlechess.core.enums import Color, PieceType
from puzzlechess.core.move_executor import PROMOTION_TYPES
from puzzlechess.core.piece import Piece


class PromotionDialog(QDialog):
    """Modal dialog with one glyph button per promotion piece."""

    def __init__(self, color: Color, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setWindowTitle("Promotion")
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )

        self._selected: PieceType = PieceType.QUEEN
        self._buttons: dict[PieceType, QPushButton] = {}

        layout = QVBoxLayout(self)
        label = QLabel("Promote pawn to:")
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(label)

        btn_row = QHBoxLayout()
        glyph_font = QFont()
        glyph_font.setPointSize(32)
        for kind in PROMOTION_TYPES:
            btn = QPushButton(Piece(color, kind).symbol)
            btn.setFont(glyph_font)
            btn.setFixedSize(68, 68)
            btn.setToolTip(kind.name.capitalize())
            btn.clicked.connect(lambda _checked, k=kind: self._choose(k))
            btn_row.addWidget(btn)
            self._buttons[kind] = btn

        layout.addLayout(btn_row)

    def _choose(self, kind: PieceType) -> None:
        self._selected = kind
        self.accept()

    @property
    def selected(self) -> PieceType:
        return self._selected

    @staticmethod
    def ask(color: Color, parent: QWidget | None = None) -> PieceType | None:
        """Show the dialog and return the chosen piece type, or ``None`` on cancel."""
        dlg = PromotionDialog(color, parent)
        if dlg.exec() == QDialog.DialogCode.Accepted:
            return dlg.selected
        return None
