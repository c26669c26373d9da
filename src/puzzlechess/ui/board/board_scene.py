"""BoardScene - QGraphicsScene that draws the board and its piece glyphs."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from puzzlechess.core.enums import Color, PieceType
from puzzlechess.core.errors import MoveError
from puzzlechess.core.types import ALL_SQUARES, Square
from puzzlechess.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from puzzlechess.core.board import Board

_LOGGER = logging.getLogger(__name__)

PromotionProvider = Callable[[Color], PieceType | None]


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece glyphs.

    The scene plays moves on the board it was given through
    :meth:`Board.try_move`; the board stays owned by the caller.

    Signals:
        move_made(Square, Square): A move was committed.
        move_rejected(str): The engine refused a move; carries its message.
    """

    move_made = pyqtSignal(object, object)
    move_rejected = pyqtSignal(str)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board: Board | None = None
        self._flipped = False
        self._glyph_scale = 0.7

        # Interaction state
        self._selected_sq: Square | None = None
        self._destinations: list[Square] = []
        self._interactive = True
        self._show_coordinates = True
        self._show_destinations = True
        self._promotion_provider: PromotionProvider | None = None

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._destination_items: list[QGraphicsRectItem] = []
        self._check_items: list[QGraphicsRectItem] = []
        self._glyph_items: dict[Square, QGraphicsSimpleTextItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_board(self, board: Board) -> None:
        """Display *board* (full redraw of glyphs)."""
        self._board = board
        self.refresh()

    @property
    def board(self) -> Board | None:
        return self._board

    def refresh(self) -> None:
        """Redraw glyphs and the check marker from the current board."""
        self._clear_selection()
        self._sync_glyphs()
        self.highlight_check()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable piece interaction (locked once the game is over)."""
        self._interactive = interactive

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._draw_board()
        if self._board is not None:
            self.refresh()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        if self._board is not None:
            self.refresh()

    def set_glyph_scale(self, scale: float) -> None:
        self._glyph_scale = scale
        self._sync_glyphs()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_destinations(self, visible: bool) -> None:
        """Show or hide destination highlights of the selected piece."""
        self._show_destinations = visible
        if not visible:
            self._clear_items(self._destination_items)

    def set_promotion_provider(self, provider: PromotionProvider | None) -> None:
        """Callback asked for the promotion piece of a legal promoting move.

        Without a provider pawns promote to a queen. A provider returning
        ``None`` cancels the move.
        """
        self._promotion_provider = provider

    def highlight_check(self) -> None:
        """Highlight the side-to-move's king when it is in check."""
        self._clear_items(self._check_items)
        if self._board is None:
            return
        color = self._board.turn
        king_sq = self._board.king_square(color)
        if king_sq is not None and self._board.is_in_check(color):
            rect = self._make_highlight(king_sq, self._theme.highlight_check)
            rect.setZValue(0.6)
            self._check_items.append(rect)

    def select_square(self, sq: Square) -> None:
        """Select *sq* and highlight the pseudo-legal destinations of its piece."""
        self._clear_selection()
        self._selected_sq = sq
        self._highlight_items.append(self._make_highlight(sq, self._theme.highlight_from))

        if self._board is None:
            return
        self._destinations = self._board.pseudo_legal_moves(sq)
        if self._show_destinations:
            for to_sq in self._destinations:
                dot = self._make_highlight(to_sq, self._theme.highlight_to)
                self._destination_items.append(dot)

    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Play the move on the board; ``True`` if the engine accepted it."""
        if self._board is None:
            return False

        promotion: PieceType | None = None
        provider = self._promotion_provider
        piece = self._board[from_sq]
        if provider is not None and piece is not None and self._is_promotion(from_sq, to_sq):
            promotion = provider(piece.color)
            if promotion is None:
                _LOGGER.debug("Promotion on %s cancelled", to_sq)
                self.refresh()
                return False

        try:
            self._board.try_move(from_sq, to_sq, promotion)
        except MoveError as exc:
            _LOGGER.debug("Viewer move %s%s rejected: %s", from_sq, to_sq, exc)
            # A rejected promotion kind still moves the pawn.
            self.refresh()
            self.move_rejected.emit(str(exc))
            return False

        self.refresh()
        self.move_made.emit(from_sq, to_sq)
        return True

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Helvetica Neue", max(9, t // 8))

        for sq in ALL_SQUARES:
            vf, vr = self._visual_coords(sq)
            is_dark = (sq.file + sq.rank) % 2 == 0
            color = self._theme.dark_square if is_dark else self._theme.light_square
            rect = QGraphicsRectItem(vf * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            coord_color = self._theme.coord_light if is_dark else self._theme.coord_dark
            # Rank numbers (left edge)
            if sq.file == 1:
                self._add_coord(str(sq.rank), font, coord_color, vf * t + 2, vr * t + 1)
            # File letters (bottom edge)
            if sq.rank == 1:
                self._add_coord(sq.file_char, font, coord_color, vf * t + t - 12, vr * t + t - 16)

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(self, label: str, font: QFont, color: QColor, x: float, y: float) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Glyph synchronisation ────────────────────────────────────────────

    def _sync_glyphs(self) -> None:
        """Re-create all glyph items from the board's glyph grid."""
        for item in self._glyph_items.values():
            self.removeItem(item)
        self._glyph_items.clear()

        if self._board is None:
            return

        t = self.TILE
        font = QFont()
        font.setPointSizeF(t * self._glyph_scale)
        for row_idx, row in enumerate(self._board.glyph_grid()):
            rank = 8 - row_idx
            for file_idx, glyph in enumerate(row):
                if glyph is None:
                    continue
                sq = Square(file_idx + 1, rank)
                item = QGraphicsSimpleTextItem(glyph)
                item.setFont(font)
                item.setBrush(QBrush(self._theme.glyph))
                bounds = item.boundingRect()
                vf, vr = self._visual_coords(sq)
                item.setPos(
                    vf * t + (t - bounds.width()) / 2,
                    vr * t + (t - bounds.height()) / 2,
                )
                item.setZValue(1)
                self.addItem(item)
                self._glyph_items[sq] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or self._board is None or event is None:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is None:
            self._clear_selection()
            return super().mousePressEvent(event)

        # Clicking a highlighted destination → try the move
        if self._selected_sq is not None and sq in self._destinations:
            from_sq = self._selected_sq
            self._clear_selection()
            self.submit_move(from_sq, sq)
            return

        piece = self._board[sq]
        if piece is not None and piece.color == self._board.turn:
            self.select_square(sq)
        else:
            self._clear_selection()

        super().mousePressEvent(event)

    # ── Selection / highlights ───────────────────────────────────────────

    def _clear_selection(self) -> None:
        self._selected_sq = None
        self._destinations = []
        self._clear_items(self._highlight_items)
        self._clear_items(self._destination_items)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    def _is_promotion(self, from_sq: Square, to_sq: Square) -> bool:
        """Legal pawn move of the side to move onto the last rank."""
        if self._board is None:
            return False
        piece = self._board[from_sq]
        if piece is None or piece.kind != PieceType.PAWN or piece.color != self._board.turn:
            return False
        if to_sq.rank not in (1, 8):
            return False
        return to_sq in self._board.legal_moves(from_sq)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, sq: Square) -> tuple[int, int]:
        """Convert a board square to visual column/row."""
        if self._flipped:
            return 8 - sq.file, sq.rank - 1
        return sq.file - 1, 8 - sq.rank

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        if self._flipped:
            return Square(8 - col, row + 1)
        return Square(col + 1, 8 - row)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vf, vr = self._visual_coords(sq)
        rect = QGraphicsRectItem(vf * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
