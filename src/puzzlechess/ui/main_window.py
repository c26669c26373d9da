"""MainWindow - top-level viewer window around a single Board."""

from __future__ import annotations

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar

from puzzlechess.core.board import Board
from puzzlechess.core.enums import Color, PieceType
from puzzlechess.core.types import Square
from puzzlechess.ui.board.board_view import BoardView
from puzzlechess.ui.dialogs.promotion_dialog import PromotionDialog
from puzzlechess.ui.settings import ViewerSettings, apply_settings


def status_text(board: Board) -> str:
    """One-line summary of whose move it is and how the game stands."""
    loser = board.game_state.checkmated
    if loser is not None:
        return f"Checkmate: {loser.opposite.name.capitalize()} wins"
    side = board.turn.name.capitalize()
    if board.is_in_check(board.turn):
        return f"{side} to move (check)"
    return f"{side} to move"


class MainWindow(QMainWindow):
    """Main application window: board view, status bar and a game menu."""

    def __init__(
        self,
        board: Board | None = None,
        settings: ViewerSettings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Puzzle Chess")
        self.setMinimumSize(480, 520)
        self.resize(640, 680)

        self._board = board if board is not None else Board()
        self._settings = settings if settings is not None else ViewerSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._apply_settings()

        self._board_view.board_scene.set_promotion_provider(self._ask_promotion)
        self._board_view.board_scene.set_board(self._board)
        self._update_status()

    # ── Setup ────────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._board_view = BoardView(self)
        self.setCentralWidget(self._board_view)

        self._status_label = QLabel()
        status_bar = QStatusBar(self)
        status_bar.addWidget(self._status_label)
        self.setStatusBar(status_bar)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        game_menu = menu_bar.addMenu("&Game")
        assert game_menu is not None
        self._new_game_action = QAction("&New Game", self)
        self._new_game_action.setShortcut("Ctrl+N")
        game_menu.addAction(self._new_game_action)

        self._flip_action = QAction("&Flip Board", self)
        self._flip_action.setShortcut("Ctrl+F")
        game_menu.addAction(self._flip_action)

        view_menu = menu_bar.addMenu("&View")
        assert view_menu is not None
        self._coords_action = QAction("Show &Coordinates", self)
        self._coords_action.setCheckable(True)
        self._coords_action.setChecked(self._settings.show_coordinates)
        view_menu.addAction(self._coords_action)

        self._destinations_action = QAction("Show &Destinations", self)
        self._destinations_action.setCheckable(True)
        self._destinations_action.setChecked(self._settings.show_destinations)
        view_menu.addAction(self._destinations_action)

    def _connect_signals(self) -> None:
        self._new_game_action.triggered.connect(self.new_game)
        self._flip_action.triggered.connect(self._on_flip)
        self._coords_action.toggled.connect(self._on_coords_toggled)
        self._destinations_action.toggled.connect(self._on_destinations_toggled)
        self._board_view.move_made.connect(self._on_move_made)
        self._board_view.move_rejected.connect(self._on_move_rejected)

    def _apply_settings(self) -> None:
        apply_settings(self._board_view.board_scene, self._settings)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def status_message(self) -> str:
        return self._status_label.text()

    def new_game(self) -> None:
        """Reset the board to the initial position."""
        self._board.reset()
        self._board_view.board_scene.refresh()
        self._update_status()

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_flip(self) -> None:
        scene = self._board_view.board_scene
        scene.set_flipped(not scene.is_flipped())

    def _on_coords_toggled(self, checked: bool) -> None:
        self._settings.show_coordinates = checked
        self._apply_settings()

    def _on_destinations_toggled(self, checked: bool) -> None:
        self._settings.show_destinations = checked
        self._apply_settings()

    def _on_move_made(self, _from_sq: Square, _to_sq: Square) -> None:
        self._update_status()

    def _ask_promotion(self, color: Color) -> PieceType | None:
        return PromotionDialog.ask(color, self)

    def _on_move_rejected(self, message: str) -> None:
        self._status_label.setText(f"{status_text(self._board)} | {message}")

    def _update_status(self) -> None:
        self._status_label.setText(status_text(self._board))
        # No more clicks once the game has ended.
        self._board_view.board_scene.set_interactive(not self._board.game_state.is_over)
