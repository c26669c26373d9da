"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from puzzlechess.core.board import Board
from puzzlechess.core.enums import Color, GameState
from puzzlechess.core.piece import Piece
from puzzlechess.core.types import parse_square

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


PlaceFn = Callable[..., Board]


@pytest.fixture
def place() -> PlaceFn:
    """Build a custom board from ``"e1": "K"`` style letters.

    Uppercase letters are white pieces, lowercase black.
    """

    def _place(
        pieces: dict[str, str],
        turn: Color = Color.WHITE,
        game_state: GameState = GameState.ONGOING,
    ) -> Board:
        return Board.custom(
            {parse_square(name): Piece.from_char(ch) for name, ch in pieces.items()},
            turn,
            game_state,
        )

    return _place


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()
