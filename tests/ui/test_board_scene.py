"""Tests for BoardScene rendering helpers and move submission."""

from __future__ import annotations

from puzzlechess.core.board import Board
from puzzlechess.core.enums import Color, GameState, PieceType
from puzzlechess.core.piece import Piece
from puzzlechess.core.types import parse_square
from puzzlechess.ui.board.board_scene import BoardScene
from puzzlechess.ui.styles.theme import BoardTheme


def _scene_with(board: Board) -> BoardScene:
    scene = BoardScene()
    scene.set_board(board)
    return scene


def test_pos_to_square_respects_orientation() -> None:
    scene = BoardScene()
    scene.set_flipped(False)
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == parse_square("a8")

    scene.set_flipped(True)
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == parse_square("h1")


def test_draws_sixty_four_squares() -> None:
    scene = BoardScene()
    assert len(scene._square_items) == 64
    a1 = scene._square_items[parse_square("a1")]
    assert a1.brush().color() == BoardTheme.default().dark_square


def test_set_show_coordinates_toggles_all_labels_visibility() -> None:
    scene = BoardScene()
    assert len(scene._coord_items) == 16

    scene.set_show_coordinates(False)
    assert all(not item.isVisible() for item in scene._coord_items)

    scene.set_show_coordinates(True)
    assert all(item.isVisible() for item in scene._coord_items)


def test_glyphs_follow_board() -> None:
    scene = _scene_with(Board())
    assert len(scene._glyph_items) == 32
    assert scene._glyph_items[parse_square("e1")].text() == "♔"


def test_select_square_highlights_destinations() -> None:
    scene = _scene_with(Board())
    scene.select_square(parse_square("e2"))
    assert len(scene._destination_items) == 2

    scene.set_show_destinations(False)
    assert scene._destination_items == []


def test_check_marker_tracks_side_to_move() -> None:
    board = Board.custom(
        {
            parse_square("a1"): Piece(Color.WHITE, PieceType.KING),
            parse_square("a3"): Piece(Color.BLACK, PieceType.ROOK),
        }
    )
    scene = _scene_with(board)
    assert len(scene._check_items) == 1

    board.turn = Color.BLACK
    scene.refresh()
    assert scene._check_items == []


def test_submit_move_emits_move_made() -> None:
    board = Board()
    scene = _scene_with(board)
    made: list[tuple[object, object]] = []
    scene.move_made.connect(lambda a, b: made.append((a, b)))

    assert scene.submit_move(parse_square("e2"), parse_square("e4"))

    assert made == [(parse_square("e2"), parse_square("e4"))]
    assert board.turn == Color.BLACK
    assert parse_square("e4") in scene._glyph_items
    assert parse_square("e2") not in scene._glyph_items


def test_submit_move_rejection_emits_message() -> None:
    board = Board()
    scene = _scene_with(board)
    rejected: list[str] = []
    scene.move_rejected.connect(rejected.append)

    assert not scene.submit_move(parse_square("e7"), parse_square("e5"))

    assert len(rejected) == 1
    assert "turn" in rejected[0]
    assert board == Board()


def test_submit_move_without_board_is_ignored() -> None:
    scene = BoardScene()
    assert not scene.submit_move(parse_square("e2"), parse_square("e4"))


def test_promotion_provider_is_consulted() -> None:
    board = Board.custom(
        {
            parse_square("a7"): Piece(Color.WHITE, PieceType.PAWN),
            parse_square("e1"): Piece(Color.WHITE, PieceType.KING),
            parse_square("h5"): Piece(Color.BLACK, PieceType.KING),
        }
    )
    scene = _scene_with(board)
    asked: list[Color] = []

    def provider(color: Color) -> PieceType:
        asked.append(color)
        return PieceType.KNIGHT

    scene.set_promotion_provider(provider)
    assert scene.submit_move(parse_square("a7"), parse_square("a8"))

    assert asked == [Color.WHITE]
    assert board[parse_square("a8")] == Piece(Color.WHITE, PieceType.KNIGHT)


def test_checkmate_reaches_board_through_scene() -> None:
    board = Board()
    scene = _scene_with(board)
    for move in ("f2f3", "e7e5", "g2g4", "d8h4"):
        assert scene.submit_move(parse_square(move[:2]), parse_square(move[2:]))
    assert board.game_state == GameState.WHITE_CHECKMATED
    assert len(scene._check_items) == 1
