"""Tests for pseudo-legal move generation."""

from puzzlechess.core.board import Board
from puzzlechess.core.enums import CastlingRights, Color
from puzzlechess.core.move_generator import MoveGenerator, pseudo_legal_moves
from puzzlechess.core.types import ALL_SQUARES, parse_square


def names(board: Board, square: str) -> set[str]:
    return {str(sq) for sq in board.pseudo_legal_moves(parse_square(square))}


class TestEmptySquare:
    def test_no_moves_from_empty_square(self) -> None:
        assert Board().pseudo_legal_moves(parse_square("e4")) == []

    def test_functional_shortcut_matches_method(self) -> None:
        board = Board()
        e2 = parse_square("e2")
        assert pseudo_legal_moves(board, e2) == MoveGenerator(board).pseudo_legal_moves(e2)


class TestPawnMoves:
    def test_initial_e2_pawn(self) -> None:
        assert names(Board(), "e2") == {"e3", "e4"}

    def test_initial_black_pawn(self) -> None:
        assert names(Board(), "d7") == {"d6", "d5"}

    def test_single_step_off_start_rank(self, place) -> None:
        board = place({"e3": "P"})
        assert names(board, "e3") == {"e4"}

    def test_blocked_forward(self, place) -> None:
        board = place({"e2": "P", "e3": "p"})
        assert names(board, "e2") == set()

    def test_double_step_blocked_on_second_square(self, place) -> None:
        board = place({"e2": "P", "e4": "n"})
        assert names(board, "e2") == {"e3"}

    def test_diagonal_captures_enemies_only(self, place) -> None:
        board = place({"d4": "P", "c5": "p", "e5": "N"})
        assert names(board, "d4") == {"d5", "c5"}

    def test_black_captures_downward(self, place) -> None:
        board = place({"d5": "p", "c4": "P", "e4": "P"}, turn=Color.BLACK)
        assert names(board, "d5") == {"d4", "c4", "e4"}

    def test_edge_file_capture(self, place) -> None:
        board = place({"a2": "P", "b3": "p"})
        assert names(board, "a2") == {"a3", "a4", "b3"}

    def test_pawn_on_last_rank_has_no_moves(self, place) -> None:
        board = place({"e8": "P"})
        assert names(board, "e8") == set()


class TestSlidingMoves:
    def test_lone_rook(self, place) -> None:
        board = place({"d4": "R"})
        assert names(board, "d4") == {
            "a4", "b4", "c4", "e4", "f4", "g4", "h4",
            "d1", "d2", "d3", "d5", "d6", "d7", "d8",
        }

    def test_rook_stops_before_friend_and_on_enemy(self, place) -> None:
        board = place({"d4": "R", "d6": "P", "f4": "p"})
        assert names(board, "d4") == {
            "a4", "b4", "c4", "e4", "f4",
            "d1", "d2", "d3", "d5",
        }

    def test_lone_bishop(self, place) -> None:
        board = place({"d4": "B"})
        assert names(board, "d4") == {
            "e5", "f6", "g7", "h8",
            "c5", "b6", "a7",
            "e3", "f2", "g1",
            "c3", "b2", "a1",
        }

    def test_lone_queen_count(self, place) -> None:
        board = place({"d4": "Q"})
        assert len(board.pseudo_legal_moves(parse_square("d4"))) == 27

    def test_corner_bishop(self, place) -> None:
        board = place({"a1": "B"})
        assert names(board, "a1") == {"b2", "c3", "d4", "e5", "f6", "g7", "h8"}

    def test_initial_position_sliders_are_boxed_in(self) -> None:
        board = Board()
        for square in ("a1", "c1", "d1", "f1", "h1", "a8", "d8"):
            assert names(board, square) == set()


class TestLeaperMoves:
    def test_knight_open_board(self, place) -> None:
        board = place({"d4": "N"})
        assert names(board, "d4") == {"c6", "e6", "b5", "f5", "b3", "f3", "c2", "e2"}

    def test_knight_in_corner(self, place) -> None:
        board = place({"h8": "n"})
        assert names(board, "h8") == {"g6", "f7"}

    def test_initial_knight(self) -> None:
        assert names(Board(), "g1") == {"f3", "h3"}

    def test_king_open_board(self, place) -> None:
        board = place({"e4": "K"})
        assert names(board, "e4") == {"d3", "d4", "d5", "e3", "e5", "f3", "f4", "f5"}

    def test_king_skips_friends_and_takes_enemies(self, place) -> None:
        board = place({"a1": "K", "a2": "P", "b2": "r"})
        assert names(board, "a1") == {"b1", "b2"}


class TestCastlingDestinations:
    def test_both_sides_offered(self, place) -> None:
        board = place({"e1": "K", "a1": "R", "h1": "R"})
        moves = names(board, "e1")
        assert {"g1", "c1"} <= moves

    def test_black_king_home(self, place) -> None:
        board = place({"e8": "k", "a8": "r", "h8": "r"}, turn=Color.BLACK)
        assert {"g8", "c8"} <= names(board, "e8")

    def test_blocked_path_not_offered(self, place) -> None:
        board = place({"e1": "K", "h1": "R", "f1": "N"})
        assert "g1" not in names(board, "e1")

    def test_queenside_b_file_must_be_empty(self, place) -> None:
        board = place({"e1": "K", "a1": "R", "b1": "N"})
        assert "c1" not in names(board, "e1")

    def test_right_cleared_not_offered(self, place) -> None:
        board = place({"e1": "K", "h1": "R", "a1": "R"})
        board.castling &= ~CastlingRights.WHITE_KINGSIDE
        moves = names(board, "e1")
        assert "g1" not in moves
        assert "c1" in moves

    def test_king_off_home_square_not_offered(self, place) -> None:
        board = place({"d1": "K", "h1": "R"})
        assert "e1" in names(board, "d1")
        assert "g1" not in names(board, "d1")

    def test_attacked_transit_still_offered(self, place) -> None:
        # Check safety belongs to the castling layer, not the generator.
        board = place({"e1": "K", "h1": "R", "f8": "r"})
        assert "g1" in names(board, "e1")


class TestInitialPositionTotals:
    def test_twenty_white_moves(self) -> None:
        board = Board()
        total = sum(
            len(board.pseudo_legal_moves(sq))
            for sq, piece in board
            if piece.color == Color.WHITE
        )
        assert total == 20

    def test_generator_never_leaves_board(self) -> None:
        board = Board()
        for sq in ALL_SQUARES:
            for to_sq in board.pseudo_legal_moves(sq):
                assert 1 <= to_sq.file <= 8 and 1 <= to_sq.rank <= 8
