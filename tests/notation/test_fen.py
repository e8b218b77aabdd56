"""Tests for FEN import and export."""

import pytest

from chessrules.config import RulesConfig
from chessrules.core.enums import CastlingRights, Color, DrawReason, PieceType
from chessrules.core.piece import Piece
from chessrules.core.state import AwaitingPromotion, Checkmate, Draw, Normal
from chessrules.core.types import E1, E3, E6, E8
from chessrules.exceptions import ChessRulesError, InvalidPositionError, PositionImportError
from chessrules.game import Game
from chessrules.notation import STARTING_FEN, game_from_fen, game_to_fen


class TestFenParsing:
    def test_starting_position(self) -> None:
        game = game_from_fen(STARTING_FEN)
        assert game.turn == Color.WHITE
        assert game.castling == CastlingRights.ALL
        assert game.en_passant is None
        assert game.moves_since_capture == 0
        assert game.fullmove_number == 1
        assert game.board == Game.new().board

    def test_kings(self) -> None:
        game = game_from_fen(STARTING_FEN)
        assert game.board[E1] == Piece(PieceType.KING, Color.WHITE)
        assert game.board[E8] == Piece(PieceType.KING, Color.BLACK)

    def test_en_passant_square(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        assert game_from_fen(fen).en_passant == E3

    def test_black_en_passant_square(self) -> None:
        fen = "rnbqkbnr/pppp1ppp/8/4p3/8/8/PPPPPPPP/RNBQKBNR w KQkq e6 0 2"
        assert game_from_fen(fen).en_passant == E6

    def test_partial_castling(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w Kq - 0 1"
        assert game_from_fen(fen).castling == (
            CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_QUEENSIDE
        )

    def test_counters(self) -> None:
        game = game_from_fen("4k3/8/8/8/8/8/8/R3K3 b - - 17 42")
        assert game.turn == Color.BLACK
        assert game.moves_since_capture == 17
        assert game.fullmove_number == 42

    def test_config_is_attached(self) -> None:
        config = RulesConfig.rights_only_castling()
        assert game_from_fen(STARTING_FEN, config).config is config

    @pytest.mark.parametrize(
        "fen",
        [
            STARTING_FEN.replace(" ", "  "),
            STARTING_FEN.replace(" ", "\t"),
            STARTING_FEN + "\n",
            " " + STARTING_FEN,
        ],
    )
    def test_fields_are_separated_by_single_spaces(self, fen: str) -> None:
        with pytest.raises(PositionImportError):
            game_from_fen(fen)


class TestLoadClassifies:
    def test_checkmate(self) -> None:
        game = game_from_fen("8/4K3/8/2p5/8/8/1R6/R3k3 b - - 0 1")
        assert game.state == Checkmate(Color.BLACK)

    def test_stalemate(self) -> None:
        game = game_from_fen("k7/8/1Q6/8/8/8/8/K7 b - - 0 1")
        assert game.state == Draw(DrawReason.STALEMATE)

    def test_normal(self) -> None:
        assert game_from_fen(STARTING_FEN).state == Normal()

    def test_loading_twice_is_identical(self) -> None:
        fen = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"
        a, b = game_from_fen(fen), game_from_fen(fen)
        assert a.board == b.board
        assert (a.turn, a.castling, a.en_passant, a.state) == (
            b.turn,
            b.castling,
            b.en_passant,
            b.state,
        )


class TestFenErrors:
    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1 extra",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP w KQkq - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR/8 w KQkq - 0 1",
            "rnbqkbnr/pppppppp/9/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
            "rnbqkbnr/pppppppp/08/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
            "rnbqkbnr/ppppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
            "rnbqkbnr/ppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNX w KQkq - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR x KQkq - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkA - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KKq - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq z9 0 1",
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR w KQkq e3 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - -1 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - x 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 0",
            "8/8/8/8/8/8/8/K6² w - - 0 1",
            "k7/8/8/8/8/8/8/K٧ w - - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - +5 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 5_0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 ١",
        ],
    )
    def test_malformed_text_rejected(self, fen: str) -> None:
        with pytest.raises(PositionImportError):
            game_from_fen(fen)

    def test_error_hierarchy(self) -> None:
        with pytest.raises(ChessRulesError):
            game_from_fen("not a position")
        with pytest.raises(ValueError):
            game_from_fen("not a position")

    def test_underlying_error_is_chained(self) -> None:
        with pytest.raises(PositionImportError) as info:
            game_from_fen("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq z9 0 1")
        assert isinstance(info.value.__cause__, InvalidPositionError)


class TestFenExport:
    def test_starting_position(self) -> None:
        assert game_to_fen(Game.new()) == STARTING_FEN

    def test_after_double_push(self) -> None:
        game = Game.new()
        game.make_move("e2", "e4")
        assert (
            game_to_fen(game)
            == "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 1 1"
        )

    def test_no_castling_rights(self) -> None:
        fen = "4k3/8/8/8/8/8/8/4K3 w - - 3 12"
        assert game_to_fen(game_from_fen(fen)) == fen

    def test_rights_follow_moves(self) -> None:
        game = game_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        game.make_move("h1", "h2")
        assert game_to_fen(game).split()[2] == "Qkq"

    def test_pending_promotion_is_not_restored(self) -> None:
        game = game_from_fen("8/4P3/8/8/8/8/8/k3K3 w - - 0 1")
        game.make_move("e7", "e8")
        assert isinstance(game.state, AwaitingPromotion)
        reloaded = game_from_fen(game_to_fen(game))
        assert reloaded.board == game.board
        assert reloaded.state == Normal()
