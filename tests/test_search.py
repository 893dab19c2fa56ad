import pytest

from tablut.core import Board, Move, Piece, Side, sq
from tablut.search import (
    WINNING_VALUE,
    AlphaBetaSearch,
    SearchConfig,
    flat_evaluate,
    material_evaluate,
    select_move,
)


def empty_board(turn: Side = Side.ATTACKERS) -> Board:
    board = Board()
    board.clear(turn)
    return board


def sparse_board() -> Board:
    board = empty_board()
    board.put(Piece.KING, sq(3, 3))
    board.put(Piece.DEFENDER, sq(5, 2))
    board.put(Piece.DEFENDER, sq(2, 5))
    board.put(Piece.ATTACKER, sq(6, 6))
    board.put(Piece.ATTACKER, sq(1, 1))
    board.put(Piece.ATTACKER, sq(7, 3))
    return board


def tiny_board() -> Board:
    board = empty_board()
    board.put(Piece.KING, sq(3, 2))
    board.put(Piece.ATTACKER, sq(6, 5))
    return board


def test_flat_evaluation():
    assert flat_evaluate(Board()) == -WINNING_VALUE  # sixteen attackers against nine
    board = tiny_board()
    assert flat_evaluate(board) == 0


def test_material_evaluation_is_neutral_at_start():
    score = material_evaluate(Board())
    assert abs(score) < WINNING_VALUE
    assert score < 0  # king boxed in the centre


def test_defenders_take_the_edge_when_they_can():
    board = empty_board(Side.DEFENDERS)
    board.put(Piece.KING, sq(2, 2))
    board.put(Piece.ATTACKER, sq(6, 6))

    result = AlphaBetaSearch(SearchConfig(depth=1)).search_root(board)

    assert result.score == WINNING_VALUE
    assert result.move.origin == sq(2, 2)
    assert result.move.destination.is_edge


def test_attackers_capture_the_king_when_they_can():
    board = empty_board()
    board.put(Piece.KING, sq(2, 6))
    board.put(Piece.ATTACKER, sq(1, 6))
    board.put(Piece.ATTACKER, sq(3, 8))

    move = select_move(board, SearchConfig(depth=1, heuristic="material"))

    assert move == Move(sq(3, 8), sq(3, 6))
    board.apply_move(move)
    assert board.winner is Side.ATTACKERS


def test_search_leaves_the_board_untouched():
    board = sparse_board()
    signature = board.signature()
    AlphaBetaSearch(SearchConfig(depth=2)).search_root(board)
    assert board.signature() == signature
    assert board.move_count == 0


def test_decided_position_returns_sentinel_without_move():
    board = Board()
    for text in ("a4-b4", "e7-d7", "b4-a4", "d7-e7"):
        board.apply_move(Move.parse(text))
    result = AlphaBetaSearch(SearchConfig(depth=2)).search_root(board)
    assert result.move is None
    assert result.score == -WINNING_VALUE


def test_side_without_moves_scores_as_lost():
    board = empty_board(Side.DEFENDERS)
    board.put(Piece.DEFENDER, sq(0, 0))
    board.put(Piece.ATTACKER, sq(1, 0))
    board.put(Piece.ATTACKER, sq(0, 1))
    result = AlphaBetaSearch(SearchConfig(depth=2)).search_root(board)
    assert result.move is None
    assert result.score == -WINNING_VALUE


@pytest.mark.parametrize(
    "factory, depth, heuristic",
    [
        (sparse_board, 1, "flat"),
        (sparse_board, 2, "flat"),
        (sparse_board, 2, "material"),
        (tiny_board, 3, "material"),
    ],
)
def test_pruning_matches_full_minimax(factory, depth, heuristic):
    pruned = AlphaBetaSearch(SearchConfig(depth=depth, heuristic=heuristic)).search_root(factory())
    full = AlphaBetaSearch(SearchConfig(depth=depth, heuristic=heuristic, prune=False)).search_root(factory())

    assert pruned.move == full.move
    assert pruned.score == full.score
    assert pruned.nodes <= full.nodes


def test_invalid_search_configs():
    with pytest.raises(ValueError):
        AlphaBetaSearch(SearchConfig(depth=0))
    with pytest.raises(ValueError):
        AlphaBetaSearch(SearchConfig(heuristic="learned"))
