from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from tablut.core import Board, Move, Side

from .evaluation import INFINITY, WINNING_VALUE, Evaluator, get_evaluator

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    depth: int = 3
    prune: bool = True
    heuristic: str = "flat"


@dataclass
class SearchResult:
    move: Optional[Move]
    score: int
    nodes: int


class AlphaBetaSearch:
    """Fixed-depth minimax with alpha-beta pruning.

    Defenders maximise and attackers minimise. The search runs on a private
    copy of the board; every move applied during the search is undone before
    the next sibling is tried.
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        *,
        evaluator: Optional[Evaluator] = None,
    ) -> None:
        self.config = config or SearchConfig()
        if self.config.depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {self.config.depth}.")
        self.evaluator = evaluator or get_evaluator(self.config.heuristic)
        self._nodes = 0

    def select_move(self, board: Board) -> Optional[Move]:
        return self.search_root(board).move

    def search_root(self, board: Board) -> SearchResult:
        work = board.copy()
        self._nodes = 0
        depth = self.max_depth(work)
        maximizing = work.turn is Side.DEFENDERS
        score, move = self._search(work, depth, maximizing, -INFINITY, INFINITY, root=True)
        logger.debug(
            "%s searched %d nodes at depth %d: %s scored %d",
            work.turn.value,
            self._nodes,
            depth,
            move,
            score,
        )
        return SearchResult(move=move, score=score, nodes=self._nodes)

    def max_depth(self, board: Board) -> int:
        """Search depth for BOARD; constant for now."""
        return self.config.depth

    # ------------------------------------------------------------------
    def _search(
        self,
        board: Board,
        depth: int,
        maximizing: bool,
        alpha: int,
        beta: int,
        *,
        root: bool = False,
    ) -> Tuple[int, Optional[Move]]:
        self._nodes += 1
        if depth == 0 or board.winner is not None:
            return self.evaluator(board), None

        moves = board.legal_moves()
        if not moves:
            # The side to move loses when it cannot move.
            return (-WINNING_VALUE if maximizing else WINNING_VALUE), None

        best_move: Optional[Move] = None
        if maximizing:
            best = -INFINITY
            for move in moves:
                board.apply_move(move)
                try:
                    score, _ = self._search(board, depth - 1, False, alpha, beta)
                finally:
                    board.undo()
                if score > best:
                    best = score
                    if root:
                        best_move = move
                    alpha = max(alpha, score)
                    if self.config.prune and beta <= alpha:
                        break
        else:
            best = INFINITY
            for move in moves:
                board.apply_move(move)
                try:
                    score, _ = self._search(board, depth - 1, True, alpha, beta)
                finally:
                    board.undo()
                if score < best:
                    best = score
                    if root:
                        best_move = move
                    beta = min(beta, score)
                    if self.config.prune and beta <= alpha:
                        break
        return best, best_move


def select_move(board: Board, config: Optional[SearchConfig] = None) -> Optional[Move]:
    return AlphaBetaSearch(config).select_move(board)
