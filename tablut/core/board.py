from __future__ import annotations

from collections import Counter
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .errors import IllegalMoveError, MoveLimitError
from .square import (
    BOARD_SIZE,
    COLUMN_LABELS,
    DIRECTIONS,
    ROOK_MOVES,
    ROOK_SQUARES,
    SQUARE_LIST,
    Move,
    Square,
    sq,
)
from .state import BoardArray, CaptureRecord, HistoryEntry, Piece, Side, side_of

THRONE = sq(4, 4)
NTHRONE = sq(4, 5)
ETHRONE = sq(5, 4)
STHRONE = sq(4, 3)
WTHRONE = sq(3, 4)
THRONE_NEIGHBOURS: Tuple[Square, ...] = (NTHRONE, ETHRONE, STHRONE, WTHRONE)

INITIAL_ATTACKERS: Tuple[Square, ...] = (
    sq(0, 3), sq(0, 4), sq(0, 5), sq(1, 4),
    sq(8, 3), sq(8, 4), sq(8, 5), sq(7, 4),
    sq(3, 0), sq(4, 0), sq(5, 0), sq(4, 1),
    sq(3, 8), sq(4, 8), sq(5, 8), sq(4, 7),
)
INITIAL_DEFENDERS: Tuple[Square, ...] = (
    NTHRONE, ETHRONE, STHRONE, WTHRONE,
    sq(4, 6), sq(4, 2), sq(2, 4), sq(6, 4),
)


class Board:
    """Tablut position with exact undo.

    The grid is indexed ``[row, col]``. Every applied move pushes one
    :class:`HistoryEntry`; ``undo`` pops it, so ``len(history) == move_count``
    always holds.
    """

    def __init__(self) -> None:
        self.grid: BoardArray = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        self._history: List[HistoryEntry] = []
        self._seen: Counter = Counter()
        self._turn = Side.ATTACKERS
        self._winner: Optional[Side] = None
        self._repeated = False
        self._move_limit: Optional[int] = None
        self.init()

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------
    def init(self) -> None:
        """Reset to the initial position with attackers to move."""
        self.clear()
        for square in INITIAL_ATTACKERS:
            self.put(Piece.ATTACKER, square)
        for square in INITIAL_DEFENDERS:
            self.put(Piece.DEFENDER, square)
        self.put(Piece.KING, THRONE)

    def clear(self, turn: Side = Side.ATTACKERS) -> None:
        """Empty the grid and forget all history."""
        self.grid[:, :] = Piece.EMPTY
        self._turn = turn
        self._winner = None
        self._repeated = False
        self.clear_undo()

    def clear_undo(self) -> None:
        """Drop the undo log without touching the position or win status."""
        self._history = []
        self._seen = Counter()

    def put(self, piece: Piece, square: Square) -> None:
        self.grid[square.row, square.col] = piece

    def copy(self) -> "Board":
        other = Board.__new__(Board)
        other.grid = self.grid.copy()
        other._history = list(self._history)
        other._seen = Counter(self._seen)
        other._turn = self._turn
        other._winner = self._winner
        other._repeated = self._repeated
        other._move_limit = self._move_limit
        return other

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def turn(self) -> Side:
        return self._turn

    @property
    def winner(self) -> Optional[Side]:
        return self._winner

    @property
    def repeated(self) -> bool:
        return self._repeated

    @property
    def move_count(self) -> int:
        return len(self._history)

    @property
    def move_limit(self) -> Optional[int]:
        return self._move_limit

    @property
    def history(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._history)

    def set_move_limit(self, limit: int) -> None:
        """Allow LIMIT moves per side; the current move count must be below it."""
        if limit < 0:
            raise MoveLimitError(f"Move limit must be non-negative, got {limit}.")
        if self.move_count >= 2 * limit:
            raise MoveLimitError(
                f"Move limit {limit} already reached ({self.move_count} moves played)."
            )
        self._move_limit = limit

    def outcome(self) -> Optional[Side]:
        """Winner, counting a side to move with no legal move as already lost."""
        if self._winner is None and not self.has_move(self._turn):
            return self._turn.opponent()
        return self._winner

    def limit_reached(self) -> bool:
        return self._move_limit is not None and self.move_count >= 2 * self._move_limit

    def get(self, square: Square) -> Piece:
        return Piece(int(self.grid[square.row, square.col]))

    def king_position(self) -> Optional[Square]:
        rows, cols = np.nonzero(self.grid == int(Piece.KING))
        if len(rows) == 0:
            return None
        return sq(int(cols[0]), int(rows[0]))

    def piece_locations(self, side: Side) -> Iterator[Square]:
        if side is Side.ATTACKERS:
            mask = self.grid == int(Piece.ATTACKER)
        else:
            mask = self.grid >= int(Piece.DEFENDER)
        # np.nonzero walks row-major, i.e. in square-index order.
        for row, col in zip(*np.nonzero(mask)):
            yield SQUARE_LIST[int(col) + int(row) * BOARD_SIZE]

    def count_side(self, side: Side) -> int:
        if side is Side.ATTACKERS:
            return int(np.count_nonzero(self.grid == int(Piece.ATTACKER)))
        return int(np.count_nonzero(self.grid >= int(Piece.DEFENDER)))

    def signature(self) -> bytes:
        """Side to move followed by the grid in square-index order."""
        return self._turn.symbol.encode("ascii") + self.grid.tobytes()

    # ------------------------------------------------------------------
    # Legality
    # ------------------------------------------------------------------
    def is_legal_origin(self, square: Square) -> bool:
        return side_of(self.grid[square.row, square.col]) is self._turn

    def is_unblocked(self, origin: Square, destination: Square) -> bool:
        """True iff ORIGIN-DESTINATION is a rook move over empty squares."""
        if self.get(origin) == Piece.EMPTY or not origin.is_rook_move(destination):
            return False
        for square in origin.squares_between(destination) + (destination,):
            if self.grid[square.row, square.col] != Piece.EMPTY:
                return False
        return True

    def is_legal(self, origin: Square, destination: Square) -> bool:
        if self._winner is not None:
            return False
        if origin == destination or not self.is_legal_origin(origin):
            return False
        if destination == THRONE and self.get(origin) != Piece.KING:
            return False
        return self.is_unblocked(origin, destination)

    def is_legal_move(self, move: Move) -> bool:
        return self.is_legal(move.origin, move.destination)

    def legal_moves(self, side: Optional[Side] = None) -> List[Move]:
        """All legal moves for SIDE (default: side to move), ignoring whose turn it is."""
        return list(self._iter_legal_moves(self._turn if side is None else side))

    def has_move(self, side: Side) -> bool:
        return next(self._iter_legal_moves(side), None) is not None

    def _iter_legal_moves(self, side: Side) -> Iterator[Move]:
        if self._winner is not None:
            return
        for origin in self.piece_locations(side):
            is_king_piece = self.grid[origin.row, origin.col] == Piece.KING
            for direction in range(len(DIRECTIONS)):
                ray = ROOK_SQUARES[origin.index][direction]
                moves = ROOK_MOVES[origin.index][direction]
                for target, move in zip(ray, moves):
                    if self.grid[target.row, target.col] != Piece.EMPTY:
                        break
                    # Non-king pieces may cross the empty throne but not stop on it.
                    if target == THRONE and not is_king_piece:
                        continue
                    yield move

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------
    def apply_move(self, move: Move) -> None:
        """Play MOVE for the side to move.

        If that side has no legal move at all, the opponent is declared the
        winner and nothing is moved. No move is legal once a winner is set.
        """
        if self._winner is None and not self.has_move(self._turn):
            self._winner = self._turn.opponent()
            return
        if not self.is_legal_move(move):
            raise IllegalMoveError(move)

        entry_signature = self.signature()
        prior_winner, prior_repeated = self._winner, self._repeated
        mover = self._turn
        origin, destination = move.origin, move.destination

        self.grid[destination.row, destination.col] = self.grid[origin.row, origin.col]
        self.grid[origin.row, origin.col] = Piece.EMPTY

        captures: List[CaptureRecord] = []
        for direction in range(len(DIRECTIONS)):
            flank = destination.neighbour(direction, 2)
            if flank is None:
                continue
            if side_of(self.grid[flank.row, flank.col]) is mover or flank == THRONE:
                record = self._capture(destination, flank)
                if record is not None:
                    captures.append(record)

        king = self.king_position()
        if king is not None and king.is_edge:
            self._winner = Side.DEFENDERS

        self._history.append(
            HistoryEntry(
                move=move,
                prior_signature=entry_signature,
                captures=tuple(captures),
                prior_winner=prior_winner,
                prior_repeated=prior_repeated,
            )
        )
        self._seen[entry_signature] += 1
        self._turn = mover.opponent()

        if self._seen[self.signature()] > 0:
            self._repeated = True
            self._winner = self._turn

    def undo(self) -> None:
        """Take back the last move. Has no effect on an empty history."""
        if not self._history:
            return
        entry = self._history.pop()
        self._seen[entry.prior_signature] -= 1
        if self._seen[entry.prior_signature] <= 0:
            del self._seen[entry.prior_signature]

        for record in reversed(entry.captures):
            self.put(record.piece, record.square)
        origin, destination = entry.move.origin, entry.move.destination
        self.grid[origin.row, origin.col] = self.grid[destination.row, destination.col]
        self.grid[destination.row, destination.col] = Piece.EMPTY

        self._turn = self._turn.opponent()
        self._winner = entry.prior_winner
        self._repeated = entry.prior_repeated

    # ------------------------------------------------------------------
    # Captures
    # ------------------------------------------------------------------
    def _capture(self, sq0: Square, sq2: Square) -> Optional[CaptureRecord]:
        """Remove the piece between SQ0 and SQ2 if it is captured."""
        sq1 = sq0.between(sq2)
        assert sq1 is not None
        victim = self.get(sq1)
        if victim == Piece.KING:
            if not self._can_capture_king(sq0, sq2):
                return None
            self._winner = Side.ATTACKERS
        elif not self._can_capture(sq0, sq2):
            return None
        self.put(Piece.EMPTY, sq1)
        return CaptureRecord(square=sq1, piece=victim)

    def _can_capture(self, sq0: Square, sq2: Square) -> bool:
        """Ordinary custodian capture of the piece between SQ0 and SQ2."""
        sq1 = sq0.between(sq2)
        assert sq1 is not None
        mover = side_of(self.grid[sq0.row, sq0.col])
        victim = side_of(self.grid[sq1.row, sq1.col])
        if victim is None or victim is mover:
            return False
        if sq2 == THRONE:
            return self._throne_hostile()
        return side_of(self.grid[sq2.row, sq2.col]) is mover

    def _can_capture_king(self, sq0: Square, sq2: Square) -> bool:
        """King capture: four-sided on or beside the throne, else ordinary."""
        king = sq0.between(sq2)
        assert king is not None
        if king == THRONE or king in THRONE_NEIGHBOURS:
            for direction in range(len(DIRECTIONS)):
                neighbour = king.neighbour(direction)
                assert neighbour is not None
                if neighbour != THRONE and self.get(neighbour) != Piece.ATTACKER:
                    return False
        return self._can_capture(sq0, sq2)

    def _throne_hostile(self) -> bool:
        if self.get(THRONE) != Piece.KING:
            return True
        attackers = sum(1 for square in THRONE_NEIGHBOURS if self.get(square) == Piece.ATTACKER)
        return attackers >= 3

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self, coordinates: bool = True) -> str:
        lines = []
        for row in range(BOARD_SIZE - 1, -1, -1):
            label = f"{row + 1:2d}" if coordinates else "  "
            cells = " ".join(Piece(int(self.grid[row, col])).symbol for col in range(BOARD_SIZE))
            lines.append(f"{label} {cells}")
        if coordinates:
            lines.append("   " + " ".join(COLUMN_LABELS))
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render(coordinates=True)

    def __repr__(self) -> str:
        winner = self._winner.value if self._winner else None
        return f"Board(turn={self._turn.value}, moves={self.move_count}, winner={winner})"
