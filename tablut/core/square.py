from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

BOARD_SIZE = 9
NUM_SQUARES = BOARD_SIZE * BOARD_SIZE
MAX_DISTANCE = BOARD_SIZE - 1
# (dcol, drow) for north, east, south, west.
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))
ACTION_VECTOR_SIZE = NUM_SQUARES * len(DIRECTIONS) * MAX_DISTANCE

COLUMN_LABELS = "abcdefghi"

_SQUARE_PATTERN = re.compile(r"^([a-i])([1-9])$")
_MOVE_PATTERN = re.compile(r"^([a-i])([1-9])-(?:([a-i])([1-9])|([a-i])|([1-9]))$")


@dataclass(frozen=True)
class Square:
    col: int
    row: int

    def __post_init__(self) -> None:
        if not (_in_bounds(self.col, self.row)):
            raise ValueError(f"Square ({self.col}, {self.row}) is off the board.")

    @property
    def index(self) -> int:
        return self.col + self.row * BOARD_SIZE

    @property
    def is_edge(self) -> bool:
        return self.col in (0, MAX_DISTANCE) or self.row in (0, MAX_DISTANCE)

    @staticmethod
    def at(col: int, row: int) -> "Square":
        if not _in_bounds(col, row):
            raise ValueError(f"Square ({col}, {row}) is off the board.")
        return SQUARE_LIST[col + row * BOARD_SIZE]

    @staticmethod
    def from_index(index: int) -> "Square":
        if not 0 <= index < NUM_SQUARES:
            raise ValueError("Square index out of range.")
        return SQUARE_LIST[index]

    @staticmethod
    def parse(label: str) -> "Square":
        match = _SQUARE_PATTERN.match(label.strip())
        if match is None:
            raise ValueError(f"Malformed square label: {label!r}")
        return Square.at(COLUMN_LABELS.index(match.group(1)), int(match.group(2)) - 1)

    def neighbour(self, direction: int, steps: int = 1) -> Optional["Square"]:
        """Return the square STEPS away in DIRECTION, or None past the edge."""
        dc, dr = DIRECTIONS[direction]
        col, row = self.col + dc * steps, self.row + dr * steps
        if not _in_bounds(col, row):
            return None
        return SQUARE_LIST[col + row * BOARD_SIZE]

    def direction_to(self, other: "Square") -> Optional[int]:
        """Return the direction index of the straight line to OTHER, if any."""
        dc = other.col - self.col
        dr = other.row - self.row
        if (dc != 0 and dr != 0) or (dc == 0 and dr == 0):
            return None
        step = ((dc > 0) - (dc < 0), (dr > 0) - (dr < 0))
        return DIRECTIONS.index(step)

    def distance_to(self, other: "Square") -> int:
        return abs(other.col - self.col) + abs(other.row - self.row)

    def is_rook_move(self, other: "Square") -> bool:
        return self.direction_to(other) is not None

    def squares_between(self, other: "Square") -> Tuple["Square", ...]:
        direction = self.direction_to(other)
        if direction is None:
            return ()
        ray = ROOK_SQUARES[self.index][direction]
        return ray[: self.distance_to(other) - 1]

    def between(self, other: "Square") -> Optional["Square"]:
        """Return the single square strictly between two squares two apart."""
        if self.distance_to(other) != 2:
            return None
        between = self.squares_between(other)
        return between[0] if between else None

    def __str__(self) -> str:
        return f"{COLUMN_LABELS[self.col]}{self.row + 1}"

    def __repr__(self) -> str:
        return f"Square({self})"


@dataclass(frozen=True)
class Move:
    origin: Square
    destination: Square

    def __post_init__(self) -> None:
        if not self.origin.is_rook_move(self.destination):
            raise ValueError(f"{self.origin}-{self.destination} is not a rook move.")

    @property
    def direction(self) -> int:
        direction = self.origin.direction_to(self.destination)
        assert direction is not None
        return direction

    @property
    def distance(self) -> int:
        return self.origin.distance_to(self.destination)

    @staticmethod
    def parse(text: str) -> "Move":
        """Parse ``e5-e8`` or the abbreviated ``e5-8`` / ``e5-h`` notation."""
        match = _MOVE_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(f"Malformed move: {text!r}")
        origin = Square.parse(match.group(1) + match.group(2))
        if match.group(3):
            destination = Square.parse(match.group(3) + match.group(4))
        elif match.group(5):
            destination = Square.at(COLUMN_LABELS.index(match.group(5)), origin.row)
        else:
            destination = Square.at(origin.col, int(match.group(6)) - 1)
        return Move(origin, destination)

    def to_index(self) -> int:
        base = self.origin.index * len(DIRECTIONS) + self.direction
        return base * MAX_DISTANCE + (self.distance - 1)

    @staticmethod
    def from_index(index: int) -> "Move":
        if not 0 <= index < ACTION_VECTOR_SIZE:
            raise ValueError("Action index out of range.")
        distance = (index % MAX_DISTANCE) + 1
        index //= MAX_DISTANCE
        direction = index % len(DIRECTIONS)
        origin = Square.from_index(index // len(DIRECTIONS))
        destination = origin.neighbour(direction, distance)
        if destination is None:
            raise ValueError("Action index leaves the board.")
        return Move(origin, destination)

    def __str__(self) -> str:
        return f"{self.origin}-{self.destination}"


def encode_move(move: Move) -> int:
    return move.to_index()


def decode_move(index: int) -> Move:
    return Move.from_index(index)


def sq(col: int, row: int) -> Square:
    return Square.at(col, row)


def _in_bounds(col: int, row: int) -> bool:
    return 0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE


def _build_squares() -> Tuple[Square, ...]:
    squares: List[Square] = []
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            squares.append(Square(col, row))
    return tuple(squares)


def _build_rays() -> Tuple[Tuple[Tuple[Square, ...], ...], ...]:
    rays = []
    for square in SQUARE_LIST:
        per_direction = []
        for dc, dr in DIRECTIONS:
            ray: List[Square] = []
            col, row = square.col + dc, square.row + dr
            while _in_bounds(col, row):
                ray.append(SQUARE_LIST[col + row * BOARD_SIZE])
                col += dc
                row += dr
            per_direction.append(tuple(ray))
        rays.append(tuple(per_direction))
    return tuple(rays)


SQUARE_LIST: Tuple[Square, ...] = _build_squares()
# ROOK_SQUARES[index][direction] lists the squares along that ray, nearest first.
ROOK_SQUARES = _build_rays()
ROOK_MOVES: Tuple[Tuple[Tuple[Move, ...], ...], ...] = tuple(
    tuple(tuple(Move(square, target) for target in ray) for ray in ROOK_SQUARES[square.index])
    for square in SQUARE_LIST
)
