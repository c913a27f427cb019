"""
Board module for Othello.
Holds the 64-cell board state and the index/geometry helpers shared by the
rest of the engine.
"""
from typing import Tuple
import numpy as np

# Board dimensions
SIZE = 8
BOARD_CELLS = SIZE * SIZE

# Cell values
EMPTY = 0
PLAYER1 = 1
PLAYER2 = 2
INVALID = -1  # returned when probing outside the board

# Standard opening: two stones per player on the central diagonals
STARTING_STONES = ((27, PLAYER1), (28, PLAYER2), (35, PLAYER2), (36, PLAYER1))


def opponent(player: int) -> int:
    """Return the other player's number."""
    return 3 - player


def index_to_row_col(index: int) -> Tuple[int, int]:
    """Convert a cell index (0..63) into a (row, col) pair."""
    return divmod(index, SIZE)


def row_col_to_index(row: int, col: int) -> int:
    """Convert a (row, col) pair into a cell index."""
    return row * SIZE + col


def is_on_board(row: int, col: int) -> bool:
    return 0 <= row < SIZE and 0 <= col < SIZE


def is_corner(row: int, col: int) -> bool:
    return row in (0, SIZE - 1) and col in (0, SIZE - 1)


def is_edge(row: int, col: int) -> bool:
    """True for cells on the outer ring that are not corners."""
    on_ring = row in (0, SIZE - 1) or col in (0, SIZE - 1)
    return on_ring and not is_corner(row, col)


class BoardState:
    """
    Represents the Othello board as a flat array of 64 cells.
    Cell ``i`` lives at row ``i // 8`` and column ``i % 8``.
    """

    SIZE = SIZE
    BOARD_CELLS = BOARD_CELLS

    EMPTY = EMPTY
    PLAYER1 = PLAYER1
    PLAYER2 = PLAYER2
    INVALID = INVALID

    def __init__(self):
        """Create an empty board."""
        self.cells = np.zeros(BOARD_CELLS, dtype=np.int8)

    def reset(self) -> None:
        """Set every cell to EMPTY."""
        self.cells.fill(EMPTY)

    def seed(self) -> None:
        """Place the four starting stones on an otherwise untouched board."""
        for index, player in STARTING_STONES:
            self.place(player, index)

    def place(self, player: int, index: int) -> None:
        """
        Put a stone for ``player`` on ``index``, overwriting whatever was there.

        No legality check is made here. Out-of-range indices are ignored.
        """
        if player not in (PLAYER1, PLAYER2):
            raise ValueError(f"Unknown player: {player}")
        if 0 <= index < BOARD_CELLS:
            self.cells[index] = player

    def value_at(self, index: int) -> int:
        """Return the cell value, or INVALID for an index off the board."""
        if 0 <= index < BOARD_CELLS:
            return int(self.cells[index])
        return INVALID

    def count_pieces(self) -> Tuple[int, int]:
        """
        Count the stones on the board.

        Returns:
            Tuple of (player1_count, player2_count)
        """
        return (int(np.count_nonzero(self.cells == PLAYER1)),
                int(np.count_nonzero(self.cells == PLAYER2)))

    def empty_count(self) -> int:
        return int(np.count_nonzero(self.cells == EMPTY))

    def copy(self) -> 'BoardState':
        """Create a deep copy of the board."""
        new_board = BoardState()
        new_board.cells = self.cells.copy()
        return new_board

    def to_array(self) -> np.ndarray:
        """
        Get the board as a 2D numpy array.

        Returns:
            Array of shape (8, 8) holding EMPTY, PLAYER1 or PLAYER2
        """
        return self.cells.reshape(SIZE, SIZE).copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    def __str__(self) -> str:
        """Return a string representation of the board."""
        symbols = {EMPTY: '.', PLAYER1: 'X', PLAYER2: 'O'}
        rows = ["  " + " ".join("abcdefgh")]
        for row in range(SIZE):
            cells = [symbols[int(v)] for v in self.cells[row * SIZE:(row + 1) * SIZE]]
            rows.append(f"{row + 1} " + " ".join(cells))
        p1, p2 = self.count_pieces()
        rows.append(f"Score - X: {p1}, O: {p2}")
        return "\n".join(rows)
