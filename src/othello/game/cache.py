"""
Per-player legal move cache.
"""
from typing import List
import numpy as np

from .board import BoardState, BOARD_CELLS, EMPTY, PLAYER1, PLAYER2
from .rules import evaluate


class LegalMoveCache:
    """
    Boolean index over all 64 cells for each player, meaning "this cell is a
    legal move for this player on the current board".

    Every "has any move" / "list legal moves" query reads this cache. The
    owner is responsible for calling :meth:`recompute_all` after each move.
    """

    def __init__(self, board: BoardState):
        self.board = board
        self._legal = np.zeros((2, BOARD_CELLS), dtype=bool)

    @staticmethod
    def _row(player: int) -> int:
        if player not in (PLAYER1, PLAYER2):
            raise ValueError(f"Unknown player: {player}")
        return player - 1

    def clear(self) -> None:
        self._legal.fill(False)

    def recompute(self, player: int) -> None:
        """Rebuild the flags for ``player`` from scratch."""
        flags = self._legal[self._row(player)]
        flags.fill(False)
        cells = self.board.cells
        for index in range(BOARD_CELLS):
            # Occupied cells are never legal
            if cells[index] != EMPTY:
                continue
            flags[index] = evaluate(self.board, player, index)[0]

    def recompute_all(self) -> None:
        self.recompute(PLAYER1)
        self.recompute(PLAYER2)

    def has_any(self, player: int) -> bool:
        return bool(self._legal[self._row(player)].any())

    def legal_indices(self, player: int) -> List[int]:
        """All legal cell indices for ``player`` in ascending order."""
        return [int(i) for i in np.flatnonzero(self._legal[self._row(player)])]

    def is_legal(self, player: int, index: int) -> bool:
        if not 0 <= index < BOARD_CELLS:
            return False
        return bool(self._legal[self._row(player), index])

    def snapshot(self, player: int) -> np.ndarray:
        """Copy of the 64 flags for ``player``."""
        return self._legal[self._row(player)].copy()
