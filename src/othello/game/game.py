"""
Othello game module.
Owns the board and legal move cache for one match and is the single place
where moves are committed.
"""
import logging
from typing import Callable, List, Tuple
import numpy as np

from . import board as geometry
from .board import BoardState, PLAYER1, PLAYER2
from .cache import LegalMoveCache
from .rules import apply_move, evaluate

logger = logging.getLogger(__name__)

MoveObserver = Callable[[int, int], None]


class OthelloGame:
    """
    Board, legal move caches and move-applied observers for a single match.
    """

    def __init__(self):
        """Initialize a new, not yet seeded, game."""
        self.board = BoardState()
        self.cache = LegalMoveCache(self.board)
        self.is_ready = False
        self.last_move_index = -1
        self.last_move_player = None
        self.moves_applied = 0
        self._observers: List[MoveObserver] = []

    def start_new_game(self) -> None:
        """Clear the board, place the starting stones and fill both caches."""
        self.is_ready = False
        self.board.reset()
        self.cache.clear()
        self.last_move_index = -1
        self.last_move_player = None
        self.moves_applied = 0

        self.board.seed()
        self.cache.recompute_all()
        self.is_ready = True

    def subscribe(self, observer: MoveObserver) -> None:
        """Register ``observer(index, player)`` for every applied move."""
        if observer not in self._observers:
            self._observers.append(observer)

    def unsubscribe(self, observer: MoveObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def make_move(self, player: int, index: int) -> int:
        """
        Commit a move for ``player`` at ``index``.

        Flips the captured stones, recomputes both players' caches and then
        notifies observers in subscription order. Illegal moves change nothing
        and return 0.

        Args:
            player: The player moving (1 or 2)
            index: Target cell index

        Returns:
            int: Number of stones flipped
        """
        flipped = apply_move(self.board, player, index)
        if flipped == 0:
            return 0

        self.cache.recompute_all()
        self.last_move_index = index
        self.last_move_player = player
        self.moves_applied += 1

        for observer in list(self._observers):
            observer(index, player)
        return flipped

    def refresh_legal_moves(self) -> None:
        self.cache.recompute_all()

    # Query surface

    def value_at(self, index: int) -> int:
        return self.board.value_at(index)

    def has_any_legal_move(self, player: int) -> bool:
        return self.cache.has_any(player)

    def legal_indices(self, player: int) -> List[int]:
        return self.cache.legal_indices(player)

    def is_legal_cached(self, player: int, index: int) -> bool:
        return self.cache.is_legal(player, index)

    def evaluate_move(self, player: int, index: int) -> Tuple[bool, List[int]]:
        return evaluate(self.board, player, index)

    def count_pieces(self) -> Tuple[int, int]:
        return self.board.count_pieces()

    def is_terminal(self) -> bool:
        """Neither player has a legal move according to the cache."""
        return not (self.cache.has_any(PLAYER1) or self.cache.has_any(PLAYER2))

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array of shape (8, 8)
        """
        return self.board.to_array()

    def view(self) -> 'BoardView':
        return BoardView(self)

    def __str__(self) -> str:
        return str(self.board)


class BoardView:
    """
    Read-only window on an :class:`OthelloGame`, handed to agents and
    observers. It exposes queries only; there is no way to mutate the board
    through it.
    """

    __slots__ = ('_game',)

    def __init__(self, game: OthelloGame):
        self._game = game

    def value_at(self, index: int) -> int:
        return self._game.value_at(index)

    def has_any_legal_move(self, player: int) -> bool:
        return self._game.has_any_legal_move(player)

    def legal_indices(self, player: int) -> List[int]:
        return self._game.legal_indices(player)

    def is_legal_cached(self, player: int, index: int) -> bool:
        return self._game.is_legal_cached(player, index)

    def evaluate_move(self, player: int, index: int) -> Tuple[bool, List[int]]:
        return self._game.evaluate_move(player, index)

    def count_pieces(self) -> Tuple[int, int]:
        return self._game.count_pieces()

    def get_board_state(self) -> np.ndarray:
        return self._game.get_board_state()

    @property
    def last_move_index(self) -> int:
        return self._game.last_move_index

    index_to_row_col = staticmethod(geometry.index_to_row_col)
    row_col_to_index = staticmethod(geometry.row_col_to_index)
    is_corner = staticmethod(geometry.is_corner)
    is_edge = staticmethod(geometry.is_edge)

    def __str__(self) -> str:
        return str(self._game)
