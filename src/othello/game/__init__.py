"""
Othello game module.
This package contains the core game logic for Othello.
"""

from .board import BoardState, EMPTY, PLAYER1, PLAYER2, INVALID
from .cache import LegalMoveCache
from .game import OthelloGame, BoardView
from .rules import evaluate, apply_move, count_flips

__all__ = [
    'BoardState', 'EMPTY', 'PLAYER1', 'PLAYER2', 'INVALID',
    'LegalMoveCache', 'OthelloGame', 'BoardView',
    'evaluate', 'apply_move', 'count_flips',
]
