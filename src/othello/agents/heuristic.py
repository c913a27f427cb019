"""
One-ply heuristic bots.

Each strategy looks at the current legal moves only and breaks ties uniformly
at random with the agent's own RNG, so a seeded agent is reproducible.
"""
import random
from enum import Enum
from typing import List, Optional

from ..game.game import BoardView
from .base import Agent, MoveCallback, PASS

EDGE_BONUS = 3


class Strategy(str, Enum):
    RANDOM_LEGAL = "random"
    GREEDY_FLIPS = "greedy"
    CORNER_EDGE = "corner_edge"


def _flip_count(view: BoardView, player: int, index: int) -> int:
    return len(view.evaluate_move(player, index)[1])


def _best_by_score(candidates: List[int], scores: List[int]) -> List[int]:
    best = max(scores)
    return [index for index, score in zip(candidates, scores) if score == best]


def corner_edge_score(view: BoardView, player: int, index: int) -> int:
    """Flip count plus EDGE_BONUS for a non-corner edge cell."""
    row, col = view.index_to_row_col(index)
    bonus = EDGE_BONUS if view.is_edge(row, col) else 0
    return _flip_count(view, player, index) + bonus


def choose_move(view: BoardView, player: int, strategy: Strategy,
                rng: Optional[random.Random] = None) -> int:
    """
    Pick a move for ``player`` using ``strategy``.

    Args:
        view: Read-only board view with fresh legal move caches
        player: The player to move
        strategy: Which heuristic to apply
        rng: Random source for tie-breaks (module ``random`` if None)

    Returns:
        A legal cell index, or PASS when there is no legal move
    """
    rng = rng or random
    legal = view.legal_indices(player)
    if not legal:
        return PASS

    if strategy is Strategy.RANDOM_LEGAL:
        return rng.choice(legal)

    if strategy is Strategy.GREEDY_FLIPS:
        scores = [_flip_count(view, player, index) for index in legal]
        return rng.choice(_best_by_score(legal, scores))

    if strategy is Strategy.CORNER_EDGE:
        corners = [index for index in legal if view.is_corner(*view.index_to_row_col(index))]
        if corners:
            return rng.choice(corners)
        scores = [corner_edge_score(view, player, index) for index in legal]
        return rng.choice(_best_by_score(legal, scores))

    raise ValueError(f"Unknown strategy: {strategy}")


class HeuristicAgent(Agent):
    """Bot that answers every request immediately using a fixed strategy."""

    def __init__(self, strategy=Strategy.CORNER_EDGE, seed: Optional[int] = None):
        super().__init__()
        self.strategy = Strategy(strategy)
        self.rng = random.Random(seed)
        self.name = self.strategy.value

    def request_move(self, on_chosen: MoveCallback) -> None:
        if not self.view.has_any_legal_move(self.player):
            on_chosen(PASS)
            return
        on_chosen(choose_move(self.view, self.player, self.strategy, self.rng))

    def __repr__(self) -> str:
        return f"HeuristicAgent(strategy={self.strategy.value}, player={self.player})"
