"""
Agents driven from outside the engine (UI clicks, training adapters).
"""
import logging
from typing import Optional

from ..game.game import BoardView, OthelloGame
from .base import Agent, MoveCallback, PASS

logger = logging.getLogger(__name__)


class ExternalAgent(Agent):
    """
    Holds the orchestrator's pending callback until :meth:`submit` is called.

    Without a game the submitted index is handed straight to the callback and
    the orchestrator applies it. With a game the agent commits the move itself
    through :meth:`OthelloGame.make_move` and hands the index back from its
    move-applied subscription, which is how a training adapter that reacts to
    the exact placed index is wired in.
    """

    name = "external"

    def __init__(self, game: Optional[OthelloGame] = None):
        super().__init__()
        self.game = game
        self._pending: Optional[MoveCallback] = None

    @property
    def awaiting_move(self) -> bool:
        return self._pending is not None

    def configure(self, view: BoardView, player: int) -> None:
        super().configure(view, player)
        self._pending = None
        if self.game is not None:
            self.game.subscribe(self._on_move_applied)

    def request_move(self, on_chosen: MoveCallback) -> None:
        self._pending = on_chosen

    def cancel_request(self) -> None:
        self._pending = None

    def submit(self, index: int) -> bool:
        """
        Offer a move for the pending request.

        Returns:
            bool: True if the move (or pass) was accepted
        """
        if self._pending is None:
            logger.debug("Player %s submitted %s with no pending request", self.player, index)
            return False

        if index == PASS:
            if self.view.has_any_legal_move(self.player):
                logger.debug("Player %s cannot pass while legal moves exist", self.player)
                return False
            self._resolve(PASS)
            return True

        if not self.view.is_legal_cached(self.player, index):
            logger.debug("Player %s submitted illegal index %s", self.player, index)
            return False

        if self.game is not None:
            # The move-applied notification resolves the pending request
            self.game.make_move(self.player, index)
        else:
            self._resolve(index)
        return True

    def _resolve(self, index: int) -> None:
        callback, self._pending = self._pending, None
        callback(index)

    def _on_move_applied(self, index: int, player: int) -> None:
        if self._pending is not None and player == self.player:
            self._resolve(index)

    def teardown(self) -> None:
        self._pending = None
        if self.game is not None:
            self.game.unsubscribe(self._on_move_applied)
