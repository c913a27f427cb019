"""
Agent contract shared by every decision source.
"""
from typing import Callable, Optional

from ..game.board import PLAYER1, PLAYER2
from ..game.game import BoardView

PASS = -1

MoveCallback = Callable[[int], None]


class Agent:
    """
    A decision source for one side of a match.

    The orchestrator calls :meth:`configure` once per match, then
    :meth:`request_move` each time it is this agent's turn. The agent answers
    by invoking the callback with a cell index, or ``PASS`` (-1). The answer
    may be immediate or arrive later on the event loop.
    """

    name = "agent"

    def __init__(self):
        self.view: Optional[BoardView] = None
        self.player: Optional[int] = None

    def configure(self, view: BoardView, player: int) -> None:
        if player not in (PLAYER1, PLAYER2):
            raise ValueError(f"player must be 1 or 2, got {player}")
        self.view = view
        self.player = player

    def request_move(self, on_chosen: MoveCallback) -> None:
        raise NotImplementedError

    def cancel_request(self) -> None:
        """Called when the orchestrator stops waiting for the current request."""

    def on_match_end(self, own_score: int, opponent_score: int, result: int) -> None:
        """Called once per match with ``result`` in {+1, 0, -1} from this agent's side."""

    def teardown(self) -> None:
        """Release any subscriptions taken in :meth:`configure`."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(player={self.player})"
