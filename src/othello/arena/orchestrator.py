"""
Turn orchestration for a single Othello match.

The orchestrator is the only component that advances turns. It suspends once
per turn, while waiting for the current agent's answer, and never lets two
turns touch the board at the same time.
"""
import asyncio
import logging
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from ..agents.base import Agent, PASS
from ..config import MatchConfig
from ..game.board import PLAYER1, PLAYER2, opponent
from ..game.game import OthelloGame

logger = logging.getLogger(__name__)


class MatchState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    FINISHED = "finished"


@dataclass
class MatchResult:
    """Final score of a match. ``result`` is +1/0/-1 from player 1's side."""
    player1_score: int
    player2_score: int
    result: int
    turns: int
    forced: bool = False
    passes: int = 0
    timeouts: int = 0
    policy_violations: int = 0

    @property
    def winner(self) -> int:
        """PLAYER1, PLAYER2, or 0 for a draw."""
        if self.result > 0:
            return PLAYER1
        if self.result < 0:
            return PLAYER2
        return 0


@dataclass
class MatchStats:
    """Running totals over the matches played in one session."""
    games_played: int = 0
    p1_wins: int = 0
    p2_wins: int = 0
    draws: int = 0

    def record(self, result: int) -> None:
        self.games_played += 1
        if result > 0:
            self.p1_wins += 1
        elif result < 0:
            self.p2_wins += 1
        else:
            self.draws += 1

    def win_rate(self, player: int) -> float:
        if self.games_played == 0:
            return 0.0
        wins = self.p1_wins if player == PLAYER1 else self.p2_wins
        return wins / self.games_played

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.games_played, self.p1_wins, self.p2_wins, self.draws)


def _score_result(own: int, other: int) -> int:
    if own > other:
        return 1
    if own < other:
        return -1
    return 0


class TurnOrchestrator:
    """
    Match state machine: NOT_STARTED -> RUNNING -> FINISHED.

    Each call to :meth:`play_turn` refreshes the legal move caches, checks for
    the end of the match, skips a player without moves, or asks the current
    agent for a move and waits at most ``move_timeout`` seconds for it.
    """

    def __init__(self, game: OthelloGame, player1: Agent, player2: Agent,
                 config: Optional[MatchConfig] = None,
                 stats: Optional[MatchStats] = None):
        """
        Initialize the orchestrator.

        Args:
            game: Game owning the board and caches for this match
            player1: Agent playing the first side
            player2: Agent playing the second side
            config: Timeouts, delays and the turn limit
            stats: Session statistics to update when a match finishes
        """
        self.game = game
        self.agents: Dict[int, Agent] = {PLAYER1: player1, PLAYER2: player2}
        self.config = config or MatchConfig()
        self.stats = stats if stats is not None else MatchStats()

        self.state = MatchState.NOT_STARTED
        self.current_player = PLAYER1
        self.result: Optional[MatchResult] = None
        self._generation = 0
        self._waiting: Optional[asyncio.Future] = None
        self._reset_counters()

    def _reset_counters(self) -> None:
        self.turn_count = 0
        self.passes = 0
        self.timeouts = 0
        self.policy_violations = 0

    def start_new_match(self) -> None:
        """Reset the board, configure both agents and hand the first turn to player 1."""
        self._abandon_wait()
        self.game.start_new_game()

        view = self.game.view()
        for player, agent in self.agents.items():
            agent.cancel_request()
            agent.teardown()
            agent.configure(view, player)

        self.current_player = PLAYER1
        self.result = None
        self._reset_counters()
        self.state = MatchState.RUNNING

    def is_ready(self) -> bool:
        return self.game.is_ready

    def get_stats(self) -> Tuple[int, int, int, int]:
        """(games_played, p1_wins, p2_wins, draws)"""
        return self.stats.as_tuple()

    def stop(self) -> None:
        """Abandon the current match without recording a result."""
        self._abandon_wait()
        for agent in self.agents.values():
            agent.cancel_request()
            agent.teardown()
        self.state = MatchState.NOT_STARTED

    def _abandon_wait(self) -> None:
        self._generation += 1
        if self._waiting is not None and not self._waiting.done():
            self._waiting.set_result(None)
        self._waiting = None

    async def run_match(self) -> Optional[MatchResult]:
        """
        Play a whole match.

        Returns:
            The final result, or None if the match was stopped
        """
        self.start_new_match()
        while await self.play_turn():
            pass
        return self.result

    async def play_turn(self) -> bool:
        """
        Run one step of the match.

        Returns:
            bool: True while the match is still running
        """
        if self.state is not MatchState.RUNNING:
            return False

        self.game.refresh_legal_moves()

        if self.game.is_terminal():
            self._finish()
            return False

        if self.turn_count >= self.config.max_turns:
            logger.error("Match exceeded %d turns; forcing end to avoid a stall.",
                         self.config.max_turns)
            self._finish(forced=True)
            return False

        player = self.current_player
        if not self.game.has_any_legal_move(player):
            logger.debug("Player %d has no legal move, passing", player)
            self.passes += 1
            self.current_player = opponent(player)
            return True

        if not await self._request_and_apply(player):
            # The match was stopped or restarted while waiting
            return False

        self.current_player = opponent(player)
        self.turn_count += 1

        if self.config.move_delay > 0:
            await asyncio.sleep(self.config.move_delay)
        return self.state is MatchState.RUNNING

    async def _request_and_apply(self, player: int) -> bool:
        """
        Ask ``player``'s agent for a move and commit it.

        Returns:
            bool: False if the wait was abandoned by :meth:`stop` or a restart
        """
        agent = self.agents[player]
        loop = asyncio.get_running_loop()

        self._generation += 1
        generation = self._generation
        future = loop.create_future()
        self._waiting = future
        applied_before = self.game.moves_applied

        def on_chosen(index: int) -> None:
            if generation != self._generation or future.done():
                logger.debug("Dropping stale move %s from player %d", index, player)
                return
            future.set_result(index)

        agent.request_move(on_chosen)
        try:
            index = await asyncio.wait_for(future, timeout=self.config.move_timeout)
            timed_out = False
        except asyncio.TimeoutError:
            index = None
            timed_out = True

        if generation != self._generation:
            return False
        # Any callback arriving from now on belongs to a finished turn
        self._generation += 1
        self._waiting = None

        if timed_out:
            self.timeouts += 1
            agent.cancel_request()
            logger.warning("No move from player %d within %.2fs. Proceeding to next turn.",
                           player, self.config.move_timeout)
            return True

        if index == PASS:
            if self.game.has_any_legal_move(player):
                self.policy_violations += 1
                logger.warning("Player %d attempted to pass despite having legal moves.", player)
            else:
                self.passes += 1
            return True

        already_applied = (self.game.moves_applied > applied_before
                           and self.game.last_move_index == index
                           and self.game.last_move_player == player)
        if already_applied:
            return True

        if isinstance(index, numbers.Integral) and self.game.is_legal_cached(player, index):
            self.game.make_move(player, index)
            return True

        self.policy_violations += 1
        logger.warning("Illegal move from %r (P%d) idx=%s | hadLegal=%s",
                       agent, player, index, self.game.has_any_legal_move(player))
        return True

    def _finish(self, forced: bool = False) -> None:
        p1_score, p2_score = self.game.count_pieces()
        result = _score_result(p1_score, p2_score)

        self.state = MatchState.FINISHED
        self.result = MatchResult(
            player1_score=p1_score,
            player2_score=p2_score,
            result=result,
            turns=self.turn_count,
            forced=forced,
            passes=self.passes,
            timeouts=self.timeouts,
            policy_violations=self.policy_violations,
        )
        self.stats.record(result)

        self.agents[PLAYER1].on_match_end(p1_score, p2_score, result)
        self.agents[PLAYER2].on_match_end(p2_score, p1_score, -result)
        for agent in self.agents.values():
            agent.teardown()

        winner = {1: "Player 1", -1: "Player 2", 0: "Draw"}[result]
        games, p1_wins, p2_wins, draws = self.stats.as_tuple()
        logger.info("Match ended. P1: %d, P2: %d | Winner: %s | Totals => Games: %d, P1: %d, P2: %d, Draws: %d",
                    p1_score, p2_score, winner, games, p1_wins, p2_wins, draws)
