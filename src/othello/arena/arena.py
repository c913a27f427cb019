"""
Arena for running repeated matches between two agents.
"""
import asyncio
import logging
import time
from typing import Dict, List, Optional

from tqdm import tqdm

from ..agents.base import Agent
from ..config import Config, get_default_config
from ..game import OthelloGame
from ..logger import Logger
from .orchestrator import MatchResult, MatchStats, TurnOrchestrator

logger = logging.getLogger(__name__)


class Arena:
    """Plays matches on one shared game and keeps the session's statistics."""

    def __init__(self, config: Optional[Config] = None, logger: Optional[Logger] = None):
        """
        Initialize the arena.

        Args:
            config: Configuration object (default configuration if None)
            logger: Optional Logger receiving periodic statistics
        """
        self.config = config or get_default_config()
        self.logger = logger
        self.game = OthelloGame()
        self.stats = MatchStats()
        self.results: List[MatchResult] = []

    def _orchestrator(self, player1: Agent, player2: Agent) -> TurnOrchestrator:
        return TurnOrchestrator(self.game, player1, player2,
                                config=self.config.match, stats=self.stats)

    def play_match(self, player1: Agent, player2: Agent) -> MatchResult:
        """
        Play a single match.

        Args:
            player1: Agent moving first
            player2: Agent moving second

        Returns:
            The match result
        """
        orchestrator = self._orchestrator(player1, player2)
        result = asyncio.run(orchestrator.run_match())
        self.results.append(result)
        return result

    def run_matches(self, player1: Agent, player2: Agent,
                    num_games: Optional[int] = None,
                    show_progress: bool = True) -> MatchStats:
        """
        Play ``num_games`` matches back to back.

        Args:
            player1: Agent moving first in every match
            player2: Agent moving second in every match
            num_games: Number of matches (default: config.match.num_games)
            show_progress: Whether to display a progress bar

        Returns:
            The session statistics
        """
        num_games = num_games or self.config.match.num_games
        start_time = time.time()
        asyncio.run(self._run_many(player1, player2, num_games, show_progress))
        logger.info("Played %d games in %.1fs", num_games, time.time() - start_time)
        return self.stats

    async def _run_many(self, player1: Agent, player2: Agent,
                        num_games: int, show_progress: bool) -> None:
        orchestrator = self._orchestrator(player1, player2)
        every = self.config.match.log_every_n_games

        with tqdm(total=num_games, desc="Matches", disable=not show_progress) as progress:
            for _ in range(num_games):
                result = await orchestrator.run_match()
                self.results.append(result)
                progress.update(1)
                progress.set_postfix(p1=self.stats.p1_wins, p2=self.stats.p2_wins,
                                     draws=self.stats.draws)

                if every > 0 and self.stats.games_played % every == 0:
                    self._log_stats()

    def summary(self) -> Dict[str, float]:
        return {
            'games_played': self.stats.games_played,
            'p1_wins': self.stats.p1_wins,
            'p2_wins': self.stats.p2_wins,
            'draws': self.stats.draws,
            'p1_win_rate': self.stats.win_rate(1),
            'p2_win_rate': self.stats.win_rate(2),
        }

    def _log_stats(self) -> None:
        if self.logger is not None:
            self.logger.log_metrics(self.summary(), self.stats.games_played, prefix='match/')
        else:
            logger.info("[Stats] After %d games | P1 W%%: %.1f%% | P2 W%%: %.1f%% | Draws: %d",
                        self.stats.games_played, 100 * self.stats.win_rate(1),
                        100 * self.stats.win_rate(2), self.stats.draws)

    def print_summary(self, player1_name: str = "Player 1", player2_name: str = "Player 2"):
        """Print the session totals."""
        games, p1_wins, p2_wins, draws = self.stats.as_tuple()
        print("\nResults:")
        print("Player                  Wins   Win %")
        print("----------------------  -----  ------")
        print(f"{player1_name:22s}  {p1_wins:5d}  {100 * self.stats.win_rate(1):5.1f}%")
        print(f"{player2_name:22s}  {p2_wins:5d}  {100 * self.stats.win_rate(2):5.1f}%")
        print(f"{'Draws':22s}  {draws:5d}")
        print(f"Games played: {games}")
