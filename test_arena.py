"""
Tests for the arena harness and the logger.
"""
import logging
import os

from othello.agents import HeuristicAgent
from othello.arena import Arena
from othello.config import get_default_config
from othello.logger import Logger


def quick_config(tmp_path=None):
    config = get_default_config()
    config.match.move_timeout = 0.5
    config.match.log_every_n_games = 2
    if tmp_path is not None:
        config.logging.log_dir = str(tmp_path)
    return config


def test_play_match():
    arena = Arena(quick_config())
    result = arena.play_match(HeuristicAgent("corner_edge", seed=1), HeuristicAgent("greedy", seed=2))
    assert result is not None
    assert result.player1_score + result.player2_score <= 64
    assert arena.stats.games_played == 1
    assert arena.results == [result]


def test_run_matches_keeps_session_stats():
    arena = Arena(quick_config())
    stats = arena.run_matches(HeuristicAgent("random", seed=1), HeuristicAgent("random", seed=2),
                              num_games=4, show_progress=False)
    assert stats is arena.stats
    assert stats.games_played == 4
    assert stats.p1_wins + stats.p2_wins + stats.draws == 4
    assert len(arena.results) == 4

    summary = arena.summary()
    assert summary['games_played'] == 4
    assert abs(summary['p1_win_rate'] - stats.p1_wins / 4) < 1e-9


def test_separate_arenas_do_not_share_stats():
    first = Arena(quick_config())
    second = Arena(quick_config())
    first.run_matches(HeuristicAgent(seed=1), HeuristicAgent(seed=2), num_games=2, show_progress=False)
    assert second.stats.games_played == 0


def test_logger_writes_run_directory(tmp_path):
    config = quick_config(tmp_path)
    config.logging.log_to_file = True
    logger = Logger(config)
    try:
        arena = Arena(config, logger=logger)
        arena.run_matches(HeuristicAgent(seed=1), HeuristicAgent(seed=2), num_games=2, show_progress=False)
    finally:
        logger.close()

    assert os.path.exists(os.path.join(logger.run_dir, 'config.json'))
    with open(os.path.join(logger.run_dir, 'matches.log')) as f:
        text = f.read()
    assert "Match ended" in text
    assert "[Stats] After 2 games" in text


def test_logger_close_removes_only_its_handlers():
    root = logging.getLogger()
    before = list(root.handlers)
    logger = Logger(quick_config())
    assert len(root.handlers) == len(before) + 1
    assert logger.run_dir is None
    logger.close()
    assert root.handlers == before


def test_print_summary(capsys):
    arena = Arena(quick_config())
    arena.run_matches(HeuristicAgent(seed=1), HeuristicAgent(seed=2), num_games=1, show_progress=False)
    arena.print_summary("corner", "bot")
    out = capsys.readouterr().out
    assert "Games played: 1" in out
    assert "corner" in out
