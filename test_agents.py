"""
Tests for the heuristic bots and the agent factory.
"""
import random
from collections import Counter

import pytest

from othello.agents import (
    HeuristicAgent, Strategy, choose_move, create_agent, ConsoleAgent, PASS,
)
from othello.agents.heuristic import corner_edge_score
from othello.game import OthelloGame, PLAYER1, PLAYER2


def game_with(p1=(), p2=()):
    """Game whose board holds only the given stones, caches refreshed."""
    game = OthelloGame()
    game.start_new_game()
    game.board.reset()
    for index in p1:
        game.board.place(PLAYER1, index)
    for index in p2:
        game.board.place(PLAYER2, index)
    game.refresh_legal_moves()
    return game


def tie_game():
    """
    Player 1 can play 21 or 45 (two flips each, interior) or 46 (one flip).
    """
    return game_with(p1=[18, 42, 30], p2=[19, 20, 43, 44, 38])


def test_tie_position_is_as_described():
    view = tie_game().view()
    assert view.legal_indices(PLAYER1) == [21, 45, 46]
    assert [corner_edge_score(view, PLAYER1, i) for i in (21, 45, 46)] == [2, 2, 1]


def test_corner_edge_ties_split_uniformly():
    view = tie_game().view()
    rng = random.Random(1234)
    picks = Counter(choose_move(view, PLAYER1, Strategy.CORNER_EDGE, rng) for _ in range(400))
    assert set(picks) == {21, 45}
    assert picks[21] > 140 and picks[45] > 140


def test_corner_edge_seed_is_reproducible():
    view = tie_game().view()
    first = [choose_move(view, PLAYER1, Strategy.CORNER_EDGE, random.Random(5)) for _ in range(10)]
    second = [choose_move(view, PLAYER1, Strategy.CORNER_EDGE, random.Random(5)) for _ in range(10)]
    assert first == second


def test_greedy_picks_max_flips():
    view = tie_game().view()
    rng = random.Random(0)
    picks = {choose_move(view, PLAYER1, Strategy.GREEDY_FLIPS, rng) for _ in range(100)}
    assert picks == {21, 45}


def test_corners_dominate():
    # Corner 0 flips one stone, 21 and 45 flip two
    game = game_with(p1=[18, 42, 2], p2=[19, 20, 43, 44, 1])
    view = game.view()
    assert 0 in view.legal_indices(PLAYER1)
    rng = random.Random(3)
    assert {choose_move(view, PLAYER1, Strategy.CORNER_EDGE, rng) for _ in range(50)} == {0}
    assert 0 not in {choose_move(view, PLAYER1, Strategy.GREEDY_FLIPS, rng) for _ in range(50)}


def test_edge_bonus_beats_extra_flips():
    # Edge cell 6 flips one (score 4); interior 21 flips two (score 2)
    game = game_with(p1=[18, 22], p2=[19, 20, 14])
    view = game.view()
    assert view.legal_indices(PLAYER1) == [6, 21]
    rng = random.Random(9)
    assert choose_move(view, PLAYER1, Strategy.CORNER_EDGE, rng) == 6
    assert choose_move(view, PLAYER1, Strategy.GREEDY_FLIPS, rng) == 21


def test_random_legal_stays_legal():
    game = OthelloGame()
    game.start_new_game()
    view = game.view()
    rng = random.Random(11)
    picks = {choose_move(view, PLAYER1, Strategy.RANDOM_LEGAL, rng) for _ in range(200)}
    assert picks == {20, 29, 34, 43}


def test_every_strategy_passes_only_without_moves():
    game = game_with(p1=[0], p2=[1])
    view = game.view()
    for strategy in Strategy:
        assert choose_move(view, PLAYER2, strategy, random.Random(0)) == PASS
        assert choose_move(view, PLAYER1, strategy, random.Random(0)) == 2


def test_heuristic_agent_answers_immediately():
    game = OthelloGame()
    game.start_new_game()
    agent = HeuristicAgent(Strategy.GREEDY_FLIPS, seed=1)
    agent.configure(game.view(), PLAYER2)
    answers = []
    agent.request_move(answers.append)
    assert len(answers) == 1
    assert answers[0] in (19, 26, 37, 44)


def test_heuristic_agent_passes_without_moves():
    game = game_with(p1=[0], p2=[1])
    agent = HeuristicAgent("corner_edge", seed=1)
    agent.configure(game.view(), PLAYER2)
    answers = []
    agent.request_move(answers.append)
    assert answers == [PASS]


def test_configure_rejects_bad_player():
    game = OthelloGame()
    game.start_new_game()
    with pytest.raises(ValueError):
        HeuristicAgent().configure(game.view(), 3)


def test_create_agent():
    assert isinstance(create_agent("greedy", seed=1), HeuristicAgent)
    assert create_agent("corner_edge").strategy is Strategy.CORNER_EDGE
    assert create_agent("random").strategy is Strategy.RANDOM_LEGAL
    assert isinstance(create_agent("human"), ConsoleAgent)
    with pytest.raises(ValueError):
        create_agent("minimax")
