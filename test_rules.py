"""
Tests for the capture rule, the move applier and the legal move cache.
"""
import random

from othello.game.board import BoardState, PLAYER1, PLAYER2, opponent
from othello.game.cache import LegalMoveCache
from othello.game.rules import evaluate, apply_move, count_flips


def make_board(p1=(), p2=()):
    board = BoardState()
    for index in p1:
        board.place(PLAYER1, index)
    for index in p2:
        board.place(PLAYER2, index)
    return board


def opening_board():
    board = BoardState()
    board.seed()
    return board


def test_opening_legal_moves():
    """With 27/36 for player 1, the four textbook replies are legal for each side."""
    board = opening_board()
    cache = LegalMoveCache(board)
    cache.recompute_all()
    assert cache.legal_indices(PLAYER1) == [20, 29, 34, 43]
    assert cache.legal_indices(PLAYER2) == [19, 26, 37, 44]


def test_simple_flip():
    board = opening_board()
    legal, flips = evaluate(board, PLAYER1, 20)
    assert legal
    assert flips == [28]

    flipped = apply_move(board, PLAYER1, 20)
    assert flipped == 1
    assert board.value_at(20) == PLAYER1
    assert board.value_at(28) == PLAYER1
    assert board.count_pieces() == (4, 1)


def test_occupied_and_out_of_range_targets():
    board = opening_board()
    assert evaluate(board, PLAYER1, 27) == (False, [])
    assert evaluate(board, PLAYER1, -1) == (False, [])
    assert evaluate(board, PLAYER1, 64) == (False, [])


def test_run_ending_on_empty_or_edge_flips_nothing():
    # Row 0: target 3, opponent at 2 and 1, empty 0
    board = make_board(p2=[1, 2])
    assert evaluate(board, PLAYER1, 3) == (False, [])

    # Same run closed by an own stone at the corner
    board.place(PLAYER1, 0)
    legal, flips = evaluate(board, PLAYER1, 3)
    assert legal
    assert sorted(flips) == [1, 2]

    # Opponent run running into the east edge
    board = make_board(p2=[6, 7])
    assert evaluate(board, PLAYER1, 5) == (False, [])


def test_adjacent_own_stone_is_not_a_capture():
    board = make_board(p1=[1])
    assert evaluate(board, PLAYER1, 0) == (False, [])


def test_scan_does_not_wrap_around_rows():
    # 7 is the end of row 0; 8 and 9 start row 1
    board = make_board(p1=[9], p2=[8])
    assert evaluate(board, PLAYER1, 7) == (False, [])


def test_flips_in_several_directions():
    # Target 27 (3,3): west run 26 closed by 25, south run 35,43 closed by 51
    board = make_board(p1=[25, 51], p2=[26, 35, 43])
    legal, flips = evaluate(board, PLAYER1, 27)
    assert legal
    assert sorted(flips) == [26, 35, 43]
    assert count_flips(board, PLAYER1, 27) == 3
    assert len(set(flips)) == len(flips)


def test_illegal_apply_is_a_no_op():
    board = opening_board()
    before = board.copy()
    assert apply_move(board, PLAYER1, 0) == 0
    assert apply_move(board, PLAYER1, 27) == 0
    assert board == before


def test_cache_recompute_is_idempotent():
    board = opening_board()
    apply_move(board, PLAYER1, 20)
    cache = LegalMoveCache(board)
    cache.recompute(PLAYER2)
    first = cache.snapshot(PLAYER2)
    cache.recompute(PLAYER2)
    assert (cache.snapshot(PLAYER2) == first).all()


def test_cache_queries():
    board = make_board(p1=[0], p2=[1])
    cache = LegalMoveCache(board)
    cache.recompute_all()
    assert cache.has_any(PLAYER1)
    assert cache.legal_indices(PLAYER1) == [2]
    assert not cache.has_any(PLAYER2)
    assert cache.is_legal(PLAYER1, 2)
    assert not cache.is_legal(PLAYER1, 99)
    cache.clear()
    assert not cache.has_any(PLAYER1)


def test_random_play_properties():
    """Legality matches flips, flips are opponent stones, every move adds one stone."""
    rng = random.Random(7)
    for _ in range(5):
        board = opening_board()
        cache = LegalMoveCache(board)
        player = PLAYER1
        applied = 0
        for _ in range(80):
            cache.recompute_all()
            for index in range(64):
                legal, flips = evaluate(board, player, index)
                assert legal == (len(flips) > 0)
                assert legal == cache.is_legal(player, index)
                assert all(board.value_at(i) == opponent(player) for i in flips)

            moves = cache.legal_indices(player)
            if not moves:
                if not cache.has_any(opponent(player)):
                    break
                player = opponent(player)
                continue

            assert apply_move(board, player, rng.choice(moves)) > 0
            applied += 1
            p1, p2 = board.count_pieces()
            assert p1 + p2 == 4 + applied
            player = opponent(player)
