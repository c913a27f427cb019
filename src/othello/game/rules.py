"""
Capture rule for Othello.
Decides whether a move is legal, which stones it flips, and applies it.
"""
from typing import List, Tuple

from .board import (
    BoardState, BOARD_CELLS, EMPTY, SIZE, opponent, is_on_board,
)

# Directions as (row_step, col_step): N, S, E, W, NE, NW, SE, SW
DIRECTIONS = (
    (-1, 0),
    (1, 0),
    (0, 1),
    (0, -1),
    (-1, 1),
    (-1, -1),
    (1, 1),
    (1, -1),
)


def _has_adjacent_opponent(cells, row: int, col: int, opp: int) -> bool:
    for dr, dc in DIRECTIONS:
        r, c = row + dr, col + dc
        if is_on_board(r, c) and cells[r * SIZE + c] == opp:
            return True
    return False


def evaluate(board: BoardState, player: int, target: int) -> Tuple[bool, List[int]]:
    """
    Check whether ``player`` may play on ``target``.

    Walks outward in each of the 8 directions. A run of opponent stones is
    captured only when it is closed by one of the player's own stones; runs
    that end on an empty cell or the board edge capture nothing.

    Args:
        board: The board to inspect
        player: The player moving (1 or 2)
        target: Cell index of the move

    Returns:
        Tuple of (is_legal, flippable indices). The move is legal iff at
        least one stone would flip.
    """
    if not 0 <= target < BOARD_CELLS:
        return False, []
    cells = board.cells
    if cells[target] != EMPTY:
        return False, []

    opp = opponent(player)
    row, col = divmod(target, SIZE)

    # Fast reject: nothing can flip without a neighbouring opponent stone
    if not _has_adjacent_opponent(cells, row, col, opp):
        return False, []

    flippable: List[int] = []
    for dr, dc in DIRECTIONS:
        r, c = row + dr, col + dc
        if not is_on_board(r, c) or cells[r * SIZE + c] != opp:
            continue

        line: List[int] = []
        while is_on_board(r, c):
            index = r * SIZE + c
            value = cells[index]
            if value == opp:
                line.append(index)
                r += dr
                c += dc
                continue
            if value == player:
                flippable.extend(line)
            break

    return len(flippable) > 0, flippable


def count_flips(board: BoardState, player: int, target: int) -> int:
    """Number of stones ``player`` would flip by playing ``target`` (0 if illegal)."""
    return len(evaluate(board, player, target)[1])


def apply_move(board: BoardState, player: int, target: int) -> int:
    """
    Place a stone and flip every captured opponent stone.

    Legality is re-checked here. An illegal move leaves the board untouched
    and returns 0, so callers that must tell "illegal" apart from a real move
    should call :func:`evaluate` first.

    Returns:
        The number of stones flipped
    """
    legal, flippable = evaluate(board, player, target)
    if not legal:
        return 0

    board.place(player, target)
    for index in flippable:
        board.place(player, index)
    return len(flippable)
