"""Board engine: pure queries and helpers over a Gomoku grid.

Nothing here owns state. Functions take a board and return new values;
the only function that builds a board is `create_empty_board`.
"""

import random
from typing import List, Optional, Tuple

from .models import BOARD_SIZE, WIN_LENGTH, Board, CellPosition, Player

# horizontal, vertical, diagonal down-right, diagonal down-left
DIRECTIONS = [(0, 1), (1, 0), (1, 1), (1, -1)]


def create_empty_board(size: int = BOARD_SIZE) -> Board:
    """Create empty board."""
    return [[Player.EMPTY for _ in range(size)] for _ in range(size)]


def copy_board(board: Board) -> Board:
    return [row[:] for row in board]


def is_in_bounds(board: Board, row: int, col: int) -> bool:
    size = len(board)
    return 0 <= row < size and 0 <= col < size


def _count_direction(board: Board, row: int, col: int, dr: int, dc: int, player: Player) -> int:
    """Count consecutive `player` stones from (row, col), excluding the anchor."""
    count = 0
    r, c = row + dr, col + dc

    while count < WIN_LENGTH - 1 and is_in_bounds(board, r, c) and board[r][c] == player:
        count += 1
        r += dr
        c += dc

    return count


def check_win(board: Board, row: int, col: int, player: Player) -> bool:
    """Check whether the stone just placed at (row, col) completes five.

    Only the four lines through the anchor are examined, so the cost does not
    depend on board size. Six or more in a row also counts.
    """
    for dr, dc in DIRECTIONS:
        count = 1  # Anchor
        count += _count_direction(board, row, col, dr, dc, player)
        count += _count_direction(board, row, col, -dr, -dc, player)

        if count >= WIN_LENGTH:
            return True

    return False


def is_board_full(board: Board) -> bool:
    """Check if board is full (draw)."""
    for row in board:
        if Player.EMPTY in row:
            return False
    return True


def get_empty_cells(board: Board) -> List[CellPosition]:
    """All empty cells in row-major order."""
    cells = []
    for row_idx, row in enumerate(board):
        for col_idx, cell in enumerate(row):
            if cell == Player.EMPTY:
                cells.append(CellPosition(row_idx, col_idx))
    return cells


def choose_random_move(board: Board, rng: Optional[random.Random] = None) -> Optional[CellPosition]:
    """Pick an empty cell uniformly at random, or None on a full board."""
    empty_cells = get_empty_cells(board)
    if not empty_cells:
        return None
    return (rng or random).choice(empty_cells)


def find_winning_sequence(board: Board, row: int, col: int, player: Player) -> List[Tuple[int, int]]:
    """Return every stone of the winning line through the anchor.

    Returns an empty list when the anchor does not complete a line.
    """
    for dr, dc in DIRECTIONS:
        sequence = [(row, col)]

        # Forward
        r, c = row + dr, col + dc
        while is_in_bounds(board, r, c) and board[r][c] == player:
            sequence.append((r, c))
            r += dr
            c += dc

        # Backward
        r, c = row - dr, col - dc
        while is_in_bounds(board, r, c) and board[r][c] == player:
            sequence.insert(0, (r, c))
            r -= dr
            c -= dc

        if len(sequence) >= WIN_LENGTH:
            return sequence

    return []
