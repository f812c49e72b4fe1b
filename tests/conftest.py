"""Shared fixtures and oracle stubs."""

import asyncio
import random
from typing import List, Optional, Union

import pytest

from zen_gomoku.core.board import create_empty_board
from zen_gomoku.core.models import Board, OracleMove, Player
from zen_gomoku.core.session import GameSession
from zen_gomoku.oracle.base import MoveOracle


class ScriptedOracle(MoveOracle):
    """Replays a fixed list of answers; exceptions in the list are raised."""

    def __init__(self, answers: List[Union[OracleMove, None, Exception]]):
        self.answers = list(answers)
        self.calls = []
        super().__init__("scripted")

    async def suggest_move(self, board: Board, player: Player) -> Optional[OracleMove]:
        self.calls.append((board, player))
        answer = self.answers.pop(0) if self.answers else None
        if isinstance(answer, Exception):
            raise answer
        return answer


class GatedOracle(MoveOracle):
    """Holds its answer until the test opens the gate."""

    def __init__(self, answer: Optional[OracleMove]):
        self.answer = answer
        self.gate = asyncio.Event()
        super().__init__("gated")

    async def suggest_move(self, board: Board, player: Player) -> Optional[OracleMove]:
        await self.gate.wait()
        return self.answer


def draw_pattern(row: int, col: int) -> Player:
    """Colouring of a 15x15 board with no five in any direction.

    Rows alternate pairs of colours (BBWWBB...), shifted by one each row.
    It has 113 black and 112 white cells.
    """
    return Player.BLACK if (col // 2 + row) % 2 == 0 else Player.WHITE


def draw_move_order(size: int = 15):
    """Alternating black/white moves that fill the board as `draw_pattern`."""
    black = [(r, c) for r in range(size) for c in range(size) if draw_pattern(r, c) == Player.BLACK]
    white = [(r, c) for r in range(size) for c in range(size) if draw_pattern(r, c) == Player.WHITE]
    moves = []
    for i, cell in enumerate(black):
        moves.append(cell)
        if i < len(white):
            moves.append(white[i])
    return moves


def board_with(stones, size: int = 15) -> Board:
    """Empty board with {(row, col): Player} placed."""
    board = create_empty_board(size)
    for (row, col), player in stones.items():
        board[row][col] = player
    return board


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def human_session():
    """Two-human session with no oracle."""
    return GameSession(oracle=None)
