"""Local oracle that plays a random empty cell."""

import random
from typing import Optional
from .base import MoveOracle
from ..core.board import choose_random_move
from ..core.models import Board, OracleMove, Player


class RandomMoveOracle(MoveOracle):
    """Oracle with no strategy, used when no LLM is configured."""

    def __init__(self, oracle_id: str = "random", rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        super().__init__(oracle_id)

    async def suggest_move(self, board: Board, player: Player) -> Optional[OracleMove]:
        # Prefer the centre like a human opener
        center = len(board) // 2
        if board[center][center] == Player.EMPTY:
            return OracleMove(center, center, "Taking the centre.")

        cell = choose_random_move(board, self.rng)
        if cell is None:
            return None
        return OracleMove(cell.row, cell.col)
