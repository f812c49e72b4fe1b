"""Base oracle class."""

from abc import ABC, abstractmethod
from typing import Optional
from ..core.models import Board, OracleMove, Player


class MoveOracle(ABC):
    """Abstract move-suggestion collaborator consulted on the AI's turn."""

    def __init__(self, oracle_id: str):
        self.oracle_id = oracle_id
        self._setup()

    def _setup(self):
        """Internal setup method - override in subclasses if needed."""
        pass

    @abstractmethod
    async def suggest_move(self, board: Board, player: Player) -> Optional[OracleMove]:
        """Return a suggested move for `player`, or None if there is no answer.

        `board` is a snapshot the oracle may read but must not rely on staying
        current. The returned coordinate must be in range; whether the cell is
        still empty is checked by the caller.
        """
        pass
