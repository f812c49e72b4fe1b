"""Core data models for the Gomoku session."""

from typing import List, Optional, Tuple
from dataclasses import dataclass
from enum import Enum


BOARD_SIZE = 15
WIN_LENGTH = 5


class Player(Enum):
    EMPTY = "."
    BLACK = "B"  # First player
    WHITE = "W"

    @property
    def opponent(self) -> "Player":
        """The other colour. EMPTY has no opponent."""
        if self == Player.BLACK:
            return Player.WHITE
        if self == Player.WHITE:
            return Player.BLACK
        raise ValueError("EMPTY has no opponent")

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


Board = List[List[Player]]


class GameStatus(Enum):
    PLAYING = "playing"
    BLACK_WON = "black_won"
    WHITE_WON = "white_won"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self != GameStatus.PLAYING

    @classmethod
    def win_for(cls, player: Player) -> "GameStatus":
        """Status for a game won by `player`."""
        if player == Player.BLACK:
            return cls.BLACK_WON
        if player == Player.WHITE:
            return cls.WHITE_WON
        raise ValueError(f"No win status for {player}")


class MoveOutcome(Enum):
    REJECTED = "rejected"  # Illegal or game over, nothing changed
    PLACED = "placed"      # Stone placed, turn passed
    WON = "won"            # Stone placed and completed five
    DRAW = "draw"          # Stone placed and filled the board

    @property
    def accepted(self) -> bool:
        return self != MoveOutcome.REJECTED


@dataclass(frozen=True)
class CellPosition:
    row: int
    col: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)


@dataclass(frozen=True)
class OracleMove:
    """A move suggested by the oracle, with optional explanation."""

    row: int
    col: int
    rationale: Optional[str] = None


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of a session handed to renderers."""

    board: Tuple[Tuple[Player, ...], ...]
    current_player: Player
    status: GameStatus
    last_move: Optional[CellPosition]
    ai_mode: bool
    oracle_player: Player
    is_oracle_thinking: bool
    oracle_rationale: str
    winning_line: Tuple[Tuple[int, int], ...] = ()

    @property
    def board_size(self) -> int:
        return len(self.board)

    @property
    def accepts_human_input(self) -> bool:
        """Whether a click/keyboard move would be considered right now."""
        if self.status.is_terminal or self.is_oracle_thinking:
            return False
        return not (self.ai_mode and self.current_player == self.oracle_player)
