"""Board visualization utilities and formatters."""

from abc import ABC, abstractmethod
from typing import Dict, Sequence, Type
from ..core.models import GameStatus, Player, SessionSnapshot


def format_board_for_prompt(board: Sequence[Sequence[Player]]) -> str:
    """Rows of space-separated '.', 'B', 'W' as shown to the LLM."""
    return "\n".join(" ".join(cell.value for cell in row) for row in board)


def format_status(snapshot: SessionSnapshot) -> str:
    """One-line status text for a session."""
    if snapshot.status == GameStatus.BLACK_WON:
        return "Black Wins - Game Over"
    if snapshot.status == GameStatus.WHITE_WON:
        return "White Wins - Game Over"
    if snapshot.status == GameStatus.DRAW:
        return "Draw - Game Over"

    status = f"{snapshot.current_player.display_name} to move"
    if snapshot.is_oracle_thinking:
        status += " (AI is contemplating...)"
    return status


class BoardFormatter(ABC):
    """Abstract base class for session renderers."""

    @abstractmethod
    def format_snapshot(self, snapshot: SessionSnapshot) -> str:
        """Render the full session view."""
        pass

    def _header(self, board_size: int) -> str:
        result = "   "
        for col in range(board_size):
            result += f"{col:2} "
        return result + "\n"

    def _panel(self, snapshot: SessionSnapshot) -> str:
        lines = [format_status(snapshot)]
        opponent = f"AI ({snapshot.oracle_player.display_name})" if snapshot.ai_mode else "Human"
        lines.append(f"Opponent: {opponent}")
        if snapshot.ai_mode and snapshot.oracle_rationale:
            lines.append(f'Analysis: "{snapshot.oracle_rationale}"')
        return "\n".join(lines)


class SimpleBoardFormatter(BoardFormatter):
    """Plain text formatter; last move in brackets, winning line in braces."""

    def format_snapshot(self, snapshot: SessionSnapshot) -> str:
        result = self._header(snapshot.board_size)
        last = snapshot.last_move.as_tuple() if snapshot.last_move else None

        for row in range(snapshot.board_size):
            result += f"{row:2} "
            for col in range(snapshot.board_size):
                piece = snapshot.board[row][col].value
                if (row, col) in snapshot.winning_line:
                    result += f"{{{piece}}}"
                elif (row, col) == last:
                    result += f"[{piece}]"
                else:
                    result += f" {piece} "
            result += "\n"

        return result + "\n" + self._panel(snapshot)


class ColorBoardFormatter(BoardFormatter):
    """Color-enhanced board formatter with ANSI colors."""

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    DIM = "\033[2m"
    RESET = "\033[0m"

    def format_snapshot(self, snapshot: SessionSnapshot) -> str:
        result = self._header(snapshot.board_size)
        last = snapshot.last_move.as_tuple() if snapshot.last_move else None

        for row in range(snapshot.board_size):
            result += f"{row:2} "
            for col in range(snapshot.board_size):
                cell = snapshot.board[row][col]
                piece = cell.value
                if (row, col) in snapshot.winning_line:
                    color = self.RED if cell == Player.BLACK else self.GREEN
                    result += f" {color}{piece}{self.RESET} "
                elif (row, col) == last:
                    result += f"[{self.YELLOW}{piece}{self.RESET}]"
                elif cell == Player.EMPTY:
                    result += f" {self.DIM}{piece}{self.RESET} "
                else:
                    result += f" {piece} "
            result += "\n"

        return result + "\n" + self._panel(snapshot)


def create_formatter(format_type: str = "color") -> BoardFormatter:
    """Create a formatter of the specified type."""
    formatters: Dict[str, Type[BoardFormatter]] = {
        "simple": SimpleBoardFormatter,
        "color": ColorBoardFormatter,
    }

    if format_type not in formatters:
        raise ValueError(f"Unknown format type: {format_type}. Available: {list(formatters.keys())}")

    return formatters[format_type]()
