"""LLM-powered move oracle."""

import json
import logging
import re
from typing import Any, Dict, List, Optional
from ..core.models import Board, OracleMove, Player
from ..exceptions import LLMClientError, OracleError
from ..llm.interfaces import LLMClient
from ..utils.visualization import format_board_for_prompt
from .base import MoveOracle

logger = logging.getLogger(__name__)


class LLMMoveOracle(MoveOracle):
    """Asks a language model for the next move and parses its JSON reply."""

    def __init__(self, llm_client: LLMClient, oracle_id: str = "llm"):
        self.llm_client = llm_client
        super().__init__(oracle_id)

    def _setup(self):
        self.system_prompt: str = self._get_default_system_prompt()

    def _get_default_system_prompt(self) -> str:
        return """You are a Grandmaster Gomoku (Five-in-a-Row) player. The goal is to get 5 stones in a row horizontally, vertically, or diagonally.

Analyze the board.
1. Check if you can win immediately.
2. Check if the opponent will win next turn and block them.
3. If neither, find the most strategic position to build an attack or strengthen defense.

Respond with JSON only, in this exact format:
{"row": <row index>, "col": <column index>, "reasoning": "<brief strategy explanation>"}

Coordinates are 0-indexed. Always choose an empty position (marked with '.')."""

    def build_messages(self, board: Board, player: Player) -> List[Dict[str, str]]:
        """Build the chat messages for one move request."""
        size = len(board)
        opponent = player.opponent
        board_prompt = (
            f"The board size is {size}x{size}.\n"
            f"Current board state:\n{format_board_for_prompt(board)}\n\n"
            f"You are playing as {player.display_name} (represented by '{player.value}').\n"
            f"The opponent is {opponent.display_name} (represented by '{opponent.value}').\n"
            f"Return the coordinates (0-{size - 1}) for your next move."
        )
        return [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": board_prompt},
        ]

    async def suggest_move(self, board: Board, player: Player) -> Optional[OracleMove]:
        """Get next move from the LLM, or None if it fails or replies badly."""
        try:
            response = await self.llm_client.complete(self.build_messages(board, player))
            return self.parse_move_response(response, len(board))
        except LLMClientError as e:
            logger.warning(f"LLM request failed for oracle {self.oracle_id}: {e}")
        except OracleError as e:
            logger.warning(f"Unusable reply from oracle {self.oracle_id}: {e}")
        return None

    def parse_move_response(self, response: str, board_size: int) -> OracleMove:
        """Parse an LLM reply into an in-range move.

        Accepts a bare JSON object or one wrapped in a ```json fence, with the
        coordinates either at top level or under a "move" key.

        Raises:
            OracleError: If the reply has no JSON, missing fields, or
                coordinates outside the board.
        """
        data = self._extract_json(response)

        move = data.get("move", data)
        if not isinstance(move, dict):
            raise OracleError(f"'move' is not an object: {move!r}")

        row = self._coordinate(move, "row", board_size)
        col = self._coordinate(move, "col", board_size)

        rationale = data.get("reasoning", move.get("reasoning"))
        if rationale is not None and not isinstance(rationale, str):
            rationale = str(rationale)

        return OracleMove(row, col, rationale or None)

    def _extract_json(self, response: str) -> Dict[str, Any]:
        json_match = re.search(r"```(?:json)?([^`]+)```", response, re.DOTALL)
        json_str = json_match.group(1).strip() if json_match else response.strip()

        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise OracleError(f"Could not parse JSON from reply {response!r}: {e}") from e

        if not isinstance(data, dict):
            raise OracleError(f"Expected a JSON object, got {type(data).__name__}")
        return data

    def _coordinate(self, move: Dict[str, Any], key: str, board_size: int) -> int:
        if key not in move:
            raise OracleError(f"Missing required field '{key}'")

        value = move[key]
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int):
            raise OracleError(f"Field '{key}' is not an integer: {value!r}")
        if not 0 <= value < board_size:
            raise OracleError(f"Field '{key}' out of range: {value}")
        return value
