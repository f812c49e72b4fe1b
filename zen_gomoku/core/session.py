"""Turn controller: owns one game session and sequences its turns."""

import asyncio
import logging
import random
from typing import TYPE_CHECKING, Optional

from .board import (
    check_win,
    choose_random_move,
    copy_board,
    create_empty_board,
    find_winning_sequence,
    is_board_full,
    is_in_bounds,
)
from .models import (
    Board,
    CellPosition,
    GameStatus,
    MoveOutcome,
    OracleMove,
    Player,
    SessionSnapshot,
)
if TYPE_CHECKING:
    from ..oracle.base import MoveOracle

logger = logging.getLogger(__name__)


class GameSession:
    """Mutable state of one game plus the oracle-turn protocol.

    All mutation happens on a single event loop. The oracle request is the only
    await point; its result is dropped if `reset()` ran or a move was applied
    while it was pending.
    """

    def __init__(
        self,
        oracle: Optional["MoveOracle"] = None,
        ai_mode: bool = True,
        oracle_player: Player = Player.WHITE,
        rng: Optional[random.Random] = None,
        think_delay: float = 0.0,
    ):
        if oracle_player == Player.EMPTY:
            raise ValueError("oracle_player must be BLACK or WHITE")

        self.oracle = oracle
        self.oracle_player = oracle_player
        self.rng = rng or random.Random()
        self.think_delay = think_delay
        self._ai_mode = ai_mode and oracle is not None

        self._generation = 0
        self._oracle_task: Optional[asyncio.Task] = None
        self._init_state()
        self.start_oracle_turn()

    def _init_state(self):
        self._board: Board = create_empty_board()
        self._current_player = Player.BLACK
        self._status = GameStatus.PLAYING
        self._last_move: Optional[CellPosition] = None
        self._is_oracle_thinking = False
        self._oracle_rationale = ""

    @property
    def board(self) -> Board:
        """Copy of the current grid."""
        return copy_board(self._board)

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def last_move(self) -> Optional[CellPosition]:
        return self._last_move

    @property
    def ai_mode(self) -> bool:
        return self._ai_mode

    @property
    def is_oracle_thinking(self) -> bool:
        return self._is_oracle_thinking

    @property
    def oracle_rationale(self) -> str:
        return self._oracle_rationale

    @property
    def generation(self) -> int:
        """Bumped whenever pending oracle results must be dropped."""
        return self._generation

    @property
    def oracle_task(self) -> Optional[asyncio.Task]:
        return self._oracle_task

    def cell(self, row: int, col: int) -> Player:
        return self._board[row][col]

    def is_oracle_turn(self) -> bool:
        return (
            self._ai_mode
            and self._status == GameStatus.PLAYING
            and self._current_player == self.oracle_player
        )

    def snapshot(self) -> SessionSnapshot:
        winning_line = ()
        if self._status in (GameStatus.BLACK_WON, GameStatus.WHITE_WON) and self._last_move:
            row, col = self._last_move.as_tuple()
            winning_line = tuple(find_winning_sequence(self._board, row, col, self._board[row][col]))

        return SessionSnapshot(
            board=tuple(tuple(row) for row in self._board),
            current_player=self._current_player,
            status=self._status,
            last_move=self._last_move,
            ai_mode=self._ai_mode,
            oracle_player=self.oracle_player,
            is_oracle_thinking=self._is_oracle_thinking,
            oracle_rationale=self._oracle_rationale,
            winning_line=winning_line,
        )

    def is_legal_move(self, row: int, col: int) -> bool:
        if self._status != GameStatus.PLAYING:
            return False
        if not is_in_bounds(self._board, row, col):
            return False
        return self._board[row][col] == Player.EMPTY

    def apply_move(self, row: int, col: int) -> MoveOutcome:
        """Place the current player's stone and settle win, draw or turn.

        Illegal input (game over, out of range, occupied) changes nothing.
        The turn does not pass on the move that ends the game.
        """
        if not self.is_legal_move(row, col):
            logger.debug(f"Rejected move ({row}, {col}) for {self._current_player.name}, status {self._status.value}")
            return MoveOutcome.REJECTED

        if self._is_oracle_thinking or self._oracle_task is not None:
            # A move landed while an oracle turn was pending; its answer no longer fits
            self._generation += 1
            self._oracle_task = None
            self._is_oracle_thinking = False

        player = self._current_player
        self._board[row][col] = player
        self._last_move = CellPosition(row, col)

        if check_win(self._board, row, col, player):
            self._status = GameStatus.win_for(player)
            logger.info(f"{player.display_name} wins with ({row}, {col})")
            return MoveOutcome.WON

        if is_board_full(self._board):
            self._status = GameStatus.DRAW
            logger.info("Board full, game drawn")
            return MoveOutcome.DRAW

        self._current_player = player.opponent
        self.start_oracle_turn()
        return MoveOutcome.PLACED

    def submit_move(self, row: int, col: int) -> MoveOutcome:
        """Apply a move coming from human input.

        Ignored while the oracle is thinking or when the oracle is to move.
        """
        if self._is_oracle_thinking or self.is_oracle_turn():
            logger.debug(f"Ignored human input ({row}, {col}) during the oracle's turn")
            return MoveOutcome.REJECTED
        return self.apply_move(row, col)

    def reset(self):
        """Start a brand-new game. Pending oracle results become stale."""
        self._generation += 1
        self._oracle_task = None
        self._init_state()
        logger.info(f"New game started (generation {self._generation})")
        self.start_oracle_turn()

    def set_ai_mode(self, enabled: bool):
        """Switch the opponent between the oracle and a second human."""
        if enabled and self.oracle is None:
            raise ValueError("Cannot enable AI mode without an oracle")
        self._ai_mode = enabled
        if not enabled:
            # Turn the pending request stale without touching the board
            self._generation += 1
            self._oracle_task = None
            self._is_oracle_thinking = False
        self.start_oracle_turn()

    def start_oracle_turn(self) -> Optional[asyncio.Task]:
        """Schedule the oracle's move if it is due and none is outstanding.

        Needs a running event loop; without one the turn is left for the
        caller to play via `play_oracle_turn()`.
        """
        if not self.is_oracle_turn() or self._oracle_task is not None:
            return None

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop, oracle turn not scheduled")
            return None

        self._oracle_task = loop.create_task(self._play_oracle_turn(self._generation))
        return self._oracle_task

    async def request_oracle_move(self, board: Board, player: Player) -> Optional[OracleMove]:
        """Ask the oracle for a move; any failure is reported as None."""
        if self.oracle is None:
            return None
        try:
            return await self.oracle.suggest_move(board, player)
        except Exception as e:
            logger.warning(f"Oracle {self.oracle.oracle_id} failed: {e}")
            return None

    async def play_oracle_turn(self) -> MoveOutcome:
        """Run one oracle turn: ask, re-validate, fall back to a random cell."""
        return await self._play_oracle_turn(self._generation)

    async def _play_oracle_turn(self, generation: int) -> MoveOutcome:
        # `generation` is taken when the turn is scheduled, not when it starts
        if generation != self._generation or not self.is_oracle_turn() or self._is_oracle_thinking:
            return MoveOutcome.REJECTED

        player = self._current_player
        self._is_oracle_thinking = True

        try:
            if self.think_delay > 0:
                await asyncio.sleep(self.think_delay)
            suggestion = await self.request_oracle_move(copy_board(self._board), player)
        finally:
            if generation == self._generation:
                self._is_oracle_thinking = False
                self._oracle_task = None

        if generation != self._generation:
            logger.info(f"Discarding stale oracle result from generation {generation}")
            return MoveOutcome.REJECTED

        if self._current_player != player:
            logger.info(f"Discarding oracle result for {player.display_name}, turn has moved on")
            return MoveOutcome.REJECTED

        if suggestion is not None and self.is_legal_move(suggestion.row, suggestion.col):
            self._oracle_rationale = suggestion.rationale or ""
            logger.info(f"Oracle plays ({suggestion.row}, {suggestion.col}) as {player.display_name}")
            return self.apply_move(suggestion.row, suggestion.col)

        if suggestion is not None:
            logger.warning(f"Oracle suggested illegal move ({suggestion.row}, {suggestion.col}), using random fallback")
        else:
            logger.warning("Oracle gave no move, using random fallback")

        fallback = choose_random_move(self._board, self.rng)
        if fallback is None:
            # Unreachable while PLAYING: a full board has already been scored as a draw
            return MoveOutcome.REJECTED

        self._oracle_rationale = ""
        return self.apply_move(fallback.row, fallback.col)
