from .models import (
    BOARD_SIZE,
    WIN_LENGTH,
    Board,
    CellPosition,
    GameStatus,
    MoveOutcome,
    OracleMove,
    Player,
    SessionSnapshot,
)
from .board import (
    check_win,
    choose_random_move,
    copy_board,
    create_empty_board,
    find_winning_sequence,
    get_empty_cells,
    is_board_full,
    is_in_bounds,
)
from .session import GameSession

__all__ = [
    "BOARD_SIZE",
    "WIN_LENGTH",
    "Board",
    "CellPosition",
    "GameStatus",
    "MoveOutcome",
    "OracleMove",
    "Player",
    "SessionSnapshot",
    "check_win",
    "choose_random_move",
    "copy_board",
    "create_empty_board",
    "find_winning_sequence",
    "get_empty_cells",
    "is_board_full",
    "is_in_bounds",
    "GameSession",
]
