"""
Zen Gomoku - five-in-a-row with an optional LLM opponent.

The package is built around a small game-state engine and a turn controller
that consults an injectable move oracle on the AI's turn, falling back to a
random empty cell whenever the oracle has no usable answer.

Quick Start:
    >>> import asyncio
    >>> from zen_gomoku import GameSession, RandomMoveOracle
    >>>
    >>> async def quick_game():
    ...     session = GameSession(oracle=RandomMoveOracle())
    ...     session.submit_move(7, 7)
    ...     await session.oracle_task
    ...     print(session.snapshot().current_player)
    ...
    >>> asyncio.run(quick_game())

Main Components:
    - core: board engine, data models and the GameSession turn controller
    - oracle: move oracles (LLM-backed and random)
    - llm: LLM client implementations
    - utils: board renderers
"""

from .core import (
    BOARD_SIZE,
    CellPosition,
    GameSession,
    GameStatus,
    MoveOutcome,
    OracleMove,
    Player,
    SessionSnapshot,
    check_win,
    create_empty_board,
    is_board_full,
)
from .oracle import MoveOracle, LLMMoveOracle, RandomMoveOracle
from .llm import LLMClient, OpenAIGomokuClient
from .config import GameConfig, load_config
from .exceptions import GomokuError, ConfigError, LLMClientError, OracleError
from .utils import BoardFormatter, ColorBoardFormatter, SimpleBoardFormatter

# fmt: off
__all__ = [
    # Core
    'BOARD_SIZE', 'CellPosition', 'GameSession', 'GameStatus', 'MoveOutcome',
    'OracleMove', 'Player', 'SessionSnapshot',
    'check_win', 'create_empty_board', 'is_board_full',

    # Oracles
    'MoveOracle', 'LLMMoveOracle', 'RandomMoveOracle',

    # LLM clients
    'LLMClient', 'OpenAIGomokuClient',

    # Configuration and errors
    'GameConfig', 'load_config',
    'GomokuError', 'ConfigError', 'LLMClientError', 'OracleError',

    # Rendering
    'BoardFormatter', 'ColorBoardFormatter', 'SimpleBoardFormatter',
]
# fmt: on
