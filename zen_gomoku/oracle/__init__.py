from .base import MoveOracle
from .llm_oracle import LLMMoveOracle
from .random_oracle import RandomMoveOracle
from .factory import create_oracle

__all__ = [
    "MoveOracle",
    "LLMMoveOracle",
    "RandomMoveOracle",
    "create_oracle",
]
