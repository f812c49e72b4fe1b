"""Build the oracle described by a GameConfig."""

import logging
import random
from typing import Optional
from .base import MoveOracle
from .llm_oracle import LLMMoveOracle
from .random_oracle import RandomMoveOracle
from ..config import GameConfig
from ..llm.openai_client import OpenAIGomokuClient

logger = logging.getLogger(__name__)


def create_oracle(config: GameConfig, rng: Optional[random.Random] = None) -> MoveOracle:
    """LLM oracle when an API key is available, random oracle otherwise."""
    if not config.api_key:
        logger.warning(f"{config.api_key_env} is not set, AI opponent will play random moves")
        return RandomMoveOracle(rng=rng)

    client = OpenAIGomokuClient(
        api_key=config.api_key,
        model=config.model,
        endpoint=config.endpoint,
        temperature=config.temperature,
        max_tokens=config.max_tokens,
        timeout=config.timeout,
    )
    return LLMMoveOracle(client, oracle_id=config.model)
