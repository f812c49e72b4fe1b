from .interfaces import LLMClient
from .openai_client import OpenAIGomokuClient

__all__ = [
    'LLMClient',
    'OpenAIGomokuClient',
]
