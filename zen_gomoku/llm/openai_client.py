"""OpenAI LLM client implementation."""

import os
from typing import Union, List, Dict, Optional
from openai import AsyncOpenAI
from openai import RateLimitError
from tenacity import retry, stop_after_attempt, wait_exponential, before_sleep_log, retry_if_exception_type
import logging
from .interfaces import LLMClient
from ..exceptions import LLMClientError

logger = logging.getLogger(__name__)

DEFAULT_SYSTEM_PROMPT = (
    "You are a Grandmaster Gomoku (Five-in-a-Row) player. "
    "Always respond with valid JSON containing your move and reasoning."
)


class OpenAIGomokuClient(LLMClient):
    """OpenAI-compatible chat client for Gomoku move requests."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gpt-4o-mini",
        endpoint: Optional[str] = None,
        temperature: float = 0.2,
        max_tokens: int = 256,
        timeout: int = 30,
        json_mode: bool = True,
        client: Optional[AsyncOpenAI] = None,
        **kwargs,
    ):
        """
        Initialize OpenAI client for Gomoku gameplay.

        Args:
            api_key: API key (defaults to OPENAI_API_KEY env var)
            model: Model name (e.g., "gpt-4o-mini", "gpt-4o")
            endpoint: Custom API endpoint/base URL for OpenAI-compatible providers
            temperature: Sampling temperature; low values keep play consistent
            max_tokens: Maximum tokens to generate
            timeout: Request timeout in seconds
            json_mode: Ask the provider for a JSON object response
            client: Pre-built AsyncOpenAI instance (mainly for tests)
            **kwargs: Additional parameters for chat completion
        """
        if client is None:
            client_kwargs = {"api_key": api_key or os.getenv("OPENAI_API_KEY")}
            if endpoint:
                client_kwargs["base_url"] = endpoint
            client = AsyncOpenAI(**client_kwargs)
        self.client = client
        self.model = model

        # Generation parameters
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self.extra_kwargs = kwargs
        if json_mode:
            self.extra_kwargs.setdefault("response_format", {"type": "json_object"})

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1.5, min=1, max=10),
        retry=retry_if_exception_type((RateLimitError,)),
        before_sleep=before_sleep_log(logger, logging.INFO),
        reraise=True,
    )
    async def _make_api_call(self, openai_messages: List[Dict[str, str]]) -> Optional[str]:
        """Make the actual API call with retry logic for rate limits."""
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=openai_messages,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            timeout=self.timeout,
            **self.extra_kwargs,
        )
        return response.choices[0].message.content

    async def complete(self, messages: Union[str, List[Dict[str, str]]]) -> str:
        """Send messages to OpenAI and return response."""
        if isinstance(messages, str):
            openai_messages = [
                {"role": "system", "content": DEFAULT_SYSTEM_PROMPT},
                {"role": "user", "content": messages},
            ]
        else:
            openai_messages = messages

        try:
            content = await self._make_api_call(openai_messages)
        except Exception as e:
            raise LLMClientError(f"OpenAI API error: {e}") from e

        if not content:
            raise LLMClientError(f"OpenAI API returned an empty response for model {self.model}")
        return content
