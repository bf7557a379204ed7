"""
OpenAI LLM Client for the Legal Scenario Generator
"""
import json
import logging
from typing import Optional

from openai import AsyncOpenAI, OpenAIError

from config import (
    GENERATION_MAX_TOKENS,
    GENERATION_TEMPERATURE,
    IS_TEST,
    MOCK_SCENARIO,
    OPENAI_API_KEY,
    OPENAI_MODEL,
)
from errors import ConfigurationError, MalformedPayload, UpstreamError

logger = logging.getLogger(__name__)


class OpenAIClient:
    def __init__(self, api_key: Optional[str] = None):
        self.api_key = OPENAI_API_KEY if api_key is None else api_key
        self._client: Optional[AsyncOpenAI] = None

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @property
    def client(self) -> AsyncOpenAI:
        # Created on first use so a missing key never reaches the SDK
        if self._client is None:
            if not self.is_configured:
                raise ConfigurationError()
            self._client = AsyncOpenAI(api_key=self.api_key)
        return self._client

    async def generate(
        self,
        system_prompt: str,
        user_input: str,
        model: str = OPENAI_MODEL,
        temperature: float = GENERATION_TEMPERATURE,
        max_tokens: int = GENERATION_MAX_TOKENS,
    ) -> str:
        client = self.client
        try:
            response = await client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_input},
                ],
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except OpenAIError as e:
            logger.error("LLM Error (%s): %s", model, e)
            raise UpstreamError(f"{type(e).__name__}: {e}") from e

        if not response.choices:
            return ""
        choice = response.choices[0]
        if choice.finish_reason == "length":
            logger.error("LLM output truncated at max_tokens=%s (%s)", max_tokens, model)
            raise MalformedPayload(f"provider output truncated at max_tokens={max_tokens}", field="payload")
        return choice.message.content or ""


class MockLLMClient:
    """Answers offline with a fixed scenario, for IS_TEST=true."""

    is_configured = True

    async def generate(self, system_prompt: str, user_input: str, **kwargs) -> str:
        logger.warning("[TEST MODE] returning mock scenario instead of calling the provider")
        return "```json\n" + json.dumps(MOCK_SCENARIO, ensure_ascii=False, indent=2) + "\n```"


def get_llm_client():
    if IS_TEST:
        return MockLLMClient()
    return OpenAIClient()


# Global instance
llm_client = get_llm_client()
