"""Async OpenAI client wrapper.

The SDK's own retry loop is disabled (max_retries=0); retries are decided
by the caller through release_notifier.retry so that translation and Slack
delivery share one policy.
"""

from openai import AsyncOpenAI
from ..config import get_settings

settings = get_settings()

class LLMClient:
    def __init__(self, api_key: str = None):
        self.client = AsyncOpenAI(api_key=api_key or settings.OPENAI_API_KEY, max_retries=0)

    async def complete(self, prompt: str, model: str) -> str:
        """Single-turn completion. Returns the raw message text ('' when the model sends none)."""
        response = await self.client.chat.completions.create(
            model=model,
            messages=[
                {"role": "user", "content": prompt}
            ],
        )
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

llm_client = LLMClient()
