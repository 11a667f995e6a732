from typing import Any, Dict
from slack_sdk.web.async_client import AsyncWebClient
from ..config import get_settings
from ..log import get_logger

logger = get_logger("slack_client")
settings = get_settings()

class SlackClientWrapper:
    def __init__(self, token: str = None):
        self.client = AsyncWebClient(token=token or settings.SLACK_BOT_TOKEN)

    async def post_payload(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Post a prepared payload (dict) directly to Slack using chat_postMessage.
        slack_sdk raises SlackApiError when the response has ok=false;
        its response carries the HTTP status and the Slack `error` string.
        """
        response = await self.client.chat_postMessage(**payload)
        logger.debug(f"Posted message to {payload.get('channel')} (ts={response.get('ts')})")
        return response.data

slack_client = SlackClientWrapper()
