from typing import Any

from slack_sdk import WebClient


class SlackClient:
    def __init__(self, web_client: WebClient) -> None:
        self.web_client = web_client

    def post_text(self, channel: str, text: str) -> dict[str, Any]:
        response = self.web_client.chat_postMessage(channel=channel, text=text)
        return response.data if isinstance(response.data, dict) else {"ok": True}
