import logging
import threading

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError

from app.errors import BotIdentityError

logger = logging.getLogger("slack_relay")


class SlackIdentity:
    """Resolves the bot's own user id once and remembers it for the process lifetime."""

    def __init__(self, web_client: WebClient) -> None:
        self.web_client = web_client
        self._bot_user_id: str | None = None
        self._lock = threading.Lock()

    def get_bot_user_id(self) -> str:
        with self._lock:
            if self._bot_user_id:
                return self._bot_user_id

            try:
                response = self.web_client.auth_test()
            except SlackApiError as exc:
                raise BotIdentityError(f"Error getting bot user ID: {exc.response.get('error')}") from exc

            user_id = response.get("user_id")
            if not user_id:
                raise BotIdentityError(f"Slack auth.test response missing user_id: {response}")

            self._bot_user_id = str(user_id)
            logger.info("Resolved bot user id %s", self._bot_user_id)
            return self._bot_user_id
