import logging
from typing import Callable

from app.completion.client import CompletionClient
from app.errors import CompletionError
from app.relay.state import RelayState
from app.slack.client import SlackClient

logger = logging.getLogger("slack_relay")

RelayNode = Callable[[RelayState], RelayState]


def derive_prompt(text: str, bot_user_id: str) -> str:
    """Strip a leading ``<@BOTID>`` marker; direct messages carry none and pass through."""
    marker = f"<@{bot_user_id}>"
    if bot_user_id and text.startswith(marker):
        return text[len(marker):].strip()
    return text


def check_message_node(state: RelayState) -> RelayState:
    prompt = derive_prompt(state.get("incoming_text") or "", state.get("bot_user_id", ""))
    state["prompt"] = prompt
    state["should_reply"] = bool(prompt.strip()) and state.get("author") != state.get("bot_user_id")
    return state


def make_call_model_node(completion_client: CompletionClient) -> RelayNode:
    def call_model_node(state: RelayState) -> RelayState:
        prompt = state.get("prompt", "")
        logger.info("Prompt received: %s", prompt)
        try:
            state["reply_text"] = completion_client.complete(prompt)
        except CompletionError:
            logger.exception("Error getting response from completion API")
            state["reply_text"] = ""
        return state

    return call_model_node


def make_post_reply_node(slack_client: SlackClient) -> RelayNode:
    def post_reply_node(state: RelayState) -> RelayState:
        reply_text = state.get("reply_text", "")
        logger.info("Response from completion API: %s", reply_text)
        try:
            slack_client.post_text(channel=state.get("channel", ""), text=reply_text)
            state["posted"] = True
        except Exception:
            logger.exception("Error posting message to Slack channel=%s", state.get("channel"))
            state["posted"] = False
        return state

    return post_reply_node
