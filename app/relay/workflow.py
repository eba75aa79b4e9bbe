from __future__ import annotations

from app.completion.client import CompletionClient
from app.relay.graph import build_relay_graph
from app.relay.state import RelayState
from app.slack.client import SlackClient
from app.slack.events import DirectMessage, Mention


class RelayWorkflow:
    def __init__(self, completion_client: CompletionClient, slack_client: SlackClient) -> None:
        self.graph = build_relay_graph(completion_client, slack_client)

    def process(self, event: Mention | DirectMessage, bot_user_id: str) -> RelayState:
        state: RelayState = {
            "bot_user_id": bot_user_id,
            "author": event.author,
            "channel": event.channel,
            "incoming_text": event.text,
            "prompt": "",
            "should_reply": False,
            "reply_text": "",
            "posted": False,
        }
        return self.graph.invoke(state)
