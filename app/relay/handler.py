from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from slack_sdk import WebClient

from app.completion.client import CompletionClient
from app.completion.dedup import LastPromptFilter
from app.config import Settings
from app.errors import ParseError
from app.relay.workflow import RelayWorkflow
from app.slack.auth import SlackIdentity
from app.slack.client import SlackClient
from app.slack.events import DirectMessage, Handshake, Mention, classify_event

logger = logging.getLogger("slack_relay")


@dataclass(frozen=True)
class RelayResponse:
    status_code: int
    body: str = ""


class RelayHandler:
    """Handles one inbound Slack webhook call, independent of the HTTP transport in front of it."""

    def __init__(self, identity: SlackIdentity, workflow: RelayWorkflow) -> None:
        self.identity = identity
        self.workflow = workflow

    def handle(self, body: bytes | str | Mapping[str, Any]) -> RelayResponse:
        logger.debug("Event raw data: %s", body)
        bot_user_id = self.identity.get_bot_user_id()

        try:
            event = classify_event(body, bot_user_id)
        except ParseError:
            logger.exception("Error parsing event")
            return RelayResponse(status_code=500, body="invalid event payload")

        if isinstance(event, Handshake):
            return RelayResponse(status_code=200, body=event.challenge)

        if isinstance(event, (Mention, DirectMessage)):
            self.workflow.process(event, bot_user_id)
        else:
            logger.info("Ignoring event: %s", event.reason)

        return RelayResponse(status_code=200)


def build_relay_handler(config: Settings) -> RelayHandler:
    web_client = WebClient(token=config.slack_bot_token)
    completion_client = CompletionClient(config, LastPromptFilter())
    workflow = RelayWorkflow(completion_client, SlackClient(web_client))
    return RelayHandler(SlackIdentity(web_client), workflow)
