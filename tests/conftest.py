import json
from unittest.mock import MagicMock

import pytest
import requests

from app.completion.client import CompletionClient
from app.completion.dedup import LastPromptFilter
from app.config import Settings
from app.relay.handler import RelayHandler
from app.relay.workflow import RelayWorkflow
from app.slack.client import SlackClient

BOT_USER_ID = "UBOT123"


def make_response(status_code=200, payload=None, text=None):
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    if payload is not None:
        response.text = json.dumps(payload)
        response.json.return_value = payload
    else:
        response.text = text or ""
        response.json.side_effect = ValueError("Expecting value")
    return response


def completion_payload(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


@pytest.fixture
def config():
    return Settings(
        _env_file=None,
        slack_bot_token="xoxb-test",
        openai_api_key="sk-test",
    )


@pytest.fixture
def prompt_filter():
    return LastPromptFilter()


@pytest.fixture
def session():
    session = MagicMock(spec=requests.Session)
    session.post.return_value = make_response(payload=completion_payload("  Hi there!  "))
    return session


@pytest.fixture
def completion_client(config, prompt_filter, session):
    return CompletionClient(config, prompt_filter, session=session)


@pytest.fixture
def web_client():
    return MagicMock()


@pytest.fixture
def identity():
    identity = MagicMock()
    identity.get_bot_user_id.return_value = BOT_USER_ID
    return identity


@pytest.fixture
def relay_handler(identity, completion_client, web_client):
    workflow = RelayWorkflow(completion_client, SlackClient(web_client))
    return RelayHandler(identity, workflow)


def mention_body(text, user="UALICE", channel="C1"):
    return json.dumps(
        {
            "type": "event_callback",
            "event": {"type": "app_mention", "user": user, "channel": channel, "text": text},
        }
    )


def direct_message_body(text, user="UALICE", channel="D1", channel_type="im"):
    return json.dumps(
        {
            "type": "event_callback",
            "event": {
                "type": "message",
                "user": user,
                "channel": channel,
                "text": text,
                "channel_type": channel_type,
            },
        }
    )
