from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Union

from pydantic import ValidationError

from app.errors import ParseError
from app.models import CallbackEnvelope, SlackEvent
from app.slack.event_types import (
    CHANNEL_TYPE_IM,
    ENVELOPE_EVENT_CALLBACK,
    ENVELOPE_URL_VERIFICATION,
    EVENT_APP_MENTION,
    EVENT_MESSAGE,
)

logger = logging.getLogger("slack_relay")


@dataclass(frozen=True)
class Handshake:
    challenge: str


@dataclass(frozen=True)
class Mention:
    author: str
    channel: str
    text: str


@dataclass(frozen=True)
class DirectMessage:
    author: str
    channel: str
    text: str


@dataclass(frozen=True)
class Ignored:
    reason: str


ClassifiedEvent = Union[Handshake, Mention, DirectMessage, Ignored]


def parse_envelope(raw: bytes | str | Mapping[str, Any]) -> CallbackEnvelope:
    if isinstance(raw, Mapping):
        payload: Any = dict(raw)
    else:
        try:
            payload = json.loads(raw)
        except (TypeError, ValueError) as exc:
            raise ParseError(f"event body is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise ParseError("event body must be a JSON object")

    try:
        return CallbackEnvelope.model_validate(payload)
    except ValidationError as exc:
        raise ParseError(f"event envelope has an unexpected shape: {exc}") from exc


def classify_event(raw: bytes | str | Mapping[str, Any], bot_user_id: str) -> ClassifiedEvent:
    envelope = parse_envelope(raw)

    envelope_type = envelope.type or ""

    if envelope_type == ENVELOPE_URL_VERIFICATION:
        # An absent challenge echoes as an empty body; only a non-string one is undecodable.
        challenge = "" if envelope.challenge is None else envelope.challenge
        if not isinstance(challenge, str):
            raise ParseError("url_verification challenge is not a string")
        return Handshake(challenge=challenge)

    if envelope_type != ENVELOPE_EVENT_CALLBACK:
        logger.info("Unknown envelope type: %s", envelope_type or "<missing>")
        return Ignored(reason=f"envelope:{envelope_type}")

    try:
        event = SlackEvent.model_validate(envelope.event or {})
    except ValidationError:
        logger.info("Inner event has an unexpected shape")
        return Ignored(reason="event:malformed")

    if event.user == bot_user_id:
        return Ignored(reason="self")

    if event.type == EVENT_APP_MENTION:
        logger.info("AppMention event received")
        return Mention(author=event.user, channel=event.channel, text=event.text)

    if event.type == EVENT_MESSAGE:
        logger.info("Message event received")
        if event.channel_type == CHANNEL_TYPE_IM:
            return DirectMessage(author=event.user, channel=event.channel, text=event.text)
        return Ignored(reason=f"channel_type:{event.channel_type}")

    logger.info("Unknown event type: %s", event.type or "<missing>")
    return Ignored(reason=f"event:{event.type}")
