from typing import TypedDict


class RelayState(TypedDict):
    bot_user_id: str
    author: str
    channel: str
    incoming_text: str
    prompt: str
    should_reply: bool
    reply_text: str
    posted: bool
