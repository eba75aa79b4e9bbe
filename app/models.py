from typing import Any

from pydantic import BaseModel, ConfigDict


class SlackEvent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str = ""
    user: str = ""
    channel: str = ""
    text: str = ""
    channel_type: str | None = None


class CallbackEnvelope(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str | None = None
    challenge: Any = None
    event: dict[str, Any] | None = None
