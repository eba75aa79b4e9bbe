from __future__ import annotations

import html
import json
import logging
from typing import Any

import requests

from app.completion.dedup import LastPromptFilter
from app.config import Settings
from app.errors import DecodeError, TransportError, UpstreamError

logger = logging.getLogger("slack_relay")


class CompletionClient:
    def __init__(
        self,
        config: Settings,
        prompt_filter: LastPromptFilter,
        session: requests.Session | None = None,
    ) -> None:
        self.config = config
        self.prompt_filter = prompt_filter
        self.session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        return f"{self.config.openai_base_url.rstrip('/')}/chat/completions"

    def build_request(self, prompt: str) -> dict[str, Any]:
        return {
            "model": self.config.openai_model,
            "messages": [{"role": "user", "content": html.escape(prompt)}],
            "max_tokens": self.config.openai_max_tokens,
        }

    def complete(self, prompt: str) -> str:
        # Same prompt as last time: answer nothing rather than repeat ourselves.
        if self.prompt_filter.should_suppress(prompt):
            logger.info("Suppressing repeated prompt")
            return ""

        payload = self.build_request(prompt)
        logger.debug("Sending request data: %s", json.dumps(payload, ensure_ascii=False))

        headers = {
            "Authorization": f"Bearer {self.config.openai_api_key}",
            "Content-Type": "application/json",
        }
        try:
            response = self.session.post(
                self.endpoint, json=payload, headers=headers, timeout=self.config.openai_timeout
            )
        except requests.RequestException as exc:
            raise TransportError(f"completion request failed: {exc}") from exc

        if response.status_code != 200:
            raise UpstreamError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as exc:
            raise DecodeError(f"completion response is not JSON: {exc}") from exc

        return self._extract_reply(data)

    def _extract_reply(self, data: Any) -> str:
        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list):
            raise DecodeError(f"completion response missing choices: {data}")
        if not choices:
            return self.config.fallback_reply

        first = choices[0]
        message = first.get("message") if isinstance(first, dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str):
            raise DecodeError(f"completion response has no message content: {first}")
        return content.strip()
