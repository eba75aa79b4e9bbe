class RelayError(Exception):
    """Base class for every error raised by the relay."""


class ConfigurationError(RelayError):
    """Required configuration is absent; the process must not start."""


class BotIdentityError(RelayError):
    """The bot's own Slack user id could not be resolved."""


class ParseError(RelayError):
    """The inbound event envelope is not valid JSON or has the wrong shape."""


class CompletionError(RelayError):
    """The completion API call produced no usable reply."""


class UpstreamError(CompletionError):
    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"completion API returned HTTP {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class TransportError(CompletionError):
    pass


class DecodeError(CompletionError):
    pass
