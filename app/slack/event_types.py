ENVELOPE_URL_VERIFICATION = "url_verification"
ENVELOPE_EVENT_CALLBACK = "event_callback"

EVENT_APP_MENTION = "app_mention"
EVENT_MESSAGE = "message"

CHANNEL_TYPE_IM = "im"
