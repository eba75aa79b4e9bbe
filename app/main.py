import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse

from app.config import require_settings, settings
from app.relay.handler import build_relay_handler

logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger("slack_relay")

relay_handler = build_relay_handler(settings)


@asynccontextmanager
async def lifespan(_: FastAPI):
    require_settings(settings)
    # Resolve the bot identity before accepting events; failure aborts startup.
    bot_user_id = await asyncio.to_thread(relay_handler.identity.get_bot_user_id)
    logger.info("Server ready as bot user %s", bot_user_id)
    yield


app = FastAPI(title="Slack Completion Relay", version="0.1.0", lifespan=lifespan)


@app.api_route("/test", methods=["GET", "POST"])
def liveness() -> Response:
    logger.info("Test route hit")
    return Response(status_code=200)


@app.post("/events")
async def slack_events(request: Request) -> Response:
    body = await request.body()
    result = await asyncio.to_thread(relay_handler.handle, body)
    return PlainTextResponse(content=result.body, status_code=result.status_code)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.port)
