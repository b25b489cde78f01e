from fastapi import FastAPI
import logging

from calcpad.api.routes import router
from calcpad.config import settings_from_env
from calcpad.session import CalculatorSession
from calcpad.session_store import get_store, init_store
from calcpad.websocket_hub import hub

settings = settings_from_env()

app = FastAPI(title="calcpad", version="0.1.0")
app.include_router(router)
# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


def _push_display(session: CalculatorSession) -> None:
    # Runs from the auto-clear timer, which fires on the event loop.
    hub.publish_display_soon(str(session.session_id), session.display)


@app.on_event("startup")
async def _startup() -> None:
    init_store(settings=settings, on_change=_push_display)
    logger.info("calcpad ready (error reset after %d ms)", settings.error_reset_ms)


@app.on_event("shutdown")
async def _shutdown() -> None:
    get_store().close_all()


@app.get("/info")
async def info() -> dict[str, str]:
    return {"name": "calcpad", "version": "0.1.0"}
