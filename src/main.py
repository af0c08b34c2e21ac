"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.api.router import api_router
from src.config import settings
from src.events.bus import EventBus
from src.turns.controller import SessionController
from src.turns.ticker import Ticker, ticker_lifespan

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan management.

    Startup:
    - Start the countdown scheduler
    - Initialize event bus
    - Initialize the session controller

    Shutdown:
    - Stop any running countdown
    - Shut down the scheduler
    """
    logger.info("Starting Turn Timer...")

    async with ticker_lifespan() as scheduler:
        app.state.scheduler = scheduler

        event_bus = EventBus()
        app.state.event_bus = event_bus
        logger.info("Event bus initialized")

        ticker = Ticker(scheduler=scheduler)
        controller = SessionController(ticker=ticker, event_bus=event_bus)
        app.state.session_controller = controller
        logger.info(
            f"Session controller initialized (tick every {ticker.interval_seconds}s)"
        )

        try:
            yield
        finally:
            # Shutdown
            logger.info("Shutting down Turn Timer...")
            controller.close()


app = FastAPI(
    title=settings.app_name,
    description="Randomized turn order and speaking timer for meetings",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
