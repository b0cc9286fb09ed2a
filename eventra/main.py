# eventra/main.py
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from motor.motor_asyncio import AsyncIOMotorClient

from eventra.config import Settings
from eventra.database import create_client, ensure_indexes
from eventra.exceptions import register_exception_handlers
from eventra.logger_config import setup_logging
from eventra.routes import auth, events, tickets
from eventra.utils.image_upload import CloudinaryUploader


def create_app(settings: Optional[Settings] = None, mongo_client: Optional[AsyncIOMotorClient] = None) -> FastAPI:
    """Build the API around one Settings instance.

    A caller-supplied ``mongo_client`` is used as-is and left open on shutdown.
    """
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = mongo_client if mongo_client is not None else create_client(settings)
        app.state.db = client[settings.mongo_db]
        app.state.image_uploader = CloudinaryUploader(settings)
        await ensure_indexes(app.state.db)
        logger.info(f"Eventra API ready on database '{settings.mongo_db}'")
        try:
            yield
        finally:
            await app.state.image_uploader.aclose()
            if mongo_client is None:
                client.close()

    app = FastAPI(title="Eventra API", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.get("/")
    async def read_root():
        return "Welcome to Eventra API"

    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(events.router, tags=["Events"])
    app.include_router(tickets.router, tags=["Tickets"])
    return app


if __name__ == "__main__":
    import uvicorn

    # Served elsewhere with: uvicorn eventra.main:create_app --factory
    app = create_app()
    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port, log_config=None)
