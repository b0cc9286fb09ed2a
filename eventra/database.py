# eventra/database.py
from fastapi import Request
from loguru import logger
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from eventra.config import Settings

# Collection names
USERS = "users"
EVENTS = "events"
TICKETS = "tickets"

# Keep Mongo's internal _id out of every response
NO_MONGO_ID = {"_id": 0}


def create_client(settings: Settings) -> AsyncIOMotorClient:
    return AsyncIOMotorClient(settings.mongo_uri)


async def ensure_indexes(database: AsyncIOMotorDatabase) -> None:
    """Email is the login key, so it is the one unique constraint."""
    await database[USERS].create_index("email", unique=True)
    logger.info(f"Ensured unique index on {USERS}.email in {database.name}")


def get_database(request: Request) -> AsyncIOMotorDatabase:
    return request.app.state.db
