"""
MongoDB client factory.

Opens the process-wide MongoClient once at startup and verifies
connectivity with a ping. The client is thread-safe and pooled;
every repository shares it.
"""

import logging

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from account_service.core.config import Settings
from account_service.domain.accounts.errors import StoreError

logger = logging.getLogger(__name__)


def connect_mongo(settings: Settings) -> MongoClient:
    """Create a MongoClient and check that the server answers.

    Args:
        settings: Application settings carrying the URI and timeout.

    Returns:
        A connected MongoClient.

    Raises:
        StoreError: If the client cannot be created or the ping fails.
    """
    logger.info(
        "Connecting to MongoDB (database=%s, timeout_ms=%d)",
        settings.mongo_database,
        settings.mongo_timeout_ms,
    )
    try:
        client: MongoClient = MongoClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=settings.mongo_timeout_ms,
            connectTimeoutMS=settings.mongo_timeout_ms,
        )
    except (PyMongoError, ValueError) as exc:
        raise StoreError("connect", str(exc)) from exc

    try:
        client.admin.command("ping")
    except PyMongoError as exc:
        client.close()
        raise StoreError("ping", str(exc)) from exc

    logger.info("MongoDB connection verified")
    return client
