# src/resume_api/db.py
import logging
from typing import Optional
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from .config import Config

logger = logging.getLogger(__name__)

_client: Optional[MongoClient] = None


def get_client(uri: str = Config.MONGODB_URI, timeout_ms: int = Config.MONGO_TIMEOUT_MS) -> MongoClient:
    """Returns the process-wide client, creating it on first use.

    pymongo connects lazily and pools internally, so this never blocks.
    """
    global _client
    if _client is None:
        _client = MongoClient(uri, serverSelectionTimeoutMS=timeout_ms, tz_aware=True)
    return _client


def get_db(db_name: str = Config.DB_NAME, client: Optional[MongoClient] = None):
    return (client or get_client())[db_name]


def resumes_collection(db_name: str = Config.DB_NAME, client: Optional[MongoClient] = None):
    return get_db(db_name, client)["resumes"]


def ping_database(client: Optional[MongoClient] = None) -> bool:
    """Round-trips a ping so startup can report whether MongoDB is reachable."""
    try:
        (client or get_client()).admin.command("ping")
    except PyMongoError as e:
        logger.error("MongoDB connection error: %s", e)
        return False
    logger.info("Connected to MongoDB")
    return True
