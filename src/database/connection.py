import logging
import os

from dotenv import load_dotenv
from pymongo import MongoClient

load_dotenv()

logger = logging.getLogger(__name__)

MONGO_URI = os.getenv("DATABASE_URL")
DB_NAME = os.getenv("MONGO_DB_NAME")
# Fail requests quickly when the server is unreachable instead of pymongo's 30s default
SERVER_TIMEOUT_MS = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))

if not MONGO_URI or not DB_NAME:
    raise RuntimeError("Set DATABASE_URL and MONGO_DB_NAME in your .env")

# Single global client; pymongo pools connections and connects lazily
client = MongoClient(MONGO_URI, serverSelectionTimeoutMS=SERVER_TIMEOUT_MS)
db = client[DB_NAME]

def get_db():
    return db

def ping(database) -> bool:
    """Round-trip to the server; raises PyMongoError when it is unreachable."""
    database.command("ping")
    return True

def close_client():
    logger.info("Closing MongoDB client")
    client.close()
