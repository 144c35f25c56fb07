"""
MongoDB Connection Utility

MongoDB stores:
- users: account records (email, bcrypt hash, name)
- internships, skills, certifications: career records, each owned by one user

Every career record carries an `owner` reference, so every query against those
collections is filtered by the caller's user id.
"""
import logging

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database
from pymongo.collection import Collection
from pymongo.errors import PyMongoError
from app.core.config import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)

# Global client (connection pooling handled internally by pymongo)
_client: MongoClient = None
_db: Database = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        _client = MongoClient(settings.mongodb_uri, tz_aware=True)
    return _client


def get_mongo_db() -> Database:
    """
    Get the application database.

    Also used as a FastAPI dependency, so tests can swap the database with
    `app.dependency_overrides[get_mongo_db]`.
    """
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[settings.mongodb_db]
    return _db


def get_collection(name: str, db: Database = None) -> Collection:
    """Get a specific collection (see COLLECTIONS)."""
    db = db if db is not None else get_mongo_db()
    return db[name]


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = get_mongo_client()
        # ping command checks connection
        client.admin.command('ping')
        return True
    except PyMongoError as e:
        logger.error("MongoDB connection failed: %s", e)
        return False


# Collection name constants (avoid typos)
COLLECTIONS = {
    "users": "users",
    "internships": "internships",
    "skills": "skills",
    "certifications": "certifications",
}

OWNED_COLLECTIONS = ("internships", "skills", "certifications")


def init_mongo_indexes(db: Database = None):
    """
    Create indexes for uniqueness and owner-scoped listing.
    Call this once during app startup.
    """
    db = db if db is not None else get_mongo_db()

    # Email uniqueness is enforced by the store
    db[COLLECTIONS["users"]].create_index("email", unique=True)

    # Owner + newest-first listing
    for name in OWNED_COLLECTIONS:
        db[COLLECTIONS[name]].create_index([
            ("owner", ASCENDING),
            ("createdAt", DESCENDING)
        ])

    logger.info("MongoDB indexes created successfully")
