"""
MongoDB Connection Utility

MongoDB stores every Careerion collection:
- users: accounts, credentials and career profiles
- jobs: job postings managed from the admin panel
- companies: employer records
- applications: job applications referencing a job and a user
"""
import logging

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database

from careerion.core.config import get_settings

logger = logging.getLogger(__name__)

# Global client (connection pooling handled internally by pymongo)
_client: MongoClient = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        settings = get_settings()
        _client = MongoClient(settings.mongo_uri)
    return _client


def get_mongo_db() -> Database:
    """Get the careerion database"""
    return get_mongo_client()[get_settings().mongodb_db]


def get_database() -> Database:
    """
    Dependency for FastAPI route injection.
    Usage:
        @router.get("/users")
        async def list_users(db: Database = Depends(get_database)):
            ...
    Tests replace it through app.dependency_overrides.
    """
    return get_mongo_db()


def check_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = get_mongo_client()
        # ping command checks connection
        client.admin.command('ping')
        return True
    except Exception as e:
        logger.error("MongoDB connection failed: %s", e)
        return False


# Collection name constants (avoid typos)
COLLECTIONS = {
    "users": "users",
    "jobs": "jobs",
    "companies": "companies",
    "applications": "applications",
}


def init_mongo_indexes(db: Database = None):
    """
    Create indexes for better query performance.
    Call this once during app startup.
    """
    db = db if db is not None else get_mongo_db()

    # Email is the login identity
    db[COLLECTIONS["users"]].create_index("email", unique=True)
    db[COLLECTIONS["users"]].create_index("role")

    db[COLLECTIONS["jobs"]].create_index([("createdAt", DESCENDING)])
    db[COLLECTIONS["companies"]].create_index([("createdAt", DESCENDING)])

    db[COLLECTIONS["applications"]].create_index([
        ("jobId", ASCENDING),
        ("userId", ASCENDING)
    ])
    db[COLLECTIONS["applications"]].create_index([("appliedAt", DESCENDING)])

    logger.info("MongoDB indexes created successfully")
