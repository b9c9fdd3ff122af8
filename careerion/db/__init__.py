"""
Database module - MongoDB connection.
"""
from careerion.db.mongodb import get_database, get_mongo_db, check_mongo_connection

__all__ = [
    "get_database",
    "get_mongo_db",
    "check_mongo_connection"
]
