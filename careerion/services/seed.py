"""
Sample data for a fresh database.

Each collection is seeded only when it is empty, so restarting the server
never duplicates records.
"""

import logging
from datetime import datetime

from pymongo.database import Database

from careerion.core.auth import hash_password
from careerion.db.mongodb import COLLECTIONS

logger = logging.getLogger(__name__)

SAMPLE_PASSWORD = "password123"

SAMPLE_USERS = [
    {"name": "John Doe", "email": "john@example.com"},
    {"name": "Jane Smith", "email": "jane@example.com"},
    {"name": "Bob Johnson", "email": "bob@example.com"},
]

SAMPLE_COMPANIES = [
    {"name": "TechCorp", "industry": "Technology", "size": "large", "status": "active"},
    {"name": "StartupXYZ", "industry": "Software", "size": "startup", "status": "active"},
    {"name": "Global Solutions", "industry": "Consulting", "size": "medium", "status": "active"},
]

SAMPLE_JOBS = [
    {"title": "Senior Developer", "company": "TechCorp", "location": "San Francisco, CA", "status": "active"},
    {"title": "Product Manager", "company": "StartupXYZ", "location": "New York, NY", "status": "active"},
    {"title": "Data Analyst", "company": "Global Solutions", "location": "Remote", "status": "draft"},
]


def create_sample_data(db: Database) -> dict:
    """
    Seed empty collections. Returns how many documents were inserted per
    collection. Errors are logged, never raised: seeding must not stop startup.
    """
    inserted = {"users": 0, "companies": 0, "jobs": 0}
    try:
        users = db[COLLECTIONS["users"]]
        if users.count_documents({}) == 0:
            pw = hash_password(SAMPLE_PASSWORD)
            now = datetime.utcnow()
            docs = [
                {
                    **u, "password": pw, "profile": {}, "profileComplete": False,
                    "role": "user", "isActive": True, "createdAt": now,
                }
                for u in SAMPLE_USERS
            ]
            inserted["users"] = len(users.insert_many(docs).inserted_ids)
            logger.info("Sample users created (with hashed passwords)")

        companies = db[COLLECTIONS["companies"]]
        if companies.count_documents({}) == 0:
            now = datetime.utcnow()
            docs = [{**c, "createdAt": now} for c in SAMPLE_COMPANIES]
            inserted["companies"] = len(companies.insert_many(docs).inserted_ids)
            logger.info("Sample companies created")

        jobs = db[COLLECTIONS["jobs"]]
        if jobs.count_documents({}) == 0:
            now = datetime.utcnow()
            docs = [{**j, "createdAt": now} for j in SAMPLE_JOBS]
            inserted["jobs"] = len(jobs.insert_many(docs).inserted_ids)
            logger.info("Sample jobs created")
    except Exception:
        logger.exception("Error creating sample data")
    return inserted
