"""
MongoDB Service - CRUD operations for document collections.

Collections in this database:
1. users        - accounts, password hashes, career profiles, roles
2. jobs         - job postings (admin managed)
3. companies    - employer records (admin managed)
4. applications - a user's application to a job

Each collection gets a service class built on DocumentService, which owns
id parsing, search/filter queries, pagination and not-found handling.
"""

import re
from datetime import datetime
from typing import Optional, List, Dict, Any, Tuple

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from careerion.core.errors import NotFoundError, ValidationError
from careerion.db.mongodb import COLLECTIONS

# Never leave the server
PRIVATE_USER_FIELDS = ("password", "passwordResetToken", "passwordResetExpires")

PROFILE_FIELDS = (
    "educationLevel", "fieldOfStudy", "institution", "yearOfCompletion",
    "currentStatus", "workExperience", "skills", "interests", "careerGoals",
    "preferredWorkEnvironment", "preferredWorkLocation", "salaryExpectations",
    "willingToRelocate",
)

DUPLICATE_EMAIL_MESSAGE = "User with this email already exists"


# ============================================================
# HELPERS: ObjectId handling and JSON serialization
# ============================================================

def to_object_id(value: Any) -> Optional[ObjectId]:
    """Parse an id from a path or body; None when it is not a valid ObjectId."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        return None


def serialize_doc(doc: dict) -> dict:
    """Convert MongoDB document to JSON-serializable dict."""
    if doc is None:
        return None
    return {k: str(v) if isinstance(v, ObjectId) else v for k, v in doc.items()}


def serialize_docs(docs: list) -> list:
    """Convert list of MongoDB documents to JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]


def public_user(doc: dict) -> dict:
    """User document as returned by the API: no password or reset token."""
    if doc is None:
        return None
    return serialize_doc({k: v for k, v in doc.items() if k not in PRIVATE_USER_FIELDS})


def _non_empty(value: Any) -> bool:
    if isinstance(value, list):
        return len(value) > 0
    return bool(value)


def is_profile_complete(profile: Dict[str, Any]) -> bool:
    """A profile is complete once the fields the advisor relies on are filled."""
    profile = profile or {}
    return all([
        profile.get("educationLevel"),
        profile.get("fieldOfStudy"),
        profile.get("institution"),
        profile.get("currentStatus"),
        _non_empty(profile.get("skills")),
        _non_empty(profile.get("interests")),
        profile.get("careerGoals"),
    ])


# ============================================================
# BASE SERVICE
# ============================================================

class DocumentService:
    """
    Generic CRUD over one collection.

    Subclasses set collection_name, resource_name (used in 404 messages),
    search_fields (case-insensitive free-text search) and sort_field.
    """

    collection_name: str = ""
    resource_name: str = "Document"
    search_fields: Tuple[str, ...] = ()
    sort_field: str = "createdAt"

    def __init__(self, db: Database):
        self.db = db
        self.collection: Collection = db[self.collection_name]

    @property
    def not_found_message(self) -> str:
        return f"{self.resource_name} not found"

    def get_by_id(self, doc_id: Any) -> Optional[dict]:
        oid = to_object_id(doc_id)
        if oid is None:
            return None
        return self.collection.find_one({"_id": oid})

    def require(self, doc_id: Any) -> dict:
        """Fetch by id or raise NotFoundError."""
        doc = self.get_by_id(doc_id)
        if doc is None:
            raise NotFoundError(self.not_found_message)
        return doc

    def build_query(self, search: Optional[str] = None, filters: Optional[Dict[str, Any]] = None) -> dict:
        query: Dict[str, Any] = {}
        for field, value in (filters or {}).items():
            if value is not None:
                query[field] = value
        if search and self.search_fields:
            pattern = re.escape(search.strip())
            query["$or"] = [
                {field: {"$regex": pattern, "$options": "i"}} for field in self.search_fields
            ]
        return query

    def list(
        self,
        search: Optional[str] = None,
        filters: Optional[Dict[str, Any]] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None
    ) -> Tuple[List[dict], int]:
        """
        List documents newest first.

        Returns (documents, total matching). Pagination applies only when
        limit is given; page is 1-based.
        """
        query = self.build_query(search, filters)
        total = self.collection.count_documents(query)

        cursor = self.collection.find(query).sort(self.sort_field, DESCENDING)
        if limit:
            page = max(page or 1, 1)
            cursor = cursor.skip((page - 1) * limit).limit(limit)
        return list(cursor), total

    def create(self, data: Dict[str, Any]) -> dict:
        doc = dict(data)
        doc.setdefault(self.sort_field, datetime.utcnow())
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    def update(self, doc_id: Any, changes: Dict[str, Any]) -> dict:
        """Apply a $set and return the updated document."""
        oid = to_object_id(doc_id)
        if oid is None:
            raise NotFoundError(self.not_found_message)
        if not changes:
            return self.require(oid)
        updated = self.collection.find_one_and_update(
            {"_id": oid},
            {"$set": changes},
            return_document=ReturnDocument.AFTER
        )
        if updated is None:
            raise NotFoundError(self.not_found_message)
        return updated

    def delete(self, doc_id: Any) -> None:
        oid = to_object_id(doc_id)
        if oid is None:
            raise NotFoundError(self.not_found_message)
        result = self.collection.delete_one({"_id": oid})
        if result.deleted_count == 0:
            raise NotFoundError(self.not_found_message)

    def count(self) -> int:
        return self.collection.count_documents({})


# ============================================================
# USERS COLLECTION
# ============================================================

class UserService(DocumentService):
    """
    Credential store. Owns user records exclusively.
    """

    collection_name = COLLECTIONS["users"]
    resource_name = "User"
    search_fields = ("name", "email")

    def find_by_email(self, email: str) -> Optional[dict]:
        return self.collection.find_one({"email": email})

    def create_user(
        self,
        name: str,
        email: str,
        password_hash: str,
        role: str = "user",
        is_active: bool = True
    ) -> dict:
        """
        Insert a new account.

        Raises ValidationError if the email is taken. The unique index catches
        concurrent signups that both passed the find_by_email check.
        """
        if self.find_by_email(email):
            raise ValidationError(DUPLICATE_EMAIL_MESSAGE)
        doc = {
            "name": name,
            "email": email,
            "password": password_hash,
            "profile": {},
            "profileComplete": False,
            "role": role,
            "isActive": is_active,
            "createdAt": datetime.utcnow(),
        }
        try:
            return self.create(doc)
        except DuplicateKeyError:
            raise ValidationError(DUPLICATE_EMAIL_MESSAGE)

    def update(self, doc_id: Any, changes: Dict[str, Any]) -> dict:
        try:
            return super().update(doc_id, changes)
        except DuplicateKeyError:
            raise ValidationError(DUPLICATE_EMAIL_MESSAGE)

    def update_profile(self, user_id: Any, profile: Dict[str, Any]) -> dict:
        """Replace the stored profile and recompute profileComplete."""
        cleaned = {k: v for k, v in profile.items() if k in PROFILE_FIELDS}
        return self.update(user_id, {
            "profile": cleaned,
            "profileComplete": is_profile_complete(cleaned),
        })

    def get_profile(self, user_id: Any) -> Optional[dict]:
        """Profile sub-document or None when the user or profile is missing."""
        user = self.get_by_id(user_id)
        if not user:
            return None
        return user.get("profile") or None


# ============================================================
# JOBS COLLECTION
# ============================================================

class JobService(DocumentService):
    collection_name = COLLECTIONS["jobs"]
    resource_name = "Job"
    search_fields = ("title", "company", "location")


# ============================================================
# COMPANIES COLLECTION
# ============================================================

class CompanyService(DocumentService):
    collection_name = COLLECTIONS["companies"]
    resource_name = "Company"
    search_fields = ("name", "industry")


# ============================================================
# APPLICATIONS COLLECTION
# ============================================================

class ApplicationService(DocumentService):
    """
    Applications reference a job and a user by ObjectId. Listings replace
    those ids with small summaries of the referenced documents.
    """

    collection_name = COLLECTIONS["applications"]
    resource_name = "Application"
    sort_field = "appliedAt"

    def create_application(self, job_id: Any, user_id: Any, status: str = "pending") -> dict:
        job = JobService(self.db).require(job_id)
        user = UserService(self.db).require(user_id)
        return self.create({
            "jobId": job["_id"],
            "userId": user["_id"],
            "status": status,
            "appliedAt": datetime.utcnow(),
        })

    def populate(self, docs: List[dict]) -> List[dict]:
        """Swap jobId/userId for {_id, title, company} and {_id, name, email}."""
        job_ids = {d.get("jobId") for d in docs if d.get("jobId")}
        user_ids = {d.get("userId") for d in docs if d.get("userId")}

        jobs = {
            j["_id"]: serialize_doc(j)
            for j in self.db[COLLECTIONS["jobs"]].find(
                {"_id": {"$in": list(job_ids)}}, {"title": 1, "company": 1}
            )
        }
        users = {
            u["_id"]: serialize_doc(u)
            for u in self.db[COLLECTIONS["users"]].find(
                {"_id": {"$in": list(user_ids)}}, {"name": 1, "email": 1}
            )
        }

        populated = []
        for doc in docs:
            item = serialize_doc(doc)
            item["jobId"] = jobs.get(doc.get("jobId"))
            item["userId"] = users.get(doc.get("userId"))
            populated.append(item)
        return populated

    def delete_for_job(self, job_id: ObjectId) -> int:
        return self.collection.delete_many({"jobId": job_id}).deleted_count

    def delete_for_user(self, user_id: ObjectId) -> int:
        return self.collection.delete_many({"userId": user_id}).deleted_count
