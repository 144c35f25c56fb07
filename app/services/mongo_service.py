"""
MongoDB Service - owner-scoped CRUD for career record collections.

Collections served here:
1. internships    - company, role, dates, status, skills used
2. skills         - name, proficiency (1-5), category, status
3. certifications - name, platform, completion date, link, credential id

All three share one shape: an owned record with a creation timestamp,
mutable business fields and immutable `_id`, `owner` and `createdAt`.
A single generic service handles them, driven by the RESOURCES table.

Ownership rule: a record owned by someone else is reported exactly like a
missing one (ResourceNotFoundError), so existence never leaks to non-owners.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from bson import ObjectId
from pydantic import BaseModel, ValidationError
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

from app.core.errors import RecordValidationError, ResourceNotFoundError
from app.db.mongodb import get_collection, COLLECTIONS
from app.schemas.schemas import CertificationCreate, InternshipCreate, SkillCreate

RecordT = TypeVar("RecordT", bound=BaseModel)

# Keys the server owns; never taken from a payload
PROTECTED_FIELDS = ("_id", "owner", "createdAt")


def as_utc(value: datetime) -> datetime:
    """Stored datetimes are UTC; naive ones (pymongo default) get the zone attached."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# ============================================================
# HELPER: Convert ObjectId to string for JSON serialization
# ============================================================

def serialize_doc(doc: dict) -> dict:
    """Convert MongoDB document to JSON-serializable dict."""
    if doc is None:
        return None
    if "_id" in doc:
        doc["_id"] = str(doc["_id"])
    if isinstance(doc.get("owner"), ObjectId):
        doc["owner"] = str(doc["owner"])
    for key, value in doc.items():
        if isinstance(value, datetime):
            doc[key] = as_utc(value)
    return doc


def serialize_docs(docs: list) -> list:
    """Convert list of MongoDB documents to JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]


# ============================================================
# RESOURCE TABLE
# ============================================================

@dataclass(frozen=True)
class ResourceDefinition(Generic[RecordT]):
    """One owned record type: URL segment, collection, display label, schema."""
    name: str
    collection: str
    label: str
    schema: Type[RecordT]


RESOURCES: Dict[str, ResourceDefinition] = {
    "internships": ResourceDefinition("internships", COLLECTIONS["internships"], "Internship", InternshipCreate),
    "skills": ResourceDefinition("skills", COLLECTIONS["skills"], "Skill", SkillCreate),
    "certifications": ResourceDefinition("certifications", COLLECTIONS["certifications"], "Certification", CertificationCreate),
}


# ============================================================
# OWNED RECORD SERVICE
# ============================================================

class OwnedRecordService(Generic[RecordT]):
    """
    CRUD over one owned collection, always filtered by the caller's id.

    Mutations look the record up by id AND owner first, then write by id.
    The lookup gives a distinguishable NotFound instead of a silent no-op.
    """

    def __init__(self, resource: ResourceDefinition[RecordT], db: Database = None):
        self.resource = resource
        self.collection: Collection = get_collection(resource.collection, db)

    def validate(self, payload: Any) -> Dict[str, Any]:
        """
        Validate a payload against the resource schema.

        Returns the business fields in document (camelCase) form.
        Raises RecordValidationError naming the first offending field.
        """
        try:
            record = self.resource.schema.model_validate(payload)
        except ValidationError as e:
            err = e.errors()[0]
            field = ".".join(str(part) for part in err["loc"]) or "body"
            raise RecordValidationError(self.resource.label, field, err["msg"]) from e
        return record.model_dump(by_alias=True, exclude_none=True)

    def _find_owned(self, owner_id: ObjectId, record_id: str) -> Optional[dict]:
        if not ObjectId.is_valid(record_id):
            return None
        return self.collection.find_one({"_id": ObjectId(record_id), "owner": owner_id})

    def list(self, owner_id: ObjectId) -> List[dict]:
        """All of the owner's records, newest first."""
        cursor = self.collection.find({"owner": owner_id}).sort([("createdAt", -1), ("_id", -1)])
        return serialize_docs(list(cursor))

    def get_one(self, owner_id: ObjectId, record_id: str) -> dict:
        doc = self._find_owned(owner_id, record_id)
        if doc is None:
            raise ResourceNotFoundError(self.resource.label)
        return serialize_doc(doc)

    def create(self, owner_id: ObjectId, payload: Any) -> dict:
        doc = self.validate(payload)
        doc["owner"] = owner_id
        doc["createdAt"] = datetime.now(timezone.utc)
        result = self.collection.insert_one(doc)
        # Echo what was stored, so POST and GET agree on every value
        return serialize_doc(self.collection.find_one({"_id": result.inserted_id}))

    def update(self, owner_id: ObjectId, record_id: str, payload: Any) -> dict:
        """
        Overwrite the record's business fields with a re-validated payload.
        `_id`, `owner` and `createdAt` are kept from the stored record.
        """
        existing = self._find_owned(owner_id, record_id)
        if existing is None:
            raise ResourceNotFoundError(self.resource.label)

        doc = self.validate(payload)
        for key in PROTECTED_FIELDS:
            if key in existing:
                doc[key] = existing[key]

        updated = self.collection.find_one_and_replace(
            {"_id": existing["_id"]},
            doc,
            return_document=ReturnDocument.AFTER
        )
        if updated is None:
            # Deleted between the ownership check and the write
            raise ResourceNotFoundError(self.resource.label)
        return serialize_doc(updated)

    def delete(self, owner_id: ObjectId, record_id: str) -> dict:
        existing = self._find_owned(owner_id, record_id)
        if existing is None:
            raise ResourceNotFoundError(self.resource.label)
        self.collection.delete_one({"_id": existing["_id"]})
        return {"message": f"{self.resource.label} removed"}
