# src/resume_api/repository/resume_repo.py
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument

TIMESTAMP_FIELDS = ("createdAt", "updatedAt")

LIST_PROJECTION = {
    "personalInfo.fullName": 1,
    "personalInfo.email": 1,
    "createdAt": 1,
    "updatedAt": 1,
}


def to_object_id(resume_id: Any) -> Optional[ObjectId]:
    """Returns None for anything that cannot be a stored id, so lookups miss instead of erroring."""
    if isinstance(resume_id, ObjectId):
        return resume_id
    if isinstance(resume_id, str) and ObjectId.is_valid(resume_id):
        return ObjectId(resume_id)
    return None


def to_resume_output(doc: Optional[dict]) -> Optional[dict]:
    if not doc:
        return None
    out = {"id": str(doc["_id"])}
    for key, value in doc.items():
        if key == "_id":
            continue
        if key in TIMESTAMP_FIELDS and isinstance(value, datetime) and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        out[key] = value
    return out


class ResumeStore:
    """Resume persistence on top of a pymongo collection.

    Every method is a single-document (or read-only) driver call, so
    concurrent writers are arbitrated by MongoDB itself.
    """

    def __init__(self, collection):
        self.collection = collection

    def insert(self, doc: Dict[str, Any]) -> str:
        res = self.collection.insert_one(dict(doc))
        return str(res.inserted_id)

    def find_by_id(self, resume_id: Any) -> Optional[dict]:
        oid = to_object_id(resume_id)
        if oid is None:
            return None
        return to_resume_output(self.collection.find_one({"_id": oid}))

    def update_by_id(self, resume_id: Any, set_fields: Dict[str, Any]) -> Optional[dict]:
        oid = to_object_id(resume_id)
        if oid is None:
            return None
        updated = self.collection.find_one_and_update(
            {"_id": oid}, {"$set": set_fields}, return_document=ReturnDocument.AFTER
        )
        return to_resume_output(updated)

    def delete_by_id(self, resume_id: Any) -> bool:
        oid = to_object_id(resume_id)
        if oid is None:
            return False
        res = self.collection.delete_one({"_id": oid})
        return res.deleted_count > 0

    def count(self) -> int:
        return int(self.collection.count_documents({}))

    def find_page(self, skip: int, limit: int) -> List[dict]:
        """Newest first, projected down to the summary fields."""
        cursor = (
            self.collection.find({}, LIST_PROJECTION)
            .sort("createdAt", DESCENDING)
            .skip(int(skip))
            .limit(int(limit))
        )
        return [to_resume_output(d) for d in cursor]

    def ensure_indexes(self) -> str:
        return self.collection.create_index([("createdAt", DESCENDING)], name="createdAt_-1")
