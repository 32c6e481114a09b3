# src/resume_api/services/resume_service.py
import logging
import math
from datetime import datetime, timezone
from typing import Any, Callable, Optional

import pydantic
from pymongo.errors import PyMongoError

from ..errors import NotFoundError, PersistenceError
from ..models.resume_models import build_resume_document, build_update_fields
from ..validators.common_validators import clean_update_input, coerce_positive_int
from ..validators.resume_validators import validate_resume_payload

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

# Never written from a request body.
IMMUTABLE_FIELDS = ("id", "_id", "createdAt", "updatedAt")

STORE_ERRORS = (PyMongoError, pydantic.ValidationError)


def utc_now() -> datetime:
    """Current UTC time at millisecond precision, matching what MongoDB keeps."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


class ResumeHandler:
    """The five resume operations.

    Successful calls return the response envelope; failures raise a
    ResumeApiError subclass that the Flask error handlers render.
    """

    def __init__(self, store, clock: Callable[[], datetime] = utc_now):
        self.store = store
        self.clock = clock

    def create(self, payload: Any) -> dict:
        validate_resume_payload(payload)
        now = self.clock()
        try:
            doc = build_resume_document(payload)
            doc["createdAt"] = now
            doc["updatedAt"] = now
            resume_id = self.store.insert(doc)
        except STORE_ERRORS as e:
            logger.error("Error saving resume: %s", e)
            raise PersistenceError("Failed to save resume", details=str(e))

        logger.info("Created resume %s", resume_id)
        return {
            "success": True,
            "message": "Resume saved successfully",
            "data": {"id": resume_id, "createdAt": now},
        }

    def get_one(self, resume_id: str) -> dict:
        try:
            resume = self.store.find_by_id(resume_id)
        except PyMongoError as e:
            logger.error("Error fetching resume %s: %s", resume_id, e)
            raise PersistenceError("Failed to fetch resume", details=str(e))
        if not resume:
            raise NotFoundError()
        return {"success": True, "data": resume}

    def update(self, resume_id: str, payload: Any) -> dict:
        # Required fields are deliberately not re-checked here; an update may blank them.
        try:
            set_fields = build_update_fields(clean_update_input(payload, IMMUTABLE_FIELDS))
            set_fields["updatedAt"] = self.clock()
            resume = self.store.update_by_id(resume_id, set_fields)
        except STORE_ERRORS as e:
            logger.error("Error updating resume %s: %s", resume_id, e)
            raise PersistenceError("Failed to update resume", details=str(e))
        if not resume:
            raise NotFoundError()
        return {
            "success": True,
            "message": "Resume updated successfully",
            "data": resume,
        }

    def delete(self, resume_id: str) -> dict:
        try:
            deleted = self.store.delete_by_id(resume_id)
        except PyMongoError as e:
            logger.error("Error deleting resume %s: %s", resume_id, e)
            raise PersistenceError("Failed to delete resume", details=str(e))
        if not deleted:
            raise NotFoundError()
        logger.info("Deleted resume %s", resume_id)
        return {"success": True, "message": "Resume deleted successfully"}

    def list(self, page: Optional[Any] = None, limit: Optional[Any] = None) -> dict:
        page = coerce_positive_int(page, DEFAULT_PAGE)
        limit = coerce_positive_int(limit, DEFAULT_LIMIT)
        skip = (page - 1) * limit
        try:
            resumes = self.store.find_page(skip, limit)
            total = self.store.count()
        except PyMongoError as e:
            logger.error("Error fetching resumes: %s", e)
            raise PersistenceError("Failed to fetch resumes", details=str(e))
        return {
            "success": True,
            "data": resumes,
            "pagination": {
                "page": page,
                "limit": limit,
                "total": total,
                "pages": math.ceil(total / limit),
            },
        }
