"""
Shared fixtures.

Handler and route tests run against an in-memory store that honors the same
interface as ResumeStore, so no MongoDB server is needed.
"""
import copy
from datetime import datetime, timedelta, timezone

import pytest
from bson import ObjectId

from resume_api.app import create_app
from resume_api.services.resume_service import ResumeHandler


class InMemoryResumeStore:
    def __init__(self):
        self.docs = {}

    def insert(self, doc):
        resume_id = str(ObjectId())
        self.docs[resume_id] = copy.deepcopy(doc)
        return resume_id

    def find_by_id(self, resume_id):
        doc = self.docs.get(resume_id)
        return self._output(resume_id, doc) if doc is not None else None

    def update_by_id(self, resume_id, set_fields):
        doc = self.docs.get(resume_id)
        if doc is None:
            return None
        doc.update(copy.deepcopy(set_fields))
        return self._output(resume_id, doc)

    def delete_by_id(self, resume_id):
        return self.docs.pop(resume_id, None) is not None

    def count(self):
        return len(self.docs)

    def find_page(self, skip, limit):
        ordered = sorted(self.docs.items(), key=lambda item: item[1]["createdAt"], reverse=True)
        page = []
        for resume_id, doc in ordered[skip:skip + limit]:
            personal = doc.get("personalInfo", {})
            entry = {"id": resume_id, "personalInfo": {}}
            for key in ("fullName", "email"):
                if key in personal:
                    entry["personalInfo"][key] = personal[key]
            entry["createdAt"] = doc["createdAt"]
            entry["updatedAt"] = doc["updatedAt"]
            page.append(entry)
        return page

    @staticmethod
    def _output(resume_id, doc):
        return {"id": resume_id, **copy.deepcopy(doc)}


class TickingClock:
    """Advances one second per call so consecutive writes get distinct timestamps."""

    def __init__(self, start=datetime(2024, 5, 1, 10, 0, 0, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self):
        now = self.current
        self.current = self.current + timedelta(seconds=1)
        return now


@pytest.fixture
def store():
    return InMemoryResumeStore()


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def handler(store, clock):
    return ResumeHandler(store, clock=clock)


@pytest.fixture
def app(store, clock):
    app = create_app({"TESTING": True, "RATELIMIT_ENABLED": False}, store=store, clock=clock)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def minimal_payload():
    return {"personalInfo": {"fullName": "A", "email": "a@x.com"}}


@pytest.fixture
def full_payload():
    return {
        "personalInfo": {
            "fullName": "Ada Lovelace",
            "email": "ada@example.com",
            "phone": "+44 20 7946 0000",
            "address": "London",
            "linkedin": "linkedin.com/in/ada",
            "github": "github.com/ada",
            "website": "ada.dev",
        },
        "summary": "Mathematician and first programmer.",
        "experience": [
            {
                "company": "Analytical Engines Ltd",
                "position": "Programmer",
                "startDate": "1842-01",
                "endDate": "1843-09",
                "description": "Wrote the Bernoulli number program.",
                "current": False,
            },
            {"company": "Royal Society", "position": "Correspondent", "current": True},
        ],
        "education": [
            {"institution": "Home tutoring", "degree": "Private", "field": "Mathematics", "gpa": "4.0"},
        ],
        "skills": [{"category": "Mathematics", "items": ["Calculus", "Algebra"]}],
        "projects": [
            {
                "name": "Note G",
                "description": "Algorithm for the Analytical Engine",
                "technologies": ["Punch cards"],
                "url": "https://example.com/note-g",
            }
        ],
        "certifications": [{"name": "Fellow", "issuer": "Society", "date": "1840"}],
        "languages": [{"name": "English", "proficiency": "Native"}, {"name": "French", "proficiency": "Fluent"}],
    }
