import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from pymongo.errors import PyMongoError

from resume_api.config import Config
from resume_api.db import resumes_collection
from resume_api.repository.resume_repo import ResumeStore


def ensure_indexes():
    print(f"Connecting to {Config.MONGODB_URI}...")
    store = ResumeStore(resumes_collection(Config.DB_NAME))
    try:
        name = store.ensure_indexes()
    except PyMongoError as e:
        print(f"❌ Failed to create index: {e}")
        return 1
    print(f"✅ Index '{name}' is in place on '{Config.DB_NAME}.resumes'.")
    return 0


if __name__ == "__main__":
    sys.exit(ensure_indexes())
