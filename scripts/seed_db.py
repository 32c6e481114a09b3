import os
import sys
import random
from datetime import timedelta
from faker import Faker

# --- Setup Project Path ---
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from resume_api.config import Config
from resume_api.db import resumes_collection
from resume_api.models.resume_models import build_resume_document
from resume_api.repository.resume_repo import ResumeStore
from resume_api.services.resume_service import utc_now

fake = Faker()

SKILL_CATEGORIES = {
    "Languages": ["Python", "Go", "TypeScript", "Java", "SQL"],
    "Cloud": ["AWS", "GCP", "Azure", "Kubernetes", "Terraform"],
    "Data": ["MongoDB", "PostgreSQL", "Redis", "Kafka", "Spark"],
}


def fake_resume_payload() -> dict:
    name = fake.name()
    experience = []
    for i in range(random.randint(1, 3)):
        start = fake.date_between(start_date="-12y", end_date="-1y")
        experience.append({
            "company": fake.company(),
            "position": fake.job(),
            "startDate": start.strftime("%Y-%m"),
            "endDate": None if i == 0 else fake.date_between(start_date=start).strftime("%Y-%m"),
            "description": fake.paragraph(nb_sentences=2),
            "current": i == 0,
        })
    return {
        "personalInfo": {
            "fullName": name,
            "email": fake.email(),
            "phone": fake.phone_number(),
            "address": fake.city(),
            "linkedin": f"linkedin.com/in/{fake.user_name()}",
        },
        "summary": fake.paragraph(nb_sentences=3),
        "experience": experience,
        "education": [{
            "institution": f"{fake.city()} University",
            "degree": random.choice(["BSc", "MSc", "BA"]),
            "field": random.choice(["Computer Science", "Mathematics", "Physics"]),
            "gpa": str(round(random.uniform(2.8, 4.0), 2)),
        }],
        "skills": [
            {"category": category, "items": random.sample(items, 3)}
            for category, items in SKILL_CATEGORIES.items()
        ],
        "languages": [{"name": "English", "proficiency": "Native"}],
    }


def seed_database(count: int = 25):
    print("=" * 60)
    print("🌱 SEEDING RESUMES")
    print("=" * 60)

    collection = resumes_collection(Config.DB_NAME)
    print("1. Dropping existing resumes collection...")
    collection.drop()

    store = ResumeStore(collection)
    store.ensure_indexes()

    print(f"\n2. Creating {count} resumes...")
    now = utc_now()
    for i in range(count):
        doc = build_resume_document(fake_resume_payload())
        # Spread creation times out so list ordering is visible.
        created = now - timedelta(hours=count - i)
        doc["createdAt"] = created
        doc["updatedAt"] = created
        resume_id = store.insert(doc)
        print(f"  -> {resume_id}  {doc['personalInfo']['fullName']}")

    print(f"\n🎉 Seeded {store.count()} resumes into '{Config.DB_NAME}'.")


if __name__ == "__main__":
    seed_database(int(sys.argv[1]) if len(sys.argv) > 1 else 25)
