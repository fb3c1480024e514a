"""Seed the database with a sample portfolio (no images; add them from the dashboard)."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from datetime import date
from app.database import SessionLocal, engine, Base
import app.models  # noqa: F401

from app.models.about import About
from app.models.skill import Skill, Sosmed
from app.models.work_experience import WorkExperience


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(About).count() > 0:
            print("Database already seeded. Skipping.")
            return

        # Skills
        skills = [
            Skill(name="Python", icon="python"),
            Skill(name="FastAPI", icon="fastapi"),
            Skill(name="PostgreSQL", icon="postgresql"),
            Skill(name="TypeScript", icon="typescript"),
        ]
        db.add_all(skills)

        # Social media
        sosmed = [
            Sosmed(name="GitHub", url="https://github.com/example"),
            Sosmed(name="LinkedIn", url="https://www.linkedin.com/in/example"),
        ]
        db.add_all(sosmed)
        db.flush()

        # Work experience
        experiences = [
            WorkExperience(
                position="Backend Engineer",
                employment_type="full_time",
                company="Example Corp",
                location="Jakarta",
                location_type="hybrid",
                description=["Built internal APIs", "Maintained the deployment pipeline"],
                start_date=date(2023, 2, 1),
                skills=skills[:3],
            ),
            WorkExperience(
                position="Web Developer Intern",
                employment_type="internship",
                company="Startup Studio",
                location="Bandung",
                location_type="onsite",
                description=["Shipped landing pages"],
                start_date=date(2022, 6, 1),
                end_date=date(2022, 12, 31),
                skills=[skills[3]],
            ),
        ]
        db.add_all(experiences)

        about = About(
            name="Jane Doe",
            job_title="Software Engineer",
            introduction="I build reliable web backends.",
            skills=skills,
            sosmed=sosmed,
            work_experiences=experiences,
        )
        db.add(about)
        db.commit()
        print("Seed data created successfully.")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
