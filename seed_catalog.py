"""
Seed a local database with demo institutions, units and students.

Run from the project root:
    python seed_catalog.py
"""

import logging
from datetime import datetime, timedelta, timezone
from dotenv import load_dotenv

from db import Base, engine, SessionLocal
from eligibility.models import Student, Institution, Unit, UnitRequirement

load_dotenv()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("seed_catalog")

NOW = datetime.now(timezone.utc)

INSTITUTIONS = [
    {
        "institution_id": "du",
        "name": "Dhaka University",
        "short_name": "DU",
        "website": "https://www.du.ac.bd",
        "description": "The oldest university in Bangladesh.",
        "address": "Dhaka, Bangladesh",
        "type": "UNIVERSITY",
        "ownership": "PUBLIC",
        "established_year": 1921,
    },
    {
        "institution_id": "buet",
        "name": "Bangladesh University of Engineering and Technology",
        "short_name": "BUET",
        "website": "https://www.buet.ac.bd",
        "description": "Premier engineering university.",
        "address": "Dhaka, Bangladesh",
        "type": "UNIVERSITY",
        "ownership": "PUBLIC",
        "established_year": 1962,
    },
]

# (unit fields, [requirement rows])
UNITS = [
    (
        {
            "unit_id": "du-unit-a",
            "institution_id": "du",
            "name": "Unit A Science",
            "description": "Admission unit for Science and Engineering faculties.",
            "application_deadline": NOW + timedelta(days=30),
            "auto_close_after_deadline": True,
        },
        [
            {"ssc_stream": "SCIENCE", "hsc_stream": "SCIENCE", "min_ssc_gpa": 4.5, "min_hsc_gpa": 4.5},
        ],
    ),
    (
        {
            "unit_id": "du-unit-b",
            "institution_id": "du",
            "name": "Unit B Arts",
            "description": "Admission unit for Arts and Social Science faculties.",
            "application_deadline": NOW + timedelta(days=30),
            "auto_close_after_deadline": True,
        },
        [
            {"ssc_stream": "ARTS", "hsc_stream": "ARTS", "min_combined_gpa": 7.0},
            {"ssc_stream": "SCIENCE", "hsc_stream": "ARTS", "min_combined_gpa": 7.5},
        ],
    ),
    (
        {
            "unit_id": "du-unit-c",
            "institution_id": "du",
            "name": "Unit C Business",
            "description": "Admission unit for Business Studies.",
            "application_deadline": NOW - timedelta(days=2),
            "auto_close_after_deadline": True,
        },
        [],
    ),
    (
        {
            "unit_id": "buet-eng",
            "institution_id": "buet",
            "name": "Engineering",
            "description": "Undergraduate engineering programs.",
            "application_deadline": NOW + timedelta(days=14),
            "auto_close_after_deadline": False,
        },
        [
            {
                "ssc_stream": "SCIENCE", "hsc_stream": "SCIENCE",
                "min_ssc_gpa": 5.0, "min_hsc_gpa": 5.0,
                "min_hsc_year": NOW.year - 1, "max_hsc_year": NOW.year,
            },
        ],
    ),
]

STUDENTS = [
    {
        "student_id": "student-science",
        "name": "Science Student",
        "email": "science@example.com",
        "ssc_gpa": 5.0, "ssc_stream": "SCIENCE", "ssc_year": NOW.year - 2,
        "hsc_gpa": 5.0, "hsc_stream": "SCIENCE", "hsc_year": NOW.year,
    },
    {
        "student_id": "student-arts",
        "name": "Arts Student",
        "email": "arts@example.com",
        "ssc_gpa": 4.0, "ssc_stream": "ARTS", "ssc_year": NOW.year - 2,
        "hsc_gpa": 3.5, "hsc_stream": "ARTS", "hsc_year": NOW.year,
    },
    {
        "student_id": "student-incomplete",
        "name": "Incomplete Profile",
        "email": "incomplete@example.com",
    },
]


def import_data():
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        for row in INSTITUTIONS:
            db.merge(Institution(**row))

        for unit_row, requirement_rows in UNITS:
            unit = db.merge(Unit(is_active=True, **unit_row))
            unit.requirements = [UnitRequirement(**r) for r in requirement_rows]

        for row in STUDENTS:
            db.merge(Student(**row))

        db.commit()
        logger.info(
            f"Seeded {len(INSTITUTIONS)} institutions, {len(UNITS)} units, {len(STUDENTS)} students"
        )
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    import_data()
