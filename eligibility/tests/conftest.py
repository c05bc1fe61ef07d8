"""Shared fixtures for eligibility tests."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db import Base, get_db
from eligibility import models  # noqa: F401
from eligibility.routes import router
from eligibility.logic import AdmissionUnit, InstitutionSummary, RequirementRule, StudentProfile

NOW = datetime(2025, 10, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def science_profile():
    return StudentProfile(
        student_id="s-1",
        ssc_gpa=5.0,
        hsc_gpa=5.0,
        ssc_stream="SCIENCE",
        hsc_stream="SCIENCE",
        ssc_year=2021,
        hsc_year=2023,
    )


def make_unit(unit_id, institution_id="inst-1", requirements=None, **fields):
    """Active unit with a future deadline unless overridden."""
    data = {
        "unit_id": unit_id,
        "institution_id": institution_id,
        "name": f"Unit {unit_id}",
        "application_deadline": NOW + timedelta(days=7),
        "auto_close_after_deadline": True,
        "requirements": [RequirementRule(**r) for r in (requirements or [])],
        "institution": InstitutionSummary(institution_id=institution_id, name=f"Institution {institution_id}"),
    }
    data.update(fields)
    return AdmissionUnit(**data)


@pytest.fixture
def unit_factory():
    return make_unit


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session):
    app = FastAPI()
    app.include_router(router)

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)
