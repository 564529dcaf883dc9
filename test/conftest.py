"""
Test configuration and fixtures
"""
import pytest
import tempfile
import os
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from database import Base, get_db
from models import Project
from domain.project.project_router import router


@pytest.fixture
def test_engine():
    """Create a temporary SQLite database engine."""
    temp_db = tempfile.NamedTemporaryFile(suffix=".db", delete=False)
    temp_db.close()

    engine = create_engine(f"sqlite:///{temp_db.name}", connect_args={"check_same_thread": False})
    Base.metadata.create_all(engine)

    try:
        yield engine
    finally:
        engine.dispose()
        os.unlink(temp_db.name)


@pytest.fixture
def test_session_factory(test_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def test_db_session(test_session_factory):
    """Create a test database session."""
    session = test_session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def test_client(test_session_factory):
    """Create test client for the project router backed by the temp database."""
    app = FastAPI()
    app.include_router(router)

    def override_get_db():
        db = test_session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as client:
        yield client
    app.dependency_overrides = {}


@pytest.fixture
def sample_content():
    """Stored documentation blob using free-form heading wording."""
    return (
        "Draft notes that never got a heading\n"
        "## Executive Summary\n"
        "Inventory tracker for the warehouse team.\n"
        "\n"
        "## Hardware Requirements\n"
        "- 2x Raspberry Pi 4\n"
        "## Installation & Deployment Guide\n"
        "Step 1\n"
        "Step 2\n"
    )


@pytest.fixture
def sample_project(test_db_session, sample_content):
    """Persisted project with sectioned content."""
    project = Project(
        title="Warehouse Tracker",
        description="Tracks pallets",
        content=sample_content,
        installation_guide="pip install tracker",
        source_code_url="https://example.com/tracker.git",
        status="draft",
        tags=["inventory"],
        created_by="alice",
    )
    test_db_session.add(project)
    test_db_session.commit()
    test_db_session.refresh(project)
    return project
