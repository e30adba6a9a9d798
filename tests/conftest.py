"""
Shared fixtures. The database URL must be set before any backend module is imported.
"""
import os
import random
import tempfile
from pathlib import Path

_DB_PATH = Path(tempfile.mkdtemp(prefix="ideaforge-test-")) / "ideas.db"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_PATH}"
os.environ.pop("IDEA_RANDOM_SEED", None)

import pytest
from fastapi.testclient import TestClient

from backend.schemas.generate import IdeaInput
from backend.server import app


@pytest.fixture
def client():
    """Test client with the app lifespan (table creation) running."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_input():
    def _make(skill_level="Beginner", domain="Web Dev", language="Python", project_type="Mini Project"):
        return IdeaInput.model_validate({
            "skillLevel": skill_level,
            "domain": domain,
            "language": language,
            "projectType": project_type,
        })
    return _make
