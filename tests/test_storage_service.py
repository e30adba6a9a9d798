"""
Tests for the best-effort audit writer.
"""
import asyncio
from unittest.mock import MagicMock, patch

from sqlalchemy import select

from backend.core.database import SessionLocal, init_db
from backend.models.generated_idea import GeneratedIdea
from backend.services.storage_service import log_generation


def test_log_generation_inserts_row():
    record = {"domain": "App Dev", "skillLevel": "Beginner", "projectType": "Startup Idea", "title": "Recipe Finder Pro Platform"}

    async def _run():
        await init_db()
        ok = await log_generation(record)
        async with SessionLocal() as session:
            rows = (await session.execute(
                select(GeneratedIdea).where(GeneratedIdea.project_type == "Startup Idea")
            )).scalars().all()
        return ok, rows

    ok, rows = asyncio.run(_run())
    assert ok is True
    assert any(r.generated_content["title"] == "Recipe Finder Pro Platform" for r in rows)
    assert all(r.domain == "App Dev" and r.skill_level == "Beginner" for r in rows)


def test_log_generation_swallows_errors():
    broken = MagicMock(side_effect=RuntimeError("connection refused"))
    with patch("backend.services.storage_service.SessionLocal", broken):
        assert asyncio.run(log_generation({"domain": "AIML"})) is False
