# FILE: backend/services/storage_service.py
import logging
from typing import Any, Dict

from backend.core.database import SessionLocal
from backend.models.generated_idea import GeneratedIdea

logger = logging.getLogger(__name__)


async def log_generation(record: Dict[str, Any]) -> bool:
    """
    Best-effort audit insert. Never raises; returns False when the row was not written.
    `record` is the request input merged with the generated idea (camelCase keys).
    """
    try:
        async with SessionLocal() as session:
            session.add(
                GeneratedIdea(
                    domain=record.get("domain") or "Unknown",
                    skill_level=record.get("skillLevel") or "Unknown",
                    project_type=record.get("projectType") or "Unknown",
                    generated_content=record,
                )
            )
            await session.commit()
        return True
    except Exception:
        logger.exception("Failed to log generation")
        return False
