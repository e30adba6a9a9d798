# FILE: backend/api/generate.py
import logging

from fastapi import APIRouter, BackgroundTasks

from backend.schemas.generate import (
    ErrorResponse,
    IdeaInput,
    ProjectIdea,
    ValidationErrorResponse,
)
from backend.services.idea_service import generate_project
from backend.services.storage_service import log_generation

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["generate"])


@router.post(
    "/generate",
    response_model=ProjectIdea,
    response_model_exclude_none=True,
    responses={400: {"model": ValidationErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_idea(payload: IdeaInput, background_tasks: BackgroundTasks):
    idea = generate_project(payload)
    logger.info(
        "Generated idea %r (%s / %s / %s / %s)",
        idea.title, payload.domain, payload.language, payload.skill_level, payload.project_type,
    )

    # audit log runs after the response is sent; failures never reach the client
    record = {
        **payload.model_dump(by_alias=True),
        **idea.model_dump(by_alias=True, exclude_none=True),
    }
    background_tasks.add_task(log_generation, record)

    return idea
