from fastapi import APIRouter

from backend.schemas.generate import IdeaOptions

router = APIRouter(prefix="/api", tags=["root"])

@router.get("/")
async def api_root():
    return {"message": "Project Idea Generator API"}

@router.get("/options", response_model=IdeaOptions)
async def idea_options():
    return IdeaOptions()
