# /backend/models/generated_idea.py
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Integer, JSON, DateTime

from backend.core.database import Base


class GeneratedIdea(Base):
    """Audit log of generated ideas. Written once, never read by the app."""
    __tablename__ = "generated_ideas"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    domain: Mapped[str] = mapped_column(String(40))
    skill_level: Mapped[str] = mapped_column(String(20))
    project_type: Mapped[str] = mapped_column(String(40))

    # input merged with the full generated document
    generated_content: Mapped[dict] = mapped_column(JSON)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
