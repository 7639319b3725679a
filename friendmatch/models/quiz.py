"""Quiz response model - one row per submission; the newest row per user is authoritative."""

from datetime import datetime

from sqlalchemy import String, DateTime, ForeignKey, JSON, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from friendmatch.db.database import Base


class QuizResponse(Base):
    __tablename__ = "quiz_responses"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(255), ForeignKey("users.id", ondelete="CASCADE"), index=True
    )

    interests: Mapped[list] = mapped_column(JSON, default=list)
    social_style: Mapped[str | None] = mapped_column(String(50), nullable=True)  # solo, small_group, big_group, depends
    friendship_values: Mapped[list] = mapped_column(JSON, default=list)
    communication_style: Mapped[str | None] = mapped_column(String(50), nullable=True)  # texter, planner, spontaneous, low_maintenance
    hangout_vibe: Mapped[list] = mapped_column(JSON, default=list)
    # e.g. {"preset": "weekends", "custom_days": [], "custom_times": []}
    availability: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    dealbreakers: Mapped[list] = mapped_column(JSON, default=list)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    user: Mapped["User"] = relationship(back_populates="quiz_responses")
