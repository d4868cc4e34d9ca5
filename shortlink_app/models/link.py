from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func
from shortlink_app.database.connection import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Link(Base):
    """
    A short code bound to a target URL, plus click analytics.

    `code` uniqueness is enforced by the table itself, so two concurrent
    creates with the same code cannot both succeed.
    `click_count` and `last_clicked_at` only change through the atomic
    redirect update in LinkStore.
    """
    __tablename__ = "links"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    # Note: unique=True creates the index that backs the constraint
    code = Column(String(8), unique=True, nullable=False, index=True)
    url = Column(Text, nullable=False)
    click_count = Column(Integer, nullable=False, default=0, server_default="0")
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now()
    )
    last_clicked_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<Link {self.code} -> {self.url}>"
