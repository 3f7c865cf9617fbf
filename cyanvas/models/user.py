"""User ORM — chart owners and co-authors.

Invariants:
    - handle is unique
    - charts_count is owned by the store: it equals the number of public root
      charts the user authors and is never written by the chart core
    - Alternate accounts (owner_id set) display as x<handle>
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from cyanvas.db.base import Base


class User(Base):
    """Account that can author charts."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    handle: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    owner_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=True,
    )
    charts_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    @property
    def display_handle(self) -> str:
        if self.owner_id is not None:
            return f"x{self.handle}"
        return self.handle

    def to_author_view(self) -> dict:
        """Minimal author representation embedded in chart views."""
        return {
            "handle": self.display_handle,
            "name": self.name,
        }
