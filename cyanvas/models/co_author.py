"""CoAuthor ORM — link between a chart and an additional credited user."""

from sqlalchemy import Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cyanvas.db.base import Base


class CoAuthor(Base):
    """Chart <-> User co-authorship link."""
    __tablename__ = "co_authors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    chart_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("charts.id", ondelete="CASCADE"), nullable=False,
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )

    chart: Mapped["Chart"] = relationship("Chart", back_populates="co_authors")
    user: Mapped["User"] = relationship("User")
