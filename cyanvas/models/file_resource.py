"""FileResource ORM — an asset attached to exactly one chart.

Invariants:
    - kind is one of the nine ResourceKind values
    - sha1 is the content fingerprint, url the retrieval URL (signed upstream)
    - At most one resource per (chart, kind) is expected; not enforced by a
      constraint, resolve_resources() takes the lowest id on duplicates
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cyanvas.db.base import Base


class FileResource(Base):
    """Asset slot filler (chart, bgm, cover, preview, data, backgrounds)."""
    __tablename__ = "file_resources"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    chart_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("charts.id", ondelete="CASCADE"), nullable=False,
        index=True,
    )
    kind: Mapped[str] = mapped_column(String(32), nullable=False)
    sha1: Mapped[str] = mapped_column(String(40), nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    chart: Mapped["Chart"] = relationship(
        "Chart", back_populates="file_resources",
    )

    def to_asset_ref(self) -> dict[str, str]:
        return {"hash": self.sha1, "url": self.url}
