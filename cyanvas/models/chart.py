"""Chart ORM — the playable level and root of its asset, tag and like collections.

Invariants:
    - author_id is required; every chart has exactly one owning author
    - variant_id is a nullable self reference; children are derived through
      child_variants, never stored on the parent
    - Deleting a chart deletes its file resources, co-author links, likes and
      tags; deleting a parent nullifies its children's variant_id
    - genre, chart_type and visibility hold the str values of the enums in
      core/domain_types.py
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import String, Text, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cyanvas.core.domain_types import ChartType, Genre, Visibility
from cyanvas.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Chart(Base):
    """Chart entity — a playable level published on the platform."""
    __tablename__ = "charts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    composer: Mapped[str] = mapped_column(String(255), nullable=False)
    artist: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    rating: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    genre: Mapped[str] = mapped_column(
        String(20), nullable=False, default=Genre.OTHERS.value, index=True,
    )
    chart_type: Mapped[str] = mapped_column(
        String(10), nullable=False, default=ChartType.SUS.value,
    )
    author_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True,
    )
    author_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    visibility: Mapped[str] = mapped_column(
        String(10), nullable=False, default=Visibility.PRIVATE.value, index=True,
    )
    published_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    scheduled_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    variant_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("charts.id", ondelete="SET NULL"), nullable=True,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow,
    )

    # Relationships
    author: Mapped["User"] = relationship("User", foreign_keys=[author_id])
    co_authors: Mapped[list["CoAuthor"]] = relationship(
        "CoAuthor", back_populates="chart",
        cascade="all, delete-orphan", order_by="CoAuthor.id",
    )
    file_resources: Mapped[list["FileResource"]] = relationship(
        "FileResource", back_populates="chart",
        cascade="all, delete-orphan", order_by="FileResource.id",
    )
    likes: Mapped[list["Like"]] = relationship(
        "Like", back_populates="chart",
        cascade="all, delete-orphan",
    )
    tags: Mapped[list["Tag"]] = relationship(
        "Tag", back_populates="chart",
        cascade="all, delete-orphan", order_by="Tag.id",
    )
    variant_of: Mapped[Optional["Chart"]] = relationship(
        "Chart", back_populates="child_variants",
        remote_side=[id], foreign_keys=[variant_id],
    )
    child_variants: Mapped[list["Chart"]] = relationship(
        "Chart", back_populates="variant_of",
        foreign_keys=[variant_id], order_by="Chart.id",
    )
