"""Taxonomy term model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sortable_posts.models.base import Base, TimestampMixin


class Term(Base, TimestampMixin):
    """Term model representing an entry of a taxonomy (category, tag, ...)."""

    __tablename__ = "terms"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    taxonomy: Mapped[str] = mapped_column(String(32), nullable=False, default="category", index=True)

    # Relationships
    meta: Mapped[list["TermMeta"]] = relationship(
        "TermMeta", back_populates="term", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Term(id={self.id!r}, name={self.name!r}, taxonomy={self.taxonomy!r})>"
