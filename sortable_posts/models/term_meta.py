"""Key/value metadata attached to terms."""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sortable_posts.models.base import Base


class TermMeta(Base):
    """One metadata attribute of a term, e.g. its ``term_order`` position."""

    __tablename__ = "termmeta"
    __table_args__ = (UniqueConstraint("term_id", "meta_key", name="uq_termmeta_term_key"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    term_id: Mapped[str] = mapped_column(
        String(255), ForeignKey("terms.id", ondelete="CASCADE"), nullable=False, index=True
    )
    meta_key: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    meta_value: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Relationships
    term: Mapped["Term"] = relationship("Term", back_populates="meta")

    def __repr__(self) -> str:
        return f"<TermMeta(term_id={self.term_id!r}, meta_key={self.meta_key!r}, meta_value={self.meta_value!r})>"
