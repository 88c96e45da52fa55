"""Post model ordered by a sequential menu_order column."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from sortable_posts.models.base import Base, TimestampMixin


class Post(Base, TimestampMixin):
    """Post model; display order is the integer ``menu_order``."""

    __tablename__ = "posts"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    post_type: Mapped[str] = mapped_column(String(20), nullable=False, default="post", index=True)
    menu_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)

    def __repr__(self) -> str:
        return f"<Post(id={self.id!r}, title={self.title!r}, menu_order={self.menu_order!r})>"
