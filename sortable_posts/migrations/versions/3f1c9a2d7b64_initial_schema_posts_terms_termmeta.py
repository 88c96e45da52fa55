"""Initial schema: posts, terms, termmeta

Revision ID: 3f1c9a2d7b64
Revises:
Create Date: 2026-10-17 12:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "3f1c9a2d7b64"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Detect database type
    bind = op.get_bind()
    is_sqlite = bind.dialect.name == "sqlite"

    # Use appropriate timestamp defaults
    if is_sqlite:
        now_default = sa.text("(datetime('now'))")
        timestamp_type = sa.DateTime()
    else:
        now_default = sa.text("now()")
        timestamp_type = sa.DateTime(timezone=True)

    op.create_table(
        "posts",
        sa.Column("id", sa.String(length=255), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("post_type", sa.String(length=20), nullable=False),
        sa.Column("menu_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", timestamp_type, server_default=now_default, nullable=False),
        sa.Column("updated_at", timestamp_type, server_default=now_default, nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_posts_post_type"), "posts", ["post_type"], unique=False)
    op.create_index(op.f("ix_posts_menu_order"), "posts", ["menu_order"], unique=False)

    op.create_table(
        "terms",
        sa.Column("id", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("taxonomy", sa.String(length=32), nullable=False),
        sa.Column("created_at", timestamp_type, server_default=now_default, nullable=False),
        sa.Column("updated_at", timestamp_type, server_default=now_default, nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_terms_taxonomy"), "terms", ["taxonomy"], unique=False)

    op.create_table(
        "termmeta",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("term_id", sa.String(length=255), nullable=False),
        sa.Column("meta_key", sa.String(length=255), nullable=False),
        sa.Column("meta_value", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(
            ["term_id"],
            ["terms.id"],
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("term_id", "meta_key", name="uq_termmeta_term_key"),
    )
    op.create_index(op.f("ix_termmeta_term_id"), "termmeta", ["term_id"], unique=False)
    op.create_index(op.f("ix_termmeta_meta_key"), "termmeta", ["meta_key"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_termmeta_meta_key"), table_name="termmeta")
    op.drop_index(op.f("ix_termmeta_term_id"), table_name="termmeta")
    op.drop_table("termmeta")

    op.drop_index(op.f("ix_terms_taxonomy"), table_name="terms")
    op.drop_table("terms")

    op.drop_index(op.f("ix_posts_menu_order"), table_name="posts")
    op.drop_index(op.f("ix_posts_post_type"), table_name="posts")
    op.drop_table("posts")
