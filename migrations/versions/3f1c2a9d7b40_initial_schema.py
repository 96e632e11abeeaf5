"""initial_schema

Create the microblog schema:
- Users (local handles and Google-linked accounts in one table)
- Posts (with an atomic like counter)
- Post tags (plain strings per post)

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-19 10:12:04.318226

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("handle", sa.String(255), nullable=True),
        sa.Column("external_proof", sa.String(64), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("avatar_ref", sa.Text(), nullable=True),
        sa.Column(
            "member_since",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.UniqueConstraint("handle", name="uq_users_handle"),
        sa.UniqueConstraint("external_proof", name="uq_users_external_proof"),
    )

    # ========================================================================
    # POSTS
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("author_handle", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column("like_count", sa.Integer(), nullable=False, server_default="0"),
        sa.CheckConstraint(
            "like_count >= 0", name="ck_posts_like_count_non_negative"
        ),
    )
    op.create_index("idx_posts_created_at", "posts", ["created_at", "id"])
    op.create_index("idx_posts_like_count", "posts", ["like_count", "id"])
    op.create_index("idx_posts_author_handle", "posts", ["author_handle"])

    # ========================================================================
    # POST TAGS
    # ========================================================================
    op.create_table(
        "post_tags",
        sa.Column(
            "post_id",
            sa.Integer(),
            sa.ForeignKey("posts.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("tag", sa.String(50), nullable=False),
        sa.UniqueConstraint("post_id", "tag", name="uq_post_tag"),
    )
    op.create_index("idx_post_tags_tag", "post_tags", ["tag"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_post_tags_tag", table_name="post_tags")
    op.drop_table("post_tags")
    op.drop_index("idx_posts_author_handle", table_name="posts")
    op.drop_index("idx_posts_like_count", table_name="posts")
    op.drop_index("idx_posts_created_at", table_name="posts")
    op.drop_table("posts")
    op.drop_table("users")
