"""SQLAlchemy table definitions for microblog.

These table definitions match the schema defined in Alembic migrations.
Column types are dialect-neutral so the same tables run on PostgreSQL in
production and SQLite in tests.
"""

from sqlalchemy import (
    TIMESTAMP,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (local and provider-linked accounts share one record)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    # NULL while a provider-created account is unclaimed
    Column("handle", String(255), nullable=True),
    # HMAC-SHA256 hex of the provider subject id
    Column("external_proof", String(64), nullable=True),
    Column("email", String(255), nullable=True),
    Column("avatar_ref", Text, nullable=True),
    Column(
        "member_since",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
    UniqueConstraint("handle", name="uq_users_handle"),
    UniqueConstraint("external_proof", name="uq_users_external_proof"),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(300), nullable=False),
    Column("body", Text, nullable=False),
    Column("author_handle", String(255), nullable=False),  # Copied at creation
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
    Column("like_count", Integer, nullable=False, server_default="0"),
    CheckConstraint("like_count >= 0", name="ck_posts_like_count_non_negative"),
)

Index("idx_posts_created_at", posts_table.c.created_at, posts_table.c.id)
Index("idx_posts_like_count", posts_table.c.like_count, posts_table.c.id)
Index("idx_posts_author_handle", posts_table.c.author_handle)

# ============================================================================
# POST_TAGS TABLE (tag strings per post)
# ============================================================================
post_tags_table = Table(
    "post_tags",
    metadata,
    Column(
        "post_id",
        Integer,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("tag", String(50), nullable=False),
    UniqueConstraint("post_id", "tag", name="uq_post_tag"),
)

Index("idx_post_tags_tag", post_tags_table.c.tag)
