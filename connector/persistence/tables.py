"""SQLAlchemy table definitions for Connector.

They match the schema defined in Alembic migrations. Posts and profiles
are stored one row per aggregate; their nested collections live in JSONB
columns and are rewritten together with the row.
"""

from sqlalchemy import Column, ForeignKey, Index, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),  # Normalized lowercase
    Column("avatar", Text, nullable=True),
    Column("password_hash", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# PROFILES TABLE (one per user)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    ),
    Column("status", String(255), nullable=False),
    Column("company", String(255), nullable=True),
    Column("website", Text, nullable=True),
    Column("location", String(255), nullable=True),
    Column("bio", Text, nullable=True),
    Column("github_username", String(255), nullable=True),
    Column("skills", JSONB, nullable=False, server_default="[]"),
    Column("social", JSONB, nullable=False, server_default="{}"),
    Column("experience", JSONB, nullable=False, server_default="[]"),
    Column("education", JSONB, nullable=False, server_default="[]"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("name", String(255), nullable=False),  # Denormalized from users
    Column("avatar", Text, nullable=True),  # Denormalized from users
    Column("text", Text, nullable=False),
    Column("likes", JSONB, nullable=False, server_default="[]"),
    Column("comments", JSONB, nullable=False, server_default="[]"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_created_at", posts_table.c.created_at)
