"""SQLAlchemy table definitions for the forum.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# THREAD TABLE
# ============================================================================
thread_table = Table(
    "thread",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("forum", String(255), nullable=False),  # Forum short name
    Column("user", String(255), nullable=False),  # Author email
    Column("title", String(255), nullable=False),
    Column("slug", String(255), nullable=False),
    Column("message", Text, nullable=False),
    Column("date", TIMESTAMP(timezone=False), nullable=False),
    Column("is_closed", Boolean, nullable=False, server_default="false"),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column("dislikes", Integer, nullable=False, server_default="0"),
    Column("points", Integer, nullable=False, server_default="0"),
    Column("posts", Integer, nullable=False, server_default="0"),
)

Index("idx_thread_forum_date", thread_table.c.forum, thread_table.c.date)

# ============================================================================
# POST TABLE
# ============================================================================
post_table = Table(
    "post",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "thread", Integer, ForeignKey("thread.id", ondelete="CASCADE"), nullable=False
    ),
    Column("forum", String(255), nullable=False),  # Forum short name
    Column("user", String(255), nullable=False),  # Author email
    Column("message", Text, nullable=False),
    Column("date", TIMESTAMP(timezone=False), nullable=False),
    Column("parent", Integer, nullable=True),  # NULL for top-level posts
    Column("is_approved", Boolean, nullable=False, server_default="false"),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column("is_highlighted", Boolean, nullable=False, server_default="false"),
    Column("is_spam", Boolean, nullable=False, server_default="false"),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column("dislikes", Integer, nullable=False, server_default="0"),
    Column("points", Integer, nullable=False, server_default="0"),
    # Materialized path, set right after insert
    Column("first_path", Integer, nullable=True),  # Root post id
    # Bytewise collation so ORDER BY matches Python string ordering
    Column(
        "last_path",
        String(collation="C"),
        nullable=False,
        server_default="",
    ),
    CheckConstraint("likes >= 0 AND dislikes >= 0", name="votes_non_negative"),
)

Index(
    "idx_post_thread_path",
    post_table.c.thread,
    post_table.c.first_path,
    post_table.c.last_path,
)
Index("idx_post_thread_date", post_table.c.thread, post_table.c.date)
Index("idx_post_forum_date", post_table.c.forum, post_table.c.date)
