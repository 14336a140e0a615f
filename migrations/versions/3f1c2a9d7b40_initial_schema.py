"""initial_schema

Create the forum schema:
- Threads (per-forum discussions with vote and post counters)
- Posts (replies nested through a materialized path:
  first_path = root post id, last_path = ".001.004" style suffix)

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # THREAD table
    # ========================================================================
    op.create_table(
        "thread",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("forum", sa.String(length=255), nullable=False),
        sa.Column("user", sa.String(length=255), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("slug", sa.String(length=255), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("date", postgresql.TIMESTAMP(timezone=False), nullable=False),
        sa.Column(
            "is_closed", sa.Boolean(), server_default="false", nullable=False
        ),
        sa.Column(
            "is_deleted", sa.Boolean(), server_default="false", nullable=False
        ),
        sa.Column("likes", sa.Integer(), server_default="0", nullable=False),
        sa.Column("dislikes", sa.Integer(), server_default="0", nullable=False),
        sa.Column("points", sa.Integer(), server_default="0", nullable=False),
        sa.Column("posts", sa.Integer(), server_default="0", nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_thread_forum_date", "thread", ["forum", "date"])

    # ========================================================================
    # POST table
    # ========================================================================
    op.create_table(
        "post",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("thread", sa.Integer(), nullable=False),
        sa.Column("forum", sa.String(length=255), nullable=False),
        sa.Column("user", sa.String(length=255), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("date", postgresql.TIMESTAMP(timezone=False), nullable=False),
        sa.Column("parent", sa.Integer(), nullable=True),
        sa.Column(
            "is_approved", sa.Boolean(), server_default="false", nullable=False
        ),
        sa.Column(
            "is_deleted", sa.Boolean(), server_default="false", nullable=False
        ),
        sa.Column(
            "is_edited", sa.Boolean(), server_default="false", nullable=False
        ),
        sa.Column(
            "is_highlighted", sa.Boolean(), server_default="false", nullable=False
        ),
        sa.Column("is_spam", sa.Boolean(), server_default="false", nullable=False),
        sa.Column("likes", sa.Integer(), server_default="0", nullable=False),
        sa.Column("dislikes", sa.Integer(), server_default="0", nullable=False),
        sa.Column("points", sa.Integer(), server_default="0", nullable=False),
        sa.Column("first_path", sa.Integer(), nullable=True),
        # "C" collation: byte order, so "." sorts before digits
        sa.Column(
            "last_path",
            sa.String(collation="C"),
            server_default="",
            nullable=False,
        ),
        sa.CheckConstraint(
            "likes >= 0 AND dislikes >= 0", name="votes_non_negative"
        ),
        sa.ForeignKeyConstraint(["thread"], ["thread.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )

    # Tree listings: WHERE thread = ? ORDER BY first_path, last_path
    op.create_index(
        "idx_post_thread_path", "post", ["thread", "first_path", "last_path"]
    )
    # Flat listings: WHERE thread = ? ORDER BY date
    op.create_index("idx_post_thread_date", "post", ["thread", "date"])
    op.create_index("idx_post_forum_date", "post", ["forum", "date"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_post_forum_date", table_name="post")
    op.drop_index("idx_post_thread_date", table_name="post")
    op.drop_index("idx_post_thread_path", table_name="post")
    op.drop_table("post")
    op.drop_index("idx_thread_forum_date", table_name="thread")
    op.drop_table("thread")
