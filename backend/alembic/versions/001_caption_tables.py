"""Initial migration: create caption_session, caption, caption_template tables

Revision ID: 001_caption_tables
Revises:
Create Date: 2026-10-17 00:00:00.000000

"""

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "001_caption_tables"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "caption_session",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("core_message", sa.String(), nullable=True),
        sa.Column("target_audience", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_caption_session_user_id", "caption_session", ["user_id"])

    op.create_table(
        "caption",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("session_id", sa.String(), nullable=False),
        sa.Column("platform", sa.String(), nullable=True),
        sa.Column("tone", sa.String(), nullable=True),
        sa.Column("variant_label", sa.String(), nullable=True),
        sa.Column("caption_text", sa.String(), nullable=False),
        sa.Column("hashtags", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["session_id"],
            ["caption_session.id"],
        ),
    )
    op.create_index("ix_caption_session_id", "caption", ["session_id"])

    # user_id NULL -> global template visible to everyone
    op.create_table(
        "caption_template",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("platform", sa.String(), nullable=True),
        sa.Column("tone", sa.String(), nullable=True),
        sa.Column("body", sa.String(), nullable=False),
        sa.Column("is_system", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_caption_template_user_id", "caption_template", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_caption_template_user_id", table_name="caption_template")
    op.drop_table("caption_template")
    op.drop_index("ix_caption_session_id", table_name="caption")
    op.drop_table("caption")
    op.drop_index("ix_caption_session_user_id", table_name="caption_session")
    op.drop_table("caption_session")
