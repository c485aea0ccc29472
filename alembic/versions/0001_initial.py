"""generations, flashcards, generation_error_logs

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19 09:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "generations",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("model", sa.Text(), nullable=False),
        sa.Column("generated_count", sa.Integer(), nullable=False),
        sa.Column("accepted_unedited_count", sa.Integer(), nullable=False),
        sa.Column("accepted_edited_count", sa.Integer(), nullable=False),
        sa.Column("source_text_hash", sa.String(length=32), nullable=False),
        sa.Column("source_text_length", sa.Integer(), nullable=False),
        sa.Column("generation_duration", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_generations_user_created", "generations", ["user_id", "created_at"])

    op.create_table(
        "flashcards",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("generation_id", sa.Uuid(), nullable=True),
        sa.Column("front", sa.Text(), nullable=False),
        sa.Column("back", sa.Text(), nullable=False),
        sa.Column("status", sa.String(length=16), nullable=False),
        sa.Column("source", sa.String(length=16), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(
            "(source = 'manual' AND generation_id IS NULL) "
            "OR (source <> 'manual' AND generation_id IS NOT NULL)",
            name="ck_flashcards_source_generation",
        ),
        sa.ForeignKeyConstraint(["generation_id"], ["generations.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_flashcards_user_status", "flashcards", ["user_id", "status"])
    op.create_index("ix_flashcards_generation", "flashcards", ["generation_id"])

    op.create_table(
        "generation_error_logs",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("model", sa.Text(), nullable=False),
        sa.Column("source_text_hash", sa.String(length=32), nullable=False),
        sa.Column("source_text_length", sa.Integer(), nullable=False),
        sa.Column("error_code", sa.String(length=64), nullable=False),
        sa.Column("error_message", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_generation_error_logs_user_created",
        "generation_error_logs",
        ["user_id", "created_at"],
    )


def downgrade() -> None:
    op.drop_index("ix_generation_error_logs_user_created", table_name="generation_error_logs")
    op.drop_table("generation_error_logs")
    op.drop_index("ix_flashcards_generation", table_name="flashcards")
    op.drop_index("ix_flashcards_user_status", table_name="flashcards")
    op.drop_table("flashcards")
    op.drop_index("ix_generations_user_created", table_name="generations")
    op.drop_table("generations")
