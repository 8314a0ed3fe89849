"""Initial schema: users, churches, members, ministers, catalogues and site content.

Revision ID: 20261019000000
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20261019000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        *_timestamps(),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("role IN ('admin', 'user')", name="ck_users_role"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "churches",
        *_timestamps(),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("link", sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    op.create_table(
        "members",
        *_timestamps(),
        sa.Column("church_id", sa.Integer(), nullable=False),
        sa.Column("profile_picture", sa.Text(), nullable=True),
        sa.Column("first_name", sa.String(length=255), nullable=False),
        sa.Column("last_name", sa.String(length=255), nullable=False),
        sa.Column("middle_name", sa.String(length=255), nullable=True),
        sa.Column("gender", sa.String(length=16), nullable=False),
        sa.Column("birthdate", sa.Date(), nullable=False),
        sa.Column("year_joined", sa.Integer(), nullable=False),
        sa.Column("ministry_involvement", sa.Text(), nullable=True),
        sa.Column("occupation", sa.Text(), nullable=True),
        sa.Column("educational_attainment", sa.Text(), nullable=True),
        sa.Column("school", sa.Text(), nullable=True),
        sa.Column("degree", sa.Text(), nullable=True),
        sa.Column("mobile_number", sa.String(length=64), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("home_address", sa.Text(), nullable=True),
        sa.Column("facebook_link", sa.Text(), nullable=True),
        sa.Column("x_link", sa.Text(), nullable=True),
        sa.Column("instagram_link", sa.Text(), nullable=True),
        sa.Column("tiktok_link", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(["church_id"], ["churches.id"], name="members_church_id_churches_id_fk"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_members_church_id"), "members", ["church_id"], unique=False)

    op.create_table(
        "ministers",
        *_timestamps(),
        sa.Column("church_id", sa.Integer(), nullable=False),
        sa.Column("first_name", sa.String(length=255), nullable=False),
        sa.Column("last_name", sa.String(length=255), nullable=False),
        sa.Column("middle_name", sa.String(length=255), nullable=True),
        sa.Column("suffix", sa.String(length=32), nullable=True),
        sa.Column("nickname", sa.String(length=255), nullable=True),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.Column("place_of_birth", sa.Text(), nullable=False),
        sa.Column("address", sa.Text(), nullable=False),
        sa.Column("gender", sa.String(length=16), nullable=False),
        sa.Column("civil_status", sa.String(length=32), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("telephone", sa.String(length=64), nullable=True),
        sa.Column("biography", sa.Text(), nullable=True),
        sa.Column("present_address", sa.Text(), nullable=True),
        sa.Column("permanent_address", sa.Text(), nullable=True),
        sa.Column("skills", sa.Text(), nullable=True),
        sa.Column("hobbies", sa.Text(), nullable=True),
        sa.Column("certified_by", sa.Text(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("signature_image_url", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["church_id"], ["churches.id"], name="ministers_church_id_churches_id_fk"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_ministers_church_id"), "ministers", ["church_id"], unique=False)

    for table in ("ministry_ranks", "ministry_skills"):
        op.create_table(
            table,
            *_timestamps(),
            sa.Column("name", sa.String(length=100), nullable=False),
            sa.Column("description", sa.Text(), nullable=table == "ministry_ranks"),
            sa.PrimaryKeyConstraint("id"),
            sa.UniqueConstraint("name"),
        )

    op.create_table(
        "church_events",
        *_timestamps(),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("place", sa.Text(), nullable=False),
        sa.Column("datetime", sa.DateTime(timezone=True), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_church_events_datetime"), "church_events", ["datetime"], unique=False)

    op.create_table(
        "church_cover_photos",
        *_timestamps(),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("cover_image", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "contact_us",
        *_timestamps(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("contact_number", sa.String(length=64), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("contact_us")
    op.drop_table("church_cover_photos")
    op.drop_index(op.f("ix_church_events_datetime"), table_name="church_events")
    op.drop_table("church_events")
    op.drop_table("ministry_skills")
    op.drop_table("ministry_ranks")
    op.drop_index(op.f("ix_ministers_church_id"), table_name="ministers")
    op.drop_table("ministers")
    op.drop_index(op.f("ix_members_church_id"), table_name="members")
    op.drop_table("members")
    op.drop_table("churches")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
