"""Minister profile sections: children, contacts, education, ministry history and records.

Revision ID: 20261019100000
Revises: 20261019000000
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20261019100000"
down_revision: Union[str, None] = "20261019000000"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SECTION_TABLES = (
    "minister_children",
    "minister_emergency_contacts",
    "minister_education_backgrounds",
    "minister_ministry_experiences",
    "minister_ministry_skills",
    "minister_ministry_records",
    "minister_awards_recognitions",
    "minister_employment_records",
    "minister_seminars_conferences",
    "minister_case_reports",
)


def _section_columns(table: str) -> list:
    return [
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("minister_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["minister_id"],
            ["ministers.id"],
            name=f"{table}_minister_id_ministers_id_fk",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id"),
    ]


def upgrade() -> None:
    op.create_table(
        "minister_children",
        *_section_columns("minister_children"),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("place_of_birth", sa.Text(), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.Column("gender", sa.String(length=16), nullable=False),
    )
    op.create_table(
        "minister_emergency_contacts",
        *_section_columns("minister_emergency_contacts"),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("relationship", sa.Text(), nullable=False),
        sa.Column("address", sa.Text(), nullable=False),
        sa.Column("contact_number", sa.String(length=64), nullable=False),
    )
    op.create_table(
        "minister_education_backgrounds",
        *_section_columns("minister_education_backgrounds"),
        sa.Column("school_name", sa.Text(), nullable=False),
        sa.Column("educational_attainment", sa.Text(), nullable=False),
        sa.Column("date_graduated", sa.Date(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("course", sa.Text(), nullable=True),
    )
    op.create_table(
        "minister_ministry_experiences",
        *_section_columns("minister_ministry_experiences"),
        sa.Column("ministry_rank_id", sa.Integer(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("from_year", sa.String(length=16), nullable=False),
        sa.Column("to_year", sa.String(length=16), nullable=True),
        sa.ForeignKeyConstraint(["ministry_rank_id"], ["ministry_ranks.id"], name="minister_experiences_rank_id_fk"),
    )
    op.create_table(
        "minister_ministry_skills",
        *_section_columns("minister_ministry_skills"),
        sa.Column("ministry_skill_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["ministry_skill_id"], ["ministry_skills.id"], name="minister_skills_skill_id_fk"),
    )
    op.create_table(
        "minister_ministry_records",
        *_section_columns("minister_ministry_records"),
        sa.Column("church_location_id", sa.Integer(), nullable=False),
        sa.Column("from_year", sa.String(length=16), nullable=False),
        sa.Column("to_year", sa.String(length=16), nullable=True),
        sa.Column("contribution", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["church_location_id"], ["churches.id"], name="minister_records_church_id_fk"),
    )
    op.create_table(
        "minister_awards_recognitions",
        *_section_columns("minister_awards_recognitions"),
        sa.Column("year", sa.String(length=16), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
    )
    op.create_table(
        "minister_employment_records",
        *_section_columns("minister_employment_records"),
        sa.Column("company_name", sa.Text(), nullable=False),
        sa.Column("from_year", sa.String(length=16), nullable=False),
        sa.Column("to_year", sa.String(length=16), nullable=True),
        sa.Column("position", sa.Text(), nullable=False),
    )
    op.create_table(
        "minister_seminars_conferences",
        *_section_columns("minister_seminars_conferences"),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("place", sa.Text(), nullable=True),
        sa.Column("year", sa.String(length=16), nullable=False),
        sa.Column("number_of_hours", sa.Integer(), nullable=False),
    )
    op.create_table(
        "minister_case_reports",
        *_section_columns("minister_case_reports"),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("year", sa.String(length=16), nullable=False),
    )
    for table in SECTION_TABLES:
        op.create_index(op.f(f"ix_{table}_minister_id"), table, ["minister_id"], unique=False)


def downgrade() -> None:
    for table in reversed(SECTION_TABLES):
        op.drop_index(op.f(f"ix_{table}_minister_id"), table_name=table)
        op.drop_table(table)
