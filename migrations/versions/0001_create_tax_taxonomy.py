"""Create tax taxonomy tables.

Revision ID: 0001
Revises:
Create Date: 2025-01-14 00:00:00+00:00
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def _child_table(name: str, parent_column: str, parent_table: str) -> None:
    op.create_table(
        name,
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column(parent_column, sa.BigInteger(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            [parent_column],
            [f"{parent_table}.id"],
            name=op.f(f"fk_{name}_{parent_column}_{parent_table}"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f(f"pk_{name}")),
    )
    op.create_index(op.f(f"ix_{name}_{parent_column}"), name, [parent_column])


def upgrade() -> None:
    op.create_table(
        "tax_sections",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_tax_sections")),
    )
    _child_table("tax_subsections", "section_id", "tax_sections")
    _child_table("tax_categories", "subsection_id", "tax_subsections")

    op.create_table(
        "tax_subcategories",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("category_id", sa.BigInteger(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("filer_rate", sa.Numeric(precision=5, scale=2), nullable=False),
        sa.Column("non_filer_rate", sa.Numeric(precision=5, scale=2), nullable=False),
        sa.Column("tax_nature", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.CheckConstraint(
            "filer_rate >= 0",
            name=op.f("ck_tax_subcategories_filer_rate_non_negative"),
        ),
        sa.CheckConstraint(
            "non_filer_rate >= 0",
            name=op.f("ck_tax_subcategories_non_filer_rate_non_negative"),
        ),
        sa.ForeignKeyConstraint(
            ["category_id"],
            ["tax_categories.id"],
            name=op.f("fk_tax_subcategories_category_id_tax_categories"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_tax_subcategories")),
    )
    op.create_index(
        op.f("ix_tax_subcategories_category_id"), "tax_subcategories", ["category_id"]
    )


def downgrade() -> None:
    op.drop_table("tax_subcategories")
    op.drop_table("tax_categories")
    op.drop_table("tax_subsections")
    op.drop_table("tax_sections")
