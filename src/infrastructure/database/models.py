"""ORM models for the four taxonomy tables.

    tax_sections
      └── tax_subsections.section_id
            └── tax_categories.subsection_id
                  └── tax_subcategories.category_id  (rates, tax nature)

Only subcategories carry rate data. Referential integrity is enforced by
foreign keys; the service itself never writes to these tables.
"""

from decimal import Decimal

from sqlalchemy import BigInteger, CheckConstraint, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.database.base import BaseModel

NAME_LENGTH = 255
RATE_PRECISION = 5
RATE_SCALE = 2


class TaxSection(BaseModel):
    """Root level of the taxonomy."""

    __tablename__ = "tax_sections"

    name: Mapped[str] = mapped_column(String(NAME_LENGTH), nullable=False)


class TaxSubsection(BaseModel):
    """Second level, owned by a section."""

    __tablename__ = "tax_subsections"

    section_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("tax_sections.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(NAME_LENGTH), nullable=False)


class TaxCategory(BaseModel):
    """Third level, owned by a subsection."""

    __tablename__ = "tax_categories"

    subsection_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("tax_subsections.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(NAME_LENGTH), nullable=False)


class TaxSubcategory(BaseModel):
    """Leaf level holding the filer and non-filer percentage rates."""

    __tablename__ = "tax_subcategories"
    __table_args__ = (
        CheckConstraint("filer_rate >= 0", name="filer_rate_non_negative"),
        CheckConstraint("non_filer_rate >= 0", name="non_filer_rate_non_negative"),
    )

    category_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("tax_categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(NAME_LENGTH), nullable=False)
    filer_rate: Mapped[Decimal] = mapped_column(
        Numeric(RATE_PRECISION, RATE_SCALE), nullable=False
    )
    non_filer_rate: Mapped[Decimal] = mapped_column(
        Numeric(RATE_PRECISION, RATE_SCALE), nullable=False
    )
    tax_nature: Mapped[str] = mapped_column(String(NAME_LENGTH), nullable=False)
