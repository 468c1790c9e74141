"""Shared fixtures for database unit tests."""

from datetime import UTC, datetime
from decimal import Decimal

import pytest
from pytest_mock import MockerFixture, MockType
from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.database.models import TaxSection, TaxSubcategory


@pytest.fixture
def mock_session(mocker: MockerFixture) -> MockType:
    """AsyncSession double whose ``execute`` is awaitable."""
    session = mocker.AsyncMock(spec=AsyncSession)
    return session


def result_with_rows(mocker: MockerFixture, rows: list[object]) -> MockType:
    """Build an ``execute`` result returning ``rows``."""
    result = mocker.MagicMock()
    result.scalars.return_value.all.return_value = rows
    result.scalar_one_or_none.return_value = rows[0] if rows else None
    return result


@pytest.fixture
def section_rows() -> list[TaxSection]:
    now = datetime.now(UTC)
    return [
        TaxSection(id=2, name="Dividend", created_at=now, updated_at=now),
        TaxSection(id=1, name="Salary", created_at=now, updated_at=now),
    ]


@pytest.fixture
def subcategory_row() -> TaxSubcategory:
    now = datetime.now(UTC)
    return TaxSubcategory(
        id=7,
        category_id=100,
        name="Employees",
        filer_rate=Decimal("15.00"),
        non_filer_rate=Decimal("30.00"),
        tax_nature="Final",
        created_at=now,
        updated_at=now,
    )
