"""Root conftest.py for the TaxCalc test suite.

This file contains project-wide fixtures and pytest configuration.
"""

from collections.abc import Generator
from decimal import Decimal

import pytest

from src.core.config import get_settings
from src.core.context import RequestContext
from src.core.error_context import _get_sensitive_fields
from src.domain.models import Subcategory, TaxonomyNode
from src.domain.store import InMemoryTaxonomyStore


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that test individual components in isolation"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests that test multiple components"
    )


@pytest.fixture(autouse=True)
def clean_lru_cache() -> Generator[None]:
    """Clear cached settings before and after each test."""
    get_settings.cache_clear()
    _get_sensitive_fields.cache_clear()
    yield
    get_settings.cache_clear()
    _get_sensitive_fields.cache_clear()


@pytest.fixture(autouse=True)
def clean_request_context() -> Generator[None]:
    """Ensure no correlation or request ID leaks between tests."""
    RequestContext.clear()
    yield
    RequestContext.clear()


@pytest.fixture
def employees() -> Subcategory:
    """Salary subcategory with a 15% filer and 30% non-filer rate."""
    return Subcategory(
        id=7,
        name="Employees",
        filer_rate=Decimal("15"),
        non_filer_rate=Decimal("30"),
        tax_nature="Final",
    )


@pytest.fixture
def taxonomy_store(employees: Subcategory) -> InMemoryTaxonomyStore:
    """A small taxonomy covering every level.

    Sections: Dividend(2), Property(3), Salary(1)
    Salary -> Employment Income(10) -> Regular Salary(100) -> Employees(7),
    Contract Staff(8)
    """
    store = InMemoryTaxonomyStore()
    store.add_section(TaxonomyNode(id=1, name="Salary"))
    store.add_section(TaxonomyNode(id=2, name="Dividend"))
    store.add_section(TaxonomyNode(id=3, name="Property"))

    store.add_subsection(1, TaxonomyNode(id=10, name="Employment Income"))
    store.add_subsection(1, TaxonomyNode(id=11, name="Bonus"))
    store.add_subsection(2, TaxonomyNode(id=20, name="Listed Companies"))

    store.add_category(10, TaxonomyNode(id=100, name="Regular Salary"))

    store.add_subcategory(100, employees)
    store.add_subcategory(
        100,
        Subcategory(
            id=8,
            name="Contract Staff",
            filer_rate=Decimal("10.5"),
            non_filer_rate=Decimal("21"),
            tax_nature="Adjustable",
        ),
    )
    return store
