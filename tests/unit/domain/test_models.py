"""Unit tests for taxonomy value types and input parsing."""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from src.core.exceptions import InvalidArgumentError
from src.domain.models import FilerStatus, Subcategory, parse_entity_id


@pytest.mark.unit
class TestFilerStatus:
    """Test filer status parsing."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("filer", FilerStatus.FILER),
            ("non-filer", FilerStatus.NON_FILER),
            ("  Filer ", FilerStatus.FILER),
            ("NON-FILER", FilerStatus.NON_FILER),
            (FilerStatus.NON_FILER, FilerStatus.NON_FILER),
        ],
    )
    def test_valid_tokens(self, token: object, expected: FilerStatus) -> None:
        assert FilerStatus.parse(token) is expected

    @pytest.mark.parametrize("token", [None, "", "   "])
    def test_missing(self, token: object) -> None:
        with pytest.raises(InvalidArgumentError, match="Missing required parameters"):
            FilerStatus.parse(token)

    @pytest.mark.parametrize("token", ["nonfiler", "exempt", "Filer!", 1, True])
    def test_unknown_is_rejected(self, token: object) -> None:
        with pytest.raises(
            InvalidArgumentError, match="Filer status must be 'filer' or 'non-filer'"
        ) as exc_info:
            FilerStatus.parse(token)

        assert exc_info.value.context["field"] == "filerStatus"


@pytest.mark.unit
class TestParseEntityId:
    """Test identifier validation."""

    @pytest.mark.parametrize(
        ("value", "expected"), [(1, 1), (42, 42), ("7", 7), (" 12 ", 12)]
    )
    def test_valid(self, value: object, expected: int) -> None:
        assert parse_entity_id(value, "sectionId") == expected

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing(self, value: object) -> None:
        with pytest.raises(InvalidArgumentError, match="Missing required parameters"):
            parse_entity_id(value, "categoryId")

    @pytest.mark.parametrize("value", [0, -3, "abc", "1.5", 2.0, True, "-1"])
    def test_invalid(self, value: object) -> None:
        with pytest.raises(
            InvalidArgumentError, match="categoryId must be a positive integer"
        ):
            parse_entity_id(value, "categoryId")


@pytest.mark.unit
class TestSubcategory:
    """Test the leaf value type."""

    def test_rate_for(self, employees: Subcategory) -> None:
        assert employees.rate_for(FilerStatus.FILER) == Decimal("15")
        assert employees.rate_for(FilerStatus.NON_FILER) == Decimal("30")

    def test_is_immutable(self, employees: Subcategory) -> None:
        with pytest.raises(FrozenInstanceError):
            employees.filer_rate = Decimal("0")  # type: ignore[misc]
