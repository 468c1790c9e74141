"""Value types for the tax taxonomy and computation results.

Money and percentages are ``Decimal`` so that ``tax_amount + net_amount``
always equals ``gross_amount`` exactly.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Self

from src.core.exceptions import InvalidArgumentError


class FilerStatus(Enum):
    """Taxpayer classification that selects which rate applies."""

    FILER = "filer"
    NON_FILER = "non-filer"

    @classmethod
    def parse(cls, token: object) -> Self:
        """Parse a client supplied status token.

        Case and surrounding whitespace are ignored. Any token other than
        ``filer`` or ``non-filer`` is rejected rather than defaulting to
        the non-filer rate.

        Args:
            token: Raw status value, usually a string or a ``FilerStatus``.

        Returns:
            FilerStatus: The matching member.

        Raises:
            InvalidArgumentError: If the token is missing or unrecognized.
        """
        if isinstance(token, cls):
            return token
        if token is None or (isinstance(token, str) and not token.strip()):
            raise InvalidArgumentError(
                "Missing required parameters", context={"field": "filerStatus"}
            )
        if isinstance(token, str):
            normalized = token.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        raise InvalidArgumentError(
            "Filer status must be 'filer' or 'non-filer'",
            context={"field": "filerStatus", "value": str(token)},
        )


def parse_entity_id(value: object, field: str) -> int:
    """Validate a taxonomy identifier.

    Args:
        value: An ``int`` or a string of digits.
        field: Field name reported in the error context.

    Returns:
        int: The identifier.

    Raises:
        InvalidArgumentError: If the value is missing, not an integer or
            not positive.
    """
    if value is None or value == "":
        raise InvalidArgumentError(
            "Missing required parameters", context={"field": field}
        )

    entity_id: int | None = None
    if isinstance(value, int) and not isinstance(value, bool):
        entity_id = value
    elif isinstance(value, str) and value.strip().isdigit():
        entity_id = int(value.strip())

    if entity_id is None or entity_id <= 0:
        raise InvalidArgumentError(
            f"{field} must be a positive integer identifier",
            context={"field": field, "value": str(value)},
        )
    return entity_id


@dataclass(frozen=True, slots=True)
class TaxonomyNode:
    """A navigation node: section, subsection or category."""

    id: int
    name: str


@dataclass(frozen=True, slots=True)
class Subcategory:
    """Leaf of the taxonomy, the only level that carries rates."""

    id: int
    name: str
    filer_rate: Decimal
    non_filer_rate: Decimal
    tax_nature: str

    def rate_for(self, status: FilerStatus) -> Decimal:
        """Return the percentage rate applicable to ``status``."""
        if status is FilerStatus.FILER:
            return self.filer_rate
        return self.non_filer_rate


@dataclass(frozen=True, slots=True)
class TaxComputation:
    """Result of applying a subcategory rate to a gross amount."""

    gross_amount: Decimal
    tax_rate: Decimal
    tax_amount: Decimal
    net_amount: Decimal
    tax_nature: str
