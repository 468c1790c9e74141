"""Tax computation: resolve a subcategory rate and apply it to an amount.

The arithmetic is::

    tax_rate   = filer_rate if status is FILER else non_filer_rate
    tax_amount = gross_amount * tax_rate / 100
    net_amount = gross_amount - tax_amount

No rounding is applied. Amounts stay ``Decimal`` end to end.
"""

from decimal import Decimal, InvalidOperation

from loguru import logger

from src.core.exceptions import InvalidArgumentError, NotFoundError
from src.core.observability import trace_operation
from src.domain.models import (
    FilerStatus,
    Subcategory,
    TaxComputation,
    parse_entity_id,
)
from src.domain.store import TaxonomyStore

HUNDRED = Decimal(100)


def validate_gross_amount(value: object) -> Decimal:
    """Convert a client supplied gross amount to a finite, non-negative Decimal.

    Args:
        value: ``Decimal``, ``int``, ``float`` or a numeric string.

    Returns:
        Decimal: The validated amount.

    Raises:
        InvalidArgumentError: If the amount is missing, non-numeric,
            non-finite or negative.
    """
    if value is None or value == "":
        raise InvalidArgumentError(
            "Missing required parameters", context={"field": "grossAmount"}
        )

    amount: Decimal | None = None
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int) and not isinstance(value, bool):
        amount = Decimal(value)
    elif isinstance(value, float):
        # str() keeps the shortest repr, so 0.1 stays 0.1
        amount = Decimal(str(value))
    elif isinstance(value, str):
        try:
            amount = Decimal(value.strip())
        except InvalidOperation:
            amount = None

    if amount is None or not amount.is_finite() or amount < 0:
        raise InvalidArgumentError(
            "Gross amount must be a non-negative number",
            context={"field": "grossAmount", "value": str(value)},
        )
    return amount


def calculate_tax(
    subcategory: Subcategory, status: FilerStatus, gross_amount: Decimal
) -> TaxComputation:
    """Apply the rate for ``status`` to ``gross_amount``.

    Args:
        subcategory: Leaf node holding both rates and the tax nature.
        status: Filer status selecting the rate.
        gross_amount: Validated, non-negative amount.

    Returns:
        TaxComputation: Gross, rate, tax, net and the unchanged tax nature.
    """
    tax_rate = subcategory.rate_for(status)
    tax_amount = gross_amount * tax_rate / HUNDRED
    return TaxComputation(
        gross_amount=gross_amount,
        tax_rate=tax_rate,
        tax_amount=tax_amount,
        net_amount=gross_amount - tax_amount,
        tax_nature=subcategory.tax_nature,
    )


class TaxComputationService:
    """Validates a computation request, looks up the leaf and computes tax.

    Args:
        store: Backing store used to resolve subcategories.
    """

    def __init__(self, store: TaxonomyStore) -> None:
        self.store = store

    async def compute_tax(
        self,
        subcategory_id: int | str | None,
        filer_status: FilerStatus | str | None,
        gross_amount: Decimal | int | float | str | None,
    ) -> TaxComputation:
        """Compute the tax due for one subcategory.

        All inputs are validated before the store is queried.

        Args:
            subcategory_id: Identifier of the leaf node.
            filer_status: ``FilerStatus`` or its string token.
            gross_amount: Amount the rate is applied to.

        Returns:
            TaxComputation: The computed amounts.

        Raises:
            InvalidArgumentError: If any input fails validation.
            NotFoundError: If no subcategory has ``subcategory_id``.
            StoreUnavailableError: If the store cannot be read.
        """
        subcategory_id = parse_entity_id(subcategory_id, "subCategoryId")
        status = FilerStatus.parse(filer_status)
        amount = validate_gross_amount(gross_amount)

        logger.info(
            "Computing tax - subcategory: {}, filer status: {}, gross amount: {}",
            subcategory_id,
            status.value,
            amount,
        )

        with trace_operation(
            "tax.compute", subcategory_id=subcategory_id, filer_status=status.value
        ):
            subcategory = await self.store.get_subcategory(subcategory_id)
            if subcategory is None:
                logger.warning("No tax subcategory found for ID: {}", subcategory_id)
                raise NotFoundError(
                    "Tax subcategory not found",
                    context={"subCategoryId": subcategory_id},
                )

            result = calculate_tax(subcategory, status, amount)

        logger.info(
            "Tax calculated - rate: {}%, tax: {}, net: {}, nature: {}",
            result.tax_rate,
            result.tax_amount,
            result.net_amount,
            result.tax_nature,
        )
        return result
