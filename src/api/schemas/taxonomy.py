"""Request and response models for the taxonomy and calculation routes.

Rates and amounts stay ``Decimal`` in the models; routes return them
through ``ORJSONResponse``, which writes exact JSON numbers. Request
fields are optional at the schema level so that missing or malformed
values reach the domain validators, which own the error messages the
client displays. Booleans are refused before lax coercion turns them
into 1 or 0.
"""

from decimal import Decimal
from typing import Annotated, Self

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, WithJsonSchema
from pydantic.alias_generators import to_camel

from src.domain.models import Subcategory, TaxComputation, TaxonomyNode

JsonDecimal = Annotated[Decimal, WithJsonSchema({"type": "number"})]


def _reject_bool(value: object) -> object:
    # JSON true would otherwise be coerced to 1
    if isinstance(value, bool):
        raise ValueError("Input should be a number, not a boolean")
    return value


NotBool = BeforeValidator(_reject_bool)


class CamelModel(BaseModel):
    """Base model exposing camelCase field names in JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TaxonomyNodeResponse(CamelModel):
    """A section, subsection or category entry."""

    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["Salary"])

    @classmethod
    def from_domain(cls, node: TaxonomyNode) -> Self:
        return cls(id=node.id, name=node.name)


class SubcategoryResponse(CamelModel):
    """A subcategory with both applicable rates."""

    id: int = Field(..., examples=[7])
    name: str = Field(..., examples=["Employees"])
    filer_rate: JsonDecimal = Field(..., description="Percentage", examples=[15])
    non_filer_rate: JsonDecimal = Field(..., description="Percentage", examples=[30])
    tax_nature: str = Field(..., examples=["Final"])

    @classmethod
    def from_domain(cls, subcategory: Subcategory) -> Self:
        return cls(
            id=subcategory.id,
            name=subcategory.name,
            filer_rate=subcategory.filer_rate,
            non_filer_rate=subcategory.non_filer_rate,
            tax_nature=subcategory.tax_nature,
        )


class TaxCalculationRequest(CamelModel):
    """Body of ``POST /api/calculate-tax``."""

    sub_category_id: Annotated[int | None, NotBool] = Field(
        default=None, description="Subcategory identifier", examples=[7]
    )
    filer_status: str | None = Field(
        default=None,
        description="Either 'filer' or 'non-filer'",
        examples=["filer"],
    )
    gross_amount: Annotated[Decimal | None, NotBool] = Field(
        default=None,
        description="Non-negative gross payment amount",
        examples=[100000],
    )


class TaxCalculationResponse(CamelModel):
    """Breakdown of a tax calculation."""

    gross_amount: JsonDecimal = Field(..., examples=[100000])
    tax_rate: JsonDecimal = Field(..., examples=[15])
    tax_amount: JsonDecimal = Field(..., examples=[15000])
    net_amount: JsonDecimal = Field(..., examples=[85000])
    tax_nature: str = Field(..., examples=["Final"])

    @classmethod
    def from_domain(cls, result: TaxComputation) -> Self:
        return cls(
            gross_amount=result.gross_amount,
            tax_rate=result.tax_rate,
            tax_amount=result.tax_amount,
            net_amount=result.net_amount,
            tax_nature=result.tax_nature,
        )
