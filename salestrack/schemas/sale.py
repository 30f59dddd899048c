from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

# Matches the NUMERIC(18, 4) storage of sales.amount and sales.price.
MONEY_DIGITS = 18
MONEY_PLACES = 4


class SaleBase(BaseModel):
    product_name: str = Field(
        min_length=1,
        max_length=200,
        validation_alias=AliasChoices("product_name", "productName"),
    )
    amount: Decimal = Field(max_digits=MONEY_DIGITS, decimal_places=MONEY_PLACES)
    price: Decimal = Field(max_digits=MONEY_DIGITS, decimal_places=MONEY_PLACES)
    date: datetime

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("product_name")
    @classmethod
    def _product_name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("product_name must not be blank")
        return value


class SaleCreate(SaleBase):
    pass


class SaleUpdate(SaleBase):
    id: int
    version: Optional[int] = None


class SaleRead(BaseModel):
    id: int
    product_name: str = Field(serialization_alias="productName")
    amount: Decimal
    price: Decimal
    date: datetime
    username: str
    revenue: Decimal
    version: int

    model_config = ConfigDict(from_attributes=True)


__all__ = ["SaleCreate", "SaleRead", "SaleUpdate"]
