# app/models.py
from typing import Any, Dict, List, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
)

# JSON numbers only: strict types keep "12" and true from passing as a price.
Price = Union[StrictInt, StrictFloat]


class ProductIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: StrictStr = Field(..., min_length=1)
    description: StrictStr = Field(..., min_length=1)
    price: Price
    category: StrictStr = Field(..., min_length=1)
    in_stock: StrictBool = Field(..., alias="inStock")


class Product(ProductIn):
    id: str


class ProductUpdate(BaseModel):
    """Partial update body. Only the fields sent are applied."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[StrictStr] = Field(None, min_length=1)
    description: Optional[StrictStr] = Field(None, min_length=1)
    price: Optional[Price] = None
    category: Optional[StrictStr] = Field(None, min_length=1)
    in_stock: Optional[StrictBool] = Field(None, alias="inStock")

    @field_validator("*", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        # defaults are not validated, so this only fires for an explicit null
        if value is None:
            raise ValueError("field may not be null")
        return value

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class ProductPage(BaseModel):
    data: List[Product]
    total: int
    page: int
    limit: int


class ErrorOut(BaseModel):
    message: str
