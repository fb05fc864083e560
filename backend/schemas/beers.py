from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from db.beer import BeerType

MAX_STOCK_CAPACITY = 500
MAX_QUANTITY_PER_REQUEST = 100


class BeerCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    brand: str = Field(min_length=1, max_length=200)
    category: Optional[str] = Field(default=None, max_length=200)
    max: int = Field(gt=0, le=MAX_STOCK_CAPACITY)
    quantity: int = Field(ge=0, le=MAX_QUANTITY_PER_REQUEST)
    type: BeerType

    @field_validator("name", "brand", mode="before")
    @classmethod
    def _strip_required(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("field is required")
        return v

    @field_validator("category")
    @classmethod
    def _strip_nullable(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None

    @model_validator(mode="after")
    def _quantity_within_max(self):
        if self.quantity > self.max:
            raise ValueError("quantity must not be greater than max")
        return self


class BeerRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    brand: str
    category: Optional[str] = None
    max: int
    quantity: int
    type: BeerType


class QuantityRequest(BaseModel):
    # Sign is not checked here; see BeerService.increment/decrement
    quantity: int = Field(le=MAX_QUANTITY_PER_REQUEST)
