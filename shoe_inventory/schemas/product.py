"""Shoe product schemas.

Field aliases match the JSON the remote shoe service speaks
(tenSanPham, maSanPham, giaSanPham). Python code uses the English names.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ProductDraft(BaseModel):
    """Writable fields of a shoe product, used for create and update."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    name: str = Field(alias="tenSanPham", description="Display name")
    code: str = Field(alias="maSanPham", description="Product code")
    price: int | float = Field(alias="giaSanPham", description="Price in VND")
    size: str | int | float = Field(description="Shoe size")

    def to_payload(self) -> dict:
        """Serialize using the service's field names."""
        return self.model_dump(mode="json", by_alias=True)


class Product(ProductDraft):
    """Read-only snapshot of a shoe product held by the list view."""

    id: int | str = Field(description="Identifier assigned by the service")

    def to_draft(self) -> ProductDraft:
        """Return the writable part of this product."""
        return ProductDraft(name=self.name, code=self.code, price=self.price, size=self.size)


class ServiceResponse(BaseModel, Generic[T]):
    """Status code and parsed payload of a shoe service call."""

    model_config = ConfigDict(frozen=True)

    status: int
    data: T | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300
