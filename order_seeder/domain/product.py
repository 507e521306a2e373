"""
Product Domain Models

Products and variants as returned by the `products` query. Only variants
with positive inventory can be put on an order.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator
from typing import Any, List, Optional


class ProductVariant(BaseModel):
    """
    Product variant - the unit actually added to a line item

    Fields:
        id: Shopify GID
        title: Variant title ("Default Title" for single-variant products)
        price: Decimal price as a string, exactly as Shopify returns it
        inventory_quantity: Units available (Shopify may report negatives
            when overselling is allowed)
        sku: Stock Keeping Unit (optional)
    """

    id: str = Field(..., description="Shopify GID")
    title: str = Field("", description="Variant title")
    price: str = Field("0.00", description="Price as decimal string")
    inventory_quantity: int = Field(0, alias="inventoryQuantity", description="Units in stock")
    sku: Optional[str] = Field(None, description="SKU")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("inventory_quantity", mode="before")
    @classmethod
    def untracked_is_zero(cls, value: Any) -> Any:
        # inventoryQuantity is null when the variant does not track inventory
        return 0 if value is None else value

    @property
    def in_stock(self) -> bool:
        return self.inventory_quantity > 0


class Product(BaseModel):
    """Product with its first page of variants"""

    id: str = Field(..., description="Shopify GID")
    title: str = Field(..., description="Product title")
    variants: List[ProductVariant] = Field(default_factory=list, description="Variants")

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def flatten_variant_edges(cls, data: Any) -> Any:
        # GraphQL connections arrive as {"edges": [{"node": {...}}]}
        if isinstance(data, dict) and isinstance(data.get("variants"), dict):
            edges = data["variants"].get("edges") or []
            data = {**data, "variants": [edge.get("node", {}) for edge in edges]}
        return data

    def available_variants(self) -> List[ProductVariant]:
        """Variants with inventory > 0"""
        return [variant for variant in self.variants if variant.in_stock]

    @property
    def has_inventory(self) -> bool:
        return any(variant.in_stock for variant in self.variants)
