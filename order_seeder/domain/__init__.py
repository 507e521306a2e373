"""
Domain Layer - Business Entities

Pydantic models for the Shopify entities a run reads or creates.
All of them are transient: fetched or created once, then discarded.

Author: TM3
Date: 2025-10-17
"""
from order_seeder.domain.customer import Address, Customer
from order_seeder.domain.product import Product, ProductVariant
from order_seeder.domain.order import (
    Carrier,
    DeliveryInfo,
    DeliveryStatus,
    DraftOrder,
    FulfillmentStatus,
    Order,
    OrderSummary,
    PaymentStatus,
    UserError,
)

__all__ = [
    'Address', 'Customer', 'Product', 'ProductVariant',
    'Carrier', 'DeliveryInfo', 'DeliveryStatus', 'DraftOrder', 'FulfillmentStatus',
    'Order', 'OrderSummary', 'PaymentStatus', 'UserError',
]
