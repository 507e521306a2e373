"""
Order Domain Models

Draft orders, completed orders, the simulated delivery data attached to a
run, and the summary reported at the end of it.

Author: TM3
Date: 2025-10-17
"""
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional


class PaymentStatus(str, Enum):
    PAID = "PAID"
    PENDING = "PENDING"
    PARTIALLY_PAID = "PARTIALLY_PAID"
    UNPAID = "UNPAID"


class FulfillmentStatus(str, Enum):
    FULFILLED = "FULFILLED"
    PARTIALLY_FULFILLED = "PARTIALLY_FULFILLED"
    UNFULFILLED = "UNFULFILLED"
    PENDING_FULFILLMENT = "PENDING_FULFILLMENT"
    RESTOCKED = "RESTOCKED"


class DeliveryStatus(str, Enum):
    IN_TRANSIT = "IN_TRANSIT"
    OUT_FOR_DELIVERY = "OUT_FOR_DELIVERY"
    ATTEMPTED_DELIVERY = "ATTEMPTED_DELIVERY"  # never generated
    DELIVERED = "DELIVERED"
    DELAYED = "DELAYED"
    NOT_SHIPPED = "NOT_SHIPPED"


class Carrier(str, Enum):
    UPS = "UPS"
    USPS = "USPS"
    FEDEX = "FEDEX"
    DHL = "DHL"
    ONTRAC = "ONTRAC"


class UserError(BaseModel):
    """Field-level validation error returned next to a mutation payload"""

    field: Optional[List[str]] = Field(None, description="Path to the offending input field")
    message: str = Field(..., description="Human-readable message")


class DraftOrder(BaseModel):
    """Draft order returned by draftOrderCreate"""

    id: str = Field(..., description="Shopify GID")
    name: str = Field("", description="Display name, e.g. #D12")
    total_price: Optional[str] = Field(None, alias="totalPrice", description="Total price")

    model_config = ConfigDict(populate_by_name=True)


class Order(BaseModel):
    """Order created by draftOrderComplete"""

    id: str = Field(..., description="Shopify GID")
    name: str = Field("", description="Display name, e.g. #1001")
    display_financial_status: Optional[str] = Field(None, alias="displayFinancialStatus")
    display_fulfillment_status: Optional[str] = Field(None, alias="displayFulfillmentStatus")

    model_config = ConfigDict(populate_by_name=True)


class DeliveryInfo(BaseModel):
    """
    Simulated delivery data

    Purely client-side: nothing here is sent to Shopify. Carrier and
    tracking number are only set when the status is not NOT_SHIPPED.
    """

    status: DeliveryStatus = Field(DeliveryStatus.NOT_SHIPPED)
    carrier: Optional[Carrier] = Field(None)
    tracking_number: Optional[str] = Field(None)

    @property
    def is_shipped(self) -> bool:
        return self.status != DeliveryStatus.NOT_SHIPPED


class OrderSummary(BaseModel):
    """
    Result of one successful run

    Fields:
        customer_name / customer_email: Selected customer
        product_title / variant_title / price: Selected variant
        order_id / order_name: Order created on Shopify
        payment_status: Randomly requested payment status
        fulfillment_status: Randomly requested fulfillment status
        platform_fulfillment_status: What Shopify reports (UNFULFILLED if absent)
        platform_financial_status: What Shopify reports (requested status if absent)
        delivery: Simulated delivery data
    """

    customer_name: str
    customer_email: Optional[str] = None
    product_title: str
    variant_title: str
    price: str
    order_id: str
    order_name: str
    payment_status: PaymentStatus
    fulfillment_status: FulfillmentStatus
    platform_fulfillment_status: str
    platform_financial_status: str
    delivery: DeliveryInfo

    def lines(self) -> List[str]:
        """Human-readable summary, one entry per line"""
        lines = [
            f"Customer: {self.customer_name}",
            f"Email: {self.customer_email or '-'}",
            f"Product: {self.product_title} - {self.variant_title}",
            f"Price: {self.price}",
            f"Order: {self.order_name} ({self.order_id})",
            f"Payment Status: {self.payment_status.value}",
            f"Fulfillment Status: {self.fulfillment_status.value} ({self.platform_fulfillment_status})",
            "",
            "DELIVERY INFORMATION:",
            f"Status: {self.delivery.status.value}",
        ]
        if self.delivery.is_shipped:
            lines.append(f"Carrier: {self.delivery.carrier.value}")
            lines.append(f"Tracking Number: {self.delivery.tracking_number}")
        return lines
