"""
Synthetic Attribute Generator
Plausible-but-fake payment, fulfillment, delivery and address data

Author: TM3
Date: 2025-10-17

Rules:
- Payment status is uniform over 4 values and maps to Shopify's
  `paymentPending` flag (only PAID is not pending; PARTIALLY_PAID and
  UNPAID cannot be told apart by draftOrderComplete).
- Fulfillment status is uniform over 5 values and never sent to Shopify.
- Delivery status depends on fulfillment status (DELIVERY_STATUSES).
- Carrier and tracking number exist only for shipped orders.
"""
import random
from typing import Dict, List, Optional, Tuple

from order_seeder.domain import (
    Address,
    Carrier,
    Customer,
    DeliveryInfo,
    DeliveryStatus,
    FulfillmentStatus,
    PaymentStatus,
)
from order_seeder.services.random_selector import RandomSource, pick_uniform


PAYMENT_STATUSES: List[PaymentStatus] = list(PaymentStatus)

FULFILLMENT_STATUSES: List[FulfillmentStatus] = list(FulfillmentStatus)

CARRIERS: List[Carrier] = list(Carrier)

DELIVERY_STATUSES: Dict[FulfillmentStatus, List[DeliveryStatus]] = {
    FulfillmentStatus.FULFILLED: [
        DeliveryStatus.IN_TRANSIT,
        DeliveryStatus.OUT_FOR_DELIVERY,
        DeliveryStatus.DELIVERED,
    ],
    FulfillmentStatus.PARTIALLY_FULFILLED: [DeliveryStatus.IN_TRANSIT, DeliveryStatus.DELAYED],
    FulfillmentStatus.UNFULFILLED: [DeliveryStatus.NOT_SHIPPED],
    FulfillmentStatus.RESTOCKED: [DeliveryStatus.NOT_SHIPPED],
    FulfillmentStatus.PENDING_FULFILLMENT: [DeliveryStatus.NOT_SHIPPED, DeliveryStatus.DELAYED],
}

# carrier -> (prefix, digit count)
TRACKING_FORMATS: Dict[Carrier, Tuple[str, int]] = {
    Carrier.UPS: ("1Z", 8),
    Carrier.USPS: ("9400", 16),
    Carrier.FEDEX: ("", 12),
    Carrier.DHL: ("", 10),
    Carrier.ONTRAC: ("C", 14),
}
DEFAULT_TRACKING_FORMAT = ("TRK", 7)

CITIES = [
    'New York', 'Los Angeles', 'Chicago', 'Houston', 'Phoenix',
    'Philadelphia', 'San Antonio', 'San Diego', 'Dallas', 'San Jose'
]

STREET_NAMES = [
    'Main St', 'Oak Ave', 'Maple Dr', 'Washington Blvd', 'Park Rd',
    'Cedar Ln', 'Lake View Dr', 'River Rd', 'Pine St', 'Elm St'
]

STATES = [
    ('California', 'CA'),
    ('New York', 'NY'),
    ('Texas', 'TX'),
    ('Florida', 'FL'),
    ('Illinois', 'IL'),
    ('Pennsylvania', 'PA'),
    ('Ohio', 'OH'),
    ('Georgia', 'GA'),
    ('North Carolina', 'NC'),
    ('Michigan', 'MI'),
]


class AttributeGenerator:
    """
    Generates the randomized attributes of an order

    Args:
        rng: Random source; defaults to a fresh, unseeded random.Random
    """

    def __init__(self, rng: Optional[RandomSource] = None):
        self.rng = rng or random.Random()

    # =========================================================================
    # Payment / fulfillment
    # =========================================================================

    def payment_status(self) -> Tuple[PaymentStatus, bool]:
        """Return (status, payment_pending)"""
        status = pick_uniform(PAYMENT_STATUSES, self.rng, what="payment statuses")
        return status, self.is_payment_pending(status)

    @staticmethod
    def is_payment_pending(status: PaymentStatus) -> bool:
        return status != PaymentStatus.PAID

    def fulfillment_status(self) -> FulfillmentStatus:
        return pick_uniform(FULFILLMENT_STATUSES, self.rng, what="fulfillment statuses")

    # =========================================================================
    # Delivery
    # =========================================================================

    def delivery_status(self, fulfillment_status: FulfillmentStatus) -> DeliveryStatus:
        options = DELIVERY_STATUSES.get(fulfillment_status) or [DeliveryStatus.NOT_SHIPPED]
        return pick_uniform(options, self.rng, what="delivery statuses")

    def delivery_info(self, fulfillment_status: FulfillmentStatus) -> DeliveryInfo:
        """Delivery status plus carrier/tracking number when shipped"""
        status = self.delivery_status(fulfillment_status)
        if status == DeliveryStatus.NOT_SHIPPED:
            return DeliveryInfo(status=status)

        carrier = pick_uniform(CARRIERS, self.rng, what="carriers")
        return DeliveryInfo(
            status=status,
            carrier=carrier,
            tracking_number=self.tracking_number(carrier)
        )

    def tracking_number(self, carrier: Carrier) -> str:
        """
        Carrier-shaped tracking number

        UPS: 1Z + 8 digits, USPS: 9400 + 16 digits, FedEx: 12 digits,
        DHL: 10 digits, OnTrac: C + 14 digits, anything else: TRK + 7 digits
        """
        prefix, digits = TRACKING_FORMATS.get(carrier, DEFAULT_TRACKING_FORMAT)
        return f"{prefix}{self._digits(digits)}"

    def _digits(self, count: int) -> int:
        # lower bound has no leading zero, so the width is always `count`
        return self.rng.randint(10 ** (count - 1), 10 ** count - 1)

    # =========================================================================
    # Addresses
    # =========================================================================

    def address(self, customer: Customer) -> Address:
        """
        Shipping address for a customer

        Uses the customer's default address (with the customer's names)
        when there is one, otherwise synthesizes a US address.
        """
        if customer.default_address is not None:
            return customer.default_address.model_copy(update={
                'first_name': customer.first_name,
                'last_name': customer.last_name,
            })

        street_number = self.rng.randint(100, 9999)
        street = pick_uniform(STREET_NAMES, self.rng, what="street names")
        city = pick_uniform(CITIES, self.rng, what="cities")
        state_name, state_code = pick_uniform(STATES, self.rng, what="states")
        zip_code = self.rng.randint(10000, 99999)

        return Address(
            first_name=customer.first_name,
            last_name=customer.last_name,
            address1=f"{street_number} {street}",
            address2=None,
            city=city,
            province=state_name,
            province_code=state_code,
            zip=str(zip_code),
            country='United States',
            country_code='US',
            phone=self.phone_number(),
            company=None
        )

    def phone_number(self) -> str:
        """AAA-BBB-CCCC"""
        area = self.rng.randint(200, 999)
        exchange = self.rng.randint(200, 999)
        line = self.rng.randint(1000, 9999)
        return f"{area}-{exchange}-{line}"

    def shipping_and_billing(self, customer: Customer) -> Tuple[Address, Address]:
        """Billing is always a copy of shipping"""
        shipping = self.address(customer)
        return shipping, shipping.model_copy()
