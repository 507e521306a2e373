"""
Random Order Service
Creates one real order from a random customer and a random in-stock variant

Author: TM3
Date: 2025-10-17

Steps (strictly forward, any failure aborts the rest):
1. Select customer
2. Select product + in-stock variant
3. Generate addresses and create the draft order
4. Generate payment/fulfillment/delivery attributes and complete the draft
5. Attach tracking (placeholder) unless the order is not shipped
6. Report the summary

An already-created draft order is not rolled back when a later step fails.
"""
import logging
import random
from typing import Optional, Tuple

from order_seeder.connectors.shopify_connector import ShopifyConnector
from order_seeder.core.config import Settings
from order_seeder.domain import (
    Customer,
    DeliveryInfo,
    DeliveryStatus,
    DraftOrder,
    FulfillmentStatus,
    Order,
    OrderSummary,
    PaymentStatus,
    Product,
    ProductVariant,
)
from order_seeder.services.attribute_generator import AttributeGenerator
from order_seeder.services.random_selector import RandomSource, select_customer, select_product_variant
from order_seeder.services.reporter import LoggingReporter, OrderReporter

logger = logging.getLogger(__name__)

NOT_SHIPPED_FULFILLMENT = (FulfillmentStatus.UNFULFILLED, FulfillmentStatus.RESTOCKED)


class RandomOrderService:
    """
    Orchestrates a single random order

    Args:
        connector: Shopify connector used for every remote call
        settings: Page sizes for customer/product selection
        rng: Random source shared by selection and attribute generation
        reporter: Receives progress events and the final summary
    """

    def __init__(self, connector: ShopifyConnector, settings: Settings,
                 rng: Optional[RandomSource] = None,
                 reporter: Optional[OrderReporter] = None):
        self.connector = connector
        self.settings = settings
        self.rng = rng or random.Random()
        self.attributes = AttributeGenerator(self.rng)
        self.reporter = reporter or LoggingReporter()

    async def run(self) -> OrderSummary:
        """Run every step and return the summary"""
        customer = await self.select_customer()
        product, variant = await self.select_product()
        draft = await self.create_draft_order(customer, variant)
        order, payment_status, fulfillment_status, delivery = await self.complete_order(draft)
        await self.attach_fulfillment(order, fulfillment_status, delivery)

        summary = OrderSummary(
            customer_name=customer.full_name,
            customer_email=customer.email,
            product_title=product.title,
            variant_title=variant.title,
            price=variant.price,
            order_id=order.id,
            order_name=order.name,
            payment_status=payment_status,
            fulfillment_status=fulfillment_status,
            platform_fulfillment_status=order.display_fulfillment_status or FulfillmentStatus.UNFULFILLED.value,
            platform_financial_status=order.display_financial_status or payment_status.value,
            delivery=delivery
        )
        self.reporter.summary(summary)
        return summary

    async def select_customer(self) -> Customer:
        customers = await self.connector.get_customers(limit=self.settings.CUSTOMER_PAGE_SIZE)
        customer = select_customer(customers, self.rng)
        self.reporter.emit('customer_selected', name=customer.full_name, email=customer.email)
        return customer

    async def select_product(self) -> Tuple[Product, ProductVariant]:
        products = await self.connector.get_products(
            limit=self.settings.PRODUCT_PAGE_SIZE,
            variants_limit=self.settings.VARIANT_PAGE_SIZE
        )
        product, variant = select_product_variant(products, self.rng)
        self.reporter.emit(
            'product_selected', product=product.title, variant=variant.title, price=variant.price
        )
        return product, variant

    async def create_draft_order(self, customer: Customer, variant: ProductVariant) -> DraftOrder:
        shipping, billing = self.attributes.shipping_and_billing(customer)
        self.reporter.emit(
            'address_generated',
            address1=shipping.address1, city=shipping.city, province=shipping.province,
            zip=shipping.zip, country=shipping.country
        )

        draft = await self.connector.create_draft_order(customer.id, variant.id, shipping, billing)
        self.reporter.emit('draft_created', name=draft.name, id=draft.id, total_price=draft.total_price)
        return draft

    async def complete_order(self, draft: DraftOrder) -> Tuple[Order, PaymentStatus, FulfillmentStatus, DeliveryInfo]:
        payment_status, payment_pending = self.attributes.payment_status()
        fulfillment_status = self.attributes.fulfillment_status()
        delivery = self.attributes.delivery_info(fulfillment_status)
        self.reporter.emit(
            'attributes_generated',
            payment_status=payment_status.value, payment_pending=payment_pending,
            fulfillment_status=fulfillment_status.value, delivery_status=delivery.status.value
        )

        order = await self.connector.complete_draft_order(draft.id, payment_pending)
        self.reporter.emit(
            'order_completed', name=order.name, id=order.id,
            financial_status=order.display_financial_status or payment_status.value,
            fulfillment_status=order.display_fulfillment_status or FulfillmentStatus.UNFULFILLED.value
        )
        return order, payment_status, fulfillment_status, delivery

    async def attach_fulfillment(self, order: Order, fulfillment_status: FulfillmentStatus,
                                 delivery: DeliveryInfo) -> bool:
        """Returns True if tracking was attached"""
        if fulfillment_status in NOT_SHIPPED_FULFILLMENT or delivery.status == DeliveryStatus.NOT_SHIPPED:
            self.reporter.emit('fulfillment_skipped')
            return False

        self.reporter.emit(
            'fulfillment_attempted',
            carrier=delivery.carrier.value, tracking_number=delivery.tracking_number,
            status=delivery.status.value
        )
        await self.connector.create_fulfillment(order, delivery)
        return True
