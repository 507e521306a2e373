"""
Reporters - where the order service sends its progress events

The order service never prints; it emits named events with keyword
fields and hands the final OrderSummary to `summary()`.
"""
import json
import logging
import sys
from typing import Any, Optional, Protocol, TextIO

from order_seeder.domain import OrderSummary

logger = logging.getLogger(__name__)

BANNER = "=" * 45

EVENT_MESSAGES = {
    'customer_selected': "Selected customer: {name} ({email})",
    'product_selected': "Selected product: {product} - {variant} ({price})",
    'address_generated': "Shipping address: {address1}, {city}, {province} {zip}, {country}",
    'draft_created': "Created draft order: {name} ({id}) with total price: {total_price}",
    'attributes_generated': "Payment status: {payment_status} (paymentPending: {payment_pending}), "
                            "fulfillment: {fulfillment_status}, delivery: {delivery_status}",
    'order_completed': "Created order: {name} ({id}) - financial: {financial_status}, "
                       "fulfillment: {fulfillment_status}",
    'fulfillment_skipped': "Order not fulfilled or shipped - skipping tracking information",
    'fulfillment_attempted': "Adding tracking information: {carrier} - {tracking_number} ({status})",
}


class OrderReporter(Protocol):
    def emit(self, event: str, **fields: Any) -> None: ...

    def summary(self, summary: OrderSummary) -> None: ...


class LoggingReporter:
    """Logs every event at INFO"""

    def emit(self, event: str, **fields: Any) -> None:
        template = EVENT_MESSAGES.get(event)
        if template is None:
            logger.info(f"{event}: {fields}")
            return
        logger.info(template.format(**fields))

    def summary(self, summary: OrderSummary) -> None:
        logger.info(f"Order {summary.order_name} created for {summary.customer_name}")


class ConsoleReporter(LoggingReporter):
    """
    Logs events and prints the final summary to a stream

    Args:
        stream: Output stream for the summary (stdout by default)
        as_json: Print the summary as a JSON document instead of the banner
    """

    def __init__(self, stream: Optional[TextIO] = None, as_json: bool = False):
        self.stream = stream or sys.stdout
        self.as_json = as_json

    def summary(self, summary: OrderSummary) -> None:
        super().summary(summary)

        if self.as_json:
            print(json.dumps(summary.model_dump(mode='json'), indent=2), file=self.stream)
            return

        print(f"\n{BANNER}", file=self.stream)
        print("ORDER CREATION SUCCESSFUL", file=self.stream)
        print(BANNER, file=self.stream)
        for line in summary.lines():
            print(line, file=self.stream)
        print(BANNER, file=self.stream)
        print("Note: Delivery status and tracking information is simulated.", file=self.stream)
