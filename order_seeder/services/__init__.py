"""
Service Layer - selection, attribute generation and order orchestration
"""
from order_seeder.services.attribute_generator import AttributeGenerator
from order_seeder.services.order_service import RandomOrderService
from order_seeder.services.random_selector import pick_uniform, select_customer, select_product_variant
from order_seeder.services.reporter import ConsoleReporter, LoggingReporter

__all__ = [
    'AttributeGenerator',
    'RandomOrderService',
    'pick_uniform',
    'select_customer',
    'select_product_variant',
    'ConsoleReporter',
    'LoggingReporter'
]
