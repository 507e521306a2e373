"""
Pytest fixtures and configuration for the random order generator tests

Shopify is replaced by FakeShopify, an httpx.MockTransport handler that
answers the four operations from in-memory data and records every request.

Author: TM3
Date: 2025-10-17
"""
import asyncio
import json
import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest

from order_seeder.connectors.shopify_connector import ShopifyConnector
from order_seeder.core.config import Settings


SETTINGS_ENV_VARS = (
    'SHOP_URL', 'ACCESS_TOKEN', 'API_VERSION', 'REQUEST_TIMEOUT',
    'CUSTOMER_PAGE_SIZE', 'PRODUCT_PAGE_SIZE', 'VARIANT_PAGE_SIZE', 'LOG_LEVEL',
)


def customer_node(customer_id: int = 1, first_name: str = "Jane", last_name: str = "Doe",
                  email: str = "jane@example.com", default_address: Optional[Dict] = None) -> Dict:
    return {
        'id': f"gid://shopify/Customer/{customer_id}",
        'firstName': first_name,
        'lastName': last_name,
        'email': email,
        'defaultAddress': default_address,
    }


def variant_node(variant_id: int = 11, title: str = "Default Title", price: str = "19.99",
                 inventory: Optional[int] = 5, sku: Optional[str] = "WID-001") -> Dict:
    return {
        'id': f"gid://shopify/ProductVariant/{variant_id}",
        'title': title,
        'price': price,
        'inventoryQuantity': inventory,
        'sku': sku,
    }


def product_node(product_id: int = 1, title: str = "Widget", variants: Optional[List[Dict]] = None) -> Dict:
    variants = [variant_node()] if variants is None else variants
    return {
        'id': f"gid://shopify/Product/{product_id}",
        'title': title,
        'variants': {'edges': [{'node': v} for v in variants]},
    }


class FakeShopify:
    """
    In-memory stand-in for the Admin GraphQL endpoint

    Responses can be overridden per operation with `responses[operation]`
    (a full JSON body) to simulate user errors or contract violations.
    """

    def __init__(self, customers: Optional[List[Dict]] = None,
                 products: Optional[List[Dict]] = None,
                 order_name: str = "#1001"):
        self.customers = customers if customers is not None else [customer_node()]
        self.products = products if products is not None else [product_node()]
        self.order_name = order_name
        self.responses: Dict[str, Any] = {}
        self.requests: List[Tuple[str, httpx.Request, Dict]] = []

    @staticmethod
    def operation(query: str) -> str:
        for name in ('draftOrderCreate', 'draftOrderComplete', 'customers', 'products', 'shop'):
            if name in query:
                return name
        raise AssertionError(f"Unexpected query: {query}")

    @property
    def operations(self) -> List[str]:
        return [op for op, _, _ in self.requests]

    def body_for(self, operation: str) -> Dict:
        return next(body for op, _, body in self.requests if op == operation)

    def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        op = self.operation(body['query'])
        self.requests.append((op, request, body))

        if op in self.responses:
            return httpx.Response(200, json=self.responses[op])

        variables = body.get('variables') or {}
        if op == 'customers':
            data = {'customers': {
                'edges': [{'node': c} for c in self.customers[:variables.get('first', 25)]],
                'pageInfo': {'hasNextPage': False, 'endCursor': None},
            }}
        elif op == 'products':
            data = {'products': {
                'edges': [{'node': p} for p in self.products[:variables.get('first', 25)]],
                'pageInfo': {'hasNextPage': False, 'endCursor': None},
            }}
        elif op == 'draftOrderCreate':
            data = {'draftOrderCreate': {
                'draftOrder': {'id': "gid://shopify/DraftOrder/77", 'name': "#D77", 'totalPrice': "19.99"},
                'userErrors': [],
            }}
        elif op == 'draftOrderComplete':
            data = {'draftOrderComplete': {
                'draftOrder': {
                    'id': variables['id'],
                    'order': {
                        'id': "gid://shopify/Order/1001",
                        'name': self.order_name,
                        'displayFinancialStatus': "PAID" if not variables['paymentPending'] else "PENDING",
                        'displayFulfillmentStatus': "UNFULFILLED",
                    },
                },
                'userErrors': [],
            }}
        else:
            data = {'shop': {
                'name': "Test Store",
                'email': "owner@example.com",
                'currencyCode': "USD",
                'primaryDomain': {'url': "https://test-store.myshopify.com"},
            }}
        return httpx.Response(200, json={'data': data})


class RecordingReporter:
    """Keeps reporter events in memory"""

    def __init__(self):
        self.events: List[Tuple[str, Dict[str, Any]]] = []
        self.summaries = []

    def emit(self, event: str, **fields: Any) -> None:
        self.events.append((event, fields))

    def summary(self, summary) -> None:
        self.summaries.append(summary)

    @property
    def event_names(self) -> List[str]:
        return [name for name, _ in self.events]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """
    Remove every settings variable from the environment and run in an
    empty directory, so no developer .env leaks into the test
    """
    for name in SETTINGS_ENV_VARS:
        # setenv first so teardown removes values load_dotenv may add
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(clean_env):
    """Validated settings pointing at a fake store"""
    return Settings(
        _env_file=None,
        SHOP_URL="test-store.myshopify.com",
        ACCESS_TOKEN="shpat_test_token",
        API_VERSION="2025-04",
    )


@pytest.fixture
def fake_shopify():
    return FakeShopify()


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def run_with_connector(settings):
    """
    Run `fn(connector)` against a FakeShopify inside a fresh event loop

    Usage:
        result = run_with_connector(fake, lambda c: c.get_customers())
    """
    def _run(fake: FakeShopify, fn):
        async def _main():
            async with httpx.AsyncClient(transport=httpx.MockTransport(fake.handler)) as client:
                connector = ShopifyConnector(settings, client=client)
                return await fn(connector)
        return asyncio.run(_main())
    return _run


@pytest.fixture(autouse=True)
def reset_package_logging():
    """Drop handlers configure_logging() attached to captured streams"""
    yield
    logger = logging.getLogger("order_seeder")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
