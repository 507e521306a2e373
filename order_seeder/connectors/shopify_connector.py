"""
Shopify GraphQL Connector
Handles all interactions with the Shopify Admin API

One POST per call, no retries: every failure is raised to the caller.

Author: TM3
Date: 2025-10-03
"""
import logging
from typing import Any, Dict, List, Optional

import httpx

from order_seeder.core.config import Settings
from order_seeder.core.exceptions import (
    ApiError,
    InvariantViolationError,
    OrderCompletionError,
    OrderCreationError,
    TransportError,
)
from order_seeder.domain import (
    Address,
    Customer,
    DeliveryInfo,
    DraftOrder,
    Order,
    Product,
    UserError,
)

logger = logging.getLogger(__name__)


CUSTOMERS_QUERY = """
query ($first: Int!) {
  customers(first: $first) {
    edges {
      node {
        id
        firstName
        lastName
        email
        defaultAddress {
          address1
          address2
          city
          province
          provinceCode
          zip
          country
          countryCode
          phone
        }
      }
    }
    pageInfo {
      hasNextPage
      endCursor
    }
  }
}
"""

PRODUCTS_QUERY = """
query ($first: Int!, $variantsFirst: Int!) {
  products(first: $first, sortKey: TITLE) {
    edges {
      node {
        id
        title
        variants(first: $variantsFirst) {
          edges {
            node {
              id
              title
              price
              inventoryQuantity
              sku
            }
          }
        }
      }
    }
    pageInfo {
      hasNextPage
      endCursor
    }
  }
}
"""

DRAFT_ORDER_CREATE_MUTATION = """
mutation draftOrderCreate($input: DraftOrderInput!) {
  draftOrderCreate(input: $input) {
    draftOrder {
      id
      name
      totalPrice
    }
    userErrors {
      field
      message
    }
  }
}
"""

DRAFT_ORDER_COMPLETE_MUTATION = """
mutation draftOrderComplete($id: ID!, $paymentPending: Boolean!) {
  draftOrderComplete(id: $id, paymentPending: $paymentPending) {
    draftOrder {
      id
      order {
        id
        name
        displayFinancialStatus
        displayFulfillmentStatus
      }
    }
    userErrors {
      field
      message
    }
  }
}
"""

SHOP_QUERY = """
{
  shop {
    name
    email
    currencyCode
    primaryDomain {
      url
    }
  }
}
"""


class ShopifyConnector:
    """
    Connector for Shopify GraphQL Admin API

    Handles:
    - Customer listing
    - Product + variant listing
    - Draft order creation and completion
    - Fulfillment placeholder (no request is issued)
    """

    def __init__(self, settings: Settings, client: Optional[httpx.AsyncClient] = None):
        """
        Initialize Shopify connector

        Args:
            settings: Validated settings (store host, access token, API version)
            client: Optional shared AsyncClient; when omitted a client is
                opened and closed around every request
        """
        self.shop_url = settings.SHOP_URL
        self.api_url = settings.graphql_url
        self.timeout = settings.REQUEST_TIMEOUT
        self.headers = {
            'Content-Type': 'application/json',
            'X-Shopify-Access-Token': settings.ACCESS_TOKEN
        }
        self._client = client

    async def _post(self, client: httpx.AsyncClient, payload: Dict) -> httpx.Response:
        return await client.post(
            self.api_url,
            json=payload,
            headers=self.headers,
            timeout=self.timeout
        )

    async def _execute_query(self, query: str, variables: Dict = None) -> Dict:
        """
        Execute a GraphQL query or mutation

        Returns:
            The `data` object of the response

        Raises:
            TransportError: network failure, non-2xx status or non-JSON body
            ApiError: response carries a GraphQL `errors` envelope
        """
        payload = {'query': query}
        if variables:
            payload['variables'] = variables

        try:
            if self._client is not None:
                response = await self._post(self._client, payload)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._post(client, payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"Shopify returned HTTP {e.response.status_code}: {e.response.text[:500]}",
                status_code=e.response.status_code,
                response_text=e.response.text
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {self.shop_url} failed: {e!r}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(
                "Shopify returned a non-JSON response",
                status_code=response.status_code,
                response_text=response.text
            ) from e

        if data.get('errors'):
            raise ApiError(data['errors'])

        return data.get('data') or {}

    async def get_customers(self, limit: int = 25) -> List[Customer]:
        """
        Get the first page of customers

        Args:
            limit: Number of customers to fetch (max 250)

        Returns:
            List of Customer models (possibly empty)
        """
        logger.debug(f"Fetching up to {limit} customers")
        result = await self._execute_query(CUSTOMERS_QUERY, {'first': limit})
        edges = (result.get('customers') or {}).get('edges') or []
        return [Customer.model_validate(edge['node']) for edge in edges]

    async def get_products(self, limit: int = 25, variants_limit: int = 5) -> List[Product]:
        """
        Get the first page of products sorted by title

        Args:
            limit: Number of products to fetch (max 250)
            variants_limit: Variants fetched per product

        Returns:
            List of Product models with their variants
        """
        logger.debug(f"Fetching up to {limit} products x {variants_limit} variants")
        result = await self._execute_query(
            PRODUCTS_QUERY, {'first': limit, 'variantsFirst': variants_limit}
        )
        edges = (result.get('products') or {}).get('edges') or []
        return [Product.model_validate(edge['node']) for edge in edges]

    async def create_draft_order(self, customer_id: str, variant_id: str,
                                 shipping_address: Address,
                                 billing_address: Address) -> DraftOrder:
        """
        Create a draft order with a single line item (quantity 1)

        No invoice is sent, so Shopify sends no notification email.

        Raises:
            OrderCreationError: draftOrderCreate returned user errors
            InvariantViolationError: no errors but no draft order either
        """
        variables = {
            'input': {
                'customerId': customer_id,
                'lineItems': [{
                    'variantId': variant_id,
                    'quantity': 1
                }],
                'shippingAddress': shipping_address.to_input(),
                'billingAddress': billing_address.to_input()
            }
        }

        logger.debug(f"Creating draft order for {customer_id} with {variant_id}")
        result = await self._execute_query(DRAFT_ORDER_CREATE_MUTATION, variables)
        payload = result.get('draftOrderCreate') or {}

        user_errors = self._user_errors(payload)
        if user_errors:
            raise OrderCreationError(user_errors)

        if not payload.get('draftOrder'):
            raise InvariantViolationError("draftOrderCreate succeeded but returned no draft order")

        return DraftOrder.model_validate(payload['draftOrder'])

    async def complete_draft_order(self, draft_order_id: str, payment_pending: bool) -> Order:
        """
        Complete a draft order, turning it into a real order

        Args:
            draft_order_id: Draft order GID
            payment_pending: True leaves the order awaiting payment,
                False marks it as paid

        Raises:
            OrderCompletionError: draftOrderComplete returned user errors
            InvariantViolationError: completion succeeded but no order came back
        """
        variables = {
            'id': draft_order_id,
            'paymentPending': payment_pending
        }

        logger.debug(f"Completing draft order {draft_order_id} (paymentPending={payment_pending})")
        result = await self._execute_query(DRAFT_ORDER_COMPLETE_MUTATION, variables)
        payload = result.get('draftOrderComplete') or {}

        user_errors = self._user_errors(payload)
        if user_errors:
            raise OrderCompletionError(user_errors)

        order = (payload.get('draftOrder') or {}).get('order')
        if not order:
            raise InvariantViolationError("Draft order was completed but no order was created")

        return Order.model_validate(order)

    async def create_fulfillment(self, order: Order, delivery: DeliveryInfo) -> None:
        """
        Attach tracking information to an order

        Placeholder: logs what would be sent through fulfillmentCreate
        and issues no request.
        """
        logger.info(
            f"Tracking for {order.name}: {delivery.carrier.value if delivery.carrier else '-'} "
            f"{delivery.tracking_number or '-'} ({delivery.status.value}) - simulated, not sent"
        )

    async def test_connection(self) -> Dict:
        """Test Shopify connection"""
        try:
            result = await self._execute_query(SHOP_QUERY)
            shop = result.get('shop', {})
            return {
                'success': True,
                'shop_name': shop.get('name'),
                'email': shop.get('email'),
                'currency': shop.get('currencyCode'),
                'url': (shop.get('primaryDomain') or {}).get('url')
            }
        except (TransportError, ApiError) as e:
            return {
                'success': False,
                'error': str(e)
            }

    @staticmethod
    def _user_errors(payload: Dict[str, Any]) -> List[UserError]:
        return [UserError.model_validate(error) for error in payload.get('userErrors') or []]
