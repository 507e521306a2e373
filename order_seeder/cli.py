#!/usr/bin/env python3
"""
Create Random Order - command-line entry point

Picks a random customer and an in-stock product variant from a Shopify
store, creates a draft order and completes it into a real order.

Usage:
  - Env vars: SHOP_URL=your-store.myshopify.com ACCESS_TOKEN=shpat_... [API_VERSION=2025-04]
  - Run:      create-random-order [--seed 42] [--json] [--check] [--env-file .env]

Exit codes: 0 success, 1 run failed, 2 configuration error

Author: TM3
Date: 2025-10-17
"""
import argparse
import asyncio
import logging
import random
import sys
from typing import List, Optional

from order_seeder.connectors.shopify_connector import ShopifyConnector
from order_seeder.core.config import Settings, get_settings
from order_seeder.core.exceptions import ConfigError, OrderSeederError
from order_seeder.core.logging_config import configure_logging
from order_seeder.services.order_service import RandomOrderService
from order_seeder.services.reporter import ConsoleReporter

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='create-random-order',
        description='Create a random order in a Shopify store from an existing customer and product'
    )
    parser.add_argument(
        '--env-file',
        type=str,
        help='Path to a .env file (defaults to ./.env)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        help='Seed the random generator for a reproducible run'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the order summary as JSON'
    )
    parser.add_argument(
        '--check',
        action='store_true',
        help='Only test the Shopify connection'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Show debug logging'
    )
    return parser


async def check_connection(connector: ShopifyConnector) -> int:
    result = await connector.test_connection()
    if not result['success']:
        print(f"❌ Connection failed: {result['error']}", file=sys.stderr)
        return EXIT_FAILED

    print(f"✅ Connected to {result['shop_name']} ({result['url']}, {result['currency']})")
    return EXIT_OK


async def create_random_order(settings: Settings, rng: random.Random, as_json: bool) -> int:
    logger.info(f"Creating a random order in Shopify store: {settings.SHOP_URL}")
    connector = ShopifyConnector(settings)
    service = RandomOrderService(
        connector,
        settings,
        rng=rng,
        reporter=ConsoleReporter(as_json=as_json)
    )
    await service.run()
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings(args.env_file)
    except ConfigError as e:
        configure_logging('DEBUG' if args.verbose else 'INFO')
        logger.debug(f"Configuration error: {e}")
        print(f"❌ Error: {e}", file=sys.stderr)
        return EXIT_CONFIG

    configure_logging('DEBUG' if args.verbose else settings.LOG_LEVEL)
    rng = random.Random(args.seed)

    try:
        if args.check:
            return asyncio.run(check_connection(ShopifyConnector(settings)))
        return asyncio.run(create_random_order(settings, rng, args.json))
    except OrderSeederError as e:
        logger.debug(f"Order creation failed ({type(e).__name__})", exc_info=True)
        print(f"❌ Error creating order: {e}", file=sys.stderr)
        return EXIT_FAILED
    except Exception as e:
        logger.exception(f"❌ Unexpected error creating order: {e}")
        return EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
