"""
Random Selector
Uniform random picks over fetched customers and products

Randomness is injected: anything with `randrange` and `randint` works,
so `random.Random(seed)` gives reproducible runs.
"""
import logging
from typing import Protocol, Sequence, Tuple, TypeVar

from order_seeder.core.exceptions import EmptyCollectionError
from order_seeder.domain import Customer, Product, ProductVariant

logger = logging.getLogger(__name__)

T = TypeVar('T')


class RandomSource(Protocol):
    """Subset of random.Random used by the generators"""

    def randrange(self, stop: int) -> int: ...

    def randint(self, a: int, b: int) -> int: ...


def pick_uniform(items: Sequence[T], rng: RandomSource, what: str = "items") -> T:
    """
    Pick one element uniformly at random

    Args:
        items: Candidates (already filtered)
        rng: Random source
        what: Description used in the error message

    Raises:
        EmptyCollectionError: if there are no candidates
    """
    if not items:
        raise EmptyCollectionError(f"No {what} found")
    return items[rng.randrange(len(items))]


def select_customer(customers: Sequence[Customer], rng: RandomSource) -> Customer:
    """Pick any customer from the fetched page"""
    if not customers:
        raise EmptyCollectionError("No customers found in the store")
    return pick_uniform(customers, rng, what="customers")


def select_product_variant(products: Sequence[Product],
                           rng: RandomSource) -> Tuple[Product, ProductVariant]:
    """
    Pick a product with stock, then one of its in-stock variants

    Products without any variant with inventory > 0 are never candidates,
    and neither are variants with inventory <= 0.

    Raises:
        EmptyCollectionError: if the store returned no products, or none has stock
    """
    if not products:
        raise EmptyCollectionError("No products found in the store")

    candidates = [product for product in products if product.has_inventory]
    logger.debug(f"{len(candidates)} of {len(products)} products have inventory")

    product = pick_uniform(candidates, rng, what="products with available inventory")
    variant = pick_uniform(product.available_variants(), rng, what="in-stock variants")
    return product, variant
