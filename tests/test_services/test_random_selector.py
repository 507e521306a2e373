"""
Unit tests for the random selector

Author: TM3
Date: 2025-10-17
"""
import random
from collections import Counter

import pytest

from order_seeder.core.exceptions import EmptyCollectionError
from order_seeder.domain import Customer, Product
from order_seeder.services.random_selector import pick_uniform, select_customer, select_product_variant

from conftest import customer_node, product_node, variant_node


class TestPickUniform:

    def test_returns_member(self):
        items = ["a", "b", "c", "d"]
        rng = random.Random(7)

        for _ in range(200):
            assert pick_uniform(items, rng) in items

    def test_roughly_uniform(self):
        """Test each element is picked about equally often"""
        items = ["a", "b", "c"]
        rng = random.Random(1234)

        counts = Counter(pick_uniform(items, rng) for _ in range(6000))

        # expected 2000 each, sd ~37
        for item in items:
            assert 1800 <= counts[item] <= 2200

    @pytest.mark.parametrize("empty", [[], ()])
    def test_empty_raises_empty_collection_error(self, empty):
        with pytest.raises(EmptyCollectionError, match="No widgets found"):
            pick_uniform(empty, random.Random(), what="widgets")

    def test_single_element_is_deterministic(self):
        assert pick_uniform(["only"], random.Random()) == "only"


class TestSelectCustomer:

    def test_no_customers(self):
        with pytest.raises(EmptyCollectionError, match="^No customers found in the store$"):
            select_customer([], random.Random())

    def test_picks_from_page(self):
        customers = [Customer.model_validate(customer_node(i, f"First{i}")) for i in range(5)]

        customer = select_customer(customers, random.Random(3))

        assert customer in customers


class TestSelectProductVariant:

    def test_never_selects_out_of_stock(self):
        """Test variants with inventory <= 0 and products without stock are never picked"""
        products = [
            Product.model_validate(product_node(1, "Empty", [variant_node(10, inventory=0), variant_node(11, inventory=-2)])),
            Product.model_validate(product_node(2, "Mixed", [variant_node(20, inventory=0), variant_node(21, inventory=3)])),
            Product.model_validate(product_node(3, "Stocked", [variant_node(30, inventory=1), variant_node(31, inventory=9)])),
            Product.model_validate(product_node(4, "Untracked", [variant_node(40, inventory=None)])),
        ]
        rng = random.Random(99)

        seen = set()
        for _ in range(500):
            product, variant = select_product_variant(products, rng)
            assert variant.inventory_quantity > 0
            assert variant in product.variants
            seen.add((product.title, variant.id))

        assert {title for title, _ in seen} == {"Mixed", "Stocked"}
        assert ("Mixed", "gid://shopify/ProductVariant/20") not in seen

    def test_no_inventory_raises(self):
        products = [Product.model_validate(product_node(1, "Empty", [variant_node(10, inventory=0)]))]

        with pytest.raises(EmptyCollectionError, match="^No products with available inventory found$"):
            select_product_variant(products, random.Random())

    def test_product_without_variants_is_excluded(self):
        products = [
            Product.model_validate(product_node(1, "NoVariants", [])),
            Product.model_validate(product_node(2, "Widget", [variant_node(20, inventory=5)])),
        ]

        product, variant = select_product_variant(products, random.Random(0))

        assert product.title == "Widget"
        assert variant.id == "gid://shopify/ProductVariant/20"

    def test_no_products(self):
        """Test an empty page is reported apart from a page without stock"""
        with pytest.raises(EmptyCollectionError, match="^No products found in the store$"):
            select_product_variant([], random.Random())
