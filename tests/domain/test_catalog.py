"""Unit tests for the catalog aggregates."""

import pytest

from ordercore.domain.exceptions import ValidationError
from ordercore.domain.model.catalog import Category, Customer, Product
from ordercore.domain.model.value_objects import Money


class TestProductCreate:

    def test_happy_path(self):
        p = Product.create(211, 1, " Widget ", "A widget", Money.of("15.00"), 5)
        assert p.name == "Widget"
        assert p.stock_quantity == 5

    def test_free_product_allowed(self):
        p = Product.create(1, 1, "Sample", "Free sample", Money.of("0"))
        assert p.price == Money.of("0")

    def test_price_above_column_limit_rejected(self):
        with pytest.raises(ValidationError, match="exceeds maximum"):
            Product.create(1, 1, "Widget", "A widget", Money.of("1000.00"))

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Product.create(1, 1, "Widget", "A widget", Money.of("1"), -1)

    def test_long_name_rejected(self):
        with pytest.raises(ValidationError, match="at most 50"):
            Product.create(1, 1, "x" * 51, "A widget", Money.of("1"))

    def test_blank_description_rejected(self):
        with pytest.raises(ValidationError, match="description is required"):
            Product.create(1, 1, "Widget", "  ", Money.of("1"))


class TestCategoryCreate:

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="Category name is required"):
            Category.create(1, "")


class TestCustomerCreate:

    def test_email_is_normalised(self):
        c = Customer.create(1, "Ada", "Lovelace", " Ada@Example.COM ", "hash")
        assert c.email == "ada@example.com"
        assert c.full_name == "Ada Lovelace"

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError, match="Invalid email"):
            Customer.create(1, "Ada", "Lovelace", "not-an-email", "hash")

    def test_long_first_name_rejected(self):
        with pytest.raises(ValidationError, match="at most 20"):
            Customer.create(1, "A" * 21, "Lovelace", "ada@example.com", "hash")
