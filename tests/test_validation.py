"""Tests for product field validation and payload merging."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from product_catalog_api.app.schemas.product import (
    FieldError,
    Product,
    ProductPayload,
    validate_product,
)


def _fields(errors):
    return [(e.field, e.rule) for e in errors]


class TestValidateProduct:

    def test_valid_product_has_no_errors(self):
        assert validate_product(Product(title="t", description="d", price=0.01)) == []

    def test_empty_product_lists_all_fields_in_order(self):
        errors = validate_product(Product())
        assert _fields(errors) == [
            ("title", "required"),
            ("description", "required"),
            ("price", "required"),
        ]

    def test_only_title_given(self):
        errors = validate_product(Product(title="Charmander"))
        assert _fields(errors) == [("description", "required"), ("price", "required")]

    @pytest.mark.parametrize("price", [-1.0, -0.01])
    def test_negative_price_fails_gt(self, price):
        errors = validate_product(Product(title="t", description="d", price=price))
        assert _fields(errors) == [("price", "gt")]

    @pytest.mark.parametrize("price", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_price_fails_gt(self, price):
        errors = validate_product(Product(title="t", description="d", price=price))
        assert _fields(errors) == [("price", "gt")]

    def test_price_rounding_to_zero_fails_gt(self):
        errors = validate_product(Product(title="t", description="d", price=0.004))
        assert _fields(errors) == [("price", "gt")]

    def test_message_format(self):
        assert FieldError("price", "gt").message == (
            "Field validation for 'price' failed on the 'gt' tag"
        )


class TestProductPayload:

    def test_to_product_fills_missing_with_empty_values(self):
        product = ProductPayload(title="x").to_product()
        assert product.title == "x"
        assert product.description == ""
        assert product.price == 0.0
        assert product.id is None

    def test_apply_to_overlays_only_supplied_fields(self):
        existing = Product(id=3, title="Old", description="Keep me", price=10.0)
        merged = ProductPayload(title="New", description="", price=0).apply_to(existing)
        assert merged.id == 3
        assert merged.title == "New"
        assert merged.description == "Keep me"
        assert merged.price == 10.0

    def test_apply_to_does_not_mutate_original(self):
        existing = Product(id=3, title="Old", description="d", price=10.0)
        ProductPayload(price=20.0).apply_to(existing)
        assert existing.price == 10.0

    @pytest.mark.parametrize("price", [float("inf"), float("nan")])
    def test_rejects_non_finite_price(self, price):
        with pytest.raises(PydanticValidationError):
            ProductPayload(price=price)

    def test_negative_price_is_supplied(self):
        existing = Product(id=3, title="Old", description="d", price=10.0)
        merged = ProductPayload(price=-5).apply_to(existing)
        assert merged.price == -5
        assert _fields(validate_product(merged)) == [("price", "gt")]
