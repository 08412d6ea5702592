"""Unit tests for the Product domain entity."""

from product_api.domain.entities import Product


def test_update_only_touches_given_fields():
    product = Product(owner="o", name="A", description="B")

    product.update(description="C")

    assert product == Product(owner="o", name="A", description="C")


def test_update_accepts_empty_strings():
    product = Product(owner="o", name="A", description="B")

    product.update(name="", description="")

    assert (product.name, product.description) == ("", "")
