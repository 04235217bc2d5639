"""Unit tests for the Product aggregate."""

import pytest

from shopql.domain.exceptions import ValidationError
from shopql.domain.model.product import Product
from shopql.domain.model.value_objects import Money


def test_create_strips_whitespace():
    product = Product.create(" p1 ", "  Widget ", Money.of("3"))
    assert product.id == "p1"
    assert product.name == "Widget"


def test_create_requires_name():
    with pytest.raises(ValidationError, match="name is required"):
        Product.create("p1", "   ", Money.of("3"))


def test_create_requires_id():
    with pytest.raises(ValidationError, match="id is required"):
        Product.create("", "Widget", Money.of("3"))
