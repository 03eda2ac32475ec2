"""Tests for storefront filtering and sorting."""

import pytest

from models.product import Product
from services.catalog import brands, filter_products, sort_products


@pytest.fixture
def products():
    return [
        Product.from_payload(1, {"code": "1001", "name_en": "Olive Oil", "name_ar": "زيت زيتون",
                                 "brand_en": "Wadi", "brand_ar": "الوادي", "price": 30}),
        Product.from_payload(2, {"code": "2002", "name_en": "basmati rice", "name_ar": "أرز",
                                 "brand_en": "Walimah", "brand_ar": "الوليمة", "price": 55}),
        Product.from_payload(3, {"code": "3003", "name_en": "Coffee", "name_ar": "قهوة",
                                 "brand_en": "Wadi", "brand_ar": "الوادي", "price": 12}),
        Product.from_payload(4, {"code": "4004", "name_en": "Tea", "price": 8}),
    ]


def test_brands_are_unique_sorted_and_non_empty(products):
    assert brands(products, "en") == ["Wadi", "Walimah"]
    assert brands(products, "ar") == sorted({"الوادي", "الوليمة"})


def test_filter_by_brand(products):
    result = filter_products(products, "en", brand="Wadi")
    assert [p.id for p in result] == [1, 3]


def test_search_is_case_insensitive_over_name_brand_and_code(products):
    assert [p.id for p in filter_products(products, "en", query="BASMATI")] == [2]
    assert [p.id for p in filter_products(products, "en", query="walim")] == [2]
    assert [p.id for p in filter_products(products, "en", query="300")] == [3]


def test_search_uses_current_language(products):
    assert [p.id for p in filter_products(products, "ar", query="قهوة")] == [3]
    assert filter_products(products, "en", query="قهوة") == []


def test_no_filters_returns_everything(products):
    assert len(filter_products(products, "en")) == 4


@pytest.mark.parametrize("sort_by, expected", [
    ("name", [2, 3, 1, 4]),
    ("price-asc", [4, 3, 1, 2]),
    ("price-desc", [2, 1, 3, 4]),
    ("brand", [4, 1, 3, 2]),
    ("", [1, 2, 3, 4]),
    ("bogus", [1, 2, 3, 4]),
])
def test_sort_products(products, sort_by, expected):
    assert [p.id for p in sort_products(products, "en", sort_by)] == expected
