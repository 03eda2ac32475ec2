"""Tests for the Product model."""

from models.product import Product, coerce_price


def test_coerce_price_parses_numbers_and_strings():
    assert coerce_price(12) == 12.0
    assert coerce_price("12.50") == 12.5


def test_coerce_price_falls_back_to_default():
    assert coerce_price(None) == 0.0
    assert coerce_price("") == 0.0
    assert coerce_price("abc") == 0.0
    assert coerce_price(-3, default=7.0) == 7.0
    assert coerce_price(float("nan"), default=1.0) == 1.0


def test_from_payload_defaults_missing_fields():
    product = Product.from_payload(5, {"code": "1001", "name_en": "Oil"})

    assert product.id == 5
    assert product.code == "1001"
    assert product.name_en == "Oil"
    assert product.name_ar == ""
    assert product.price == 0.0
    assert product.image_url == ""


def test_update_preserves_fields_missing_from_payload():
    product = Product.from_payload(1, {
        "code": "1001", "name_en": "Oil", "name_ar": "زيت", "price": 10, "imageUrl": "/a.png",
    })

    product.update({"price": "12.5", "brand_en": "Wadi"})

    assert product.price == 12.5
    assert product.brand_en == "Wadi"
    assert product.name_en == "Oil"
    assert product.name_ar == "زيت"
    assert product.image_url == "/a.png"


def test_update_never_changes_id():
    product = Product.from_payload(3, {"code": "x"})
    product.update({"id": 99})
    assert product.id == 3


def test_to_dict_uses_wire_names():
    data = Product.from_payload(1, {"code": "1", "imageUrl": "http://x/y.png"}).to_dict()

    assert data["imageUrl"] == "http://x/y.png"
    assert "image_url" not in data
    assert set(data) == {
        "id", "code", "name_en", "name_ar", "brand_en", "brand_ar",
        "price", "description_en", "description_ar", "imageUrl",
    }


def test_from_dict_round_trips_stored_object():
    stored = {"id": "4", "code": 1001, "name_en": "Rice", "price": "5.5"}
    product = Product.from_dict(stored)

    assert product.id == 4
    assert product.code == "1001"
    assert product.price == 5.5
    assert product.description_ar == ""


def test_localized_accessors():
    product = Product.from_payload(1, {
        "name_en": "Coffee", "name_ar": "قهوة",
        "brand_en": "Qahwa", "brand_ar": "القهوة",
        "description_en": "Light", "description_ar": "خفيف",
    })

    assert product.name("en") == "Coffee"
    assert product.name("ar") == "قهوة"
    assert product.brand("ar") == "القهوة"
    assert product.description("en") == "Light"


def test_coerce_price_rejects_non_finite_values():
    assert coerce_price("inf") == 0.0
    assert coerce_price("1e999", default=4.0) == 4.0
    assert coerce_price(float("-inf")) == 0.0


def test_update_ignores_infinite_price():
    product = Product.from_payload(1, {"code": "1", "price": 10})
    product.update({"price": "Infinity"})
    assert product.price == 10.0
