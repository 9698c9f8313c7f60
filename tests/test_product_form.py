"""Tests for the product form's validation and submission payloads."""
from conftest import make_product
from src.models.product import Product, ProductInput
from src.ui.components.product_form import DEFAULT_VALUES, build_submission, initial_values

FORM_VALUES = {
    "name": "Desk Lamp",
    "image": "https://images.unsplash.com/photo-1",
    "description": "Warm light for late nights",
    "category": "Home",
    "price": 24.5,
    "quantity": 3.0,
    "status": "Out of Stock",
}


class TestInitialValues:
    def test_create_mode_defaults(self):
        values = initial_values(None)
        assert values == DEFAULT_VALUES
        assert values["status"] == "In Stock"
        assert values["price"] == 0

    def test_edit_mode_is_seeded_from_record(self):
        product = make_product(7, "Charlie", price=12.0)
        values = initial_values(product)
        assert values["name"] == "Charlie"
        assert values["price"] == 12.0
        assert "id" not in values


class TestBuildSubmission:
    def test_create_payload(self):
        payload, errors = build_submission(FORM_VALUES)
        assert errors == {}
        assert isinstance(payload, ProductInput)
        assert payload.quantity == 3
        assert payload.model_dump(mode="json")["status"] == "Out of Stock"

    def test_edit_merges_into_original_record(self):
        original = make_product(7, "Charlie")

        payload, errors = build_submission(FORM_VALUES, original)

        assert errors == {}
        assert isinstance(payload, Product)
        assert payload.id == 7
        assert payload.product_id == "PRD-7"
        assert payload.name == "Desk Lamp"
        assert payload.status == "Out of Stock"
        assert original.name == "Charlie"

    def test_invalid_values_return_inline_errors(self):
        values = {**FORM_VALUES, "name": "", "image": "not a url", "quantity": None}

        payload, errors = build_submission(values)

        assert payload is None
        assert set(errors) == {"name", "image", "quantity"}
        assert errors["image"] == "Valid image URL required"

    def test_blank_create_form_is_invalid(self):
        payload, errors = build_submission(dict(DEFAULT_VALUES))
        assert payload is None
        assert {"name", "image", "description", "category"} <= set(errors)
