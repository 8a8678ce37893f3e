from decimal import Decimal

import pytest

from phangan_board.application.errors import ValidationError
from phangan_board.application.services.ad_form_service import (
    collect_create_errors,
    validate_create_form,
    validate_update_form,
)
from phangan_board.interfaces.schemas.ad import AdCreateRequest, AdUpdateRequest


def test_create_form_reports_every_missing_field():
    """
    Validate required-field messages of the create form.

    1. Validate an empty create form.
    2. Validate title, description and category are reported as required.
    3. Validate the default zero price is accepted.
    """
    errors = collect_create_errors(AdCreateRequest())
    assert errors == {
        "title": "Title is required",
        "description": "Description is required",
        "category_id": "Category is required",
    }


def test_create_form_enforces_lengths_and_non_negative_price():
    form = AdCreateRequest(title="Bike", description="Too short", price=Decimal("-1"), category_id=2)
    with pytest.raises(ValidationError) as exc:
        validate_create_form(form)
    assert exc.value.field_errors == {
        "title": "Title must be at least 5 characters",
        "description": "Description must be at least 10 characters",
        "price": "Price cannot be negative",
    }


def test_create_form_accepts_valid_payload():
    form = AdCreateRequest(title="Scooter rental", description="Honda Click with helmet", price=250, category_id=3)
    assert validate_create_form(form) is form


def test_update_form_checks_only_present_fields():
    """
    Validate partial checks of the edit form.

    1. Validate an empty update passes.
    2. Validate whitespace-padded short title and description are rejected.
    3. Validate a negative price is rejected.
    """
    assert validate_update_form(AdUpdateRequest()) == AdUpdateRequest()

    with pytest.raises(ValidationError) as exc:
        validate_update_form(AdUpdateRequest(title="  abc   ", description="   short    ", price=-5))
    assert set(exc.value.field_errors) == {"title", "description", "price"}
    assert "title: Title must be at least 5 characters" in str(exc.value)
