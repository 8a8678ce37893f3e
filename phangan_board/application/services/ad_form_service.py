from phangan_board.application.errors import ValidationError
from phangan_board.interfaces.schemas.ad import AdCreateRequest, AdUpdateRequest

MIN_TITLE_LENGTH = 5
MIN_DESCRIPTION_LENGTH = 10


def collect_create_errors(form: AdCreateRequest) -> dict[str, str]:
    errors: dict[str, str] = {}

    if not form.title.strip():
        errors["title"] = "Title is required"
    elif len(form.title) < MIN_TITLE_LENGTH:
        errors["title"] = f"Title must be at least {MIN_TITLE_LENGTH} characters"

    if not form.description.strip():
        errors["description"] = "Description is required"
    elif len(form.description) < MIN_DESCRIPTION_LENGTH:
        errors["description"] = f"Description must be at least {MIN_DESCRIPTION_LENGTH} characters"

    if form.price < 0:
        errors["price"] = "Price cannot be negative"

    if not form.category_id:
        errors["category_id"] = "Category is required"

    return errors


def collect_update_errors(form: AdUpdateRequest) -> dict[str, str]:
    errors: dict[str, str] = {}

    if form.title is not None and len(form.title.strip()) < MIN_TITLE_LENGTH:
        errors["title"] = f"Title must be at least {MIN_TITLE_LENGTH} characters"

    if form.description is not None and len(form.description.strip()) < MIN_DESCRIPTION_LENGTH:
        errors["description"] = f"Description must be at least {MIN_DESCRIPTION_LENGTH} characters"

    if form.price is not None and form.price < 0:
        errors["price"] = "Price cannot be negative"

    return errors


def validate_create_form(form: AdCreateRequest) -> AdCreateRequest:
    errors = collect_create_errors(form)
    if errors:
        raise ValidationError(errors)
    return form


def validate_update_form(form: AdUpdateRequest) -> AdUpdateRequest:
    errors = collect_update_errors(form)
    if errors:
        raise ValidationError(errors)
    return form
