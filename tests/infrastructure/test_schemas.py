from decimal import Decimal

from phangan_board.domain.ad_status import USER_EDITABLE_STATUSES, AdStatus
from phangan_board.domain.area import Area
from phangan_board.domain.price_period import PricePeriod
from phangan_board.interfaces.schemas.ad import Ad, AdUpdateRequest
from tests.helpers.factories import ad_payload


def test_ad_parses_wire_fields_and_defaults_images():
    """
    Validate decoding of an ad from the API.

    1. Decode an ad payload without images and with a BLOCKED status.
    2. Validate camelCase fields land on snake_case attributes.
    3. Validate images default to an empty list and timestamps are parsed.
    """
    ad = Ad.model_validate(ad_payload(4, status="BLOCKED", price=1250.5, area=None, pricePeriod="DAY"))
    assert ad.category_name == "Housing"
    assert ad.status is AdStatus.blocked
    assert ad.area is None
    assert ad.price_period is PricePeriod.day
    assert ad.price == Decimal("1250.5")
    assert ad.images == []
    assert ad.created_at.year == 2024


def test_price_label_includes_period():
    ad = Ad.model_validate(ad_payload(1, price=15000, pricePeriod="MONTH"))
    assert ad.price_label == "15,000 THB / month"
    without_period = Ad.model_validate(ad_payload(1, price=250, pricePeriod=None))
    assert without_period.price_label == "250 THB"


def test_update_request_from_ad_prefills_editable_fields():
    """
    Validate the edit form prefill.

    1. Decode an ad with area and period.
    2. Build the update request from it.
    3. Validate editable fields are copied and status is left out of the payload.
    """
    ad = Ad.model_validate(ad_payload(9, price=300, area="SALAD", pricePeriod="WEEK"))
    payload = AdUpdateRequest.from_ad(ad).to_payload()
    assert payload == {
        "title": "Test Ad 9",
        "description": "Description for test ad 9",
        "price": 300,
        "categoryId": 1,
        "area": "SALAD",
        "pricePeriod": "WEEK",
    }


def test_labels_and_user_editable_statuses():
    assert Area.haad_rin.label == "Haad Rin"
    assert PricePeriod.sale.label == "For Sale"
    assert list(USER_EDITABLE_STATUSES) == [AdStatus.active, AdStatus.inactive, AdStatus.sold]
