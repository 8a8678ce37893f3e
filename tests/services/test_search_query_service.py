from decimal import Decimal
from urllib.parse import parse_qsl

from phangan_board.application.services.search_query_service import (
    build_search_endpoint,
    build_search_params,
    build_search_query,
)
from phangan_board.domain.ad_status import AdStatus
from phangan_board.domain.area import Area
from phangan_board.domain.price_period import PricePeriod
from phangan_board.domain.sorting import SortDirection, SortField
from phangan_board.interfaces.schemas.search import SearchFilters, default_filters


def test_build_search_params_omits_undefined_fields():
    """
    Validate that only defined filters reach the query.

    1. Build filters with only a category set.
    2. Build the ordered parameter list.
    3. Validate the category, page and size are the only keys.
    4. Validate optional keys such as status and sortBy are absent.
    """
    params = build_search_params(SearchFilters(category_id=1, size=20))
    assert params == [("categoryId", "1"), ("page", "0"), ("size", "20")]
    keys = [key for key, _ in params]
    assert "status" not in keys
    assert "sortBy" not in keys


def test_build_search_params_serializes_each_field_once_with_exact_value():
    """
    Validate serialization of every supported filter.

    1. Build filters with all fields defined.
    2. Build the parameter list and index it by key.
    3. Validate each key appears once with the literal value or tag.
    4. Validate the fixed wire order.
    """
    filters = SearchFilters(
        category_id=4,
        user_id=9,
        status=AdStatus.sold,
        min_price=Decimal("100"),
        max_price=Decimal("2500.50"),
        q="bungalow",
        area=Area.haad_rin,
        price_period=PricePeriod.week,
        page=3,
        size=10,
        sort_by=SortField.updated_at,
        sort_direction=SortDirection.asc,
    )
    params = build_search_params(filters)
    keys = [key for key, _ in params]
    assert len(keys) == len(set(keys))
    assert keys == [
        "categoryId",
        "userId",
        "status",
        "minPrice",
        "maxPrice",
        "q",
        "area",
        "pricePeriod",
        "page",
        "size",
        "sortBy",
        "sortDirection",
    ]
    values = dict(params)
    assert values["status"] == "SOLD"
    assert values["minPrice"] == "100"
    assert values["maxPrice"] == "2500.50"
    assert values["area"] == "HAAD_RIN"
    assert values["pricePeriod"] == "WEEK"
    assert values["sortBy"] == "updatedAt"
    assert values["sortDirection"] == "asc"


def test_build_search_query_drops_blank_text_and_form_encodes_spaces():
    """
    Validate free-text normalization rules.

    1. Build a query with an empty and a whitespace-only q.
    2. Validate no q parameter is produced.
    3. Build a query with q containing a space.
    4. Validate the space is form-encoded as plus.
    """
    assert "q=" not in build_search_query(SearchFilters(q=""))
    assert "q=" not in build_search_query(SearchFilters(q="   \t"))
    assert "q=test+search" in build_search_query(SearchFilters(q="test search"))


def test_build_search_query_combines_category_area_period_and_price_range():
    """
    Validate combined filters stay independent and order-stable.

    1. Build filters with category, area, period and price range.
    2. Build the query twice from equal filters.
    3. Validate both strings are identical.
    4. Validate all five parameters are present.
    """
    filters = SearchFilters(
        category_id=1,
        area=Area.haad_rin,
        price_period=PricePeriod.week,
        min_price=100,
        max_price=1000,
    )
    query = build_search_query(filters)
    assert query == build_search_query(SearchFilters(**filters.model_dump()))
    assert query == "categoryId=1&minPrice=100&maxPrice=1000&area=HAAD_RIN&pricePeriod=WEEK&page=0&size=20"
    parsed = dict(parse_qsl(query))
    assert parsed["categoryId"] == "1"
    assert parsed["area"] == "HAAD_RIN"
    assert parsed["pricePeriod"] == "WEEK"


def test_search_filters_defaults_and_endpoint():
    """
    Validate defaults and the endpoint path.

    1. Build the reset filters used by the listing screen.
    2. Validate page zero, default size and createdAt desc sorting.
    3. Build the endpoint for those filters.
    4. Validate the endpoint path and query separator.
    """
    filters = default_filters()
    assert filters.page == 0
    assert filters.size == 20
    assert build_search_endpoint(filters) == "/ads/search?page=0&size=20&sortBy=createdAt&sortDirection=desc"
