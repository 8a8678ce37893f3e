from decimal import Decimal
from enum import Enum
from urllib.parse import urlencode

from phangan_board.interfaces.schemas.search import SearchFilters

SEARCH_ENDPOINT = "/ads/search"

# Wire order of the search parameters; keeps identical filters byte-identical in URLs and logs.
SEARCH_PARAMETER_ORDER: tuple[tuple[str, str], ...] = (
    ("categoryId", "category_id"),
    ("userId", "user_id"),
    ("status", "status"),
    ("minPrice", "min_price"),
    ("maxPrice", "max_price"),
    ("q", "q"),
    ("area", "area"),
    ("pricePeriod", "price_period"),
    ("page", "page"),
    ("size", "size"),
    ("sortBy", "sort_by"),
    ("sortDirection", "sort_direction"),
)


def _format_value(value: object) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def build_search_params(filters: SearchFilters) -> list[tuple[str, str]]:
    params: list[tuple[str, str]] = []
    for wire_name, attribute in SEARCH_PARAMETER_ORDER:
        value = getattr(filters, attribute)
        if value is None:
            continue
        if attribute == "q" and not value.strip():
            continue
        params.append((wire_name, _format_value(value)))
    return params


def build_search_query(filters: SearchFilters) -> str:
    return urlencode(build_search_params(filters))


def build_search_endpoint(filters: SearchFilters) -> str:
    query = build_search_query(filters)
    return f"{SEARCH_ENDPOINT}?{query}" if query else SEARCH_ENDPOINT
