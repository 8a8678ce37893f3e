from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from phangan_board.config import settings
from phangan_board.domain.ad_status import AdStatus
from phangan_board.domain.area import Area
from phangan_board.domain.price_period import PricePeriod
from phangan_board.domain.sorting import SortDirection, SortField


class SearchFilters(BaseModel):
    """One search interaction; never mutated once handed to the client."""

    model_config = ConfigDict(frozen=True)

    category_id: int | None = None
    user_id: int | None = None
    status: AdStatus | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    q: str | None = None
    area: Area | None = None
    price_period: PricePeriod | None = None
    page: int = 0
    size: int = Field(default_factory=lambda: settings.default_page_size)
    sort_by: SortField | None = None
    sort_direction: SortDirection | None = None

    def with_changes(self, **changes) -> "SearchFilters":
        return self.model_validate({**self.model_dump(), **changes})


def default_filters() -> SearchFilters:
    return SearchFilters(page=0, size=settings.default_page_size, sort_by=SortField.created_at, sort_direction=SortDirection.desc)
