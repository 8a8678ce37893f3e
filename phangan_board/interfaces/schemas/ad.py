from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import Field, PlainSerializer

from phangan_board.domain.ad_status import AdStatus
from phangan_board.domain.area import Area
from phangan_board.domain.price_period import PricePeriod
from phangan_board.interfaces.schemas.base import ApiModel


def _decimal_to_number(value: Decimal) -> int | float:
    if value == value.to_integral_value():
        return int(value)
    return float(value)


# Prices travel as JSON numbers, not the string pydantic uses for Decimal.
Price = Annotated[Decimal, PlainSerializer(_decimal_to_number, return_type=int | float, when_used="json")]


class AdImage(ApiModel):
    id: int
    url: str


class Ad(ApiModel):
    id: int
    title: str
    description: str
    price: Price
    category_id: int
    category_name: str | None = None
    user_id: int
    user_name: str | None = None
    status: AdStatus
    area: Area | None = None
    price_period: PricePeriod | None = None
    edit_token: str | None = None
    created_at: datetime
    updated_at: datetime
    images: list[AdImage] = Field(default_factory=list)

    @property
    def price_label(self) -> str:
        label = f"{self.price:,} THB"
        if self.price_period is not None:
            label += f" / {self.price_period.value.lower()}"
        return label


class AdCreateRequest(ApiModel):
    title: str = ""
    description: str = ""
    price: Price = Decimal("0")
    category_id: int | None = None
    user_id: int = 1
    area: Area | None = None
    price_period: PricePeriod | None = None
    status: AdStatus | None = None


class AdUpdateRequest(ApiModel):
    title: str | None = None
    description: str | None = None
    price: Price | None = None
    category_id: int | None = None
    area: Area | None = None
    price_period: PricePeriod | None = None
    status: AdStatus | None = None

    @classmethod
    def from_ad(cls, ad: Ad) -> "AdUpdateRequest":
        return cls(
            title=ad.title,
            description=ad.description,
            price=ad.price,
            category_id=ad.category_id,
            area=ad.area,
            price_period=ad.price_period,
        )
