from enum import Enum


class PricePeriod(str, Enum):
    day = "DAY"
    week = "WEEK"
    month = "MONTH"
    sale = "SALE"

    @property
    def label(self) -> str:
        return PRICE_PERIOD_LABELS[self]


PRICE_PERIOD_LABELS: dict[PricePeriod, str] = {
    PricePeriod.day: "Per Day",
    PricePeriod.week: "Per Week",
    PricePeriod.month: "Per Month",
    PricePeriod.sale: "For Sale",
}
