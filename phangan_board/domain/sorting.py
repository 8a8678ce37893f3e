from enum import Enum


class SortField(str, Enum):
    created_at = "createdAt"
    price = "price"
    title = "title"
    updated_at = "updatedAt"


class SortDirection(str, Enum):
    asc = "asc"
    desc = "desc"
