from enum import Enum


class AdStatus(str, Enum):
    active = "ACTIVE"
    inactive = "INACTIVE"
    sold = "SOLD"
    deleted = "DELETED"
    blocked = "BLOCKED"


# DELETED and BLOCKED are set by the board itself, never chosen by the poster.
USER_EDITABLE_STATUSES: dict[AdStatus, str] = {
    AdStatus.active: "Active",
    AdStatus.inactive: "Inactive",
    AdStatus.sold: "Sold",
}
