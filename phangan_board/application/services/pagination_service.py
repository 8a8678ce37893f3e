from dataclasses import dataclass
from typing import Final, Literal

ELLIPSIS: Final = "ellipsis"
MAX_PAGES_WITHOUT_ELLIPSIS = 5
WINDOW_RADIUS = 1

PageItem = int | Literal["ellipsis"]


@dataclass(frozen=True)
class PaginationView:
    current_page: int
    total_pages: int
    items: list[PageItem]
    has_previous: bool
    has_next: bool

    @property
    def is_visible(self) -> bool:
        return self.total_pages > 1


def build_page_numbers(current_page: int, total_pages: int) -> list[PageItem]:
    """
    Zero-based page numbers to show in the pagination bar.

    Small page counts are listed in full. Otherwise the first and last pages
    frame a window of up to three pages around the current one, clamped to
    the interior pages, with an ellipsis on each side the window does not touch.
    """
    if total_pages <= 0:
        return []
    if total_pages <= MAX_PAGES_WITHOUT_ELLIPSIS:
        return list(range(total_pages))

    last_page = total_pages - 1
    window_start = max(1, current_page - WINDOW_RADIUS)
    window_end = min(last_page - 1, current_page + WINDOW_RADIUS)

    items: list[PageItem] = [0]
    if window_start > 1:
        items.append(ELLIPSIS)
    items.extend(range(window_start, window_end + 1))
    if window_end < last_page - 1:
        items.append(ELLIPSIS)
    items.append(last_page)
    return items


def previous_page(current_page: int, total_pages: int) -> int | None:
    if total_pages <= 1 or current_page <= 0:
        return None
    return current_page - 1


def next_page(current_page: int, total_pages: int) -> int | None:
    if total_pages <= 1 or current_page >= total_pages - 1:
        return None
    return current_page + 1


def build_pagination_view(current_page: int, total_pages: int) -> PaginationView:
    return PaginationView(
        current_page=current_page,
        total_pages=total_pages,
        items=build_page_numbers(current_page, total_pages) if total_pages > 1 else [],
        has_previous=previous_page(current_page, total_pages) is not None,
        has_next=next_page(current_page, total_pages) is not None,
    )
