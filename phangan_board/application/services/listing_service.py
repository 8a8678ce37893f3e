from dataclasses import dataclass, field
from typing import Protocol

from phangan_board.application.errors import ApplicationError, describe_error
from phangan_board.application.ports import Translator
from phangan_board.application.services.pagination_service import PaginationView, build_pagination_view
from phangan_board.domain.view_mode import ViewMode
from phangan_board.infrastructure.i18n import default_translator
from phangan_board.infrastructure.logging import get_logger
from phangan_board.interfaces.schemas.ad import Ad
from phangan_board.interfaces.schemas.pagination import PageResult
from phangan_board.interfaces.schemas.search import SearchFilters, default_filters

logger = get_logger(__name__)


class AdSearcher(Protocol):
    async def search_ads(self, filters: SearchFilters) -> PageResult[Ad]: ...


@dataclass
class ListingState:
    filters: SearchFilters = field(default_factory=default_filters)
    search_query: str = ""
    view_mode: ViewMode = ViewMode.grid
    result: PageResult[Ad] | None = None
    loading: bool = False
    error: str | None = None


class ListingStore:
    """
    State container for the ads listing screen.

    Every search gets a ticket from ``begin_search``; only the response that
    carries the latest ticket may touch the state, so a slow response to a
    superseded search can never overwrite newer results.
    """

    def __init__(self, state: ListingState | None = None) -> None:
        self.state = state or ListingState()
        self._latest_ticket = 0

    @property
    def ads(self) -> list[Ad]:
        return self.state.result.content if self.state.result is not None else []

    @property
    def pagination(self) -> PaginationView:
        result = self.state.result
        if result is None:
            return build_pagination_view(self.state.filters.page, 0)
        return build_pagination_view(result.page, result.total_pages)

    def set_filters(self, filters: SearchFilters) -> None:
        self.state.filters = filters.with_changes(page=0)
        self.state.search_query = filters.q or ""

    def set_search_query(self, text: str) -> None:
        self.state.search_query = text
        self.state.filters = self.state.filters.with_changes(q=text or None, page=0)

    def set_page(self, page: int) -> None:
        self.state.filters = self.state.filters.with_changes(page=page)

    def set_view_mode(self, mode: ViewMode) -> None:
        self.state.view_mode = mode

    def reset_filters(self) -> None:
        self.state.filters = default_filters()
        self.state.search_query = ""

    def begin_search(self) -> tuple[int, SearchFilters]:
        self._latest_ticket += 1
        self.state.loading = True
        self.state.error = None
        return self._latest_ticket, self.state.filters

    def is_current(self, ticket: int) -> bool:
        return ticket == self._latest_ticket

    def resolve_search(self, ticket: int, result: PageResult[Ad]) -> bool:
        if not self.is_current(ticket):
            logger.info("stale_search_response_discarded", ticket=ticket, latest_ticket=self._latest_ticket)
            return False
        self.state.result = result
        self.state.loading = False
        return True

    def fail_search(self, ticket: int, message: str) -> bool:
        if not self.is_current(ticket):
            logger.info("stale_search_failure_discarded", ticket=ticket, latest_ticket=self._latest_ticket)
            return False
        self.state.error = message
        self.state.loading = False
        return True


async def run_search(client: AdSearcher, store: ListingStore, translate: Translator = default_translator) -> bool:
    ticket, filters = store.begin_search()
    try:
        result = await client.search_ads(filters)
    except ApplicationError as exc:
        logger.warning("ad_search_failed", ticket=ticket, error=str(exc))
        return store.fail_search(ticket, describe_error(exc, translate("errors.search_failed")))
    logger.info(
        "ad_search_completed",
        ticket=ticket,
        page=result.page,
        total_elements=result.total_elements,
        total_pages=result.total_pages,
    )
    return store.resolve_search(ticket, result)


async def go_to_page(client: AdSearcher, store: ListingStore, page: int | None) -> bool:
    """Move to ``page`` and search; ``None`` is what a disabled control yields and is a no-op."""
    if page is None:
        return False
    store.set_page(page)
    return await run_search(client, store)
