import asyncio

from phangan_board.application.services.listing_service import ListingStore, go_to_page, run_search
from phangan_board.application.services.pagination_service import ELLIPSIS
from phangan_board.domain.area import Area
from phangan_board.domain.sorting import SortDirection, SortField
from phangan_board.interfaces.schemas.search import SearchFilters
from tests.helpers.fake_board_api import fake_api_client


def test_price_range_search_with_no_matches_shows_empty_listing_without_error(fake_board):
    """
    Validate an empty search end to end.

    1. Search an empty board with a price range of 100 to 500.
    2. Validate the request carried both price bounds.
    3. Validate the store shows zero results and no error notice.
    4. Validate no pagination controls are shown.
    """
    store = ListingStore()
    store.set_filters(SearchFilters(min_price=100, max_price=500))

    async def scenario():
        async with fake_api_client(fake_board) as client:
            await run_search(client, store)

    asyncio.run(scenario())
    assert "minPrice=100" in fake_board.search_queries[0]
    assert "maxPrice=500" in fake_board.search_queries[0]
    assert store.ads == []
    assert store.state.result.total_elements == 0
    assert store.state.error is None
    assert store.pagination.is_visible is False


def test_filters_text_search_and_sorting_against_board(seeded_board):
    """
    Validate filter composition against a populated board.

    1. Search for housing ads sorted by price ascending.
    2. Validate both housing ads are returned cheapest first.
    3. Search by free text and area.
    4. Validate only the scooter rental matches.
    """
    store = ListingStore()

    async def scenario():
        async with fake_api_client(seeded_board) as client:
            store.set_filters(SearchFilters(category_id=1, sort_by=SortField.price, sort_direction=SortDirection.asc))
            await run_search(client, store)
            housing = [ad.title for ad in store.ads]

            store.reset_filters()
            store.set_filters(store.state.filters.with_changes(area=Area.haad_rin))
            store.set_search_query("honda click")
            await run_search(client, store)
            return housing

    housing = asyncio.run(scenario())
    assert housing == ["Sea view bungalow", "Villa for sale"]
    assert [ad.title for ad in store.ads] == ["Scooter rental"]
    assert "q=honda+click" in seeded_board.search_queries[-1]


def test_paging_through_results_follows_navigation_rules(fake_board):
    """
    Validate pagination across a twelve-ad board with one ad per page.

    1. Seed twelve ads and search with page size one.
    2. Validate the first page disables Previous and shows an ellipsis before the last page.
    3. Jump to a middle page and validate the centered window.
    4. Jump to the last page and validate Next is disabled.
    """
    for index in range(12):
        fake_board.add_ad(title=f"Listing number {index}", createdAt=f"2024-02-{index + 1:02d}T00:00:00+00:00")
    store = ListingStore()
    store.set_filters(SearchFilters(size=1))

    async def scenario():
        async with fake_api_client(fake_board) as client:
            await run_search(client, store)
            first = store.pagination
            await go_to_page(client, store, 5)
            middle = store.pagination
            await go_to_page(client, store, 11)
            last = store.pagination
            moved = await go_to_page(client, store, None)
            return first, middle, last, moved

    first, middle, last, moved = asyncio.run(scenario())
    assert first.has_previous is False
    assert first.items == [0, 1, ELLIPSIS, 11]
    assert middle.items == [0, ELLIPSIS, 4, 5, 6, ELLIPSIS, 11]
    assert last.has_next is False
    assert last.has_previous is True
    assert moved is False
    assert [ad.title for ad in store.ads] == ["Listing number 0"]
