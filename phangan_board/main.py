"""Terminal front-end for the Phangan Board classifieds."""

import argparse
import asyncio
import sys
from decimal import Decimal
from pathlib import Path
from typing import TextIO

from phangan_board.application.errors import ApplicationError, describe_error
from phangan_board.application.services.ad_detail_service import load_ad_detail, open_gallery
from phangan_board.application.services.ad_editor_service import EditAdSession, post_ad
from phangan_board.application.services.listing_service import ListingStore, run_search
from phangan_board.config import settings
from phangan_board.domain.ad_status import USER_EDITABLE_STATUSES, AdStatus
from phangan_board.domain.area import Area
from phangan_board.domain.price_period import PricePeriod
from phangan_board.domain.sorting import SortDirection, SortField
from phangan_board.domain.view_mode import ViewMode
from phangan_board.infrastructure.http.board_api_client import BoardApiClient
from phangan_board.infrastructure.i18n import default_translator
from phangan_board.infrastructure.logging import bind_session_context, clear_session_context, configure_logging, get_logger
from phangan_board.interfaces.cli.console import ConsoleImageViewer, ConsoleRouter
from phangan_board.interfaces.cli.render import (
    render_ad_detail,
    render_categories,
    render_form_errors,
    render_listing,
)
from phangan_board.interfaces.schemas.ad import AdCreateRequest, AdUpdateRequest
from phangan_board.interfaces.schemas.image import ImageUpload
from phangan_board.interfaces.schemas.search import SearchFilters

logger = get_logger(__name__)


def _metavar(enum_type) -> str:
    return "{" + ",".join(member.value for member in enum_type) + "}"


def _editable_status(value: str) -> AdStatus:
    status = AdStatus(value)
    if status not in USER_EDITABLE_STATUSES:
        raise argparse.ArgumentTypeError(f"status must be one of {', '.join(s.value for s in USER_EDITABLE_STATUSES)}")
    return status


def _add_ad_fields(parser: argparse.ArgumentParser, *, required: bool) -> None:
    parser.add_argument("--title", required=required)
    parser.add_argument("--description", required=required)
    parser.add_argument("--price", type=Decimal, required=required)
    parser.add_argument("--category-id", type=int, required=required)
    parser.add_argument("--area", type=Area, metavar=_metavar(Area))
    parser.add_argument("--price-period", type=PricePeriod, metavar=_metavar(PricePeriod))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="phangan-board", description=f"{settings.app_name} classifieds client.")
    parser.add_argument("--api-url", default=None, help="Board API base URL (defaults to API_URL).")
    parser.add_argument("--log-level", default=None, help="Log level for diagnostics on stderr.")
    commands = parser.add_subparsers(dest="command", required=True)

    search = commands.add_parser("search", help="Search and filter ads.")
    search.add_argument("-q", "--query", default="", help="Free-text search.")
    search.add_argument("--category-id", type=int)
    search.add_argument("--user-id", type=int)
    search.add_argument("--status", type=AdStatus, metavar=_metavar(AdStatus))
    search.add_argument("--min-price", type=Decimal)
    search.add_argument("--max-price", type=Decimal)
    search.add_argument("--area", type=Area, metavar=_metavar(Area))
    search.add_argument("--price-period", type=PricePeriod, metavar=_metavar(PricePeriod))
    search.add_argument("--page", type=int, default=1, help="One-based page number.")
    search.add_argument("--size", type=int, default=settings.default_page_size)
    search.add_argument("--sort-by", type=SortField, default=SortField.created_at, metavar=_metavar(SortField))
    search.add_argument(
        "--sort-direction", type=SortDirection, default=SortDirection.desc, metavar=_metavar(SortDirection)
    )
    search.add_argument("--view", type=ViewMode, default=ViewMode.grid, metavar=_metavar(ViewMode))

    show = commands.add_parser("show", help="Show a single ad.")
    show.add_argument("ad_id", type=int)
    show.add_argument("--gallery", type=int, metavar="INDEX", help="List the ad images starting at INDEX.")

    commands.add_parser("categories", help="List categories.")

    post = commands.add_parser("post", help="Post a new ad.")
    _add_ad_fields(post, required=True)
    post.add_argument("--user-id", type=int, default=1)
    post.add_argument("--image", dest="images", action="append", type=Path, default=[])

    edit = commands.add_parser("edit", help="Edit an ad with its edit token.")
    edit.add_argument("token")
    _add_ad_fields(edit, required=False)
    edit.add_argument("--status", type=_editable_status, metavar=_metavar(USER_EDITABLE_STATUSES))

    delete = commands.add_parser("delete", help="Delete an ad with its edit token.")
    delete.add_argument("token")

    add_images = commands.add_parser("add-images", help="Upload images to an ad.")
    add_images.add_argument("token")
    add_images.add_argument("paths", nargs="+", type=Path)

    remove_image = commands.add_parser("remove-image", help="Delete one image of an ad.")
    remove_image.add_argument("token")
    remove_image.add_argument("image_id", type=int)
    return parser


def filters_from_args(args: argparse.Namespace) -> SearchFilters:
    return SearchFilters(
        category_id=args.category_id,
        user_id=args.user_id,
        status=args.status,
        min_price=args.min_price,
        max_price=args.max_price,
        q=args.query or None,
        area=args.area,
        price_period=args.price_period,
        page=max(args.page - 1, 0),
        size=args.size,
        sort_by=args.sort_by,
        sort_direction=args.sort_direction,
    )


async def _search(client: BoardApiClient, args: argparse.Namespace, out: TextIO) -> int:
    store = ListingStore()
    store.set_view_mode(args.view)
    filters = filters_from_args(args)
    store.set_filters(filters)
    store.set_page(filters.page)
    await run_search(client, store)
    print(render_listing(store, default_translator), file=out)
    return 1 if store.state.error else 0


async def _show(client: BoardApiClient, args: argparse.Namespace, out: TextIO) -> int:
    detail = await load_ad_detail(client, args.ad_id)
    if detail.ad is None:
        print(f"Error: {detail.error}", file=out)
        return 1
    print(render_ad_detail(detail.ad), file=out)
    if args.gallery is not None:
        open_gallery(detail.ad, ConsoleImageViewer(out), args.gallery)
    return 0


async def _categories(client: BoardApiClient, args: argparse.Namespace, out: TextIO) -> int:
    try:
        categories = await client.get_categories()
    except ApplicationError as exc:
        print(f"Error: {describe_error(exc, default_translator('errors.categories_failed'))}", file=out)
        return 1
    print(render_categories(categories), file=out)
    return 0


async def _post(client: BoardApiClient, args: argparse.Namespace, out: TextIO) -> int:
    form = AdCreateRequest(
        title=args.title,
        description=args.description,
        price=args.price,
        category_id=args.category_id,
        user_id=args.user_id,
        area=args.area,
        price_period=args.price_period,
    )
    outcome = await post_ad(client, form, [ImageUpload.from_path(path) for path in args.images])
    if outcome.form_errors:
        print(render_form_errors(outcome.form_errors), file=out)
        return 1
    if not outcome.created:
        print(f"Error: {outcome.error}", file=out)
        return 1
    print(f"Ad #{outcome.ad.id} posted: {outcome.ad.title} ({outcome.ad.price_label})", file=out)
    if outcome.edit_link:
        print(f"Save this link to edit your ad later: {outcome.edit_link}", file=out)
    if outcome.warning:
        print(f"Warning: {outcome.warning}", file=out)
    return 0


async def _open_session(client: BoardApiClient, token: str, out: TextIO) -> EditAdSession | None:
    session = EditAdSession(client, token, ConsoleRouter(out))
    if not await session.load():
        print(f"Error: {session.error}", file=out)
        return None
    return session


async def _edit(client: BoardApiClient, args: argparse.Namespace, out: TextIO) -> int:
    session = await _open_session(client, args.token, out)
    if session is None:
        return 1
    changes = AdUpdateRequest(
        title=args.title,
        description=args.description,
        price=args.price,
        category_id=args.category_id,
        area=args.area,
        price_period=args.price_period,
        status=args.status,
    )
    if not await session.save(changes):
        print(render_form_errors(session.form_errors) or f"Error: {session.error}", file=out)
        return 1
    print(session.success, file=out)
    print(render_ad_detail(session.ad), file=out)
    return 0


async def _delete(client: BoardApiClient, args: argparse.Namespace, out: TextIO) -> int:
    session = EditAdSession(client, args.token, ConsoleRouter(out))
    if not await session.delete():
        print(f"Error: {session.error or default_translator('errors.invalid_edit_link')}", file=out)
        return 1
    return 0


async def _add_images(client: BoardApiClient, args: argparse.Namespace, out: TextIO) -> int:
    session = await _open_session(client, args.token, out)
    if session is None:
        return 1
    if not await session.upload_images([ImageUpload.from_path(path) for path in args.paths]):
        print(f"Error: {session.error}", file=out)
        return 1
    open_gallery(session.ad, ConsoleImageViewer(out))
    return 0


async def _remove_image(client: BoardApiClient, args: argparse.Namespace, out: TextIO) -> int:
    session = await _open_session(client, args.token, out)
    if session is None:
        return 1
    if not await session.delete_image(args.image_id):
        print(f"Error: {session.error}", file=out)
        return 1
    print(session.success, file=out)
    return 0


COMMANDS = {
    "search": _search,
    "show": _show,
    "categories": _categories,
    "post": _post,
    "edit": _edit,
    "delete": _delete,
    "add-images": _add_images,
    "remove-image": _remove_image,
}


async def run_command(args: argparse.Namespace, out: TextIO, client: BoardApiClient | None = None) -> int:
    handler = COMMANDS[args.command]
    if client is not None:
        return await handler(client, args, out)
    async with BoardApiClient(args.api_url) as owned_client:
        return await handler(owned_client, args, out)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    bind_session_context(command=args.command)
    logger.debug("cli_command_started", api_url=args.api_url or settings.api_url)
    try:
        return asyncio.run(run_command(args, sys.stdout))
    finally:
        clear_session_context()


if __name__ == "__main__":
    sys.exit(main())
