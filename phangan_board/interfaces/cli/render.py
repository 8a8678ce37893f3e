from phangan_board.application.ports import Translator
from phangan_board.application.services.listing_service import ListingStore
from phangan_board.application.services.pagination_service import ELLIPSIS, PaginationView
from phangan_board.domain.view_mode import ViewMode
from phangan_board.interfaces.schemas.ad import Ad
from phangan_board.interfaces.schemas.category import Category

DESCRIPTION_EXCERPT_LENGTH = 80


def _excerpt(text: str, limit: int = DESCRIPTION_EXCERPT_LENGTH) -> str:
    text = " ".join(text.split())
    return text if len(text) <= limit else text[: limit - 1].rstrip() + "…"


def render_ad_summary(ad: Ad, view_mode: ViewMode) -> str:
    tags = [tag for tag in (ad.category_name, ad.area.label if ad.area else None) if tag]
    headline = f"#{ad.id} {ad.title} | {ad.price_label}"
    if tags:
        headline += f" | {', '.join(tags)}"
    if view_mode is ViewMode.grid:
        return headline
    return f"{headline}\n    {_excerpt(ad.description)}"


def render_pagination(view: PaginationView) -> str:
    if not view.is_visible:
        return ""
    parts = ["« Prev" if view.has_previous else "(« Prev)"]
    for item in view.items:
        if item == ELLIPSIS:
            parts.append("…")
        elif item == view.current_page:
            parts.append(f"[{item + 1}]")
        else:
            parts.append(str(item + 1))
    parts.append("Next »" if view.has_next else "(Next »)")
    return "  ".join(parts)


def render_listing(store: ListingStore, translate: Translator) -> str:
    state = store.state
    if state.error:
        return f"Error: {state.error}"
    if not store.ads:
        return f"{translate('listing.empty')}\n{translate('listing.empty_hint')}"

    result = state.result
    lines = [f"{result.total_elements} ads, page {result.page + 1} of {max(result.total_pages, 1)}"]
    lines.extend(render_ad_summary(ad, state.view_mode) for ad in store.ads)
    bar = render_pagination(store.pagination)
    if bar:
        lines.append(bar)
    return "\n".join(lines)


def render_ad_detail(ad: Ad) -> str:
    lines = [
        ad.title,
        ad.price_label,
        f"Status: {ad.status.value}",
    ]
    if ad.category_name:
        lines.append(f"Category: {ad.category_name}")
    if ad.area is not None:
        lines.append(f"Area: {ad.area.label}")
    if ad.user_name:
        lines.append(f"Posted by: {ad.user_name}")
    lines.append(f"Posted: {ad.created_at:%Y-%m-%d %H:%M}")
    lines.append("")
    lines.append(ad.description)
    if ad.images:
        lines.append("")
        lines.append(f"{len(ad.images)} image(s)")
    return "\n".join(lines)


def render_categories(categories: list[Category]) -> str:
    return "\n".join(
        f"{category.id}\t{category.name}" + (f"\t{category.description}" if category.description else "")
        for category in categories
    )


def render_form_errors(form_errors: dict[str, str]) -> str:
    return "\n".join(f"{field}: {message}" for field, message in form_errors.items())
