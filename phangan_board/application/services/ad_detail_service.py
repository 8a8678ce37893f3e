from dataclasses import dataclass

from phangan_board.application.errors import ApplicationError, describe_error
from phangan_board.application.ports import ImageViewer, Translator
from phangan_board.infrastructure.http.board_api_client import BoardApiClient
from phangan_board.infrastructure.i18n import default_translator
from phangan_board.interfaces.schemas.ad import Ad


@dataclass
class AdDetail:
    ad: Ad | None = None
    error: str | None = None


async def load_ad_detail(client: BoardApiClient, ad_id: int, translate: Translator = default_translator) -> AdDetail:
    try:
        return AdDetail(ad=await client.get_ad(ad_id))
    except ApplicationError as exc:
        return AdDetail(error=describe_error(exc, translate("errors.load_ad_failed")))


def open_gallery(ad: Ad, viewer: ImageViewer, start_index: int = 0) -> bool:
    if not ad.images:
        return False
    start_index = min(max(start_index, 0), len(ad.images) - 1)
    viewer.open(ad.images, start_index, title=ad.title)
    return True
