import asyncio
from collections.abc import Sequence
from dataclasses import dataclass, field

from phangan_board.application.errors import ApiError, ApplicationError, ValidationError, describe_error
from phangan_board.application.ports import Router, Translator
from phangan_board.application.services.ad_form_service import validate_create_form, validate_update_form
from phangan_board.config import settings
from phangan_board.infrastructure.http.board_api_client import BoardApiClient
from phangan_board.infrastructure.i18n import default_translator
from phangan_board.infrastructure.logging import get_logger
from phangan_board.interfaces.schemas.ad import Ad, AdCreateRequest, AdImage, AdUpdateRequest
from phangan_board.interfaces.schemas.category import Category
from phangan_board.interfaces.schemas.image import ImageUpload

logger = get_logger(__name__)


def build_edit_link(token: str, site_url: str | None = None) -> str:
    return f"{(site_url or settings.site_url).rstrip('/')}/edit/{token}"


@dataclass
class PostAdOutcome:
    ad: Ad | None = None
    edit_link: str | None = None
    images: list[AdImage] = field(default_factory=list)
    form_errors: dict[str, str] = field(default_factory=dict)
    error: str | None = None
    warning: str | None = None

    @property
    def created(self) -> bool:
        return self.ad is not None


async def post_ad(
    client: BoardApiClient,
    form: AdCreateRequest,
    images: Sequence[ImageUpload] = (),
    *,
    translate: Translator = default_translator,
    site_url: str | None = None,
) -> PostAdOutcome:
    """
    Create an ad, then attach its images with the one-time edit token.

    An image upload failure does not undo the creation: the outcome keeps the
    ad and its edit link and reports the failure as a warning.
    """
    try:
        validate_create_form(form)
    except ValidationError as exc:
        return PostAdOutcome(form_errors=exc.field_errors)

    try:
        ad = await client.create_ad(form)
    except ApplicationError as exc:
        return PostAdOutcome(error=describe_error(exc, translate("errors.create_failed")))

    outcome = PostAdOutcome(ad=ad, edit_link=build_edit_link(ad.edit_token, site_url) if ad.edit_token else None)
    if not images:
        return outcome
    if not ad.edit_token:
        outcome.warning = translate("warnings.images_not_uploaded")
        logger.warning("ad_images_skipped_missing_token", ad_id=ad.id)
        return outcome

    try:
        outcome.images = await client.upload_images(ad.id, ad.edit_token, images)
    except ApplicationError as exc:
        reason = describe_error(exc, translate("errors.image_upload_failed"))
        outcome.warning = f"{translate('warnings.images_not_uploaded')}: {reason}"
        logger.warning("ad_images_upload_failed_after_create", ad_id=ad.id, error=str(exc))
    return outcome


class EditAdSession:
    """Token-authorized editing of a single ad, mirroring the edit screen's state."""

    def __init__(
        self,
        client: BoardApiClient,
        token: str,
        router: Router,
        translate: Translator = default_translator,
    ) -> None:
        self.client = client
        self.token = token.strip()
        self.router = router
        self.translate = translate
        self.ad: Ad | None = None
        self.categories: list[Category] = []
        self.form = AdUpdateRequest()
        self.form_errors: dict[str, str] = {}
        self.error: str | None = None
        self.success: str | None = None

    async def load(self) -> bool:
        if not self.token:
            self.error = self.translate("errors.invalid_edit_link")
            return False
        try:
            ad, categories = await asyncio.gather(self.client.get_ad_by_token(self.token), self.client.get_categories())
        except ApiError as exc:
            self.error = self.translate("errors.ad_not_found_by_token") if exc.is_not_found else exc.message
            return False
        except ApplicationError as exc:
            self.error = describe_error(exc, self.translate("errors.load_ad_failed"))
            return False
        self.ad = ad
        self.categories = categories
        self.form = AdUpdateRequest.from_ad(ad)
        return True

    async def save(self, changes: AdUpdateRequest | None = None) -> bool:
        if self.ad is None:
            return False
        form = self.form
        if changes is not None:
            form = form.model_copy(update=changes.model_dump(exclude_none=True))
        self.error = None
        self.success = None
        try:
            validate_update_form(form)
        except ValidationError as exc:
            self.form_errors = exc.field_errors
            return False
        self.form_errors = {}
        self.form = form
        try:
            self.ad = await self.client.update_ad_by_token(self.token, form)
        except ApplicationError as exc:
            self.error = describe_error(exc, self.translate("errors.update_failed"))
            return False
        self.success = self.translate("messages.ad_updated")
        return True

    async def delete(self) -> bool:
        if not self.token:
            return False
        self.error = None
        try:
            await self.client.delete_ad_by_token(self.token)
        except ApplicationError as exc:
            self.error = describe_error(exc, self.translate("errors.delete_failed"))
            return False
        self.ad = None
        self.router.navigate("/", replace=True)
        return True

    async def upload_images(self, images: Sequence[ImageUpload]) -> bool:
        if self.ad is None or not images:
            return False
        self.error = None
        try:
            uploaded = await self.client.upload_images(self.ad.id, self.token, images)
        except ApplicationError as exc:
            self.error = describe_error(exc, self.translate("errors.image_upload_failed"))
            return False
        self.ad = self.ad.model_copy(update={"images": [*self.ad.images, *uploaded]})
        return True

    async def delete_image(self, image_id: int) -> bool:
        if self.ad is None:
            return False
        self.error = None
        try:
            await self.client.delete_image(self.ad.id, image_id, self.token)
        except ApplicationError as exc:
            self.error = describe_error(exc, self.translate("errors.image_delete_failed"))
            return False
        self.ad = self.ad.model_copy(update={"images": [image for image in self.ad.images if image.id != image_id]})
        self.success = self.translate("messages.image_deleted")
        return True
