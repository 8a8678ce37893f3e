from collections.abc import Mapping

ENGLISH_MESSAGES: dict[str, str] = {
    "errors.search_failed": "Failed to load ads",
    "errors.load_ad_failed": "Failed to load ad",
    "errors.categories_failed": "Failed to load categories",
    "errors.create_failed": "Failed to create ad",
    "errors.update_failed": "Failed to update ad",
    "errors.delete_failed": "Failed to delete ad",
    "errors.image_upload_failed": "Failed to upload images",
    "errors.image_delete_failed": "Failed to delete image",
    "errors.invalid_edit_link": "Invalid edit link",
    "errors.ad_not_found_by_token": "Ad not found. The link may be invalid or the ad has been deleted.",
    "messages.ad_updated": "Ad updated successfully!",
    "messages.image_deleted": "Image deleted",
    "warnings.images_not_uploaded": "Ad created, but images could not be uploaded",
    "listing.empty": "No ads found",
    "listing.empty_hint": "Try changing the search parameters",
}


class CatalogTranslator:
    """Dictionary-backed translator; unknown keys come back unchanged."""

    def __init__(self, messages: Mapping[str, str]) -> None:
        self._messages = dict(messages)

    def __call__(self, key: str) -> str:
        return self._messages.get(key, key)


default_translator = CatalogTranslator(ENGLISH_MESSAGES)
