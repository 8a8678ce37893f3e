"""Async client for the classifieds board REST API."""

from collections.abc import Callable, Sequence
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter

from phangan_board.application.errors import ApiError, MalformedResponseError, NetworkError
from phangan_board.application.services.search_query_service import build_search_endpoint
from phangan_board.config import settings
from phangan_board.infrastructure.logging import get_logger
from phangan_board.interfaces.schemas.ad import Ad, AdCreateRequest, AdImage, AdUpdateRequest
from phangan_board.interfaces.schemas.category import Category
from phangan_board.interfaces.schemas.image import ImageUpload
from phangan_board.interfaces.schemas.pagination import PageResult
from phangan_board.interfaces.schemas.search import SearchFilters

logger = get_logger(__name__)

EDIT_TOKEN_HEADER = "X-Edit-Token"

T = TypeVar("T")

_categories_adapter = TypeAdapter(list[Category])
_images_adapter = TypeAdapter(list[AdImage])


def _server_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return None


def api_error_from_response(response: httpx.Response) -> ApiError:
    return ApiError(
        status_code=response.status_code,
        status_text=response.reason_phrase,
        server_message=_server_message(response),
    )


def _decode(response: httpx.Response, validate: Callable[[Any], T]) -> T:
    # JSONDecodeError and pydantic's ValidationError are both ValueErrors.
    try:
        return validate(response.json())
    except ValueError as exc:
        request = response.request
        logger.warning(
            "api_response_malformed",
            method=request.method,
            endpoint=request.url.path,
            status_code=response.status_code,
            error=str(exc),
        )
        raise MalformedResponseError(f"{request.method} {request.url.path} returned an unexpected body") from exc


def _token_path(token: str) -> str:
    return quote(token, safe="")


class BoardApiClient:
    """
    Thin wrapper over ``httpx.AsyncClient`` bound to the board API base URL.

    Every non-2xx response is raised as ``ApiError``; transport failures are
    raised as ``NetworkError``; a 2xx body that does not decode into the
    expected schema is raised as ``MalformedResponseError``. Nothing is retried.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.request_timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> "BoardApiClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, endpoint: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, endpoint, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("api_request_unreachable", method=method, endpoint=endpoint, error=str(exc))
            raise NetworkError(f"{method} {endpoint} failed: {exc}") from exc
        if not response.is_success:
            error = api_error_from_response(response)
            logger.warning(
                "api_request_failed",
                method=method,
                endpoint=endpoint,
                status_code=error.status_code,
                message=error.message,
            )
            raise error
        return response

    async def search_ads(self, filters: SearchFilters) -> PageResult[Ad]:
        response = await self._request("GET", build_search_endpoint(filters))
        return _decode(response, PageResult[Ad].model_validate)

    async def get_categories(self) -> list[Category]:
        response = await self._request("GET", "/categories")
        return _decode(response, _categories_adapter.validate_python)

    async def get_ad(self, ad_id: int) -> Ad:
        response = await self._request("GET", f"/ads/{ad_id}")
        return _decode(response, Ad.model_validate)

    async def create_ad(self, payload: AdCreateRequest) -> Ad:
        response = await self._request("POST", "/ads", json=payload.to_payload())
        ad = _decode(response, Ad.model_validate)
        logger.info("ad_created", ad_id=ad.id, category_id=ad.category_id)
        return ad

    async def get_ad_by_token(self, token: str) -> Ad:
        response = await self._request("GET", f"/ads/edit/{_token_path(token)}")
        return _decode(response, Ad.model_validate)

    async def update_ad_by_token(self, token: str, payload: AdUpdateRequest) -> Ad:
        response = await self._request("PUT", f"/ads/edit/{_token_path(token)}", json=payload.to_payload())
        ad = _decode(response, Ad.model_validate)
        logger.info("ad_updated", ad_id=ad.id)
        return ad

    async def delete_ad_by_token(self, token: str) -> None:
        await self._request("DELETE", f"/ads/edit/{_token_path(token)}")
        logger.info("ad_deleted")

    async def upload_images(self, ad_id: int, token: str, images: Sequence[ImageUpload]) -> list[AdImage]:
        response = await self._request(
            "POST",
            f"/ads/{ad_id}/images",
            files=[image.as_multipart() for image in images],
            headers={EDIT_TOKEN_HEADER: token},
        )
        uploaded = _decode(response, _images_adapter.validate_python)
        logger.info("ad_images_uploaded", ad_id=ad_id, count=len(uploaded))
        return uploaded

    async def delete_image(self, ad_id: int, image_id: int, token: str) -> None:
        await self._request("DELETE", f"/ads/{ad_id}/images/{image_id}", headers={EDIT_TOKEN_HEADER: token})
        logger.info("ad_image_deleted", ad_id=ad_id, image_id=image_id)
