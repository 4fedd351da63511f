"""Shoe Service - HTTP client for the remote shoe product API.

Thin async wrapper around the REST collection exposed by the backend
(GET/POST on the collection, GET/PUT/DELETE on an item). Every failure is
raised as ShoeServiceError so callers only need to handle one exception type.
"""

from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from shoe_inventory.config import settings
from shoe_inventory.infra.logging import get_logger
from shoe_inventory.schemas.product import Product, ProductDraft, ServiceResponse

logger = get_logger(__name__)

_product = TypeAdapter(Product)
_product_list = TypeAdapter(list[Product])


class ShoeServiceError(Exception):
    """Raised when a call to the shoe service fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ShoeService:
    """HTTP client for the shoe product API."""

    def __init__(
        self,
        base_url: str | None = None,
        path: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize shoe service client.

        Args:
            base_url: Service base URL (defaults to settings)
            path: Collection path (defaults to settings)
            timeout: Request timeout in seconds (defaults to settings)
        """
        self.base_url = base_url or settings.shoe_api_url
        self.path = "/" + (path or settings.shoe_api_path).strip("/")
        self.timeout = timeout if timeout is not None else settings.shoe_api_timeout
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"Content-Type": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def _item_path(self, shoe_id: int | str) -> str:
        return f"{self.path}/{shoe_id}"

    async def _request(
        self,
        method: str,
        url: str,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send a request and raise ShoeServiceError on any failure."""
        client = await self._get_client()

        try:
            if json is None:
                response = await client.request(method, url)
            else:
                response = await client.request(method, url, json=json)
            response.raise_for_status()

        except httpx.HTTPStatusError as e:
            logger.error(
                "Shoe service returned error",
                method=method,
                url=url,
                status_code=e.response.status_code,
                response_text=e.response.text[:500],
            )
            raise ShoeServiceError(
                f"{method} {url} failed with status {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e

        except httpx.HTTPError as e:
            logger.error(
                "Shoe service request failed",
                method=method,
                url=url,
                error=str(e),
            )
            raise ShoeServiceError(f"{method} {url} failed: {e}") from e

        return response

    def _parse(self, response: httpx.Response, adapter: TypeAdapter) -> Any:
        try:
            return adapter.validate_python(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(
                "Invalid payload from shoe service",
                status_code=response.status_code,
                error=str(e),
            )
            raise ShoeServiceError(
                "Invalid payload from shoe service",
                status_code=response.status_code,
            ) from e

    async def get_all_shoes(self) -> ServiceResponse[list[Product]]:
        """Fetch the full shoe collection, in service order."""
        response = await self._request("GET", self.path)
        shoes = self._parse(response, _product_list)

        logger.info(
            "Shoes fetched",
            count=len(shoes),
            status_code=response.status_code,
        )
        return ServiceResponse[list[Product]](status=response.status_code, data=shoes)

    async def get_shoe(self, shoe_id: int | str) -> ServiceResponse[Product]:
        """Fetch a single shoe by id."""
        response = await self._request("GET", self._item_path(shoe_id))
        shoe = self._parse(response, _product)

        logger.info("Shoe fetched", shoe_id=shoe_id, status_code=response.status_code)
        return ServiceResponse[Product](status=response.status_code, data=shoe)

    async def create_shoe(self, draft: ProductDraft) -> ServiceResponse[Product]:
        """Create a shoe and return it with its assigned id."""
        response = await self._request("POST", self.path, json=draft.to_payload())
        shoe = self._parse(response, _product)

        logger.info("Shoe created", shoe_id=shoe.id, status_code=response.status_code)
        return ServiceResponse[Product](status=response.status_code, data=shoe)

    async def update_shoe(
        self,
        shoe_id: int | str,
        draft: ProductDraft,
    ) -> ServiceResponse[Product]:
        """Replace the writable fields of a shoe."""
        response = await self._request("PUT", self._item_path(shoe_id), json=draft.to_payload())
        shoe = self._parse(response, _product)

        logger.info("Shoe updated", shoe_id=shoe_id, status_code=response.status_code)
        return ServiceResponse[Product](status=response.status_code, data=shoe)

    async def delete_shoe(self, shoe_id: int | str) -> ServiceResponse[None]:
        """Delete a shoe by id. The response body is ignored."""
        response = await self._request("DELETE", self._item_path(shoe_id))

        logger.info("Shoe deleted", shoe_id=shoe_id, status_code=response.status_code)
        return ServiceResponse[None](status=response.status_code)


# Singleton instance
_shoe_service: ShoeService | None = None


def get_shoe_service() -> ShoeService:
    """Get shoe service singleton."""
    global _shoe_service
    if _shoe_service is None:
        _shoe_service = ShoeService()
    return _shoe_service
