"""Loader for the remote adoption listing."""

from dataclasses import dataclass
from typing import Any, Optional, Tuple

import httpx
from pydantic import ValidationError

from adoption_catalog.catalog.errors import BadResponse, MalformedPayload, NetworkFailure
from adoption_catalog.catalog.models import Animal, ListingResponse
from adoption_catalog.config import get_settings
from adoption_catalog.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class LoadResult:
    """A complete dataset fetched in one request."""

    animals: Tuple[Animal, ...]
    total: int
    last_page: int

    @property
    def truncated(self) -> bool:
        """True when the source reports more records than were returned."""
        return self.last_page > 1 or self.total > len(self.animals)


class AnimalLoader:
    """Fetch the whole adoption listing with a single request."""

    def __init__(
        self,
        api_url: Optional[str] = None,
        fetch_page_size: Optional[int] = None,
        timeout: Optional[float] = None,
    ):
        settings = get_settings()
        self.api_url = api_url or settings.api_url
        self.fetch_page_size = fetch_page_size or settings.fetch_page_size
        self.timeout = timeout if timeout is not None else settings.request_timeout

    @property
    def params(self) -> dict:
        return {"per_page": self.fetch_page_size}

    def load(self) -> LoadResult:
        """
        Fetch the listing.

        Returns:
            LoadResult holding every record in source order

        Raises:
            NetworkFailure: the request could not be completed
            BadResponse: the server returned a non-success status
            MalformedPayload: the body is not a valid listing
        """
        logger.debug(f"Fetching adoption listing from {self.api_url}")
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.get(self.api_url, params=self.params)
        except httpx.HTTPError as e:
            logger.error(f"Adoption listing request failed: {e}")
            raise NetworkFailure(str(e)) from e

        return self._parse(response)

    async def aload(self) -> LoadResult:
        """Asynchronous variant of :meth:`load`."""
        logger.debug(f"Fetching adoption listing from {self.api_url}")
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.api_url, params=self.params)
        except httpx.HTTPError as e:
            logger.error(f"Adoption listing request failed: {e}")
            raise NetworkFailure(str(e)) from e

        return self._parse(response)

    def _parse(self, response: httpx.Response) -> LoadResult:
        """Validate a response and turn it into a LoadResult."""
        if not response.is_success:
            logger.error(f"Adoption listing returned HTTP {response.status_code}")
            raise BadResponse(
                f"Failed to fetch animals (HTTP {response.status_code})",
                status_code=response.status_code,
            )

        try:
            body: Any = response.json()
        except ValueError as e:
            logger.error(f"Adoption listing body is not JSON: {e}")
            raise MalformedPayload("Response body is not valid JSON") from e

        if not isinstance(body, dict) or "data" not in body:
            logger.error("Adoption listing body has no 'data' field")
            raise MalformedPayload("Response body has no 'data' field")

        try:
            listing = ListingResponse.model_validate(body)
        except ValidationError as e:
            logger.error(f"Adoption listing failed validation: {e.error_count()} errors")
            raise MalformedPayload(str(e)) from e

        animals = tuple(listing.data)
        if listing.meta is None:
            logger.debug("Adoption listing has no usable metadata")
            result = LoadResult(animals=animals, total=len(animals), last_page=1)
        else:
            result = LoadResult(
                animals=animals,
                total=listing.meta.total,
                last_page=listing.meta.last_page,
            )
        if result.truncated:
            logger.warning(
                f"Adoption listing is truncated: got {len(result.animals)} of "
                f"{result.total} records across {result.last_page} pages"
            )
        logger.info(f"Loaded {len(result.animals)} animals")
        return result
