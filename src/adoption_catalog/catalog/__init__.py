"""Loading, filtering and paging of the adoption listing."""

from adoption_catalog.catalog.errors import (
    BadResponse,
    FetchError,
    MalformedPayload,
    NetworkFailure,
)
from adoption_catalog.catalog.filters import (
    derive_available_regions,
    derive_filtered_view,
    is_canonical_region,
    region_counts,
)
from adoption_catalog.catalog.loader import AnimalLoader, LoadResult
from adoption_catalog.catalog.models import ALL_REGIONS, CANONICAL_REGIONS, Animal
from adoption_catalog.catalog.paginator import (
    Paginator,
    clamp_page,
    page_numbers,
    total_pages,
    visible_page,
)
from adoption_catalog.catalog.view import LOAD_ERROR_MESSAGE, CatalogSnapshot, CatalogView

__all__ = [
    "ALL_REGIONS",
    "CANONICAL_REGIONS",
    "Animal",
    "AnimalLoader",
    "LoadResult",
    "FetchError",
    "NetworkFailure",
    "BadResponse",
    "MalformedPayload",
    "derive_filtered_view",
    "derive_available_regions",
    "region_counts",
    "is_canonical_region",
    "Paginator",
    "total_pages",
    "clamp_page",
    "visible_page",
    "page_numbers",
    "CatalogView",
    "CatalogSnapshot",
    "LOAD_ERROR_MESSAGE",
]
