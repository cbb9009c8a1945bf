"""View state for browsing the adoption listing."""

from dataclasses import dataclass
from typing import Optional, Tuple

from adoption_catalog.catalog.errors import FetchError
from adoption_catalog.catalog.filters import derive_available_regions, derive_filtered_view
from adoption_catalog.catalog.loader import AnimalLoader, LoadResult
from adoption_catalog.catalog.models import ALL_REGIONS, Animal
from adoption_catalog.catalog.paginator import Paginator
from adoption_catalog.config import get_settings
from adoption_catalog.utils.logging import get_logger

logger = get_logger(__name__)

LOAD_ERROR_MESSAGE = "Error fetching animals. Please try again later."


@dataclass(frozen=True)
class CatalogSnapshot:
    """Everything a renderer needs for one frame."""

    animals: Tuple[Animal, ...]
    regions: Tuple[str, ...]
    selected_region: str
    current_page: int
    total_pages: int
    filtered_count: int
    has_previous: bool
    has_next: bool
    is_loading: bool
    error: Optional[str]


class CatalogView:
    """
    Owns the dataset, the region filter and the current page.

    State only changes through the transition methods below. Each one
    leaves the paginator consistent with the filtered dataset, so a
    snapshot taken at any point never shows a stale page.
    """

    def __init__(self, loader: Optional[AnimalLoader] = None, page_size: Optional[int] = None):
        self.loader = loader or AnimalLoader()
        if page_size is None:
            page_size = get_settings().page_size
        self.paginator = Paginator(page_size)
        self.dataset: Tuple[Animal, ...] = ()
        self.filter_state: str = ALL_REGIONS
        self.is_loading = False
        self.error: Optional[str] = None
        self._filtered: Tuple[Animal, ...] = ()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def reload(self) -> bool:
        """
        Fetch the dataset and replace the current one.

        Returns:
            True if the dataset was loaded, False if an error was recorded
        """
        self._begin_load()
        try:
            result = self.loader.load()
        except FetchError as e:
            self._fail_load(e)
            return False
        self._finish_load(result)
        return True

    async def areload(self) -> bool:
        """
        Asynchronous variant of :meth:`reload`.

        Overlapping calls are not deduplicated: whichever response
        resolves last replaces the dataset.
        """
        self._begin_load()
        try:
            result = await self.loader.aload()
        except FetchError as e:
            self._fail_load(e)
            return False
        self._finish_load(result)
        return True

    def _begin_load(self) -> None:
        self.is_loading = True
        self.error = None

    def _finish_load(self, result: LoadResult) -> None:
        self.dataset = result.animals
        self.is_loading = False
        self._refilter()
        logger.debug(f"View holds {len(self.dataset)} animals")

    def _fail_load(self, error: FetchError) -> None:
        logger.error(f"Could not load adoption listing: {error}")
        self.dataset = ()
        self.error = LOAD_ERROR_MESSAGE
        self.is_loading = False
        self._refilter()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def select_region(self, region: str) -> None:
        """Apply a region filter (or ALL_REGIONS) and go back to page 1."""
        self.filter_state = region
        self._refilter()
        self.paginator.reset()
        logger.debug(f"Selected region {region!r}: {len(self._filtered)} animals")

    def go_to_page(self, page: int) -> int:
        return self.paginator.go_to(page)

    def previous_page(self) -> int:
        return self.paginator.previous()

    def next_page(self) -> int:
        return self.paginator.next()

    def _refilter(self) -> None:
        self._filtered = derive_filtered_view(self.dataset, self.filter_state)
        self.paginator.sync(len(self._filtered))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    @property
    def filtered(self) -> Tuple[Animal, ...]:
        return self._filtered

    def find(self, animal_id: int) -> Optional[Animal]:
        """Look up a loaded record by id."""
        for animal in self.dataset:
            if animal.id == animal_id:
                return animal
        return None

    def snapshot(self) -> CatalogSnapshot:
        """Recompute the derived views for the current state."""
        hidden = self.is_loading or self.error is not None
        return CatalogSnapshot(
            animals=() if hidden else self.paginator.page_of(self._filtered),
            regions=derive_available_regions(self.dataset),
            selected_region=self.filter_state,
            current_page=self.paginator.current_page,
            total_pages=self.paginator.total_pages,
            filtered_count=len(self._filtered),
            has_previous=self.paginator.has_previous,
            has_next=self.paginator.has_next,
            is_loading=self.is_loading,
            error=self.error,
        )
