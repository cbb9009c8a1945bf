"""Region filtering over a loaded dataset."""

from typing import Dict, Iterable, Sequence, Tuple

from adoption_catalog.catalog.models import ALL_REGIONS, CANONICAL_REGIONS, Animal

_REGION_RANK = {region: rank for rank, region in enumerate(CANONICAL_REGIONS)}


def is_canonical_region(value: str) -> bool:
    """Check whether a value is one of the known administrative regions."""
    return value in _REGION_RANK


def derive_filtered_view(
    dataset: Sequence[Animal], filter_state: str = ALL_REGIONS
) -> Tuple[Animal, ...]:
    """
    Select the records matching a region filter.

    Args:
        dataset: Records in source order
        filter_state: A region name, or ALL_REGIONS for no filtering

    Returns:
        The matching records, in their original relative order
    """
    if filter_state == ALL_REGIONS:
        return tuple(dataset)
    return tuple(animal for animal in dataset if animal.region == filter_state)


def derive_available_regions(dataset: Iterable[Animal]) -> Tuple[str, ...]:
    """
    List the canonical regions that appear in the dataset.

    Regions outside the canonical list are left out; their records are
    still reachable through ALL_REGIONS.
    """
    present = {animal.region for animal in dataset if animal.region in _REGION_RANK}
    return tuple(sorted(present, key=_REGION_RANK.__getitem__))


def region_counts(dataset: Iterable[Animal]) -> Dict[str, int]:
    """Count records per selectable region, in canonical order."""
    counts: Dict[str, int] = {}
    for animal in dataset:
        if animal.region in _REGION_RANK:
            counts[animal.region] = counts.get(animal.region, 0) + 1
    return {region: counts[region] for region in CANONICAL_REGIONS if region in counts}
