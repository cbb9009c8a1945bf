"""Pytest configuration and fixtures."""

import os
import sys
from pathlib import Path
from typing import Any, Dict, List

import httpx
import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

# Set test environment variables
os.environ["API_URL"] = "https://example.test/api/animales"
os.environ["PAGE_SIZE"] = "20"
os.environ["LOG_LEVEL"] = "WARNING"

from adoption_catalog.catalog.models import Animal  # noqa: E402

API_URL = os.environ["API_URL"]


def raw_animal(animal_id: int, region: str = "Biobío", **overrides: Any) -> Dict[str, Any]:
    """Build one record the way the listing API serializes it."""
    record = {
        "id": animal_id,
        "nombre": f"Animal {animal_id}",
        "tipo": "Perro",
        "edad": "2 años",
        "estado": "adopcion",
        "genero": "macho",
        "desc_fisica": "<p>Pelaje corto</p>",
        "desc_personalidad": "Juguetón",
        "desc_adicional": "",
        "esterilizado": 1,
        "vacunas": 0,
        "imagen": f"https://example.test/img/{animal_id}.jpg",
        "equipo": "Equipo Huachitos",
        "region": region,
        "comuna": "Concepción",
        "url": f"https://example.test/animal/{animal_id}",
    }
    record.update(overrides)
    return record


def make_animals(count: int, region: str = "Biobío", start: int = 1) -> List[Animal]:
    return [Animal.model_validate(raw_animal(i, region)) for i in range(start, start + count)]


def listing_response(
    records: List[Dict[str, Any]], status_code: int = 200, meta: Dict[str, Any] = None
) -> httpx.Response:
    """A real httpx response carrying a listing body."""
    if meta is None:
        meta = {"current_page": 1, "last_page": 1, "total": len(records)}
    return httpx.Response(
        status_code,
        json={"data": records, "meta": meta},
        request=httpx.Request("GET", API_URL),
    )


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from the environment."""
    from adoption_catalog.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mixed_dataset() -> List[Animal]:
    """Records spread over several regions, in a scrambled source order."""
    regions = [
        "Magallanes",
        "Biobío",
        "Metropolitana",
        "Biobío",
        "Región Desconocida",
        "Arica y Parinacota",
        "Metropolitana",
        "Biobío",
    ]
    return [Animal.model_validate(raw_animal(i + 1, region)) for i, region in enumerate(regions)]
