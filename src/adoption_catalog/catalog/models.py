"""Data models for the adoption listing."""

from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

# Sentinel filter value meaning "no region filter"
ALL_REGIONS = "all"

# Chilean administrative regions, north to south. The order drives the
# region filter menu.
CANONICAL_REGIONS: Tuple[str, ...] = (
    "Arica y Parinacota",
    "Tarapacá",
    "Antofagasta",
    "Atacama",
    "Coquimbo",
    "Valparaíso",
    "Metropolitana",
    "O'Higgins",
    "Maule",
    "Ñuble",
    "Biobío",
    "Araucanía",
    "Los Ríos",
    "Los Lagos",
    "Aysén",
    "Magallanes",
)


class Animal(BaseModel):
    """One adoptable animal as published by the listing API."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: int
    name: str = Field(default="", alias="nombre")
    category: str = Field(default="", alias="tipo")
    age: str = Field(default="", alias="edad")
    status: str = Field(default="", alias="estado")
    sex: str = Field(default="", alias="genero")
    physical_description: str = Field(default="", alias="desc_fisica")
    personality_description: str = Field(default="", alias="desc_personalidad")
    extra_description: str = Field(default="", alias="desc_adicional")
    is_sterilized: bool = Field(default=False, alias="esterilizado")
    is_vaccinated: bool = Field(default=False, alias="vacunas")
    image_url: str = Field(default="", alias="imagen")
    detail_url: str = Field(default="", alias="url")
    team: str = Field(default="", alias="equipo")
    region: str = ""
    comuna: str = ""

    @field_validator(
        "name",
        "category",
        "age",
        "status",
        "sex",
        "physical_description",
        "personality_description",
        "extra_description",
        "image_url",
        "detail_url",
        "team",
        "region",
        "comuna",
        mode="before",
    )
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        if value is None:
            return ""
        return value

    @field_validator("is_sterilized", "is_vaccinated", mode="before")
    @classmethod
    def _flag_from_int(cls, value: Any) -> Any:
        # The API encodes flags as 0/1
        if value is None:
            return False
        return value


class PageMeta(BaseModel):
    """Pagination metadata reported by the listing API."""

    model_config = ConfigDict(extra="ignore")

    current_page: int = 1
    last_page: int = 1
    total: int = 0


class ListingResponse(BaseModel):
    """Top-level body returned by the listing endpoint."""

    model_config = ConfigDict(extra="ignore")

    data: List[Animal]
    meta: Optional[PageMeta] = None

    @field_validator("meta", mode="before")
    @classmethod
    def _tolerate_bad_meta(cls, value: Any) -> Any:
        # Unusable metadata is treated as absent
        if value is None or isinstance(value, PageMeta):
            return value
        try:
            return PageMeta.model_validate(value)
        except ValidationError:
            return None
