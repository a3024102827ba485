"""Field projection from upstream PokeAPI records to the public response models."""
import re

from app.models import PokemonDetail, PokemonSummary, Sprites, TypeReference

_TRAILING_ID = re.compile(r"/(\d+)/?$")


def extract_type_id(url: str) -> str:
    """Returns the trailing numeric segment of a reference URL, e.g. '.../type/4/' -> '4'."""
    match = _TRAILING_ID.search(url)
    if match is None:
        raise ValueError(f"No numeric id in reference URL '{url}'")
    return match.group(1)


def project_type_reference(item: dict) -> TypeReference:
    return TypeReference(name=item["name"], id=extract_type_id(item["url"]))


def project_pokemon_summary(detail: dict) -> PokemonSummary:
    # Missing keys raise on purpose: a malformed record fails the whole request
    return PokemonSummary(
        id=detail["id"],
        name=detail["name"],
        stats=detail["stats"],
        types=detail["types"],
        sprites=Sprites(front_default=detail["sprites"]["front_default"]),
    )


def project_pokemon_detail(detail: dict) -> PokemonDetail:
    return PokemonDetail(
        id=detail["id"],
        name=detail["name"],
        stats=detail["stats"],
        types=detail["types"],
        abilities=detail["abilities"],
        moves=detail["moves"],
        weight=detail["weight"],
        sprites=Sprites(front_default=detail["sprites"]["front_default"]),
    )
