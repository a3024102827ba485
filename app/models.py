from typing import Any

from pydantic import BaseModel

# Upstream JSON objects we pass through untouched (stats, types, abilities, moves)
UpstreamObject = dict[str, Any]


# Model for a category entry in the types listing
class TypeReference(BaseModel):
    name: str
    id: str

class Sprites(BaseModel):
    front_default: str | None

# Model for a Pokemon inside a paged listing
class PokemonSummary(BaseModel):
    id: int
    name: str
    stats: list[UpstreamObject]
    types: list[UpstreamObject]
    sprites: Sprites

# Model for the single Pokemon lookup (Public Endpoint: search)
class PokemonDetail(PokemonSummary):
    abilities: list[UpstreamObject]
    moves: list[UpstreamObject]
    weight: int

# Paged envelopes: `count` is whatever total the endpoint reports
class TypeListResponse(BaseModel):
    count: int
    results: list[TypeReference]

class PokemonListResponse(BaseModel):
    count: int
    results: list[PokemonSummary]
