"""Service layer: request orchestration on top of the upstream client."""
from .pokemon_service import PokemonService

__all__ = ['PokemonService']
