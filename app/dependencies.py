from fastapi import Depends, Request

from app.clients import PokeAPIClient
from app.services import PokemonService


def get_poke_client(request: Request) -> PokeAPIClient:
    # Created once per application in the lifespan, shared by all requests
    return request.app.state.poke_client

def get_pokemon_service(
    poke_client: PokeAPIClient = Depends(get_poke_client),
) -> PokemonService:
    return PokemonService(poke_client=poke_client)
