import logging

from app.clients.pokeapi_client import PokeAPIClient
from app.models import PokemonDetail, PokemonListResponse, TypeListResponse
from app.outcomes import Failure, Outcome, Success, describe_error
from app.pagination import limit_offset, parse_offset
from app.projections import (
    project_pokemon_detail,
    project_pokemon_summary,
    project_type_reference,
)

logger = logging.getLogger(__name__)

PAGE_SIZE = 20
LIST_ERROR = "Error al listar. {error}"
NOT_FOUND_ERROR = "No se encuentra el Pokémon {search}"


class PokemonService:
    # Service receives the upstream client via Dependency Injection
    def __init__(self, poke_client: PokeAPIClient):
        self._poke_client = poke_client

    async def list_types(self) -> Outcome[TypeListResponse]:
        """Lists every category as {name, id}; `count` is the upstream total."""
        try:
            data = await self._poke_client.list_types()
            results = [project_type_reference(item) for item in data["results"]]
            return Success(TypeListResponse(count=data["count"], results=results))
        except Exception as e:
            return self._list_failure("types", e)

    async def list_pokemon_by_type(self, type_id: str, offset: str | None) -> Outcome[PokemonListResponse]:
        """
        Lists one page of the members of a category.
        The member list is paginated locally and `count` is its pre-pagination length.
        """
        start = parse_offset(offset)
        try:
            data = await self._poke_client.get_type(type_id)
            members = data["pokemon"]
            page = limit_offset(members, PAGE_SIZE, start)

            # --- FAN-OUT: one detail request per member of the page ---
            details = await self._poke_client.fetch_details(
                [member["pokemon"]["url"] for member in page]
            )
            results = [project_pokemon_summary(detail) for detail in details]
            return Success(PokemonListResponse(count=len(members), results=results))
        except Exception as e:
            return self._list_failure(f"type {type_id}", e)

    async def get_pokemon(self, search: str) -> Outcome[PokemonDetail]:
        """Looks up a single Pokemon by name or id (trimmed, case-insensitive)."""
        normalized = search.strip().lower()
        try:
            data = await self._poke_client.get_pokemon(normalized)
            return Success(project_pokemon_detail(data))
        except Exception as e:
            logger.warning(f"Pokemon lookup failed for '{normalized}': {describe_error(e)}")
            return Failure(NOT_FOUND_ERROR.format(search=normalized), e)

    async def list_pokemon(self, offset: str | None) -> Outcome[PokemonListResponse]:
        """
        Lists one upstream page of Pokemon; pagination is done by the upstream API.
        `count` is the upstream total.
        """
        try:
            data = await self._poke_client.list_pokemon(offset)
            details = await self._poke_client.fetch_details(
                [item["url"] for item in data["results"]]
            )
            results = [project_pokemon_summary(detail) for detail in details]
            return Success(PokemonListResponse(count=data["count"], results=results))
        except Exception as e:
            return self._list_failure("pokemon", e)

    @staticmethod
    def _list_failure(what: str, error: Exception) -> Failure:
        logger.warning(f"Listing {what} failed: {describe_error(error)}")
        return Failure(LIST_ERROR.format(error=describe_error(error)), error)
