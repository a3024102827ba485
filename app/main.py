import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.clients import PokeAPIClient
from app.config import Settings, get_settings
from app.dependencies import get_pokemon_service
from app.error_handlers import register_error_handlers
from app.logging_config import setup_logging
from app.models import PokemonDetail, PokemonListResponse, TypeListResponse
from app.outcomes import to_response
from app.services.pokemon_service import PokemonService

logger = logging.getLogger(__name__)

TAG = "GET Pokemon"

LIST_FAILURE = {
    404: {
        "description": "Upstream failure (plain text)",
        "content": {"text/plain": {"example": "Error al listar. APIClientError: PokeAPI network error"}},
    }
}

SEARCH_FAILURE = {
    404: {
        "description": "Pokemon not found or upstream failure (plain text)",
        "content": {"text/plain": {"example": "No se encuentra el Pokémon missingno"}},
    }
}


def create_app(settings: Settings | None = None) -> FastAPI:
    """Builds the application; `settings` is fixed for the lifetime of the app."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level)
        app.state.poke_client = PokeAPIClient(
            base_url=settings.api_poke,
            timeout=settings.upstream_timeout,
        )
        logger.info(f"Pokemon API proxy started (upstream: {settings.api_poke})")
        yield
        await app.state.poke_client.close()
        logger.info("Pokemon API proxy shutting down")

    app = FastAPI(
        title="Pokemon API Proxy",
        description="Read-only proxy that reshapes and paginates PokeAPI data.",
        version="1.0.0",
        docs_url="/api-docs",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_methods=["GET"],
        allow_credentials=True,
    )

    register_error_handlers(app)

    # /types routes are declared before /{search} so they take precedence
    @app.get(
        "/api/pokemon/types",
        response_model=TypeListResponse,
        responses=LIST_FAILURE,
        tags=[TAG],
        summary="Returns the list of Pokemon types",
    )
    async def list_types(service: PokemonService = Depends(get_pokemon_service)):
        """Lists every type as `{name, id}`; `count` is the upstream total."""
        return to_response(await service.list_types())

    @app.get(
        "/api/pokemon/types/{id}",
        response_model=PokemonListResponse,
        responses=LIST_FAILURE,
        tags=[TAG],
        summary="Returns a page of Pokemon filtered by type",
    )
    async def list_pokemon_by_type(
        id: str,
        offset: str | None = None,
        service: PokemonService = Depends(get_pokemon_service),
    ):
        """Up to 20 Pokemon of the given type, skipping `offset` members. `count` is the type's member total."""
        return to_response(await service.list_pokemon_by_type(id, offset))

    @app.get(
        "/api/pokemon/{search}",
        response_model=PokemonDetail,
        responses=SEARCH_FAILURE,
        tags=[TAG],
        summary="Returns a single Pokemon by name or id",
    )
    async def get_pokemon(
        search: str,
        service: PokemonService = Depends(get_pokemon_service),
    ):
        """The search term is trimmed and lowercased before the lookup."""
        return to_response(await service.get_pokemon(search))

    @app.get(
        "/api/pokemon",
        response_model=PokemonListResponse,
        responses=LIST_FAILURE,
        tags=[TAG],
        summary="Returns a page of Pokemon",
    )
    async def list_pokemon(
        offset: str | None = None,
        service: PokemonService = Depends(get_pokemon_service),
    ):
        """Up to 20 Pokemon starting at `offset`, which is forwarded to PokeAPI as-is."""
        return to_response(await service.list_pokemon(offset))

    return app


app = create_app()
