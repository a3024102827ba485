import pytest
import httpx
from app.clients.pokeapi_client import PokeAPIClient, APIClientError


MOCK_TYPES = {
    "count": 2,
    "results": [
        {"name": "normal", "url": "https://pokeapi.co/api/v2/type/1/"},
        {"name": "fighting", "url": "https://pokeapi.co/api/v2/type/2/"},
    ]
}

def mock_detail(pokemon_id: int, name: str) -> dict:
    return {
        "id": pokemon_id,
        "name": name,
        "stats": [],
        "types": [],
        "sprites": {"front_default": f"https://img.example/{pokemon_id}.png"},
    }

@pytest.fixture
def poke_client():
    return PokeAPIClient()


@pytest.mark.asyncio
async def test_list_types_hits_the_type_resource(httpx_mock, poke_client):
    # ARRANGE
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/type",
        json=MOCK_TYPES,
        status_code=200
    )

    # ACT
    result = await poke_client.list_types()

    # ASSERT
    assert result == MOCK_TYPES

@pytest.mark.asyncio
async def test_custom_base_url_is_used_for_relative_paths(httpx_mock):
    httpx_mock.add_response(
        url="http://upstream.local/v2/pokemon/pikachu",
        json=mock_detail(25, "pikachu"),
    )
    client = PokeAPIClient(base_url="http://upstream.local/v2/")

    result = await client.get_pokemon("pikachu")

    assert result["name"] == "pikachu"

@pytest.mark.asyncio
async def test_list_pokemon_forwards_offset_verbatim(httpx_mock, poke_client):
    """The offset is not validated; whatever the caller sent goes upstream."""
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon?offset=abc&limit=20",
        json={"count": 0, "results": []},
    )

    result = await poke_client.list_pokemon("abc")

    assert result == {"count": 0, "results": []}

@pytest.mark.asyncio
async def test_list_pokemon_without_offset_only_sends_limit(httpx_mock, poke_client):
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon?limit=20",
        json={"count": 0, "results": []},
    )

    await poke_client.list_pokemon(None)

    request = httpx_mock.get_request()
    assert "offset" not in request.url.params

@pytest.mark.asyncio
async def test_fetch_details_uses_absolute_urls_and_keeps_order(httpx_mock, poke_client):
    urls = [
        "https://pokeapi.co/api/v2/pokemon/1/",
        "https://pokeapi.co/api/v2/pokemon/4/",
        "https://pokeapi.co/api/v2/pokemon/7/",
    ]
    for url, (pokemon_id, name) in zip(urls, [(1, "bulbasaur"), (4, "charmander"), (7, "squirtle")]):
        httpx_mock.add_response(url=url, json=mock_detail(pokemon_id, name))

    details = await poke_client.fetch_details(urls)

    assert [d["name"] for d in details] == ["bulbasaur", "charmander", "squirtle"]

@pytest.mark.asyncio
async def test_upstream_404_raises_client_error(httpx_mock, poke_client):
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon/missingno",
        status_code=404
    )

    with pytest.raises(APIClientError) as excinfo:
        await poke_client.get_pokemon("missingno")

    assert excinfo.value.status_code == 404
    assert "status 404" in str(excinfo.value)

@pytest.mark.asyncio
async def test_upstream_internal_error_raises_client_error(httpx_mock, poke_client):
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/type/4",
        status_code=500
    )

    with pytest.raises(APIClientError) as excinfo:
        await poke_client.get_type("4")

    assert excinfo.value.status_code == 500

@pytest.mark.asyncio
async def test_network_error_raises_503(httpx_mock, poke_client):
    """Tests that a network failure (timeout, DNS error) is mapped to a 503 client error."""
    httpx_mock.add_exception(
        httpx.ConnectError("Connection refused."),
        url="https://pokeapi.co/api/v2/type"
    )

    with pytest.raises(APIClientError) as excinfo:
        await poke_client.list_types()

    assert excinfo.value.status_code == 503
    assert "network error" in excinfo.value.detail.lower()

@pytest.mark.asyncio
async def test_non_json_body_raises_client_error(httpx_mock, poke_client):
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/type",
        text="<html>maintenance</html>",
    )

    with pytest.raises(APIClientError) as excinfo:
        await poke_client.list_types()

    assert "unexpected response format" in excinfo.value.detail

@pytest.mark.httpx_mock(assert_all_responses_were_requested=False)
@pytest.mark.asyncio
async def test_fetch_details_fails_if_any_detail_fails(httpx_mock, poke_client):
    urls = [
        "https://pokeapi.co/api/v2/pokemon/1/",
        "https://pokeapi.co/api/v2/pokemon/2/",
        "https://pokeapi.co/api/v2/pokemon/3/",
    ]
    httpx_mock.add_response(url=urls[0], json=mock_detail(1, "bulbasaur"))
    httpx_mock.add_response(url=urls[1], status_code=500)
    httpx_mock.add_response(url=urls[2], json=mock_detail(3, "venusaur"))

    with pytest.raises(APIClientError) as excinfo:
        await poke_client.fetch_details(urls)

    assert excinfo.value.status_code == 500
