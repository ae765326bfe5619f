"""Tests for the TheCocktailDB client."""

import httpx
import pytest

from mixologist.catalog.cocktaildb import CocktailDBClient, DrinkReference
from mixologist.exceptions import SourceUnavailableError
from tests.factories import make_drink

BASE_URL = "https://cocktaildb.test/api/json/v1/1"


def _client(handler) -> CocktailDBClient:
    return CocktailDBClient(base_url=BASE_URL, timeout=1.0, transport=httpx.MockTransport(handler))


class TestDrinkReference:
    """Tests for DrinkReference parsing."""

    def test_from_dict(self) -> None:
        ref = DrinkReference.from_dict(
            {"idDrink": 11007, "strDrink": "Margarita", "strDrinkThumb": "https://img/m.jpg"}
        )
        assert ref.drink_id == "11007"
        assert ref.name == "Margarita"
        assert ref.thumbnail == "https://img/m.jpg"

    def test_missing_optional_fields(self) -> None:
        ref = DrinkReference.from_dict({"idDrink": "1"})
        assert ref.name == ""
        assert ref.thumbnail is None


class TestCocktailDBClient:
    """Tests for CocktailDBClient requests and payload handling."""

    @pytest.mark.asyncio
    async def test_search_by_name(self) -> None:
        """Test the name search hits search.php with the s parameter."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"drinks": [make_drink("Mojito")]})

        drinks = await _client(handler).search_by_name("mojito")

        assert [d["strDrink"] for d in drinks] == ["Mojito"]
        assert seen[0].url.path == "/api/json/v1/1/search.php"
        assert seen[0].url.params["s"] == "mojito"

    @pytest.mark.asyncio
    async def test_search_no_results_null(self) -> None:
        client = _client(lambda request: httpx.Response(200, json={"drinks": None}))
        assert await client.search_by_name("zzz") == []

    @pytest.mark.asyncio
    async def test_filter_no_results_string(self) -> None:
        """Test the API's "None Found" marker is treated as empty."""
        client = _client(lambda request: httpx.Response(200, json={"drinks": "None Found"}))
        assert await client.filter_by_ingredient("unobtainium") == []

    @pytest.mark.asyncio
    async def test_filter_by_ingredient(self) -> None:
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={
                    "drinks": [
                        {"idDrink": "1", "strDrink": "Negroni", "strDrinkThumb": "https://img/1.jpg"},
                        {"strDrink": "No id"},
                        {"idDrink": "2", "strDrink": "Americano", "strDrinkThumb": None},
                    ]
                },
            )

        refs = await _client(handler).filter_by_ingredient("Campari")

        assert [r.drink_id for r in refs] == ["1", "2"]
        assert refs[1].thumbnail is None
        assert seen[0].url.path.endswith("/filter.php")
        assert seen[0].url.params["i"] == "Campari"

    @pytest.mark.asyncio
    async def test_lookup_by_id(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path.endswith("/lookup.php")
            return httpx.Response(
                200, json={"drinks": [make_drink("Negroni", drink_id=request.url.params["i"])]}
            )

        drink = await _client(handler).lookup_by_id("11003")
        assert drink["idDrink"] == "11003"

    @pytest.mark.asyncio
    async def test_lookup_unknown_id(self) -> None:
        client = _client(lambda request: httpx.Response(200, json={"drinks": None}))
        assert await client.lookup_by_id("0") is None

    @pytest.mark.asyncio
    async def test_http_error_status(self) -> None:
        client = _client(lambda request: httpx.Response(503, text="maintenance"))
        with pytest.raises(SourceUnavailableError, match="HTTP error"):
            await client.search_by_name("mojito")

    @pytest.mark.asyncio
    async def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(SourceUnavailableError, match="Timeout"):
            await _client(handler).search_by_name("mojito")

    @pytest.mark.asyncio
    async def test_connection_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(SourceUnavailableError):
            await _client(handler).filter_by_ingredient("gin")

    @pytest.mark.asyncio
    async def test_invalid_json(self) -> None:
        client = _client(lambda request: httpx.Response(200, text="<html>oops</html>"))
        with pytest.raises(SourceUnavailableError, match="Invalid JSON"):
            await client.search_by_name("mojito")

    @pytest.mark.asyncio
    async def test_non_object_payload(self) -> None:
        client = _client(lambda request: httpx.Response(200, json=["not", "an", "object"]))
        with pytest.raises(SourceUnavailableError, match="Unexpected payload"):
            await client.lookup_by_id("1")
