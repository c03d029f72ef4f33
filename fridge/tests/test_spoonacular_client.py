import httpx
import pytest

from fridge.infra.Spoonacular_Client import SpoonacularClient
from fridge.utilities.exceptions import ConfigurationMissingError, ExternalFetchError

BASE_URL = "https://recipes.test"


def make_client(handler, api_key="test-key"):
    return SpoonacularClient(api_key, BASE_URL, timeout=5, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_find_by_ingredients_sends_expected_query():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[
            {"id": 11, "title": "Tomato Soup", "image": "soup.jpg", "usedIngredientCount": 2},
            {"id": 12, "title": "Omelette"},
        ])

    recipes = await make_client(handler).find_by_ingredients(["Egg", "tomato"], 5)

    assert [(r.id, r.title, r.image) for r in recipes] == [(11, "Tomato Soup", "soup.jpg"), (12, "Omelette", "")]
    request = seen[0]
    assert request.url.path == "/recipes/findByIngredients"
    assert request.url.params["ingredients"] == "egg,tomato"
    assert request.url.params["number"] == "5"
    assert request.url.params["ranking"] == "1"
    assert request.url.params["apiKey"] == "test-key"


@pytest.mark.asyncio
async def test_get_information_decodes_ingredients():
    def handler(request):
        assert request.url.path == "/recipes/42/information"
        return httpx.Response(200, json={
            "id": 42,
            "title": "Salad",
            "image": "salad.jpg",
            "instructions": "<ol><li>Chop&nbsp;everything</li></ol>",
            "readyInMinutes": 15,
            "sourceUrl": "https://example.org/salad",
            "extendedIngredients": [
                {"id": 1, "name": "red onion", "amount": 1, "unit": ""},
                {"id": 2, "name": "cucumber", "amount": 2.5, "unit": "pcs"},
            ],
        })

    info = await make_client(handler).get_information(42)

    assert info.title == "Salad"
    assert [i.name for i in info.ingredients] == ["red onion", "cucumber"]
    assert info.ingredients[1].amount == 2.5
    assert info.plain_instructions == "Chop everything"
    assert info.ready_in_minutes == 15


@pytest.mark.asyncio
async def test_get_random_reads_recipes_field():
    def handler(request):
        return httpx.Response(200, json={"recipes": [{"id": 5, "title": "Pancakes"}]})

    recipes = await make_client(handler).get_random(1)
    assert [r.title for r in recipes] == ["Pancakes"]


@pytest.mark.asyncio
async def test_missing_api_key_makes_no_request():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json=[])

    with pytest.raises(ConfigurationMissingError):
        await make_client(handler, api_key="").find_by_ingredients(["egg"], 5)
    assert calls == []


@pytest.mark.asyncio
async def test_non_200_status():
    def handler(request):
        return httpx.Response(402, json={"message": "quota exceeded"})

    with pytest.raises(ExternalFetchError) as excinfo:
        await make_client(handler).get_information(1)
    assert excinfo.value.reason == "status"
    assert excinfo.value.status_code == 402


@pytest.mark.asyncio
async def test_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ExternalFetchError) as excinfo:
        await make_client(handler).get_random(3)
    assert excinfo.value.reason == "request"


@pytest.mark.asyncio
async def test_invalid_json_body():
    def handler(request):
        return httpx.Response(200, content=b"<html>oops</html>")

    with pytest.raises(ExternalFetchError) as excinfo:
        await make_client(handler).find_by_ingredients(["egg"], 5)
    assert excinfo.value.reason == "decoding"


@pytest.mark.asyncio
async def test_unexpected_payload_shape():
    def handler(request):
        return httpx.Response(200, json={"results": []})

    with pytest.raises(ExternalFetchError) as excinfo:
        await make_client(handler).find_by_ingredients(["egg"], 5)
    assert excinfo.value.reason == "decoding"
