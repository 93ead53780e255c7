import httpx
import pytest

from cinelog.api.tmdb import get_tmdb_service
from cinelog.core.config import Settings
from cinelog.main import app
from cinelog.services.tmdb_service import TMDBService


@pytest.fixture
def tmdb(client):
    """Routes TMDB calls to a handler; returns the list of captured requests"""
    captured = []
    routes = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        status_code, payload = routes.get(request.url.path, (404, {"status_code": 34}))
        return httpx.Response(status_code, json=payload)

    settings = Settings(tmdb_api_key="test-tmdb-key", tmdb_access_token=None)
    service = TMDBService(settings=settings, transport=httpx.MockTransport(handler))
    app.dependency_overrides[get_tmdb_service] = lambda: service
    return routes, captured


def test_popular_returns_results(client, tmdb):
    routes, captured = tmdb
    routes["/3/movie/popular"] = (200, {"results": [{"id": 1}, {"id": 2}]})

    response = client.get("/api/tmdb/popular")

    assert response.status_code == 200
    assert response.json() == [{"id": 1}, {"id": 2}]
    params = captured[0].url.params
    assert params["api_key"] == "test-tmdb-key"
    assert params["language"] == "pt-BR"
    assert params["page"] == "1"


def test_upcoming_returns_results(client, tmdb):
    routes, _ = tmdb
    routes["/3/movie/upcoming"] = (200, {"results": [{"id": 3}]})

    assert client.get("/api/tmdb/upcoming").json() == [{"id": 3}]


def test_featured_is_first_now_playing(client, tmdb):
    routes, _ = tmdb
    routes["/3/movie/now_playing"] = (200, {"results": [{"id": 7}, {"id": 8}]})

    response = client.get("/api/tmdb/featured")

    assert response.status_code == 200
    assert response.json() == {"id": 7}


def test_featured_without_results_is_not_found(client, tmdb):
    routes, _ = tmdb
    routes["/3/movie/now_playing"] = (200, {"results": []})

    assert client.get("/api/tmdb/featured").status_code == 404


def test_movie_details_appends_extras(client, tmdb):
    routes, captured = tmdb
    routes["/3/movie/550"] = (200, {"id": 550, "title": "Fight Club"})

    response = client.get("/api/tmdb/movie/550")

    assert response.status_code == 200
    assert response.json()["title"] == "Fight Club"
    assert captured[0].url.params["append_to_response"] == (
        "credits,videos,images,release_dates,watch/providers"
    )


def test_upstream_error_status_is_propagated(client, tmdb):
    routes, _ = tmdb
    routes["/3/movie/1"] = (401, {"status_code": 7, "status_message": "Invalid API key"})

    response = client.get("/api/tmdb/movie/1")

    assert response.status_code == 401
    body = response.json()
    assert body["tmdb_status_code"] == 7
    assert "Invalid API key" in body["message"]


def test_search_requires_query(client, tmdb):
    _, captured = tmdb

    assert client.get("/api/tmdb/search/movie").status_code == 400
    assert client.get("/api/tmdb/search/movie", params={"query": "   "}).status_code == 400
    assert captured == []


def test_search_passes_query(client, tmdb):
    routes, captured = tmdb
    routes["/3/search/movie"] = (200, {"results": [{"id": 550}]})

    response = client.get("/api/tmdb/search/movie", params={"query": " fight club "})

    assert response.status_code == 200
    assert response.json() == [{"id": 550}]
    assert captured[0].url.params["query"] == "fight club"
    assert captured[0].url.params["include_adult"] == "false"


def test_bearer_token_replaces_api_key(client):
    captured = []

    def handler(request):
        captured.append(request)
        return httpx.Response(200, json={"results": []})

    settings = Settings(tmdb_api_key="key", tmdb_access_token="read-token")
    service = TMDBService(settings=settings, transport=httpx.MockTransport(handler))
    app.dependency_overrides[get_tmdb_service] = lambda: service

    client.get("/api/tmdb/upcoming")

    assert captured[0].headers["Authorization"] == "Bearer read-token"
    assert "api_key" not in captured[0].url.params


def test_missing_credentials_is_server_error(client):
    settings = Settings(tmdb_api_key=None, tmdb_access_token=None)
    app.dependency_overrides[get_tmdb_service] = lambda: TMDBService(settings=settings)

    response = client.get("/api/tmdb/popular")

    assert response.status_code == 500
    assert "not configured" in response.json()["message"]


def test_transport_error_is_server_error(client):
    def handler(request):
        raise httpx.ConnectError("boom", request=request)

    settings = Settings(tmdb_api_key="key")
    service = TMDBService(settings=settings, transport=httpx.MockTransport(handler))
    app.dependency_overrides[get_tmdb_service] = lambda: service

    assert client.get("/api/tmdb/popular").status_code == 500
