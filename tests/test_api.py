"""
HTTP tests for the FastAPI app: catalog listing, lookups, and the search envelope.
"""

from fastapi.testclient import TestClient

from api import create_app


def load_client(data_path=None):
	return TestClient(create_app(data_path))


def test_health_reports_movie_count():
	response = load_client().get('/health')

	assert response.status_code == 200
	body = response.json()
	assert body["status"] == "ok"
	assert body["movie_count"] >= 10


def test_list_movies_includes_genres():
	body = load_client().get('/movies').json()

	assert body["movies"][0]["name"] == "The Prison Escape"
	assert body["movies"][0]["duration_minutes"] == 142
	assert body["genres"] == sorted(set(body["genres"]))


def test_get_movie_by_id():
	client = load_client()

	assert client.get('/movies/1').json()["name"] == "The Prison Escape"
	assert client.get('/movies/999').status_code == 404


def test_genres_endpoint():
	genres = load_client().get('/genres').json()

	assert "Drama" in genres


def test_search_by_name():
	response = load_client().get('/api/movies/search', params={"name": "prison"})

	assert response.status_code == 200
	body = response.json()
	assert body["success"] is True
	assert body["count"] == 1
	assert body["movies"][0]["id"] == 1
	assert body["message"] == "Found 1 movies matching the search criteria"


def test_search_id_overrides_other_criteria():
	params = {"id": 1, "name": "Different Movie", "genre": "Different Genre"}
	body = load_client().get('/api/movies/search', params=params).json()

	assert [m["id"] for m in body["movies"]] == [1]


def test_search_without_matches():
	body = load_client().get('/api/movies/search', params={"id": 999}).json()

	assert body["success"] is True
	assert body["count"] == 0
	assert body["movies"] == []
	assert body["message"] == "No movies found matching the search criteria"


def test_search_rejects_non_positive_id():
	client = load_client()

	for bad_id in (0, -1):
		response = client.get('/api/movies/search', params={"id": bad_id})
		assert response.status_code == 400
		assert response.json() == {
			"success": False,
			"count": 0,
			"movies": [],
			"error": "Invalid movie ID provided",
		}


def test_search_rejects_non_integer_id():
	response = load_client().get('/api/movies/search', params={"id": "abc"})

	assert response.status_code == 422


def test_missing_catalog_serves_empty_results(tmp_path):
	client = load_client(str(tmp_path / 'missing.jsonl'))

	assert client.get('/health').json()["movie_count"] == 0
	assert client.get('/api/movies/search').json()["count"] == 0
	assert client.get('/genres').json() == []


def test_data_path_from_environment(tmp_path, monkeypatch):
	path = tmp_path / 'movies.jsonl'
	path.write_text(
		'{"id": 42, "movieName": "Only One", "director": "D", "year": 2001, "genre": "Drama", '
		'"description": "", "duration": 90, "imdbRating": 3.0}\n',
		encoding='utf-8',
	)
	monkeypatch.setenv("MOVIE_CATALOG_DATA", str(path))

	body = load_client().get('/movies').json()

	assert [m["id"] for m in body["movies"]] == [42]


class FailingEngine:
	def search_movies(self, name=None, movie_id=None, genre=None):
		raise RuntimeError("boom")


def test_search_failure_returns_500_envelope():
	app = create_app()
	app.state.engine = FailingEngine()
	response = TestClient(app).get('/api/movies/search', params={"name": "prison"})

	assert response.status_code == 500
	assert response.json() == {
		"success": False,
		"count": 0,
		"movies": [],
		"error": "Internal server error occurred during search",
	}


def test_importing_module_does_not_build_the_app():
	import api

	assert api._app is None
