"""
FastAPI server exposing the movie catalog.
Endpoints:
- GET /health: basic health check
- GET /movies: full catalog plus the genre list
- GET /movies/{movie_id}: a single movie
- GET /genres: distinct genre labels
- GET /api/movies/search?name=...&id=...&genre=...: filtered search in a JSON envelope

The catalog is loaded once when the app is created. Set MOVIE_CATALOG_DATA to
serve a different JSONL file and MOVIE_CATALOG_LOG_LEVEL to change verbosity.

Run: uvicorn api:app --reload
(api.app is created on first access; tests call create_app() directly.)
"""

# Import standard libraries for env-based settings and timing
import os  # environment configuration
import sys  # stderr sink for loguru
import time  # measure startup and request latencies
from typing import List, Optional  # precise typing for clarity
from pathlib import Path  # path-safe filesystem handling

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import FastAPI, HTTPException, Query, Request  # FastAPI primitives
from fastapi.responses import JSONResponse  # explicit status codes for envelopes
from pydantic import BaseModel  # response schema definitions

# Import our internal modules for data loading and search
from movie_catalog.catalog_store import CatalogStore  # immutable in-memory catalog
from movie_catalog.data_loader import DEFAULT_DATA_PATH  # bundled dataset
from movie_catalog.models import Movie  # record type
from movie_catalog.search_engine import SearchEngine  # filtered lookups

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger


DATA_PATH_ENV = "MOVIE_CATALOG_DATA"  # overrides the bundled dataset
LOG_LEVEL_ENV = "MOVIE_CATALOG_LOG_LEVEL"  # loguru level name


# Pydantic model that describes the shape of a single movie in responses
class MovieOut(BaseModel):
	id: int  # unique id
	name: str  # human-readable title
	director: str  # director name
	year: int  # release year
	genre: str  # free-form genre label
	description: str  # short synopsis
	duration_minutes: int  # running time
	rating: float  # 0-10 rating


# Pydantic model for the catalog listing
class CatalogResponse(BaseModel):
	movies: List[MovieOut]  # every movie in load order
	genres: List[str]  # distinct sorted genres


# Pydantic model for the search envelope
class SearchResponse(BaseModel):
	success: bool  # False only for rejected input
	count: int  # number of movies returned
	movies: List[MovieOut]  # matching movies in catalog order
	message: Optional[str] = None  # human-readable summary
	error: Optional[str] = None  # set when success is False


def to_movie_out(movie: Movie) -> MovieOut:
	"""Convert a catalog record into its response schema."""
	return MovieOut(
		id=movie.id,
		name=movie.name,
		director=movie.director,
		year=movie.year,
		genre=movie.genre,
		description=movie.description,
		duration_minutes=movie.duration_minutes,
		rating=movie.rating,
	)


def error_response(message: str, status_code: int) -> JSONResponse:
	"""Build the search envelope used for rejected or failed requests."""
	body = SearchResponse(success=False, count=0, movies=[], error=message)
	return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def configure_logging(level: str = "INFO") -> None:
	"""Replace loguru's default sink with a stderr sink at the given level."""
	logger.remove()
	logger.add(sys.stderr, level=level.upper())


def create_app(data_path: Optional[str] = None) -> FastAPI:
	"""Load the catalog and build the FastAPI application around one store and one engine."""
	start = time.time()  # start timer for startup latency

	path = Path(data_path or os.getenv(DATA_PATH_ENV) or DEFAULT_DATA_PATH)  # explicit arg > env > bundled
	logger.info(f"[API] Startup: loading catalog from {path}")  # log intent

	store = CatalogStore.from_file(path)  # degrades to empty on bad data
	engine = SearchEngine(store)  # stateless query layer

	app = FastAPI(title="Movie Catalog API", version="1.0.0")  # web app
	app.state.store = store
	app.state.engine = engine
	app.state.startup_seconds = time.time() - start  # elapsed seconds
	logger.info(f"[API] Startup complete in {app.state.startup_seconds:.2f}s with {len(store)} movies")

	register_routes(app)
	return app


def register_routes(app: FastAPI) -> None:
	"""Attach all endpoints to the application."""

	# Simple health endpoint for readiness checks
	@app.get("/health")
	async def health(request: Request):
		"""Return minimal health info for liveness/readiness probes."""
		return {
			"status": "ok",  # constant indicator
			"movie_count": len(request.app.state.store),  # 0 means the catalog failed to load
			"startup_seconds": round(request.app.state.startup_seconds, 2),  # startup latency
		}

	@app.get("/movies", response_model=CatalogResponse)
	async def list_movies(request: Request):
		"""Return the whole catalog and its genres."""
		engine: SearchEngine = request.app.state.engine
		logger.info("[API] /movies")
		return CatalogResponse(
			movies=[to_movie_out(m) for m in engine.get_all_movies()],
			genres=engine.get_all_genres(),
		)

	@app.get("/movies/{movie_id}", response_model=MovieOut)
	async def get_movie(movie_id: int, request: Request):
		"""Return one movie or 404."""
		movie = request.app.state.engine.get_movie_by_id(movie_id)
		if movie is None:
			logger.warning(f"[API] Movie with id {movie_id} not found")
			raise HTTPException(status_code=404, detail=f"Movie with ID {movie_id} was not found.")
		return to_movie_out(movie)

	@app.get("/genres", response_model=List[str])
	async def list_genres(request: Request):
		"""Return the distinct genres in sorted order."""
		return request.app.state.engine.get_all_genres()

	# Main search endpoint; all criteria are optional
	@app.get("/api/movies/search", response_model=SearchResponse, response_model_exclude_none=True)
	async def search_movies(
		request: Request,
		name: Optional[str] = Query(None, description="Case-insensitive substring of the movie name"),
		movie_id: Optional[int] = Query(None, alias="id", description="Exact movie id; overrides name and genre"),
		genre: Optional[str] = Query(None, description="Case-insensitive substring of the genre"),
	):
		"""Execute a filtered search and return the results in an envelope."""
		logger.info(f"[API] /api/movies/search name={name!r} id={movie_id!r} genre={genre!r}")

		if movie_id is not None and movie_id <= 0:
			logger.warning(f"[API] Invalid movie ID provided: {movie_id}")
			return error_response("Invalid movie ID provided", status_code=400)

		start = time.time()  # start timer
		try:
			results = request.app.state.engine.search_movies(name=name, movie_id=movie_id, genre=genre)
		except Exception:
			logger.exception("[API] Error occurred during movie search")
			return error_response("Internal server error occurred during search", status_code=500)
		elapsed_ms = (time.time() - start) * 1000  # compute ms
		logger.info(f"[API] /api/movies/search served {len(results)} results in {elapsed_ms:.2f} ms")

		if results:
			message = f"Found {len(results)} movies matching the search criteria"
		else:
			message = "No movies found matching the search criteria"
		return SearchResponse(
			success=True,
			count=len(results),
			movies=[to_movie_out(m) for m in results],
			message=message,
		)


_app: Optional[FastAPI] = None  # built on first access of api.app


def __getattr__(name: str):
	"""Build the uvicorn instance lazily so importing this module has no side effects."""
	global _app
	if name != "app":
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
	if _app is None:
		configure_logging(os.getenv(LOG_LEVEL_ENV, "INFO"))
		_app = create_app()
	return _app
