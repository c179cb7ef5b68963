"""
Catalog store module.
Holds the immutable, ordered list of movies and an id index for constant-time lookup.
"""

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from loguru import logger

from .data_loader import DEFAULT_DATA_PATH, CatalogLoadError, DataLoader
from .models import Movie


class CatalogStore:
	"""
	In-memory movie catalog built once at startup.

	Load order is kept and used as the default iteration order. Duplicate ids
	are not rejected: the index keeps the last record seen for an id while the
	ordered list keeps every record.
	"""

	def __init__(self, movies: Sequence[Movie] = ()):
		self._movies: List[Movie] = list(movies)
		self._by_id: Dict[int, Movie] = {}
		for movie in self._movies:
			self._by_id[movie.id] = movie
		logger.info(f"[Store] Catalog ready with {len(self._movies)} movies ({len(self._by_id)} distinct ids)")

	@classmethod
	def from_file(cls, filepath: Union[str, Path] = DEFAULT_DATA_PATH, loader: Optional[DataLoader] = None) -> 'CatalogStore':
		"""
		Build a store from a JSONL catalog file.
		A missing or malformed file yields an empty store instead of an exception.
		"""
		loader = loader or DataLoader()
		try:
			movies = loader.load_movies(filepath)
		except (OSError, CatalogLoadError) as e:
			logger.error(f"[Store] Failed to load movies, starting with an empty catalog: {e}")
			movies = []
		return cls(movies)

	def all(self) -> List[Movie]:
		"""Return every movie in load order."""
		return list(self._movies)

	def by_id(self, movie_id: Optional[int]) -> Optional[Movie]:
		"""Return the movie with this id, or None for a missing, unknown or non-positive id."""
		if movie_id is None or movie_id <= 0:
			return None
		return self._by_id.get(movie_id)

	def __len__(self) -> int:
		return len(self._movies)
