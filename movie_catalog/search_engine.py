"""
Search engine module.
Answers id lookups and name/genre filtered searches over a movie source.
"""

from typing import List, Optional, Protocol

from loguru import logger

from .models import Movie


class MovieSource(Protocol):
	"""Anything that can hand out the full catalog and look movies up by id."""

	def all(self) -> List[Movie]:
		...

	def by_id(self, movie_id: Optional[int]) -> Optional[Movie]:
		...


def _normalize_criterion(value: Optional[str]) -> Optional[str]:
	"""Trim and lowercase a text criterion; blank or missing means no filter."""
	if value is None:
		return None
	value = value.strip()
	return value.lower() if value else None


class SearchEngine:
	"""
	Stateless query layer over a MovieSource.

	An active id criterion (a positive integer) wins over everything else.
	Otherwise name and genre are case-insensitive substring filters combined
	with AND, and the source's order is kept.
	"""

	def __init__(self, source: MovieSource):
		self.source = source

	def get_all_movies(self) -> List[Movie]:
		return self.source.all()

	def get_movie_by_id(self, movie_id: Optional[int]) -> Optional[Movie]:
		return self.source.by_id(movie_id)

	def search_movies(
		self,
		name: Optional[str] = None,
		movie_id: Optional[int] = None,
		genre: Optional[str] = None,
	) -> List[Movie]:
		"""Return the movies matching the given criteria; an empty list means no match."""
		logger.debug(f"[Engine] Searching | name={name!r} id={movie_id!r} genre={genre!r}")

		# Id lookup short-circuits the other criteria
		if movie_id is not None and movie_id > 0:
			movie = self.source.by_id(movie_id)
			results = [movie] if movie is not None else []
			logger.debug(f"[Engine] Id search returned {len(results)} movie(s)")
			return results

		results = self.source.all()

		name_needle = _normalize_criterion(name)
		if name_needle is not None:
			results = [m for m in results if name_needle in m.name.lower()]

		genre_needle = _normalize_criterion(genre)
		if genre_needle is not None:
			results = [m for m in results if genre_needle in m.genre.lower()]

		logger.debug(f"[Engine] Search returned {len(results)} movie(s)")
		return results

	def get_all_genres(self) -> List[str]:
		"""Return a sorted list of all distinct genre labels, compared case-sensitively."""
		return sorted({m.genre for m in self.source.all()})
