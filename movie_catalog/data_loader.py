"""
Data loading module.
Reads movie records from the bundled JSON Lines file into Movie objects.
"""

# Standard libs for JSON parsing, typing, and paths
import json  # read JSON lines
from typing import List, Dict, Union  # type hints
from pathlib import Path  # filesystem-safe paths

# Import our Movie data class used across the project
from .models import Movie  # structured movie record

# Console logging
from loguru import logger  # console logger


# Location of the catalog shipped inside the package
DEFAULT_DATA_PATH = Path(__file__).resolve().parent / 'data' / 'movies.jsonl'


class CatalogLoadError(ValueError):
	"""Raised when the catalog file exists but one of its records cannot be parsed."""


class DataLoader:
	"""
	Handles loading movie records from disk.
	A single bad line fails the whole load; the caller decides how to degrade.
	"""

	# Keys every record line must carry
	REQUIRED_KEYS = ('id', 'movieName', 'director', 'year', 'genre', 'description', 'duration', 'imdbRating')

	def load_movies(self, filepath: Union[str, Path] = DEFAULT_DATA_PATH) -> List[Movie]:
		"""
		Load movies from a JSON Lines (JSONL) file where each line is one JSON object.
		Returns a list of Movie objects in file order.

		Raises FileNotFoundError if the file is missing and CatalogLoadError
		if any non-blank line is not a valid movie record.
		"""
		movies = []  # accumulator for parsed Movie objects
		filepath = Path(filepath)  # normalize path

		# Validate the file presence early to give clear error messages
		if not filepath.exists():
			raise FileNotFoundError(f"Movie data file not found: {filepath}")

		logger.info(f"[DataLoader] Loading movies from {filepath}...")  # log action

		try:
			with open(filepath, 'r', encoding='utf-8') as f:
				lines = f.readlines()  # decode the whole file up front
		except UnicodeDecodeError as e:
			raise CatalogLoadError(f"Movie data file is not valid UTF-8: {filepath}: {e}") from e

		for line_num, line in enumerate(lines, 1):  # keep track of line number for diagnostics
			line = line.strip()
			if not line:  # tolerate blank lines (e.g. trailing newline)
				continue
			try:
				data = json.loads(line)  # parse JSON object per line
				movies.append(self._parse_movie_data(data))  # convert dict -> Movie
			except (json.JSONDecodeError, KeyError, TypeError, ValueError, OverflowError) as e:
				raise CatalogLoadError(f"Invalid movie record at line {line_num} of {filepath}: {e!r}") from e

		logger.info(f"[DataLoader] Successfully loaded {len(movies)} movies.")  # summary
		return movies  # return list

	def _parse_movie_data(self, data: Dict) -> Movie:
		"""
		Convert a raw dictionary (from file) into a strongly-typed Movie object.
		Every key in REQUIRED_KEYS is required and must carry its JSON type;
		null, booleans and fractional integers are rejected rather than coerced.
		"""
		if not isinstance(data, dict):
			raise TypeError(f"expected a JSON object, got {type(data).__name__}")

		missing = [key for key in self.REQUIRED_KEYS if key not in data]
		if missing:
			raise KeyError(', '.join(missing))

		name = self._text(data, 'movieName').strip()
		if not name:
			raise ValueError("movieName must not be empty")

		return Movie(
			id=self._integer(data, 'id'),
			name=name,
			director=self._text(data, 'director'),
			year=self._integer(data, 'year'),
			genre=self._text(data, 'genre'),
			description=self._text(data, 'description'),
			duration_minutes=self._integer(data, 'duration'),
			rating=self._number(data, 'imdbRating'),
		)

	def _text(self, data: Dict, key: str) -> str:
		value = data[key]
		if not isinstance(value, str):
			raise ValueError(f"{key} must be a string, got {value!r}")
		return value

	def _integer(self, data: Dict, key: str) -> int:
		value = data[key]
		# bool is a subclass of int in Python
		if isinstance(value, bool) or not isinstance(value, int):
			raise ValueError(f"{key} must be an integer, got {value!r}")
		return value

	def _number(self, data: Dict, key: str) -> float:
		value = data[key]
		if isinstance(value, bool) or not isinstance(value, (int, float)):
			raise ValueError(f"{key} must be a number, got {value!r}")
		return float(value)
