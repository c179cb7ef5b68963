"""
Data models for the Movie Catalog service.
Defines the record type shared by the loader, the store and the search engine.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass  # auto-generates __init__, __repr__, __eq__, __hash__


@dataclass(frozen=True)
class Movie:
	"""
	Represents a single movie in the catalog.
	Frozen so records handed out by the store can never be changed by callers.
	"""
	id: int  # unique positive identifier (uniqueness is not enforced at load)
	name: str  # display title, e.g. "The Prison Escape"
	director: str  # director's name as written in the data file
	year: int  # release year
	genre: str  # free-form genre label, may be compound ("Crime/Drama")
	description: str  # short synopsis
	duration_minutes: int  # running time in minutes
	rating: float  # rating on a 0-10 scale
