"""In-memory movie catalog loaded once from the bundled JSON file"""
import logging
from types import MappingProxyType

from pydantic import TypeAdapter, ValidationError

from .filters import matches_all, normalize_text
from .models import Movie

logger = logging.getLogger(__name__)

_MOVIE_LIST = TypeAdapter(list[Movie])


class CatalogLoadError(Exception):
    pass


def _read_movies(path):
    with open(path, 'rb') as f:
        raw = f.read()

    movies = _MOVIE_LIST.validate_json(raw)

    seen = set()
    for movie in movies:
        if movie.id in seen:
            raise CatalogLoadError(f"Duplicate movie id {movie.id}")
        seen.add(movie.id)

    return tuple(movies)


def load_movies(path):
    """
    Load and validate every movie record from a JSON array file

    Any failure (missing file, bad JSON, schema violation, duplicate id)
    is logged and yields an empty tuple; no record is partially loaded.

    Args:
        path: location of the movies JSON file

    Returns:
        tuple: Movie records in file order
    """
    try:
        movies = _read_movies(path)
    except OSError as e:
        logger.error(f"Failed to read movies from {path}: {e}")
        return ()
    except (ValidationError, CatalogLoadError) as e:
        logger.error(f"Failed to load movies from {path}: {e}")
        return ()

    logger.info(f"Loaded {len(movies)} movies from {path}")
    return movies


class MovieCatalog:
    """Read-only movie collection with an id lookup table"""

    def __init__(self, movies=()):
        self._movies = tuple(movies)
        by_id = {movie.id: movie for movie in self._movies}
        if len(by_id) != len(self._movies):
            raise ValueError("Movie ids must be unique")
        self._by_id = MappingProxyType(by_id)

    @classmethod
    def from_file(cls, path):
        return cls(load_movies(path))

    def __len__(self):
        return len(self._movies)

    def __iter__(self):
        return iter(self._movies)

    def all_movies(self):
        return list(self._movies)

    @property
    def lookup(self):
        return self._by_id

    def get_by_id(self, movie_id):
        if movie_id is None or movie_id <= 0:
            return None
        return self._by_id.get(movie_id)

    def search(self, name=None, movie_id=None, genre=None):
        """
        Movies matching every supplied criterion, in catalog order

        Args:
            name: case-insensitive substring of the movie name
            movie_id: exact movie id
            genre: case-insensitive substring of the genre field

        Returns:
            list: matching Movie records (possibly empty)
        """
        logger.info(f"Searching movies - name: {name!r}, id: {movie_id}, genre: {genre!r}")

        name = normalize_text(name)
        genre = normalize_text(genre)

        return [
            movie for movie in self._movies
            if matches_all(movie, name, movie_id, genre)
        ]
