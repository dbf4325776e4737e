from .catalog import MovieCatalog, load_movies
from .errors import InvalidParameterError
from .icons import movie_icon
from .models import Movie, Review
from .reviews import ReviewService

__all__ = [
    'MovieCatalog',
    'load_movies',
    'InvalidParameterError',
    'movie_icon',
    'Movie',
    'Review',
    'ReviewService'
]
