"""Movie reviews keyed by movie id"""
import logging

from pydantic import TypeAdapter, ValidationError

from .models import Review

logger = logging.getLogger(__name__)

_REVIEW_LIST = TypeAdapter(list[Review])


def load_reviews(path):
    try:
        with open(path, 'rb') as f:
            reviews = _REVIEW_LIST.validate_json(f.read())
    except (OSError, ValidationError) as e:
        logger.error(f"Failed to load reviews from {path}: {e}")
        return ()

    logger.info(f"Loaded {len(reviews)} reviews from {path}")
    return tuple(reviews)


class ReviewService:

    def __init__(self, reviews=()):
        grouped = {}
        for review in reviews:
            grouped.setdefault(review.movie_id, []).append(review)
        self._by_movie = {movie_id: tuple(items) for movie_id, items in grouped.items()}

    @classmethod
    def from_file(cls, path):
        return cls(load_reviews(path))

    def reviews_for_movie(self, movie_id):
        return list(self._by_movie.get(movie_id, ()))

    def average_rating(self, movie_id):
        reviews = self._by_movie.get(movie_id)
        if not reviews:
            return None
        return round(sum(r.rating for r in reviews) / len(reviews), 1)

    def movies_with_reviews(self):
        return len(self._by_movie)
