"""
Search predicates.

Each predicate accepts every movie when its criterion is absent, so the
filters can be chained with AND in any order without changing the result.
"""


def normalize_text(value):
    """
    Trim and case-fold a text criterion

    Returns:
        str: normalized criterion, or None when absent or blank
    """
    if value is None:
        return None
    normalized = value.strip().casefold()
    return normalized or None


def matches_name(movie, name):
    needle = normalize_text(name)
    if needle is None:
        return True
    return needle in movie.name.casefold()


def matches_id(movie, movie_id):
    if movie_id is None:
        return True
    return movie.id == movie_id


def matches_genre(movie, genre):
    # Substring match also covers compound genres like "Crime/Drama"
    needle = normalize_text(genre)
    if needle is None:
        return True
    return needle in movie.genre.casefold()


def matches_all(movie, name=None, movie_id=None, genre=None):
    return (
        matches_name(movie, name)
        and matches_id(movie, movie_id)
        and matches_genre(movie, genre)
    )
