from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from flask import Response
import time
import functools


REQUEST_COUNT = Counter(
    'movies_request_count',
    'Total Flask Request Count',
    ['method', 'endpoint', 'http_status']
)

REQUEST_DURATION = Histogram(
    'movies_request_duration_seconds',
    'Flask Request Duration',
    ['method', 'endpoint']
)


CATALOG_SIZE = Gauge(
    'movies_catalog_size',
    'Number of movies loaded into the catalog'
)


SEARCH_QUERY_COUNT = Counter(
    'movies_search_queries_total',
    'Total search queries',
    ['source']
)

SEARCH_RESULTS_COUNT = Histogram(
    'movies_search_results',
    'Number of search results returned',
    buckets=(0, 1, 2, 5, 10, 20, 50)
)

INVALID_SEARCH_COUNT = Counter(
    'movies_invalid_search_total',
    'Searches rejected for invalid parameters'
)


MOVIE_VIEWS = Counter(
    'movies_movie_views_total',
    'Total movie page views',
    ['movie_id']
)


def _status_code(response):
    if isinstance(response, tuple) and len(response) > 1:
        return response[1]
    return getattr(response, 'status_code', 200)


def track_request(f):
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        start_time = time.time()

        try:
            response = f(*args, **kwargs)

            REQUEST_COUNT.labels(
                method=f.__name__,
                endpoint=f.__name__,
                http_status=_status_code(response)
            ).inc()

            duration = time.time() - start_time
            REQUEST_DURATION.labels(
                method=f.__name__,
                endpoint=f.__name__
            ).observe(duration)

            return response

        except Exception:
            REQUEST_COUNT.labels(
                method=f.__name__,
                endpoint=f.__name__,
                http_status=500
            ).inc()
            raise

    return wrapper


def metrics_endpoint():
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)
