from flask import Blueprint, Flask, current_app, jsonify, redirect, render_template, request, url_for
from config import Config
import logging
import os
import re

import movies
from movies import InvalidParameterError, MovieCatalog, ReviewService, movie_icon
from services.catalog_check import check_catalog

from metrics import (
    metrics_endpoint, track_request,
    CATALOG_SIZE, SEARCH_QUERY_COUNT, SEARCH_RESULTS_COUNT,
    INVALID_SEARCH_COUNT, MOVIE_VIEWS
)

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


INVALID_ID_MESSAGE = 'Movie ID must be a positive number.'
INVALID_ID_API_MESSAGE = 'Invalid movie ID. Must be a positive number.'
ID_PATTERN = re.compile(r'[+-]?\d+')


TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.abspath(movies.__file__)), 'templates')


bp = Blueprint('movies', __name__)


def get_catalog():
    return current_app.extensions['movie_catalog']


def get_reviews():
    return current_app.extensions['movie_reviews']


def parse_search_id(raw_id):
    """
    Validate the optional id search parameter

    Returns:
        int or None: the id, or None when the parameter is absent or blank

    Raises:
        InvalidParameterError: the id is not a positive integer
    """
    if raw_id is None or not raw_id.strip():
        return None

    if not ID_PATTERN.fullmatch(raw_id.strip()):
        raise InvalidParameterError(INVALID_ID_MESSAGE)

    movie_id = int(raw_id)

    if movie_id <= 0:
        raise InvalidParameterError(INVALID_ID_MESSAGE)

    return movie_id


def search_criteria():
    return (
        request.args.get('name'),
        request.args.get('id'),
        request.args.get('genre')
    )


def render_error(title, message, status_code):
    return render_template('error.html', title=title, message=message), status_code


@bp.route('/')
def home():
    return redirect(url_for('movies.movies_list'))


@bp.route('/health')
@track_request
def health():
    return jsonify({
        'status': 'healthy',
        'service': 'movie-catalog',
        'movies': len(get_catalog())
    }), 200


@bp.route('/check/catalog')
def check_catalog_endpoint():
    result = check_catalog(get_catalog(), get_reviews())
    status_code = 200 if result['status'] == 'healthy' else 503
    return jsonify(result), status_code


@bp.route('/movies')
@track_request
def movies_list():
    logger.info("Fetching movies")
    return render_template('movies.html', movies=get_catalog().all_movies())


@bp.route('/movies/<int(signed=True):movie_id>/details')
@track_request
def movie_detail(movie_id):
    logger.info(f"Fetching details for movie ID: {movie_id}")

    movie = get_catalog().get_by_id(movie_id)
    if movie is None:
        logger.warning(f"Movie with ID {movie_id} not found")
        return render_error('Movie Not Found', f'Movie with ID {movie_id} was not found.', 404)

    MOVIE_VIEWS.labels(movie_id=movie_id).inc()

    reviews = get_reviews()
    return render_template(
        'movie_detail.html',
        movie=movie,
        movie_icon=movie_icon(movie.name),
        all_reviews=reviews.reviews_for_movie(movie.id),
        average_review=reviews.average_rating(movie.id)
    )


@bp.route('/movies/search')
@track_request
def search_movies():
    name, raw_id, genre = search_criteria()
    logger.info(f"Searching movies with parameters - name: {name}, id: {raw_id}, genre: {genre}")

    try:
        movie_id = parse_search_id(raw_id)
    except InvalidParameterError as e:
        logger.warning(f"Invalid movie ID provided: {raw_id}")
        INVALID_SEARCH_COUNT.inc()
        return render_error(e.title, e.message, 400)

    SEARCH_QUERY_COUNT.labels(source='html').inc()

    try:
        results = get_catalog().search(name, movie_id, genre)
    except Exception:
        logger.exception("Error occurred during movie search")
        return render_error(
            'Search Error',
            'An error occurred while searching for movies. Please try again.',
            500
        )

    SEARCH_RESULTS_COUNT.observe(len(results))
    logger.info(f"Found {len(results)} movies matching search criteria")

    return render_template(
        'movies.html',
        movies=results,
        search_name=name if name is not None else '',
        search_id=str(movie_id) if movie_id is not None else '',
        search_genre=genre if genre is not None else '',
        is_search_result=True,
        search_result_count=len(results)
    )


@bp.route('/api/movies/search')
@track_request
def search_movies_api():
    name, raw_id, genre = search_criteria()
    logger.info(f"API search request - name: {name}, id: {raw_id}, genre: {genre}")

    try:
        movie_id = parse_search_id(raw_id)
    except InvalidParameterError:
        logger.warning(f"Invalid movie ID provided in API request: {raw_id}")
        INVALID_SEARCH_COUNT.inc()
        return jsonify({'status': 'error', 'error': INVALID_ID_API_MESSAGE}), 400

    SEARCH_QUERY_COUNT.labels(source='api').inc()

    try:
        results = get_catalog().search(name, movie_id, genre)
    except Exception:
        logger.exception("Error occurred during API movie search")
        return jsonify({
            'status': 'error',
            'error': 'An error occurred while searching for movies.'
        }), 500

    SEARCH_RESULTS_COUNT.observe(len(results))
    logger.info(f"API search completed successfully, found {len(results)} movies")

    return jsonify({
        'status': 'success',
        'movies': [movie.to_dict() for movie in results],
        'count': len(results),
        'searchCriteria': {
            'name': name if name is not None else '',
            'id': movie_id if movie_id is not None else '',
            'genre': genre if genre is not None else ''
        }
    })


@bp.route('/api/movies/<int(signed=True):movie_id>')
@track_request
def movie_detail_api(movie_id):
    movie = get_catalog().get_by_id(movie_id)

    if movie is None:
        return jsonify({'status': 'error', 'error': 'Movie not found'}), 404

    return jsonify({
        'status': 'success',
        'movie': movie.to_dict(),
        'reviews': [review.to_dict() for review in get_reviews().reviews_for_movie(movie_id)]
    })


@bp.route('/metrics')
@track_request
def metrics():
    return metrics_endpoint()


def page_not_found(e):
    return render_error('Page Not Found', 'The page you requested does not exist.', 404)


def create_app(catalog=None, reviews=None, config_object=Config):
    """
    Build the Flask application around an explicitly loaded catalog

    Args:
        catalog: MovieCatalog to serve (loaded from MOVIES_DATA_PATH if None)
        reviews: ReviewService for detail pages (loaded from REVIEWS_DATA_PATH if None)
        config_object: settings class
    """
    app = Flask(__name__, template_folder=TEMPLATE_DIR)
    app.config.from_object(config_object)

    if catalog is None:
        catalog = MovieCatalog.from_file(app.config['MOVIES_DATA_PATH'])
    if reviews is None:
        reviews = ReviewService.from_file(app.config['REVIEWS_DATA_PATH'])

    app.extensions['movie_catalog'] = catalog
    app.extensions['movie_reviews'] = reviews
    CATALOG_SIZE.set(len(catalog))

    app.register_blueprint(bp)
    app.register_error_handler(404, page_not_found)

    logger.info(f"Movie catalog ready with {len(catalog)} movies")
    return app


if __name__ == '__main__':
    app = create_app()
    app.run(
        host=Config.FLASK_HOST,
        port=Config.FLASK_PORT,
        debug=Config.FLASK_DEBUG
    )
