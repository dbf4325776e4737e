import json
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from flask import template_rendered

from app import create_app
from config import Config
from movies import MovieCatalog, ReviewService


SAMPLE_MOVIES = [
    {
        'id': 1, 'movieName': 'The Prison Escape', 'director': 'John Director', 'year': 1994,
        'genre': 'Drama', 'description': 'Test description', 'duration': 142, 'imdbRating': 5.0
    },
    {
        'id': 2, 'movieName': 'The Family Boss', 'director': 'Michael Filmmaker', 'year': 1972,
        'genre': 'Crime/Drama', 'description': 'Test description', 'duration': 175, 'imdbRating': 5.0
    },
    {
        'id': 5, 'movieName': 'Life Journey', 'director': 'Robert Filmmaker', 'year': 1994,
        'genre': 'Drama/Romance', 'description': 'Test description', 'duration': 142, 'imdbRating': 4.0
    }
]

SAMPLE_REVIEWS = [
    {'movieId': 1, 'userName': 'Sarah', 'avatarEmoji': '👩', 'rating': 5, 'comment': 'Great'},
    {'movieId': 1, 'userName': 'Tom', 'avatarEmoji': '🧔', 'rating': 4, 'comment': 'Good'}
]


@pytest.fixture
def bundled_catalog():
    return MovieCatalog.from_file(Config.MOVIES_DATA_PATH)


@pytest.fixture
def movies_file(tmp_path):
    path = tmp_path / 'movies.json'
    path.write_text(json.dumps(SAMPLE_MOVIES), encoding='utf-8')
    return path


@pytest.fixture
def reviews_file(tmp_path):
    path = tmp_path / 'reviews.json'
    path.write_text(json.dumps(SAMPLE_REVIEWS), encoding='utf-8')
    return path


@pytest.fixture
def app(movies_file, reviews_file):
    app = create_app(
        catalog=MovieCatalog.from_file(movies_file),
        reviews=ReviewService.from_file(reviews_file)
    )
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def rendered(app):
    """Captures (template name, context) for every template rendered"""
    records = []

    def record(sender, template, context, **extra):
        records.append((template.name, context))

    template_rendered.connect(record, app)
    yield records
    template_rendered.disconnect(record, app)
