from app import create_app
from movies import MovieCatalog, ReviewService
from services.catalog_check import check_catalog


def test_health_check_structure(app):
    with app.app_context():
        result = check_catalog(app.extensions['movie_catalog'], app.extensions['movie_reviews'])

    assert 'status' in result
    assert 'service' in result
    assert 'message' in result
    assert result['service'] == 'catalog'
    assert result['status'] == 'healthy'
    assert result['details']['movies'] == {'count': 3, 'ids': [1, 2, 5]}
    assert result['details']['reviews'] == {'movies_with_reviews': 1}


def test_empty_catalog_is_unhealthy():
    result = check_catalog(MovieCatalog())

    assert result['status'] == 'unhealthy'
    assert result['message'] == 'Catalog is empty'


def test_health_endpoint(client):
    response = client.get('/health')

    assert response.status_code == 200
    assert response.get_json() == {'status': 'healthy', 'service': 'movie-catalog', 'movies': 3}


def test_check_catalog_endpoint(client):
    response = client.get('/check/catalog')

    assert response.status_code == 200
    assert response.get_json()['status'] == 'healthy'


def test_app_stays_up_with_missing_data(tmp_path):
    app = create_app(
        catalog=MovieCatalog.from_file(tmp_path / 'missing.json'),
        reviews=ReviewService.from_file(tmp_path / 'missing_reviews.json')
    )
    client = app.test_client()

    assert client.get('/check/catalog').status_code == 503
    body = client.get('/api/movies/search').get_json()
    assert body['status'] == 'success'
    assert body['count'] == 0


def test_metrics_endpoint(client):
    client.get('/api/movies/search?name=Prison')
    response = client.get('/metrics')

    assert response.status_code == 200
    assert b'movies_search_queries_total' in response.data
    assert b'movies_catalog_size' in response.data
