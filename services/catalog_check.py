def check_catalog(catalog, reviews=None):
    try:
        movies_count = len(catalog)
        is_healthy = movies_count > 0

        details = {
            'movies': {
                'count': movies_count,
                'ids': sorted(catalog.lookup)
            }
        }
        if reviews is not None:
            details['reviews'] = {
                'movies_with_reviews': reviews.movies_with_reviews()
            }

        return {
            'status': 'healthy' if is_healthy else 'unhealthy',
            'service': 'catalog',
            'message': f'Catalog loaded with {movies_count} movies' if is_healthy else 'Catalog is empty',
            'details': details
        }

    except Exception as e:
        return {
            'status': 'unhealthy',
            'service': 'catalog',
            'message': f'Unexpected error: {str(e)}'
        }
