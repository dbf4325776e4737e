from .catalog_check import check_catalog

__all__ = [
    'check_catalog'
]
