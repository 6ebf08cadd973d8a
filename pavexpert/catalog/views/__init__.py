"""
Catalog views.
"""

from .product import product_detail, product_list

__all__ = [
    'product_detail',
    'product_list',
]
