"""ONIX section processors"""
from .header import process_header
from .product import process_product

__all__ = [
    'process_header',
    'process_product',
]
