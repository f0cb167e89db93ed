"""ONIX 3.0 metadata generator for product records"""
from .models import Product
from .utils import ConfigurationError, RenderOptions, XmlVariant, generate_onix

__version__ = '1.0.0'

__all__ = [
    'ConfigurationError',
    'Product',
    'RenderOptions',
    'XmlVariant',
    'generate_onix',
]
