from .exceptions import ConfigurationError, ONIXGenError
from .onix_processor import generate_onix
from .render_options import CommentMode, RenderOptions, XmlVariant

__all__ = [
    'CommentMode',
    'ConfigurationError',
    'ONIXGenError',
    'RenderOptions',
    'XmlVariant',
    'generate_onix',
]
