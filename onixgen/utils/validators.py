import re

from .onix_constants import SUPPORTED_DIALECTS
from .render_options import CommentMode

# Validation patterns
PATTERNS = {
    'email': re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'),
    'language_code': re.compile(r'^[a-z]{3}$'),
}

OPTION_KEYS = {
    'dialect', 'variant', 'pure_onix', 'emit_headers', 'comment_mode', 'comment_kinds',
    'sender_name', 'contact_name', 'email_address', 'language_code',
    'skip_volatile_metadata', 'asset_host', 'sent_at',
}
VARIANT_KEYS = {'includes_basic_meta', 'includes_other_texts', 'includes_media_files', 'includes_stocks'}
VARIANT_PRESETS = {'full', 'metadata_only', 'stocks_only'}


def validate_export_request(payload, max_products=None):
    """
    Validate an export request body before any model is built
    Returns: list of error messages (empty if all valid)
    """
    errors = []

    if not isinstance(payload, dict):
        return ['Request body must be a JSON object']

    products = payload.get('products')
    if not isinstance(products, list) or not products:
        errors.append('"products" must be a non-empty list')
    else:
        if max_products and len(products) > max_products:
            errors.append(f'Too many products in one request (maximum {max_products})')
        for index, product in enumerate(products):
            if not isinstance(product, dict):
                errors.append(f'Product #{index + 1} must be an object')
            elif not str(product.get('record_reference') or '').strip():
                errors.append(f'Product #{index + 1} has no record_reference')

    options = payload.get('options', {})
    if not isinstance(options, dict):
        errors.append('"options" must be an object')
        return errors

    errors.extend(validate_options(options))
    return errors


def validate_options(options):
    """
    Validate render options
    Returns: list of error messages (empty if all valid)
    """
    errors = []

    unknown = sorted(set(options) - OPTION_KEYS)
    if unknown:
        errors.append(f'Unknown options: {", ".join(unknown)}')

    dialect = options.get('dialect')
    if dialect is not None and dialect not in SUPPORTED_DIALECTS:
        errors.append(f'Invalid dialect (must be one of {", ".join(SUPPORTED_DIALECTS)})')

    variant = options.get('variant')
    if isinstance(variant, str):
        if variant not in VARIANT_PRESETS:
            errors.append(f'Invalid variant (must be one of {", ".join(sorted(VARIANT_PRESETS))})')
    elif isinstance(variant, dict):
        unknown_flags = sorted(set(variant) - VARIANT_KEYS)
        if unknown_flags:
            errors.append(f'Unknown variant flags: {", ".join(unknown_flags)}')
    elif 'variant' in options:
        errors.append('Variant must be a preset name or an object of flags')

    comment_mode = options.get('comment_mode')
    if comment_mode is not None and comment_mode not in {mode.value for mode in CommentMode}:
        errors.append('Invalid comment mode')

    email = options.get('email_address')
    if email and not PATTERNS['email'].match(str(email)):
        errors.append('Invalid Email format')

    language_code = options.get('language_code')
    if language_code and not PATTERNS['language_code'].match(str(language_code)):
        errors.append('Invalid Language Code format')

    return errors
