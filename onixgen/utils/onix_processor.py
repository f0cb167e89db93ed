"""Main ONIX processing module"""
import logging
import traceback

from .processors import process_header, process_product
from .render_options import RenderOptions
from .xml_builder import create_onix_root, serialize_fragments, serialize_xml

logger = logging.getLogger(__name__)


def build_onix_tree(products, options):
    """Build the message tree, or the list of standalone products without headers"""
    if options.emit_headers:
        root = create_onix_root(declare_extensions=options.declares_extension_namespace)
        process_header(root, options)
    else:
        root = None

    standalone = []
    rendered = skipped = 0
    for product in products:
        if not product.public:
            skipped += 1
            logger.debug(f"Skipping non-public product {product.record_reference}")
            continue
        element = process_product(root, product, options)
        if root is None:
            standalone.append(element)
        rendered += 1

    logger.info(f"Rendered {rendered} products, skipped {skipped} non-public")
    return root if options.emit_headers else standalone


def generate_onix(products, options=None):
    """Generate an ONIX 3.0 document for a batch of products.

    Options are validated before anything is written; any error aborts the
    batch and no partial document is returned.
    """
    options = (options or RenderOptions()).validate_for_render()
    products = list(products)
    logger.info(f"Generating ONIX {options.dialect} for {len(products)} products")

    try:
        tree = build_onix_tree(products, options)
        if options.emit_headers:
            return serialize_xml(tree)
        return serialize_fragments(tree)

    except Exception as e:
        logger.error(f"Error generating ONIX: {str(e)}")
        logger.error(traceback.format_exc())
        raise
