"""Product processing module"""
import logging

from ..onix_constants import (
    DEFAULT_NOTIFICATION_TYPE,
    PRODUCT_ID_TYPE_DOI,
    PRODUCT_ID_TYPE_EAN,
    PRODUCT_ID_TYPE_ISBN13,
    PRODUCT_ID_TYPE_PROPRIETARY,
)
from ..codelists import CodeList
from ..onix_utils import is_present
from ..xml_builder import (
    add_comment,
    add_dictionary_comment,
    add_element,
    add_identifier,
    create_element,
    prune_if_empty,
)
from .collateral import process_collateral_detail
from .descriptive import process_descriptive_detail
from .extensions import process_elibri_extensions
from .publishing import process_publishing_detail
from .related import process_related_material
from .supply import process_product_supply

logger = logging.getLogger(__name__)


def process_product(new_root, product, options):
    """Process product elements.

    Containers are attempted in the fixed ONIX order; optional ones whose
    sections all decided to emit nothing are pruned right after rendering.
    ``new_root`` may be None when products are rendered without a header.
    """
    if new_root is None:
        new_product = create_element('Product', declare_extensions=options.declares_extension_namespace)
    else:
        new_product = add_element(new_root, 'Product')
    variant = options.variant

    process_record_identifiers(new_product, product, options)

    if variant.includes_basic_meta:
        process_descriptive_detail(new_product, product, options)

    if variant.includes_other_texts or variant.includes_media_files:
        process_collateral_detail(new_product, product, options)
        prune_if_empty(new_product, 'CollateralDetail')

    process_publishing_detail(new_product, product, options)
    prune_if_empty(new_product, 'PublishingDetail')

    if is_present(product.facsimiles):
        process_related_material(new_product, product, options)

    if variant.includes_stocks:
        process_product_supply(new_product, product, options)

    if not options.pure_onix:
        process_elibri_extensions(new_product, product, options)

    return new_product


def process_record_identifiers(new_product, product, options):
    """Process record reference, notification type and product identifiers"""
    add_comment(new_product, 'Unique record ID', options, kind='record_identifiers')
    add_element(new_product, 'RecordReference', product.record_reference)

    add_dictionary_comment(new_product, 'Notification type', CodeList.NOTIFICATION_TYPE, options,
                           kind='publishing_status')
    notification_type = product.notification_type_onix_code
    add_element(new_product, 'NotificationType',
                notification_type if is_present(notification_type) else DEFAULT_NOTIFICATION_TYPE)

    if is_present(product.deletion_text):
        add_comment(new_product, 'Only present when NotificationType is 05', options, kind='record_identifiers')
        add_element(new_product, 'DeletionText', product.deletion_text.strip())

    process_identifiers(new_product, product, options)


def process_identifiers(new_product, product, options):
    """Process product identifiers without duplicates"""
    isbn = product.isbn_value.strip() if is_present(product.isbn_value) else None
    if isbn:
        add_comment(new_product, 'ISBN', options, kind='record_identifiers')
        add_identifier(new_product, PRODUCT_ID_TYPE_ISBN13, isbn)

    if is_present(product.ean) and product.ean.strip() != isbn:
        add_comment(new_product, 'EAN-13, only when different from the ISBN', options, kind='record_identifiers')
        add_identifier(new_product, PRODUCT_ID_TYPE_EAN, product.ean.strip())

    if is_present(product.doi):
        add_identifier(new_product, PRODUCT_ID_TYPE_DOI, product.doi.strip())

    external = product.external_identifier
    if external is not None and is_present(external.value):
        add_identifier(new_product, PRODUCT_ID_TYPE_PROPRIETARY, external.value, type_name=external.type_name)

    if options.variant.includes_stocks:
        for availability in product.product_availabilities:
            if not is_present(availability.supplier_identifier):
                continue
            add_comment(new_product, f"Supplier identifier: {availability.supplier.name}", options,
                        kind='record_identifiers')
            add_identifier(new_product, PRODUCT_ID_TYPE_PROPRIETARY, availability.supplier_identifier,
                           type_name=availability.supplier.name)
