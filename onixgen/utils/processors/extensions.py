"""Vendor extension processing module.

ONIX has no place for several attributes the Polish book market relies on
(VAT rate, PKWiU classification, cover type, ...). They are exported under
the ``elibri`` namespace after the standard containers.
"""
import logging

from ..codelists import COVER_TYPES
from ..onix_constants import DIALECT_301, EXCERPT_URL_TEMPLATE
from ..onix_utils import dialect_at_least, format_date, format_number, format_price, is_present
from ..xml_builder import add_comment, add_element

logger = logging.getLogger(__name__)


def process_elibri_extensions(new_product, product, options):
    """Process vendor extension elements"""
    if options.pure_onix or not dialect_at_least(options.dialect, DIALECT_301):
        return

    if is_present(product.cover_type_name):
        add_comment(new_product, 'Cover type, one of: ' + ', '.join(COVER_TYPES), options, kind='extensions')
        add_element(new_product, 'elibri:CoverType', product.cover_type_name.strip())

    if product.price_amount is not None:
        add_comment(new_product, 'Cover price', options, kind='extensions')
        add_element(new_product, 'elibri:CoverPrice', format_price(product.price_amount))

    if product.vat is not None:
        add_comment(new_product, 'VAT rate in percent', options, kind='extensions')
        add_element(new_product, 'elibri:Vat', format_number(product.vat))

    if is_present(product.pkwiu):
        add_element(new_product, 'elibri:PKWiU', product.pkwiu.strip())

    if is_present(product.pdw_exclusiveness):
        add_element(new_product, 'elibri:PDWExclusiveness', product.pdw_exclusiveness.strip())

    add_element(new_product, 'elibri:preview_exists', format_number(product.preview_exists))

    if product.digital:
        if product.epub_sale_not_restricted or product.epub_sale_restricted_to is None:
            add_element(new_product, 'elibri:SaleNotRestricted')
        else:
            add_element(new_product, 'elibri:SaleRestrictedTo', format_date(product.epub_sale_restricted_to))

    if is_present(product.hyphenated_isbn):
        add_element(new_product, 'elibri:HyphenatedISBN', product.hyphenated_isbn.strip())

    if product.digital:
        process_stored_files(new_product, product, options)


def _stored_file_attributes(stored_file):
    return {
        'md5': stored_file.file_md5,
        'file_size': stored_file.file_size,
        'file_type': stored_file.file_type,
        'updated_at': stored_file.updated_at.isoformat() if stored_file.updated_at else None,
        'id': stored_file.id,
    }


def process_stored_files(new_product, product, options):
    """Process excerpt and master file manifests of digital products"""
    if product.excerpts:
        excerpts = add_element(new_product, 'elibri:excerpts')
        for excerpt in product.excerpts:
            add_element(excerpts, 'elibri:excerpt', EXCERPT_URL_TEMPLATE.format(id=excerpt.id),
                        attributes=_stored_file_attributes(excerpt))

    if product.masters:
        masters = add_element(new_product, 'elibri:masters')
        for master in product.masters:
            add_element(masters, 'elibri:master', attributes=_stored_file_attributes(master))
