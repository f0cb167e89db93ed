"""Publishing detail processing module"""
import logging

from ..codelists import CodeList
from ..onix_constants import (
    DATE_FORMAT_YYYYMMDD,
    DEFAULT_PUBLISHER_ROLE,
    PUBLISHER_ID_TYPE_NAME,
    PUBLISHER_ID_TYPE_PROPRIETARY,
    PUBLISHING_DATE_ROLE_OUT_OF_PRINT,
    PUBLISHING_DATE_ROLE_PREORDER_EMBARGO,
    PUBLISHING_DATE_ROLE_PUBLICATION,
    SALES_RESTRICTION_TYPE_RETAILER_EXCLUSIVE,
    SALES_RIGHTS_TYPE_EXCLUSIVE,
    WORLD_REGION,
)
from ..onix_utils import format_date, format_partial_date, is_present
from ..xml_builder import add_comment, add_dictionary_comment, add_element

logger = logging.getLogger(__name__)


def process_publishing_detail(new_product, product, options):
    """Process publishing detail section.

    The container is always opened; the caller prunes it when none of the
    sections below had anything to say.
    """
    publishing_detail = add_element(new_product, 'PublishingDetail')

    process_publisher_info(publishing_detail, product, options)
    process_publishing_status(publishing_detail, product, options)
    process_territorial_rights(publishing_detail, product, options)
    if product.sale_restricted:
        process_sale_restrictions(publishing_detail, product, options)

    return publishing_detail


def process_publisher_info(publishing_detail, product, options):
    """Process imprint, publisher and city of publication"""
    if is_present(product.imprint_name):
        imprint = add_element(publishing_detail, 'Imprint')
        add_comment(imprint, 'Imprint name', options, kind='publisher_info')
        add_element(imprint, 'ImprintName', product.imprint_name.strip())

    if is_present(product.publisher_name):
        publisher = add_element(publishing_detail, 'Publisher')
        add_comment(publisher, f"Always {DEFAULT_PUBLISHER_ROLE} - main publisher", options, kind='publisher_info')
        add_element(publisher, 'PublishingRole', DEFAULT_PUBLISHER_ROLE)
        if product.publisher_id is not None:
            identifier = add_element(publisher, 'PublisherIdentifier')
            add_element(identifier, 'PublisherIDType', PUBLISHER_ID_TYPE_PROPRIETARY)
            add_element(identifier, 'IDTypeName', PUBLISHER_ID_TYPE_NAME)
            add_element(identifier, 'IDValue', product.publisher_id)
        add_element(publisher, 'PublisherName', product.publisher_name.strip())

    if is_present(product.city_of_publication):
        add_element(publishing_detail, 'CityOfPublication', product.city_of_publication.strip())


def process_publishing_status(publishing_detail, product, options):
    """Process publishing status and the publication, embargo and out-of-print dates"""
    if is_present(product.publishing_status_onix_code):
        add_dictionary_comment(publishing_detail, 'Publishing status', CodeList.PUBLISHING_STATUS, options,
                               kind='publishing_status')
        add_element(publishing_detail, 'PublishingStatus', product.publishing_status_onix_code)

    date, format_code = format_partial_date(product.publication_year, product.publication_month,
                                            product.publication_day)
    if date:
        publishing_date = _add_publishing_date(publishing_detail, PUBLISHING_DATE_ROLE_PUBLICATION,
                                               'Publication date', date, format_code, options)
        add_dictionary_comment(publishing_date, 'Date format', CodeList.DATE_FORMAT, options,
                               kind='publishing_status', indent=6)

    if product.distribution_start is not None:
        _add_publishing_date(publishing_detail, PUBLISHING_DATE_ROLE_PREORDER_EMBARGO,
                             'First day orders are accepted', format_date(product.distribution_start),
                             DATE_FORMAT_YYYYMMDD, options)

    if product.epub_sale_restricted_to is not None and not product.epub_sale_not_restricted:
        _add_publishing_date(publishing_detail, PUBLISHING_DATE_ROLE_OUT_OF_PRINT,
                             'Sale ends on this day', format_date(product.epub_sale_restricted_to),
                             DATE_FORMAT_YYYYMMDD, options)


def _add_publishing_date(publishing_detail, role, description, date, format_code, options):
    publishing_date = add_element(publishing_detail, 'PublishingDate')
    add_comment(publishing_date, f"{role} - {description}", options, kind='publishing_status')
    add_element(publishing_date, 'PublishingDateRole', role)
    add_element(publishing_date, 'DateFormat', format_code)
    add_element(publishing_date, 'Date', date)
    return publishing_date


def process_territorial_rights(publishing_detail, product, options):
    """Process sales rights; an empty country list means worldwide"""
    countries = product.sales_rights_countries
    if countries is None:
        return

    sales_rights = add_element(publishing_detail, 'SalesRights')
    add_comment(sales_rights, f"Always {SALES_RIGHTS_TYPE_EXCLUSIVE} - for sale in the listed territory", options,
                kind='territorial_rights')
    add_element(sales_rights, 'SalesRightsType', SALES_RIGHTS_TYPE_EXCLUSIVE)
    territory = add_element(sales_rights, 'Territory')
    codes = [code.strip().upper() for code in countries if is_present(code)]
    if codes:
        add_element(territory, 'CountriesIncluded', ' '.join(codes))
    else:
        add_element(territory, 'RegionsIncluded', WORLD_REGION)


def process_sale_restrictions(publishing_detail, product, options):
    """Process retailer exclusivity"""
    restriction = add_element(publishing_detail, 'SalesRestriction')
    add_comment(restriction, f"Always {SALES_RESTRICTION_TYPE_RETAILER_EXCLUSIVE} - designated retailer only",
                options, kind='sale_restrictions')
    add_element(restriction, 'SalesRestrictionType', SALES_RESTRICTION_TYPE_RETAILER_EXCLUSIVE)

    if is_present(product.sale_restricted_for):
        outlet = add_element(restriction, 'SalesOutlet')
        add_element(outlet, 'SalesOutletName', product.sale_restricted_for.strip())

    if product.sale_restricted_to is not None:
        add_comment(restriction, f"Restriction ends {product.sale_restricted_to:%d.%m.%Y}", options,
                    kind='sale_restrictions')
        add_element(restriction, 'EndDate', format_date(product.sale_restricted_to))
