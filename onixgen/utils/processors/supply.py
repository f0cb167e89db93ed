"""Supply detail processing module"""
import logging

from ..codelists import CodeList
from ..onix_constants import (
    DEFAULT_PRICE_TYPE,
    DEFAULT_STOCK_PROXIMITY,
    DEFAULT_SUPPLIER_ROLE,
    POSITION_ON_PRODUCT_UNKNOWN,
    PRICE_DATE_ROLE_FROM,
    DATE_FORMAT_YYYYMMDD,
    SUPPLIER_ID_TYPE_NAME,
    SUPPLIER_ID_TYPE_PROPRIETARY,
    TAX_TYPE_VAT,
)
from ..onix_utils import format_date, format_number, format_price, is_present, strip_separators
from ..xml_builder import add_comment, add_dictionary_comment, add_element

logger = logging.getLogger(__name__)


def process_product_supply(new_product, product, options):
    """Process product supply section"""
    if product.skip_product_supply or not product.product_availabilities:
        return None

    product_supply = add_element(new_product, 'ProductSupply')
    for availability in product.product_availabilities:
        process_supply_detail(product_supply, product, availability, options)

    return product_supply


def process_supply_detail(product_supply, product, availability, options):
    """Process a single supplier with its stock and prices"""
    supply_detail = add_element(product_supply, 'SupplyDetail')
    process_supplier(supply_detail, availability, options)

    if is_present(availability.product_availability_onix_code):
        add_dictionary_comment(supply_detail, 'Availability', CodeList.PRODUCT_AVAILABILITY, options,
                               kind='supply')
        add_element(supply_detail, 'ProductAvailability', availability.product_availability_onix_code)

    stock_info = availability.stock_info
    if stock_info is not None:
        stock = add_element(supply_detail, 'Stock')
        add_element(stock, 'OnHand', stock_info.on_hand)
        add_dictionary_comment(stock, 'Stock proximity', CodeList.STOCK_PROXIMITY, options, kind='supply', indent=6)
        proximity = stock_info.proximity_onix_code
        add_element(stock, 'Proximity', proximity if is_present(proximity) else DEFAULT_STOCK_PROXIMITY)

    if product.pack_quantity is not None:
        add_comment(supply_detail, 'Number of copies in a pack', options, kind='supply')
        add_element(supply_detail, 'PackQuantity', product.pack_quantity)

    for price_info in availability.price_infos:
        process_price(supply_detail, product, price_info, options)

    return supply_detail


def process_supplier(supply_detail, availability, options):
    supplier_data = availability.supplier
    supplier = add_element(supply_detail, 'Supplier')
    add_dictionary_comment(supplier, 'Supplier role', CodeList.SUPPLIER_ROLE, options, kind='supply', indent=6)
    role = availability.supplier_role_onix_code
    add_element(supplier, 'SupplierRole', role if is_present(role) else DEFAULT_SUPPLIER_ROLE)

    if is_present(supplier_data.nip):
        identifier = add_element(supplier, 'SupplierIdentifier')
        add_comment(identifier, 'Suppliers are identified by their tax number', options, kind='supply')
        add_element(identifier, 'SupplierIDType', SUPPLIER_ID_TYPE_PROPRIETARY)
        add_element(identifier, 'IDTypeName', SUPPLIER_ID_TYPE_NAME)
        add_element(identifier, 'IDValue', strip_separators(supplier_data.nip))

    add_element(supplier, 'SupplierName', supplier_data.name)
    if is_present(supplier_data.phone):
        add_element(supplier, 'TelephoneNumber', supplier_data.phone.strip())
    if is_present(supplier_data.email):
        add_element(supplier, 'EmailAddress', supplier_data.email.strip())
    for link in supplier_data.websites:
        if is_present(link):
            website = add_element(supplier, 'Website')
            add_element(website, 'WebsiteLink', link.strip())

    return supplier


def process_price(supply_detail, product, price_info, options):
    """Process a price with its VAT and effective date"""
    price = add_element(supply_detail, 'Price')
    add_dictionary_comment(price, 'Price type', CodeList.PRICE_TYPE, options, kind='supply', indent=6)
    price_type = price_info.price_type_onix_code
    add_element(price, 'PriceType', price_type if is_present(price_type) else DEFAULT_PRICE_TYPE)

    if price_info.minimum_order_quantity is not None:
        add_element(price, 'MinimumOrderQuantity', price_info.minimum_order_quantity)

    add_element(price, 'PriceAmount', format_price(price_info.amount))

    if price_info.vat is not None:
        tax = add_element(price, 'Tax')
        add_comment(tax, 'VAT', options, kind='supply')
        add_element(tax, 'TaxType', TAX_TYPE_VAT)
        add_element(tax, 'TaxRatePercent', format_number(price_info.vat))

    add_element(price, 'CurrencyCode', price_info.currency_code)

    if price_info.effective_from is not None:
        price_date = add_element(price, 'PriceDate')
        add_element(price_date, 'PriceDateRole', PRICE_DATE_ROLE_FROM)
        add_element(price_date, 'DateFormat', DATE_FORMAT_YYYYMMDD)
        add_element(price_date, 'Date', format_date(price_info.effective_from))

    if is_present(product.price_printed_on_product_onix_code):
        add_dictionary_comment(price, 'Price printed on the product?', CodeList.PRICE_PRINTED_ON_PRODUCT, options,
                               kind='supply', indent=6)
        add_element(price, 'PrintedOnProduct', product.price_printed_on_product_onix_code)
        add_comment(price, f"Always {POSITION_ON_PRODUCT_UNKNOWN} - unknown or unspecified", options, kind='supply')
        add_element(price, 'PositionOnProduct', POSITION_ON_PRODUCT_UNKNOWN)

    return price
