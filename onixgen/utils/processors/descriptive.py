"""Descriptive detail processing module"""
import logging

from ..codelists import CodeList
from ..exceptions import ConfigurationError
from ..onix_constants import (
    AUDIENCE_RANGE_PRECISION_FROM,
    AUDIENCE_RANGE_PRECISION_TO,
    AUDIENCE_RANGE_QUALIFIER_READING_AGE,
    DEFAULT_PRODUCT_COMPOSITION,
    DIALECT_301,
    DIALECT_302,
    EPUB_USAGE_STATUS_LIMITED,
    EPUB_USAGE_TYPE_PREVIEW,
    EPUB_USAGE_UNIT_CHARACTERS,
    EPUB_USAGE_UNIT_PERCENTAGE,
    EXTENT_TYPE_DURATION,
    EXTENT_TYPE_FILE_SIZE,
    EXTENT_TYPE_PAGE_COUNT,
    EXTENT_UNIT_MEGABYTES,
    EXTENT_UNIT_MINUTES,
    EXTENT_UNIT_PAGES,
    HEIGHT_UNIT,
    MEASURE_TYPE_HEIGHT,
    MEASURE_TYPE_THICKNESS,
    MEASURE_TYPE_WEIGHT,
    MEASURE_TYPE_WIDTH,
    PRODUCT_FORM_301_TRANSLATIONS,
    THICKNESS_UNIT,
    WEIGHT_UNIT,
    WIDTH_UNIT,
)
from ..onix_utils import format_number, is_present
from ..xml_builder import add_comment, add_dictionary_comment, add_element
from .contributors import process_contributors
from .subjects import process_subjects
from .titles import process_series_memberships, process_titles

logger = logging.getLogger(__name__)


def process_descriptive_detail(new_product, product, options):
    """Process descriptive detail section"""
    descriptive_detail = add_element(new_product, 'DescriptiveDetail')

    # Order of the sections below is fixed by the ONIX schema
    process_product_form(descriptive_detail, product, options)
    process_epub_details(descriptive_detail, product, options)
    process_measurement(descriptive_detail, product, options)
    process_series_memberships(descriptive_detail, product, options)
    process_titles(descriptive_detail, product, options)
    process_contributors(descriptive_detail, product, options)
    process_edition(descriptive_detail, product, options)
    process_languages(descriptive_detail, product, options)
    process_extent(descriptive_detail, product, options)
    process_subjects(descriptive_detail, product, options)
    process_audience_range(descriptive_detail, product, options)

    return descriptive_detail


def uses_302_form_pair(product, options):
    """Whether the 3.0.2 specific ProductForm/ProductFormDetail pair applies"""
    return options.dialect == DIALECT_302 and is_present(product.product_form_onix_code_302)


def process_product_form(descriptive_detail, product, options):
    """Process product composition and form, placed according to the dialect"""
    add_comment(descriptive_detail, 'Always 00 - single-item retail product', options, kind='product_form')
    add_element(descriptive_detail, 'ProductComposition', DEFAULT_PRODUCT_COMPOSITION)

    if options.dialect == DIALECT_301:
        if is_present(product.product_form_onix_code):
            code = product.product_form_onix_code.strip()
            # DG and DH were replaced by EA and EC in later code list issues
            code = PRODUCT_FORM_301_TRANSLATIONS.get(code, code)
            add_dictionary_comment(descriptive_detail, 'Product form', CodeList.PRODUCT_FORM, options,
                                   kind='product_form')
            add_element(descriptive_detail, 'ProductForm', code)
    elif options.dialect == DIALECT_302:
        if uses_302_form_pair(product, options):
            add_dictionary_comment(descriptive_detail, 'Product form', CodeList.PRODUCT_FORM, options,
                                   kind='product_form')
            add_element(descriptive_detail, 'ProductForm', product.product_form_onix_code_302.strip())
            if is_present(product.product_form_detail_onix_code_302):
                add_element(descriptive_detail, 'ProductFormDetail', product.product_form_detail_onix_code_302.strip())
        elif is_present(product.product_form_onix_code):
            add_element(descriptive_detail, 'ProductForm', product.product_form_onix_code.strip())
    else:
        raise ConfigurationError(f"Unsupported ONIX dialect: {options.dialect!r}", option="dialect")


def process_epub_details(descriptive_detail, product, options):
    """Process e-book form details, protection and preview constraints"""
    if is_present(product.product_form_detail_onix_codes) and not uses_302_form_pair(product, options):
        add_dictionary_comment(descriptive_detail, 'Available file formats', CodeList.PRODUCT_FORM_DETAIL, options,
                               kind='epub_details')
        for code in product.product_form_detail_onix_codes:
            add_element(descriptive_detail, 'ProductFormDetail', code)

    if not product.digital:
        return

    if is_present(product.epub_technical_protection_onix_code):
        add_dictionary_comment(descriptive_detail, 'Technical protection', CodeList.EPUB_TECHNICAL_PROTECTION,
                               options, kind='epub_details')
        add_element(descriptive_detail, 'EpubTechnicalProtection', product.epub_technical_protection_onix_code)

    status = product.epub_preview_usage_status_onix_code
    if not is_present(status):
        return

    constraint = add_element(descriptive_detail, 'EpubUsageConstraint')
    add_comment(constraint, 'Constraint type, always preview', options, kind='epub_details')
    add_element(constraint, 'EpubUsageType', EPUB_USAGE_TYPE_PREVIEW)
    add_dictionary_comment(constraint, 'Usage status', CodeList.EPUB_USAGE_STATUS, options,
                           kind='epub_details', indent=6)
    add_element(constraint, 'EpubUsageStatus', status)

    if status == EPUB_USAGE_STATUS_LIMITED:
        unit = product.epub_preview_unit_onix_code
        limit = add_element(constraint, 'EpubUsageLimit')
        if unit == EPUB_USAGE_UNIT_PERCENTAGE and product.epub_preview_percentage_limit is not None:
            add_element(limit, 'Quantity', product.epub_preview_percentage_limit)
        elif unit == EPUB_USAGE_UNIT_CHARACTERS and product.epub_preview_characters_limit is not None:
            add_element(limit, 'Quantity', product.epub_preview_characters_limit)
        add_dictionary_comment(limit, 'Limit unit', CodeList.EPUB_USAGE_UNIT, options,
                               kind='epub_details', indent=8)
        if is_present(unit):
            add_element(limit, 'EpubUsageUnit', unit)


def process_measurement(descriptive_detail, product, options):
    """Process product dimensions and map scale"""
    measures = [
        (product.height, MEASURE_TYPE_HEIGHT, HEIGHT_UNIT, 'Height'),
        (product.width, MEASURE_TYPE_WIDTH, WIDTH_UNIT, 'Width'),
        (product.thickness, MEASURE_TYPE_THICKNESS, THICKNESS_UNIT, 'Thickness'),
        (product.weight, MEASURE_TYPE_WEIGHT, WEIGHT_UNIT, 'Weight'),
    ]
    for value, measure_type, unit, label in measures:
        if value is None:
            continue
        measure = add_element(descriptive_detail, 'Measure')
        add_comment(measure, f"{label}: {format_number(value)}{unit}", options, kind='measurement')
        add_element(measure, 'MeasureType', measure_type)
        add_element(measure, 'Measurement', format_number(value))
        add_element(measure, 'MeasureUnitCode', unit)

    if product.kind_of_map and product.map_scale is not None:
        add_comment(descriptive_detail, 'Map scale, maps only', options, kind='measurement')
        add_element(descriptive_detail, 'MapScale', product.map_scale)


def process_edition(descriptive_detail, product, options):
    if is_present(product.edition_statement):
        add_comment(descriptive_detail, 'Edition statement', options, kind='edition')
        add_element(descriptive_detail, 'EditionStatement', product.edition_statement.strip())


def process_languages(descriptive_detail, product, options):
    if not is_present(product.languages):
        return
    add_dictionary_comment(descriptive_detail, 'Language role', CodeList.LANGUAGE_ROLE, options, kind='languages')
    for language in product.languages:
        language_element = add_element(descriptive_detail, 'Language')
        add_element(language_element, 'LanguageRole', language.role_onix_code)
        add_element(language_element, 'LanguageCode', language.language_onix_code)


def process_extent(descriptive_detail, product, options):
    """Process file size, duration, page count and illustrations"""
    if product.digital and product.file_size is not None:
        _add_extent(descriptive_detail, EXTENT_TYPE_FILE_SIZE, format_number(product.file_size),
                    EXTENT_UNIT_MEGABYTES, 'File size in MB, digital products only', options)

    if product.kind_of_audio and product.duration is not None:
        _add_extent(descriptive_detail, EXTENT_TYPE_DURATION, product.duration,
                    EXTENT_UNIT_MINUTES, 'Duration in minutes, audio products only', options)

    is_book_like = product.kind_of_book or product.kind_of_ebook
    if is_book_like and product.number_of_pages is not None:
        _add_extent(descriptive_detail, EXTENT_TYPE_PAGE_COUNT, product.number_of_pages,
                    EXTENT_UNIT_PAGES, 'Page count, books only', options)

    if is_book_like and product.number_of_illustrations is not None:
        add_comment(descriptive_detail, 'Number of illustrations, books only', options, kind='extent')
        add_element(descriptive_detail, 'NumberOfIllustrations', product.number_of_illustrations)


def _add_extent(descriptive_detail, extent_type, value, unit, description, options):
    extent = add_element(descriptive_detail, 'Extent')
    add_comment(extent, description, options, kind='extent')
    add_element(extent, 'ExtentType', extent_type)
    add_element(extent, 'ExtentValue', value)
    add_element(extent, 'ExtentUnit', unit)
    return extent


def process_audience_range(descriptive_detail, product, options):
    """Process reading age bounds, each one optional"""
    bounds = [
        (product.audience_age_from, AUDIENCE_RANGE_PRECISION_FROM, 'from'),
        (product.audience_age_to, AUDIENCE_RANGE_PRECISION_TO, 'to'),
    ]
    for age, precision, label in bounds:
        if age is None:
            continue
        audience_range = add_element(descriptive_detail, 'AudienceRange')
        add_comment(audience_range, f"Reading age, always {AUDIENCE_RANGE_QUALIFIER_READING_AGE}", options,
                    kind='audience_range')
        add_element(audience_range, 'AudienceRangeQualifier', AUDIENCE_RANGE_QUALIFIER_READING_AGE)
        add_comment(audience_range, f"Age {label} {age}", options, kind='audience_range')
        add_element(audience_range, 'AudienceRangePrecision', precision)
        add_element(audience_range, 'AudienceRangeValue', age)
