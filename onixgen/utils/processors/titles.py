"""Title and collection processing module"""
import logging

from ..onix_constants import (
    COLLECTION_ID_TYPE_ISSN,
    COLLECTION_TYPE_PUBLISHER,
    ENGLISH_LANGUAGE_CODE,
    TITLE_ELEMENT_LEVEL_COLLECTION,
    TITLE_ELEMENT_LEVEL_PRODUCT,
    TITLE_TYPE_DISTINCTIVE,
    TITLE_TYPE_DISTRIBUTORS,
    TITLE_TYPE_ORIGINAL,
    TITLE_TYPE_OTHER_LANGUAGE,
)
from ..onix_utils import is_present
from ..xml_builder import add_comment, add_element

logger = logging.getLogger(__name__)


def process_series_memberships(descriptive_detail, product, options):
    """Process publisher series, one Collection per membership"""
    for membership in product.series_memberships:
        collection = add_element(descriptive_detail, 'Collection')
        add_comment(collection, f"Always {COLLECTION_TYPE_PUBLISHER} - publisher collection", options,
                    kind='series_memberships')
        add_element(collection, 'CollectionType', COLLECTION_TYPE_PUBLISHER)

        if is_present(membership.issn):
            identifier = add_element(collection, 'CollectionIdentifier')
            add_element(identifier, 'CollectionIDType', COLLECTION_ID_TYPE_ISSN)
            add_element(identifier, 'IDValue', membership.issn.strip())

        title_detail = add_element(collection, 'TitleDetail')
        add_element(title_detail, 'TitleType', TITLE_TYPE_DISTINCTIVE)
        title_element = add_element(title_detail, 'TitleElement')
        add_element(title_element, 'TitleElementLevel', TITLE_ELEMENT_LEVEL_COLLECTION)
        if is_present(membership.number_within_series):
            add_element(title_element, 'PartNumber', membership.number_within_series.strip())
        add_element(title_element, 'TitleText', membership.series_name.strip())


def process_titles(descriptive_detail, product, options):
    """Process main, English, original and trade titles.

    Each TitleDetail is independent and only appears when its source text is
    non-blank. Main and trade titles carry the working language.
    """
    language = options.language_code if is_present(options.language_code) else None

    if is_present(product.title):
        title_detail = _add_title_detail(descriptive_detail, TITLE_TYPE_DISTINCTIVE,
                                         'Full product title', options)
        if is_present(product.collection_name):
            collection_element = add_element(title_detail, 'TitleElement')
            add_comment(collection_element, f"Collection level title - {TITLE_ELEMENT_LEVEL_COLLECTION}",
                        options, kind='titles')
            add_element(collection_element, 'TitleElementLevel', TITLE_ELEMENT_LEVEL_COLLECTION)
            if is_present(product.collection_part):
                add_element(collection_element, 'PartNumber', product.collection_part.strip())
            add_element(collection_element, 'TitleText', product.collection_name.strip(),
                        attributes={'language': language})

        title_element = add_element(title_detail, 'TitleElement')
        add_comment(title_element, f"Product level title - {TITLE_ELEMENT_LEVEL_PRODUCT}", options, kind='titles')
        add_element(title_element, 'TitleElementLevel', TITLE_ELEMENT_LEVEL_PRODUCT)
        if is_present(product.title_part):
            add_element(title_element, 'PartNumber', product.title_part.strip())
        add_element(title_element, 'TitleText', product.title.strip(), attributes={'language': language})
        if is_present(product.subtitle):
            add_element(title_element, 'Subtitle', product.subtitle.strip(), attributes={'language': language})

    if is_present(product.english_title):
        _add_simple_title(descriptive_detail, TITLE_TYPE_OTHER_LANGUAGE, product.english_title,
                          'Title in English', options, language=ENGLISH_LANGUAGE_CODE)

    if is_present(product.original_title):
        _add_simple_title(descriptive_detail, TITLE_TYPE_ORIGINAL, product.original_title,
                          'Title in the original language', options)

    if is_present(product.trade_title):
        _add_simple_title(descriptive_detail, TITLE_TYPE_DISTRIBUTORS, product.trade_title,
                          "Publisher's trade title", options, language=language)


def _add_title_detail(descriptive_detail, title_type, description, options):
    title_detail = add_element(descriptive_detail, 'TitleDetail')
    add_comment(title_detail, f"{description} - {title_type}", options, kind='titles')
    add_element(title_detail, 'TitleType', title_type)
    return title_detail


def _add_simple_title(descriptive_detail, title_type, text, description, options, language=None):
    title_detail = _add_title_detail(descriptive_detail, title_type, description, options)
    title_element = add_element(title_detail, 'TitleElement')
    add_element(title_element, 'TitleElementLevel', TITLE_ELEMENT_LEVEL_PRODUCT)
    add_element(title_element, 'TitleText', text.strip(), attributes={'language': language})
    return title_detail
