"""Subject processing module"""
import logging

from ..onix_constants import (
    KEYWORDS_SEPARATOR,
    SUBJECT_SCHEME_KEYWORDS,
    SUBJECT_SCHEME_PROPRIETARY,
    SUBJECT_SCHEME_THEMA,
    THEMA_QUALIFIER_SCHEMES,
)
from ..onix_utils import is_present
from ..xml_builder import add_comment, add_element

logger = logging.getLogger(__name__)


def thema_scheme_for(code):
    """Thema qualifiers start with a digit that selects their scheme"""
    return THEMA_QUALIFIER_SCHEMES.get(code[:1], SUBJECT_SCHEME_THEMA)


def process_subjects(descriptive_detail, product, options):
    """Process Thema codes, publisher categories and keywords"""
    process_thema_subjects(descriptive_detail, product, options)
    process_publisher_categories(descriptive_detail, product, options)
    process_keywords(descriptive_detail, product, options)


def process_thema_subjects(descriptive_detail, product, options):
    main_subject_written = False
    for code in product.thema_codes:
        if not is_present(code):
            continue
        code = code.strip()
        scheme = thema_scheme_for(code)
        subject = add_element(descriptive_detail, 'Subject')
        if scheme == SUBJECT_SCHEME_THEMA and not main_subject_written:
            add_element(subject, 'MainSubject')
            main_subject_written = True
        add_comment(subject, 'Thema subject category' if scheme == SUBJECT_SCHEME_THEMA else 'Thema qualifier',
                    options, kind='subjects')
        add_element(subject, 'SubjectSchemeIdentifier', scheme)
        add_element(subject, 'SubjectCode', code)


def process_publisher_categories(descriptive_detail, product, options):
    for category in product.publisher_product_categories:
        subject = add_element(descriptive_detail, 'Subject')
        add_comment(subject, "Publisher's own category", options, kind='subjects')
        add_element(subject, 'SubjectSchemeIdentifier', SUBJECT_SCHEME_PROPRIETARY)
        if is_present(product.publisher_name):
            add_element(subject, 'SubjectSchemeName', product.publisher_name.strip())
        add_element(subject, 'SubjectCode', category.id)
        add_element(subject, 'SubjectHeadingText', category.name)


def process_keywords(descriptive_detail, product, options):
    """One keyword Subject per language, languages in sorted order"""
    for language in sorted(product.keywords):
        keywords = [keyword.strip() for keyword in product.keywords[language] if is_present(keyword)]
        if not keywords:
            continue
        subject = add_element(descriptive_detail, 'Subject')
        add_comment(subject, f"Keywords ({language})", options, kind='subjects')
        add_element(subject, 'SubjectSchemeIdentifier', SUBJECT_SCHEME_KEYWORDS)
        add_element(subject, 'SubjectHeadingText', KEYWORDS_SEPARATOR.join(keywords),
                    attributes={'language': language})
